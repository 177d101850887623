"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from astroprompt.engine.templates import PROMPT_TEMPLATES
from astroprompt.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        templates_registered=len(PROMPT_TEMPLATES),
    )
