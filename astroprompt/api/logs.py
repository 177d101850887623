"""Generation log queries: /api/logs."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from astroprompt.audit.store import GenerationLogStore
from astroprompt.dependencies import get_store
from astroprompt.models.compilation import GenerationLogEntry, GenerationStats
from astroprompt.models.responses import ClearLogsResponse

router = APIRouter(prefix="/logs")


@router.get("", response_model=list[GenerationLogEntry])
def list_logs(
    category: str | None = None,
    min_confidence: float | None = Query(None, ge=0.0, le=1.0),
    has_warnings: bool | None = None,
    limit: int | None = Query(100, ge=1),
    store: GenerationLogStore = Depends(get_store),
) -> list[GenerationLogEntry]:
    """Most recent entries first."""
    return store.get_logs(
        category=category,
        min_confidence=min_confidence,
        has_warnings=has_warnings,
        limit=limit,
    )


@router.get("/stats", response_model=GenerationStats)
def log_stats(store: GenerationLogStore = Depends(get_store)) -> GenerationStats:
    return store.stats()


@router.delete("", response_model=ClearLogsResponse)
def clear_logs(store: GenerationLogStore = Depends(get_store)) -> ClearLogsResponse:
    return ClearLogsResponse(cleared=store.clear())
