"""Master API router: mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from astroprompt.api import compilation, health, logs, reference

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(compilation.router)
api_router.include_router(reference.router)
api_router.include_router(logs.router)
