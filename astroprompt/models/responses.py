"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    templates_registered: int = 0


class NegativePromptResponse(BaseModel):
    category: str
    galaxy_type: str | None = None
    negative_prompt: str


class SpectralTypeResponse(BaseModel):
    code: str
    canonical: str
    spectral_class: str
    subclass: float | None = None
    luminosity_class: str | None = None
    luminosity_family: str | None = None
    peculiarities: list[str] = Field(default_factory=list)
    is_supergiant: bool = False
    is_giant: bool = False
    star_subtype: str = "star"


class ClearLogsResponse(BaseModel):
    cleared: int = 0
