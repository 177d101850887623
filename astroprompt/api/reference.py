"""Reference lookups: validation, negative prompts, spectral parsing."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from astroprompt.engine.negative import get_negative_prompt
from astroprompt.engine.spectral import describe_star_subtype, parse_spectral_type
from astroprompt.engine.validation import validate_prompt
from astroprompt.models.compilation import ValidationResult
from astroprompt.models.records import ObjectCategory
from astroprompt.models.requests import ValidateRequest
from astroprompt.models.responses import NegativePromptResponse, SpectralTypeResponse

router = APIRouter()


@router.post("/validate", response_model=ValidationResult)
async def validate(req: ValidateRequest) -> ValidationResult:
    return validate_prompt(req.prompt)


@router.get("/negative-prompt", response_model=NegativePromptResponse)
async def negative_prompt(category: str = "Unknown", galaxy_type: str | None = None) -> NegativePromptResponse:
    resolved = ObjectCategory.from_label(category) or ObjectCategory.UNKNOWN
    return NegativePromptResponse(
        category=resolved.value,
        galaxy_type=galaxy_type,
        negative_prompt=get_negative_prompt(resolved, galaxy_type),
    )


@router.get("/spectral/{code}", response_model=SpectralTypeResponse)
async def spectral(code: str) -> SpectralTypeResponse:
    parsed = parse_spectral_type(code)
    if parsed is None:
        raise HTTPException(status_code=404, detail=f"Unrecognized spectral type: {code}")

    family = parsed.luminosity_family
    return SpectralTypeResponse(
        code=code,
        canonical=parsed.canonical,
        spectral_class=parsed.spectral_class.value,
        subclass=parsed.subclass,
        luminosity_class=parsed.luminosity_class,
        luminosity_family=family.value if family else None,
        peculiarities=list(parsed.peculiarities),
        is_supergiant=parsed.is_supergiant,
        is_giant=parsed.is_giant,
        star_subtype=describe_star_subtype(parsed),
    )
