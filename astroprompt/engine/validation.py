"""Prompt validator: flags phrases and omissions known to cause rendering failures."""

from __future__ import annotations

import re

from astroprompt.models.compilation import ValidationResult

# Phrases that push generators toward diagrams, eclipses or "artistic" output
TRIGGER_WORDS: dict[str, tuple[str, ...]] = {
    "diagram": (
        "radiation beams", "magnetic field lines", "field distortions",
        "synchrotron", "synchrotron emission", "emanating from poles",
        "composite imagery", "visualization",
    ),
    "eclipse": ("limb darkening", "coronal glow", "corona"),
    "artistic": (
        "stunning", "beautiful", "amazing", "breathtaking",
        "museum-quality", "award-winning", "masterpiece",
        "astrophotography",
    ),
    "cosmic_art": ("universe inside", "cosmic", "celestial beauty"),
}

ALL_TRIGGER_WORDS: tuple[str, ...] = tuple(term for group in TRIGGER_WORDS.values() for term in group)

COMPOSITION_MARKERS = ("centered in frame", "single isolated", "% of frame")
SECTION_LABELS = ("Visual characteristics:", "Lighting:", "Medium:")

_PLACEHOLDER_RE = re.compile(r"\{[A-Za-z_]+\}")


def validate_prompt(prompt: str) -> ValidationResult:
    """Check a compiled prompt. ``valid`` iff no warnings were raised."""
    warnings: list[str] = []
    lower = prompt.lower()

    for term in ALL_TRIGGER_WORDS:
        if term in lower:
            warnings.append(f'Contains trigger word "{term}" - may cause rendering failure')

    if "photorealistic" not in lower:
        warnings.append("Missing realism statement (photorealistic)")
    if "Quality:" not in prompt and "8K" not in prompt:
        warnings.append("Missing quality specification")
    if "Style:" not in prompt and "NASA" not in prompt:
        warnings.append("Missing style reference")
    if not any(marker in lower for marker in COMPOSITION_MARKERS):
        warnings.append("Missing composition guidance (centered in frame / filling X% of frame)")
    if "Colors:" not in prompt:
        warnings.append("Missing explicit color specification")

    for label in SECTION_LABELS:
        if label not in prompt:
            warnings.append(f"Missing section {label.rstrip(':')!r}")

    unresolved = sorted(set(_PLACEHOLDER_RE.findall(prompt)))
    if unresolved:
        warnings.append(f"Unresolved placeholders: {', '.join(unresolved)}")

    return ValidationResult(valid=not warnings, warnings=warnings)
