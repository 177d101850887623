"""Prompt builder: fills a category template from resolved attributes.

The object name goes in parentheses after the technical description so the
generator anchors on the physical description first.
"""

from __future__ import annotations

import logging
import re

from astroprompt.engine.derivation import ResolvedAttributes
from astroprompt.engine.lookup import DEFAULT_STRUCTURE, DEFAULT_SURFACE
from astroprompt.engine.templates import SLOT_NAMES, PromptTemplate, get_template, has_slot
from astroprompt.models.compilation import FeatureSource
from astroprompt.models.records import ObjectRecord

logger = logging.getLogger(__name__)

_MARKER_RE = re.compile(r"\{([A-Za-z_]+)\}")
_SPACE_RE = re.compile(r"\s+")
_ARTICLE_RE = re.compile(r"\b([Aa]) (?=[AEIOUaeiou])")

_FALLBACK_COLOR = "natural astronomical colors"
_OVERRIDE_TIERS = (FeatureSource.EXPLICIT, FeatureSource.FAMOUS)


def slot_values(record: ObjectRecord, attrs: ResolvedAttributes) -> dict[str, str]:
    star = attrs.star
    return {
        "name": record.name,
        "temperature": star.temperature,
        "sub_type": attrs.sub_type,
        "galaxy_type": attrs.galaxy_type or "spiral",
        "nebula_type": attrs.nebula_type or "emission",
        "planet_type": attrs.planet_type or "planet",
        "structure_details": attrs.structure_details or DEFAULT_STRUCTURE,
        "surface_features": attrs.surface_features or DEFAULT_SURFACE,
        "color": attrs.color or _FALLBACK_COLOR,
        "granulation": star.granulation,
        "starspots": star.starspots,
        "prominences": star.prominences,
        "frame_fill": str(star.frame_fill),
        "primary_color": star.primary_color,
        "limb_color": star.limb_color,
        "accent_color": star.accent_color,
        "wavelength": star.wavelength,
    }


def fill(pattern: str, values: dict[str, str], *, section: str = "") -> str:
    """Substitute ``{marker}`` slots; unknown markers are dropped and logged."""

    def _sub(match: re.Match[str]) -> str:
        key = match.group(1)
        if key in SLOT_NAMES and key in values:
            return values[key]
        logger.warning("Unknown placeholder {%s} removed from %s", key, section or "template")
        return ""

    return _MARKER_RE.sub(_sub, pattern)


def tidy(text: str, *, list_like: bool = True) -> str:
    """Collapse whitespace and drop empty comma-separated items."""
    text = _SPACE_RE.sub(" ", text).strip()
    if not list_like:
        return text
    items = [item.strip() for item in text.split(",")]
    return ", ".join(item for item in items if item)


def fix_articles(text: str) -> str:
    """Use "an" before a vowel in a filled description."""
    return _ARTICLE_RE.sub(r"\1n ", text)


def _visual_section(template: PromptTemplate, record: ObjectRecord, attrs: ResolvedAttributes, values: dict[str, str]) -> str:
    pattern = record.visual_characteristics or template.visual_characteristics
    text = fill(pattern, values, section="visual characteristics")
    if (
        attrs.structure_details
        and attrs.structure_source in _OVERRIDE_TIERS
        and not has_slot(pattern, "structure_details")
    ):
        text = f"{text}, {attrs.structure_details}"
    return tidy(text)


def _color_section(template: PromptTemplate, attrs: ResolvedAttributes, values: dict[str, str]) -> str:
    pattern = template.color_description
    if attrs.color and attrs.color_source in _OVERRIDE_TIERS and not has_slot(pattern, "color"):
        return tidy(attrs.color)
    return tidy(fill(pattern, values, section="colors"))


def build_prompt(record: ObjectRecord, attrs: ResolvedAttributes) -> str:
    """Render the full positive prompt for one object."""
    template = get_template(attrs.category)
    values = slot_values(record, attrs)

    description = fix_articles(
        tidy(fill(template.object_description, values, section="object description"), list_like=False)
    )
    visual = _visual_section(template, record, attrs, values)
    colors = _color_section(template, attrs, values)
    medium = tidy(fill(template.medium, values, section="medium"), list_like=False)

    sections = [
        f"{template.realism} of {description}. ({record.name})",
        f"Visual characteristics: {visual}",
        f"Style: {template.style_reference}",
        f"Colors: {colors}",
        f"Lighting: {template.lighting}",
        f"Quality: {template.quality}",
        f"Medium: {medium}",
    ]
    return "\n\n".join(sections).strip()
