"""Attribute derivation: resolves every template slot for one object.

Each attribute resolves with the priority explicit → known-object override
→ spectral rules (stars only) → category default, and the tier that
supplied it is recorded on ResolvedAttributes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from astroprompt.engine.config import CompilerConfig
from astroprompt.engine.lookup import (
    BLACK_HOLE_KEYWORDS,
    DEFAULT_SURFACE,
    EARTH_MASSES_PER_SOLAR_MASS,
    FAMOUS_BLACK_HOLES,
    FAMOUS_DWARF_PLANETS,
    FAMOUS_NEBULAE,
    GALAXY_COLORS,
    GALAXY_KEYWORDS,
    GALAXY_NAME_HINTS,
    GALAXY_STRUCTURE,
    MOON_COLOR,
    MOON_SURFACE,
    NEBULA_COLORS,
    NEBULA_KEYWORDS,
    NEBULA_NAME_HINTS,
    NEBULA_STRUCTURE,
    PLANET_COLORS,
    PLANET_KEYWORDS,
    PLANET_SURFACES,
    KnownObject,
    first_keyword,
    first_name_hint,
    lookup_color,
    match_known_object,
)
from astroprompt.engine.spectral import ParsedSpectralType, describe_star_subtype, parse_spectral_type
from astroprompt.engine.stellar import (
    DEFAULT_APPEARANCE,
    FLARE_FEATURES,
    FLARE_PROMINENCES,
    FLARE_STARSPOTS,
    StarAppearance,
    is_flare_star,
    spectral_features,
    star_appearance,
)
from astroprompt.models.compilation import FeatureSource
from astroprompt.models.records import ObjectCategory, ObjectRecord

logger = logging.getLogger(__name__)

C = ObjectCategory

_FAMOUS_TABLES: dict[ObjectCategory, dict[str, KnownObject]] = {
    C.NEBULA: FAMOUS_NEBULAE,
    C.SUPERNOVA_REMNANT: FAMOUS_NEBULAE,
    C.BLACK_HOLE: FAMOUS_BLACK_HOLES,
    C.DWARF_PLANET: FAMOUS_DWARF_PLANETS,
}

_SURFACE_CATEGORIES = frozenset({C.PLANET, C.EXOPLANET, C.MOON, C.DWARF_PLANET})

_FIXED_SUBTYPES: dict[ObjectCategory, str] = {
    C.SUPERNOVA_REMNANT: "supernova remnant",
    C.SUPERNOVA: "supernova remnant",
    C.GLOBULAR_CLUSTER: "globular",
    C.BROWN_DWARF: "brown dwarf",
    C.DWARF_PLANET: "dwarf planet",
    C.WHITE_DWARF: "white dwarf",
}


@dataclass
class ResolvedAttributes:
    """Resolved slot values for one object, plus the tier behind each."""

    category: ObjectCategory
    sub_type: str = ""
    galaxy_type: str | None = None
    nebula_type: str | None = None
    planet_type: str | None = None

    structure_details: str | None = None
    structure_source: FeatureSource | None = None
    surface_features: str | None = None
    surface_source: FeatureSource | None = None
    color: str | None = None  # None → template's own color text
    color_source: FeatureSource | None = None

    star: StarAppearance = DEFAULT_APPEARANCE
    spectral: ParsedSpectralType | None = None
    famous_key: str | None = None
    famous: KnownObject | None = None
    is_flare: bool = False

    derived_features: list[str] = field(default_factory=list)
    features_used: list[str] = field(default_factory=list)

    @property
    def has_famous_features(self) -> bool:
        return self.famous is not None


# == Subtypes ==


def derive_galaxy_type(name: str, description: str | None = None) -> str:
    text = f"{name} {description or ''}"
    return (
        first_keyword(text, GALAXY_KEYWORDS)
        or first_name_hint(name, GALAXY_NAME_HINTS)
        or "spiral"
    )


def derive_nebula_type(name: str, description: str | None = None) -> str:
    text = f"{name} {description or ''}"
    return (
        first_keyword(text, NEBULA_KEYWORDS)
        or first_name_hint(name, NEBULA_NAME_HINTS)
        or "emission"
    )


def derive_planet_type(name: str, description: str | None = None, mass_solar: float | None = None) -> str:
    keyword = first_keyword(f"{name} {description or ''}", PLANET_KEYWORDS)
    if keyword:
        return keyword
    if mass_solar is not None:
        earth_masses = mass_solar * EARTH_MASSES_PER_SOLAR_MASS
        if earth_masses > 50:
            return "gas giant"
        if earth_masses > 10:
            return "ice giant"
        if earth_masses > 1.5:
            return "super-earth"
        return "terrestrial"
    return "terrestrial"


def derive_black_hole_type(
    description: str | None = None,
    mass_solar: float | None = None,
    famous: KnownObject | None = None,
) -> str:
    if famous is not None and famous.size:
        return famous.size
    keyword = first_keyword(description or "", BLACK_HOLE_KEYWORDS)
    if keyword:
        return keyword
    if mass_solar is not None:
        if mass_solar > 100_000:
            return "supermassive"
        if mass_solar > 100:
            return "intermediate-mass"
        return "stellar-mass"
    return "supermassive"


def _resolve_subtype(attrs: ResolvedAttributes, record: ObjectRecord, raw_category: str) -> None:
    cat = attrs.category
    name, desc = record.name, record.description

    # Category-specific type fields are resolved even when sub_type is explicit
    if cat is C.GALAXY:
        attrs.galaxy_type = record.galaxy_type or derive_galaxy_type(name, desc)
    elif cat is C.NEBULA:
        attrs.nebula_type = record.nebula_type or derive_nebula_type(name, desc)
    elif cat is C.SUPERNOVA_REMNANT:
        attrs.nebula_type = "supernova remnant"
    elif cat in (C.PLANET, C.EXOPLANET):
        attrs.planet_type = record.planet_type or derive_planet_type(name, desc, record.mass_solar)

    if record.sub_type:
        attrs.sub_type = record.sub_type
        return

    if cat is C.STAR:
        attrs.sub_type = describe_star_subtype(attrs.spectral, desc)
    elif cat is C.GALAXY:
        attrs.sub_type = attrs.galaxy_type or "spiral"
    elif cat is C.NEBULA:
        attrs.sub_type = attrs.nebula_type or "emission"
    elif cat in (C.PLANET, C.EXOPLANET):
        attrs.sub_type = attrs.planet_type or "terrestrial"
    elif cat is C.BLACK_HOLE:
        attrs.sub_type = derive_black_hole_type(desc, record.mass_solar, attrs.famous)
    elif cat is C.STAR_CLUSTER:
        attrs.sub_type = "globular" if desc and "globular" in desc.lower() else "open"
    elif cat in _FIXED_SUBTYPES:
        attrs.sub_type = _FIXED_SUBTYPES[cat]
    else:
        attrs.sub_type = raw_category.lower()


# == Structure / surface / color ==


def _category_structure(attrs: ResolvedAttributes) -> str | None:
    if attrs.category is C.GALAXY:
        return GALAXY_STRUCTURE.get((attrs.galaxy_type or "").lower(), GALAXY_STRUCTURE["default"])
    if attrs.category is C.NEBULA:
        return NEBULA_STRUCTURE.get((attrs.nebula_type or "").lower(), NEBULA_STRUCTURE["default"])
    return None


def _resolve_structure(attrs: ResolvedAttributes, record: ObjectRecord, config: CompilerConfig) -> None:
    famous = attrs.famous
    if record.structure_details:
        attrs.structure_details = record.structure_details
        attrs.structure_source = FeatureSource.EXPLICIT
    elif famous is not None and famous.surface_features is None:
        # Known objects with surface text feed the surface slot instead
        attrs.structure_details = famous.specific_features
        attrs.structure_source = FeatureSource.FAMOUS
    else:
        default = _category_structure(attrs)
        if default:
            attrs.structure_details = default
            attrs.structure_source = FeatureSource.TEMPLATE

    visual = list(record.visual_features[: config.max_visual_features])
    if visual:
        visual_text = ", ".join(visual)
        if attrs.structure_details:
            attrs.structure_details = f"{attrs.structure_details}, {visual_text}"
        else:
            attrs.structure_details = visual_text
            attrs.structure_source = FeatureSource.EXPLICIT


def _resolve_surface(attrs: ResolvedAttributes, record: ObjectRecord) -> None:
    cat = attrs.category
    if cat not in _SURFACE_CATEGORIES:
        if record.surface_features:
            attrs.surface_features = record.surface_features
            attrs.surface_source = FeatureSource.EXPLICIT
        return

    if record.surface_features:
        attrs.surface_features = record.surface_features
        attrs.surface_source = FeatureSource.EXPLICIT
    elif attrs.famous is not None and attrs.famous.surface_features:
        attrs.surface_features = attrs.famous.surface_features
        attrs.surface_source = FeatureSource.FAMOUS
    elif cat is C.MOON:
        attrs.surface_features = MOON_SURFACE
        attrs.surface_source = FeatureSource.TEMPLATE
    else:
        key = attrs.planet_type or ("dwarf planet" if cat is C.DWARF_PLANET else "terrestrial")
        attrs.surface_features = PLANET_SURFACES.get(key.lower(), DEFAULT_SURFACE)
        attrs.surface_source = FeatureSource.TEMPLATE


def _category_color(attrs: ResolvedAttributes) -> str | None:
    cat = attrs.category
    if cat is C.GALAXY:
        return lookup_color(GALAXY_COLORS, attrs.galaxy_type)
    if cat in (C.NEBULA, C.SUPERNOVA_REMNANT):
        return lookup_color(NEBULA_COLORS, attrs.nebula_type)
    if cat in (C.PLANET, C.EXOPLANET):
        return lookup_color(PLANET_COLORS, attrs.planet_type)
    if cat is C.DWARF_PLANET:
        return PLANET_COLORS["dwarf planet"]
    if cat is C.MOON:
        return MOON_COLOR
    return None


def _resolve_color(attrs: ResolvedAttributes, record: ObjectRecord) -> None:
    if record.color_description:
        attrs.color = record.color_description
        attrs.color_source = FeatureSource.EXPLICIT
    elif attrs.famous is not None and attrs.famous.color_notes:
        attrs.color = attrs.famous.color_notes
        attrs.color_source = FeatureSource.FAMOUS
    else:
        attrs.color = _category_color(attrs)
        attrs.color_source = FeatureSource.TEMPLATE if attrs.color else FeatureSource.DEFAULT


# == Stars ==


def _resolve_star(attrs: ResolvedAttributes, record: ObjectRecord, config: CompilerConfig) -> None:
    attrs.star = star_appearance(attrs.spectral)

    if config.derive_features_from_spectral and attrs.spectral is not None and not record.visual_features:
        attrs.derived_features = spectral_features(attrs.spectral)

    if is_flare_star(record.name, record.description):
        attrs.is_flare = True
        attrs.star = replace(attrs.star, starspots=FLARE_STARSPOTS, prominences=FLARE_PROMINENCES)
        for phrase in FLARE_FEATURES:
            if phrase not in attrs.derived_features:
                attrs.derived_features.append(phrase)


def derive_attributes(
    record: ObjectRecord,
    category: ObjectCategory | None = None,
    config: CompilerConfig | None = None,
) -> ResolvedAttributes:
    """Resolve all template slots for a record. Never raises for missing optional fields."""
    config = config or CompilerConfig()
    category = category or record.object_category or C.UNKNOWN

    attrs = ResolvedAttributes(category=category, spectral=parse_spectral_type(record.spectral_type))

    table = _FAMOUS_TABLES.get(category)
    if table is not None:
        match = match_known_object(record.name, table)
        if match is not None:
            attrs.famous_key, attrs.famous = match
            logger.debug("%s matched known object %r", record.name, attrs.famous_key)

    _resolve_subtype(attrs, record, record.category)
    _resolve_structure(attrs, record, config)
    _resolve_surface(attrs, record)
    _resolve_color(attrs, record)
    if category is C.STAR:
        _resolve_star(attrs, record, config)

    if record.visual_features:
        attrs.features_used = list(record.visual_features)
    elif attrs.famous is not None:
        attrs.features_used = [attrs.famous.specific_features]
    else:
        attrs.features_used = list(attrs.derived_features)

    return attrs
