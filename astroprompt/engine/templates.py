"""Prompt templates, one per object category plus the Unknown fallback.

Markers use ``{snake_case}`` names; see SLOT_NAMES for the full set the
prompt builder knows how to fill.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from astroprompt.models.records import ObjectCategory

SLOT_NAMES = frozenset({
    "name",
    "temperature",
    "sub_type",
    "galaxy_type",
    "nebula_type",
    "planet_type",
    "structure_details",
    "surface_features",
    "color",
    "granulation",
    "starspots",
    "prominences",
    "frame_fill",
    "primary_color",
    "limb_color",
    "accent_color",
    "wavelength",
})


@dataclass(frozen=True)
class PromptTemplate:
    realism: str
    object_description: str
    visual_characteristics: str
    style_reference: str
    color_description: str
    lighting: str
    medium: str
    quality: str = "8K, ultra high definition"


_PHOTO = "Photorealistic photograph"
_HST = "NASA Hubble Space Telescope imagery"
_HST_STELLAR = "NASA Hubble Space Telescope stellar imagery"

_COMPACT_REMNANT_VISUAL = (
    "Small intensely luminous solid stellar sphere, brilliant white-blue opaque surface, "
    "{glow} warm glow halo, clean simple spherical shape, single star filling 30% of frame, "
    "black space starfield background"
)

_FILAMENTARY_SHELL_COLORS = "Multicolored filaments with red hydrogen, blue oxygen, green sulfur emissions"

C = ObjectCategory

_TEMPLATES: dict[ObjectCategory, PromptTemplate] = {
    C.STAR: PromptTemplate(
        realism=_PHOTO,
        object_description="a {temperature} {sub_type} stellar surface",
        visual_characteristics=(
            "Brilliant incandescent plasma sphere, {granulation} granulation texture, {starspots}, "
            "{prominences}, solid opaque luminous disk, single star filling {frame_fill}% of frame, "
            "black space background"
        ),
        style_reference="NASA Solar Dynamics Observatory solar imaging",
        color_description="{primary_color} surface, {limb_color} limb, {accent_color}",
        lighting="Self-luminous stellar surface",
        medium="Space telescope {wavelength} photography",
    ),
    C.GALAXY: PromptTemplate(
        realism=_PHOTO,
        object_description="a {galaxy_type} galaxy viewed from deep space",
        visual_characteristics=(
            "{structure_details}, bright solid central bulge, blue star-forming regions in outer arms, "
            "galaxy filling 50% of frame, face-on view, black space background with distant stars"
        ),
        style_reference=_HST,
        color_description="{color}",
        lighting="Natural galactic luminosity",
        medium="Space telescope photography",
    ),
    C.BLACK_HOLE: PromptTemplate(
        realism=_PHOTO,
        object_description="a {sub_type} black hole with accretion disk",
        visual_characteristics=(
            "Dark circular void event horizon surrounded by bright photon ring, asymmetric accretion "
            "disk with turbulent orange-yellow plasma, Doppler beaming creating distinct bright side and "
            "dim side, gravitational lensing bending background starlight, warped spacetime distortion, "
            "single isolated subject filling 40% of frame, pure black space background"
        ),
        style_reference="NASA Event Horizon Telescope imagery",
        color_description=(
            "Bright orange-gold plasma on approaching side, dimmer red on receding side, absolute black "
            "void at center, lensed blue-shifted light arcs"
        ),
        lighting="Accretion disk self-luminous, asymmetric Doppler brightness",
        medium="Radio telescope imagery",
    ),
    C.NEBULA: PromptTemplate(
        realism=_PHOTO,
        object_description="a {nebula_type} nebula in deep space",
        visual_characteristics=(
            "{color} gas clouds, {structure_details}, stars visible within and behind, solid opaque gas "
            "structures, nebula filling 50% of frame, black space background"
        ),
        style_reference=_HST,
        color_description="{color}",
        lighting="Illuminated by internal and nearby stars",
        medium="Space telescope narrowband photography",
    ),
    C.SUPERNOVA_REMNANT: PromptTemplate(
        realism=_PHOTO,
        object_description="an expanding supernova remnant shell",
        visual_characteristics=(
            "Expanding filamentary shell structure, shocked gas filaments, colorful emission from "
            "different elements, solid gas structures, remnant filling 50% of frame, black space background"
        ),
        style_reference=_HST,
        color_description=_FILAMENTARY_SHELL_COLORS,
        lighting="Self-luminous shocked gas",
        medium="Space telescope composite photography",
    ),
    C.PLANET: PromptTemplate(
        realism=_PHOTO,
        object_description="a {planet_type} planet surface",
        visual_characteristics=(
            "{surface_features}, solid opaque planetary body, sharp surface detail, planet filling 60% of "
            "frame, visible terminator line, black space background with stars"
        ),
        style_reference="NASA planetary photography",
        color_description="{color}",
        lighting="Direct sunlight with sharp terminator shadow",
        medium="Space probe photography",
    ),
    C.EXOPLANET: PromptTemplate(
        realism=_PHOTO,
        object_description="an exoplanet orbiting a distant star",
        visual_characteristics=(
            "{surface_features}, solid opaque planetary body, planet filling 60% of frame, parent star "
            "glow illuminating limb, black space background"
        ),
        style_reference="NASA exoplanet imagery",
        color_description="{color}",
        lighting="Illuminated by parent star on horizon",
        medium="Space telescope photography",
    ),
    # Compact remnants are described as hot white dwarfs; "pulsar" and
    # "neutron star" pull generators toward diagram renderings
    C.PULSAR: PromptTemplate(
        realism=_PHOTO,
        object_description="a compact hot white dwarf stellar remnant",
        visual_characteristics=_COMPACT_REMNANT_VISUAL.replace("{glow}", "subtle"),
        style_reference=_HST_STELLAR,
        color_description="Brilliant white-blue stellar surface with soft orange-gold outer glow",
        lighting="Self-luminous stellar surface",
        medium="Space telescope photography",
    ),
    C.MAGNETAR: PromptTemplate(
        realism=_PHOTO,
        object_description="an intensely hot compact stellar remnant",
        visual_characteristics=_COMPACT_REMNANT_VISUAL.replace("{glow}", "intense"),
        style_reference=_HST_STELLAR,
        color_description="Brilliant white-blue stellar surface with intense orange-gold outer glow",
        lighting="Self-luminous stellar surface",
        medium="Space telescope photography",
    ),
    C.NEUTRON_STAR: PromptTemplate(
        realism=_PHOTO,
        object_description="a compact hot white dwarf stellar remnant",
        visual_characteristics=_COMPACT_REMNANT_VISUAL.replace("{glow}", "subtle"),
        style_reference=_HST_STELLAR,
        color_description="Brilliant white-blue stellar surface with soft orange-gold outer glow",
        lighting="Self-luminous stellar surface",
        medium="Space telescope photography",
    ),
    C.QUASAR: PromptTemplate(
        realism=_PHOTO,
        object_description="an active galactic nucleus quasar",
        visual_characteristics=(
            "Brilliant intense point-like nucleus, visible relativistic jet extending outward, faint host "
            "galaxy halo, quasar filling 40% of frame, black space background"
        ),
        style_reference=_HST,
        color_description="Intense white-blue nucleus, orange-gold relativistic jet, faint galactic halo",
        lighting="Intensely self-luminous nucleus",
        medium="Space telescope photography",
    ),
    C.COMET: PromptTemplate(
        realism=_PHOTO,
        object_description="a comet with visible tail",
        visual_characteristics=(
            "Bright solid irregular nucleus, visible curved golden dust tail, straight blue ion tail, "
            "glowing coma envelope, comet filling 40% of frame, black space starfield background"
        ),
        style_reference="NASA spacecraft photography",
        color_description="White-gray solid nucleus, golden dust tail, blue ion tail",
        lighting="Sunlit with tails pointing away from Sun",
        medium="Space probe photography",
    ),
    C.STAR_CLUSTER: PromptTemplate(
        realism=_PHOTO,
        object_description="a {sub_type} star cluster",
        visual_characteristics=(
            "Dense concentration of individual stars, varied stellar colors from blue to orange, each "
            "star a solid luminous point, cluster filling 50% of frame, black space background"
        ),
        style_reference=_HST,
        color_description=(
            "Mixed stellar colors - blue hot stars, yellow sun-like stars, orange and red cooler stars"
        ),
        lighting="Natural stellar luminosity",
        medium="Space telescope photography",
    ),
    C.MOON: PromptTemplate(
        realism=_PHOTO,
        object_description="a planetary moon surface",
        visual_characteristics=(
            "{surface_features}, visible crater impacts, solid opaque rocky surface, moon filling 60% of "
            "frame, sharp terminator line, black space background"
        ),
        style_reference="NASA spacecraft photography",
        color_description="{color}",
        lighting="Reflected sunlight with sharp terminator shadow",
        medium="Space probe photography",
    ),
    C.BROWN_DWARF: PromptTemplate(
        realism=_PHOTO,
        object_description="a brown dwarf substellar object",
        visual_characteristics=(
            "Large Jupiter-like body with banded atmosphere, deep magenta-red coloration, faint "
            "self-luminous infrared glow, atmospheric storms and cloud bands, solid opaque body, object "
            "filling 50% of frame, black space starfield background"
        ),
        style_reference="NASA infrared telescope imagery",
        color_description=(
            "Deep magenta-red to brown surface, darker atmospheric bands, faint warm infrared glow at limb"
        ),
        lighting="Self-luminous infrared emission with faint glow",
        medium="Infrared space telescope photography",
    ),
    C.GLOBULAR_CLUSTER: PromptTemplate(
        realism=_PHOTO,
        object_description="a dense globular star cluster",
        visual_characteristics=(
            "Extremely dense spherical concentration of ancient stars, brilliant crowded core with "
            "thousands of individual stars, gradual density falloff toward edges, varied stellar colors "
            "from blue stragglers to red giants, cluster filling 50% of frame, black space background"
        ),
        style_reference=_HST,
        color_description=(
            "Mixed stellar colors - predominantly warm orange-red ancient stars, scattered blue "
            "stragglers, yellow sun-like stars in dense packed arrangement"
        ),
        lighting="Natural stellar luminosity from thousands of stars",
        medium="Space telescope photography",
    ),
    C.DWARF_PLANET: PromptTemplate(
        realism=_PHOTO,
        object_description="a dwarf planet surface",
        visual_characteristics=(
            "{surface_features}, solid opaque icy-rocky body, sharp surface detail, dwarf planet filling "
            "60% of frame, sharp terminator line, distant sun illumination, black space background with stars"
        ),
        style_reference="NASA New Horizons spacecraft photography",
        color_description="{color}",
        lighting="Distant sunlight illumination with sharp terminator shadow",
        medium="Space probe photography",
    ),
    C.WHITE_DWARF: PromptTemplate(
        realism=_PHOTO,
        object_description="a compact hot white dwarf stellar remnant",
        visual_characteristics=_COMPACT_REMNANT_VISUAL.replace("{glow}", "subtle"),
        style_reference=_HST_STELLAR,
        color_description="Brilliant white-blue stellar surface with soft warm outer glow",
        lighting="Self-luminous stellar surface",
        medium="Space telescope photography",
    ),
    C.SUPERNOVA: PromptTemplate(
        realism=_PHOTO,
        object_description="a supernova remnant expanding shell",
        visual_characteristics=(
            "Expanding filamentary shell structure, shocked gas filaments, colorful emission from "
            "different elements, possible central neutron star or pulsar, solid gas structures, remnant "
            "filling 50% of frame, black space background"
        ),
        style_reference=_HST,
        color_description=_FILAMENTARY_SHELL_COLORS,
        lighting="Self-luminous shocked gas",
        medium="Space telescope composite photography",
    ),
    C.UNKNOWN: PromptTemplate(
        realism=_PHOTO,
        object_description="an astronomical object in deep space",
        visual_characteristics=(
            "Detailed solid celestial object, sharp defined edges, object filling 40% of frame, black "
            "space starfield background"
        ),
        style_reference=_HST,
        color_description="Natural astronomical colors",
        lighting="Natural illumination",
        medium="Space telescope photography",
    ),
}

PROMPT_TEMPLATES = MappingProxyType(_TEMPLATES)


def get_template(category: ObjectCategory | None) -> PromptTemplate:
    """Template for a category; Unknown when the category is absent or unrecognized."""
    if category is None:
        return PROMPT_TEMPLATES[C.UNKNOWN]
    return PROMPT_TEMPLATES.get(category, PROMPT_TEMPLATES[C.UNKNOWN])


def has_slot(pattern: str, slot: str) -> bool:
    return "{" + slot + "}" in pattern
