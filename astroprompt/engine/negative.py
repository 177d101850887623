"""Negative prompt composer: universal exclusions plus per-category lists.

Each category list targets the rendering failures generators most often
produce for that kind of object.
"""

from __future__ import annotations

from astroprompt.models.records import ObjectCategory

UNIVERSAL_NEGATIVES: tuple[str, ...] = (
    "cartoon", "anime", "illustration", "painting", "artistic", "stylized",
    "fantasy", "magical", "text", "watermarks", "signatures",
    "logos", "words", "letters", "blur", "low quality",
    "diagram", "visualization", "infographic", "schematic",
)

_PULSAR_LIKE = (
    "beams", "radiation beams", "light beams", "jets",
    "magnetic field lines", "field lines", "force lines",
)

C = ObjectCategory

CATEGORY_NEGATIVES: dict[ObjectCategory, tuple[str, ...]] = {
    # Solid plasma sphere, not a glass ball or an eclipse
    C.STAR: (
        "glass", "crystal ball", "orb", "marble", "sphere inside sphere",
        "transparent", "translucent", "see-through",
        "eclipse", "corona flare", "solar eclipse", "crescent", "dark center",
        "lens flare", "god rays", "light beams",
        "galaxy", "nebula", "planet", "moon",
        "sunset", "sunrise", "horizon",
        "portal", "universe inside",
        "partial star", "half star", "cropped",
    ),
    C.GALAXY: (
        "nebula overlay", "gas cloud overlay",
        "multiple galaxies", "galaxy cluster", "colliding galaxies",
        "planets in foreground", "moon", "asteroid",
        "lens flare", "light rays",
        "swirl effect", "portal", "vortex",
        "edge-on only",
    ),
    C.BLACK_HOLE: (
        "portal", "wormhole", "tunnel", "gateway",
        "eye", "iris", "pupil",
        "symmetric ring", "perfect circle glow", "ring of fire",
        "blue glow", "purple glow", "colorful rainbow",
        "galaxy inside", "universe inside", "stars inside void",
        "sphere", "ball", "orb",
        "planet", "moon", "nebula",
        "multiple black holes",
        "flat 2D ring", "simple circle", "neon glow", "tron style", "geometric",
    ),
    # Nebulae are gas clouds: "transparent" is deliberately absent
    C.NEBULA: (
        "lens flare", "light rays", "god rays",
        "planets in foreground", "planet", "moon",
        "sharp edges", "solid object",
        "single star only", "star focus",
        "galaxy overlay",
        "human face", "animal shape", "pareidolia", "recognizable figure", "creature shape",
    ),
    C.SUPERNOVA_REMNANT: (
        "lens flare", "light rays",
        "planet", "moon", "asteroid",
        "galaxy", "black hole",
        "smooth edges", "perfect sphere",
        "star cluster",
    ),
    C.PLANET: (
        "glass", "crystal", "transparent", "translucent",
        "orb", "marble", "sphere inside",
        "rings", "ring system",
        "multiple moons", "moon in frame",
        "lens flare", "light rays",
        "alien city", "alien structures", "buildings",
        "atmosphere glow only", "just atmosphere",
    ),
    C.EXOPLANET: (
        "glass", "crystal", "transparent", "translucent",
        "orb", "marble", "sphere inside",
        "rings", "ring system",
        "multiple moons",
        "lens flare", "light rays",
        "alien city", "alien structures",
        "star only", "no planet visible",
        "Earth-like continents",
    ),
    C.PULSAR: _PULSAR_LIKE + (
        "synchrotron radiation", "emanating rays",
        "diagram", "schematic", "infographic", "visualization",
        "accretion disk", "disk", "ring",
        "nebula around", "gas cloud",
        "planet", "galaxy",
        "cross pattern", "lighthouse beam",
    ),
    C.MAGNETAR: _PULSAR_LIKE + (
        "field distortions",
        "synchrotron", "emanating rays",
        "diagram", "schematic", "visualization",
        "accretion disk", "disk", "ring",
        "nebula", "gas cloud",
        "planet", "galaxy",
        "electric arcs", "lightning",
    ),
    C.NEUTRON_STAR: _PULSAR_LIKE + (
        "synchrotron", "emanating rays",
        "diagram", "schematic", "infographic", "visualization",
        "accretion disk", "disk", "ring",
        "nebula around", "gas cloud",
        "planet", "galaxy",
        "cross pattern",
    ),
    C.QUASAR: (
        "multiple quasars", "multiple objects",
        "planet", "moon",
        "no jet", "jet missing",
        "dim nucleus", "faint center",
        "lens flare covering jet",
    ),
    C.COMET: (
        "fireball", "fire", "flames", "burning",
        "meteor", "meteorite", "shooting star",
        "planet", "galaxy", "nebula",
        "no tail", "tail missing",
        "glass", "crystal ball",
        "single tail only",
    ),
    C.STAR_CLUSTER: (
        "single star", "one star only", "star focus",
        "nebula overlay", "gas cloud covering",
        "galaxy", "spiral structure",
        "lens flare", "light rays",
        "uniform color", "all same color",
    ),
    C.MOON: (
        "glass", "crystal", "transparent", "translucent",
        "orb", "marble",
        "rings", "ring system",
        "atmosphere", "clouds", "weather",
        "alien city", "alien structures",
        "smooth surface", "no craters",
        "lens flare",
    ),
    C.BROWN_DWARF: (
        "bright star", "sun", "yellow star", "white hot",
        "blue star", "glowing sphere",
        "nebula", "galaxy", "planet rings",
        "lens flare", "light rays",
        "diagram", "schematic",
    ),
    C.GLOBULAR_CLUSTER: (
        "single star", "one star only", "star focus",
        "nebula", "gas cloud", "emission nebula",
        "galaxy", "spiral structure",
        "lens flare", "light rays",
        "uniform color", "all same color",
        "sparse stars", "few stars",
    ),
    C.DWARF_PLANET: (
        "glass", "crystal", "transparent", "translucent",
        "orb", "marble",
        "rings", "ring system",
        "atmosphere", "clouds", "thick atmosphere",
        "alien city", "alien structures",
        "lens flare", "light rays",
        "Earth-like", "blue oceans", "green continents",
    ),
    C.WHITE_DWARF: (
        "beams", "radiation beams", "light beams",
        "magnetic field lines", "field lines",
        "diagram", "schematic", "visualization",
        "nebula around", "planetary nebula",
        "accretion disk", "disk",
        "large star", "supergiant", "red giant",
        "planet", "galaxy",
    ),
    C.SUPERNOVA: (
        "single star", "point of light",
        "planet", "moon", "asteroid",
        "galaxy", "black hole",
        "smooth sphere", "perfect circle",
        "diagram", "schematic",
    ),
    C.UNKNOWN: (
        "lens flare", "light rays",
        "multiple objects",
        "diagram", "schematic",
    ),
}

# Galaxy list minus the collision/asteroid terms, plus wrong-spiral terms
BARRED_SPIRAL_NEGATIVES: tuple[str, ...] = (
    "nebula overlay", "gas cloud overlay",
    "multiple galaxies", "galaxy cluster",
    "planets in foreground", "moon",
    "lens flare", "light rays",
    "swirl effect", "portal", "vortex",
    "standard spiral", "arms from center", "no bar", "regular spiral",
)


def get_negative_prompt(category: ObjectCategory | str | None, galaxy_type: str | None = None) -> str:
    """Comma-joined exclusion list: universal terms first, then the category's."""
    if not isinstance(category, ObjectCategory):
        category = ObjectCategory.from_label(category) or ObjectCategory.UNKNOWN

    terms = CATEGORY_NEGATIVES.get(category, CATEGORY_NEGATIVES[ObjectCategory.UNKNOWN])
    if category is ObjectCategory.GALAXY and galaxy_type and galaxy_type.strip().lower() == "barred spiral":
        terms = BARRED_SPIRAL_NEGATIVES

    return ", ".join(UNIVERSAL_NEGATIVES + terms)
