"""Static category lookup tables and known-object overrides.

Known-object matching: an object name matches a key when it contains the
key case-insensitively. When several keys match, the longest key wins;
equal lengths resolve alphabetically.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class KnownObject:
    specific_features: str
    color_notes: str | None = None
    structure_type: str | None = None
    surface_features: str | None = None
    size: str | None = None


# == Colors ==

GALAXY_COLORS: dict[str, str] = {
    "spiral": "warm gold central region, blue star-forming regions in spiral arms, dark dust lanes",
    "barred spiral": "warm gold central bar, blue star-forming regions in arms, prominent dust lanes",
    "elliptical": "uniform golden-yellow glow, smooth color gradient from center",
    "irregular": "mixed blue and gold regions, chaotic color distribution",
    "lenticular": "smooth golden disk, bright warm center, subtle dust features",
    "default": "natural galactic colors, warm gold central region, blue star-forming regions",
}

NEBULA_COLORS: dict[str, str] = {
    "emission": "red hydrogen-alpha glow, blue oxygen regions, pink ionized gas",
    "reflection": "blue scattered starlight, subtle silver-white tones",
    "planetary": "blue-green oxygen glow, red hydrogen outer shell, white central star",
    "dark": "silhouetted black and dark brown against background glow",
    "supernova remnant": "multicolored filaments, red and blue shocked gas, green oxygen",
    "default": "colorful gas clouds with red, blue, and pink tones",
}

PLANET_COLORS: dict[str, str] = {
    "terrestrial": "rocky grays and browns, possible rust-red iron oxides",
    "gas giant": "orange and brown cloud bands, white ammonia clouds, possible red storm spots",
    "ice giant": "blue-cyan methane atmosphere, subtle cloud banding",
    "dwarf planet": "gray and tan surface, possible reddish organic compounds",
    "super-earth": "varied surface colors, possible blue oceans or brown rocky terrain",
    "hot jupiter": "dark silhouette with glowing orange-red terminator",
    "default": "natural planetary colors based on composition",
}

MOON_COLOR = "neutral gray regolith, brighter highland regions, darker basaltic plains"


def lookup_color(table: dict[str, str], key: str | None) -> str:
    return table.get((key or "default").lower(), table["default"])


# == Structure / surface ==

GALAXY_STRUCTURE: dict[str, str] = {
    "spiral": "sweeping spiral arms originating from center, dust lanes, blue star-forming regions",
    # The bar is the defining feature; spatial language keeps it from being dropped
    "barred spiral": (
        "PROMINENT ELONGATED CENTRAL BAR cutting horizontally across bright nucleus, "
        "spiral arms originating from BAR ENDS not from center, dark dust lanes along bar"
    ),
    "elliptical": "smooth elliptical shape, no spiral arms, diffuse edges",
    "irregular": "asymmetric shape, chaotic structure, active star formation",
    "lenticular": "disk shape without spiral arms, smooth structure",
    "default": "detailed galactic structure",
}

NEBULA_STRUCTURE: dict[str, str] = {
    "emission": "glowing ionized gas, pillar structures, stellar nursery",
    "reflection": "diffuse scattered light, subtle gradients",
    "planetary": "circular or ring structure, central white dwarf star",
    "dark": "silhouetted dust clouds blocking background light",
    "default": "colorful gas and dust structures",
}

PLANET_SURFACES: dict[str, str] = {
    "terrestrial": "rocky terrain, craters, mountains, valleys, possible canyons",
    "gas giant": "swirling cloud bands, massive storm systems, no solid surface visible",
    "ice giant": "blue-cyan atmosphere, subtle cloud banding, methane ice clouds",
    "super-earth": "rocky surface with possible oceans, thick atmosphere, tectonic features",
    "hot jupiter": "glowing hot atmosphere, tidally locked with permanent day/night sides",
    "dwarf planet": "icy surface, possible cryovolcanic features, cratered terrain",
    "default": "diverse surface features",
}

MOON_SURFACE = "cratered rocky surface, ancient impact basins, bright ray systems"
DEFAULT_SURFACE = "detailed surface features"
DEFAULT_STRUCTURE = "detailed structure"


# == Subtype keyword rules (checked in order) ==

GALAXY_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("barred spiral", "barred spiral"),
    ("spiral", "spiral"),
    ("elliptical", "elliptical"),
    ("irregular", "irregular"),
    ("lenticular", "lenticular"),
    ("dwarf", "dwarf irregular"),
)

GALAXY_NAME_HINTS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\b(andromeda|m31)\b", re.IGNORECASE), "spiral"),
    (re.compile(r"\b(whirlpool|m51)\b", re.IGNORECASE), "spiral"),
    (re.compile(r"\b(sombrero|m104)\b", re.IGNORECASE), "spiral"),
    (re.compile(r"\b(triangulum|m33)\b", re.IGNORECASE), "spiral"),
    (re.compile(r"\bmagellanic\b", re.IGNORECASE), "irregular"),
)

NEBULA_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("planetary", "planetary"),
    ("emission", "emission"),
    ("reflection", "reflection"),
    ("dark", "dark"),
    ("supernova", "supernova remnant"),
    ("remnant", "supernova remnant"),
    ("star form", "emission"),
    ("nursery", "emission"),
    ("birth", "emission"),
)

# Word boundaries keep "M1" from matching "M16"
NEBULA_NAME_HINTS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\borion\b", re.IGNORECASE), "emission"),
    (re.compile(r"\b(ring|m57)\b", re.IGNORECASE), "planetary"),
    (re.compile(r"\bhelix\b", re.IGNORECASE), "planetary"),
    (re.compile(r"\bdumbbell\b", re.IGNORECASE), "planetary"),
    (re.compile(r"\b(crab|m1)\b", re.IGNORECASE), "supernova remnant"),
    (re.compile(r"\b(eagle|pillars|m16)\b", re.IGNORECASE), "emission"),
    (re.compile(r"\blagoon\b", re.IGNORECASE), "emission"),
    (re.compile(r"\btrifid\b", re.IGNORECASE), "emission"),
    (re.compile(r"\bpleiades\b", re.IGNORECASE), "reflection"),
)

PLANET_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("hot jupiter", "hot jupiter"),
    ("gas giant", "gas giant"),
    ("jupiter", "gas giant"),
    ("ice giant", "ice giant"),
    ("neptune", "ice giant"),
    ("uranus", "ice giant"),
    ("terrestrial", "terrestrial"),
    ("rocky", "terrestrial"),
    ("dwarf planet", "dwarf planet"),
    ("super-earth", "super-earth"),
    ("super earth", "super-earth"),
)

BLACK_HOLE_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("supermassive", "supermassive"),
    ("stellar", "stellar-mass"),
    ("intermediate", "intermediate-mass"),
)

EARTH_MASSES_PER_SOLAR_MASS = 332_946.0


def first_keyword(text: str, rules: tuple[tuple[str, str], ...]) -> str | None:
    lowered = text.lower()
    for keyword, value in rules:
        if keyword in lowered:
            return value
    return None


def first_name_hint(name: str, rules: tuple[tuple[re.Pattern[str], str], ...]) -> str | None:
    for pattern, value in rules:
        if pattern.search(name):
            return value
    return None


# == Known objects ==

_DIGIT_RE = re.compile(r"\d")

_ORION = KnownObject(
    specific_features="Trapezium star cluster illuminating central cavity, M43 companion nebula, dark Horsehead silhouette region nearby",
    color_notes="Red hydrogen-alpha dominant, blue reflection regions, golden ionization fronts",
    structure_type="star-forming region with dense cloud pillars",
)
_EAGLE = KnownObject(
    specific_features="iconic Pillars of Creation - three towering dark dust columns backlit by stellar radiation, evaporating gaseous globules (EGGs)",
    color_notes="Red hydrogen emission, blue oxygen III, dark silhouetted pillars against glowing background",
    structure_type="star-forming pillars with sculpted edges",
)
_LAGOON = KnownObject(
    specific_features="Hourglass region near center with intense star formation, dark Bok globules, bright rimmed clouds",
    color_notes="Pink-red hydrogen dominant, blue reflection nebulosity around hot stars",
    structure_type="large emission complex with dark lanes",
)
_TRIFID = KnownObject(
    specific_features="three distinct lobes divided by dark dust lanes, blue reflection region adjacent to red emission region",
    color_notes="Red emission section, blue reflection section, dark trisecting dust lanes",
    structure_type="tri-lobed structure bisected by dust",
)
_CARINA = KnownObject(
    specific_features="Mystic Mountain pillar, Keyhole dark region, Eta Carinae hypergiant at center, dramatic sculpted edges",
    color_notes="Intense red-orange hydrogen, deep blue oxygen regions, dramatic dark silhouettes",
    structure_type="massive star-forming complex with extreme radiation sculpting",
)
_ROSETTE = KnownObject(
    specific_features="circular ring structure around central star cluster NGC 2244, radial dark globules pointing inward",
    color_notes="Deep red hydrogen ring, central blue star cluster, dark cometary globules",
    structure_type="circular shell around open cluster",
)
_RING = KnownObject(
    specific_features="distinct torus ring structure, faint outer halo, bright central white dwarf star, inner blue-green core",
    color_notes="Green-blue oxygen core, red outer hydrogen ring, white central star",
    structure_type="barrel/ring shape viewed face-on",
)
_HELIX = KnownObject(
    specific_features="large apparent size, cometary knots with tails pointing away from center, inner disk structure, red outer ring",
    color_notes="Blue-green inner region, red outer ring, thousands of cometary knots",
    structure_type="double helix structure viewed face-on",
)
_DUMBBELL = KnownObject(
    specific_features="distinctive apple-core or hourglass shape, two bright lobes connected by fainter waist",
    color_notes="Green-cyan oxygen dominant, red hydrogen outer regions",
    structure_type="bipolar hourglass shape",
)
_CATS_EYE = KnownObject(
    specific_features="complex nested shells, multiple concentric rings, intricate central structure with jets",
    color_notes="Blue-green oxygen core, red outer halos, complex multi-shell structure",
    structure_type="multi-shell with bilateral symmetry",
)
_OWL = KnownObject(
    specific_features="two dark circular regions resembling eyes within bright nebula, faint outer halo",
    color_notes='Green-blue overall with dark "eye" regions',
    structure_type="circular with two dark cavities",
)
_CRAB = KnownObject(
    specific_features="central pulsar, complex filamentary structure, bluish central pulsar wind nebula, expanding debris cloud",
    color_notes="Bluish-white pulsar wind core, red filamentary outer shell, green oxygen filaments",
    structure_type="chaotic expanding filamentary shell",
)
_VEIL = KnownObject(
    specific_features="delicate arc of shocked gas filaments, part of larger Cygnus Loop, intricate lacework structure",
    color_notes="Red hydrogen, blue oxygen, green sulfur in separate filament regions",
    structure_type="arc segment of spherical shell",
)
_CAS_A = KnownObject(
    specific_features="young remnant with bright knots, visible neutron star, fast-moving debris clumps",
    color_notes="Multi-colored with distinct element regions - iron, silicon, sulfur in different colors",
    structure_type="roughly spherical expanding shell",
)

FAMOUS_NEBULAE: dict[str, KnownObject] = {
    # Emission
    "orion": _ORION,
    "eagle": _EAGLE,
    "m16": _EAGLE,
    "lagoon": _LAGOON,
    "m8": _LAGOON,
    "trifid": _TRIFID,
    "m20": _TRIFID,
    "carina": _CARINA,
    "rosette": _ROSETTE,
    # Planetary
    "ring": _RING,
    "m57": _RING,
    "helix": _HELIX,
    "ngc 7293": _HELIX,
    "dumbbell": _DUMBBELL,
    "m27": _DUMBBELL,
    "cat's eye": _CATS_EYE,
    "ngc 6543": _CATS_EYE,
    "owl": _OWL,
    "m97": _OWL,
    # Supernova remnants
    "crab": _CRAB,
    "m1": _CRAB,
    "veil": _VEIL,
    "cassiopeia a": _CAS_A,
    "cas a": _CAS_A,
}

_SGR_A = KnownObject(
    specific_features="Milky Way galactic center supermassive black hole, compact photon ring, dynamic accretion flow with hot spots, 4 million solar masses",
    color_notes="Orange-red hot accretion plasma, bright photon ring, variable brightness hot spots",
    size="supermassive",
)

FAMOUS_BLACK_HOLES: dict[str, KnownObject] = {
    "sagittarius a": _SGR_A,
    "sgr a": _SGR_A,
    "m87": KnownObject(
        specific_features="giant elliptical galaxy center black hole, prominent relativistic jet extending thousands of light years, 6.5 billion solar masses, asymmetric bright ring",
        color_notes="Orange-yellow ring with distinct brightness asymmetry, blue relativistic jet, absolute black shadow",
        size="supermassive",
    ),
    "cygnus x-1": KnownObject(
        specific_features="stellar-mass black hole in binary system, accretion disk fed by blue supergiant companion star, X-ray bright",
        color_notes="Intense blue-white X-ray glow, orange-yellow accretion stream from companion star",
        size="stellar-mass",
    ),
    "grs 1915": KnownObject(
        specific_features="microquasar with superluminal jets, stellar-mass black hole with extreme spin",
        color_notes="Bright accretion disk, twin relativistic jets",
        size="stellar-mass",
    ),
    "ton 618": KnownObject(
        specific_features="ultramassive black hole, one of the most massive known, 66 billion solar masses, extremely luminous quasar nucleus",
        color_notes="Blindingly bright accretion disk, extreme luminosity",
        size="ultramassive",
    ),
}

FAMOUS_DWARF_PLANETS: dict[str, KnownObject] = {
    "pluto": KnownObject(
        specific_features="heart-shaped nitrogen ice plain (Tombaugh Regio), Sputnik Planitia glacier, rugged water-ice mountains",
        color_notes="Reddish-brown tholins terrain, bright white nitrogen ice heart, tan and gray cratered regions",
        surface_features="Heart-shaped Tombaugh Regio ice plain, reddish-brown tholins, cratered highlands, nitrogen glaciers",
    ),
    "eris": KnownObject(
        specific_features="highly reflective icy surface, possible methane frost, distant scattered disk object",
        color_notes="Bright white-gray icy surface, possible slight reddish tinge from tholins",
        surface_features="Smooth highly reflective ice surface, possible frost deposits",
    ),
    "makemake": KnownObject(
        specific_features="reddish-brown surface with bright patches, possible nitrogen ice",
        color_notes="Reddish-brown surface with bright white patches",
        surface_features="Reddish-brown terrain with bright ice patches",
    ),
    "haumea": KnownObject(
        specific_features="elongated ellipsoid shape from rapid rotation, dark red spot, two small moons",
        color_notes="Bright icy surface with dark reddish spot",
        surface_features="Elongated shape, bright ice with dark red region",
    ),
    "ceres": KnownObject(
        specific_features="Occator crater with bright salt deposits, Ahuna Mons cryovolcano",
        color_notes="Dark gray rocky surface with bright white salt deposits",
        surface_features="Heavily cratered surface, bright salt deposits in Occator crater, cryovolcanic mountain",
    ),
}


def _key_in_name(key: str, lowered: str) -> bool:
    # Catalog designations ("m1", "ngc 7293", "ton 618") match whole tokens only
    if _DIGIT_RE.search(key):
        return re.search(rf"(?<![a-z0-9]){re.escape(key)}(?![a-z0-9])", lowered) is not None
    return key in lowered


def match_known_object(name: str, table: dict[str, KnownObject]) -> tuple[str, KnownObject] | None:
    """Return (key, entry) for the best known-object match, or None."""
    lowered = name.lower()
    matches = [key for key in table if _key_in_name(key, lowered)]
    if not matches:
        return None
    best = min(matches, key=lambda k: (-len(k), k))
    return best, table[best]
