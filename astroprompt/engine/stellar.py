"""Per-class stellar appearance tables, indexed by SpectralClass.

Every SpectralClass member has exactly one StellarProfile, so the star
rules in derivation are table lookups rather than branching.
"""

from __future__ import annotations

from dataclasses import dataclass

from astroprompt.engine.spectral import ParsedSpectralType, SpectralClass


@dataclass(frozen=True)
class StellarProfile:
    temperature: str  # "" for cool classes, "hot" is never used for them
    color: str  # short surface color, used in feature text
    granulation: str
    starspots: str
    prominences: str
    primary_color: str
    limb_color: str
    accent_color: str
    frame_fill: int  # % of frame
    wavelength: str
    features: tuple[str, ...]  # visual feature phrases for a main-sequence star
    supergiant_features: tuple[str, ...] = ()
    giant_features: tuple[str, ...] = ()


@dataclass(frozen=True)
class StarAppearance:
    """Resolved star slots for the Star template."""

    temperature: str = ""
    granulation: str = "visible"
    starspots: str = "scattered dark starspots"
    prominences: str = "magnetic prominences at limb"
    primary_color: str = "orange-yellow"
    limb_color: str = "orange"
    accent_color: str = "orange granulation hints"
    frame_fill: int = 75
    wavelength: str = "visible"


DEFAULT_APPEARANCE = StarAppearance()

SUPERGIANT_GRANULATION = "giant coarse mottled"
SUPERGIANT_PROMINENCES = "dramatic magnetic prominences, faint dusty envelope from mass loss visible at limb"
SUPERGIANT_FRAME_FILL = 80
GIANT_GRANULATION = "prominent large-cell"
GIANT_PROMINENCES = "prominent magnetic loop prominences, extended tenuous atmosphere at limb"

FLARE_STARSPOTS = "large dark starspot groups covering significant surface area"
FLARE_PROMINENCES = "extensive magnetic loop prominences erupting from limb, violent surface activity"
FLARE_FEATURES = (
    "Extensive magnetic loop prominences erupting from limb",
    "Violent surface activity from intense flare episodes",
)
FLARE_NAME_MARKERS = ("proxima", "flare", "uv ceti", "wolf")

PECULIARITY_FEATURES: dict[str, str] = {
    "e": "Emission lines indicating active stellar wind",
    "p": "Peculiar spectral features",
    "v": "Variable brightness with periodic fluctuations",
}

_SUBSTELLAR = dict(
    granulation="visible",
    starspots="scattered dark starspots",
    prominences="magnetic prominences at limb",
    primary_color="orange-yellow",
    limb_color="orange",
    accent_color="orange granulation hints",
    frame_fill=75,
    wavelength="infrared",
)

STELLAR_PROFILES: dict[SpectralClass, StellarProfile] = {
    SpectralClass.O: StellarProfile(
        temperature="hot",
        color="intense blue-white",
        granulation="fine subtle",
        starspots="few small starspots",
        prominences="intense stellar wind creating subtle haze at limb, magnetic prominences",
        primary_color="intense blue-white",
        limb_color="blue",
        accent_color="orange-gold magnetic active regions contrasting against blue disk",
        frame_fill=70,
        wavelength="ultraviolet",
        features=(
            "Brilliant intense blue-white plasma sphere",
            "Fine subtle granulation texture",
            "Few small starspots from minimal convection",
            "Intense stellar wind creating subtle haze at limb",
        ),
        supergiant_features=("Massive luminous blue supergiant",),
    ),
    SpectralClass.B: StellarProfile(
        temperature="hot",
        color="blue-white",
        granulation="fine subtle",
        starspots="few small starspots",
        prominences="intense stellar wind creating subtle haze at limb, magnetic prominences",
        primary_color="blue-white with subtle violet undertones",
        limb_color="blue-violet",
        accent_color="orange-gold magnetic active regions contrasting against blue disk",
        frame_fill=70,
        wavelength="ultraviolet",
        features=(
            "Blue-white plasma sphere with violet undertones",
            "Fine subtle granulation texture",
            "Few small starspots",
            "Magnetic prominences at limb",
        ),
        supergiant_features=("Blue supergiant with extreme luminosity",),
    ),
    SpectralClass.A: StellarProfile(
        temperature="hot",
        color="white-blue",
        granulation="fine subtle",
        starspots="few small starspots",
        prominences="delicate wispy magnetic prominences at limb",
        primary_color="brilliant white",
        limb_color="ice-blue",
        accent_color="faint orange-copper hints in rare active regions",
        frame_fill=70,
        wavelength="ultraviolet",
        features=(
            "Brilliant white stellar surface",
            "Fine subtle granulation texture",
            "Rare small starspots",
            "Delicate wispy magnetic prominences at limb",
        ),
    ),
    SpectralClass.F: StellarProfile(
        temperature="warm",
        color="pale yellow-white",
        granulation="visible clear",
        starspots="scattered dark starspots",
        prominences="moderate magnetic prominences at limb",
        primary_color="warm cream-white",
        limb_color="pale golden-yellow",
        accent_color="orange granulation cells, bright white active regions",
        frame_fill=75,
        wavelength="visible",
        features=(
            "Warm cream-white plasma sphere",
            "Visible clear granulation texture",
            "Scattered dark starspots",
            "Moderate magnetic prominences at limb",
        ),
    ),
    SpectralClass.G: StellarProfile(
        temperature="warm",
        color="yellow-orange",
        granulation="visible clear",
        starspots="scattered dark starspots",
        prominences="moderate magnetic prominences at limb",
        primary_color="golden-yellow",
        limb_color="amber",
        accent_color="orange granulation hints, bright plage regions",
        frame_fill=75,
        wavelength="visible",
        features=(
            "Golden-yellow plasma sphere",
            "Visible clear granulation texture like solar imagery",
            "Scattered dark starspots",
            "Moderate magnetic prominences",
        ),
        supergiant_features=("Yellow supergiant with expanded atmosphere",),
    ),
    SpectralClass.K: StellarProfile(
        temperature="",
        color="orange",
        granulation="prominent",
        starspots="moderate dark starspot activity",
        prominences="prominent magnetic loop prominences",
        primary_color="warm orange",
        limb_color="deep orange",
        accent_color="darker rust-brown granulation boundaries",
        frame_fill=75,
        wavelength="infrared",
        features=(
            "Warm orange plasma sphere",
            "Prominent granulation texture",
            "Moderate dark starspot activity",
            "Prominent magnetic loop prominences",
        ),
        giant_features=("Orange giant with extended atmosphere",),
    ),
    SpectralClass.M: StellarProfile(
        temperature="",
        color="deep red-crimson",
        granulation="prominent",
        starspots="large dark starspot groups covering significant surface area",
        prominences="prominent magnetic loop prominences",
        primary_color="deep scarlet-orange",
        limb_color="rust-crimson",
        accent_color="darker rust-brown convection cell boundaries, bright orange-yellow hot spots",
        frame_fill=75,
        wavelength="infrared",
        features=(
            "Deep scarlet-red plasma sphere",
            "Prominent granulation texture",
            "Large dark starspot groups covering significant surface area",
            "Extensive magnetic loop prominences",
        ),
        # M supergiants and giants replace the dwarf phrases outright
        supergiant_features=(
            "Brilliant incandescent scarlet-orange plasma sphere",
            "Giant coarse mottled granulation with large convection cells",
            "Large dark starspot groups covering significant surface area",
            "Dramatic magnetic prominences, faint dusty envelope from mass loss",
        ),
        giant_features=(
            "Deep red-orange giant plasma sphere",
            "Prominent granulation texture",
            "Moderate to large starspot groups",
            "Prominent magnetic loop prominences",
        ),
    ),
    SpectralClass.L: StellarProfile(
        temperature="",
        color="dark red-brown",
        features=(
            "Dark red-brown substellar surface",
            "Atmospheric bands visible",
            "Faint self-luminous infrared glow",
        ),
        **_SUBSTELLAR,
    ),
    SpectralClass.T: StellarProfile(
        temperature="",
        color="magenta-brown",
        features=(
            "Magenta-brown substellar surface",
            "Strong atmospheric banding",
            "Methane absorption features",
            "Faint infrared glow",
        ),
        **_SUBSTELLAR,
    ),
    SpectralClass.Y: StellarProfile(
        temperature="",
        color="dark brown",
        features=(
            "Dark brown substellar surface",
            "Cloud patterns in atmosphere",
            "Ammonia and water clouds",
            "Very faint infrared glow",
        ),
        **_SUBSTELLAR,
    ),
}


def star_appearance(parsed: ParsedSpectralType | None) -> StarAppearance:
    """Resolve Star template slots from a parsed spectral type."""
    if parsed is None:
        return DEFAULT_APPEARANCE

    profile = STELLAR_PROFILES[parsed.spectral_class]
    granulation = profile.granulation
    prominences = profile.prominences
    frame_fill = profile.frame_fill
    if parsed.is_supergiant:
        granulation = SUPERGIANT_GRANULATION
        prominences = SUPERGIANT_PROMINENCES
        frame_fill = SUPERGIANT_FRAME_FILL
    elif parsed.is_giant:
        granulation = GIANT_GRANULATION
        prominences = GIANT_PROMINENCES

    return StarAppearance(
        temperature=profile.temperature,
        granulation=granulation,
        starspots=profile.starspots,
        prominences=prominences,
        primary_color=profile.primary_color,
        limb_color=profile.limb_color,
        accent_color=profile.accent_color,
        frame_fill=frame_fill,
        wavelength=profile.wavelength,
    )


def spectral_features(parsed: ParsedSpectralType) -> list[str]:
    """Visual feature phrases derived from a parsed spectral type."""
    profile = STELLAR_PROFILES[parsed.spectral_class]
    features = list(profile.features)

    if parsed.spectral_class is SpectralClass.M:
        if parsed.is_supergiant:
            features = list(profile.supergiant_features)
        elif parsed.is_giant:
            features = list(profile.giant_features)
    elif parsed.is_supergiant:
        features.extend(profile.supergiant_features)
    elif parsed.is_giant:
        features.extend(profile.giant_features)

    for flag in parsed.peculiarities:
        phrase = PECULIARITY_FEATURES.get(flag)
        if phrase and phrase not in features:
            features.append(phrase)
    return features


def is_flare_star(name: str, description: str | None = None) -> bool:
    lowered = name.lower()
    if any(marker in lowered for marker in FLARE_NAME_MARKERS):
        return True
    return bool(description) and "flare star" in description.lower()
