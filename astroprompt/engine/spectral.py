"""Spectral classifier: parses MK classification codes into structured fields.

Examples: ``G2V``, ``K5III``, ``M2Iab``, ``M1-2Ia-Iab``, ``O9.5Ia``, ``B2Ve``.

Classification is advisory: an unparseable code returns ``None``, never raises.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass


class SpectralClass(str, enum.Enum):
    """Primary temperature class, hottest to coolest."""

    O = "O"
    B = "B"
    A = "A"
    F = "F"
    G = "G"
    K = "K"
    M = "M"
    L = "L"
    T = "T"
    Y = "Y"


class LuminosityFamily(str, enum.Enum):
    SUPERGIANT = "supergiant"
    BRIGHT_GIANT = "bright giant"
    GIANT = "giant"
    SUBGIANT = "subgiant"
    MAIN_SEQUENCE = "main sequence"


# Order matters: longer numerals before their prefixes
_LUM = r"(?:Iab|Ia|Ib|III|II|IV|V|I)"

_PRIMARY_RE = re.compile(
    r"^(?P<cls>[OBAFGKMLTY])"
    r"(?P<sub>\d(?:\.\d)?)?(?:-\d(?:\.\d)?)?"
    rf"(?P<lum>{_LUM}(?:[-/]{_LUM})?)?"
    r"(?P<pec>[epnmksvw]*)$",
    re.IGNORECASE,
)
_LEADING_RE = re.compile(r"^([OBAFGKMLTY])", re.IGNORECASE)

_FAMILY_BY_NUMERAL: dict[str, LuminosityFamily] = {
    "IAB": LuminosityFamily.SUPERGIANT,
    "IA": LuminosityFamily.SUPERGIANT,
    "IB": LuminosityFamily.SUPERGIANT,
    "I": LuminosityFamily.SUPERGIANT,
    "II": LuminosityFamily.BRIGHT_GIANT,
    "III": LuminosityFamily.GIANT,
    "IV": LuminosityFamily.SUBGIANT,
    "V": LuminosityFamily.MAIN_SEQUENCE,
}


@dataclass(frozen=True)
class ParsedSpectralType:
    spectral_class: SpectralClass
    subclass: float | None = None
    luminosity_class: str | None = None  # canonical case: "V", "III", "Iab", "Ia-Iab"
    peculiarities: tuple[str, ...] = ()  # single lowercase letters

    @property
    def luminosity_family(self) -> LuminosityFamily | None:
        if not self.luminosity_class:
            return None
        # A range such as "Ia-Iab" is classified by its first numeral
        head = re.split(r"[-/]", self.luminosity_class)[0]
        return _FAMILY_BY_NUMERAL.get(head.upper())

    @property
    def is_supergiant(self) -> bool:
        return self.luminosity_family is LuminosityFamily.SUPERGIANT

    @property
    def is_giant(self) -> bool:
        return self.luminosity_family in (LuminosityFamily.GIANT, LuminosityFamily.BRIGHT_GIANT)

    @property
    def canonical(self) -> str:
        sub = ""
        if self.subclass is not None:
            sub = f"{self.subclass:g}"
        return f"{self.spectral_class.value}{sub}{self.luminosity_class or ''}{''.join(self.peculiarities)}"


def _canonical_numeral(token: str) -> str:
    # Roman part upper-case, a/b suffix lower-case: "IAB" -> "Iab"
    m = re.match(r"^([IV]+)([AB]*)$", token.upper())
    if not m:
        return token
    return m.group(1) + m.group(2).lower()


def _canonical_luminosity(raw: str) -> str:
    sep = "-" if "-" in raw else ("/" if "/" in raw else "")
    if not sep:
        return _canonical_numeral(raw)
    return sep.join(_canonical_numeral(part) for part in raw.split(sep))


def parse_spectral_type(code: str | None) -> ParsedSpectralType | None:
    """Parse a spectral classification code.

    Falls back to the leading class letter when the full pattern does not
    match. Returns None if the code does not start with a recognised class.
    """
    if not code:
        return None
    text = code.strip()
    if not text:
        return None

    match = _PRIMARY_RE.match(text)
    if match is None:
        leading = _LEADING_RE.match(text)
        if leading is None:
            return None
        return ParsedSpectralType(spectral_class=SpectralClass(leading.group(1).upper()))

    sub = match.group("sub")
    lum = match.group("lum")
    pec = match.group("pec") or ""
    return ParsedSpectralType(
        spectral_class=SpectralClass(match.group("cls").upper()),
        subclass=float(sub) if sub else None,
        luminosity_class=_canonical_luminosity(lum) if lum else None,
        peculiarities=tuple(pec.lower()),
    )


_SUPERGIANT_NAMES: dict[SpectralClass, str] = {
    SpectralClass.O: "blue supergiant",
    SpectralClass.B: "blue supergiant",
    SpectralClass.A: "yellow-white supergiant",
    SpectralClass.F: "yellow-white supergiant",
    SpectralClass.G: "yellow supergiant",
    SpectralClass.K: "orange supergiant",
    SpectralClass.M: "red supergiant",
}

_MAIN_SEQUENCE_NAMES: dict[SpectralClass, str] = {
    SpectralClass.O: "blue main-sequence star",
    SpectralClass.B: "blue-white main-sequence star",
    SpectralClass.A: "white main-sequence star",
    SpectralClass.F: "yellow-white main-sequence star",
    SpectralClass.G: "yellow main-sequence star",
    SpectralClass.K: "orange main-sequence star",
    SpectralClass.M: "red dwarf",
    SpectralClass.L: "brown dwarf",
    SpectralClass.T: "brown dwarf",
    SpectralClass.Y: "brown dwarf",
}


def describe_star_subtype(parsed: ParsedSpectralType | None, description: str | None = None) -> str:
    """Human subtype name for a star ("red supergiant", "orange giant", "red dwarf", ...)."""
    if parsed is not None:
        cls = parsed.spectral_class
        family = parsed.luminosity_family
        if family is LuminosityFamily.SUPERGIANT:
            return _SUPERGIANT_NAMES.get(cls, "supergiant")
        if family is LuminosityFamily.BRIGHT_GIANT:
            return "red bright giant" if cls in (SpectralClass.K, SpectralClass.M) else "bright giant"
        if family is LuminosityFamily.GIANT:
            if cls is SpectralClass.K:
                return "orange giant"
            if cls is SpectralClass.M:
                return "red giant"
            return "giant star"
        if family is LuminosityFamily.SUBGIANT:
            return "subgiant"
        return _MAIN_SEQUENCE_NAMES[cls]

    if description:
        desc = description.lower()
        if "white dwarf" in desc:
            return "white dwarf"
        if "neutron" in desc:
            return "neutron star"
        if "pulsar" in desc:
            return "pulsar"
        if "supergiant" in desc:
            if "red" in desc:
                return "red supergiant"
            if "blue" in desc:
                return "blue supergiant"
            return "supergiant"
    return "star"
