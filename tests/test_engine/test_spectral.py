"""Tests for spectral type parsing and the stellar appearance tables."""

from __future__ import annotations

import pytest

from astroprompt.engine.spectral import (
    LuminosityFamily,
    SpectralClass,
    describe_star_subtype,
    parse_spectral_type,
)
from astroprompt.engine.stellar import (
    PECULIARITY_FEATURES,
    STELLAR_PROFILES,
    SUPERGIANT_FRAME_FILL,
    SUPERGIANT_GRANULATION,
    is_flare_star,
    spectral_features,
    star_appearance,
)


class TestParseSpectralType:
    def test_main_sequence(self):
        p = parse_spectral_type("G2V")
        assert p is not None
        assert p.spectral_class is SpectralClass.G
        assert p.subclass == 2.0
        assert p.luminosity_class == "V"
        assert p.luminosity_family is LuminosityFamily.MAIN_SEQUENCE
        assert not p.is_giant and not p.is_supergiant

    def test_giant(self):
        p = parse_spectral_type("K5III")
        assert p.luminosity_class == "III"
        assert p.is_giant
        assert not p.is_supergiant

    def test_supergiant_iab(self):
        p = parse_spectral_type("M2Iab")
        assert p.spectral_class is SpectralClass.M
        assert p.luminosity_class == "Iab"
        assert p.is_supergiant

    def test_ranges(self):
        p = parse_spectral_type("M1-2Ia-Iab")
        assert p.spectral_class is SpectralClass.M
        assert p.subclass == 1.0
        assert p.luminosity_class == "Ia-Iab"
        assert p.is_supergiant

    def test_decimal_subclass(self):
        p = parse_spectral_type("O9.5Ia")
        assert p.subclass == 9.5
        assert p.is_supergiant

    def test_peculiarities(self):
        p = parse_spectral_type("B2Ve")
        assert p.luminosity_class == "V"
        assert p.peculiarities == ("e",)

    def test_case_insensitive(self):
        p = parse_spectral_type(" k5iii ")
        assert p.spectral_class is SpectralClass.K
        assert p.luminosity_class == "III"

    def test_falls_back_to_leading_class(self):
        p = parse_spectral_type("K0 III comp")
        assert p is not None
        assert p.spectral_class is SpectralClass.K
        assert p.luminosity_class is None

    @pytest.mark.parametrize("code", [None, "", "   ", "DA2", "Xyz", "9V"])
    def test_unparseable(self, code):
        assert parse_spectral_type(code) is None

    @pytest.mark.parametrize("code", ["G2V", "M1-2Ia-Iab", "K5III", "B2Ve", "O9.5Ia", "T6", "L3.5"])
    def test_class_round_trip_is_stable(self, code):
        p = parse_spectral_type(code)
        assert parse_spectral_type(p.spectral_class.value).spectral_class is p.spectral_class

    def test_canonical(self):
        assert parse_spectral_type("m2iab").canonical == "M2Iab"


class TestDescribeStarSubtype:
    @pytest.mark.parametrize(
        "code,expected",
        [
            ("M2Iab", "red supergiant"),
            ("B8Ia", "blue supergiant"),
            ("K5III", "orange giant"),
            ("M3III", "red giant"),
            ("G2V", "yellow main-sequence star"),
            ("M5.5Ve", "red dwarf"),
            ("T6", "brown dwarf"),
        ],
    )
    def test_from_spectral_type(self, code, expected):
        assert describe_star_subtype(parse_spectral_type(code)) == expected

    def test_description_clues(self):
        assert describe_star_subtype(None, "A cooling white dwarf remnant") == "white dwarf"
        assert describe_star_subtype(None, "Luminous red supergiant") == "red supergiant"

    def test_default(self):
        assert describe_star_subtype(None) == "star"


class TestStellarProfiles:
    def test_every_class_has_a_profile(self):
        assert set(STELLAR_PROFILES) == set(SpectralClass)

    def test_supergiant_appearance(self):
        star = star_appearance(parse_spectral_type("M2Iab"))
        assert star.granulation == SUPERGIANT_GRANULATION
        assert star.frame_fill == SUPERGIANT_FRAME_FILL
        assert "dusty envelope" in star.prominences
        assert star.wavelength == "infrared"

    def test_giant_appearance(self):
        star = star_appearance(parse_spectral_type("K5III"))
        assert star.granulation == "prominent large-cell"
        assert star.frame_fill == 75

    def test_hot_star_appearance(self):
        star = star_appearance(parse_spectral_type("B2V"))
        assert star.temperature == "hot"
        assert star.wavelength == "ultraviolet"

    def test_default_appearance_without_parse(self):
        star = star_appearance(None)
        assert star.granulation == "visible"
        assert star.frame_fill == 75

    def test_m_supergiant_features_replace_dwarf_features(self):
        features = spectral_features(parse_spectral_type("M2Iab"))
        assert features == list(STELLAR_PROFILES[SpectralClass.M].supergiant_features)

    def test_g_supergiant_features_are_appended(self):
        features = spectral_features(parse_spectral_type("G8Ib"))
        assert features[0] == "Golden-yellow plasma sphere"
        assert features[-1] == "Yellow supergiant with expanded atmosphere"

    def test_peculiarity_features(self):
        features = spectral_features(parse_spectral_type("B2Ve"))
        assert PECULIARITY_FEATURES["e"] in features


class TestFlareStar:
    @pytest.mark.parametrize("name", ["Proxima Centauri", "UV Ceti", "Wolf 359", "EV Lac Flare"])
    def test_name_markers(self, name):
        assert is_flare_star(name)

    def test_description_marker(self):
        assert is_flare_star("AD Leonis", "A well-known flare star")

    def test_ordinary_star(self):
        assert not is_flare_star("Sirius", "Brightest star in the night sky")
