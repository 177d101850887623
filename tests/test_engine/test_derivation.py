"""Tests for attribute derivation and the known-object tables."""

from __future__ import annotations

import pytest

from astroprompt.engine.derivation import (
    derive_attributes,
    derive_black_hole_type,
    derive_galaxy_type,
    derive_nebula_type,
    derive_planet_type,
)
from astroprompt.engine.config import CompilerConfig
from astroprompt.engine.lookup import (
    FAMOUS_BLACK_HOLES,
    FAMOUS_DWARF_PLANETS,
    FAMOUS_NEBULAE,
    GALAXY_STRUCTURE,
    MOON_COLOR,
    MOON_SURFACE,
    PLANET_COLORS,
    KnownObject,
    match_known_object,
)
from astroprompt.engine.spectral import SpectralClass
from astroprompt.engine.stellar import (
    FLARE_FEATURES,
    FLARE_STARSPOTS,
    STELLAR_PROFILES,
    SUPERGIANT_GRANULATION,
)
from astroprompt.models.compilation import FeatureSource
from astroprompt.models.records import ObjectRecord
from tests.conftest import BETELGEUSE, CYGNUS_X1, EAGLE_NEBULA, PLUTO, PROXIMA


def _derive(data: dict, **config):
    return derive_attributes(ObjectRecord.model_validate(data), config=CompilerConfig(**config))


class TestKnownObjectMatching:
    def test_substring_match(self):
        key, entry = match_known_object("The Eagle Nebula", FAMOUS_NEBULAE)
        assert key == "eagle"
        assert entry is FAMOUS_NEBULAE["eagle"]

    def test_longest_key_wins(self):
        # "m1" is a substring of "m16"
        key, _ = match_known_object("M16", FAMOUS_NEBULAE)
        assert key == "m16"

    def test_equal_length_resolves_alphabetically(self):
        table = {"ba": KnownObject("second"), "ab": KnownObject("first")}
        key, entry = match_known_object("abba", table)
        assert key == "ab"
        assert entry.specific_features == "first"

    def test_no_match(self):
        assert match_known_object("NGC 7000", FAMOUS_BLACK_HOLES) is None

    @pytest.mark.parametrize("name", ["M17 Omega Nebula", "M101", "NGC 72930", "M8x"])
    def test_designation_needs_whole_token(self, name):
        assert match_known_object(name, FAMOUS_NEBULAE) is None

    @pytest.mark.parametrize(
        "name, key",
        [("M1", "m1"), ("Crab Nebula (M1)", "crab"), ("NGC 7293", "ngc 7293"), ("Cygnus X-1", "cygnus x-1"), ("TON 618", "ton 618")],
    )
    def test_designation_whole_token(self, name, key):
        table = FAMOUS_BLACK_HOLES if key in FAMOUS_BLACK_HOLES else FAMOUS_NEBULAE
        assert match_known_object(name, table)[0] == key

    def test_unlisted_messier_nebula_uses_defaults(self):
        attrs = _derive({"name": "M17 Omega Nebula", "category": "Nebula"})
        assert attrs.famous is None
        assert attrs.structure_source is FeatureSource.TEMPLATE


class TestSubtypes:
    @pytest.mark.parametrize(
        "name,description,expected",
        [
            ("NGC 1300", "A barred spiral galaxy", "barred spiral"),
            ("M87", "Giant elliptical galaxy", "elliptical"),
            ("Andromeda Galaxy", None, "spiral"),
            ("Large Magellanic Cloud", None, "irregular"),
            ("NGC 4214", "A dwarf galaxy", "dwarf irregular"),
            ("NGC 9999", None, "spiral"),
        ],
    )
    def test_galaxy(self, name, description, expected):
        assert derive_galaxy_type(name, description) == expected

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Ring Nebula", "planetary"),
            ("Crab", "supernova remnant"),
            ("M1", "supernova remnant"),
            ("M16", "emission"),
            ("Pleiades", "reflection"),
            ("Sh2-101", "emission"),
        ],
    )
    def test_nebula_name_hints(self, name, expected):
        assert derive_nebula_type(name) == expected

    def test_nebula_keywords_before_name_hints(self):
        assert derive_nebula_type("Orion", "A dark molecular cloud") == "dark"

    def test_hot_jupiter_checked_before_gas_giant(self):
        assert derive_planet_type("WASP-12b", "A hot jupiter on a tight orbit") == "hot jupiter"

    @pytest.mark.parametrize(
        "mass_solar,expected",
        [
            (1.0e-3, "gas giant"),  # ~333 Earth masses
            (6.0e-5, "ice giant"),  # ~20
            (1.0e-5, "super-earth"),  # ~3.3
            (3.0e-6, "terrestrial"),  # ~1.0
        ],
    )
    def test_planet_mass_is_converted_to_earth_masses(self, mass_solar, expected):
        assert derive_planet_type("Kepler-0b", None, mass_solar) == expected

    def test_planet_default(self):
        assert derive_planet_type("Kepler-0b") == "terrestrial"

    @pytest.mark.parametrize(
        "mass,expected",
        [(4.0e6, "supermassive"), (500.0, "intermediate-mass"), (10.0, "stellar-mass"), (None, "supermassive")],
    )
    def test_black_hole_mass(self, mass, expected):
        assert derive_black_hole_type(None, mass) == expected

    def test_black_hole_known_size_wins(self):
        attrs = _derive(CYGNUS_X1)
        assert attrs.famous_key == "cygnus x-1"
        assert attrs.sub_type == "stellar-mass"

    def test_explicit_sub_type_wins(self):
        attrs = _derive({"name": "Betelgeuse", "category": "Star", "spectralType": "M2Iab", "subType": "pulsating"})
        assert attrs.sub_type == "pulsating"

    def test_star_cluster(self):
        assert _derive({"name": "M13", "category": "Star Cluster", "description": "Great globular"}).sub_type == "globular"
        assert _derive({"name": "Pleiades", "category": "Star Cluster"}).sub_type == "open"

    def test_unrecognized_category_lowercased(self):
        assert _derive({"name": "Ceres", "category": "Asteroid"}).sub_type == "asteroid"


class TestStarDerivation:
    def test_betelgeuse(self):
        attrs = _derive(BETELGEUSE)
        assert attrs.sub_type == "red supergiant"
        assert attrs.spectral.spectral_class is SpectralClass.M
        assert attrs.star.granulation == SUPERGIANT_GRANULATION
        assert attrs.star.frame_fill == 80
        assert attrs.derived_features == list(STELLAR_PROFILES[SpectralClass.M].supergiant_features)
        assert attrs.features_used == attrs.derived_features
        assert not attrs.is_flare

    def test_spectral_derivation_can_be_disabled(self):
        attrs = _derive(BETELGEUSE, derive_features_from_spectral=False)
        assert attrs.derived_features == []
        assert attrs.star.granulation == SUPERGIANT_GRANULATION

    def test_explicit_visual_features_suppress_derivation(self):
        attrs = _derive({**BETELGEUSE, "visualFeatures": ["Asymmetric bright hotspot"]})
        assert attrs.derived_features == []
        assert attrs.features_used == ["Asymmetric bright hotspot"]

    def test_flare_star(self):
        attrs = _derive(PROXIMA)
        assert attrs.is_flare
        assert attrs.star.starspots == FLARE_STARSPOTS
        assert attrs.derived_features[-2:] == list(FLARE_FEATURES)

    def test_flare_star_without_spectral_type(self):
        attrs = _derive({"name": "UV Ceti", "category": "Star"})
        assert attrs.is_flare
        assert attrs.derived_features == list(FLARE_FEATURES)

    def test_flare_heuristic_is_star_only(self):
        attrs = _derive({"name": "Wolf-Rayet Nebula", "category": "Nebula"})
        assert not attrs.is_flare


class TestOverrides:
    def test_famous_nebula(self):
        attrs = _derive(EAGLE_NEBULA)
        eagle = FAMOUS_NEBULAE["eagle"]
        assert attrs.nebula_type == "emission"
        assert attrs.structure_details == eagle.specific_features
        assert attrs.structure_source is FeatureSource.FAMOUS
        assert attrs.color == eagle.color_notes
        assert attrs.color_source is FeatureSource.FAMOUS
        assert attrs.features_used == [eagle.specific_features]

    def test_famous_table_serves_supernova_remnants(self):
        attrs = _derive({"name": "Crab Nebula", "category": "Supernova Remnant"})
        assert attrs.famous_key == "crab"
        assert attrs.nebula_type == "supernova remnant"

    def test_explicit_beats_famous(self):
        attrs = _derive({**EAGLE_NEBULA, "structureDetails": "three dark columns", "colorDescription": "teal"})
        assert attrs.structure_details == "three dark columns"
        assert attrs.structure_source is FeatureSource.EXPLICIT
        assert attrs.color == "teal"
        assert attrs.color_source is FeatureSource.EXPLICIT

    def test_visual_features_appended_to_structure(self):
        attrs = _derive(
            {"name": "NGC 1300", "category": "Galaxy", "galaxyType": "barred spiral", "visualFeatures": ["a", "b", "c", "d"]}
        )
        assert attrs.structure_details == f"{GALAXY_STRUCTURE['barred spiral']}, a, b, c"

    def test_famous_dwarf_planet_surface(self):
        attrs = _derive(PLUTO)
        pluto = FAMOUS_DWARF_PLANETS["pluto"]
        assert attrs.surface_features == pluto.surface_features
        assert attrs.surface_source is FeatureSource.FAMOUS
        assert attrs.color == pluto.color_notes

    def test_dwarf_planet_default_color(self):
        attrs = _derive({"name": "Gonggong", "category": "Dwarf Planet"})
        assert attrs.color == PLANET_COLORS["dwarf planet"]

    def test_moon_defaults(self):
        attrs = _derive({"name": "Callisto", "category": "Moon"})
        assert attrs.color == MOON_COLOR
        assert attrs.surface_features == MOON_SURFACE

    def test_category_default_structure(self):
        attrs = _derive({"name": "NGC 4486", "category": "Galaxy", "galaxyType": "Elliptical"})
        assert attrs.structure_details == GALAXY_STRUCTURE["elliptical"]
        assert attrs.structure_source is FeatureSource.TEMPLATE

    def test_missing_optional_fields(self):
        attrs = _derive({"name": "XYZ-001"})
        assert attrs.structure_details is None
        assert attrs.color is None
        assert attrs.features_used == []
