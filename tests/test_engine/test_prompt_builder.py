"""Tests for template filling and prompt layout."""

from __future__ import annotations

import logging

import pytest

from astroprompt.engine.derivation import derive_attributes
from astroprompt.engine.lookup import FAMOUS_BLACK_HOLES
from astroprompt.engine.prompt_builder import build_prompt, fill, fix_articles, tidy
from astroprompt.engine.templates import PROMPT_TEMPLATES, get_template
from astroprompt.models.records import ObjectCategory, ObjectRecord
from tests.conftest import BETELGEUSE, PLUTO

SECTION_PREFIXES = (
    "Photorealistic photograph of ",
    "Visual characteristics: ",
    "Style: ",
    "Colors: ",
    "Lighting: ",
    "Quality: ",
    "Medium: ",
)


def _build(data: dict) -> str:
    record = ObjectRecord.model_validate(data)
    return build_prompt(record, derive_attributes(record))


class TestTemplates:
    def test_one_template_per_category(self):
        assert set(PROMPT_TEMPLATES) == set(ObjectCategory)

    def test_unknown_fallback(self):
        assert get_template(None) is PROMPT_TEMPLATES[ObjectCategory.UNKNOWN]

    def test_templates_are_read_only(self):
        with pytest.raises(TypeError):
            PROMPT_TEMPLATES[ObjectCategory.STAR] = PROMPT_TEMPLATES[ObjectCategory.UNKNOWN]


class TestHelpers:
    def test_fill_known_markers(self):
        assert fill("a {color} cloud", {"color": "red"}) == "a red cloud"

    def test_fill_drops_unknown_markers(self, caplog):
        with caplog.at_level(logging.WARNING, logger="astroprompt.engine.prompt_builder"):
            assert fill("a {mystery} cloud", {}) == "a  cloud"
        assert "mystery" in caplog.text

    def test_tidy(self):
        assert tidy("a,  , b ,,c   d") == "a, b, c d"
        assert tidy("a  b, c", list_like=False) == "a b, c"

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("a ice giant planet", "an ice giant planet"),
            ("A open star cluster", "An open star cluster"),
            ("a red supergiant", "a red supergiant"),
            ("an astronomical object", "an astronomical object"),
        ],
    )
    def test_fix_articles(self, text, expected):
        assert fix_articles(text) == expected


class TestBuildPrompt:
    def test_layout(self):
        prompt = _build(BETELGEUSE)
        sections = prompt.split("\n\n")
        assert len(sections) == len(SECTION_PREFIXES)
        for section, prefix in zip(sections, SECTION_PREFIXES):
            assert section.startswith(prefix)

    def test_name_follows_description(self):
        prompt = _build(BETELGEUSE)
        assert prompt.startswith("Photorealistic photograph of a red supergiant stellar surface. (Betelgeuse)")

    def test_star_slots(self):
        prompt = _build(BETELGEUSE)
        assert "giant coarse mottled granulation texture" in prompt
        assert "single star filling 80% of frame" in prompt
        assert "Colors: deep scarlet-orange surface, rust-crimson limb" in prompt
        assert "Medium: Space telescope infrared photography" in prompt

    def test_hot_star_temperature(self):
        prompt = _build({"name": "Rigel", "category": "Star", "spectralType": "B8Ia"})
        assert "of a hot blue supergiant stellar surface." in prompt
        assert "ultraviolet photography" in prompt

    @pytest.mark.parametrize("category", list(ObjectCategory))
    def test_no_placeholders_remain(self, category):
        prompt = _build({"name": "Test Object", "category": category.value})
        assert "{" not in prompt and "}" not in prompt

    def test_unrecognized_category_uses_fallback(self):
        prompt = _build({"name": "Ceres", "category": "Asteroid"})
        assert "an astronomical object in deep space" in prompt

    def test_explicit_color_replaces_fixed_pattern(self):
        prompt = _build({**BETELGEUSE, "colorDescription": "pale orange with bright limb"})
        assert "Colors: pale orange with bright limb\n" in prompt

    def test_explicit_structure_appended_without_slot(self):
        prompt = _build({"name": "Gaia BH1", "category": "Black Hole", "structureDetails": "faint companion star"})
        visual = prompt.split("\n\n")[1]
        assert visual.endswith(", faint companion star")

    def test_famous_structure_appended_without_slot(self):
        prompt = _build({"name": "M87", "category": "Black Hole"})
        assert FAMOUS_BLACK_HOLES["m87"].specific_features in prompt
        assert FAMOUS_BLACK_HOLES["m87"].color_notes in prompt

    def test_visual_features_reach_dwarf_planet_prompt(self):
        prompt = _build(PLUTO)
        assert "Heart-shaped Tombaugh Regio, Sputnik Planitia ice plain" in prompt

    def test_visual_characteristics_override(self, caplog):
        with caplog.at_level(logging.WARNING, logger="astroprompt.engine.prompt_builder"):
            prompt = _build(
                {
                    "name": "Vega",
                    "category": "Star",
                    "visualCharacteristics": "Bright disk, {granulation} texture, {unknownSlot} glow, centered in frame",
                }
            )
        assert "Visual characteristics: Bright disk, visible texture, glow, centered in frame" in prompt
        assert "unknownSlot" in caplog.text

    def test_article_agrees_with_subtype(self):
        prompt = _build({"name": "NGC 7000", "category": "Nebula"})
        assert "of an emission nebula in deep space." in prompt
        assert "a emission" not in prompt

    def test_barred_spiral_structure(self):
        prompt = _build({"name": "NGC 1300", "category": "Galaxy", "description": "A barred spiral galaxy"})
        assert "a barred spiral galaxy viewed from deep space" in prompt
        assert "PROMINENT ELONGATED CENTRAL BAR" in prompt
