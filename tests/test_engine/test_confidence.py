"""Tests for confidence scoring."""

from __future__ import annotations

import itertools

import pytest

from astroprompt.engine.confidence import WEIGHTS, ConfidenceSignals, calculate_confidence
from astroprompt.models.compilation import FeatureSource
from astroprompt.models.records import ObjectCategory


class TestCalculateConfidence:
    def test_weights_sum_to_one(self):
        assert sum(WEIGHTS.values()) == pytest.approx(1.0)

    def test_template_and_validation(self):
        conf = calculate_confidence(ObjectCategory.UNKNOWN, ConfidenceSignals())
        assert conf.score == 0.25
        assert conf.feature_source is FeatureSource.TEMPLATE
        assert conf.factors.has_template
        assert conf.factors.passes_validation

    def test_unrecognized_category_has_no_template(self):
        conf = calculate_confidence(None, ConfidenceSignals(validation_warnings=["x"]))
        assert conf.score == 0.0
        assert conf.feature_source is FeatureSource.DEFAULT
        assert not conf.factors.has_template

    def test_all_factors(self):
        signals = ConfidenceSignals(
            has_explicit_visual_features=True,
            has_spectral_type=True,
            has_famous_features=True,
            has_color_description=True,
            has_structure_details=True,
        )
        conf = calculate_confidence(ObjectCategory.STAR, signals)
        assert conf.score == 1.0
        assert conf.feature_source is FeatureSource.EXPLICIT

    def test_spectral_star(self):
        conf = calculate_confidence(ObjectCategory.STAR, ConfidenceSignals(has_spectral_type=True))
        assert conf.score == 0.4
        assert conf.feature_source is FeatureSource.SPECTRAL

    def test_spectral_source_is_star_only(self):
        conf = calculate_confidence(ObjectCategory.BROWN_DWARF, ConfidenceSignals(has_spectral_type=True))
        assert conf.feature_source is FeatureSource.TEMPLATE

    def test_famous_beats_spectral(self):
        conf = calculate_confidence(
            ObjectCategory.STAR, ConfidenceSignals(has_spectral_type=True, has_famous_features=True)
        )
        assert conf.feature_source is FeatureSource.FAMOUS

    def test_recommendations(self):
        conf = calculate_confidence(ObjectCategory.STAR, ConfidenceSignals(validation_warnings=["a", "b"]))
        assert conf.recommendations == [
            "Add explicit visual features for best results",
            "Add spectral type for automatic feature derivation",
            "Fix 2 validation warning(s)",
            "Add color description for accurate rendering",
        ]

    def test_no_recommendations_when_complete(self):
        conf = calculate_confidence(
            ObjectCategory.STAR,
            ConfidenceSignals(has_explicit_visual_features=True, has_spectral_type=True),
        )
        assert conf.recommendations == []

    def test_score_bounded_for_every_factor_set(self):
        for flags in itertools.product([False, True], repeat=6):
            signals = ConfidenceSignals(
                has_explicit_visual_features=flags[0],
                has_spectral_type=flags[1],
                has_famous_features=flags[2],
                has_color_description=flags[3],
                has_structure_details=flags[4],
                validation_warnings=[] if flags[5] else ["w"],
            )
            for category in (ObjectCategory.STAR, ObjectCategory.NEBULA, None):
                conf = calculate_confidence(category, signals)
                assert 0.0 <= conf.score <= 1.0
                assert conf.score == round(conf.score, 2)
