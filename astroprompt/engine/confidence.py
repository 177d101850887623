"""Confidence scorer: how much of a prompt was supplied versus inferred."""

from __future__ import annotations

from dataclasses import dataclass, field

from astroprompt.models.compilation import ConfidenceFactors, FeatureSource, PromptConfidence
from astroprompt.models.records import ObjectCategory

# Sums to 1.0; explicit visual features carry the most weight
WEIGHTS: dict[str, float] = {
    "has_template": 0.15,
    "has_explicit_visual_features": 0.25,
    "has_spectral_type": 0.15,
    "has_famous_object_features": 0.20,
    "passes_validation": 0.10,
    "has_color_description": 0.08,
    "has_structure_details": 0.07,
}


@dataclass
class ConfidenceSignals:
    has_explicit_visual_features: bool = False
    has_spectral_type: bool = False
    has_famous_features: bool = False
    has_color_description: bool = False
    has_structure_details: bool = False
    validation_warnings: list[str] = field(default_factory=list)


def select_feature_source(category: ObjectCategory | None, factors: ConfidenceFactors) -> FeatureSource:
    if factors.has_explicit_visual_features:
        return FeatureSource.EXPLICIT
    if factors.has_famous_object_features:
        return FeatureSource.FAMOUS
    if factors.has_spectral_type and category is ObjectCategory.STAR:
        return FeatureSource.SPECTRAL
    if factors.has_template:
        return FeatureSource.TEMPLATE
    return FeatureSource.DEFAULT


def calculate_confidence(category: ObjectCategory | None, signals: ConfidenceSignals) -> PromptConfidence:
    """Score a compiled prompt from its factor set.

    ``category`` is None when the record's label is outside the known set;
    such records have no dedicated template.
    """
    factors = ConfidenceFactors(
        has_template=category is not None,
        has_explicit_visual_features=signals.has_explicit_visual_features,
        has_spectral_type=signals.has_spectral_type,
        has_famous_object_features=signals.has_famous_features,
        passes_validation=not signals.validation_warnings,
        has_color_description=signals.has_color_description,
        has_structure_details=signals.has_structure_details,
    )

    raw = sum(weight for name, weight in WEIGHTS.items() if getattr(factors, name))
    score = min(1.0, max(0.0, round(raw, 2)))

    recommendations: list[str] = []
    if not signals.has_explicit_visual_features:
        recommendations.append("Add explicit visual features for best results")
    if not signals.has_spectral_type and category is ObjectCategory.STAR:
        recommendations.append("Add spectral type for automatic feature derivation")
    if signals.validation_warnings:
        recommendations.append(f"Fix {len(signals.validation_warnings)} validation warning(s)")
    if not signals.has_color_description and not signals.has_spectral_type:
        recommendations.append("Add color description for accurate rendering")

    return PromptConfidence(
        score=score,
        factors=factors,
        feature_source=select_feature_source(category, factors),
        recommendations=recommendations,
    )
