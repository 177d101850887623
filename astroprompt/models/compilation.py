"""Compilation output models: the structured, serializable results of the engine."""

from __future__ import annotations

import enum
from datetime import datetime

from pydantic import BaseModel, Field


class FeatureSource(str, enum.Enum):
    """Provenance tier of an object's visual descriptors, highest first."""

    EXPLICIT = "explicit"
    FAMOUS = "famous"
    SPECTRAL = "spectral"
    TEMPLATE = "template"
    DEFAULT = "default"


class ValidationResult(BaseModel):
    valid: bool = True
    warnings: list[str] = Field(default_factory=list)


class ConfidenceFactors(BaseModel):
    has_template: bool = False
    has_explicit_visual_features: bool = False
    has_spectral_type: bool = False
    has_famous_object_features: bool = False
    passes_validation: bool = False
    has_color_description: bool = False
    has_structure_details: bool = False


class PromptConfidence(BaseModel):
    score: float = Field(0.0, ge=0.0, le=1.0)
    factors: ConfidenceFactors = Field(default_factory=ConfidenceFactors)
    feature_source: FeatureSource = FeatureSource.DEFAULT
    recommendations: list[str] = Field(default_factory=list)


class CompilationResult(BaseModel):
    object_id: int | str | None = None
    name: str
    category: str
    prompt: str
    negative_prompt: str
    validation: ValidationResult
    confidence: PromptConfidence
    features_used: list[str] = Field(default_factory=list)
    duration_ms: float = 0.0


class GenerationLogEntry(BaseModel):
    timestamp: datetime
    object_id: int | str | None = None
    name: str
    category: str
    confidence: PromptConfidence
    prompt_length: int = 0
    validation_warnings: list[str] = Field(default_factory=list)
    feature_source: FeatureSource = FeatureSource.DEFAULT
    features_used: list[str] = Field(default_factory=list)
    duration_ms: float = 0.0


class CategoryConfidence(BaseModel):
    count: int = 0
    average_confidence: float = 0.0


class GenerationStats(BaseModel):
    total_generated: int = 0
    average_confidence: float = 0.0
    by_category: dict[str, CategoryConfidence] = Field(default_factory=dict)
    by_feature_source: dict[str, int] = Field(default_factory=dict)
    warning_rate: float = 0.0


class BatchResult(BaseModel):
    object_id: int | str | None = None
    name: str = ""
    category: str = ""
    prompt: str = ""
    negative_prompt: str = ""
    valid: bool = False
    warnings: list[str] = Field(default_factory=list)
    confidence: PromptConfidence | None = None
    error: str | None = None  # set only when compilation of this row failed


class ConfidenceDistribution(BaseModel):
    average: float = 0.0
    min: float = 0.0
    max: float = 0.0
    by_feature_source: dict[str, int] = Field(default_factory=dict)
    low_confidence_count: int = 0  # score < 0.5
    high_confidence_count: int = 0  # score >= 0.8


class BatchStatistics(BaseModel):
    total: int = 0
    succeeded: int = 0
    failed: int = 0
    valid: int = 0
    with_warnings: int = 0
    validity_rate: float = 0.0
    by_category: dict[str, int] = Field(default_factory=dict)
    confidence: ConfidenceDistribution = Field(default_factory=ConfidenceDistribution)


class BatchReport(BaseModel):
    results: list[BatchResult] = Field(default_factory=list)
    statistics: BatchStatistics = Field(default_factory=BatchStatistics)
