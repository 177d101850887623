"""Compiler configuration: engine knobs independent of the HTTP settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CompilerConfig:
    """Controls derivation, scoring thresholds and generation logging."""

    # Explicit visual features appended to structure text
    max_visual_features: int = 3

    # Spectral derivation (category Star only)
    derive_features_from_spectral: bool = True

    # Batch statistics buckets
    low_confidence_threshold: float = 0.5  # score < threshold
    high_confidence_threshold: float = 0.8  # score >= threshold

    # Generation log
    enable_logging: bool = True
    log_capacity: int = 10_000
