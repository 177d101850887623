"""Prompt compiler: classify, derive, build, negative, validate, score."""

from __future__ import annotations

import logging
import time
from collections import Counter
from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from typing import Any

from astroprompt.audit.store import GenerationLogStore
from astroprompt.engine.config import CompilerConfig
from astroprompt.engine.confidence import ConfidenceSignals, calculate_confidence
from astroprompt.engine.derivation import derive_attributes
from astroprompt.engine.negative import get_negative_prompt
from astroprompt.engine.prompt_builder import build_prompt
from astroprompt.engine.validation import validate_prompt
from astroprompt.models.compilation import (
    BatchReport,
    BatchResult,
    BatchStatistics,
    CompilationResult,
    ConfidenceDistribution,
    GenerationLogEntry,
)
from astroprompt.models.records import ObjectRecord

logger = logging.getLogger(__name__)

RecordInput = ObjectRecord | Mapping[str, Any]


class PromptCompiler:
    """Compiles object records into prompts, one at a time or in batches."""

    def __init__(
        self,
        config: CompilerConfig | None = None,
        log_store: GenerationLogStore | None = None,
    ) -> None:
        self.config = config or CompilerConfig()
        if log_store is None and self.config.enable_logging:
            log_store = GenerationLogStore(capacity=self.config.log_capacity)
        self.log_store = log_store

    def compile(self, record: RecordInput) -> CompilationResult:
        """Compile one record. Raises pydantic.ValidationError for malformed mappings."""
        start = time.perf_counter()
        if not isinstance(record, ObjectRecord):
            record = ObjectRecord.model_validate(record)

        category = record.object_category
        attrs = derive_attributes(record, category, self.config)
        prompt = build_prompt(record, attrs)
        negative_prompt = get_negative_prompt(attrs.category, attrs.galaxy_type)
        validation = validate_prompt(prompt)
        confidence = calculate_confidence(
            category,
            ConfidenceSignals(
                has_explicit_visual_features=bool(record.visual_features),
                has_spectral_type=attrs.spectral is not None,
                has_famous_features=attrs.has_famous_features,
                has_color_description=record.color_description is not None,
                has_structure_details=bool(record.structure_details or record.surface_features),
                validation_warnings=validation.warnings,
            ),
        )

        elapsed = (time.perf_counter() - start) * 1000
        result = CompilationResult(
            object_id=record.id,
            name=record.name,
            category=record.category,
            prompt=prompt,
            negative_prompt=negative_prompt,
            validation=validation,
            confidence=confidence,
            features_used=attrs.features_used,
            duration_ms=round(elapsed, 3),
        )
        logger.debug(
            "  %s [%s] compiled in %.1fms (confidence %.2f, source %s)",
            record.name,
            record.category,
            elapsed,
            confidence.score,
            confidence.feature_source.value,
        )

        if self.config.enable_logging and self.log_store is not None:
            self.log_store.append(_log_entry(result))
        return result

    def compile_batch(self, records: Iterable[RecordInput]) -> BatchReport:
        """Compile many records. A failing record becomes an error row; the batch never raises."""
        start = time.perf_counter()
        rows: list[BatchResult] = []

        for i, raw in enumerate(records):
            try:
                result = self.compile(raw)
            except Exception as e:
                label = _label(raw, i)
                logger.warning("  %s FAILED: %s", label, e)
                rows.append(_failed_row(raw, e))
                continue
            rows.append(
                BatchResult(
                    object_id=result.object_id,
                    name=result.name,
                    category=result.category,
                    prompt=result.prompt,
                    negative_prompt=result.negative_prompt,
                    valid=result.validation.valid,
                    warnings=result.validation.warnings,
                    confidence=result.confidence,
                )
            )

        statistics = self.summarize(rows)
        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Batch complete: %d/%d compiled (%d valid) in %.0fms",
            statistics.succeeded,
            statistics.total,
            statistics.valid,
            total,
        )
        return BatchReport(results=rows, statistics=statistics)

    def summarize(self, results: Iterable[BatchResult]) -> BatchStatistics:
        rows = list(results)
        if not rows:
            return BatchStatistics()

        scored = [r for r in rows if r.error is None and r.confidence is not None]
        scores = [r.confidence.score for r in scored]
        valid = sum(1 for r in rows if r.valid)

        distribution = ConfidenceDistribution()
        if scores:
            distribution = ConfidenceDistribution(
                average=round(sum(scores) / len(scores), 2),
                min=min(scores),
                max=max(scores),
                by_feature_source=dict(Counter(r.confidence.feature_source.value for r in scored)),
                low_confidence_count=sum(1 for s in scores if s < self.config.low_confidence_threshold),
                high_confidence_count=sum(1 for s in scores if s >= self.config.high_confidence_threshold),
            )

        return BatchStatistics(
            total=len(rows),
            succeeded=len(scored),
            failed=len(rows) - len(scored),
            valid=valid,
            with_warnings=sum(1 for r in scored if r.warnings),
            validity_rate=round(valid / len(rows), 2),
            by_category=dict(Counter(r.category for r in rows)),
            confidence=distribution,
        )


def _log_entry(result: CompilationResult) -> GenerationLogEntry:
    return GenerationLogEntry(
        timestamp=datetime.now(timezone.utc),
        object_id=result.object_id,
        name=result.name,
        category=result.category,
        confidence=result.confidence,
        prompt_length=len(result.prompt),
        validation_warnings=result.validation.warnings,
        feature_source=result.confidence.feature_source,
        features_used=result.features_used,
        duration_ms=result.duration_ms,
    )


def _label(raw: Any, index: int) -> str:
    if isinstance(raw, ObjectRecord):
        return raw.name
    if isinstance(raw, Mapping) and raw.get("name"):
        return str(raw["name"])
    return f"record[{index}]"


def _failed_row(raw: Any, error: Exception) -> BatchResult:
    if isinstance(raw, ObjectRecord):
        return BatchResult(object_id=raw.id, name=raw.name, category=raw.category, error=str(error))

    object_id = name = category = None
    if isinstance(raw, Mapping):
        object_id = raw.get("id")
        name = raw.get("name")
        category = raw.get("category") or raw.get("objectType")
    return BatchResult(
        object_id=object_id if isinstance(object_id, (int, str)) else None,
        name=name if isinstance(name, str) else "",
        category=category if isinstance(category, str) else "Unknown",
        error=str(error),
    )


def create_compiler(
    config: CompilerConfig | None = None,
    log_store: GenerationLogStore | None = None,
) -> PromptCompiler:
    """Factory function for creating a compiler instance."""
    return PromptCompiler(config=config, log_store=log_store)
