"""Generation log store: bounded in-memory history of compilations.

Oldest entries are evicted once capacity is reached. Appends and reads are
serialized by a lock so request threads can share one store.
"""

from __future__ import annotations

import logging
import threading
from collections import Counter, deque

from astroprompt.models.compilation import CategoryConfidence, GenerationLogEntry, GenerationStats

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 10_000


class GenerationLogStore:
    """Lock-guarded FIFO ring buffer of GenerationLogEntry records."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._entries: deque[GenerationLogEntry] = deque(maxlen=capacity)
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._entries.maxlen or 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def append(self, entry: GenerationLogEntry) -> None:
        with self._lock:
            self._entries.append(entry)

    def get_logs(
        self,
        category: str | None = None,
        min_confidence: float | None = None,
        has_warnings: bool | None = None,
        limit: int | None = None,
    ) -> list[GenerationLogEntry]:
        """Filtered entries, most recent first."""
        if limit is not None and limit <= 0:
            return []
        with self._lock:
            snapshot = list(self._entries)

        result: list[GenerationLogEntry] = []
        for entry in reversed(snapshot):
            if category is not None and entry.category != category:
                continue
            if min_confidence is not None and entry.confidence.score < min_confidence:
                continue
            if has_warnings is not None and bool(entry.validation_warnings) != has_warnings:
                continue
            result.append(entry)
            if limit is not None and len(result) >= limit:
                break
        return result

    def stats(self) -> GenerationStats:
        with self._lock:
            snapshot = list(self._entries)

        if not snapshot:
            return GenerationStats()

        totals: dict[str, float] = {}
        counts: Counter[str] = Counter()
        sources: Counter[str] = Counter()
        with_warnings = 0
        for entry in snapshot:
            score = entry.confidence.score
            counts[entry.category] += 1
            totals[entry.category] = totals.get(entry.category, 0.0) + score
            sources[entry.confidence.feature_source.value] += 1
            if entry.validation_warnings:
                with_warnings += 1

        n = len(snapshot)
        return GenerationStats(
            total_generated=n,
            average_confidence=round(sum(totals.values()) / n, 2),
            by_category={
                cat: CategoryConfidence(count=count, average_confidence=round(totals[cat] / count, 2))
                for cat, count in counts.items()
            },
            by_feature_source=dict(sources),
            warning_rate=round(with_warnings / n, 2),
        )

    def clear(self) -> int:
        """Drop every entry. Returns how many were removed."""
        with self._lock:
            removed = len(self._entries)
            self._entries.clear()
        logger.info("Cleared %d generation log entries", removed)
        return removed


# Singleton
_store: GenerationLogStore | None = None


def get_log_store() -> GenerationLogStore:
    """Get or create the process-wide GenerationLogStore."""
    global _store
    if _store is None:
        from astroprompt.config import settings

        _store = GenerationLogStore(capacity=settings.log_capacity)
    return _store
