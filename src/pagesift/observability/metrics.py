"""
Defines Prometheus metrics for the extraction pipeline.
"""

from __future__ import annotations

from typing import Any, Dict

from prometheus_client import REGISTRY as _PROM_REGISTRY
from prometheus_client import Counter as _OrigCounter
from prometheus_client import Histogram as _OrigHistogram

# ---------------------------------------------------------------------------
# Duplicate-safe Prometheus metric wrappers
# ---------------------------------------------------------------------------
# Importing this module more than once (test reloads, multiple interpreters
# sharing the default registry) must not raise duplicate registration errors.


def _duplicate_safe_factory(metric_cls):
    """Return a factory that reuses an existing collector if already present."""

    def _factory(name: str, documentation: str, *args, **kwargs):  # type: ignore[override]
        existing = _PROM_REGISTRY._names_to_collectors.get(name)
        if existing is not None:
            return existing  # type: ignore[return-value]

        try:
            return metric_cls(name, documentation, *args, **kwargs)  # type: ignore[call-arg]
        except ValueError:
            # Registration lost the race, fall back to the now-existing collector.
            return _PROM_REGISTRY._names_to_collectors[name]  # type: ignore[return-value]

    return _factory


Counter = _duplicate_safe_factory(_OrigCounter)  # type: ignore[assignment]
Histogram = _duplicate_safe_factory(_OrigHistogram)  # type: ignore[assignment]


def _create_metrics() -> Dict[str, Any]:
    return {
        "extractions_total": Counter(
            "pagesift_extractions_total",
            "Documents extracted, by the strategy that produced the final text",
            ["strategy"],
        ),
        "extraction_duration_seconds": Histogram(
            "pagesift_extraction_duration_seconds",
            "Time taken to extract one document",
            buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
        ),
        "extraction_score": Histogram(
            "pagesift_extraction_score",
            "Distribution of document extraction scores",
            buckets=[0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9, 1.0],
        ),
        "metadata_errors_total": Counter(
            "pagesift_metadata_errors_total",
            "Metadata extraction steps that failed and fell back to their default",
            ["field"],
        ),
    }


METRICS: Dict[str, Any] = _create_metrics()


def record_extraction(strategy: str, duration_seconds: float, score: float) -> None:
    """Record one completed extraction."""
    METRICS["extractions_total"].labels(strategy=strategy).inc()
    METRICS["extraction_duration_seconds"].observe(duration_seconds)
    METRICS["extraction_score"].observe(score)


def record_metadata_error(field: str) -> None:
    """Record a metadata step that fell back to its default."""
    METRICS["metadata_errors_total"].labels(field=field).inc()
