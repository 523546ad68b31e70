"""Logging and metrics for the extraction pipeline."""

from __future__ import annotations

from .logging import configure_logging
from .metrics import METRICS, record_extraction, record_metadata_error

__all__ = ["configure_logging", "METRICS", "record_extraction", "record_metadata_error", "export_prometheus"]


def export_prometheus() -> str:
    """Export metrics in Prometheus format."""
    from prometheus_client import generate_latest

    return generate_latest().decode("utf-8")
