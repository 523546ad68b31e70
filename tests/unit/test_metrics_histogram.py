"""
Unit tests for the Prometheus metrics helpers.
"""

from pagesift.observability import export_prometheus
from pagesift.observability.metrics import METRICS, Counter, record_extraction, record_metadata_error
from tests.helpers.metric_delta import histogram_observes, metric_delta


class TestMetrics:
    """Test cases for metric registration and recording."""

    def test_duplicate_registration_reuses_collector(self):
        again = Counter(
            "pagesift_extractions_total",
            "Documents extracted, by the strategy that produced the final text",
            ["strategy"],
        )
        assert again is METRICS["extractions_total"]

    def test_record_extraction(self):
        counter = METRICS["extractions_total"].labels(strategy="heuristic")

        with metric_delta(counter), histogram_observes(METRICS["extraction_duration_seconds"]), histogram_observes(
            METRICS["extraction_score"]
        ):
            record_extraction("heuristic", 0.02, 0.75)

    def test_record_metadata_error(self):
        with metric_delta(METRICS["metadata_errors_total"].labels(field="og_image")):
            record_metadata_error("og_image")

    def test_export(self):
        record_extraction("fallback", 0.01, 0.3)
        exported = export_prometheus()
        assert 'pagesift_extractions_total{strategy="fallback"}' in exported
        assert "pagesift_extraction_score_bucket" in exported
