"""
Helpers for validating metric value changes during tests.
"""

from contextlib import contextmanager


def get_histogram_count(histogram):
    """Get the current observation count for a histogram."""
    for metric in histogram.collect():
        for sample in metric.samples:
            if sample.name.endswith("_count"):
                return sample.value
    return 0.0


@contextmanager
def metric_delta(metric, expected_delta=1):
    """
    Context manager to validate a counter change.

    Usage:
        with metric_delta(METRICS["extractions_total"].labels(strategy="structural")):
            pipeline.extract(html, url)
    """
    if not hasattr(metric, "_value"):
        raise ValueError(f"Metric {metric} doesn't have a _value attribute")

    initial_value = metric._value.get()
    yield
    actual_delta = metric._value.get() - initial_value

    if actual_delta != expected_delta:
        raise AssertionError(
            f"Expected metric to change by {expected_delta}, "
            f"but it changed by {actual_delta} "
            f"(from {initial_value} to {initial_value + actual_delta})"
        )


@contextmanager
def histogram_observes(histogram, expected_count=1):
    """Context manager to validate the number of histogram observations."""
    initial_count = get_histogram_count(histogram)
    yield
    actual = get_histogram_count(histogram) - initial_count

    if actual != expected_count:
        raise AssertionError(f"Expected {expected_count} histogram observations, got {actual}")
