"""
Shared fixtures for the pagesift test suite.
"""

import os

import pytest

from pagesift.config.config import ExtractionSettings, LazyConfig
from pagesift.pipeline import DocumentPipeline, default_pipeline
from tests.helpers.html_samples import ARTICLE_HTML, BASE_URL


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests across modules")


@pytest.fixture
def article_html() -> str:
    return ARTICLE_HTML


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def extraction_settings() -> ExtractionSettings:
    """Default extraction settings."""
    return ExtractionSettings()


@pytest.fixture
def pipeline(extraction_settings) -> DocumentPipeline:
    """Pipeline that leaves the Prometheus registry alone."""
    return DocumentPipeline(extraction_settings, record_metrics=False)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep the global settings from reading the host's files or environment."""
    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.startswith("PAGESIFT_"):
            monkeypatch.delenv(name)
    LazyConfig.reset()
    default_pipeline.cache_clear()
    yield
    LazyConfig.reset()
    default_pipeline.cache_clear()
