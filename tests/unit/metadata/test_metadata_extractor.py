"""
Unit tests for MetadataExtractor.
"""

from unittest.mock import patch

from pagesift.config.config import ExtractionSettings
from pagesift.extractor.models import Heading
from pagesift.metadata.metadata_extractor import MetadataExtractor, PageMetadata
from pagesift.observability.metrics import METRICS
from tests.helpers.html_samples import ARTICLE_HTML, BASE_URL
from tests.helpers.metric_delta import metric_delta


class TestMetadataExtractor:
    """Test cases for MetadataExtractor."""

    def test_article_metadata(self):
        metadata = MetadataExtractor(record_metrics=False).extract(ARTICLE_HTML, BASE_URL)

        assert metadata.title == "Understanding Python Generators"
        assert metadata.meta_description == "A practical guide to generators."
        assert metadata.meta_keywords == "python, generators"
        assert metadata.language == "en"
        assert metadata.canonical_url == "https://example.com/posts/generators"
        assert metadata.site_name == "Example Blog"
        assert metadata.author == "Jane Doe"
        assert metadata.published_at == "2024-03-01T10:00:00Z"
        assert metadata.og_title == "Generators in Python"
        assert metadata.og_description == "Lazy sequences explained."
        assert metadata.og_image == "https://example.com/static/cover.png"
        assert metadata.headings == [
            Heading(1, "Understanding Python Generators"),
            Heading(2, "Lazy evaluation"),
            Heading(2, "Pipelines"),
        ]
        assert [link.url for link in metadata.links] == [
            "https://example.com/posts/iterators",
            "https://docs.python.org/3/",
            "https://example.com/posts/itertools",
        ]
        assert [image.alt for image in metadata.images] == ["Generator diagram"]
        assert [block.language for block in metadata.code_blocks] == [None, "python"]

    def test_empty_document_defaults(self):
        assert MetadataExtractor(record_metrics=False).extract("", BASE_URL) == PageMetadata()

    def test_language_detection_disabled(self):
        html = "<html><body><p>Plain English text without any declared language at all.</p></body></html>"
        extractor = MetadataExtractor(ExtractionSettings(detect_language=False), record_metrics=False)
        assert extractor.extract(html, BASE_URL).language == "unknown"

    def test_language_detected_from_content(self):
        html = (
            "<html><body><p>The committee published its annual report on Tuesday, describing how the "
            "city plans to improve public transport and build new parks for families.</p></body></html>"
        )
        assert MetadataExtractor(record_metrics=False).extract(html, BASE_URL).language == "en"

    def test_failing_step_uses_default(self):
        extractor = MetadataExtractor(record_metrics=True)
        counter = METRICS["metadata_errors_total"].labels(field="title")

        with patch(
            "pagesift.metadata.metadata_extractor.MetaTagParser.title", side_effect=RuntimeError("boom")
        ), metric_delta(counter):
            metadata = extractor.extract(ARTICLE_HTML, BASE_URL)

        assert metadata.title == "No Title"
        assert metadata.author == "Jane Doe"
