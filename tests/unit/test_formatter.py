"""
Unit tests for the display layer.
"""

import json

from pagesift.extractor.models import ExtractedDocument, Heading, Image, Link
from pagesift.formatter import annotate, render_json, render_text


def make_document(clean_text: str, *, score: float = 0.9, **overrides) -> ExtractedDocument:
    fields = {
        "url": "https://example.com/post",
        "title": "Post Title",
        "raw_html": "<html></html>",
        "clean_text": clean_text,
        "word_count": len(clean_text.split()),
        "extraction_score": score,
        "language": "en",
    }
    fields.update(overrides)
    return ExtractedDocument(**fields)


LONG_TEXT = " ".join(["word"] * 60)


class TestAnnotate:
    """Test cases for annotate."""

    def test_truncation_fields(self):
        document = make_document(LONG_TEXT)
        display = annotate(document, 100)

        assert display.truncated is True
        assert display.actual_chars == len(LONG_TEXT)
        assert display.max_chars_limit == 100
        assert document.warnings == ["content_truncated"]

    def test_no_warnings_for_good_document(self):
        display = annotate(make_document(LONG_TEXT), 10_000)
        assert display.truncated is False
        assert display.document.warnings == []

    def test_warning_order(self):
        document = make_document("only three words", score=0.1)
        annotate(document, 5)
        assert document.warnings == ["content_truncated", "short_content", "low_extraction_score"]

    def test_idempotent(self):
        document = make_document("short text", score=0.2)
        annotate(document, 10_000)
        annotate(document, 10_000)
        assert document.warnings == ["short_content", "low_extraction_score"]

    def test_custom_thresholds(self):
        document = make_document(LONG_TEXT, score=0.5)
        annotate(document, 10_000, short_content_words=100, low_score_threshold=0.6)
        assert document.warnings == ["short_content", "low_extraction_score"]


class TestRenderText:
    """Test cases for render_text."""

    def test_report_sections(self):
        document = make_document(
            LONG_TEXT,
            meta_description="About",
            meta_keywords="a, b",
            headings=[Heading(1, "Intro"), Heading(2, "Details")],
            links=[Link("https://example.com/a", "A"), Link("https://example.com/b", "")],
            images=[Image("https://example.com/i.png")],
        )
        report = render_text(annotate(document, 10_000))

        assert report.startswith("**Post Title**\n\nURL: https://example.com/post\nWord Count: 60\nLanguage: en")
        assert "- Description: About" in report
        assert "- Keywords: a, b" in report
        assert "- H1 Intro\n- H2 Details" in report
        assert "**Links Found:** 2" in report
        assert "**Images Found:** 1" in report
        assert "[1]: https://example.com/a (A)\n[2]: https://example.com/b\n" in report
        assert "Showing" not in report

    def test_truncation_notice(self):
        report = render_text(annotate(make_document(LONG_TEXT), 20))
        assert f"[Content truncated: 20/{len(LONG_TEXT)} chars shown." in report
        assert "word word word word" in report

    def test_no_content_notice(self):
        report = render_text(annotate(make_document("", score=0.0), 100))
        assert "[No content extracted]" in report

    def test_very_short_notice(self):
        report = render_text(annotate(make_document("just a few words"), 100))
        assert "**Very short content** (4 words)" in report

    def test_sources_capped(self):
        links = [Link(f"https://example.com/{i}", f"L{i}") for i in range(5)]
        report = render_text(annotate(make_document(LONG_TEXT, links=links), 10_000), max_links=2)

        assert "[2]: https://example.com/1 (L1)" in report
        assert "[3]:" not in report
        assert "(Showing 2 of 5 total links)" in report

    def test_no_links_no_sources(self):
        report = render_text(annotate(make_document(LONG_TEXT), 10_000))
        assert "**Sources:**" not in report


class TestRenderJson:
    """Test cases for render_json."""

    def test_includes_document_and_truncation_fields(self):
        document = make_document(LONG_TEXT, headings=[Heading(1, "Intro")])
        data = json.loads(render_json(annotate(document, 50)))

        assert data["title"] == "Post Title"
        assert data["truncated"] is True
        assert data["actual_chars"] == len(LONG_TEXT)
        assert data["max_chars_limit"] == 50
        assert data["warnings"] == ["content_truncated"]
        assert data["headings"] == [{"level": 1, "text": "Intro"}]
        assert data["raw_html"] == "<html></html>"

    def test_without_raw_html(self):
        data = json.loads(render_json(annotate(make_document(LONG_TEXT), 10_000), include_raw_html=False))
        assert "raw_html" not in data
