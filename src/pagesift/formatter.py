"""
Display layer for extracted documents.

``annotate`` records truncation details and advisory warnings; the render
functions turn the result into a text report or JSON.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, List

from .extractor.models import ExtractedDocument

CONTENT_TRUNCATED = "content_truncated"
SHORT_CONTENT = "short_content"
LOW_EXTRACTION_SCORE = "low_extraction_score"

VERY_SHORT_WORDS = 10

NO_CONTENT_NOTICE = (
    "[No content extracted]\n\n"
    "**Possible reasons:**\n"
    "- Page is JavaScript-heavy (requires browser execution)\n"
    "- Content is behind authentication or a paywall\n"
    "- Site blocks automated access"
)


@dataclass
class DisplayDocument:
    """An ExtractedDocument plus how it fits a character budget."""

    document: ExtractedDocument
    truncated: bool
    actual_chars: int
    max_chars_limit: int

    def to_dict(self) -> Dict[str, Any]:
        data = self.document.to_dict()
        data.update(
            truncated=self.truncated,
            actual_chars=self.actual_chars,
            max_chars_limit=self.max_chars_limit,
        )
        return data


def annotate(
    document: ExtractedDocument,
    max_chars: int,
    *,
    short_content_words: int = 50,
    low_score_threshold: float = 0.4,
) -> DisplayDocument:
    """
    Measure ``document`` against ``max_chars`` and attach advisory warnings.

    Warnings are appended to ``document.warnings`` in a fixed order and never
    duplicated, so annotating twice is harmless.
    """
    actual_chars = len(document.clean_text)
    truncated = actual_chars > max_chars

    if truncated:
        document.add_warning(CONTENT_TRUNCATED)
    if document.word_count < short_content_words:
        document.add_warning(SHORT_CONTENT)
    if document.extraction_score < low_score_threshold:
        document.add_warning(LOW_EXTRACTION_SCORE)

    return DisplayDocument(
        document=document,
        truncated=truncated,
        actual_chars=actual_chars,
        max_chars_limit=max_chars,
    )


def render_json(display: DisplayDocument, *, include_raw_html: bool = True) -> str:
    data = display.to_dict()
    if not include_raw_html:
        data.pop("raw_html", None)
    return json.dumps(data, indent=2, ensure_ascii=False)


def _content_preview(display: DisplayDocument) -> str:
    document = display.document
    if not document.clean_text:
        return NO_CONTENT_NOTICE

    preview = document.clean_text[: display.max_chars_limit]
    if document.word_count < VERY_SHORT_WORDS:
        return (
            f"{preview}\n\n**Very short content** ({document.word_count} words). "
            "Page may be mostly dynamic or JavaScript-based."
        )
    if display.truncated:
        return (
            f"{preview}\n\n[Content truncated: {display.max_chars_limit}/{display.actual_chars} chars shown. "
            "Increase max_chars parameter to see more]"
        )
    return preview


def _sources_section(document: ExtractedDocument, max_links: int) -> str:
    if not document.links:
        return ""

    lines: List[str] = []
    for index, link in enumerate(document.links[:max_links], start=1):
        if link.text:
            lines.append(f"[{index}]: {link.url} ({link.text})")
        else:
            lines.append(f"[{index}]: {link.url}")

    section = "\n\n**Sources:**\n" + "\n".join(lines) + "\n"
    if len(document.links) > max_links:
        section += f"\n(Showing {max_links} of {len(document.links)} total links)\n"
    return section


def render_text(display: DisplayDocument, max_links: int = 100) -> str:
    """Render a human-readable report with a numbered Sources section."""
    document = display.document
    headings = "\n".join(f"- H{heading.level} {heading.text}" for heading in document.headings)

    return (
        f"**{document.title}**\n\n"
        f"URL: {document.url}\n"
        f"Word Count: {document.word_count}\n"
        f"Language: {document.language}\n\n"
        f"**Content:**\n{_content_preview(display)}\n\n"
        f"**Metadata:**\n"
        f"- Description: {document.meta_description}\n"
        f"- Keywords: {document.meta_keywords}\n\n"
        f"**Headings:**\n{headings}\n\n"
        f"**Links Found:** {len(document.links)}\n"
        f"**Images Found:** {len(document.images)}"
        f"{_sources_section(document, max_links)}"
    )
