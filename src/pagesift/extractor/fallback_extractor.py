"""
Whole-body extractor used when no focused strategy produced text.
"""

from __future__ import annotations

from typing import Optional

from .dom import DEFAULT_PARSER, parse_html, walk_text
from .models import Candidate
from .normalizer import normalize_text


class FallbackExtractor:
    """Extractor walking ``<body>``, or the whole document when there is none."""

    name = "fallback"

    def __init__(self, parser: str = DEFAULT_PARSER) -> None:
        self.parser = parser

    def extract(self, html: str, base_url: str) -> Optional[Candidate]:
        soup = parse_html(html, self.parser)
        root = soup.body or soup
        return Candidate.from_text(self.name, normalize_text(walk_text(root)))
