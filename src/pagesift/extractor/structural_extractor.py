"""
Structural extractor for pages with an explicit content container.

Documentation generators and many CMS themes wrap the article in
``#content``, ``<main>`` or ``<article>``. When such a container holds a
substantial amount of text it is taken as-is and the remaining strategies
are skipped.
"""

from __future__ import annotations

from typing import Optional

import structlog

from .dom import DEFAULT_PARSER, html_to_text, parse_html
from .models import Candidate
from .normalizer import normalize_text

logger = structlog.get_logger(__name__)

# Checked in order; the first rule that matches an element decides.
STRUCTURAL_SELECTORS: tuple[str, ...] = ("#content", "main", "article")

MIN_STRUCTURAL_WORDS = 50


class StructuralExtractor:
    """Extractor for explicit content containers."""

    name = "structural"

    def __init__(self, parser: str = DEFAULT_PARSER) -> None:
        self.parser = parser

    def extract(self, html: str, base_url: str) -> Optional[Candidate]:
        soup = parse_html(html, self.parser)
        for selector in STRUCTURAL_SELECTORS:
            container = soup.select_one(selector)
            if container is None:
                continue

            text = normalize_text(html_to_text(container.decode_contents()))
            candidate = Candidate.from_text(self.name, text)
            logger.debug("Structural container found", selector=selector, word_count=candidate.word_count)
            if candidate.word_count > MIN_STRUCTURAL_WORDS:
                return candidate
            return None

        logger.debug("No structural container found")
        return None
