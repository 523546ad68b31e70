"""
Selector-driven heuristic extractor.

Every element matched by every selector is walked with the noise filter and
the one yielding the most words wins.
"""

from __future__ import annotations

from typing import Optional

import structlog

from .dom import DEFAULT_PARSER, parse_html, walk_text
from .models import Candidate
from .normalizer import normalize_text

logger = structlog.get_logger(__name__)

HEURISTIC_SELECTORS: tuple[str, ...] = (
    "article",
    "main",
    "[role=main]",
    "[itemprop=articleBody]",
    ".entry-content",
    ".post-content",
    ".article-content",
    "#content",
    "#main",
    ".content",
    ".post",
    ".article",
)


class HeuristicExtractor:
    """Extractor scanning common article containers."""

    name = "heuristic"

    def __init__(self, parser: str = DEFAULT_PARSER) -> None:
        self.parser = parser

    def extract(self, html: str, base_url: str) -> Optional[Candidate]:
        soup = parse_html(html, self.parser)

        best: Optional[Candidate] = None
        best_selector = None
        for selector in HEURISTIC_SELECTORS:
            for element in soup.select(selector):
                candidate = Candidate.from_text(self.name, normalize_text(walk_text(element)))
                if candidate.word_count > (best.word_count if best else 0):
                    best = candidate
                    best_selector = selector

        if best is not None:
            logger.debug("Heuristic container chosen", selector=best_selector, word_count=best.word_count)
        return best
