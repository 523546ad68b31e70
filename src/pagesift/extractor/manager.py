"""
ExtractorManager: runs the body-text strategies and arbitrates between them.
"""

from __future__ import annotations

from typing import Dict, Optional

import structlog

from ..config.config import ExtractionSettings
from .dom import html_to_text
from .fallback_extractor import FallbackExtractor
from .heuristic_extractor import HeuristicExtractor
from .models import Candidate
from .normalizer import normalize_text
from .protocols import Extractor
from .readability_extractor import ReadabilityExtractor
from .selector import MIN_FINAL_CHARS, STRUCTURAL_MIN_CHARS, choose_candidate
from .structural_extractor import StructuralExtractor

logger = structlog.get_logger(__name__)


class ExtractorManager:
    """
    Produces the final clean text for a preprocessed page.

    Order of play:
    - structural container, taken directly when long enough
    - readability and heuristic candidates, arbitrated by ``choose_candidate``
    - whole-body fallback when both are empty
    - whole-document conversion when the winner is too short
    """

    def __init__(self, settings: Optional[ExtractionSettings] = None) -> None:
        self.settings = settings or ExtractionSettings()
        self.logger = logger.bind(component="ExtractorManager")

        parser = self.settings.html_parser
        self._extractors: Dict[str, Extractor] = {
            "structural": StructuralExtractor(parser),
            "readability": ReadabilityExtractor(),
            "heuristic": HeuristicExtractor(parser),
            "fallback": FallbackExtractor(parser),
        }

    def _run(self, name: str, html: str, base_url: str) -> Optional[Candidate]:
        extractor = self._extractors[name]
        try:
            return extractor.extract(html, base_url)
        except Exception as e:
            self.logger.error("Extractor failed", extractor=name, error=str(e), error_type=type(e).__name__)
            return None

    def extract_text(self, html: str, base_url: str) -> Candidate:
        """
        Extract the final clean text.

        Args:
            html: Preprocessed HTML
            base_url: Absolute URL of the page

        Returns:
            Candidate naming the strategy that produced the text. Its text may be empty.
        """
        structural = self._run("structural", html, base_url)
        if structural is not None and len(structural.text) > STRUCTURAL_MIN_CHARS:
            self.logger.debug("Structural short-circuit", word_count=structural.word_count)
            return structural

        readability = self._run("readability", html, base_url)
        heuristic = self._run("heuristic", html, base_url)
        chosen = choose_candidate(readability, heuristic)
        if chosen is None:
            chosen = self._run("fallback", html, base_url) or Candidate.from_text("fallback", "")

        self.logger.debug(
            "Strategy chosen",
            strategy=chosen.strategy,
            readability_words=readability.word_count if readability else 0,
            heuristic_words=heuristic.word_count if heuristic else 0,
        )

        final = Candidate.from_text(chosen.strategy, normalize_text(chosen.text))
        if len(final.text) < MIN_FINAL_CHARS:
            self.logger.debug("Using last-resort conversion", chosen_chars=len(final.text))
            final = Candidate.from_text("last_resort", normalize_text(html_to_text(html)))
        return final
