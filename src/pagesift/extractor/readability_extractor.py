"""
Readability-based HTML content extractor.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from readability import Document

from .dom import html_to_text
from .models import Candidate
from .normalizer import normalize_text

logger = structlog.get_logger(__name__)


class ReadabilityExtractor:
    """Extractor using readability-lxml's content-density scoring."""

    name = "readability"

    def __init__(self) -> None:
        self.config: Dict[str, Any] = {
            "min_text_length": 25,
            "retry_length": 250,
        }

    def extract(self, html: str, base_url: str) -> Optional[Candidate]:
        if not html.strip():
            return None

        try:
            document = Document(
                html,
                url=base_url,
                min_text_length=self.config["min_text_length"],
                retry_length=self.config["retry_length"],
            )
            summary = document.summary(html_partial=True)
        except Exception as e:
            # readability raises Unparseable, and lxml raises ValueError/ParserError on odd input
            logger.warning("Readability extraction failed", error=str(e), error_type=type(e).__name__)
            return None

        return Candidate.from_text(self.name, normalize_text(html_to_text(summary)))
