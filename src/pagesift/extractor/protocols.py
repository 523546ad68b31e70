"""
Protocols for pluggable body-text extraction strategies.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from .models import Candidate


@runtime_checkable
class Extractor(Protocol):
    """Pluggable HTML-to-Candidate strategy."""

    name: str

    def extract(self, html: str, base_url: str) -> Optional[Candidate]:
        """Extract body text from an HTML string.

        Args:
            html: Preprocessed HTML to extract from
            base_url: Absolute URL of the page, for strategies that resolve links

        Returns:
            Candidate with normalized text, or None when the strategy finds nothing
        """
        ...
