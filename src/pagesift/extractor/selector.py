"""
Deterministic arbitration between the readability and heuristic candidates.
"""

from __future__ import annotations

from typing import Optional

from .models import Candidate

# Heuristic text must beat readability by more than this many words to win.
SELECTION_MARGIN = 20

# Structural text longer than this skips the other strategies.
STRUCTURAL_MIN_CHARS = 120

# Final text shorter than this is replaced by the whole-document conversion.
MIN_FINAL_CHARS = 80


def _words(candidate: Optional[Candidate]) -> int:
    return candidate.word_count if candidate is not None else 0


def choose_candidate(readability: Optional[Candidate], heuristic: Optional[Candidate]) -> Optional[Candidate]:
    """Pick between the readability and heuristic outputs.

    Returns None when neither carries any words; the caller then runs the
    fallback strategy.
    """
    readability_words = _words(readability)
    heuristic_words = _words(heuristic)

    if readability_words == 0 and heuristic_words > 0:
        return heuristic
    if heuristic_words == 0 and readability_words > 0:
        return readability
    if heuristic_words > readability_words + SELECTION_MARGIN:
        return heuristic
    if readability_words > 0:
        return readability
    return None
