"""
Deterministic extraction quality score.

The score is a pure function of four structural signals, so the same page
always scores the same and callers can use fixed thresholds on it.
"""

from __future__ import annotations

# Word-count bands for the length bonus
IDEAL_MIN_WORDS = 500
IDEAL_MAX_WORDS = 2000
SHORT_BONUS_MIN_WORDS = 100

LENGTH_BONUS = 0.15


def length_bonus(word_count: int) -> float:
    """Bonus for articles of a useful length, tapering off for very long ones."""
    if IDEAL_MIN_WORDS <= word_count <= IDEAL_MAX_WORDS:
        return LENGTH_BONUS
    if word_count > IDEAL_MAX_WORDS:
        return LENGTH_BONUS * min(1.0, IDEAL_MAX_WORDS / word_count)
    if SHORT_BONUS_MIN_WORDS < word_count < IDEAL_MIN_WORDS:
        return LENGTH_BONUS * word_count / IDEAL_MIN_WORDS
    return 0.0


def calculate_extraction_score(
    word_count: int,
    has_published_date: bool,
    code_block_count: int,
    heading_count: int,
) -> float:
    """
    Score an extraction between 0.0 and 1.0.

    Args:
        word_count: Words in the final clean text
        has_published_date: Whether the page declares a publication time
        code_block_count: Number of distinct code blocks found
        heading_count: Number of non-empty headings found

    Returns:
        Score capped at 1.0
    """
    score = 0.0

    if word_count > 50:
        score += 0.30
    elif word_count > 20:
        score += 0.15

    if has_published_date:
        score += 0.20

    if code_block_count >= 1:
        score += 0.20

    if heading_count > 2:
        score += 0.15
    elif heading_count > 0:
        score += 0.075

    score += length_bonus(word_count)

    return min(1.0, score)
