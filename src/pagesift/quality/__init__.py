"""Extraction quality scoring."""

from .scorer import calculate_extraction_score, length_bonus

__all__ = ["calculate_extraction_score", "length_bonus"]
