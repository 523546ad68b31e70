"""
Unit tests for the extraction score.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pagesift.quality.scorer import calculate_extraction_score, length_bonus


class TestLengthBonus:
    """Test cases for length_bonus."""

    @pytest.mark.parametrize(
        "word_count, expected",
        [
            (0, 0.0),
            (100, 0.0),
            (101, 0.15 * 101 / 500),
            (300, 0.09),
            (500, 0.15),
            (2000, 0.15),
            (4000, 0.075),
        ],
    )
    def test_bands(self, word_count, expected):
        assert length_bonus(word_count) == pytest.approx(expected)


class TestCalculateExtractionScore:
    """Test cases for calculate_extraction_score."""

    def test_empty_page(self):
        assert calculate_extraction_score(0, False, 0, 0) == 0.0

    def test_word_count_bands(self):
        assert calculate_extraction_score(21, False, 0, 0) == pytest.approx(0.15)
        assert calculate_extraction_score(51, False, 0, 0) == pytest.approx(0.30)

    def test_heading_bands(self):
        assert calculate_extraction_score(0, False, 0, 1) == pytest.approx(0.075)
        assert calculate_extraction_score(0, False, 0, 3) == pytest.approx(0.15)

    def test_date_and_code(self):
        assert calculate_extraction_score(0, True, 2, 0) == pytest.approx(0.40)

    def test_capped_at_one(self):
        assert calculate_extraction_score(800, True, 3, 5) == pytest.approx(1.0)
        assert calculate_extraction_score(800, True, 3, 5) <= 1.0

    @given(
        word_count=st.integers(min_value=0, max_value=10_000_000),
        has_published_date=st.booleans(),
        code_block_count=st.integers(min_value=0, max_value=1000),
        heading_count=st.integers(min_value=0, max_value=1000),
    )
    def test_bounded(self, word_count, has_published_date, code_block_count, heading_count):
        score = calculate_extraction_score(word_count, has_published_date, code_block_count, heading_count)
        assert 0.0 <= score <= 1.0
