"""
Tests for sequence comparison and frequency utilities.
"""

from genoquery.utils import (
    most_common_symbol,
    positional_difference,
    symbol_frequencies,
)


class TestPositionalDifference:
    """Tests for positional_difference."""

    def test_equal_length(self):
        """Test a single mismatch between equal-length sequences."""
        assert positional_difference("AAB", "AAC") == 1

    def test_unequal_length_adds_length_delta(self):
        """Test trailing positions of the longer sequence count in full."""
        assert positional_difference("AAB", "AABB") == 1
        assert positional_difference("ABCD", "A") == 3

    def test_identical(self):
        assert positional_difference("MKLW", "MKLW") == 0

    def test_no_alignment_shift(self):
        """Test an insertion is not realigned like an edit distance would."""
        assert positional_difference("ABCD", "XABCD") == 5

    def test_empty_side(self):
        assert positional_difference("", "ABC") == 3

    def test_symmetric(self):
        assert positional_difference("GATTACA", "GACT") == positional_difference(
            "GACT", "GATTACA"
        )

    def test_returns_python_int(self):
        assert type(positional_difference("AB", "AC")) is int


class TestSymbolFrequencies:
    """Tests for symbol_frequencies."""

    def test_counts(self):
        assert symbol_frequencies("AABAC") == {"A": 3, "B": 1, "C": 1}

    def test_ordered_by_code_point(self):
        assert list(symbol_frequencies("CBAB")) == ["A", "B", "C"]

    def test_empty(self):
        assert symbol_frequencies("") == {}


class TestMostCommonSymbol:
    """Tests for most_common_symbol."""

    def test_single_winner(self):
        assert most_common_symbol("AABBB") == ("B", 3)

    def test_tie_goes_to_smallest_symbol(self):
        """Test ties are broken by code point, not by first appearance."""
        assert most_common_symbol("ABAB") == ("A", 2)
        assert most_common_symbol("BABA") == ("A", 2)
        assert most_common_symbol("ZYZY") == ("Y", 2)

    def test_empty(self):
        assert most_common_symbol("") is None
