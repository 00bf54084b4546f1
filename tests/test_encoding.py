"""
Tests for compact formula decoding.
"""

import pytest

from genoquery.errors import MalformedSequenceError
from genoquery.sequence import decode_formula, is_compact_formula


class TestDecodeFormula:
    """Tests for decode_formula."""

    def test_expands_repeats(self):
        """Test digit/symbol pairs expand to repeated symbols."""
        assert decode_formula("3A2B") == "AAABB"

    def test_plain_sequence_is_unchanged(self):
        """Test formulas without digits decode to themselves."""
        assert decode_formula("ABC") == "ABC"

    def test_zero_repeat_drops_symbol(self):
        """Test a zero count produces no symbols."""
        assert decode_formula("A0B1C") == "AC"

    def test_mixed_literals_and_repeats(self):
        """Test literals and repeats interleave in order."""
        assert decode_formula("M2KL9W") == "MKKL" + "W" * 9

    def test_symbol_after_digit_is_literal(self):
        """Test the character after a count is repeated even if it is a digit."""
        assert decode_formula("23") == "33"
        assert decode_formula("2345") == "335555"

    def test_empty_formula(self):
        """Test the empty formula decodes to the empty sequence."""
        assert decode_formula("") == ""

    def test_deterministic(self):
        """Test decoding the same input twice gives the same output."""
        formula = "4G1A3T"
        assert decode_formula(formula) == decode_formula(formula)

    def test_trailing_digit_raises(self):
        """Test a count with no symbol after it is a malformed sequence."""
        with pytest.raises(MalformedSequenceError) as exc_info:
            decode_formula("AB3")

        assert exc_info.value.formula == "AB3"
        assert exc_info.value.position == 2

    def test_malformed_is_value_error(self):
        """Test malformed sequences can be caught as ValueError."""
        with pytest.raises(ValueError):
            decode_formula("7")


class TestIsCompactFormula:
    """Tests for is_compact_formula."""

    def test_well_formed(self):
        assert is_compact_formula("2A1B")
        assert is_compact_formula("")

    def test_malformed(self):
        assert not is_compact_formula("2A1")
