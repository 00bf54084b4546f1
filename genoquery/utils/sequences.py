"""
Core sequence comparison utilities.

Functions for comparing decoded protein sequences and summarising
their amino acid composition.
"""

import numpy as np
from typing import Dict, Optional, Tuple


def _as_array(sequence: str) -> np.ndarray:
    """View a sequence as an array of single-character strings."""
    return np.array(list(sequence), dtype="<U1")


def positional_difference(seq1: str, seq2: str) -> int:
    """
    Count differing positions between two sequences aligned at the start.

    Positions up to the shorter length are compared one to one; every
    trailing position of the longer sequence counts as a difference.
    This is not an edit distance: no insertions or shifts are considered.

    Args:
        seq1: First sequence
        seq2: Second sequence

    Returns:
        Number of mismatched positions plus the length difference

    Example:
        >>> positional_difference("AAB", "AAC")
        1
        >>> positional_difference("AAB", "AABB")
        1
    """
    min_len = min(len(seq1), len(seq2))
    mismatches = np.count_nonzero(
        _as_array(seq1[:min_len]) != _as_array(seq2[:min_len])
    )
    return int(mismatches) + abs(len(seq1) - len(seq2))


def symbol_frequencies(sequence: str) -> Dict[str, int]:
    """
    Count occurrences of each symbol in a sequence.

    Args:
        sequence: Decoded sequence

    Returns:
        Dictionary mapping symbol to count, ordered by code point

    Example:
        >>> symbol_frequencies("BABA")
        {'A': 2, 'B': 2}
    """
    if not sequence:
        return {}

    symbols, counts = np.unique(_as_array(sequence), return_counts=True)
    return {str(s): int(c) for s, c in zip(symbols, counts)}


def most_common_symbol(sequence: str) -> Optional[Tuple[str, int]]:
    """
    Find the most frequent symbol in a sequence.

    Ties are broken in favour of the smallest code point, so the result
    never depends on counting order.

    Args:
        sequence: Decoded sequence

    Returns:
        (symbol, count) tuple, or None for an empty sequence

    Example:
        >>> most_common_symbol("ABAB")
        ('A', 2)
    """
    frequencies = symbol_frequencies(sequence)
    if not frequencies:
        return None

    best_symbol, best_count = None, 0
    for symbol, count in frequencies.items():
        if count > best_count or (count == best_count and symbol < best_symbol):
            best_symbol, best_count = symbol, count

    return best_symbol, best_count
