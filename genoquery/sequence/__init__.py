"""
Sequence decoding for compact protein formulas.

This module provides functions for:
- Expanding run-length compact formulas
- Checking whether a formula is well formed
"""

from genoquery.sequence.encoding import (
    decode_formula,
    is_compact_formula,
)

__all__ = [
    "decode_formula",
    "is_compact_formula",
]
