"""
Sequence comparison and support utilities.

This module provides:
- Position-aligned sequence difference
- Symbol frequency counting and mode selection
- Logging configuration
"""

from genoquery.utils.sequences import (
    positional_difference,
    symbol_frequencies,
    most_common_symbol,
)

from genoquery.utils.logging_setup import setup_logging

__all__ = [
    "positional_difference",
    "symbol_frequencies",
    "most_common_symbol",
    "setup_logging",
]
