"""
Error types for catalog loading and sequence decoding.

Catalog-level errors abort a run; sequence errors are raised by the
codec and turned into per-command results by the query engine.
"""

from typing import Any, Dict, Optional


class GenoQueryError(Exception):
    """
    Base exception for all genoquery errors.

    Args:
        message: Error message
        details: Optional structured context for reporting
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class MalformedRecordError(GenoQueryError, ValueError):
    """Raised when a catalog line does not split into three tab-separated fields."""

    def __init__(self, line_number: int, line: str):
        field_count = len(line.split("\t"))
        super().__init__(
            f"Malformed catalog record at line {line_number}: "
            f"expected 3 tab-separated fields, got {field_count}",
            details={"line_number": line_number, "line": line},
        )
        self.line_number = line_number
        self.line = line


class MalformedSequenceError(GenoQueryError, ValueError):
    """Raised when a compact formula ends on a digit with no symbol after it."""

    def __init__(self, formula: str, position: int):
        super().__init__(
            f"Malformed sequence '{formula}': repeat count at position "
            f"{position} has no symbol to repeat",
            details={"formula": formula, "position": position},
        )
        self.formula = formula
        self.position = position
