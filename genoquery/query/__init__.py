"""
Query answering and reporting over a loaded protein catalog.

This module provides:
- QueryEngine: dispatches search, diff and mode commands
- Result types for each query kind
- ReportWriter: fixed-layout text report of query results
"""

from genoquery.query.engine import (
    QueryEngine,
    QueryResult,
    LocateResult,
    CompareResult,
    ModeResult,
    UnknownCommandResult,
    MalformedSequenceResult,
)

from genoquery.query.report import (
    ReportWriter,
    format_result,
    write_report,
    SEPARATOR,
)

__all__ = [
    "QueryEngine",
    "QueryResult",
    "LocateResult",
    "CompareResult",
    "ModeResult",
    "UnknownCommandResult",
    "MalformedSequenceResult",
    "ReportWriter",
    "format_result",
    "write_report",
    "SEPARATOR",
]
