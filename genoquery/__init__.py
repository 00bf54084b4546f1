"""
GenoQuery: batch queries over a catalog of protein sequences

This package provides tools for:
- Decoding compact run-length protein formulas
- Loading tab-separated protein catalogs
- Searching, comparing and profiling catalog proteins
- Writing fixed-layout text reports of query results

Built on top of NumPy for sequence comparison and counting.
"""

__version__ = "0.1.0"
__author__ = "GenoQuery Contributors"

from genoquery.errors import (
    GenoQueryError,
    MalformedRecordError,
    MalformedSequenceError,
)

from genoquery.sequence import (
    decode_formula,
    is_compact_formula,
)

from genoquery.io import (
    read_catalog,
    read_commands,
    parse_catalog_string,
    Catalog,
    ProteinRecord,
)

from genoquery.query import (
    QueryEngine,
    ReportWriter,
    write_report,
)

from genoquery.utils import (
    positional_difference,
    symbol_frequencies,
    most_common_symbol,
)

__all__ = [
    # Errors
    "GenoQueryError",
    "MalformedRecordError",
    "MalformedSequenceError",
    # Sequence decoding
    "decode_formula",
    "is_compact_formula",
    # I/O
    "read_catalog",
    "read_commands",
    "parse_catalog_string",
    "Catalog",
    "ProteinRecord",
    # Queries and reporting
    "QueryEngine",
    "ReportWriter",
    "write_report",
    # Utilities
    "positional_difference",
    "symbol_frequencies",
    "most_common_symbol",
]
