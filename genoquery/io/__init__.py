"""
Catalog and command file I/O.

This module provides readers for the two input formats:
- Catalog: tab-separated protein records (name, organism, formula)
- Commands: tab-separated query lines (search, diff, mode)
"""

from genoquery.io.catalog import (
    read_catalog,
    parse_catalog_string,
    Catalog,
    ProteinRecord,
)

from genoquery.io.commands import (
    read_commands,
    parse_commands,
    parse_command,
    Command,
    LocateCommand,
    CompareCommand,
    ModeCommand,
    UnrecognizedCommand,
)

__all__ = [
    "read_catalog",
    "parse_catalog_string",
    "Catalog",
    "ProteinRecord",
    "read_commands",
    "parse_commands",
    "parse_command",
    "Command",
    "LocateCommand",
    "CompareCommand",
    "ModeCommand",
    "UnrecognizedCommand",
]
