"""
Plain-text report writer.

The report starts with a run label and a separator line, followed by
one block per command in command order. Layout is fixed so existing
consumers of the report text keep working:

    001 search AAB
    organism                protein
    Org1    P1
    ================================================
    002 diff P1 P2
    amino-acids difference: 1
    ================================================
    003 mode P1
    amino-acid occurs:
    A 2
    ================================================
    004 UNKNOWN COMMAND
    ================================================
"""

import logging
from pathlib import Path
from typing import Iterable, List, TextIO, Union

from genoquery.io.commands import CompareCommand, LocateCommand, ModeCommand
from genoquery.io.files import open_file
from genoquery.query.engine import (
    CompareResult,
    LocateResult,
    MalformedSequenceResult,
    ModeResult,
    QueryResult,
    UnknownCommandResult,
)

logger = logging.getLogger(__name__)

SEPARATOR = "=" * 48
SEARCH_HEADING = "organism                protein"
MODE_HEADING = "amino-acid occurs:"
RESULT_GAP = "    "


def _command_line(result: QueryResult) -> str:
    command = result.command
    if isinstance(command, LocateCommand):
        if isinstance(result, LocateResult):
            return f"{command.index:03d} search {result.decoded_pattern}"
        return f"{command.index:03d} search {command.pattern}"
    if isinstance(command, CompareCommand):
        return f"{command.index:03d} diff {command.name_a} {command.name_b}"
    if isinstance(command, ModeCommand):
        return f"{command.index:03d} mode {command.name}"
    return f"{command.index:03d} UNKNOWN COMMAND"


def format_result(result: QueryResult) -> List[str]:
    """
    Format one query result as report lines, separator included.

    Args:
        result: Any QueryResult produced by the engine

    Returns:
        List of lines without line terminators
    """
    lines = [_command_line(result)]

    if isinstance(result.command, LocateCommand):
        lines.append(SEARCH_HEADING)
    elif isinstance(result.command, ModeCommand):
        lines.append(MODE_HEADING)

    if isinstance(result, LocateResult):
        if result.found:
            lines.append(f"{result.record.origin}{RESULT_GAP}{result.record.name}")
        else:
            lines.append("NOT FOUND")
    elif isinstance(result, CompareResult):
        if result.missing:
            lines.append("MISSING")
        else:
            lines.append(f"amino-acids difference: {result.difference}")
    elif isinstance(result, ModeResult):
        if result.missing:
            lines.append(f"MISSING: {result.command.name}")
        else:
            lines.append(f"{result.symbol} {result.count}")
    elif isinstance(result, MalformedSequenceResult):
        lines.append(f"MALFORMED SEQUENCE: {result.error.formula}")
    elif not isinstance(result, UnknownCommandResult):
        raise TypeError(f"Cannot format result of type {type(result).__name__}")

    lines.append(SEPARATOR)
    return lines


class ReportWriter:
    """
    Writes report lines to an open text stream.

    Args:
        stream: Writable text stream; the caller owns and closes it
    """

    def __init__(self, stream: TextIO):
        self.stream = stream
        self.blocks_written = 0

    def _write_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.stream.write(line + "\n")

    def write_header(self, run_label: str) -> None:
        """Write the run label and the opening separator."""
        self._write_lines([run_label, SEPARATOR])

    def emit(self, result: QueryResult) -> None:
        """Write the block for one query result."""
        self._write_lines(format_result(result))
        self.blocks_written += 1


def write_report(
    results: Iterable[QueryResult],
    filepath: Union[str, Path],
    run_label: str,
    encoding: str = "utf-8"
) -> int:
    """
    Write a complete report file.

    Args:
        results: Query results in command order
        filepath: Output path (gzip-compressed if it ends in .gz)
        run_label: First line of the report
        encoding: Text encoding of the output

    Returns:
        Number of command blocks written
    """
    with open_file(filepath, "wt", encoding=encoding) as f:
        writer = ReportWriter(f)
        writer.write_header(run_label)
        for result in results:
            writer.emit(result)

    logger.info("Wrote %d report blocks to %s", writer.blocks_written, filepath)
    return writer.blocks_written
