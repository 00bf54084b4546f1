"""
Tests for report formatting.
"""

import io

import pytest

from genoquery.errors import MalformedSequenceError
from genoquery.io import (
    CompareCommand,
    LocateCommand,
    ModeCommand,
    ProteinRecord,
    UnrecognizedCommand,
)
from genoquery.query import (
    SEPARATOR,
    CompareResult,
    LocateResult,
    MalformedSequenceResult,
    ModeResult,
    QueryEngine,
    QueryResult,
    ReportWriter,
    UnknownCommandResult,
    format_result,
    write_report,
)


class TestFormatResult:
    """Tests for per-command report blocks."""

    def test_search_found(self):
        result = LocateResult(
            LocateCommand(index=1, pattern="2A"), "AA", ProteinRecord("P1", "Org1", "2A1B")
        )
        assert format_result(result) == [
            "001 search AA",
            "organism                protein",
            "Org1    P1",
            SEPARATOR,
        ]

    def test_search_not_found(self):
        result = LocateResult(LocateCommand(index=12, pattern="1C"), "C")
        assert format_result(result) == [
            "012 search C",
            "organism                protein",
            "NOT FOUND",
            SEPARATOR,
        ]

    def test_diff(self):
        result = CompareResult(CompareCommand(index=2, name_a="P1", name_b="P2"), 4)
        assert format_result(result) == [
            "002 diff P1 P2",
            "amino-acids difference: 4",
            SEPARATOR,
        ]

    def test_diff_missing(self):
        result = CompareResult(CompareCommand(index=2, name_a="P1", name_b="X"))
        assert format_result(result) == ["002 diff P1 X", "MISSING", SEPARATOR]

    def test_mode(self):
        result = ModeResult(ModeCommand(index=3, name="P1"), "A", 2)
        assert format_result(result) == [
            "003 mode P1",
            "amino-acid occurs:",
            "A 2",
            SEPARATOR,
        ]

    def test_mode_missing(self):
        result = ModeResult(ModeCommand(index=3, name="X"))
        assert format_result(result) == [
            "003 mode X",
            "amino-acid occurs:",
            "MISSING: X",
            SEPARATOR,
        ]

    def test_unknown(self):
        result = UnknownCommandResult(UnrecognizedCommand(index=100, raw="bogus"))
        assert format_result(result) == ["100 UNKNOWN COMMAND", SEPARATOR]

    def test_malformed_search_shows_raw_pattern(self):
        command = LocateCommand(index=5, pattern="AB3")
        result = MalformedSequenceResult(command, MalformedSequenceError("AB3", 2))
        assert format_result(result) == [
            "005 search AB3",
            "organism                protein",
            "MALFORMED SEQUENCE: AB3",
            SEPARATOR,
        ]

    def test_malformed_mode_names_stored_formula(self):
        command = ModeCommand(index=6, name="BAD")
        result = MalformedSequenceResult(command, MalformedSequenceError("Q7", 1))
        assert format_result(result) == [
            "006 mode BAD",
            "amino-acid occurs:",
            "MALFORMED SEQUENCE: Q7",
            SEPARATOR,
        ]

    def test_unsupported_result_type(self):
        with pytest.raises(TypeError):
            format_result(QueryResult(ModeCommand(index=1, name="P1")))

    def test_separator_width(self):
        assert SEPARATOR == "=" * 48


class TestReportWriter:
    """Tests for ReportWriter and write_report."""

    def test_header(self):
        stream = io.StringIO()
        ReportWriter(stream).write_header("Run label")
        assert stream.getvalue() == "Run label\n" + SEPARATOR + "\n"

    def test_line_count(self, catalog):
        """Test total lines are the header plus each block's fixed size."""
        engine = QueryEngine(catalog)
        commands = [
            LocateCommand(index=1, pattern="A"),
            CompareCommand(index=2, name_a="P1", name_b="P2"),
            ModeCommand(index=3, name="P1"),
            UnrecognizedCommand(index=4, raw="x"),
        ]
        stream = io.StringIO()
        writer = ReportWriter(stream)
        writer.write_header("label")
        for result in engine.run(commands):
            writer.emit(result)

        assert writer.blocks_written == 4
        assert len(stream.getvalue().splitlines()) == 2 + 4 + 3 + 4 + 2

    def test_write_report_file(self, tmp_path, catalog):
        engine = QueryEngine(catalog)
        path = tmp_path / "report.txt"

        count = write_report(
            engine.run([ModeCommand(index=1, name="P4")]), path, run_label="Lab run"
        )

        assert count == 1
        assert path.read_text(encoding="utf-8") == (
            "Lab run\n"
            f"{SEPARATOR}\n"
            "001 mode P4\n"
            "amino-acid occurs:\n"
            "A 2\n"
            f"{SEPARATOR}\n"
        )
