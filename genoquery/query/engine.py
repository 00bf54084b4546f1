"""
Query engine over a protein catalog.

Answers the three query kinds against a loaded Catalog:

- locate: first protein whose decoded formula contains a pattern
- compare: position-aligned difference between two proteins
- mode: most frequent amino acid of a protein

Every query is a pure function of the catalog and the command, so
commands can be answered in any order without affecting each other.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

from genoquery.errors import MalformedSequenceError
from genoquery.io.catalog import Catalog, ProteinRecord
from genoquery.io.commands import (
    Command,
    CompareCommand,
    LocateCommand,
    ModeCommand,
)
from genoquery.sequence import decode_formula
from genoquery.utils.sequences import most_common_symbol, positional_difference

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryResult:
    """Base class for query results; keeps the command it answers."""
    command: Command


@dataclass(frozen=True)
class LocateResult(QueryResult):
    """Result of a search; ``record`` is None when nothing matched."""
    decoded_pattern: str
    record: Optional[ProteinRecord] = None

    @property
    def found(self) -> bool:
        return self.record is not None


@dataclass(frozen=True)
class CompareResult(QueryResult):
    """Result of a diff; ``difference`` is None when a protein is missing."""
    difference: Optional[int] = None

    @property
    def missing(self) -> bool:
        return self.difference is None


@dataclass(frozen=True)
class ModeResult(QueryResult):
    """Result of a mode query; ``symbol`` is None when the protein is missing."""
    symbol: Optional[str] = None
    count: int = 0

    @property
    def missing(self) -> bool:
        return self.symbol is None


@dataclass(frozen=True)
class UnknownCommandResult(QueryResult):
    pass


@dataclass(frozen=True)
class MalformedSequenceResult(QueryResult):
    """A formula involved in the query could not be decoded."""
    error: MalformedSequenceError


class QueryEngine:
    """
    Dispatches commands against a catalog.

    Args:
        catalog: Loaded catalog; it is only read, never modified

    Example:
        >>> engine = QueryEngine(Catalog([ProteinRecord("P1", "Org1", "2A1B")]))
        >>> engine.compare("P1", "P1")
        0
    """

    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    def _lookup(self, name: str) -> Optional[int]:
        """Catalog index for a protein name, or None if absent."""
        index = self.catalog.find_index_by_name(name)
        if index is None:
            logger.info("Protein %s not found in catalog", name)
        return index

    def _sequence(self, index: int) -> Optional[str]:
        """Decoded formula of a catalog record, or None if it is empty."""
        return self.catalog.decoded(index) or None

    def _locate_decoded(self, decoded_pattern: str) -> Optional[ProteinRecord]:
        index = self.catalog.find_containing_decoded(decoded_pattern)
        if index is None:
            return None
        return self.catalog[index]

    def locate(self, pattern: str) -> Optional[ProteinRecord]:
        """
        Find the first protein whose decoded formula contains a pattern.

        Args:
            pattern: Compact pattern formula

        Returns:
            The matching record, or None

        Raises:
            MalformedSequenceError: If the pattern cannot be decoded
        """
        return self._locate_decoded(decode_formula(pattern))

    def compare(self, name_a: str, name_b: str) -> Optional[int]:
        """
        Count amino acid differences between two proteins.

        Positions are compared from the start up to the shorter length;
        every extra position of the longer protein adds one. Both names
        are looked up before anything is decoded, so an absent protein
        always yields None.

        Returns:
            Difference count, or None if either protein is missing

        Raises:
            MalformedSequenceError: If a stored formula cannot be decoded
        """
        index_a = self._lookup(name_a)
        index_b = self._lookup(name_b)
        if index_a is None or index_b is None:
            return None

        seq_a = self._sequence(index_a)
        seq_b = self._sequence(index_b)
        if seq_a is None or seq_b is None:
            return None
        return positional_difference(seq_a, seq_b)

    def mode(self, name: str) -> Optional[Tuple[str, int]]:
        """
        Most frequent amino acid of a protein.

        Ties go to the smallest symbol.

        Returns:
            (symbol, count) tuple, or None if the protein is missing

        Raises:
            MalformedSequenceError: If the stored formula cannot be decoded
        """
        index = self._lookup(name)
        if index is None:
            return None
        sequence = self._sequence(index)
        if sequence is None:
            return None
        return most_common_symbol(sequence)

    def execute(self, command: Command) -> QueryResult:
        """
        Answer a single command.

        Decoding failures are reported as a MalformedSequenceResult
        instead of being raised, so one bad formula never stops a run.
        """
        logger.debug("Executing command %03d: %r", command.index, command)
        try:
            if isinstance(command, LocateCommand):
                decoded = decode_formula(command.pattern)
                return LocateResult(command, decoded, self._locate_decoded(decoded))
            if isinstance(command, CompareCommand):
                return CompareResult(
                    command, self.compare(command.name_a, command.name_b)
                )
            if isinstance(command, ModeCommand):
                found = self.mode(command.name)
                if found is None:
                    return ModeResult(command)
                symbol, count = found
                return ModeResult(command, symbol, count)
        except MalformedSequenceError as e:
            logger.warning("Command %03d: %s", command.index, e)
            return MalformedSequenceResult(command, e)

        logger.warning("Command %03d is not recognized", command.index)
        return UnknownCommandResult(command)

    def run(self, commands: Iterable[Command]) -> Iterator[QueryResult]:
        """Answer commands one at a time, in order."""
        for command in commands:
            yield self.execute(command)
