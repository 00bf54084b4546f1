"""
Protein catalog reader and in-memory store.

A catalog file holds one record per line as three tab-separated
fields: protein name, source organism and compact formula.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Union

from genoquery.errors import MalformedRecordError, MalformedSequenceError
from genoquery.io.files import open_file
from genoquery.sequence import decode_formula, is_compact_formula

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "\t"


@dataclass(frozen=True)
class ProteinRecord:
    """
    Represents a single catalog record.

    Attributes:
        name: Protein name
        origin: Organism the protein comes from
        formula: Compact formula, exactly as read
    """
    name: str
    origin: str
    formula: str

    def __str__(self) -> str:
        return FIELD_SEPARATOR.join((self.name, self.origin, self.formula))

    def decode(self) -> str:
        """Expand the compact formula."""
        return decode_formula(self.formula)


def parse_catalog_line(line: str, line_number: int) -> ProteinRecord:
    """
    Parse one catalog line.

    Fields beyond the third are ignored.

    Raises:
        MalformedRecordError: If the line has fewer than three fields
    """
    line = line.rstrip("\r\n")
    parts = line.split(FIELD_SEPARATOR)
    if len(parts) < 3:
        raise MalformedRecordError(line_number, line)
    return ProteinRecord(name=parts[0], origin=parts[1], formula=parts[2])


class Catalog:
    """
    Ordered, read-only collection of protein records.

    Lookups are linear scans in catalog order, so the first record wins
    whenever names or matches repeat. Decoded formulas are computed on
    first use and cached per record.

    Example:
        >>> catalog = Catalog([ProteinRecord("P1", "Org1", "2A1B")])
        >>> catalog.find_containing_decoded("AB")
        0
    """

    def __init__(self, records: Iterable[ProteinRecord] = ()):
        self._records: List[ProteinRecord] = list(records)
        self._decoded: Dict[int, str] = {}

    @classmethod
    def load(cls, stream: Iterable[str]) -> "Catalog":
        """
        Build a catalog from an iterable of lines.

        The load is all or nothing: the first malformed line aborts it.

        Args:
            stream: Open text stream or any iterable of lines

        Returns:
            Catalog holding the records in stream order

        Raises:
            MalformedRecordError: If a line has fewer than three fields
        """
        records = []
        for line_number, line in enumerate(stream, start=1):
            record = parse_catalog_line(line, line_number)
            if not is_compact_formula(record.formula):
                logger.warning(
                    "Record %s at line %d has a malformed formula: %r",
                    record.name, line_number, record.formula,
                )
            records.append(record)

        logger.info("Loaded %d catalog records", len(records))
        return cls(records)

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, index: int) -> ProteinRecord:
        return self._records[index]

    def __iter__(self) -> Iterator[ProteinRecord]:
        return iter(self._records)

    def decoded(self, index: int) -> str:
        """
        Return the decoded formula of the record at ``index``.

        Raises:
            MalformedSequenceError: If the stored formula is malformed
        """
        if index not in self._decoded:
            self._decoded[index] = self._records[index].decode()
        return self._decoded[index]

    def find_index_by_name(self, name: str) -> Optional[int]:
        """Return the index of the first record with this name, or None."""
        for index, record in enumerate(self._records):
            if record.name == name:
                return index
        return None

    def find_by_name(self, name: str) -> Optional[ProteinRecord]:
        """Return the first record with this name, or None."""
        index = self.find_index_by_name(name)
        if index is None:
            return None
        return self._records[index]

    def find_containing_decoded(self, decoded_pattern: str) -> Optional[int]:
        """
        Find the first record whose decoded formula contains a pattern.

        Records whose formula cannot be decoded never match.

        Args:
            decoded_pattern: Plain (already decoded) sequence to look for

        Returns:
            Index of the first matching record, or None
        """
        for index in range(len(self._records)):
            try:
                sequence = self.decoded(index)
            except MalformedSequenceError:
                logger.debug("Skipping record %d with malformed formula", index)
                continue
            if decoded_pattern in sequence:
                return index
        return None


def parse_catalog_string(content: str) -> Catalog:
    """
    Parse a catalog from a string.

    Args:
        content: Tab-separated catalog text

    Returns:
        Catalog object
    """
    return Catalog.load(content.splitlines())


def read_catalog(
    filepath: Union[str, Path],
    encoding: str = "utf-8"
) -> Catalog:
    """
    Read a catalog file.

    Supports both plain text and gzip-compressed files.

    Args:
        filepath: Path to the catalog file (.txt, .tsv, or .gz)
        encoding: Text encoding of the file

    Returns:
        Catalog object

    Example:
        >>> catalog = read_catalog("sequences.2.txt")
        >>> record = catalog.find_by_name("P1")
    """
    logger.debug("Reading catalog from %s", filepath)
    with open_file(filepath, "rt", encoding=encoding) as f:
        return Catalog.load(f)
