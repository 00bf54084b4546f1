"""
Command file parser.

Each line of a command file is one query. The first tab-separated
field selects the query kind:

- ``search<TAB>pattern``: find a protein containing a compact pattern
- ``diff<TAB>name1<TAB>name2``: count differing amino acids
- ``mode<TAB>name``: most frequent amino acid of a protein

Anything else, including a known word with too few arguments, is an
unrecognized command. Commands are numbered from 1 in file order.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Union

from genoquery.io.files import open_file

logger = logging.getLogger(__name__)

SEARCH = "search"
DIFF = "diff"
MODE = "mode"


@dataclass(frozen=True)
class Command:
    """Base class for parsed commands; ``index`` is the 1-based line number."""
    index: int


@dataclass(frozen=True)
class LocateCommand(Command):
    pattern: str


@dataclass(frozen=True)
class CompareCommand(Command):
    name_a: str
    name_b: str


@dataclass(frozen=True)
class ModeCommand(Command):
    name: str


@dataclass(frozen=True)
class UnrecognizedCommand(Command):
    raw: str


def parse_command(line: str, index: int) -> Command:
    """
    Parse one command line.

    Args:
        line: Raw command line (trailing newline allowed)
        index: 1-based position of the line in the command stream

    Returns:
        The matching Command variant

    Example:
        >>> parse_command("diff\\tP1\\tP2", 3)
        CompareCommand(index=3, name_a='P1', name_b='P2')
    """
    line = line.rstrip("\r\n")
    args = line.split("\t")
    keyword = args[0]

    if keyword == SEARCH and len(args) >= 2:
        return LocateCommand(index=index, pattern=args[1])
    if keyword == DIFF and len(args) >= 3:
        return CompareCommand(index=index, name_a=args[1], name_b=args[2])
    if keyword == MODE and len(args) >= 2:
        return ModeCommand(index=index, name=args[1])

    if keyword in (SEARCH, DIFF, MODE):
        logger.warning("Command %d (%s) is missing arguments", index, keyword)
    return UnrecognizedCommand(index=index, raw=line)


def parse_commands(stream: Iterable[str]) -> Iterator[Command]:
    """Parse an iterable of command lines, numbering them from 1."""
    for index, line in enumerate(stream, start=1):
        yield parse_command(line, index)


def read_commands(
    filepath: Union[str, Path],
    encoding: str = "utf-8"
) -> Iterator[Command]:
    """
    Read commands from a file.

    The file stays open only while the iterator is consumed.

    Args:
        filepath: Path to the command file
        encoding: Text encoding of the file

    Yields:
        Command objects in file order
    """
    logger.debug("Reading commands from %s", filepath)
    with open_file(filepath, "rt", encoding=encoding) as f:
        yield from parse_commands(f)
