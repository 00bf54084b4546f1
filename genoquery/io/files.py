import gzip
from pathlib import Path
from typing import IO, Union


def open_file(
    filepath: Union[str, Path],
    mode: str = "rt",
    encoding: str = "utf-8",
) -> IO[str]:
    """Open a text file, handling gzip compression if needed."""
    filepath = Path(filepath)
    if filepath.suffix == ".gz":
        return gzip.open(filepath, mode, encoding=encoding)
    return open(filepath, mode, encoding=encoding, newline="\n" if "w" in mode else None)
