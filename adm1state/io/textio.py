"""Line-level text I/O for delimited record files.

These helpers only move tokens and numbers between files and memory; value
parsing and layout rules live in :mod:`adm1state.io.delimited`.  File access
errors are raised unchanged as :class:`OSError`.
"""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, List, Union

from .. import constants
from ..errors import RecordParseError

PathLike = Union[str, Path]


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def format_value(value: float) -> str:
    """Return the shortest decimal text that reads back to ``value`` exactly."""

    return repr(float(value))


def iter_lines(path: PathLike, *, encoding: str = "utf-8") -> Iterator[str]:
    """Yield the non-blank lines of ``path`` without line terminators.

    Only the terminator is removed; a whitespace delimiter at either end of a
    line stays visible to the parser.
    """

    with Path(path).open("r", encoding=encoding, newline=None) as fh:
        for line in fh:
            if line.strip():
                yield line.rstrip("\r\n")


def read_tokens(
    path: PathLike,
    delimiter: str = constants.DEFAULT_DELIMITER,
    *,
    encoding: str = "utf-8",
) -> List[str]:
    """Return the delimited tokens of the first data line of ``path``."""

    for line in iter_lines(path, encoding=encoding):
        return line.split(delimiter)
    raise RecordParseError(f"{path} contains no data line")


def write_array(
    path: PathLike,
    values: Iterable[float],
    delimiter: str = constants.DEFAULT_DELIMITER,
    *,
    encoding: str = "utf-8",
) -> None:
    """Write ``values`` to ``path`` as one delimited line."""

    write_lines(path, [delimiter.join(format_value(v) for v in values)], encoding=encoding)


def write_lines(path: PathLike, lines: Iterable[str], *, encoding: str = "utf-8") -> None:
    target = Path(path)
    _ensure_parent(target)
    with target.open("w", encoding=encoding, newline="\n") as fh:
        for line in lines:
            fh.write(line)
            fh.write("\n")


__all__ = ["format_value", "iter_lines", "read_tokens", "write_array", "write_lines"]
