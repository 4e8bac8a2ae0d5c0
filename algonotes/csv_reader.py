"""Reading delimited text files column by column."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Optional, Union

Row = dict[str, Optional[str]]


class CsvError(Exception):
    """Raised when a file cannot be opened or its header does not fit."""


@dataclass(frozen=True)
class Column:
    """A wanted column; columns compare and hash by name alone."""

    name: str
    required: bool = field(default=False, compare=False)


class CsvReader:
    """Reads a delimited file whose first line names the columns.

    Every character of ``delimiter`` separates fields; empty fields are kept.
    Only the named ``columns`` are tracked, or all of them when none are
    given. A line longer than ``max_size - 1`` characters is read in pieces,
    each counted as a line of its own.
    """

    def __init__(
        self,
        path,
        columns: Iterable[Union[Column, str]] = (),
        delimiter: str = ",",
        max_size: int = 4096,
    ) -> None:
        try:
            self._file = open(path, "r", newline="\n")
        except OSError as exc:
            raise CsvError(f"Failed to open file {path}") from exc
        if max_size <= 0:
            self.close()
            raise CsvError("Maximum line size <= 0")
        self._limit = max_size - 1
        self._split = self._splitter(delimiter)
        self._slots: list[Optional[str]] = []
        self._row: Row = {}
        try:
            self._read_header(columns)
        except CsvError:
            self.close()
            raise

    @staticmethod
    def _splitter(delimiter: str) -> Callable[[str], list[str]]:
        if not delimiter:
            return lambda line: [line]
        pattern = re.compile("|".join(re.escape(ch) for ch in sorted(set(delimiter))))
        return pattern.split

    def _get_line(self) -> Optional[str]:
        line = self._file.readline(self._limit)
        if not line:
            return None
        return line[:-1] if line.endswith("\n") else line

    def _read_header(self, columns: Iterable[Union[Column, str]]) -> None:
        wanted: dict[str, Column] = {}
        for col in columns:
            col = Column(col) if isinstance(col, str) else col
            wanted.setdefault(col.name, col)

        header = self._get_line()
        if header is None:
            raise CsvError("File is empty")

        found: dict[str, int] = {}
        for index, name in enumerate(self._split(header)):
            if not wanted or name in wanted:
                found.setdefault(name, index)
        self._slots = [None] * len(self._split(header))
        for name, index in found.items():
            self._slots[index] = name
        self._names = sorted(found)
        self._row = dict.fromkeys(self._names)

        for name in sorted(wanted):
            if wanted[name].required and name not in found:
                raise CsvError(f"Column {name} not found")

    def _parse(self, line: str) -> None:
        self._row = dict.fromkeys(self._names)
        for name, value in zip(self._slots, self._split(line)):
            if name is not None:
                self._row[name] = value

    def is_open(self) -> bool:
        """Return whether the file is still open."""
        return self._file is not None

    def read_line(self) -> bool:
        """Read the next line into :meth:`row`; return False at end of file."""
        if self._file is None:
            return False
        line = self._get_line()
        if line is None:
            return False
        self._parse(line)
        return True

    def row(self) -> Row:
        """Return the tracked columns of the last line read, by name."""
        return dict(self._row)

    def process(
        self,
        func: Callable[[Row, int], object],
        offset: int = -1,
        length: int = -1,
    ) -> None:
        """Call ``func(row, lineno)`` for lines from ``offset`` on.

        Line numbers start at 0 after the header. At most ``length`` lines are
        handed over; a negative offset or length means no limit. Processing
        stops early when ``func`` returns a false value.
        """
        if self._file is None:
            return
        offset = max(offset, 0)
        lineno = 0
        while length < 0 or lineno - offset < length:
            line = self._get_line()
            if line is None:
                break
            if lineno >= offset:
                self._parse(line)
                if not func(self.row(), lineno):
                    break
            lineno += 1

    def close(self) -> None:
        """Close the file; closing twice is harmless."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> CsvReader:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()