"""Tabular console logging for the solvers."""

from __future__ import annotations

import sys
from typing import Any, Iterator, TextIO

from altrokit.log_entry import Color, EntryType, LogEntry, LogLevel

_DEFAULT_FREQUENCY = 10


class SolverLogger:
    """A table of log entries printed row by row.

    Entries are keyed by their title. The header is reprinted every
    ``frequency`` rows; nothing is printed at the silent level.
    """

    def __init__(self, level: LogLevel = LogLevel.SILENT, file: TextIO | None = None) -> None:
        self.level = level
        self.file = file
        self.frequency = _DEFAULT_FREQUENCY
        self.header_color = Color.WHITE
        self._count = 0
        self._entries: dict[str, LogEntry] = {}
        self._order: list[str] = []

    def _out(self) -> TextIO:
        return self.file if self.file is not None else sys.stdout

    def add_entry(
        self,
        col: int,
        title: str,
        fmt: str,
        entry_type: EntryType = EntryType.FLOAT,
    ) -> LogEntry:
        """Add a column at position ``col``; negative positions count from the end.

        ``col == -1`` appends the entry as the last column.
        """
        size = len(self._entries)
        if col > size:
            raise IndexError(
                f"Column ({col}) must be less than or equal to the current number "
                f"of entries ({size})."
            )
        if col < -size - 1:
            raise IndexError(
                f"Column ({col}) must be greater or equal to than the negative new "
                f"number of entries ({-size - 1})."
            )
        if title in self._entries:
            raise ValueError(f"An entry titled {title!r} already exists.")
        entry = LogEntry(title, fmt, entry_type)
        self._entries[title] = entry
        position = size + col + 1 if col < 0 else col
        self._order.insert(position, title)
        return entry

    def get_entry(self, title: str) -> LogEntry:
        """The entry with the given title; raises KeyError if there is none."""
        return self._entries[title]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LogEntry]:
        return (self._entries[title] for title in self._order)

    def set_level(self, level: LogLevel) -> None:
        self.level = level

    def disable(self) -> None:
        """Turn off all output."""
        self.set_level(LogLevel.SILENT)

    def set_frequency(self, freq: int) -> None:
        """Print the header once every ``freq`` rows."""
        if freq <= 0:
            raise ValueError("Header print frequency must be positive.")
        self.frequency = freq

    def set_header_color(self, color: Color) -> None:
        self.header_color = color

    def log(self, title: str, value: Any) -> None:
        """Record ``value`` in the column ``title`` if it is active.

        Unknown titles are ignored.
        """
        if self.level <= LogLevel.SILENT:
            return
        entry = self._entries.get(title)
        if entry is not None and entry.is_active(self.level):
            entry.log(value)

    def print_header(self) -> None:
        """Print the titles of active entries followed by a horizontal rule."""
        if self.level == LogLevel.SILENT:
            return
        out = self._out()
        total_width = 0
        any_active = False
        for entry in self:
            if entry.is_active(self.level):
                out.write(entry.render_header(self.level, self.header_color))
                out.write(" ")
                any_active = True
                total_width += entry.width + 1
        if any_active:
            out.write("\n")
            out.write(self.header_color.apply("-" * total_width) + "\n")

    def print_data(self) -> None:
        """Print one row with the data of all active entries."""
        if self.level == LogLevel.SILENT:
            return
        out = self._out()
        any_active = False
        for entry in self:
            if entry.is_active(self.level):
                out.write(entry.render(self.level))
                out.write(" ")
                any_active = True
        if any_active:
            out.write("\n")

    def print(self) -> None:
        """Print a data row, preceded by the header every ``frequency`` rows."""
        if self._count % self.frequency == 0:
            self._count = 0
            self.print_header()
        self.print_data()
        self._count += 1

    def clear(self) -> None:
        """Clear all logged data and restart the header count."""
        self._count = 0
        for entry in self._entries.values():
            entry.clear()