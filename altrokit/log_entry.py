"""A single column of the tabular solver log."""

from __future__ import annotations

import math
import sys
from enum import Enum, IntEnum
from typing import Any, TextIO

_DEFAULT_WIDTH = 10


class LogLevel(IntEnum):
    """Verbosity level of the solver output; higher levels print more."""

    SILENT = 0
    OUTER = 1
    OUTER_DEBUG = 2
    INNER = 3
    INNER_DEBUG = 4
    DEBUG = 5


class EntryType(Enum):
    """Kind of data held by a log entry."""

    INT = "int"
    FLOAT = "float"
    STRING = "string"


class Color(Enum):
    """Foreground colours used for the terminal output, as RGB triples."""

    WHITE = (255, 255, 255)
    GREEN = (0, 128, 0)
    RED = (255, 0, 0)
    YELLOW = (255, 255, 0)
    CYAN = (0, 255, 255)
    BLUE = (0, 0, 255)

    def apply(self, text: str) -> str:
        """Wrap ``text`` in the terminal escape codes for this colour."""
        r, g, b = self.value
        return f"\x1b[38;2;{r};{g};{b}m{text}\x1b[0m"


class LogEntry:
    """One field of the solver log: title, format, width, level and bounds.

    Numeric values outside the optional bounds are shown in a different colour.
    """

    def __init__(self, title: str, fmt: str, entry_type: EntryType = EntryType.FLOAT) -> None:
        self.title = title
        self.name = title
        self.fmt = fmt
        self.entry_type = entry_type
        self.data = ""
        self.level = LogLevel.INNER
        self.width = _DEFAULT_WIDTH
        self.bounded = False
        self.lower = -math.inf
        self.upper = math.inf
        self.color = Color.WHITE
        self.color_default = Color.WHITE
        self.color_lower = Color.GREEN
        self.color_upper = Color.RED

    def set_lower_bound(self, lb: float, color: Color = Color.GREEN) -> "LogEntry":
        """Colour values below ``lb`` with ``color``."""
        if lb > self.upper:
            raise ValueError("Lower bound must be less than or equal to the upper bound.")
        self.bounded = True
        self.lower = lb
        self.color_lower = color
        return self

    def set_upper_bound(self, ub: float, color: Color = Color.RED) -> "LogEntry":
        """Colour values above ``ub`` with ``color``."""
        if ub < self.lower:
            raise ValueError("Upper bound must be greater than or equal to the lower bound.")
        self.bounded = True
        self.upper = ub
        self.color_upper = color
        return self

    def set_width(self, width: int) -> "LogEntry":
        self.width = width
        return self

    def set_level(self, level: LogLevel) -> "LogEntry":
        self.level = level
        return self

    def set_name(self, name: str) -> "LogEntry":
        self.name = name
        return self

    def set_type(self, entry_type: EntryType) -> "LogEntry":
        self.entry_type = entry_type
        return self

    def is_active(self, level: LogLevel) -> bool:
        """True if the entry is shown at verbosity ``level``."""
        return level >= self.level

    def _color_for(self, value: Any) -> Color:
        if self.bounded:
            if value < self.lower:
                return self.color_lower
            if value > self.upper:
                return self.color_upper
        return self.color_default

    def log(self, value: Any) -> None:
        """Format ``value`` and keep it for the next print."""
        self.color = self._color_for(value)
        self.data = self.fmt.format(value)

    def render(self, level: LogLevel = LogLevel.SILENT) -> str:
        """The coloured, right-aligned data field, or an empty string if inactive."""
        if not self.is_active(level):
            return ""
        return self.color.apply(f"{self.data:>{self.width}}")

    def render_header(self, level: LogLevel = LogLevel.SILENT, color: Color = Color.WHITE) -> str:
        """The coloured, right-aligned title, or an empty string if inactive."""
        if not self.is_active(level):
            return ""
        return color.apply(f"{self.title:>{self.width}}")

    def print(self, level: LogLevel = LogLevel.SILENT, file: TextIO | None = None) -> None:
        """Write the data field if the entry is active at ``level``."""
        (file or sys.stdout).write(self.render(level))

    def print_header(
        self,
        level: LogLevel = LogLevel.SILENT,
        color: Color = Color.WHITE,
        file: TextIO | None = None,
    ) -> None:
        """Write the title if the entry is active at ``level``."""
        (file or sys.stdout).write(self.render_header(level, color))

    def clear(self) -> None:
        """Forget the logged data; an empty field is printed afterwards."""
        self.data = ""

    def __repr__(self) -> str:
        return f"LogEntry({self.title!r}, {self.fmt!r}, {self.entry_type})"