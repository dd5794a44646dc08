"""Rows of the profiler summary table."""

from __future__ import annotations

import sys
from typing import TextIO

_PERCENT_SCALING = 100


class ProfileEntry:
    """One timed scope in the profiler summary.

    The full name is split on ``/`` into a stack of names, e.g.
    ``"al/ilqr/cost"`` becomes ``["al", "ilqr", "cost"]``. Entries are linked
    to their parent scope so that each time can be compared with the total
    recorded time and with the time of the enclosing scope.
    """

    def __init__(self, fullname: str, time: int) -> None:
        self.name: list[str] = fullname.split("/")
        self.time = int(time)
        self.percent_total = 0
        self.percent_parent = 0
        self.parent: ProfileEntry | None = None

    def num_levels(self) -> int:
        """Depth of the scope, e.g. 3 for ``"al/ilqr/cost"``."""
        return len(self.name)

    def root(self) -> "ProfileEntry":
        """The entry at the top of the parent chain."""
        entry = self
        while entry.parent is not None:
            entry = entry.parent
        return entry

    def calc_stats(self) -> None:
        """Compute the share of the total and of the parent time, in percent.

        A share is -1 when the reference time is zero.
        """
        total_time = self.root().time
        parent_time = self.parent.time if self.parent is not None else self.time
        if total_time == 0:
            self.percent_total = -1
        else:
            self.percent_total = _PERCENT_SCALING * self.time // total_time
        if parent_time == 0:
            self.percent_parent = -1
        else:
            self.percent_parent = _PERCENT_SCALING * self.time // parent_time

    def format(self, width: int) -> str:
        """One summary line, with the name indented by its parents' name lengths."""
        indent = sum(len(part) for part in self.name[:-1])
        indented_name = " " * indent + self.name[-1]
        return (
            f"{indented_name:<{width}}  {self.time:>8}  "
            f"{self.percent_total:>7}  {self.percent_parent:>7}"
        )

    def print(self, file: TextIO | None = None, width: int = 0) -> None:
        """Write the summary line to ``file`` (standard output by default)."""
        (file or sys.stdout).write(self.format(width) + "\n")

    def __repr__(self) -> str:
        return f"ProfileEntry({'/'.join(self.name)!r}, {self.time})"