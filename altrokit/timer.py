"""A lightweight hierarchical profiler."""

from __future__ import annotations

import os
import sys
import time as _time
from typing import Mapping, TextIO

from altrokit.exceptions import AltroError, ErrorCode
from altrokit.profile_entry import ProfileEntry

_PAD = 2


class Stopwatch:
    """Measures the time of one scope and records it with its timer.

    Use it as a context manager, or call :meth:`stop` explicitly. A stopwatch
    from an inactive timer records nothing.
    """

    def __init__(self, name: str = "", timer: "Timer | None" = None) -> None:
        self._name = name
        self._timer = timer
        self._start = _time.perf_counter_ns()
        self._stopped = timer is None

    def __enter__(self) -> "Stopwatch":
        return self

    def __exit__(self, *args) -> None:
        self.stop()

    def stop(self) -> None:
        """Record the elapsed time with the timer; later calls do nothing."""
        if self._stopped:
            return
        self._stopped = True
        elapsed_us = (_time.perf_counter_ns() - self._start) // 1000
        self._timer._record(self._name, elapsed_us)


class Timer:
    """Collects the time spent in named, nested scopes.

    The timer is inactive by default; call :meth:`activate` to record times.
    Nested scopes are named by joining the names with ``/``, and repeated
    scopes accumulate their time. Times are kept in microseconds.
    """

    def __init__(self) -> None:
        self._stack: list[str] = []
        self._times: dict[str, int] = {}
        self._active = False
        self._printed_summary = False
        self._io: TextIO | None = None
        self._owns_io = False

    @property
    def times(self) -> dict[str, int]:
        """Accumulated microseconds for each full scope name."""
        return dict(self._times)

    def start(self, name: str) -> Stopwatch:
        """Start timing the scope ``name`` nested in the scopes already open."""
        if not self._active:
            return Stopwatch()
        self._stack.append(name)
        return Stopwatch("/".join(self._stack), self)

    def _record(self, fullname: str, elapsed_us: int) -> None:
        if self._stack:
            self._stack.pop()
        self._times[fullname] = self._times.get(fullname, 0) + elapsed_us

    def activate(self) -> None:
        self._active = True

    def deactivate(self) -> None:
        self._active = False

    def is_active(self) -> bool:
        return self._active

    def _out(self) -> TextIO:
        return self._io if self._io is not None else sys.stdout

    def _release_file(self) -> None:
        if self._owns_io and self._io is not None:
            self._io.close()
        self._owns_io = False

    def set_output(self, output: "TextIO | str | os.PathLike | None") -> None:
        """Send the summary to a stream, to a file path, or to stdout for ``None``.

        A file opened from a path is owned by the timer and closed by :meth:`close`.
        """
        if output is None or hasattr(output, "write"):
            self._release_file()
            self._io = output
            return
        try:
            handle = open(output, "w", encoding="utf-8")
        except OSError as err:
            raise AltroError(
                f'Error opening profiler file "{os.fspath(output)}". Got errno {err.errno}.',
                ErrorCode.FILE_ERROR,
            ) from err
        self._release_file()
        self._io = handle
        self._owns_io = True

    def print_summary(self, times: Mapping[str, int] | None = None) -> None:
        """Print a table of the recorded times, sorted by scope name."""
        if times is None:
            times = self._times
        top = ProfileEntry("top", 0)
        entries: list[ProfileEntry] = []
        parents: list[ProfileEntry | None] = [top]
        max_width = 0
        for fullname, elapsed in sorted(times.items()):
            entry = ProfileEntry(fullname, elapsed)
            entries.append(entry)
            level = entry.num_levels()
            if level >= len(parents):
                parents.extend([None] * (level + 1 - len(parents)))
            parents[level] = entry
            entry.parent = parents[level - 1]
            if level == 1:
                top.time += entry.time
            max_width = max(max_width, sum(len(part) for part in entry.name))

        max_width += _PAD
        header = (
            f"{'Description':<{max_width}}  {'Time (us)':>8}  {'%Total':>7}  {'%Parent':>7}"
        )
        out = self._out()
        out.write(header + "\n")
        out.write("-" * len(header) + "\n")
        for entry in entries:
            entry.calc_stats()
            entry.print(out, max_width)
        self._printed_summary = True

    def close(self) -> None:
        """Print the summary if still due and close an owned output file."""
        if self._active and not self._printed_summary:
            self.print_summary()
        self._release_file()
        self._io = None

    def __enter__(self) -> "Timer":
        return self

    def __exit__(self, *args) -> None:
        self.close()