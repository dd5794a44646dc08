"""Statistics recorded during a solve, with console logging."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Any

from altrokit.log_entry import Color, EntryType, LogLevel
from altrokit.solver_logger import SolverLogger
from altrokit.solver_options import SolverOptions
from altrokit.timer import Timer


class SolverStatus(Enum):
    """Outcome of a solve, or the reason it stopped."""

    SOLVED = 0
    UNSOLVED = 1
    STATE_LIMIT = 2
    CONTROL_LIMIT = 3
    COST_INCREASE = 4
    MAX_ITERATIONS = 5
    MAX_OUTER_ITERATIONS = 6
    MAX_INNER_ITERATIONS = 7
    MAX_PENALTY = 8
    BACKWARD_PASS_REGULARIZATION_FAILED = 9


class SolverStats:
    """Per-iteration solver data together with its console logger and profiler."""

    def __init__(self) -> None:
        self.initial_cost = 0.0
        self.iterations_inner = 0
        self.iterations_outer = 0
        self.iterations_total = 0
        self.cost: list[float] = []
        self.alpha: list[float] = []
        self.improvement_ratio: list[float] = []
        self.gradient: list[float] = []
        self.cost_decrease: list[float] = []
        self.regularization: list[float] = []
        self.violations: list[float] = []
        self.max_penalty: list[float] = []
        self.capacity = 0

        self.logger = SolverLogger()
        self.timer = Timer()
        self.options = SolverOptions()
        self._floats: dict[str, list[float]] = {}
        self._len = 0
        self._default_logger()

    def _default_logger(self) -> None:
        logger = self.logger
        (
            logger.add_entry(0, "iters", "{:>4}", EntryType.INT)
            .set_name("iterations")
            .set_level(LogLevel.OUTER_DEBUG)
            .set_width(6)
        )
        (
            logger.add_entry(1, "iter_al", "{:>4}", EntryType.INT)
            .set_name("iterations_outer")
            .set_level(LogLevel.OUTER)
            .set_width(8)
        )
        logger.add_entry(-1, "cost", "{:>.4g}")
        self._floats["cost"] = self.cost
        logger.add_entry(-1, "viol", "{:>.3e}").set_name("constraint_violation")
        self._floats["viol"] = self.violations
        logger.add_entry(-1, "dJ", "{:>.2e}").set_name("cost_improvement")
        self._floats["dJ"] = self.cost_decrease
        (
            logger.add_entry(-1, "grad", "{:>.2e}")
            .set_name("gradient")
            .set_level(LogLevel.OUTER_DEBUG)
        )
        self._floats["grad"] = self.gradient
        (
            logger.add_entry(-1, "alpha", "{:>.2f}")
            .set_name("line_search_step_length")
            .set_level(LogLevel.INNER)
            .set_width(6)
        )
        self._floats["alpha"] = self.alpha
        (
            logger.add_entry(-1, "reg", "{:>.1e}")
            .set_name("regularization")
            .set_level(LogLevel.INNER_DEBUG)
            .set_width(7)
        )
        self._floats["reg"] = self.regularization
        (
            logger.add_entry(-1, "z", "{:>.3f}")
            .set_name("cost_improvement_ratio")
            .set_level(LogLevel.INNER_DEBUG)
            .set_width(5)
        )
        self._floats["z"] = self.improvement_ratio
        (
            logger.add_entry(-1, "pen", "{:>.1e}")
            .set_name("max_penalty")
            .set_level(LogLevel.DEBUG)
            .set_width(7)
        )
        self._floats["pen"] = self.max_penalty
        logger.set_header_color(Color.YELLOW)

    def set_tolerances(self, cost: float, viol: float, grad: float) -> None:
        """Show cost decrease, violation and gradient below these values in green."""
        self.logger.get_entry("dJ").set_lower_bound(cost)
        self.logger.get_entry("viol").set_lower_bound(viol)
        self.logger.get_entry("grad").set_lower_bound(grad)

    def set_capacity(self, n: int) -> None:
        """Record the expected number of iterations; the lists grow as needed."""
        if n < 0:
            raise ValueError(f"Capacity must be non-negative, got {n}")
        self.capacity = n

    def reset(self) -> None:
        """Clear all data and counters and reapply the options."""
        self.initial_cost = 0.0
        self.iterations_inner = 0
        self.iterations_total = 0
        self.iterations_outer = 0
        self._len = 0
        for values in self._floats.values():
            values.clear()
        self.logger.clear()

        opts = self.options
        self.set_capacity(opts.max_iterations_total)
        self.set_verbosity(opts.verbose)
        self.profiler_output_to_file(opts.profiler_output_to_file)

        if self.verbosity() < LogLevel.INNER:
            self.logger.set_frequency(opts.header_frequency)
        else:
            self.logger.set_frequency(sys.maxsize)

    def set_verbosity(self, level: LogLevel) -> None:
        self.logger.set_level(level)

    def verbosity(self) -> LogLevel:
        """Current verbosity of the console logger."""
        return self.logger.level

    def print_last(self) -> None:
        """Print the most recent iteration to the console."""
        self.logger.print()

    def log(self, title: str, value: Any) -> None:
        """Send ``value`` to the logger and store it as the current iteration's value."""
        self.logger.log(title, value)
        if self._len == 0:
            self.new_iteration()
        values = self._floats.get(title)
        if values is not None:
            values[-1] = float(value)

    def new_iteration(self) -> None:
        """Start a new iteration, carrying over the previous values."""
        self._len += 1
        for values in self._floats.values():
            values.append(values[-1] if values else 0.0)

    def profile_output_file(self) -> str:
        """Path of the file the profiler writes to."""
        return self.options.log_directory + "/" + self.options.profile_filename

    def profiler_output_to_file(self, flag: bool) -> None:
        """Send the profiler summary to the profile file, or to stdout."""
        if flag:
            self.timer.set_output(self.profile_output_file())
        else:
            self.timer.set_output(None)