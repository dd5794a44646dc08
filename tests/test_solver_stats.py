import sys

import pytest

from altrokit.log_entry import LogLevel
from altrokit.solver_stats import SolverStats


def test_default_logger_columns_in_order():
    stats = SolverStats()
    titles = [entry.title for entry in stats.logger]
    assert titles == ["iters", "iter_al", "cost", "viol", "dJ", "grad", "alpha", "reg", "z", "pen"]


def test_first_log_registers_an_iteration():
    stats = SolverStats()
    stats.log("cost", 3.0)
    assert stats.cost == [3.0]
    assert stats.alpha == [0.0]
    assert len(stats.violations) == 1


def test_log_overwrites_current_iteration():
    stats = SolverStats()
    stats.log("cost", 3.0)
    stats.log("cost", 2.0)
    assert stats.cost == [2.0]


def test_new_iteration_copies_previous_values():
    stats = SolverStats()
    stats.log("viol", 0.5)
    stats.new_iteration()
    stats.log("cost", 1.5)
    assert stats.violations == [0.5, 0.5]
    assert stats.cost == [0.0, 1.5]


def test_integer_entries_are_not_stored():
    stats = SolverStats()
    stats.log("iters", 4)
    lengths = {len(v) for v in (stats.cost, stats.alpha, stats.gradient, stats.max_penalty)}
    assert lengths == {1}
    assert stats.cost == [0.0]


def test_reset_clears_data_and_counters():
    stats = SolverStats()
    stats.iterations_total = 5
    stats.log("cost", 1.0)
    stats.new_iteration()
    stats.reset()
    assert stats.cost == []
    assert stats.iterations_total == 0
    assert stats.capacity == stats.options.max_iterations_total
    stats.log("cost", 2.0)
    assert stats.cost == [2.0]


def test_reset_applies_verbosity_and_header_frequency():
    stats = SolverStats()
    stats.options.verbose = LogLevel.OUTER
    stats.reset()
    assert stats.verbosity() == LogLevel.OUTER
    assert stats.logger.frequency == stats.options.header_frequency
    stats.options.verbose = LogLevel.INNER
    stats.reset()
    assert stats.logger.frequency == sys.maxsize


def test_set_tolerances_bounds_entries():
    stats = SolverStats()
    stats.set_tolerances(1e-3, 1e-4, 1e-2)
    assert stats.logger.get_entry("dJ").lower == 1e-3
    assert stats.logger.get_entry("viol").lower == 1e-4
    assert stats.logger.get_entry("grad").bounded is True


def test_set_capacity_rejects_negative():
    stats = SolverStats()
    with pytest.raises(ValueError):
        stats.set_capacity(-1)


def test_profile_output_file_default():
    stats = SolverStats()
    assert stats.profile_output_file() == "logs/profiler.out"


def test_profiler_output_to_file_writes_summary(tmp_path):
    stats = SolverStats()
    stats.options.log_directory = str(tmp_path)
    stats.profiler_output_to_file(True)
    stats.timer.activate()
    with stats.timer.start("al"):
        pass
    stats.timer.close()
    text = (tmp_path / "profiler.out").read_text()
    assert text.startswith("Description")


def test_print_last_shows_active_entries(capsys):
    stats = SolverStats()
    stats.set_verbosity(LogLevel.OUTER)
    stats.log("iter_al", 1)
    stats.print_last()
    out = capsys.readouterr().out
    assert "iter_al" in out
    assert "alpha" not in out


def test_silent_print_last_prints_nothing(capsys):
    stats = SolverStats()
    stats.log("cost", 1.0)
    stats.print_last()
    assert capsys.readouterr().out == ""