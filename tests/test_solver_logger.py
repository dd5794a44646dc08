import io
import re

import pytest

from altrokit.log_entry import Color, EntryType, LogLevel
from altrokit.solver_logger import SolverLogger

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


def plain(text):
    return _ANSI.sub("", text)


def make_logger(level=LogLevel.INNER):
    out = io.StringIO()
    logger = SolverLogger(level, out)
    logger.add_entry(0, "iters", "{:>4}", EntryType.INT).set_width(6).set_level(LogLevel.OUTER_DEBUG)
    logger.add_entry(1, "cost", "{:.4g}").set_level(LogLevel.OUTER)
    return logger, out


def test_column_order():
    logger = SolverLogger()
    logger.add_entry(0, "a", "{}")
    logger.add_entry(1, "b", "{}")
    logger.add_entry(-1, "c", "{}")
    logger.add_entry(0, "d", "{}")
    logger.add_entry(-2, "e", "{}")
    assert [e.title for e in logger] == ["d", "a", "b", "e", "c"]
    assert len(logger) == 5


def test_add_entry_out_of_range():
    logger = SolverLogger()
    logger.add_entry(0, "a", "{}")
    with pytest.raises(IndexError):
        logger.add_entry(2, "b", "{}")
    with pytest.raises(IndexError):
        logger.add_entry(-3, "b", "{}")
    assert len(logger) == 1


def test_duplicate_title_rejected():
    logger = SolverLogger()
    logger.add_entry(0, "a", "{}")
    with pytest.raises(ValueError):
        logger.add_entry(0, "a", "{}")


def test_get_entry():
    logger, _ = make_logger()
    assert logger.get_entry("cost").title == "cost"
    with pytest.raises(KeyError):
        logger.get_entry("missing")


def test_silent_prints_nothing():
    logger, out = make_logger(LogLevel.SILENT)
    logger.log("cost", 1.0)
    logger.print()
    assert out.getvalue() == ""
    assert logger.get_entry("cost").data == ""


def test_log_stores_active_only():
    logger, _ = make_logger(LogLevel.OUTER)
    logger.log("cost", 2.0)
    logger.log("iters", 5)
    assert logger.get_entry("cost").data == "{:.4g}".format(2.0)
    assert logger.get_entry("iters").data == ""


def test_log_unknown_title_ignored():
    logger, _ = make_logger()
    logger.log("unknown", 1.0)
    assert len(logger) == 2


def test_header_rule_matches_widths():
    logger, out = make_logger()
    logger.print_header()
    lines = plain(out.getvalue()).splitlines()
    assert len(lines) == 2
    expected = sum(e.width + 1 for e in logger)
    assert lines[1] == "-" * expected
    assert lines[0].split() == ["iters", "cost"]


def test_inactive_entries_excluded():
    logger, out = make_logger(LogLevel.OUTER)
    logger.print_header()
    lines = plain(out.getvalue()).splitlines()
    assert lines[0].split() == ["cost"]
    assert lines[1] == "-" * (logger.get_entry("cost").width + 1)


def test_header_color():
    logger, out = make_logger()
    logger.set_header_color(Color.CYAN)
    logger.print_header()
    assert Color.CYAN.apply("-" * 18) in out.getvalue()


def test_header_frequency():
    logger, out = make_logger()
    logger.set_frequency(2)
    for i in range(3):
        logger.log("iters", i)
        logger.print()
    lines = plain(out.getvalue()).splitlines()
    rules = [line for line in lines if line and set(line) == {"-"}]
    assert len(rules) == 2
    assert len(lines) == 2 * 2 + 3


def test_data_kept_between_prints():
    logger, out = make_logger()
    logger.set_frequency(5)
    logger.log("iters", 1)
    logger.log("cost", 10.0)
    logger.print()
    first_cost = logger.get_entry("cost").data
    logger.log("iters", 2)
    logger.print()
    assert logger.get_entry("cost").data == first_cost
    last_row = plain(out.getvalue()).splitlines()[-1]
    assert last_row.split() == ["2", first_cost]


def test_clear_resets_data():
    logger, _ = make_logger()
    logger.log("cost", 3.0)
    logger.clear()
    assert all(e.data == "" for e in logger)


def test_set_frequency_invalid():
    logger = SolverLogger()
    with pytest.raises(ValueError):
        logger.set_frequency(0)


def test_disable_and_set_level():
    logger = SolverLogger(LogLevel.DEBUG)
    logger.set_level(LogLevel.OUTER)
    assert logger.level == LogLevel.OUTER
    logger.disable()
    assert logger.level == LogLevel.SILENT