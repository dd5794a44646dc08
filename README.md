# altrokit

Support pieces for trajectory optimization solvers: trajectories of knot
points, solver options and statistics, a tabular console logger, a
hierarchical profiler and a small thread pool.

## What is in it

- `altrokit.knotpoint.KnotPoint` is a dataclass holding a state vector, a
  control vector (both numpy arrays), a time and a time step. A knot point
  with a zero step is terminal. `KnotPoint.zeros` and `KnotPoint.random`
  build new ones; `state_control()` stacks state and control into one vector;
  `to_string()` renders a single line.
- `altrokit.trajectory.Trajectory` is a sequence of N+1 knot points spanning
  N segments. Build one with `Trajectory.zeros` or `Trajectory.from_states`
  (N+1 states, N controls, N+1 times). It supports `len()`, iteration and
  indexing, `set_zero()`, `set_uniform_step(h)` and
  `check_time_consistency()`.
- `altrokit.solver_options.SolverOptions` is a dataclass of iteration limits,
  tolerances, regularization, line search, penalty, logging and profiler
  settings. `num_threads()` returns the number of worker threads to use
  (`nthreads = -1` picks the CPU count).
- `altrokit.log_entry` has `LogLevel`, `EntryType`, `Color` and `LogEntry`,
  one formatted, coloured column of the log. Values outside optional bounds
  are shown in another colour.
- `altrokit.solver_logger.SolverLogger` prints a table of log entries row by
  row, repeating the header every `frequency` rows. Nothing is printed at
  `LogLevel.SILENT`. Output uses ANSI colour escape codes.
- `altrokit.solver_stats` has `SolverStatus` and `SolverStats`. `SolverStats`
  keeps per-iteration lists (cost, violations, gradient, penalties and so on)
  with a preconfigured `SolverLogger` and a `Timer`.
- `altrokit.timer.Timer` is a hierarchical profiler. `Timer.start(name)`
  returns a `Stopwatch` context manager; nested scopes are named with `/` and
  repeated scopes accumulate. `print_summary()` prints a table of
  microseconds and percentages. The timer is inactive until `activate()`.
- `altrokit.profile_entry.ProfileEntry` is one row of that summary.
- `altrokit.threadpool.ThreadPool` runs no-argument callables on worker
  threads from an `altrokit.threadsafe_queue.ThreadSafeQueue`.
- `altrokit.exceptions` has `AltroError`, a `RuntimeError` carrying an
  `ErrorCode`. The timer raises it when it cannot open an output file.

## Installation

```
pip install altrokit
```

The package needs Python 3.10 or later and numpy.

## Examples

A trajectory from states, controls and times:

```python
import numpy as np

from altrokit.trajectory import Trajectory

states = [np.zeros(2), np.ones(2), 2 * np.ones(2)]
controls = [np.zeros(1), np.ones(1)]
traj = Trajectory.from_states(states, controls, [0.0, 0.1, 0.2])

print(traj.num_segments())            # 2
print(traj[-1].is_terminal())         # True
print(traj.check_time_consistency())  # True
```

A console log table:

```python
from altrokit.log_entry import EntryType, LogLevel
from altrokit.solver_logger import SolverLogger

logger = SolverLogger(LogLevel.OUTER)
logger.add_entry(0, "iter", "{:>4}", EntryType.INT).set_level(LogLevel.OUTER)
logger.add_entry(-1, "cost", "{:.4g}").set_level(LogLevel.OUTER)
logger.log("iter", 1)
logger.log("cost", 10.0)
logger.print()
```

Profiling nested scopes:

```python
from altrokit.timer import Timer

timer = Timer()
timer.activate()
with timer.start("solve"):
    with timer.start("step"):
        sum(range(100_000))
print(sorted(timer.times))  # ['solve', 'solve/step']
timer.print_summary()
```

Running tasks on a thread pool:

```python
from altrokit.threadpool import ThreadPool

with ThreadPool() as pool:
    future = pool.add_task(lambda: 2 + 2)
    pool.launch_threads(2)
    pool.wait()
    print(future.result())  # 4
```

## What it does not do

The package holds the data structures and tooling around a solver but no
solver itself. It has no cost functions, no constraint or cone types, no
augmented Lagrangian terms, no dynamics and no optimization routine, and no
command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```