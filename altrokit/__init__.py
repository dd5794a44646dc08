"""Knot points, trajectories, solver options and statistics, logging, profiling and a thread pool."""

__version__ = "0.1.0"