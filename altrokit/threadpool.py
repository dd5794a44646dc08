"""A basic thread pool fed from a single work queue."""

from __future__ import annotations

import sys
import threading
import time
from concurrent.futures import Future
from concurrent.futures import wait as _wait_futures
from datetime import timedelta
from typing import Callable

from altrokit.threadsafe_queue import ThreadSafeQueue

_TASK_TIMEOUT = 10.0
_IDLE_SLEEP = 0.0005


class ThreadPool:
    """Runs no-argument callables on a fixed set of worker threads.

    Tasks can be added before or after :meth:`launch_threads`. :meth:`wait`
    waits for every submitted task, allowing each one a timeout, and
    :meth:`stop_threads` shuts the workers down. Used as a context manager the
    pool stops its threads on exit.
    """

    def __init__(self) -> None:
        self._running = threading.Event()
        self._threads: list[threading.Thread] = []
        self._futures: list[Future] = []
        self._queue = ThreadSafeQueue()
        self._timeout = _TASK_TIMEOUT

    def add_task(self, task: Callable[[], object]) -> Future:
        """Queue ``task`` to be run by a worker; returns its future."""
        if not callable(task):
            raise TypeError("A task must be callable with no arguments.")
        future: Future = Future()
        self._futures.append(future)
        self._queue.push((task, future))
        return future

    def num_tasks(self) -> int:
        """Number of tasks waiting in the work queue."""
        return len(self._queue)

    def num_threads(self) -> int:
        """Number of worker threads in the pool."""
        return len(self._threads)

    def wait(self) -> None:
        """Wait for all submitted tasks, allowing each one the per-task timeout."""
        for future in self._futures:
            done, _ = _wait_futures([future], timeout=self._timeout)
            if not done:
                sys.stdout.write(f"Task timed out after {self._timeout}s\n")
        self._futures.clear()

    def launch_threads(self, nthreads: int) -> None:
        """Start ``nthreads`` workers; queued tasks begin running at once."""
        if self.is_running():
            raise RuntimeError("Cannot launch threads when they're already running.")
        if nthreads < 0:
            raise ValueError(f"Number of threads must be non-negative, got {nthreads}")
        self._running.set()
        self._threads = []
        try:
            for i in range(nthreads):
                thread = threading.Thread(
                    target=self._worker, name=f"altrokit-worker-{i}", daemon=True
                )
                thread.start()
                self._threads.append(thread)
        except BaseException:
            self.stop_threads()
            raise

    def stop_threads(self) -> None:
        """Stop the workers and wait for them to finish their current task."""
        self._running.clear()
        for thread in self._threads:
            thread.join()
        self._threads = []

    def is_running(self) -> bool:
        """True while the workers are launched (they may be idle)."""
        return self._running.is_set()

    def set_timeout_per_task(self, timeout: "float | timedelta") -> None:
        """Set how long :meth:`wait` allows each task, in seconds or as a timedelta."""
        seconds = timeout.total_seconds() if isinstance(timeout, timedelta) else float(timeout)
        if seconds < 0:
            raise ValueError(f"Timeout must be non-negative, got {seconds}")
        self._timeout = seconds

    def _worker(self) -> None:
        while self._running.is_set():
            try:
                task, future = self._queue.try_pop()
            except IndexError:
                time.sleep(_IDLE_SLEEP)
                continue
            if not future.set_running_or_notify_cancel():
                continue
            try:
                result = task()
            except BaseException as err:  # delivered through the future
                future.set_exception(err)
            else:
                future.set_result(result)

    def __enter__(self) -> "ThreadPool":
        return self

    def __exit__(self, *args) -> None:
        if self.is_running():
            self.stop_threads()