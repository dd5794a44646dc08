import threading
import time
from datetime import timedelta

import pytest

from altrokit.threadpool import ThreadPool


def test_new_pool_is_idle():
    pool = ThreadPool()
    assert not pool.is_running()
    assert pool.num_threads() == 0
    assert pool.num_tasks() == 0


def test_tasks_queue_until_launch():
    pool = ThreadPool()
    for _ in range(3):
        pool.add_task(lambda: None)
    assert pool.num_tasks() == 3


def test_tasks_run_after_launch():
    results = []
    lock = threading.Lock()

    def make_task(i):
        def task():
            with lock:
                results.append(i)
        return task

    with ThreadPool() as pool:
        for i in range(20):
            pool.add_task(make_task(i))
        pool.launch_threads(3)
        assert pool.is_running()
        assert pool.num_threads() == 3
        pool.wait()
        assert sorted(results) == list(range(20))
        assert pool.num_tasks() == 0
    assert not pool.is_running()
    assert pool.num_threads() == 0


def test_add_task_returns_future_with_result():
    with ThreadPool() as pool:
        pool.launch_threads(2)
        future = pool.add_task(lambda: "done")
        pool.wait()
        assert future.result(timeout=1) == "done"


def test_exception_in_task_does_not_stop_pool():
    with ThreadPool() as pool:
        pool.launch_threads(1)

        def boom():
            raise ValueError("bad task")

        failing = pool.add_task(boom)
        ok = pool.add_task(lambda: 42)
        pool.wait()
        assert isinstance(failing.exception(timeout=1), ValueError)
        assert ok.result(timeout=1) == 42


def test_launch_twice_raises():
    with ThreadPool() as pool:
        pool.launch_threads(1)
        with pytest.raises(RuntimeError):
            pool.launch_threads(1)


def test_negative_thread_count_raises():
    pool = ThreadPool()
    with pytest.raises(ValueError):
        pool.launch_threads(-1)
    assert not pool.is_running()


def test_non_callable_task_raises():
    pool = ThreadPool()
    with pytest.raises(TypeError):
        pool.add_task(5)


def test_stop_threads_allows_relaunch():
    pool = ThreadPool()
    pool.launch_threads(2)
    pool.stop_threads()
    assert not pool.is_running()
    assert pool.num_threads() == 0
    pool.launch_threads(1)
    try:
        future = pool.add_task(lambda: 7)
        pool.wait()
        assert future.result(timeout=1) == 7
    finally:
        pool.stop_threads()


def test_wait_reports_timeout(capsys):
    with ThreadPool() as pool:
        pool.set_timeout_per_task(timedelta(milliseconds=10))
        pool.launch_threads(1)
        pool.add_task(lambda: time.sleep(0.2))
        pool.wait()
        out = capsys.readouterr().out
        assert "Task timed out after" in out


def test_negative_timeout_raises():
    pool = ThreadPool()
    with pytest.raises(ValueError):
        pool.set_timeout_per_task(-1.0)