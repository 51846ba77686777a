import threading
import time

import pytest

from algolab.work_stealing import (
    WorkStealingPool,
    WorkStealingQueue,
    run_benchmark,
    task_work,
)


def _recorder(log, value):
    return lambda: log.append(value)


def test_queue_pops_oldest_first():
    queue = WorkStealingQueue()
    log = []
    queue.push(_recorder(log, "a"))
    queue.push(_recorder(log, "b"))
    queue.try_pop_local()()
    assert log == ["a"]
    assert len(queue) == 1


def test_try_pop_local_on_empty_queue_returns_none():
    queue = WorkStealingQueue()
    assert queue.try_pop_local() is None
    assert queue.empty()


def test_steal_takes_half_from_back():
    queue = WorkStealingQueue()
    log = []
    for value in range(4):
        queue.push(_recorder(log, value))
    stolen = queue.try_steal_many()
    for task in stolen:
        task()
    assert log == [3, 2]
    assert len(queue) == 2


def test_steal_takes_single_task_when_only_one():
    queue = WorkStealingQueue()
    queue.push(lambda: None)
    assert len(queue.try_steal_many()) == 1
    assert queue.empty()


def test_steal_from_empty_queue_returns_empty_list():
    assert WorkStealingQueue().try_steal_many() == []


def test_pop_blocking_returns_none_when_stopped_and_empty():
    queue = WorkStealingQueue()
    stop = threading.Event()
    stop.set()
    assert queue.pop_blocking(stop) is None


def test_pop_blocking_drains_before_stopping():
    queue = WorkStealingQueue()
    log = []
    queue.push(_recorder(log, "x"))
    stop = threading.Event()
    stop.set()
    queue.pop_blocking(stop)()
    assert log == ["x"]


def test_pop_blocking_waits_for_push():
    queue = WorkStealingQueue()
    stop = threading.Event()
    results = []
    waiter = threading.Thread(target=lambda: results.append(queue.pop_blocking(stop)))
    waiter.start()
    time.sleep(0.05)
    marker = lambda: None  # noqa: E731
    queue.push(marker)
    waiter.join(timeout=5)
    assert results == [marker]


def test_wake_releases_waiter_after_stop():
    queue = WorkStealingQueue()
    stop = threading.Event()
    results = []
    waiter = threading.Thread(target=lambda: results.append(queue.pop_blocking(stop)))
    waiter.start()
    time.sleep(0.05)
    stop.set()
    queue.wake()
    waiter.join(timeout=5)
    assert not waiter.is_alive()
    assert results == [None]
    assert queue.pop_blocking(stop) is None
    assert queue.empty()


@pytest.mark.parametrize("stealing", [True, False])
def test_pool_runs_every_submitted_task(stealing):
    log = []
    lock = threading.Lock()

    def record(value):
        with lock:
            log.append(value)

    with WorkStealingPool(3, stealing) as pool:
        for value in range(30):
            pool.submit(lambda v=value: record(v))
        done = pool.wait_for(30, 0.01)
        assert done >= 30
        assert pool.completed_tasks() == 30
        assert pool.all_queues_empty()
    assert sorted(log) == list(range(30))


def test_submit_to_without_stealing_stays_on_one_thread():
    names = []
    with WorkStealingPool(3, enable_stealing=False) as pool:
        for _ in range(10):
            pool.submit_to(1, lambda: names.append(threading.current_thread().name))
        pool.wait_for(10, 0.01)
    assert len(names) == 10
    assert len(set(names)) == 1


def test_submit_to_out_of_range_raises():
    with WorkStealingPool(2) as pool:
        with pytest.raises(IndexError):
            pool.submit_to(2, lambda: None)
        with pytest.raises(IndexError):
            pool.submit_to(-1, lambda: None)


def test_failing_task_is_recorded_and_counted():
    with WorkStealingPool(2) as pool:
        pool.submit(lambda: 1 / 0)
        pool.submit(lambda: None)
        pool.wait_for(2, 0.01)
        assert pool.completed_tasks() == 2
    assert len(pool.errors) == 1
    assert isinstance(pool.errors[0], ZeroDivisionError)


def test_submit_after_shutdown_raises():
    pool = WorkStealingPool(2)
    pool.shutdown()
    with pytest.raises(RuntimeError):
        pool.submit(lambda: None)


def test_pool_requires_a_thread():
    with pytest.raises(ValueError):
        WorkStealingPool(0)


def test_task_work_sleeps_for_complexity():
    start = time.perf_counter()
    result = task_work(1, 20)
    elapsed = time.perf_counter() - start
    assert result is None
    assert elapsed >= 0.015


def test_run_benchmark_reports_completion(capsys):
    elapsed = run_benchmark("Small", 2, 20, True, 2, 1, 0)
    out = capsys.readouterr().out
    assert elapsed >= 0
    assert "Total tasks completed: 20" in out
    assert "Light Tasks: 16" in out
    assert "Work Stealing ON" in out


def test_run_benchmark_rejects_too_many_heavy_tasks():
    with pytest.raises(ValueError):
        run_benchmark("Bad", 4, 5, False, 2, 1, 0)