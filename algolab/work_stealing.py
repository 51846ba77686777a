"""Multi-queue thread pool whose idle workers steal work from other queues."""

from __future__ import annotations

import argparse
import itertools
import os
import sys
import threading
import time
from collections import deque
from typing import Callable, Sequence

Task = Callable[[], object]


def task_work(task_id: int, complexity_ms: int) -> None:
    """Simulate a unit of work lasting complexity_ms milliseconds."""
    if complexity_ms > 0:
        time.sleep(complexity_ms / 1000)


class WorkStealingQueue:
    """A locked double-ended task queue.

    The owner takes from the front; thieves take from the back.
    """

    def __init__(self) -> None:
        self._tasks: deque[Task] = deque()
        self._condition = threading.Condition()

    def push(self, task: Task) -> None:
        """Append a task and wake one waiting consumer."""
        with self._condition:
            self._tasks.append(task)
            self._condition.notify()

    def try_pop_local(self) -> Task | None:
        """Take the oldest task, or return None when the queue is empty."""
        with self._condition:
            return self._tasks.popleft() if self._tasks else None

    def pop_blocking(self, stop_event: threading.Event) -> Task | None:
        """Wait for a task; return None once stop_event is set and the queue is empty.

        A waiter only rechecks stop_event when pushed to or woken with wake().
        """
        with self._condition:
            self._condition.wait_for(lambda: stop_event.is_set() or bool(self._tasks))
            if not self._tasks:
                return None
            return self._tasks.popleft()

    def try_steal_many(self) -> list[Task]:
        """Take half the tasks (at least one) from the back, newest first."""
        with self._condition:
            if not self._tasks:
                return []
            count = max(len(self._tasks) // 2, 1)
            return [self._tasks.pop() for _ in range(count)]

    def wake(self) -> None:
        """Wake every consumer blocked in pop_blocking so it rechecks its stop event."""
        with self._condition:
            self._condition.notify_all()

    def empty(self) -> bool:
        with self._condition:
            return not self._tasks

    def __len__(self) -> int:
        with self._condition:
            return len(self._tasks)


class WorkStealingPool:
    """A pool with one queue per worker thread and optional work stealing.

    Exceptions raised by tasks are collected in ``errors``; such tasks still
    count as completed. Tasks still queued at shutdown are not run.
    """

    def __init__(self, num_threads: int, enable_stealing: bool = True) -> None:
        if num_threads < 1:
            raise ValueError("a thread pool needs at least one thread")
        self._num_threads = num_threads
        self._enable_stealing = enable_stealing
        self._stop = threading.Event()
        self._queues = [WorkStealingQueue() for _ in range(num_threads)]
        self._completed = 0
        self._completed_lock = threading.Lock()
        self._round_robin = itertools.count()
        self._round_robin_lock = threading.Lock()
        self.errors: list[Exception] = []
        self._threads = [
            threading.Thread(target=self._consume, args=(index,), name=f"ws-worker-{index}", daemon=True)
            for index in range(num_threads)
        ]
        for thread in self._threads:
            thread.start()

    def _run(self, task: Task) -> None:
        try:
            task()
        except Exception as error:
            self.errors.append(error)
        finally:
            with self._completed_lock:
                self._completed += 1

    def _steal(self, my_id: int) -> list[Task]:
        for offset in range(1, self._num_threads + 1):
            if self._stop.is_set():
                break
            victim = self._queues[(my_id + offset) % self._num_threads]
            stolen = victim.try_steal_many()
            if stolen:
                return stolen
        return []

    def _consume(self, my_id: int) -> None:
        own = self._queues[my_id]
        while not self._stop.is_set():
            task = own.try_pop_local()
            if task is not None:
                self._run(task)
                continue
            if self._enable_stealing:
                stolen = self._steal(my_id)
                if stolen:
                    for stolen_task in stolen:
                        if self._stop.is_set():
                            break
                        self._run(stolen_task)
                    continue
            task = own.pop_blocking(self._stop)
            if task is None:
                break
            self._run(task)

    def _check_running(self) -> None:
        if self._stop.is_set():
            raise RuntimeError("submit on stopped pool")

    def submit_to(self, queue_index: int, task: Task) -> None:
        """Queue a task on one particular worker's queue."""
        if not 0 <= queue_index < self._num_threads:
            raise IndexError("Queue index out of bounds!")
        self._check_running()
        self._queues[queue_index].push(task)

    def submit(self, task: Task) -> None:
        """Queue a task on the next queue in round-robin order."""
        self._check_running()
        with self._round_robin_lock:
            index = next(self._round_robin) % self._num_threads
        self._queues[index].push(task)

    def completed_tasks(self) -> int:
        """Return how many tasks have finished running."""
        with self._completed_lock:
            return self._completed

    def all_queues_empty(self) -> bool:
        return all(queue.empty() for queue in self._queues)

    def wait_for(self, count: int, poll_interval: float = 0.1) -> int:
        """Poll until at least count tasks have completed; return the completed total."""
        while (done := self.completed_tasks()) < count:
            time.sleep(poll_interval)
        return done

    def shutdown(self) -> None:
        """Stop the workers and join them; queued tasks are abandoned."""
        self._stop.set()
        for queue in self._queues:
            queue.wake()
        current = threading.current_thread()
        for thread in self._threads:
            if thread is not current:
                thread.join()

    def __enter__(self) -> "WorkStealingPool":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()


def _report(label: str, total: int, elapsed: float) -> str:
    throughput = int(total / elapsed) if elapsed > 0 else 0
    return f"{label}: {elapsed:.4f} seconds (Throughput: {throughput} tasks/sec)"


def run_benchmark(
    name: str,
    num_threads: int,
    total_tasks: int,
    enable_stealing: bool,
    heavy_per_queue: int,
    heavy_ms: int,
    light_ms: int,
) -> float:
    """Run a mix of heavy and light tasks, print a report and return the elapsed seconds."""
    heavy_total = heavy_per_queue * num_threads
    if heavy_total > total_tasks:
        raise ValueError("more heavy tasks than total tasks")
    mode = "Work Stealing ON" if enable_stealing else "Work Stealing OFF"
    print(f"--- {name} ({mode}) ---")
    print(f"Threads: {num_threads}, Total Tasks: {total_tasks}")
    print(f"Heavy Tasks per queue: {heavy_per_queue} (Complexity: {heavy_ms}ms)")
    print(f"Light Tasks: {total_tasks - heavy_total} (Complexity: {light_ms}ms)")

    with WorkStealingPool(num_threads, enable_stealing) as pool:
        for i in range(heavy_total):
            task_id = 1000000 + i
            pool.submit_to(i % num_threads, lambda t=task_id: task_work(t, heavy_ms))
        for task_id in range(total_tasks - heavy_total):
            pool.submit(lambda t=task_id: task_work(t, light_ms))

        start = time.perf_counter()
        pool.wait_for(total_tasks)
        elapsed = time.perf_counter() - start

        print(f"Total tasks completed: {pool.completed_tasks()}")
    print(f"Execution time: {elapsed:.4f} seconds")
    throughput = int(total_tasks / elapsed) if elapsed > 0 else 0
    print(f"Throughput: {throughput} tasks/sec")
    print("-" * 52 + "\n")
    return elapsed


def _imbalance_run(num_threads: int, enable_stealing: bool, total: int, heavy: int,
                   heavy_ms: int, light_ms: int) -> float:
    with WorkStealingPool(num_threads, enable_stealing) as pool:
        for i in range(heavy):
            pool.submit_to(0, lambda t=9000 + i: task_work(t, heavy_ms))
        for i in range(total - heavy):
            pool.submit(lambda t=i: task_work(t, light_ms))
        start = time.perf_counter()
        pool.wait_for(total)
        return time.perf_counter() - start


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Benchmark a work-stealing thread pool.")
    parser.add_argument("--threads", type=int, default=os.cpu_count() or 4)
    args = parser.parse_args(argv)
    threads = args.threads

    print("=== Concurrent Multi-Queue Producer-Consumer with Work-Stealing ===\n")
    total_tasks = max(2000, 50 * threads)
    run_benchmark("Benchmark without Work Stealing", threads, total_tasks, False, 50, 20, 1)
    run_benchmark("Benchmark with Work Stealing", threads, total_tasks, True, 50, 20, 1)

    print("\n=== Aggressive Imbalance Test (Work Stealing Benefit) ===")
    rule = "-" * 52 + "\n"
    print("--- Initial Imbalance (No Stealing) ---")
    elapsed = _imbalance_run(threads, False, 1000, 200, 50, 0)
    print(_report("No Stealing Time", 1000, elapsed))
    print(rule)

    print("--- Initial Imbalance (With Stealing) ---")
    elapsed = _imbalance_run(threads, True, 1000, 200, 50, 0)
    print(_report("With Stealing Time", 1000, elapsed))
    print(rule)

    print("=== All Demos Complete ===")
    return 0


if __name__ == "__main__":
    sys.exit(main())