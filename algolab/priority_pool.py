"""A fixed-size thread pool that runs queued work in priority order."""

from __future__ import annotations

import argparse
import functools
import heapq
import itertools
import sys
import threading
import time
from concurrent.futures import Future
from dataclasses import dataclass, field
from typing import Any, Callable, Sequence


@dataclass(order=True)
class _Job:
    priority: int
    sequence: int
    call: Callable[[], Any] = field(compare=False)
    future: Future = field(compare=False)


class PriorityThreadPool:
    """Runs submitted callables on worker threads; lower priority numbers run first.

    Jobs with equal priority run in the order they were submitted. On shutdown
    the workers finish every job already queued before they exit.
    """

    def __init__(self, num_threads: int) -> None:
        if num_threads < 1:
            raise ValueError("a thread pool needs at least one thread")
        self._jobs: list[_Job] = []
        self._sequence = itertools.count()
        self._condition = threading.Condition()
        self._stopping = False
        self._workers = [
            threading.Thread(target=self._work, name=f"priority-worker-{index}", daemon=True)
            for index in range(num_threads)
        ]
        for worker in self._workers:
            worker.start()

    def _work(self) -> None:
        while True:
            with self._condition:
                self._condition.wait_for(lambda: self._stopping or bool(self._jobs))
                if not self._jobs:
                    return
                job = heapq.heappop(self._jobs)
            if not job.future.set_running_or_notify_cancel():
                continue
            try:
                result = job.call()
            except Exception as error:
                job.future.set_exception(error)
            else:
                job.future.set_result(result)

    def submit(self, priority: int, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Queue func(*args, **kwargs) and return a future for its result."""
        future: Future = Future()
        job = _Job(priority, next(self._sequence), functools.partial(func, *args, **kwargs), future)
        with self._condition:
            if self._stopping:
                raise RuntimeError("enqueue on stopped ThreadPool")
            heapq.heappush(self._jobs, job)
            self._condition.notify()
        return future

    def shutdown(self) -> None:
        """Stop accepting work, let queued jobs finish and join the workers."""
        with self._condition:
            self._stopping = True
            self._condition.notify_all()
        current = threading.current_thread()
        for worker in self._workers:
            if worker is not current:
                worker.join()

    def __enter__(self) -> "PriorityThreadPool":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()


def _print_message(msg: str, ident: int, delay_ms: int = 0) -> None:
    if delay_ms > 0:
        time.sleep(delay_ms / 1000)
    print(f"Task {ident}: {msg} (Thread ID: {threading.get_ident()})")


def _task_with_exception(ident: int) -> None:
    print(f"Task {ident}: Attempting to throw exception...")
    raise RuntimeError(f"Error from Task {ident}")


def _wait_then_print(dependency: Future, ident: int, name: str, msg: str) -> None:
    print(f"Task {ident}: Waiting for {name} to complete...")
    dependency.exception()
    _print_message(msg, ident)


def main(argv: Sequence[str] | None = None) -> int:
    argparse.ArgumentParser(description="Demonstrate a priority thread pool.").parse_args(argv)
    rule = "\n--------------------------------\n"
    print("--- Advanced Thread Pool Demonstration ---\n")

    with PriorityThreadPool(4) as pool:
        print("=== Priority Scheduling Demo ===")
        pool.submit(2, _print_message, "Low Priority Task (P=2)", 101, 100)
        pool.submit(0, _print_message, "HIGH PRIORITY TASK (P=0)", 100, 0)
        pool.submit(1, _print_message, "Medium Priority Task (P=1)", 102, 0)
        pool.submit(0, _print_message, "ANOTHER HIGH PRIORITY TASK (P=0)", 103, 0)
        pool.submit(2, _print_message, "Another Low Priority Task (P=2)", 104, 0)
        time.sleep(0.5)
        print(rule)

        print("=== Task Dependencies Demo ===")
        future_a = pool.submit(0, _print_message, "Task A (Dependency Source)", 200, 300)
        future_b = pool.submit(
            0, _wait_then_print, future_a, 201, "Task A",
            "Task B (Dependent on A) - Task A Completed!",
        )
        pool.submit(5, _print_message, "Task C (Independent, Low Priority)", 202, 0)
        pool.submit(
            1, _wait_then_print, future_b, 203, "Task B",
            "Task D (Dependent on B) - Task B Completed!",
        )
        time.sleep(1.5)
        print(rule)

        print("=== Error Propagation Demo ===")
        pool.submit(0, _task_with_exception, 300)
        error_future_1 = pool.submit(0, _task_with_exception, 300)
        error_future_2 = pool.submit(0, _print_message, "Task 301 (Will run)", 301, 0)

        try:
            error_future_1.result()
            print("Error Future 1: Succeeded (THIS SHOULD NOT HAPPEN)")
        except RuntimeError as error:
            print(f"Caught expected exception from error_future_1: {error}", file=sys.stderr)
        except Exception:
            print("Caught an unexpected exception from error_future_1.", file=sys.stderr)

        try:
            error_future_2.result()
            print("Error Future 2: Succeeded as expected.")
        except Exception as error:
            print(f"Caught unexpected exception from error_future_2: {error}", file=sys.stderr)

        time.sleep(0.5)
        print(rule)
        print("--- All Demos Completed. Pool will shut down ---")
    return 0


if __name__ == "__main__":
    sys.exit(main())