"""Reference-counted shared ownership of a value, safe to use from many threads."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from typing import Any, Generic, Sequence, TypeVar

T = TypeVar("T")


class _ControlBlock(Generic[T]):
    """Holds the shared value and the number of references that own it."""

    __slots__ = ("value", "count", "lock")

    def __init__(self, value: T) -> None:
        self.value = value
        self.count = 1
        self.lock = threading.Lock()

    def acquire(self) -> None:
        with self.lock:
            self.count += 1

    def release(self) -> None:
        with self.lock:
            self.count -= 1
            last = self.count == 0
        if last:
            dispose = getattr(self.value, "dispose", None)
            if callable(dispose):
                dispose()

    def load(self) -> int:
        with self.lock:
            return self.count


class SharedRef(Generic[T]):
    """A shared owning reference to a value.

    Copies share one reference count. When the last owner lets go, the value's
    ``dispose()`` method is called if it has one. One SharedRef may itself be
    copied and reset from several threads at once.
    """

    def __init__(self, value: T | None = None) -> None:
        self._lock = threading.Lock()
        self._block: _ControlBlock[T] | None = (
            _ControlBlock(value) if value is not None else None
        )

    def copy(self) -> "SharedRef[T]":
        """Return a new owner of the same value."""
        other: SharedRef[T] = SharedRef()
        with self._lock:
            block = self._block
            if block is not None:
                block.acquire()
        other._block = block
        return other

    def get(self) -> T | None:
        """Return the value, or None when this reference is empty."""
        with self._lock:
            block = self._block
        return block.value if block is not None else None

    def reset(self, value: T | None = None) -> None:
        """Give up the current value and, unless value is None, own value instead."""
        with self._lock:
            old = self._block
            if (old.value if old is not None else None) is value:
                return
            self._block = _ControlBlock(value) if value is not None else None
        if old is not None:
            old.release()

    def release(self) -> None:
        """Give up the current value, leaving this reference empty."""
        self.reset(None)

    def use_count(self) -> int:
        """Return how many references share the value; 0 when empty."""
        with self._lock:
            block = self._block
        return block.load() if block is not None else 0

    def __bool__(self) -> bool:
        return self.get() is not None

    def __enter__(self) -> "SharedRef[T]":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __repr__(self) -> str:
        return f"SharedRef({self.get()!r}, use_count={self.use_count()})"


class TrackedObject:
    """An object that counts how many instances are alive, i.e. not yet disposed."""

    _live = 0
    _live_lock = threading.Lock()

    def __init__(self, ident: int) -> None:
        self.ident = ident
        self.disposed = False
        self._dispose_lock = threading.Lock()
        with TrackedObject._live_lock:
            TrackedObject._live += 1

    def dispose(self) -> None:
        """Mark the object as gone; further calls do nothing."""
        with self._dispose_lock:
            if self.disposed:
                return
            self.disposed = True
        with TrackedObject._live_lock:
            TrackedObject._live -= 1

    @classmethod
    def live_count(cls) -> int:
        """Return the number of instances created and not yet disposed."""
        with TrackedObject._live_lock:
            return TrackedObject._live

    def __repr__(self) -> str:
        return f"TrackedObject({self.ident})"


def run_stress_test(shared: SharedRef[Any], thread_id: int, iterations: int) -> None:
    """Copy, read and reset the shared reference and a local one many times."""
    local: SharedRef[TrackedObject] = SharedRef()
    for i in range(iterations):
        with shared.copy() as temp:
            obj = temp.get()
            if obj is not None:
                _ = obj.ident
        if i % 100 == 0:
            shared.reset(TrackedObject(thread_id * 1000 + i))
        local.reset(TrackedObject(thread_id * 10000 + i))
        if i % 50 == 0:
            local.copy().release()
    local.release()


def run_benchmark(name: str, num_threads: int, iterations_per_thread: int) -> tuple[float, int]:
    """Stress one shared reference from several threads.

    Returns the elapsed seconds and the number of objects left undisposed.
    """
    baseline = TrackedObject.live_count()
    shared: SharedRef[TrackedObject] = SharedRef(TrackedObject(999999))

    start = time.perf_counter()
    threads = [
        threading.Thread(target=run_stress_test, args=(shared, index, iterations_per_thread))
        for index in range(num_threads)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    shared.release()
    elapsed = time.perf_counter() - start

    print(
        f"{name} with {num_threads} threads, {iterations_per_thread} ops/thread: "
        f"{elapsed:.6f} seconds"
    )
    leaked = TrackedObject.live_count() - baseline
    if leaked:
        print(
            f"WARNING: Memory leak detected! {leaked} TrackedObject instances remaining.",
            file=sys.stderr,
        )
    else:
        print("Memory check: All TrackedObject instances successfully reclaimed.")
    print()
    return elapsed, leaked


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Demonstrate shared reference counting.")
    parser.add_argument("--threads", type=int, default=8)
    parser.add_argument("--iterations", type=int, default=100000)
    args = parser.parse_args(argv)

    print("--- Shared Reference Demonstration ---\n")
    print("=== Correctness (Single-Threaded) ===")
    baseline = TrackedObject.live_count()
    ptr1 = SharedRef(TrackedObject(10))
    print(f"Ptr1 use_count: {ptr1.use_count()}")
    ptr2 = ptr1.copy()
    print(f"Ptr1 use_count: {ptr1.use_count()}, Ptr2 use_count: {ptr2.use_count()}")
    ptr3 = ptr1.copy()
    print(f"Ptr1 use_count: {ptr1.use_count()}, Ptr3 use_count: {ptr3.use_count()}")
    ptr1.reset(TrackedObject(20))
    print(
        f"Ptr1 use_count: {ptr1.use_count()} (new obj), "
        f"Others use_count: {ptr2.use_count()}"
    )
    ptr2.reset()
    print(f"Ptr2 reset. Ptr3 use_count: {ptr3.use_count()}")
    for ref in (ptr1, ptr2, ptr3):
        ref.release()
    print(f"After block, s_instance_count: {TrackedObject.live_count() - baseline}")
    print("--- Single-threaded correctness verified ---\n")

    print("=== Benchmarking and Multi-threaded Stress Tests ===")
    print(f"Running with {args.threads} threads, {args.iterations} iterations per thread.")
    print(
        "Total pointer copies/resets/deletions affecting shared pointer: Approx "
        f"{args.threads * (args.iterations // 100)}"
    )
    print(
        "Total pointer operations (copies/resets) on local pointers: Approx "
        f"{args.threads * args.iterations * 2}\n"
    )
    run_benchmark("SharedRef", args.threads, args.iterations)
    print("--- Demonstration Complete ---")
    return 0


if __name__ == "__main__":
    sys.exit(main())