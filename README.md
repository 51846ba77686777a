# algolab

A collection of small, self-contained building blocks, each with a runnable
demonstration:

| Module                   | What it provides                                                        |
|--------------------------|-------------------------------------------------------------------------|
| `algolab.matrix`         | `Matrix` with addition, subtraction and multiplication                  |
| `algolab.montecarlo`     | `estimate_pi`, a Monte Carlo estimate of pi                             |
| `algolab.stats`          | `calculate_statistics`: mean, median, variance, standard deviation      |
| `algolab.expression`     | `evaluate_expression`, an integer arithmetic evaluator                  |
| `algolab.newton`         | `Polynomial` and `newton_raphson_find_root`                             |
| `algolab.priority_pool`  | `PriorityThreadPool`, a thread pool that runs lower numbers first       |
| `algolab.merge_sort`     | `sequential_merge_sort`, a threaded `concurrent_merge_sort`, `benchmark_sort` |
| `algolab.shared_ref`     | `SharedRef`, a thread-safe reference-counted holder, and `TrackedObject` |
| `algolab.work_stealing`  | `WorkStealingPool` built on per-thread `WorkStealingQueue`s             |

The package has no dependencies outside the standard library and supports
Python 3.10 and later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

### Matrices

```python
from algolab.matrix import Matrix, DimensionError

a = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
c = Matrix.from_rows([[7, 8], [9, 10], [11, 12]])

print((a @ c).format())

try:
    a @ a
except DimensionError as err:
    print(err)
```

`Matrix(rows, cols)` creates a zero matrix; `Matrix.from_rows` builds one from
equally long rows. Mismatched shapes raise `DimensionError` (a `ValueError`)
for `+`, `-` and `@`. The functions `add`, `subtract` and `multiply` do the
same as the operators. `format()` renders each value right-aligned in eight
columns.

### Monte Carlo estimate of pi

```python
import random
from algolab.montecarlo import estimate_pi

estimate_pi(100_000, random.Random(42))
```

A non-positive number of points returns `0.0`. Without an `rng` a fresh
`random.Random` is used.

### Expressions

```python
from algolab.expression import evaluate_expression, ExpressionError

evaluate_expression("1+2*3")    # 7
evaluate_expression("(1+2)*3")  # 9
evaluate_expression("10-4/2")   # 8

try:
    evaluate_expression("10/0")
except ExpressionError as err:
    print(err)  # Division by zero!
```

The grammar covers non-negative integer literals, `+ - * /` with the usual
precedence, and parentheses. Division truncates toward zero. Whitespace is not
accepted. Malformed input, trailing characters, literals outside the signed
32-bit range and division by zero raise `ExpressionError` (a `ValueError`).

### Statistics

```python
from algolab.stats import calculate_statistics

stats = calculate_statistics([2, 4, 4, 4, 5, 5, 7, 9])
stats.mean, stats.median, stats.variance, stats.std_dev  # 5.0, 4.5, 4.0, 2.0
```

The result is a frozen `Statistics` dataclass holding the mean, median,
population variance and standard deviation. An empty input gives all zeros.

### Newton–Raphson

```python
from algolab.newton import Polynomial, newton_raphson_find_root, ConvergenceError

p = Polynomial([1, 0, -9])        # x^2 - 9, highest power first
p.derivative()                    # Polynomial([2.0, 0.0])
root = newton_raphson_find_root(p, 5.0)   # close to 3.0
```

The iteration stops when successive estimates differ by less than
`tolerance` (default `1e-7`). `ConvergenceError` is raised when the derivative
vanishes or `max_iterations` (default 100) is reached.

### Priority thread pool

```python
from algolab.priority_pool import PriorityThreadPool

with PriorityThreadPool(4) as pool:
    future = pool.submit(0, pow, 2, 10)
    future.result()  # 1024
```

`submit(priority, func, *args, **kwargs)` returns a
`concurrent.futures.Future`. Lower numbers run first; equal priorities run in
submission order. A task's exception is set on its future. `shutdown()` lets
queued jobs finish before joining the workers; submitting afterwards raises
`RuntimeError`.

### Merge sort

```python
from algolab.merge_sort import sequential_merge_sort, concurrent_merge_sort

data = [5, 3, 9, 1]
sequential_merge_sort(data)                 # sorts in place
concurrent_merge_sort(data, threshold=2)    # sorts in place using threads
```

Both accept a `key`. `concurrent_merge_sort` sorts ranges of at most
`threshold` items (default 2000) directly and splits larger ones across
threads; a threshold below 1 raises `ValueError`. `benchmark_sort` times a
sort, prints the result and returns the seconds taken.

### Shared references

```python
from algolab.shared_ref import SharedRef, TrackedObject

ref = SharedRef(TrackedObject(1))
other = ref.copy()
ref.use_count()   # 2
ref.release()
other.release()   # last owner: the object's dispose() is called
```

`get()` returns the value or `None`; `reset(value)` swaps in a new value.
`TrackedObject.live_count()` reports instances not yet disposed.
`run_stress_test` and `run_benchmark` exercise one `SharedRef` from many
threads; `run_benchmark` returns the elapsed time and the number of objects
left undisposed.

### Work-stealing pool

```python
from algolab.work_stealing import WorkStealingPool, task_work

with WorkStealingPool(4, enable_stealing=True) as pool:
    for i in range(100):
        pool.submit(lambda i=i: task_work(i, 1))
    pool.submit_to(0, lambda: task_work(0, 5))
    pool.wait_for(101)
```

`submit` distributes tasks round-robin; `submit_to` targets one queue and
raises `IndexError` for a bad index. Idle workers steal half of another
queue's tasks from the back. Exceptions from tasks are collected in
`pool.errors` and those tasks still count as completed. `shutdown()` stops the
workers and abandons tasks still queued.

## Demonstrations

Each module has a demonstration that can be run from the command line:

```
algolab-matrix
algolab-montecarlo
algolab-stats
algolab-expression [EXPR ...]
algolab-newton [--guess X]
algolab-priority-pool
algolab-merge-sort [--sizes N ...] [--seed S]
algolab-shared-ref [--threads N] [--iterations N]
algolab-work-stealing [--threads N]
```

The sorting, shared-reference and work-stealing demonstrations are
benchmarks and can take a while to finish with their default sizes.