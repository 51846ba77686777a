[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algolab"
version = "0.1.0"
description = "Small numeric, parsing and concurrency building blocks with runnable demonstrations"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "matrix",
    "monte-carlo",
    "statistics",
    "expression-parser",
    "newton-raphson",
    "thread-pool",
    "merge-sort",
    "reference-counting",
    "work-stealing",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algolab-matrix = "algolab.matrix:main"
algolab-montecarlo = "algolab.montecarlo:main"
algolab-stats = "algolab.stats:main"
algolab-expression = "algolab.expression:main"
algolab-newton = "algolab.newton:main"
algolab-priority-pool = "algolab.priority_pool:main"
algolab-merge-sort = "algolab.merge_sort:main"
algolab-shared-ref = "algolab.shared_ref:main"
algolab-work-stealing = "algolab.work_stealing:main"

[tool.hatch.build.targets.wheel]
packages = ["algolab"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
