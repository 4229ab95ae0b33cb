[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "universalsort"
version = "0.1.0"
description = "Adaptive sorter that tunes quicksort/insertion sort thresholds by counting comparisons, moves and calls"
requires-python = ">=3.10"
dependencies = []
keywords = ["sorting", "quicksort", "insertion sort", "algorithms", "cost model"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
universalsort = "universalsort.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["universalsort"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
