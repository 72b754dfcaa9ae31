[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "contestlib"
version = "0.1.0"
description = "Algorithms and data structures for competitive programming: graphs, trees, strings, geometry and range queries."
requires-python = ">=3.10"
dependencies = [
    "sortedcontainers",
]
keywords = [
    "algorithms",
    "data-structures",
    "competitive-programming",
    "graphs",
    "trees",
    "geometry",
    "segment-tree",
    "treap",
    "palindromes",
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
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
contestlib-cowjump = "contestlib.sweep_line:main"

[tool.hatch.build.targets.wheel]
packages = ["contestlib"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
