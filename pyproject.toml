[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sortsearch"
version = "0.1.0"
description = "Sorting, searching and greedy algorithms for classic array and interval problems"
requires-python = ">=3.10"
keywords = [
    "algorithms",
    "sorting",
    "searching",
    "greedy",
    "two-pointers",
    "sliding-window",
    "multiset",
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
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "sortedcontainers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sortsearch = "sortsearch.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sortsearch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
