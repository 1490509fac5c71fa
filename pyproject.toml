[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dpkit"
version = "0.1.0"
description = "Classic dynamic-programming and counting puzzles: coins, dice, towers, edit distance, Josephus and more"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "dynamic programming",
    "combinatorics",
    "edit distance",
    "knapsack",
    "josephus",
    "competitive programming",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dpkit = "dpkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dpkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
