[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent2021"
version = "0.1.0"
description = "Solutions to selected days of a 2021 advent programming puzzle calendar"
requires-python = ">=3.10"
keywords = ["puzzles", "advent", "algorithms", "2021"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["advent2021"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
