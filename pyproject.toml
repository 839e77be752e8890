[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fillit"
version = "1.0.0"
description = "Pack tetrominoes into the smallest possible square"
requires-python = ">=3.10"
dependencies = []
keywords = ["tetromino", "tetris", "puzzle", "backtracking", "packing"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fillit = "fillit.solver:main"

[tool.hatch.build.targets.wheel]
packages = ["fillit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
