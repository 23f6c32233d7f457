[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ecpuzzles"
version = "0.1.0"
description = "Solvers for two puzzles: a binary search tree of named scores and a moving debris field"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "binary-tree", "bfs", "grid", "solver"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
ecpuzzles-problem19 = "ecpuzzles.problem19:main"
ecpuzzles-problem22 = "ecpuzzles.problem22:main"

[tool.hatch.build.targets.wheel]
packages = ["ecpuzzles"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
