[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pokematch"
version = "0.1.0"
description = "A terminal tile-matching puzzle: connect pairs of identical tiles with at most two turns."
requires-python = ">=3.10"
keywords = ["game", "puzzle", "terminal", "tile-matching", "onet"]
classifiers = [
    "Development Status :: 4 - Beta",
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
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pokematch = "pokematch.game:main"

[tool.hatch.build.targets.wheel]
packages = ["pokematch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
