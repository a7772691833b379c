[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "navalbattle"
version = "1.0.0"
description = "Two-player Naval Battle (Battleship) game for the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["battleship", "naval battle", "game", "terminal", "board game"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
navalbattle = "navalbattle.cli:main"

[tool.setuptools.packages.find]
include = ["navalbattle*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
