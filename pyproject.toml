[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sudokupad"
version = "0.1.0"
description = "A desktop Sudoku game with three difficulty levels, hints, scoring and a step-by-step backtracking solver"
requires-python = ">=3.10"
dependencies = []
keywords = ["sudoku", "puzzle", "game", "backtracking", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Environment :: MacOS X",
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

[project.gui-scripts]
sudokupad = "sudokupad.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sudokupad"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
