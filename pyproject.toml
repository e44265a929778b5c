[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "knightmines"
version = "0.1.0"
description = "A terminal puzzle game: steer a knight to flags across a mined chessboard while dodging enemy pieces."
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "knight", "minesweeper", "puzzle", "terminal", "game"]
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
knightmines = "knightmines.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["knightmines"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
