[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gameboy"
version = "0.1.0"
description = "Hangman, Snake and Wordle behind one menu window, with a player name prompt and a shared leaderboard"
requires-python = ">=3.10"
keywords = ["game", "hangman", "snake", "wordle", "pygame", "leaderboard"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gameboy = "gameboy.app:main"

[tool.hatch.build.targets.wheel]
packages = ["gameboy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
