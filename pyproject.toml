[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fillerbot"
version = "1.0.0"
description = "A Filler game bot that reads the board from standard input, plus a live viewer for matches"
requires-python = ">=3.10"
keywords = ["filler", "game", "bot", "board-game", "visualizer"]
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
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fillerbot = "fillerbot.player:main"
fillerbot-viewer = "fillerbot.viewer:main"

[tool.hatch.build.targets.wheel]
packages = ["fillerbot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
