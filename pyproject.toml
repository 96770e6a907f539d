[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ferrisplay"
version = "0.1.0"
description = "Small terminal programs: tic-tac-toe, a number guessing game, a system summary and a greeting"
requires-python = ">=3.10"
keywords = ["tictactoe", "guessing-game", "terminal", "system-info", "games"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Utilities",
]
dependencies = [
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ferrisplay-fetch = "ferrisplay.fetch:main"
ferrisplay-tictactoe = "ferrisplay.tictactoe:main"
ferrisplay-guess = "ferrisplay.guessing:main"
ferrisplay-hello = "ferrisplay.hello:main"

[tool.hatch.build.targets.wheel]
packages = ["ferrisplay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
