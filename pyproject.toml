[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arcadebox"
version = "0.1.0"
description = "Frame-by-frame game logic for a small collection of classic arcade games"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "arcade",
    "games",
    "tetris",
    "pong",
    "simon",
    "space-invaders",
    "pac-man",
    "platformer",
    "game-logic",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["arcadebox"]

[tool.hatch.build.targets.sdist]
include = ["arcadebox", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
