[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zombiearena"
version = "0.1.0"
description = "A top-down arena game: a walled, tiled arena and a player who moves and aims"
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "top-down", "arena"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
zombiearena = "zombiearena.game:main"

[tool.hatch.build.targets.wheel]
packages = ["zombiearena"]

[tool.pytest.ini_options]
addopts = "-ra"
