[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rogueclone"
version = "6.0.0"
description = "Ring handling for a classic dungeon-crawling role-playing game: generating rings, wearing them and tallying their effects."
requires-python = ">=3.10"
dependencies = []
keywords = ["rogue", "roguelike", "game", "rings", "dungeon"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rogueclone"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
