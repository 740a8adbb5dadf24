[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mutiny"
version = "0.1.0"
description = "A pirate-ship card deck and a small top-down shooting prototype"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "cards", "deck", "pirates", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mutiny = "mutiny.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mutiny"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
