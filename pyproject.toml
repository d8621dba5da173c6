[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "procrastinate"
version = "0.1.0"
description = "A small interactive to-do list manager backed by SQLite"
requires-python = ">=3.10"
dependencies = []
keywords = ["todo", "tasks", "lists", "sqlite", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
procrastinate = "procrastinate.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["procrastinate"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
