[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eostime"
version = "0.1.0"
description = "Times of day, UTC offsets, time zone resolution and UNIX timestamps with nanosecond precision"
requires-python = ">=3.10"
dependencies = []
keywords = ["time", "datetime", "timezone", "utc-offset", "timestamp", "dst"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["eostime"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
