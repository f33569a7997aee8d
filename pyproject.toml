[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glibcore"
version = "0.1.0"
description = "General-purpose containers, calendar dates, prefix completion, caches and I/O channels"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "containers",
    "linked-list",
    "hash-table",
    "dynamic-array",
    "calendar",
    "julian-day",
    "date-parsing",
    "cache",
    "completion",
    "io-channel",
]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
glibcore-complete = "glibcore.completion:main"

[tool.hatch.build.targets.wheel]
packages = ["glibcore"]

[tool.hatch.build.targets.sdist]
include = ["glibcore", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
