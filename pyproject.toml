[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trackomatic"
version = "1.0.0"
description = "Building blocks for a one-touch time tracker: screen state, configuration, time zone and timestamp helpers."
requires-python = ">=3.11"
keywords = ["toggl", "time tracking", "timesheet", "timezone", "posix tz"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
    "Topic :: Office/Business :: Scheduling",
    "Typing :: Typed",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[tool.hatch.build.targets.wheel]
packages = ["trackomatic"]

[tool.hatch.build.targets.sdist]
include = ["trackomatic", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
warn_redundant_casts = true
