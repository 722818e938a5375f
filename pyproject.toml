[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hcal"
version = "1.0.0"
description = "Historic calendars that switch from Julian to Gregorian on the date each region adopted the reform"
requires-python = ">=3.10"
dependencies = []
keywords = ["calendar", "julian", "gregorian", "history", "reformation", "cal"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
    "Topic :: Sociology :: History",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hcal = "hcal.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hcal"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
