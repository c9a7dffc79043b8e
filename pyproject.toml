[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fswatchlib"
version = "1.18.0"
description = "Building blocks for file system change monitoring: events, path filters and event-type filtering"
requires-python = ">=3.10"
dependencies = []
keywords = ["filesystem", "events", "filters", "regex", "watch"]
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
    "Topic :: System :: Filesystems",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fswatchlib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
