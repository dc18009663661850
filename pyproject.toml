[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clifkit"
version = "0.1.0"
description = "Building blocks for command line interfaces: text wrapping, parameters, registries, progress bars and tables"
requires-python = ">=3.10"
dependencies = []
keywords = ["cli", "terminal", "table", "progress-bar", "wrap", "console", "ansi"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["clifkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
