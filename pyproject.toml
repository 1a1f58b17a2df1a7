[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polyglotscan"
version = "0.1.0"
description = "Report every file format whose signature a single file matches, to spot polyglot files."
requires-python = ">=3.10"
dependencies = [
    "tabulate",
]
keywords = ["polyglot", "file-format", "magic-bytes", "signatures", "forensics", "security"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Information Technology",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
polyglotscan = "polyglotscan.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["polyglotscan"]

[tool.pytest.ini_options]
addopts = "-ra"
