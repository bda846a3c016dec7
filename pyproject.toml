[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jsonconftool"
version = "0.1.0"
description = "Command-line tool to read, change and print JSON configuration files using dotted key paths"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "config", "configuration", "cli", "dot-notation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
jct = "jsonconftool.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["jsonconftool"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
