[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "respcli"
version = "1.0.0"
description = "A small interactive command-line client for Redis-compatible servers speaking RESP2"
requires-python = ">=3.10"
dependencies = []
keywords = ["redis", "resp", "cli", "repl", "client"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
respcli = "respcli.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["respcli"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
