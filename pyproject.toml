[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "luxide"
version = "0.1.0"
description = "Support utilities for a path tracer: intervals, angles, progress tracking, shared locks, an event-loop runner and timestamps"
requires-python = ">=3.10"
dependencies = []
keywords = ["path tracing", "rendering", "interval", "progress", "utilities"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[tool.hatch.build.targets.wheel]
packages = ["luxide"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
