[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glibkit"
version = "0.1.0"
description = "Singly linked lists, a stopwatch, indexed relations, string buffers and C-style string helpers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "linked-list",
    "relation",
    "string-buffer",
    "timer",
    "strings",
    "printf",
    "utilities",
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["glibkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
