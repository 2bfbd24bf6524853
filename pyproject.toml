[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ekit"
version = "0.1.0"
description = "Generic data structures and struct-copying helpers: priority queue, skip list, red-black tree, option helpers and field copiers."
requires-python = ">=3.10"
dependencies = []
keywords = ["data-structures", "priority-queue", "skip-list", "red-black-tree", "copier", "options"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
