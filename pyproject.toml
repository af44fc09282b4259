[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stlkit"
version = "0.1.0"
description = "Generic containers and sequence algorithms: vectors, linked lists, stacks, heaps, priority queues, skip lists and list helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["containers", "algorithms", "skiplist", "heap", "priority-queue", "linked-list", "binary-search"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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
packages = ["stlkit"]

[tool.pytest.ini_options]
addopts = "-ra"
