[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsapractice"
version = "0.1.0"
description = "Small practice exercises and classic data structures: number and character checks, binary trees, a linked list and a graph."
requires-python = ">=3.10"
dependencies = []
keywords = ["practice", "exercises", "data-structures", "binary-tree", "linked-list", "graph"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsapractice-tree = "dsapractice.binary_tree:main"

[tool.hatch.build.targets.wheel]
packages = ["dsapractice"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
