[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "circlist"
version = "1.0.0"
description = "A circular doubly linked list with positional and value-based insertion and deletion"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "circular list", "doubly linked list", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
circlist-demo = "circlist.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["circlist"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
