[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dequeemu"
version = "0.1.0"
description = "An interactive double-ended queue emulator for learning how deque operations, iterators and standard algorithms behave."
requires-python = ">=3.10"
dependencies = []
keywords = ["deque", "education", "algorithms", "iterator", "merge-sort", "emulator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dequeemu = "dequeemu.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dequeemu"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
