[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algocollection"
version = "0.1.0"
description = "Classic algorithms in plain Python: graphs, sorting, arrays, dynamic programming, number utilities, a linked list and small text helpers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "graphs",
    "sorting",
    "dynamic-programming",
    "primes",
    "linked-list",
    "tower-of-hanoi",
]
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
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algocollection-list = "algocollection.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["algocollection"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
