[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "permissive-search"
version = "0.1.0"
description = "Typo- and diacritic-tolerant prefix search for building user-friendly search bars"
requires-python = ">=3.10"
keywords = ["search", "prefix-tree", "trie", "fuzzy", "typo-tolerant"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing :: Indexing",
]
dependencies = [
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
permissive-search = "permissive_search.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["permissive_search"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
