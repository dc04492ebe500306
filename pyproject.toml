[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flatvec"
version = "0.1.0"
description = "A small in-memory vector store with brute-force similarity search and JSON metadata filters"
requires-python = ">=3.10"
dependencies = []
keywords = ["vector", "embedding", "similarity", "search", "nearest-neighbour", "metadata", "filter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Database Engines/Servers",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
flatvec = "flatvec.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["flatvec"]

[tool.pytest.ini_options]
addopts = "-ra"
