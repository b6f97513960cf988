[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "instafest"
version = "0.1.0"
description = "Answer cycle, component, ordering and maximum-hype queries on a directed influencer graph"
requires-python = ">=3.10"
keywords = ["graph", "scc", "topological-sort", "condensation", "dag"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
instafest = "instafest.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["instafest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
