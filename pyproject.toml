[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphwalk"
version = "0.1.0"
description = "Classic graph algorithms: traversals, shortest paths, spanning trees, orderings, project scheduling and minimum arborescences."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "bfs",
    "dfs",
    "bellman-ford",
    "floyd-warshall",
    "kruskal",
    "prim",
    "topological-sort",
    "critical-path",
    "arborescence",
]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["graphwalk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
