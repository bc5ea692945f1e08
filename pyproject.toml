[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "grafos"
version = "0.1.0"
description = "Small graph toolkit: shortest paths, odd-vertex matchings and Eulerian circuits"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "dijkstra", "euler", "hierholzer", "matching", "shortest path"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
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

[project.scripts]
grafos-dijkstra = "grafos.dijkstra:main"
grafos-emparelhamento = "grafos.emparelhamento:main"
grafos-hierholzer = "grafos.hierholzer:main"

[tool.hatch.build.targets.wheel]
packages = ["grafos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
