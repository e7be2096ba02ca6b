[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphviz_walk"
version = "0.1.0"
description = "Interactive graph builder that animates breadth-first and depth-first search"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["graph", "bfs", "dfs", "visualization", "algorithms", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
graphviz-walk = "graphviz_walk.app:main"

[tool.hatch.build.targets.wheel]
packages = ["graphviz_walk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
