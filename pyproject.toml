[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aigames"
version = "0.1.0"
description = "A small 2D game toolkit with a hex-grid pursuit game and a flocking simulation driven by simple AI agents."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "game",
    "simulation",
    "ai",
    "pathfinding",
    "hex-grid",
    "flocking",
    "boids",
    "vector",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
catch-the-cat = "aigames.catchthecat.world:main"

[tool.hatch.build.targets.wheel]
packages = ["aigames"]

[tool.hatch.build.targets.sdist]
include = ["aigames", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
