[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "terrainwfc"
version = "0.1.0"
description = "Procedural 2D terrain generation on a tile grid using a biased wave function collapse"
requires-python = ">=3.10"
keywords = ["procedural generation", "wave function collapse", "terrain", "tiles", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
terrainwfc = "terrainwfc.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["terrainwfc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
