[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "isoterra"
version = "0.1.0"
description = "Isometric tile engine with noise-based terrain generation, texture pooling, a repeating timer and a rotating file logger"
requires-python = ">=3.10"
keywords = ["isometric", "tilemap", "perlin", "noise", "terrain", "game", "pygame"]
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

[tool.hatch.build.targets.wheel]
packages = ["isoterra"]

[tool.pytest.ini_options]
addopts = "-ra"
