[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rlgames"
version = "0.1.0"
description = "A small 2D fruit-seeking world for experimenting with reinforcement-learning agents"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["reinforcement-learning", "environment", "game", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["rlgames"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
