[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "altrokit"
version = "0.1.0"
description = "Support pieces for trajectory optimization solvers: knot points, trajectories, solver options and statistics, tabular logging, profiling and a thread pool."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "trajectory optimization",
    "optimal control",
    "knot points",
    "solver logging",
    "profiling",
]
classifiers = [
    "Development Status :: 3 - Alpha",
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
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["altrokit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
