[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "amoebot"
version = "0.1.0"
description = "Simulation engine for the amoebot model of programmable matter on the triangular lattice"
requires-python = ">=3.10"
dependencies = []
keywords = ["amoebot", "programmable matter", "simulation", "distributed algorithms", "triangular lattice"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Life",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["amoebot"]

[tool.pytest.ini_options]
addopts = "-ra"
