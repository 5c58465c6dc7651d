[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "transit-catalogue"
version = "0.1.0"
description = "Transit network catalogue: bus and stop statistics, fastest routes and SVG route maps from JSON requests"
requires-python = ">=3.10"
dependencies = []
keywords = ["transit", "bus", "routing", "svg", "json", "catalogue", "map"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
transit-catalogue = "transit_catalogue.json_reader:main"

[tool.hatch.build.targets.wheel]
packages = ["transit_catalogue"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
