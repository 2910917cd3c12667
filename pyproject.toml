[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meeus"
version = "3.0.0"
description = "Astronomical algorithms: coordinates, time scales, orbits, phenomena of the Moon and planets"
requires-python = ">=3.10"
dependencies = []
keywords = ["astronomy", "julian day", "coordinates", "aberration", "eclipse", "orbit"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Astronomy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["meeus"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
