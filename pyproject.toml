[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stacfile"
version = "0.1.0"
description = "Read, write and inspect SpatioTemporal Asset Catalog (STAC) objects and their extensions"
requires-python = ">=3.10"
dependencies = []
keywords = ["stac", "geospatial", "metadata", "raster", "ndjson"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
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

[tool.hatch.build.targets.wheel]
packages = ["stacfile"]

[tool.pytest.ini_options]
addopts = "-ra"
