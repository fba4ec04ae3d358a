[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scivis"
version = "0.1.0"
description = "Building blocks for scientific visualization: colour picking, image filters, wave simulation, volumes, flow fields, mesh clipping and isocontour case tables"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = [
    "visualization",
    "volume",
    "flow field",
    "marching cubes",
    "marching squares",
    "image processing",
    "arcball",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["scivis"]

[tool.pytest.ini_options]
addopts = "-ra"
