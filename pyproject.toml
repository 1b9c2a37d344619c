[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tofsim"
version = "0.1.0"
description = "Time-of-flight camera simulator: synthetic depth frames, jet colour mapping, PLY point clouds and a mock SpaceWire link"
requires-python = ">=3.10"
dependencies = []
keywords = ["time-of-flight", "tof", "depth", "ply", "point-cloud", "colormap", "simulation", "spacewire"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tofsim = "tofsim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tofsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
