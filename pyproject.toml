[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "agvnav"
version = "0.1.0"
description = "Grid path planning and step-by-step motion control for a marker-guided AGV"
requires-python = ">=3.10"
dependencies = []
keywords = ["agv", "a-star", "path-planning", "robotics", "navigation", "qr"]
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
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
agvnav = "agvnav.controller:main"

[tool.hatch.build.targets.wheel]
packages = ["agvnav"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
