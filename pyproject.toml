[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cgdisplay"
version = "0.1.0"
description = "A small 2D vector drawing model with homogeneous-coordinate transforms, a display file and window-to-viewport mapping."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "computer graphics",
    "homogeneous coordinates",
    "display file",
    "viewport",
    "transformations",
    "vector graphics",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Vector-Based",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cgdisplay"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
