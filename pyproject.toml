[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "novaplay"
version = "0.1.0"
description = "2D game toolkit: vector math, 3x3 matrices, easing, camera, tile map and bouncing-enemy physics"
requires-python = ">=3.10"
keywords = ["game", "2d", "easing", "camera", "matrix", "physics", "tilemap"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["novaplay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
