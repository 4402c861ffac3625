[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pivk"
version = "0.1.0"
description = "Building blocks for a small 3D renderer: 4x4 matrices, camera, per-frame input state, frame timer, XML/COLLADA geometry loading, raw images and a resource store."
requires-python = ">=3.10"
dependencies = []
keywords = ["3d", "matrix", "camera", "collada", "dae", "xml", "rendering", "input"]
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pivk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
