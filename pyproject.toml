[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yagl"
version = "0.1.2"
description = "A geometry library with vectors, matrices, quaternions, rotations, planes, triangles, polyhedra and polygons."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "geometry",
    "computational geometry",
    "vector",
    "matrix",
    "quaternion",
    "rotation",
    "plane",
    "polyhedron",
    "polygon",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["yagl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
