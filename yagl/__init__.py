"""Geometry primitives: vectors, matrices, quaternions, rotations, poses, lines, rays, planes, triangles, solids and polygons."""

__version__ = "0.1.2"