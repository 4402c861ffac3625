"""Matrices, camera, input state, timing, XML/COLLADA geometry, images and resources for 3D rendering."""

__version__ = "0.1.0"