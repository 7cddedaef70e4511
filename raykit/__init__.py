"""Vectors, rays, optics helpers, ray/triangle intersection and OBJ loading for simple ray tracers."""

__version__ = "0.1.0"