"""Isometric tile maps with noise-generated terrain, a camera, textures, a timer and a file logger."""

__version__ = "0.1.0"