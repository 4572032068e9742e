"""Textured grid raycaster: .cub scene loading, XPM textures and a pygame view."""

__version__ = "0.1.0"