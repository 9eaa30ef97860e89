"""Wireframe viewer for .fdf height maps: parsing, projection, drawing and a pygame window."""

__version__ = "0.1.0"