"""Wireframe viewer for height maps: map reading, projection, drawing and controls."""

__version__ = "0.1.0"
__all__ = ["__version__"]