"""2D vector drawing model: matrices, shapes, a display file, window-to-viewport mapping and an editor."""

__version__ = "0.1.0"