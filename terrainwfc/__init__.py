"""Procedural 2D terrain on a tile grid with a biased wave function collapse, drawn with pygame."""

__version__ = "0.1.0"