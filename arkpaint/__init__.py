"""Dither images onto limited palettes and read and write tiled .pnt canvas files."""

__version__ = "1.0.0"