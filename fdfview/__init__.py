"""Isometric wireframe viewer for .fdf height maps, with X11 colour names and XPM decoding."""

__version__ = "0.1.0"