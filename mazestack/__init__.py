"""Layered maze generation and 3D scene preparation."""

__version__ = "0.1.0"
