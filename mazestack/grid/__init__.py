"""Layered grid data model and marker inference."""

from .layer import CellType, Layer, MazeStack
from .markers import Marker, MarkerRole, MazeMarkers, locate, resolve_markers
from .model import GridModel

__all__ = [
    "CellType",
    "GridModel",
    "Layer",
    "Marker",
    "MarkerRole",
    "MazeMarkers",
    "MazeStack",
    "locate",
    "resolve_markers",
]
