"""Maze generation algorithms.

This package provides two carving algorithms that both produce perfect mazes
(exactly one path between any two passage cells):
- DepthFirstGenerator: randomized depth-first search with optional axis bias
- PrimsGenerator: randomized Prim's algorithm over a frontier of wall cells

Most callers only need `generate()`.
"""

from .base import BaseMazeGenerator, Bias, EntryMode, entry_cells
from .depth_first import DepthFirstGenerator
from .factory import Algorithm, create_generator, generate
from .prims import PrimsGenerator

__all__ = [
    "Algorithm",
    "BaseMazeGenerator",
    "Bias",
    "DepthFirstGenerator",
    "EntryMode",
    "PrimsGenerator",
    "create_generator",
    "entry_cells",
    "generate",
]
