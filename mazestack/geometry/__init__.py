"""Wall and floor segment derivation."""

from .segments import (
    Axis,
    BuiltMaze,
    FloorTile,
    SegmentBuilder,
    WallSegment,
    build,
    cell_center,
)

__all__ = [
    "Axis",
    "BuiltMaze",
    "FloorTile",
    "SegmentBuilder",
    "WallSegment",
    "build",
    "cell_center",
]
