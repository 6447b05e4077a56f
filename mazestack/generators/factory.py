"""Factory functions for creating configured generators.

Available algorithms:
- "depth-first": randomized depth-first carving (supports an axis bias)
- "prims": randomized Prim's algorithm (bias is ignored)
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from .base import BaseMazeGenerator, Bias, EntryMode
from .depth_first import DepthFirstGenerator
from .prims import PrimsGenerator

if TYPE_CHECKING:
    from mazestack.grid.layer import Layer
    from mazestack.types import GridCoord
    from mazestack.util.rng import RNG


class Algorithm(Enum):
    DEPTH_FIRST = "depth-first"
    PRIMS = "prims"


def create_generator(
    algorithm: Algorithm,
    width: GridCoord,
    height: GridCoord,
    entries: EntryMode = EntryMode.NONE,
    bias: Bias = Bias.NONE,
    rng: RNG | None = None,
) -> BaseMazeGenerator:
    """Create a generator for ``algorithm``.

    Raises:
        InvalidDimensionError: If width or height is below the minimum.
        ValueError: If the algorithm is not recognized.
    """
    match algorithm:
        case Algorithm.DEPTH_FIRST:
            return DepthFirstGenerator(width, height, entries, bias, rng)
        case Algorithm.PRIMS:
            return PrimsGenerator(width, height, entries, rng)
    raise ValueError(f"Unknown maze algorithm: {algorithm!r}")


def generate(
    width: GridCoord,
    height: GridCoord,
    entries: EntryMode = EntryMode.NONE,
    bias: Bias = Bias.NONE,
    *,
    algorithm: Algorithm = Algorithm.DEPTH_FIRST,
    rng: RNG | None = None,
) -> Layer:
    """Generate one maze layer of ``height`` rows by ``width`` columns.

    Cells are `CellType.PATH` (0) or `CellType.WALL` (1); generation never
    produces openings. Pass a seeded ``random.Random`` as ``rng`` for
    reproducible output, otherwise the algorithm's named stream from
    `mazestack.util.rng` is used.
    """
    return create_generator(algorithm, width, height, entries, bias, rng).generate()
