"""Randomized depth-first (recursive backtracker) maze carving."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from mazestack import config
from mazestack.grid.layer import CellType

from .base import BaseMazeGenerator, Bias, EntryMode

if TYPE_CHECKING:
    from mazestack.types import GridCoord
    from mazestack.util.rng import RNG

# (d_row, d_col) unit steps. Carving moves two cells at a time.
Direction = tuple[int, int]

DIRECTIONS: tuple[Direction, ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))


def is_horizontal(direction: Direction) -> bool:
    return direction[0] == 0


@dataclass
class _Frame:
    """One level of the backtracking walk: a cell and the moves left to try."""

    row: GridCoord
    col: GridCoord
    remaining: Iterator[Direction]


class DepthFirstGenerator(BaseMazeGenerator):
    """Carves a perfect maze by randomized depth-first search.

    The walk is an explicit stack of frames rather than recursion, so large
    grids cannot hit the interpreter's recursion limit. Each frame draws its
    direction order once, when it is pushed, which is exactly when a
    recursive implementation would shuffle on entry; both formulations
    therefore consume the random stream identically and carve the same maze.
    """

    rng_domain = "maze.depth_first"

    def __init__(
        self,
        width: GridCoord,
        height: GridCoord,
        entries: EntryMode = EntryMode.NONE,
        bias: Bias = Bias.NONE,
        rng: RNG | None = None,
    ) -> None:
        super().__init__(width, height, entries, rng)
        self.bias = bias

    def direction_order(self) -> list[Direction]:
        """Draw a fresh direction order for one frame.

        With a bias the order is shuffled first and then stable-sorted, so
        preferred-axis moves come first but keep their random relative order.
        """
        directions = list(DIRECTIONS)
        self.rng.shuffle(directions)
        match self.bias:
            case Bias.HORIZONTAL:
                directions.sort(key=lambda d: not is_horizontal(d))
            case Bias.VERTICAL:
                directions.sort(key=is_horizontal)
        return directions

    def _carve(self, tiles: np.ndarray) -> None:
        start_row, start_col = config.CARVE_ORIGIN
        tiles[start_row, start_col] = CellType.PATH
        stack = [_Frame(start_row, start_col, iter(self.direction_order()))]

        while stack:
            frame = stack[-1]
            step = next(frame.remaining, None)
            if step is None:
                stack.pop()
                continue

            d_row, d_col = step
            next_row = frame.row + d_row * 2
            next_col = frame.col + d_col * 2
            if (
                self._is_interior(next_row, next_col)
                and tiles[next_row, next_col] == CellType.WALL
            ):
                tiles[next_row, next_col] = CellType.PATH
                tiles[frame.row + d_row, frame.col + d_col] = CellType.PATH
                stack.append(
                    _Frame(next_row, next_col, iter(self.direction_order()))
                )
