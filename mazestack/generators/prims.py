"""Randomized Prim's maze carving."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from mazestack import config
from mazestack.grid.layer import CellType

from .base import BaseMazeGenerator

if TYPE_CHECKING:
    from mazestack.types import CellPos, GridCoord


class PrimsGenerator(BaseMazeGenerator):
    """Carves a perfect maze with the iterative randomized Prim's algorithm.

    The frontier is a list of wall cells two steps away from carved
    territory. A cell can be pushed more than once (once per carved neighbor);
    stale entries that were carved in the meantime are discarded when popped,
    otherwise a second carve would open a loop.
    """

    rng_domain = "maze.prims"

    def _carve(self, tiles: np.ndarray) -> None:
        start_row, start_col = config.CARVE_ORIGIN
        tiles[start_row, start_col] = CellType.PATH
        frontier: list[CellPos] = []
        self._push_frontier(tiles, frontier, start_row, start_col)

        while frontier:
            row, col = frontier.pop(self.rng.randrange(len(frontier)))
            if tiles[row, col] != CellType.WALL:
                continue

            carved = [
                (n_row, n_col)
                for n_row, n_col in self._neighbors(row, col)
                if tiles[n_row, n_col] == CellType.PATH
            ]
            if not carved:
                continue

            n_row, n_col = self.rng.choice(carved)
            tiles[(row + n_row) // 2, (col + n_col) // 2] = CellType.PATH
            tiles[row, col] = CellType.PATH
            self._push_frontier(tiles, frontier, row, col)

    def _neighbors(self, row: GridCoord, col: GridCoord) -> list[CellPos]:
        """Interior cells two steps away, in left, right, up, down order."""
        candidates = [
            (row, col - 2),
            (row, col + 2),
            (row - 2, col),
            (row + 2, col),
        ]
        return [pos for pos in candidates if self._is_interior(*pos)]

    def _push_frontier(
        self,
        tiles: np.ndarray,
        frontier: list[CellPos],
        row: GridCoord,
        col: GridCoord,
    ) -> None:
        for n_row, n_col in self._neighbors(row, col):
            if tiles[n_row, n_col] == CellType.WALL:
                frontier.append((n_row, n_col))
