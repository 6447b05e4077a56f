"""Headless model of the hand-authoring grid editor.

This holds the editor's state and tool rules without any drawing or input
handling: a front end translates clicks into `apply_tool_at` calls and
redraws from `grid`, `start` and `end`.

Editor rows are numbered top-down as they appear on screen, while maze row 0
is the row at the world origin. `apply` flips rows to convert between the
two, for the cells and for the markers.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

import numpy as np

from mazestack import config
from mazestack.errors import OutOfBoundsError
from mazestack.grid.layer import CellType, Layer, MazeStack
from mazestack.grid.markers import MazeMarkers, resolve_markers

if TYPE_CHECKING:
    from mazestack.types import CellPos, GridCoord

logger = logging.getLogger(__name__)


class EditorTool(Enum):
    PEN = "pen"  # Paint walls
    ERASER = "eraser"  # Paint paths, removing any marker underneath
    START = "start"  # Place the start marker on a path cell
    END = "end"  # Place the end marker on a path cell


def _clamp_size(value: int) -> int:
    return max(config.EDITOR_MIN_SIZE, min(config.EDITOR_MAX_SIZE, value))


class GridEditor:
    """Editable single-layer grid with start/end markers.

    A fresh grid has a wall border and an open interior.
    """

    def __init__(
        self,
        rows: int = config.EDITOR_DEFAULT_SIZE,
        cols: int = config.EDITOR_DEFAULT_SIZE,
    ) -> None:
        self.tool = EditorTool.PEN
        self.rows = 0
        self.cols = 0
        self.grid = np.zeros((0, 0), dtype=np.uint8)
        self.start: CellPos | None = None
        self.end: CellPos | None = None
        self.resize(rows, cols)

    @staticmethod
    def _initial_grid(rows: int, cols: int) -> np.ndarray:
        grid = np.full((rows, cols), CellType.PATH, dtype=np.uint8)
        grid[0, :] = CellType.WALL
        grid[-1, :] = CellType.WALL
        grid[:, 0] = CellType.WALL
        grid[:, -1] = CellType.WALL
        return grid

    def resize(self, rows: int, cols: int) -> None:
        """Start over with a new size, clamped to the editor limits."""
        self.rows = _clamp_size(rows)
        self.cols = _clamp_size(cols)
        self.clear()

    def clear(self) -> None:
        """Restore the initial grid and drop both markers."""
        self.grid = self._initial_grid(self.rows, self.cols)
        self.start = None
        self.end = None

    def reset(self) -> None:
        self.resize(self.rows, self.cols)

    def set_tool(self, tool: EditorTool) -> None:
        self.tool = tool

    def apply_tool_at(
        self, row: GridCoord, col: GridCoord, tool: EditorTool | None = None
    ) -> None:
        """Apply ``tool`` (or the current tool) to one editor cell."""
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise OutOfBoundsError(
                f"Cell ({row}, {col}) outside {self.rows}x{self.cols} editor grid."
            )
        pos = (row, col)
        match tool or self.tool:
            case EditorTool.PEN:
                self.grid[row, col] = CellType.WALL
            case EditorTool.ERASER:
                self.grid[row, col] = CellType.PATH
                if self.start == pos:
                    self.start = None
                if self.end == pos:
                    self.end = None
            case EditorTool.START:
                self.grid[row, col] = CellType.PATH
                self.start = pos
            case EditorTool.END:
                self.grid[row, col] = CellType.PATH
                self.end = pos

    def _to_maze_row(self, pos: CellPos | None) -> CellPos | None:
        if pos is None:
            return None
        row, col = pos
        return (self.rows - 1 - row, col)

    def apply(self) -> tuple[MazeStack, MazeMarkers | None]:
        """Export the grid as a one-layer stack plus its markers.

        Markers the author did not place are inferred from the flipped layer
        exactly as for a generated maze.
        """
        layer = Layer(np.flipud(self.grid))
        markers = resolve_markers(
            layer, self._to_maze_row(self.start), self._to_maze_row(self.end)
        )
        logger.debug(
            f"Editor applied {self.rows}x{self.cols} grid, markers={markers}"
        )
        return MazeStack([layer]), markers
