"""Base classes and shared options for maze generation."""

from __future__ import annotations

import abc
import logging
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

import numpy as np

from mazestack import config
from mazestack.errors import InvalidDimensionError
from mazestack.grid.layer import CellType, Layer
from mazestack.util import rng as rng_module

if TYPE_CHECKING:
    from mazestack.types import CellPos, GridCoord
    from mazestack.util.rng import RNG

logger = logging.getLogger(__name__)


class EntryMode(Enum):
    """Which border cells are opened after carving."""

    NONE = "none"
    DIAGONAL = "diagonal"
    LEFT_RIGHT = "left-right"
    TOP_BOTTOM = "top-bottom"


class Bias(Enum):
    """Preferred carving axis for the depth-first generator."""

    NONE = "none"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


def entry_cells(entries: EntryMode, width: int, height: int) -> list[CellPos]:
    """Return the (row, col) border cells opened by ``entries``."""
    match entries:
        case EntryMode.NONE:
            return []
        case EntryMode.DIAGONAL:
            return [(1, 0), (height - 2, width - 1)]
        case EntryMode.LEFT_RIGHT:
            return [(height // 2, 0), (height // 2, width - 1)]
        case EntryMode.TOP_BOTTOM:
            return [(0, width // 2), (height - 1, width // 2)]
        case _:
            raise ValueError(f"Unknown entry mode: {entries!r}")


class BaseMazeGenerator(abc.ABC):
    """Abstract base class for maze carving algorithms.

    Subclasses only implement `_carve`. The base class owns the steps every
    algorithm shares, in order:

    1. Validate the requested size (before anything is allocated).
    2. Fill a ``(height, width)`` grid with walls.
    3. Carve passages via `_carve`, starting from ``config.CARVE_ORIGIN``.
    4. Force every border cell back to wall.
    5. Open the entrance cells dictated by ``entries``.

    Carving only ever touches interior cells, so step 4 never disconnects a
    passage regardless of whether the grid has odd or even sides.
    """

    #: Name of the `mazestack.util.rng` stream used when no rng is injected.
    rng_domain: ClassVar[str]

    def __init__(
        self,
        width: GridCoord,
        height: GridCoord,
        entries: EntryMode = EntryMode.NONE,
        rng: RNG | None = None,
    ) -> None:
        if width < config.MIN_GRID_SIZE or height < config.MIN_GRID_SIZE:
            raise InvalidDimensionError(
                f"Maze must be at least {config.MIN_GRID_SIZE}x"
                f"{config.MIN_GRID_SIZE}, got width={width}, height={height}."
            )
        self.width = width
        self.height = height
        self.entries = entries
        self.rng: RNG = rng if rng is not None else rng_module.get(self.rng_domain)

    def generate(self) -> Layer:
        """Carve a new maze and return it as an immutable layer."""
        tiles = np.full(
            (self.height, self.width), fill_value=CellType.WALL, dtype=np.uint8
        )

        self._carve(tiles)
        self._enforce_border(tiles)
        for row, col in entry_cells(self.entries, self.width, self.height):
            tiles[row, col] = CellType.PATH

        layer = Layer(tiles)
        logger.debug(
            f"{type(self).__name__} carved {self.width}x{self.height} maze "
            f"with {layer.count(CellType.PATH)} path cells "
            f"(entries={self.entries.value})"
        )
        return layer

    @abc.abstractmethod
    def _carve(self, tiles: np.ndarray) -> None:
        """Carve passages into ``tiles`` in place. ``tiles`` is indexed [row, col]."""
        raise NotImplementedError

    def _is_interior(self, row: GridCoord, col: GridCoord) -> bool:
        return 1 <= row <= self.height - 2 and 1 <= col <= self.width - 2

    def _enforce_border(self, tiles: np.ndarray) -> None:
        tiles[0, :] = CellType.WALL
        tiles[-1, :] = CellType.WALL
        tiles[:, 0] = CellType.WALL
        tiles[:, -1] = CellType.WALL
