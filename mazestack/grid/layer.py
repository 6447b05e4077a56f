"""Cell values, single maze layers and stacks of layers.

A `Layer` is an immutable 2D grid of `CellType` values stored as a numpy
``uint8`` array of shape ``(rows, cols)``. Row 0 is the row nearest the world
origin; see `mazestack.geometry.segments` for how rows and columns map to
world space.

A `MazeStack` is an ordered, non-empty tuple of layers sharing one footprint.
Index 0 is the ground layer, which is always fully floored. On upper layers a
cell set to `CellType.OPENING` has no floor tile, which is how stacked levels
connect vertically.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from enum import IntEnum
from typing import TYPE_CHECKING, TypeAlias, overload

import numpy as np

from mazestack import config
from mazestack.errors import InvalidLayerError, OutOfBoundsError

if TYPE_CHECKING:
    from mazestack.types import CellPos, GridCoord


class CellType(IntEnum):
    """What occupies one grid cell.

    The numeric values are the on-grid encoding shared by the generators,
    the editor and hand-authored layers.
    """

    PATH = 0
    WALL = 1
    OPENING = 2


_VALID_CELL_VALUES = np.array([int(c) for c in CellType], dtype=np.int64)

LayerSource: TypeAlias = "Layer | np.ndarray | Sequence[Sequence[int]]"


def _coerce_cells(source: np.ndarray | Sequence[Sequence[int]]) -> np.ndarray:
    """Validate raw cell data and return an owned uint8 array."""
    if not isinstance(source, np.ndarray):
        rows = list(source)
        if not rows:
            raise InvalidLayerError("Layer must have at least one row.")
        try:
            widths = {len(row) for row in rows}
        except TypeError as e:
            raise InvalidLayerError("Layer must be a 2D grid of cells.") from e
        if len(widths) != 1:
            raise InvalidLayerError(
                f"Layer rows must all have the same length, got {sorted(widths)}."
            )
        source = rows

    try:
        raw = np.asarray(source)
    except (TypeError, ValueError) as e:
        raise InvalidLayerError(f"Layer cells must be integers: {e}") from e

    if raw.ndim != 2:
        raise InvalidLayerError(f"Layer must be 2D, got {raw.ndim} dimension(s).")
    if not np.issubdtype(raw.dtype, np.integer):
        raise InvalidLayerError(f"Layer cells must be integers, got {raw.dtype}.")
    raw = raw.astype(np.int64)

    rows_count, cols_count = raw.shape
    if rows_count < config.MIN_GRID_SIZE or cols_count < config.MIN_GRID_SIZE:
        raise InvalidLayerError(
            f"Layer must be at least {config.MIN_GRID_SIZE}x{config.MIN_GRID_SIZE}, "
            f"got {rows_count}x{cols_count}."
        )

    unknown = ~np.isin(raw, _VALID_CELL_VALUES)
    if unknown.any():
        row, col = (int(i) for i in np.argwhere(unknown)[0])
        raise InvalidLayerError(
            f"Unknown cell value {int(raw[row, col])} at ({row}, {col})."
        )

    cells = raw.astype(np.uint8)
    cells.flags.writeable = False
    return cells


class Layer:
    """An immutable, validated rectangular grid of cells."""

    __slots__ = ("_cells",)

    def __init__(self, cells: LayerSource) -> None:
        if isinstance(cells, Layer):
            self._cells = cells._cells
        else:
            self._cells = _coerce_cells(cells)

    @classmethod
    def filled(cls, rows: int, cols: int, value: CellType = CellType.WALL) -> Layer:
        return cls(np.full((rows, cols), int(value), dtype=np.uint8))

    @property
    def rows(self) -> int:
        return int(self._cells.shape[0])

    @property
    def cols(self) -> int:
        return int(self._cells.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the underlying ``(rows, cols)`` array."""
        return self._cells

    def in_bounds(self, row: GridCoord, col: GridCoord) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_boundary(self, row: GridCoord, col: GridCoord) -> bool:
        return row in (0, self.rows - 1) or col in (0, self.cols - 1)

    def __getitem__(self, pos: CellPos) -> CellType:
        row, col = pos
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(
                f"Cell ({row}, {col}) outside {self.rows}x{self.cols} layer."
            )
        return CellType(int(self._cells[row, col]))

    def with_cell(self, row: GridCoord, col: GridCoord, value: CellType) -> Layer:
        """Return a copy of this layer with one cell replaced."""
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(
                f"Cell ({row}, {col}) outside {self.rows}x{self.cols} layer."
            )
        cells = self._cells.copy()
        cells[row, col] = int(CellType(value))
        return Layer(cells)

    def count(self, value: CellType) -> int:
        return int(np.count_nonzero(self._cells == int(value)))

    def positions(self, value: CellType) -> list[CellPos]:
        """All cells holding ``value``, in row-major order."""
        return [(int(r), int(c)) for r, c in np.argwhere(self._cells == int(value))]

    def to_lists(self) -> list[list[int]]:
        return self._cells.tolist()

    def render_text(self, wall: str = "#", path: str = ".", opening: str = "o") -> str:
        glyphs = {CellType.PATH: path, CellType.WALL: wall, CellType.OPENING: opening}
        return "\n".join(
            "".join(glyphs[CellType(int(v))] for v in row) for row in self._cells
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Layer):
            return NotImplemented
        return np.array_equal(self._cells, other._cells)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Layer(rows={self.rows}, cols={self.cols})"


class MazeStack(Sequence[Layer]):
    """An ordered, non-empty stack of equally sized layers. Index 0 is ground."""

    __slots__ = ("_layers",)

    def __init__(self, layers: Sequence[LayerSource]) -> None:
        built = tuple(Layer(layer) for layer in layers)
        if not built:
            raise InvalidLayerError("A maze stack needs at least one layer.")
        shape = built[0].shape
        for index, layer in enumerate(built[1:], start=1):
            if layer.shape != shape:
                raise InvalidLayerError(
                    f"Layer {index} is {layer.rows}x{layer.cols}, "
                    f"expected {shape[0]}x{shape[1]} like the ground layer."
                )
        self._layers = built

    @property
    def ground(self) -> Layer:
        return self._layers[0]

    @property
    def shape(self) -> tuple[int, int]:
        return self._layers[0].shape

    @overload
    def __getitem__(self, index: int) -> Layer: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Layer, ...]: ...

    def __getitem__(self, index: int | slice) -> Layer | tuple[Layer, ...]:
        return self._layers[index]

    def __len__(self) -> int:
        return len(self._layers)

    def __iter__(self) -> Iterator[Layer]:
        return iter(self._layers)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MazeStack):
            return NotImplemented
        return self._layers == other._layers

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows, cols = self.shape
        return f"MazeStack(layers={len(self)}, rows={rows}, cols={cols})"
