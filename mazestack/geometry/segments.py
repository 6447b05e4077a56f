"""Derive renderable wall connectors and floor tiles from a maze stack.

Coordinate convention
---------------------
World space is right-handed with y up. For a cell at ``(row, col)`` on
layer ``i``:

- ``x = col * cell_size``: columns grow along +x.
- ``z = -row * cell_size``: rows grow along -z.
- ``y = i * wall_height``: each layer sits one wall height above the last.

So cell ``(0, 0)`` of the ground layer is centered on the world origin and
the maze extends toward +x and -z. Markers, wall connectors and floor tiles
all use this mapping.

Walls
-----
Walls are drawn as connectors between adjacent wall cells, not as one box
per cell. Scanning each layer row-major, a wall cell emits:

- a HORIZONTAL connector iff the cell to its right is also a wall;
- a VERTICAL connector iff the cell below it (``row + 1``) is also a wall.

Left and upper neighbors are never checked. A wall cell whose wall
neighbors are all to its left or above contributes nothing itself; the
neighbor's own scan emits the connector.

Floors
------
The ground layer gets one tile covering the whole footprint. Upper layers
get one tile per cell, except `CellType.OPENING` cells which are left open.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

import numpy as np

from mazestack import config
from mazestack.errors import InvalidGeometryError
from mazestack.grid.layer import CellType, Layer, LayerSource, MazeStack
from mazestack.resources.handles import ResourceKind
from mazestack.types import Dimensions, GridCoord, LayerIndex, WorldPos

logger = logging.getLogger(__name__)


class Axis(Enum):
    HORIZONTAL = "horizontal"  # Joins (row, col) to (row, col + 1)
    VERTICAL = "vertical"  # Joins (row, col) to (row + 1, col)


def cell_center(
    row: GridCoord,
    col: GridCoord,
    layer_index: LayerIndex = 0,
    cell_size: float = config.DEFAULT_CELL_SIZE,
    wall_height: float = config.DEFAULT_WALL_HEIGHT,
) -> WorldPos:
    """World position of a cell's floor center."""
    return (col * cell_size, layer_index * wall_height, -row * cell_size)


@dataclass(frozen=True, slots=True)
class WallSegment:
    """One wall connector between two adjacent wall cells."""

    axis: Axis
    row: GridCoord
    col: GridCoord
    layer_index: LayerIndex
    length: float
    thickness: float
    height: float

    @property
    def kind(self) -> ResourceKind:
        return ResourceKind.WALL

    @property
    def dimensions(self) -> Dimensions:
        """Box size as ``(width, height, depth)``."""
        if self.axis is Axis.HORIZONTAL:
            return (self.length, self.height, self.thickness)
        return (self.thickness, self.height, self.length)

    @property
    def position(self) -> WorldPos:
        """World-space center of the box."""
        x = self.col * self.length
        y = self.layer_index * self.height + self.height / 2
        z = -self.row * self.length
        if self.axis is Axis.HORIZONTAL:
            return (x + self.length / 2, y, z)
        return (x, y, z - self.length / 2)


@dataclass(frozen=True, slots=True)
class FloorTile:
    """One floor patch: a whole ground footprint or a single upper cell."""

    x: float
    z: float
    width: float
    height: float
    layer_index: LayerIndex
    y: float = 0.0

    @property
    def kind(self) -> ResourceKind:
        return ResourceKind.FLOOR

    @property
    def dimensions(self) -> Dimensions:
        """Plane size as ``(width, height)``."""
        return (self.width, self.height)

    @property
    def position(self) -> WorldPos:
        return (self.x, self.y, self.z)

    @property
    def is_ground(self) -> bool:
        return self.layer_index == 0


@dataclass(frozen=True, slots=True)
class BuiltMaze:
    """Everything the rendering side needs, derived from one stack."""

    walls: tuple[WallSegment, ...]
    floors: tuple[FloorTile, ...]

    @property
    def segment_count(self) -> int:
        return len(self.walls) + len(self.floors)

    def walls_on(self, layer_index: LayerIndex) -> list[WallSegment]:
        return [w for w in self.walls if w.layer_index == layer_index]

    def floors_on(self, layer_index: LayerIndex) -> list[FloorTile]:
        return [f for f in self.floors if f.layer_index == layer_index]


class SegmentBuilder:
    """Turns a `MazeStack` into wall connectors and floor tiles.

    `build` is a pure function of the stack and the builder's dimensions:
    layers are immutable, so the same stack always yields equal output.
    """

    def __init__(
        self,
        cell_size: float = config.DEFAULT_CELL_SIZE,
        wall_height: float = config.DEFAULT_WALL_HEIGHT,
        wall_thickness: float = config.DEFAULT_WALL_THICKNESS,
    ) -> None:
        for name, value in (
            ("cell_size", cell_size),
            ("wall_height", wall_height),
            ("wall_thickness", wall_thickness),
        ):
            if not np.isfinite(value) or value <= 0:
                raise InvalidGeometryError(f"{name} must be positive, got {value}")
        self.cell_size = float(cell_size)
        self.wall_height = float(wall_height)
        self.wall_thickness = float(wall_thickness)

    def build(self, stack: MazeStack | Sequence[LayerSource]) -> BuiltMaze:
        if not isinstance(stack, MazeStack):
            stack = MazeStack(stack)

        walls: list[WallSegment] = []
        floors: list[FloorTile] = []
        for layer_index, layer in enumerate(stack):
            walls.extend(self._walls_for_layer(layer, layer_index))
            if layer_index == 0:
                floors.append(self._ground_floor(layer))
            else:
                floors.extend(self._upper_floors(layer, layer_index))

        logger.debug(
            f"Built {len(walls)} wall segments and {len(floors)} floor tiles "
            f"from {stack!r}"
        )
        return BuiltMaze(walls=tuple(walls), floors=tuple(floors))

    def _walls_for_layer(
        self, layer: Layer, layer_index: LayerIndex
    ) -> list[WallSegment]:
        is_wall = layer.cells == CellType.WALL

        # connects_right[r, c]: (r, c) and (r, c + 1) are both walls.
        connects_right = np.zeros_like(is_wall)
        connects_right[:, :-1] = is_wall[:, :-1] & is_wall[:, 1:]
        # connects_down[r, c]: (r, c) and (r + 1, c) are both walls.
        connects_down = np.zeros_like(is_wall)
        connects_down[:-1, :] = is_wall[:-1, :] & is_wall[1:, :]

        segments: list[WallSegment] = []
        # argwhere yields row-major order, matching a nested row/col scan.
        for row, col in np.argwhere(connects_right | connects_down):
            row, col = int(row), int(col)
            if connects_right[row, col]:
                segments.append(self._wall(Axis.HORIZONTAL, row, col, layer_index))
            if connects_down[row, col]:
                segments.append(self._wall(Axis.VERTICAL, row, col, layer_index))
        return segments

    def _wall(
        self, axis: Axis, row: GridCoord, col: GridCoord, layer_index: LayerIndex
    ) -> WallSegment:
        return WallSegment(
            axis=axis,
            row=row,
            col=col,
            layer_index=layer_index,
            length=self.cell_size,
            thickness=self.wall_thickness,
            height=self.wall_height,
        )

    def _ground_floor(self, layer: Layer) -> FloorTile:
        width = layer.cols * self.cell_size
        depth = layer.rows * self.cell_size
        return FloorTile(
            x=width / 2 - self.cell_size / 2,
            z=-depth / 2 + self.cell_size / 2,
            width=width,
            height=depth,
            layer_index=0,
            y=-self.wall_thickness / 2,
        )

    def _upper_floors(self, layer: Layer, layer_index: LayerIndex) -> list[FloorTile]:
        tiles: list[FloorTile] = []
        for row, col in np.argwhere(layer.cells != CellType.OPENING):
            x, y, z = cell_center(
                int(row), int(col), layer_index, self.cell_size, self.wall_height
            )
            tiles.append(
                FloorTile(
                    x=x,
                    z=z,
                    width=self.cell_size,
                    height=self.cell_size,
                    layer_index=layer_index,
                    y=y,
                )
            )
        return tiles


def build(
    stack: MazeStack | Sequence[LayerSource],
    cell_size: float = config.DEFAULT_CELL_SIZE,
    wall_height: float = config.DEFAULT_WALL_HEIGHT,
    wall_thickness: float = config.DEFAULT_WALL_THICKNESS,
) -> BuiltMaze:
    """Convenience wrapper around `SegmentBuilder.build`."""
    return SegmentBuilder(cell_size, wall_height, wall_thickness).build(stack)
