"""The current maze and everything derived from it.

`MazeSession` is what a front end talks to. It keeps the grid model, the
markers, the built segments and the drawables consistent with each other:

- Input is validated and segments are built *before* anything is replaced,
  so a failed generate/load/edit leaves the previous maze fully in place.
- Every successful change is a whole rebuild: the resource cache is
  disposed as a unit, then segments, markers and drawables are recreated.
  There is no incremental patching of drawables.

Rebuilds are synchronous; callers must not touch the cache while one runs.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from mazestack import config
from mazestack.generators import Algorithm, Bias, EntryMode, generate
from mazestack.geometry.segments import BuiltMaze, SegmentBuilder
from mazestack.grid.layer import CellType, LayerSource, MazeStack
from mazestack.grid.markers import MazeMarkers, resolve_markers
from mazestack.grid.model import GridModel
from mazestack.resources.cache import ResourceCache
from mazestack.resources.factory import DisplaySettings, Drawable, DrawableFactory

if TYPE_CHECKING:
    from mazestack.types import CellPos, GridCoord, LayerIndex
    from mazestack.util.rng import RNG

logger = logging.getLogger(__name__)


class MazeSession:
    def __init__(
        self,
        settings: DisplaySettings | None = None,
        cell_size: float = config.DEFAULT_CELL_SIZE,
        wall_height: float = config.DEFAULT_WALL_HEIGHT,
        wall_thickness: float = config.DEFAULT_WALL_THICKNESS,
    ) -> None:
        self.builder = SegmentBuilder(cell_size, wall_height, wall_thickness)
        self.cache = ResourceCache("session")
        self.factory = DrawableFactory(self.cache, settings)
        self.model: GridModel | None = None
        self.markers: MazeMarkers | None = None
        self.built: BuiltMaze | None = None
        self.drawables: list[Drawable] = []
        self._explicit_start: CellPos | None = None
        self._explicit_end: CellPos | None = None

    @property
    def stack(self) -> MazeStack | None:
        return self.model.snapshot() if self.model is not None else None

    def generate(
        self,
        width: GridCoord = config.DEFAULT_MAZE_WIDTH,
        height: GridCoord = config.DEFAULT_MAZE_HEIGHT,
        entries: EntryMode = EntryMode.NONE,
        bias: Bias = Bias.NONE,
        *,
        algorithm: Algorithm = Algorithm.DEPTH_FIRST,
        rng: RNG | None = None,
    ) -> MazeStack:
        """Replace the current maze with a freshly generated one."""
        layer = generate(width, height, entries, bias, algorithm=algorithm, rng=rng)
        return self.load([layer])

    def load(
        self,
        layers: MazeStack | Sequence[LayerSource],
        start: CellPos | None = None,
        end: CellPos | None = None,
    ) -> MazeStack:
        """Replace the current maze with ``layers`` and optional explicit markers."""
        stack = layers if isinstance(layers, MazeStack) else MazeStack(layers)
        built = self.builder.build(stack)
        markers = resolve_markers(stack.ground, start, end)

        self.model = GridModel(stack)
        self._explicit_start = start
        self._explicit_end = end
        self._commit(built, markers)
        return stack

    def set_cell(
        self,
        layer_index: LayerIndex,
        row: GridCoord,
        col: GridCoord,
        value: CellType | int,
    ) -> None:
        """Edit one cell and rebuild everything derived from the grid."""
        if self.model is None:
            raise RuntimeError("No maze loaded - call generate() or load() first")
        previous = self.model.snapshot()
        self.model.set_cell(layer_index, row, col, value)
        stack = self.model.snapshot()
        if stack is previous:
            return
        built = self.builder.build(stack)
        markers = resolve_markers(
            stack.ground, self._explicit_start, self._explicit_end
        )
        self._commit(built, markers)

    def update_settings(self, **changes: object) -> None:
        """Change display settings; recreates drawables only when required."""
        if self.factory.update_settings(**changes) and self.built is not None:
            self._commit(self.built, self.markers)

    def close(self) -> None:
        self.drawables = []
        self.cache.dispose()
        self.factory.close()

    def _commit(self, built: BuiltMaze, markers: MazeMarkers | None) -> None:
        # Old drawables borrow from the cache, so drop them before disposing.
        self.drawables = []
        self.cache.dispose()
        self.built = built
        self.markers = markers
        self.drawables = self.factory.create(built)
        logger.debug(
            f"Session rebuilt: {len(built.walls)} walls, {len(built.floors)} floors, "
            f"markers={markers}"
        )
