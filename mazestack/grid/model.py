"""Mutable owner of the current maze stack."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from mazestack.errors import InvalidLayerError, OutOfBoundsError

from .layer import CellType, Layer, LayerSource, MazeStack

if TYPE_CHECKING:
    from mazestack.types import GridCoord, LayerIndex

logger = logging.getLogger(__name__)


class GridModel:
    """Owns a `MazeStack` and applies validated edits to it.

    Layers are immutable, so every edit builds a new stack and swaps it in
    only after validation succeeds. A failed edit leaves the model exactly as
    it was. Consumers holding an earlier `snapshot()` never observe partial
    edits; they must rebuild derived data (segments, drawables) when
    `revision` changes.

    Not safe for concurrent mutation.
    """

    def __init__(self, layers: Sequence[LayerSource] | MazeStack) -> None:
        self._stack = layers if isinstance(layers, MazeStack) else MazeStack(layers)
        self._revision = 0

    @property
    def stack(self) -> MazeStack:
        return self._stack

    @property
    def revision(self) -> int:
        """Incremented on every successful mutation."""
        return self._revision

    @property
    def shape(self) -> tuple[int, int]:
        return self._stack.shape

    def __len__(self) -> int:
        return len(self._stack)

    def snapshot(self) -> MazeStack:
        """Return the current stack. It will not change under later edits."""
        return self._stack

    def layer(self, layer_index: LayerIndex) -> Layer:
        self._check_layer_index(layer_index)
        return self._stack[layer_index]

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------

    def get_cell(
        self, layer_index: LayerIndex, row: GridCoord, col: GridCoord
    ) -> CellType:
        return self.layer(layer_index)[row, col]

    def set_cell(
        self,
        layer_index: LayerIndex,
        row: GridCoord,
        col: GridCoord,
        value: CellType | int,
    ) -> None:
        """Replace one cell.

        Raises:
            OutOfBoundsError: If the layer, row or column does not exist.
            InvalidLayerError: If ``value`` is not a known cell type.
        """
        layer = self.layer(layer_index)
        if not layer.in_bounds(row, col):
            raise OutOfBoundsError(
                f"Cell ({row}, {col}) outside {layer.rows}x{layer.cols} layer."
            )
        try:
            cell = CellType(value)
        except ValueError as e:
            raise InvalidLayerError(f"Unknown cell value {value!r}.") from e

        if layer[row, col] == cell:
            return
        self._replace(layer_index, layer.with_cell(row, col, cell))

    # ------------------------------------------------------------------
    # Layer management
    # ------------------------------------------------------------------

    def add_layer(self, layer: LayerSource) -> LayerIndex:
        """Append a layer on top of the stack and return its index."""
        self._commit([*self._stack, Layer(layer)])
        return len(self._stack) - 1

    def insert_layer(self, layer_index: LayerIndex, layer: LayerSource) -> None:
        if not 0 <= layer_index <= len(self._stack):
            raise OutOfBoundsError(
                f"Cannot insert at layer {layer_index}; stack has {len(self._stack)}."
            )
        layers = list(self._stack)
        layers.insert(layer_index, Layer(layer))
        self._commit(layers)

    def replace_layer(self, layer_index: LayerIndex, layer: LayerSource) -> None:
        self._check_layer_index(layer_index)
        self._replace(layer_index, Layer(layer))

    def remove_layer(self, layer_index: LayerIndex) -> Layer:
        self._check_layer_index(layer_index)
        if len(self._stack) == 1:
            raise InvalidLayerError("Cannot remove the only layer of a maze stack.")
        layers = list(self._stack)
        removed = layers.pop(layer_index)
        self._commit(layers)
        return removed

    def load(self, layers: Sequence[LayerSource] | MazeStack) -> None:
        """Replace the whole stack."""
        stack = layers if isinstance(layers, MazeStack) else MazeStack(layers)
        self._stack = stack
        self._bump()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _check_layer_index(self, layer_index: LayerIndex) -> None:
        if not 0 <= layer_index < len(self._stack):
            raise OutOfBoundsError(
                f"Layer {layer_index} does not exist; stack has {len(self._stack)}."
            )

    def _replace(self, layer_index: LayerIndex, layer: Layer) -> None:
        layers = list(self._stack)
        layers[layer_index] = layer
        self._commit(layers)

    def _commit(self, layers: list[Layer]) -> None:
        # MazeStack validates the footprint before anything is swapped in.
        self._stack = MazeStack(layers)
        self._bump()

    def _bump(self) -> None:
        self._revision += 1
        logger.debug(f"Grid model revision {self._revision}: {self._stack!r}")
