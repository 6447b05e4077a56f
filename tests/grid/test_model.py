from __future__ import annotations

import pytest

from mazestack.errors import InvalidLayerError, OutOfBoundsError
from mazestack.grid import CellType, GridModel, Layer
from mazestack.samples import multi_layer_example, single_layer_example


class TestGridModelEdits:
    def test_set_cell_changes_one_cell(self) -> None:
        model = GridModel(single_layer_example())
        model.set_cell(0, 2, 2, CellType.PATH)
        assert model.get_cell(0, 2, 2) == CellType.PATH
        assert model.revision == 1

    def test_set_cell_accepts_plain_ints(self) -> None:
        model = GridModel(single_layer_example())
        model.set_cell(0, 1, 1, 1)
        assert model.get_cell(0, 1, 1) is CellType.WALL

    def test_unchanged_value_is_a_no_op(self) -> None:
        model = GridModel(single_layer_example())
        before = model.snapshot()
        model.set_cell(0, 0, 0, CellType.WALL)
        assert model.revision == 0
        assert model.snapshot() is before

    def test_snapshots_are_isolated_from_later_edits(self) -> None:
        model = GridModel(single_layer_example())
        before = model.snapshot()
        model.set_cell(0, 2, 2, CellType.PATH)
        assert before.ground[2, 2] == CellType.WALL
        assert model.snapshot().ground[2, 2] == CellType.PATH

    def test_opening_allowed_on_upper_layer(self) -> None:
        model = GridModel(multi_layer_example())
        model.set_cell(1, 3, 3, CellType.OPENING)
        assert model.get_cell(1, 3, 3) is CellType.OPENING

    @pytest.mark.parametrize(
        ("layer", "row", "col"), [(0, 5, 0), (0, 0, 5), (0, -1, 0), (1, 0, 0)]
    )
    def test_out_of_bounds(self, layer: int, row: int, col: int) -> None:
        model = GridModel(single_layer_example())
        with pytest.raises(OutOfBoundsError):
            model.set_cell(layer, row, col, CellType.PATH)
        assert model.revision == 0

    def test_unknown_value_rejected_and_state_kept(self) -> None:
        model = GridModel(single_layer_example())
        before = model.snapshot()
        with pytest.raises(InvalidLayerError):
            model.set_cell(0, 1, 1, 7)
        assert model.snapshot() is before


class TestGridModelLayers:
    def test_add_layer_returns_index(self) -> None:
        model = GridModel(single_layer_example())
        index = model.add_layer(Layer.filled(5, 5))
        assert index == 1
        assert len(model) == 2

    def test_add_mismatched_layer_keeps_stack(self) -> None:
        model = GridModel(single_layer_example())
        before = model.snapshot()
        with pytest.raises(InvalidLayerError):
            model.add_layer(Layer.filled(4, 5))
        assert model.snapshot() is before
        assert model.revision == 0

    def test_insert_layer(self) -> None:
        model = GridModel(multi_layer_example())
        middle = Layer.filled(5, 6, CellType.PATH)
        model.insert_layer(1, middle)
        assert len(model) == 3
        assert model.layer(1) == middle

    def test_insert_out_of_range(self) -> None:
        model = GridModel(single_layer_example())
        with pytest.raises(OutOfBoundsError):
            model.insert_layer(3, Layer.filled(5, 5))

    def test_replace_layer(self) -> None:
        model = GridModel(multi_layer_example())
        model.replace_layer(1, Layer.filled(5, 6))
        assert model.layer(1).count(CellType.WALL) == 30

    def test_remove_layer(self) -> None:
        model = GridModel(multi_layer_example())
        removed = model.remove_layer(1)
        assert removed.count(CellType.OPENING) == 1
        assert len(model) == 1

    def test_cannot_remove_last_layer(self) -> None:
        model = GridModel(single_layer_example())
        with pytest.raises(InvalidLayerError):
            model.remove_layer(0)

    def test_load_replaces_stack(self) -> None:
        model = GridModel(single_layer_example())
        model.load(multi_layer_example())
        assert model.shape == (5, 6)
        assert model.revision == 1

    def test_layer_index_out_of_range(self) -> None:
        model = GridModel(single_layer_example())
        with pytest.raises(OutOfBoundsError, match="Layer 2 does not exist"):
            model.layer(2)
