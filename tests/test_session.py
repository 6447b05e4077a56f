import random

import pytest

from mazestack.errors import InvalidDimensionError, InvalidLayerError, OutOfBoundsError
from mazestack.generators import Algorithm
from mazestack.grid import CellType
from mazestack.resources import DisplaySettings, ResourceKind
from mazestack.samples import MULTI_LAYER_EXAMPLE, single_layer_example
from mazestack.session import MazeSession


class TestSessionLoad:
    def test_load_builds_everything(self) -> None:
        session = MazeSession()
        session.load(single_layer_example())
        assert session.built is not None
        assert len(session.built.walls) == 16
        assert len(session.drawables) == 17
        assert session.markers is not None
        assert session.markers.start.pos == (1, 1)

    def test_load_raw_layers_with_explicit_markers(self) -> None:
        session = MazeSession()
        session.load(MULTI_LAYER_EXAMPLE, start=(0, 1), end=(3, 4))
        assert session.stack is not None
        assert len(session.stack) == 2
        assert session.markers is not None
        assert session.markers.end.pos == (3, 4)

    def test_failed_load_keeps_previous_maze(self) -> None:
        session = MazeSession()
        session.load(single_layer_example())
        previous = session.stack
        drawables = session.drawables
        with pytest.raises(InvalidLayerError):
            session.load([[[1, 1], [1, 1]]])
        assert session.stack is previous
        assert session.drawables is drawables
        assert drawables[0].handle.alive

    def test_failed_generate_keeps_previous_maze(self) -> None:
        session = MazeSession()
        session.generate(9, 9, rng=random.Random(1))
        previous = session.stack
        with pytest.raises(InvalidDimensionError):
            session.generate(2, 9)
        assert session.stack is previous

    def test_out_of_bounds_marker_keeps_previous_maze(self) -> None:
        session = MazeSession()
        session.load(single_layer_example())
        previous = session.stack
        with pytest.raises(OutOfBoundsError):
            session.load(single_layer_example(), start=(9, 9))
        assert session.stack is previous


class TestSessionRebuild:
    def test_rebuild_disposes_old_resources(self) -> None:
        session = MazeSession()
        session.generate(9, 9, rng=random.Random(2))
        old = session.drawables[0].handle
        session.generate(11, 11, algorithm=Algorithm.PRIMS, rng=random.Random(3))
        assert not old.alive
        assert all(d.handle.alive for d in session.drawables)
        assert session.cache.get_cache_info()["dispose_count"] == 2

    def test_set_cell_rebuilds(self) -> None:
        session = MazeSession()
        session.load(single_layer_example())
        session.set_cell(0, 2, 2, CellType.PATH)
        assert session.built is not None
        assert session.stack is not None
        assert session.stack.ground[2, 2] == CellType.PATH
        assert session.markers is not None

    def test_set_cell_without_change_is_free(self) -> None:
        session = MazeSession()
        session.load(single_layer_example())
        drawables = session.drawables
        session.set_cell(0, 0, 0, CellType.WALL)
        assert session.drawables is drawables

    def test_invalid_edit_keeps_state(self) -> None:
        session = MazeSession()
        session.load(single_layer_example())
        built = session.built
        with pytest.raises(OutOfBoundsError):
            session.set_cell(0, 9, 9, CellType.PATH)
        assert session.built is built

    def test_set_cell_keeps_explicit_markers(self) -> None:
        session = MazeSession()
        session.load(single_layer_example(), start=(3, 1))
        session.set_cell(0, 2, 2, CellType.PATH)
        assert session.markers is not None
        assert session.markers.start.pos == (3, 1)

    def test_set_cell_before_load(self) -> None:
        with pytest.raises(RuntimeError, match="No maze loaded"):
            MazeSession().set_cell(0, 0, 0, CellType.PATH)


class TestSessionSettings:
    def test_recolor_keeps_drawables(self) -> None:
        session = MazeSession()
        session.load(single_layer_example())
        drawables = session.drawables
        session.update_settings(floor_color="#112233")
        assert session.drawables is drawables
        material = session.cache.material(ResourceKind.FLOOR)
        assert material is not None
        assert material.color == (0x11, 0x22, 0x33)

    def test_toggle_edges_recreates_drawables(self) -> None:
        session = MazeSession(DisplaySettings(show_edges=True))
        session.load(single_layer_example())
        assert session.drawables[0].edges is not None
        session.update_settings(show_edges=False)
        assert session.drawables[0].edges is None

    def test_close(self) -> None:
        session = MazeSession()
        session.load(single_layer_example())
        handle = session.drawables[0].handle
        session.close()
        assert session.drawables == []
        assert not handle.alive
