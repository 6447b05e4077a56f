from pathlib import Path

from PIL import Image

from mazestack import colors, config
from mazestack.grid import Layer, locate
from mazestack.samples import single_layer_example
from mazestack.view import render_preview, save_preview


def pixel_at_cell(image: Image.Image, layer: Layer, row: int, col: int) -> tuple:
    """Color at the center of a cell, with row 0 drawn at the bottom."""
    size = image.width
    cell = min(size / layer.cols, size / layer.rows)
    offset_x = (size - cell * layer.cols) / 2
    offset_y = (size - cell * layer.rows) / 2
    x = offset_x + (col + 0.5) * cell
    y = offset_y + (layer.rows - 1 - row + 0.5) * cell
    return image.getpixel((int(x), int(y)))


class TestRenderPreview:
    def test_image_size_and_mode(self) -> None:
        image = render_preview(single_layer_example().ground, size=100)
        assert image.size == (100, 100)
        assert image.mode == "RGB"

    def test_cell_colors(self) -> None:
        layer = single_layer_example().ground
        image = render_preview(layer, size=100)
        assert pixel_at_cell(image, layer, 2, 2) == colors.from_hex(
            config.PREVIEW_WALL_COLOR
        )
        assert pixel_at_cell(image, layer, 1, 1) == colors.from_hex(
            config.PREVIEW_PATH_COLOR
        )

    def test_row_zero_is_drawn_at_bottom(self) -> None:
        layer = Layer(
            [
                [0, 0, 0],
                [1, 1, 1],
                [1, 1, 1],
            ]
        )
        image = render_preview(layer, size=90)
        bottom = image.getpixel((45, 75))
        top = image.getpixel((45, 15))
        assert bottom == colors.from_hex(config.PREVIEW_PATH_COLOR)
        assert top == colors.from_hex(config.PREVIEW_WALL_COLOR)

    def test_non_square_layers_are_centered(self) -> None:
        layer = Layer([[1, 1, 1, 1, 1, 1], [1, 1, 1, 1, 1, 1], [1, 1, 1, 1, 1, 1]])
        image = render_preview(layer, size=60)
        background = colors.from_hex(config.PREVIEW_BACKGROUND_COLOR)
        assert image.getpixel((30, 2)) == background
        assert image.getpixel((30, 57)) == background

    def test_markers_drawn(self) -> None:
        layer = single_layer_example().ground
        markers = locate(layer)
        image = render_preview(layer, markers, size=100)
        assert markers is not None
        start = pixel_at_cell(image, layer, *markers.start.pos)
        end = pixel_at_cell(image, layer, *markers.end.pos)
        assert start == colors.from_hex(config.PREVIEW_START_COLOR)
        assert end == colors.from_hex(config.PREVIEW_END_COLOR)


class TestSavePreview:
    def test_writes_png(self, tmp_path: Path) -> None:
        target = tmp_path / "maze.png"
        result = save_preview(single_layer_example().ground, str(target), size=64)
        assert result == target
        with Image.open(target) as image:
            assert image.size == (64, 64)
