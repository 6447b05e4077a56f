"""Top-down raster preview of a maze layer, drawn with Pillow."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from PIL import Image as PILImage
from PIL import ImageDraw

from mazestack import colors, config
from mazestack.grid.layer import CellType

if TYPE_CHECKING:
    from mazestack.grid.layer import Layer
    from mazestack.grid.markers import MazeMarkers


_CELL_COLORS = {
    CellType.WALL: colors.from_hex(config.PREVIEW_WALL_COLOR),
    CellType.PATH: colors.from_hex(config.PREVIEW_PATH_COLOR),
    CellType.OPENING: colors.from_hex(config.PREVIEW_BACKGROUND_COLOR),
}


def render_preview(
    layer: Layer,
    markers: MazeMarkers | None = None,
    size: int = config.PREVIEW_SIZE,
) -> PILImage.Image:
    """Draw ``layer`` into a square RGB image ``size`` pixels wide.

    The maze is scaled to fit and centered. Row 0 is drawn at the bottom so
    the picture matches the world layout seen from above. Markers are drawn
    as inset squares: green for start, red for end.
    """
    image = PILImage.new("RGB", (size, size), config.PREVIEW_BACKGROUND_COLOR)
    draw = ImageDraw.Draw(image)

    rows, cols = layer.shape
    cell = min(size / cols, size / rows)
    offset_x = (size - cell * cols) / 2
    offset_y = (size - cell * rows) / 2
    grid_color = colors.from_hex(config.PREVIEW_GRID_COLOR)

    def cell_box(row: int, col: int, inset: float = 0.0) -> list[float]:
        x = offset_x + col * cell
        y = offset_y + (rows - 1 - row) * cell
        return [x + inset, y + inset, x + cell - inset, y + cell - inset]

    cells = layer.cells
    for row in range(rows):
        for col in range(cols):
            fill = _CELL_COLORS[CellType(int(cells[row, col]))]
            draw.rectangle(cell_box(row, col), fill=fill, outline=grid_color)

    if markers is not None:
        inset = cell / 4
        draw.rectangle(
            cell_box(markers.start.row, markers.start.col, inset),
            fill=config.PREVIEW_START_COLOR,
        )
        # A one-cell maze has start == end; end is drawn last and wins.
        draw.rectangle(
            cell_box(markers.end.row, markers.end.col, inset),
            fill=config.PREVIEW_END_COLOR,
        )

    return image


def save_preview(
    layer: Layer,
    path: Path | str,
    markers: MazeMarkers | None = None,
    size: int = config.PREVIEW_SIZE,
) -> Path:
    path = Path(path)
    render_preview(layer, markers, size).save(path)
    return path
