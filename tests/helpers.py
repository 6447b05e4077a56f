from __future__ import annotations

from mazestack.grid.layer import CellType, Layer
from mazestack.types import CellPos

STEPS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def path_cells(layer: Layer) -> set[CellPos]:
    return set(layer.positions(CellType.PATH))


def reachable_from(layer: Layer, start: CellPos) -> set[CellPos]:
    """Flood fill over 4-connected path cells."""
    cells = path_cells(layer)
    seen = {start}
    frontier = [start]
    while frontier:
        row, col = frontier.pop()
        for d_row, d_col in STEPS:
            neighbor = (row + d_row, col + d_col)
            if neighbor in cells and neighbor not in seen:
                seen.add(neighbor)
                frontier.append(neighbor)
    return seen


def adjacency_count(layer: Layer) -> int:
    """Number of 4-connected path/path pairs."""
    cells = path_cells(layer)
    return sum(
        ((row, col + 1) in cells) + ((row + 1, col) in cells) for row, col in cells
    )


def is_perfect(layer: Layer) -> bool:
    """Path cells form a single tree: connected and loop free."""
    cells = path_cells(layer)
    if not cells:
        return False
    connected = reachable_from(layer, min(cells)) == cells
    return connected and adjacency_count(layer) == len(cells) - 1


def border_values(layer: Layer) -> dict[CellPos, CellType]:
    rows, cols = layer.shape
    return {
        (row, col): layer[row, col]
        for row in range(rows)
        for col in range(cols)
        if layer.is_boundary(row, col)
    }
