"""Small hand-authored mazes used as demos and fixtures.

Values follow `CellType`: 0 = path, 1 = wall, 2 = opening (no floor).
"""

from __future__ import annotations

from mazestack.grid.layer import MazeStack

SINGLE_LAYER_EXAMPLE: list[list[list[int]]] = [
    [
        [1, 1, 1, 1, 1],
        [1, 0, 0, 0, 1],
        [1, 0, 1, 0, 1],
        [1, 0, 0, 0, 1],
        [1, 1, 1, 1, 1],
    ],
]

# Two levels over one 5x6 footprint. The opening at (2, 4) on the upper
# level is the hole that connects it to the room below.
MULTI_LAYER_EXAMPLE: list[list[list[int]]] = [
    [
        [1, 0, 1, 1, 1, 1],
        [1, 0, 0, 1, 0, 1],
        [1, 1, 0, 0, 0, 1],
        [1, 0, 0, 0, 0, 1],
        [1, 1, 1, 1, 1, 1],
    ],
    [
        [1, 0, 1, 1, 1, 1],
        [1, 0, 0, 1, 0, 1],
        [1, 0, 0, 1, 2, 1],
        [1, 0, 0, 0, 0, 1],
        [1, 1, 1, 1, 1, 1],
    ],
]


def single_layer_example() -> MazeStack:
    return MazeStack(SINGLE_LAYER_EXAMPLE)


def multi_layer_example() -> MazeStack:
    return MazeStack(MULTI_LAYER_EXAMPLE)
