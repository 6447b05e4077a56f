"""Start/end marker inference.

`locate` is a scan-order heuristic, not a longest-path search. It collects
every path cell in row-major order, prefers cells on the outer boundary
(entrances carved by the generators always sit there), and takes the first
and last candidates. Consumers rely on the exact tie-break order, so the
scan order must not change.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from mazestack.errors import OutOfBoundsError

from .layer import CellType, Layer

if TYPE_CHECKING:
    from mazestack.types import CellPos, GridCoord

logger = logging.getLogger(__name__)


class MarkerRole(Enum):
    START = "start"
    END = "end"


@dataclass(frozen=True, slots=True)
class Marker:
    role: MarkerRole
    row: GridCoord
    col: GridCoord

    @property
    def pos(self) -> CellPos:
        return (self.row, self.col)


@dataclass(frozen=True, slots=True)
class MazeMarkers:
    """The inferred (or supplied) entrance and exit of a layer."""

    start: Marker
    end: Marker

    def __iter__(self) -> Iterator[Marker]:
        yield self.start
        yield self.end


def locate(layer: Layer) -> MazeMarkers | None:
    """Infer start/end cells of ``layer``.

    Returns ``None`` if the layer has no path cell at all. ``start`` is the
    first boundary path cell (or the first path cell if none lies on the
    boundary). ``end`` is the last boundary path cell when there are at least
    two, otherwise the last path cell when there are at least two, otherwise
    the same cell as ``start``.
    """
    paths = layer.positions(CellType.PATH)
    if not paths:
        return None
    boundary = [pos for pos in paths if layer.is_boundary(*pos)]

    start = boundary[0] if boundary else paths[0]
    if len(boundary) > 1:
        end = boundary[-1]
    elif len(paths) > 1:
        end = paths[-1]
    else:
        end = start

    return MazeMarkers(
        start=Marker(MarkerRole.START, *start),
        end=Marker(MarkerRole.END, *end),
    )


def resolve_markers(
    layer: Layer,
    start: CellPos | None = None,
    end: CellPos | None = None,
) -> MazeMarkers | None:
    """Combine explicitly supplied markers with inferred ones.

    Hand-authored mazes arrive with markers chosen by the author; generated
    mazes arrive without. Both go through here so they are treated the same:
    any marker not supplied falls back to `locate`. Returns ``None`` only when
    nothing is supplied and the layer has no path cell.
    """
    for label, pos in (("start", start), ("end", end)):
        if pos is None:
            continue
        if not layer.in_bounds(*pos):
            raise OutOfBoundsError(
                f"Explicit {label} marker {pos} is outside the layer."
            )
        if layer[pos] != CellType.PATH:
            logger.warning(f"Explicit {label} marker {pos} is not on a path cell.")

    if start is not None and end is not None:
        return MazeMarkers(
            start=Marker(MarkerRole.START, *start),
            end=Marker(MarkerRole.END, *end),
        )

    inferred = locate(layer)
    if inferred is None:
        if start is None and end is None:
            return None
        only = start if start is not None else end
        assert only is not None
        return MazeMarkers(
            start=Marker(MarkerRole.START, *only),
            end=Marker(MarkerRole.END, *only),
        )

    resolved_start = inferred.start
    if start is not None:
        resolved_start = Marker(MarkerRole.START, *start)
    resolved_end = inferred.end
    if end is not None:
        resolved_end = Marker(MarkerRole.END, *end)
    return MazeMarkers(start=resolved_start, end=resolved_end)
