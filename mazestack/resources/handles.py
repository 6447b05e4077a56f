"""Drawable resources and the handles through which callers reach them.

Ownership is expressed in the types rather than in a runtime flag:

- `OwnedHandle` is returned for resources the caller created and is
  responsible for. It has a `dispose()` method.
- `SharedHandle` is a borrowed reference to a resource owned by a
  `ResourceCache`. It deliberately has no `dispose()` method, so a type
  checker rejects ``handle.dispose()`` on it. The only way to release a
  shared resource is `ResourceCache.dispose()`, which releases everything at
  once.

Resources themselves have no public release method. Only the owner that
allocated them (an `OwnedHandle` or the cache) calls `Resource._release`.

Every resource remembers whether it has been released; reading its data
afterwards raises `ResourceReleasedError` instead of handing out stale data.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Generic, TypeVar

import numpy as np

from mazestack import colors
from mazestack.errors import InvalidGeometryError, ResourceReleasedError
from mazestack.types import Opacity

if TYPE_CHECKING:
    from mazestack.colors import Color
    from mazestack.types import Dimensions

logger = logging.getLogger(__name__)


class ResourceKind(Enum):
    """What a drawable represents. Decides geometry shape and material."""

    WALL = "wall"
    FLOOR = "floor"


@dataclass(frozen=True, slots=True)
class CacheKey:
    """Semantic description of a drawable.

    ``dimensions`` is ``(width, height, depth)`` for walls (a box) and
    ``(width, height)`` for floors (a plane). Geometry is shared between all
    keys with the same kind and dimensions; the material is shared between
    all keys of the same kind.
    """

    kind: ResourceKind
    dimensions: Dimensions
    color: Color | str
    opacity: Opacity = Opacity(1.0)

    @property
    def geometry_key(self) -> tuple[ResourceKind, Dimensions]:
        return (self.kind, self.dimensions)


_DIMENSION_ARITY = {ResourceKind.WALL: 3, ResourceKind.FLOOR: 2}


def validate_dimensions(kind: ResourceKind, dimensions: Dimensions) -> Dimensions:
    """Return ``dimensions`` as floats or raise `InvalidGeometryError`."""
    expected = _DIMENSION_ARITY[kind]
    if len(dimensions) != expected:
        raise InvalidGeometryError(
            f"{kind.value} geometry needs {expected} dimensions, got {dimensions!r}"
        )
    values = tuple(float(d) for d in dimensions)
    if any(not np.isfinite(d) or d <= 0.0 for d in values):
        raise InvalidGeometryError(
            f"Degenerate {kind.value} geometry dimensions: {dimensions!r}"
        )
    return values


def validate_opacity(opacity: float) -> Opacity:
    if not 0.0 <= opacity <= 1.0:
        raise InvalidGeometryError(f"Opacity must be within [0, 1], got {opacity}")
    return Opacity(float(opacity))


# =============================================================================
# Resources
# =============================================================================


class Resource:
    """Base class for anything that must be released exactly once."""

    def __init__(self) -> None:
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    def _check_live(self) -> None:
        if self._released:
            raise ResourceReleasedError(f"{self!r} was used after being released")

    def _release(self) -> None:
        if self._released:
            raise ResourceReleasedError(f"{self!r} was released twice")
        self._released = True


class Geometry(Resource):
    """Vertex data for one box, plane or outline, built lazily with numpy."""

    def __init__(self, kind: ResourceKind, dimensions: Dimensions) -> None:
        super().__init__()
        self.kind = kind
        self.dimensions = validate_dimensions(kind, dimensions)
        self._vertices: np.ndarray | None = None

    @property
    def vertices(self) -> np.ndarray:
        """``(n, 3)`` float32 corner positions centered on the origin."""
        self._check_live()
        if self._vertices is None:
            self._vertices = self._build_vertices()
        return self._vertices

    def _build_vertices(self) -> np.ndarray:
        if self.kind is ResourceKind.WALL:
            # Box corners, every sign combination of the half extents.
            half = np.array(self.dimensions, dtype=np.float32) / 2.0
            signs = np.array(
                [[x, y, z] for x in (-1, 1) for y in (-1, 1) for z in (-1, 1)],
                dtype=np.float32,
            )
            return signs * half
        # Plane in the XY plane; the consumer rotates it flat.
        half_w, half_h = (d / 2.0 for d in self.dimensions)
        return np.array(
            [
                [-half_w, -half_h, 0.0],
                [half_w, -half_h, 0.0],
                [half_w, half_h, 0.0],
                [-half_w, half_h, 0.0],
            ],
            dtype=np.float32,
        )

    def _release(self) -> None:
        super()._release()
        self._vertices = None

    def __repr__(self) -> str:
        return f"<Geometry {self.kind.value} {self.dimensions}>"


class EdgesGeometry(Resource):
    """Outline line segments derived from a source geometry."""

    def __init__(self, source: Geometry) -> None:
        super().__init__()
        self.kind = source.kind
        self.dimensions = source.dimensions
        self._source = source
        self._segments: np.ndarray | None = None

    @property
    def segments(self) -> np.ndarray:
        """``(n, 2, 3)`` pairs of endpoints, one per outline edge."""
        self._check_live()
        if self._segments is None:
            vertices = self._source.vertices
            if self.kind is ResourceKind.WALL:
                # Box edges join corners that differ in exactly one axis.
                pairs = [
                    (a, b)
                    for a in range(8)
                    for b in range(a + 1, 8)
                    if bin(a ^ b).count("1") == 1
                ]
            else:
                pairs = [(0, 1), (1, 2), (2, 3), (3, 0)]
            self._segments = np.stack(
                [np.stack([vertices[a], vertices[b]]) for a, b in pairs]
            )
        return self._segments

    def _release(self) -> None:
        super()._release()
        self._segments = None

    def __repr__(self) -> str:
        return f"<EdgesGeometry {self.kind.value} {self.dimensions}>"


class Material(Resource):
    """Surface color and opacity. Mutated in place to recolor every user."""

    def __init__(self, name: str, color: Color, opacity: float) -> None:
        super().__init__()
        self.name = name
        self._color = colors.coerce(color)
        self._opacity = validate_opacity(opacity)

    @property
    def color(self) -> Color:
        self._check_live()
        return self._color

    @property
    def opacity(self) -> Opacity:
        self._check_live()
        return self._opacity

    @property
    def transparent(self) -> bool:
        return self.opacity < 1.0

    def update(self, color: Color | None = None, opacity: float | None = None) -> None:
        self._check_live()
        if color is not None:
            self._color = colors.coerce(color)
        if opacity is not None:
            self._opacity = validate_opacity(opacity)

    def __repr__(self) -> str:
        return f"<Material {self.name} {colors.to_hex(self._color)} a={self._opacity}>"


# =============================================================================
# Handles
# =============================================================================


class SharedHandle:
    """Borrowed reference to a geometry/material pair owned by a cache.

    There is intentionally no way to release the underlying resources from
    here. Hold it for as long as the owning cache is alive.
    """

    __slots__ = ("_geometry", "_material")

    def __init__(self, geometry: Geometry, material: Material) -> None:
        self._geometry = geometry
        self._material = material

    @property
    def kind(self) -> ResourceKind:
        return self._geometry.kind

    @property
    def shared(self) -> bool:
        return True

    @property
    def geometry(self) -> Geometry:
        self._geometry._check_live()
        return self._geometry

    @property
    def material(self) -> Material:
        self._material._check_live()
        return self._material

    @property
    def alive(self) -> bool:
        return not (self._geometry.released or self._material.released)

    def __repr__(self) -> str:
        return f"<SharedHandle {self._geometry!r} {self._material!r}>"


class SharedEdges:
    """Borrowed reference to cached outline geometry."""

    __slots__ = ("_edges",)

    def __init__(self, edges: EdgesGeometry) -> None:
        self._edges = edges

    @property
    def shared(self) -> bool:
        return True

    @property
    def geometry(self) -> EdgesGeometry:
        self._edges._check_live()
        return self._edges

    @property
    def alive(self) -> bool:
        return not self._edges.released


R = TypeVar("R", bound="Resource")


class OwnedHandle(Generic[R]):
    """A resource the caller owns outright and must dispose exactly once."""

    __slots__ = ("_resource",)

    def __init__(self, resource: R) -> None:
        self._resource = resource

    @property
    def shared(self) -> bool:
        return False

    @property
    def resource(self) -> R:
        self._resource._check_live()
        return self._resource

    @property
    def alive(self) -> bool:
        return not self._resource.released

    def dispose(self) -> None:
        logger.debug(f"Disposing owned {self._resource!r}")
        self._resource._release()

    def __enter__(self) -> R:
        return self.resource

    def __exit__(self, *exc_info: object) -> None:
        self.dispose()
