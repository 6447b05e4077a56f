"""Shared drawable resource cache.

The cache is the sole owner of every geometry and material it hands out.
Wall segments and floor tiles that look the same share one geometry, and all
drawables of one kind share one material, so recoloring every wall in a maze
is a single in-place update no matter how many segments exist.

Entries are created lazily on the first `ResourceCache.get` for a key and
only ever destroyed together by `ResourceCache.dispose`. There is no
per-entry eviction: a live segment may still be borrowing any entry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from mazestack import colors, config

from .handles import (
    CacheKey,
    EdgesGeometry,
    Geometry,
    Material,
    OwnedHandle,
    Resource,
    ResourceKind,
    SharedEdges,
    SharedHandle,
    validate_dimensions,
    validate_opacity,
)

if TYPE_CHECKING:
    from mazestack.colors import Color
    from mazestack.types import Dimensions

logger = logging.getLogger(__name__)

GeometryKey: TypeAlias = "tuple[ResourceKind, Dimensions]"


@dataclass
class CacheStats:
    """Statistics for a ResourceCache instance."""

    hits: int = 0
    misses: int = 0

    @property
    def total_lookups(self) -> int:
        return self.hits + self.misses

    @property
    def hit_rate(self) -> float:
        if self.total_lookups == 0:
            return 0.0
        return (self.hits / self.total_lookups) * 100.0

    def __repr__(self) -> str:
        return f"{self.hits} hits, {self.misses} misses ({self.hit_rate:.1f}% hit rate)"


class ResourceCache:
    """Pools geometry and materials keyed by their semantic description.

    - Geometry is keyed by ``(kind, dimensions)``, never by object identity,
      so rebuilding a maze with the same sizes reuses the same entries.
    - Materials are keyed by kind. A lookup whose color or opacity differs
      from the cached material updates that material in place.
    - Handles returned by `get` are `SharedHandle` instances: borrowed
      references that cannot dispose anything themselves.
    """

    def __init__(self, name: str = "maze") -> None:
        self.name = name
        self.stats = CacheStats()
        self._geometries: dict[GeometryKey, Geometry] = {}
        self._handles: dict[GeometryKey, SharedHandle] = {}
        self._edges: dict[GeometryKey, SharedEdges] = {}
        self._materials: dict[ResourceKind, Material] = {}
        self._resources: list[Resource] = []
        self._dispose_count = 0

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get(self, key: CacheKey) -> SharedHandle:
        """Return the shared handle for ``key``, allocating on first use.

        On a hit the kind's material takes ``key.color`` / ``key.opacity``,
        which recolors every drawable of that kind at once.

        Raises:
            InvalidGeometryError: If the dimensions are degenerate or the
                opacity is outside [0, 1]. Nothing is cached in that case.
        """
        geometry_key = self._geometry_key(key)
        color = colors.coerce(key.color)
        opacity = validate_opacity(key.opacity)

        material = self._material_for(key.kind, color, opacity)
        handle = self._handles.get(geometry_key)
        if handle is not None:
            self.stats.hits += 1
            return handle

        self.stats.misses += 1
        geometry = self._geometry_for(geometry_key)
        handle = SharedHandle(geometry, material)
        self._handles[geometry_key] = handle
        logger.debug(f"{self.name} cache miss: allocated {geometry!r}")
        return handle

    def get_edges(self, key: CacheKey) -> SharedEdges:
        """Return shared outline geometry for the same semantic key."""
        geometry_key = self._geometry_key(key)
        edges = self._edges.get(geometry_key)
        if edges is None:
            outline = EdgesGeometry(self._geometry_for(geometry_key))
            self._resources.append(outline)
            edges = SharedEdges(outline)
            self._edges[geometry_key] = edges
        return edges

    def create_edge_material(
        self, color: Color | str = config.DEFAULT_EDGE_COLOR
    ) -> OwnedHandle[Material]:
        """Create an outline material owned by the caller.

        Edge materials are not pooled; the caller must dispose the handle.
        """
        return OwnedHandle(Material("edges", colors.coerce(color), 1.0))

    def recolor(
        self,
        kind: ResourceKind,
        color: Color | str | None = None,
        opacity: float | None = None,
    ) -> bool:
        """Update the shared material of ``kind`` in place.

        Returns ``False`` if nothing of that kind has been requested yet.
        """
        material = self._materials.get(kind)
        if material is None:
            return False
        material.update(
            color=colors.coerce(color) if color is not None else None,
            opacity=opacity,
        )
        return True

    def material(self, kind: ResourceKind) -> Material | None:
        return self._materials.get(kind)

    # ------------------------------------------------------------------
    # Disposal
    # ------------------------------------------------------------------

    def dispose(self) -> None:
        """Release every cached resource and empty the cache.

        This is the only way shared resources are released. Handles obtained
        before the call must not be used afterwards; later `get` calls
        allocate fresh resources.

        The cache is emptied before anything is released, so it stays usable
        even if a resource was already released elsewhere.
        """
        resources, self._resources = self._resources, []
        self._edges.clear()
        self._handles.clear()
        self._geometries.clear()
        self._materials.clear()
        self.stats = CacheStats()
        self._dispose_count += 1

        released = 0
        for resource in resources:
            if resource.released:
                logger.warning(f"{resource!r} was released outside {self.name} cache")
                continue
            resource._release()
            released += 1
        logger.debug(f"{self.name} cache disposed {released} resources")

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, CacheKey):
            return False
        return key.geometry_key in self._handles

    def __len__(self) -> int:
        return len(self._handles)

    def get_cache_info(self) -> dict[str, int]:
        return {
            "geometry_count": len(self._geometries),
            "edges_count": len(self._edges),
            "material_count": len(self._materials),
            "dispose_count": self._dispose_count,
        }

    def __str__(self) -> str:
        return f"{self.name} Cache: {self.stats!r}"

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__} '{self.name}' "
            f"size={len(self)}, stats={self.stats!r}>"
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _geometry_key(self, key: CacheKey) -> GeometryKey:
        return (key.kind, validate_dimensions(key.kind, key.dimensions))

    def _geometry_for(self, geometry_key: GeometryKey) -> Geometry:
        geometry = self._geometries.get(geometry_key)
        if geometry is None:
            geometry = Geometry(*geometry_key)
            self._geometries[geometry_key] = geometry
            self._resources.append(geometry)
        return geometry

    def _material_for(
        self, kind: ResourceKind, color: Color, opacity: float
    ) -> Material:
        material = self._materials.get(kind)
        if material is None:
            material = Material(kind.value, color, opacity)
            self._materials[kind] = material
            self._resources.append(material)
        else:
            material.update(color=color, opacity=opacity)
        return material
