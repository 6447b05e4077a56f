"""Turn wall segments and floor tiles into placed drawables.

The factory is the bridge to an external renderer: each `Drawable` carries
a world position, a rotation, and borrowed handles from a `ResourceCache`.
It never creates geometry or materials itself.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING

from mazestack import colors, config

from .handles import CacheKey, Material, OwnedHandle, ResourceKind, validate_opacity

if TYPE_CHECKING:
    from mazestack.colors import Color
    from mazestack.geometry.segments import BuiltMaze, FloorTile, WallSegment
    from mazestack.types import LayerIndex, Opacity, WorldPos

    from .cache import ResourceCache
    from .handles import SharedEdges, SharedHandle

logger = logging.getLogger(__name__)

# Floor planes are authored upright and laid flat by the renderer.
FLOOR_ROTATION_X = -math.pi / 2


@dataclass(frozen=True)
class DisplaySettings:
    """User-adjustable appearance of a maze."""

    wall_color: Color | str = config.DEFAULT_WALL_COLOR
    floor_color: Color | str = config.DEFAULT_FLOOR_COLOR
    wall_opacity: Opacity = config.DEFAULT_WALL_OPACITY
    floor_opacity: Opacity = config.DEFAULT_FLOOR_OPACITY
    show_edges: bool = config.SHOW_EDGES
    background_color: Color | str = config.DEFAULT_BACKGROUND_COLOR

    def color_for(self, kind: ResourceKind) -> Color | str:
        return self.wall_color if kind is ResourceKind.WALL else self.floor_color

    def opacity_for(self, kind: ResourceKind) -> Opacity:
        return self.wall_opacity if kind is ResourceKind.WALL else self.floor_opacity


@dataclass(frozen=True, slots=True)
class Drawable:
    """One placed wall box or floor plane, ready for a renderer."""

    kind: ResourceKind
    layer_index: LayerIndex
    position: WorldPos
    rotation_x: float
    handle: SharedHandle
    edges: SharedEdges | None = None
    edge_material: Material | None = None


class DrawableFactory:
    """Creates drawables through a shared `ResourceCache`.

    Outline edges share geometry through the cache, but the black line
    material is owned by the factory and released by `close()`.
    """

    def __init__(
        self, cache: ResourceCache, settings: DisplaySettings | None = None
    ) -> None:
        self.cache = cache
        self.settings = settings or DisplaySettings()
        self._edge_material: OwnedHandle[Material] | None = None

    @property
    def edge_material(self) -> Material | None:
        """The outline material, created on first use while edges are shown."""
        if not self.settings.show_edges:
            return None
        if self._edge_material is None or not self._edge_material.alive:
            self._edge_material = self.cache.create_edge_material()
        return self._edge_material.resource

    def key_for(self, segment: WallSegment | FloorTile) -> CacheKey:
        return CacheKey(
            kind=segment.kind,
            dimensions=segment.dimensions,
            color=self.settings.color_for(segment.kind),
            opacity=self.settings.opacity_for(segment.kind),
        )

    def create_drawable(self, segment: WallSegment | FloorTile) -> Drawable:
        key = self.key_for(segment)
        handle = self.cache.get(key)
        edges = self.cache.get_edges(key) if self.settings.show_edges else None
        edge_material = self.edge_material if edges is not None else None
        rotation = FLOOR_ROTATION_X if segment.kind is ResourceKind.FLOOR else 0.0
        return Drawable(
            kind=segment.kind,
            layer_index=segment.layer_index,
            position=segment.position,
            rotation_x=rotation,
            handle=handle,
            edges=edges,
            edge_material=edge_material,
        )

    def create(self, built: BuiltMaze) -> list[Drawable]:
        drawables = [self.create_drawable(wall) for wall in built.walls]
        drawables.extend(self.create_drawable(floor) for floor in built.floors)
        logger.debug(f"Created {len(drawables)} drawables ({self.cache!r})")
        return drawables

    def update_settings(self, **changes: object) -> bool:
        """Apply new display settings.

        Color and opacity changes are pushed to the cached materials in
        place. Returns ``True`` when the change also needs drawables to be
        recreated (toggling edges), ``False`` when recoloring was enough.
        """
        known = {f.name for f in fields(DisplaySettings)}
        unknown = set(changes) - known
        if unknown:
            raise TypeError(f"Unknown display settings: {sorted(unknown)}")

        previous = self.settings
        updated = replace(previous, **changes)  # type: ignore[arg-type]
        colors.coerce(updated.background_color)
        for kind in ResourceKind:
            colors.coerce(updated.color_for(kind))
            validate_opacity(updated.opacity_for(kind))
        self.settings = updated

        for kind in ResourceKind:
            current = (self.settings.color_for(kind), self.settings.opacity_for(kind))
            if current != (previous.color_for(kind), previous.opacity_for(kind)):
                self.cache.recolor(kind, color=current[0], opacity=current[1])

        if self.settings.show_edges != previous.show_edges:
            if not self.settings.show_edges:
                self._release_edge_material()
            return True
        return False

    def close(self) -> None:
        """Release resources owned by the factory itself."""
        self._release_edge_material()

    def _release_edge_material(self) -> None:
        if self._edge_material is not None and self._edge_material.alive:
            self._edge_material.dispose()
        self._edge_material = None
