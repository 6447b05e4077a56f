"""Shared drawable resources: the cache, its handles and the drawable factory."""

from .cache import CacheStats, ResourceCache
from .factory import DisplaySettings, Drawable, DrawableFactory
from .handles import (
    CacheKey,
    EdgesGeometry,
    Geometry,
    Material,
    OwnedHandle,
    ResourceKind,
    SharedEdges,
    SharedHandle,
)

__all__ = [
    "CacheKey",
    "CacheStats",
    "DisplaySettings",
    "Drawable",
    "DrawableFactory",
    "EdgesGeometry",
    "Geometry",
    "Material",
    "OwnedHandle",
    "ResourceCache",
    "ResourceKind",
    "SharedEdges",
    "SharedHandle",
]
