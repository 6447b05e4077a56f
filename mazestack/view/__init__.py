"""Raster previews of maze layers."""

from .preview import render_preview, save_preview

__all__ = ["render_preview", "save_preview"]
