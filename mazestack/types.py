from __future__ import annotations

from typing import NewType

# =============================================================================
# GRID COORDINATE SYSTEMS (Always integers)
# =============================================================================

GridCoord = int  # Row or column index into a layer

# A cell address inside one layer, always (row, col) in that order.
CellPos = tuple[GridCoord, GridCoord]  # Example: (1, 0) = row 1, column 0

# Index into a MazeStack. 0 is the ground layer.
LayerIndex = int

# =============================================================================
# WORLD-SPACE TYPES (Floats, consumed by the rendering collaborator)
# =============================================================================

WorldCoord = float

# A position in world space as (x, y, z). y is up.
WorldPos = tuple[WorldCoord, WorldCoord, WorldCoord]

# Size of a drawable resource. Boxes are (width, height, depth) and planes
# are (width, height).
Dimensions = tuple[float, ...]

# =============================================================================
# RENDERING-RELATED TYPES
# =============================================================================

# Represents the opacity level of a material. It is a value between
# 0.0 (fully transparent) and 1.0 (fully opaque).
Opacity = NewType("Opacity", float)

# =============================================================================
# GENERATION-RELATED TYPES
# =============================================================================

# Random seed for deterministic generation.
# Can be an int for numeric seeds or a descriptive string like "labyrinth1".
RandomSeed = int | str | None
