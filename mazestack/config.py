"""
Configuration constants.

Centralizes all magic numbers and default values used throughout the codebase.
Organized by functional area for easy maintenance.
"""

from mazestack.types import Opacity, RandomSeed

# =============================================================================
# GENERAL
# =============================================================================

# RANDOM_SEED = None
RANDOM_SEED: RandomSeed = "labyrinth1"

# =============================================================================
# GENERATION
# =============================================================================

# Smallest grid either generator accepts on each side.
MIN_GRID_SIZE = 3

# Default grid size used by the CLI and the session.
DEFAULT_MAZE_WIDTH = 21
DEFAULT_MAZE_HEIGHT = 21

# Every maze starts carving from this cell.
CARVE_ORIGIN = (1, 1)

# =============================================================================
# GEOMETRY
# =============================================================================

DEFAULT_CELL_SIZE = 1.0
DEFAULT_WALL_HEIGHT = 1.0
DEFAULT_WALL_THICKNESS = 0.1

# =============================================================================
# DISPLAY
# =============================================================================

DEFAULT_BACKGROUND_COLOR = "#999999"
DEFAULT_WALL_COLOR = "#808080"
DEFAULT_FLOOR_COLOR = "#C0C0C0"
DEFAULT_EDGE_COLOR = "#000000"

DEFAULT_WALL_OPACITY = Opacity(1.0)
DEFAULT_FLOOR_OPACITY = Opacity(1.0)

SHOW_EDGES = True

# =============================================================================
# EDITOR
# =============================================================================

EDITOR_MIN_SIZE = 5
EDITOR_MAX_SIZE = 80
EDITOR_DEFAULT_SIZE = 12

# =============================================================================
# PREVIEW
# =============================================================================

PREVIEW_SIZE = 256
PREVIEW_BACKGROUND_COLOR = "#2a2a2a"
PREVIEW_WALL_COLOR = "#808080"
PREVIEW_PATH_COLOR = "#c0c0c0"
PREVIEW_GRID_COLOR = "#1a1a1a"
PREVIEW_START_COLOR = "#2ecc71"
PREVIEW_END_COLOR = "#e74c3c"
