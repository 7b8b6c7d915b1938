"""
Configuration constants.

Centralizes the magic numbers and configuration values used by the toolkit and
its demo. Organized by functional area for easy maintenance.
"""

from pathlib import Path
from typing import Literal

from roguelike_toolkit.environment.fov import FOVAlgorithm

# =============================================================================
# GENERAL
# =============================================================================

# Level name handed to logging.basicConfig by the demo entry point.
LOG_LEVEL = "INFO"

# =============================================================================
# DISPLAY & RENDERING
# =============================================================================

# Main window
WINDOW_TITLE = "roguelike-toolkit - demo 1"

# Demo map dimensions, in tiles.
MAP_WIDTH = 80
MAP_HEIGHT = 45

# Screen dimensions, in tiles. The map fills the screen above a one-line status bar.
STATUS_LINE_HEIGHT = 1
SCREEN_WIDTH = MAP_WIDTH
SCREEN_HEIGHT = MAP_HEIGHT + STATUS_LINE_HEIGHT

VSYNC = True

# Application backend selection
APP_BACKEND: Literal["tcod"] = "tcod"

# Tileset. None lets tcod pick its built-in font.
TILESET_PATH: Path | None = None
TILESET_COLUMNS = 16
TILESET_ROWS = 16

# Glyph codepoints used by the redraw pass
WALL_GLYPH = ord("0")
FLOOR_GLYPH = ord(";")
UNSEEN_GLYPH = ord(" ")
PLAYER_GLYPH = ord("@")

# =============================================================================
# FIELD OF VIEW
# =============================================================================

FOV_RADIUS = 8  # Player's sight radius
FOV_ALGORITHM = FOVAlgorithm.SYMMETRIC_SHADOWCAST

# =============================================================================
# DEMO MAP
# =============================================================================

PLAYER_START_X = 5
PLAYER_START_Y = 5
