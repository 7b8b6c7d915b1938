from __future__ import annotations

from typing import Literal, TypeAlias

# =============================================================================
# SPATIAL TYPES
# =============================================================================

TileCoord: TypeAlias = int  # Always integer tile position

# World coordinates - absolute positions on the map
WorldTileCoord: TypeAlias = TileCoord  # Example: x=5, y=3
WorldTilePos: TypeAlias = tuple[
    WorldTileCoord, WorldTileCoord
]  # Example: (5, 3) = tile 5,3 on map

# Directions - discrete grid steps
UnitStep: TypeAlias = Literal[-1, 0, 1]
Direction: TypeAlias = tuple[UnitStep, UnitStep]  # Example: (-1, 0) = westward step

# Sight distance in tiles, measured as scan depth from the origin
FOVRadius: TypeAlias = int
