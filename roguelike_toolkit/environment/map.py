from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from roguelike_toolkit.types import TileCoord

logger = logging.getLogger(__name__)

# Character that marks a blocked tile in ASCII map rows.
BLOCKED_CHAR = "#"


class GameMap:
    """A fixed-size grid of blocked and open tiles.

    Tiles are stored in a boolean array shaped ``(width, height)`` and indexed
    ``[x, y]``. Anything outside the grid is treated as blocked, so every
    per-tile query is total: out-of-range coordinates get a default answer
    instead of an error.
    """

    def __init__(self, width: TileCoord, height: TileCoord) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(
                f"Map dimensions must be positive, got {width}x{height}."
            )
        self._width: TileCoord = width
        self._height: TileCoord = height
        self.structural_revision: int = 0

        # True means the tile blocks movement and sight.
        self.blocked = np.full(
            (width, height), fill_value=False, dtype=bool, order="F"
        )

        # Populated on demand by the `transparent` property.
        self._transparent_map_cache: np.ndarray | None = None

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> GameMap:
        """Build a map from ASCII rows, top row first. ``#`` marks a blocked tile.

        Short rows are padded with open tiles up to the longest row.
        """
        height = len(rows)
        width = max((len(row) for row in rows), default=0)
        game_map = cls(width, height)
        for y, row in enumerate(rows):
            for x, ch in enumerate(row):
                if ch == BLOCKED_CHAR:
                    game_map.blocked[x, y] = True
        game_map.invalidate_property_caches()
        return game_map

    @property
    def width(self) -> TileCoord:
        return self._width

    @property
    def height(self) -> TileCoord:
        return self._height

    def invalidate_property_caches(self) -> None:
        """Call this whenever `self.blocked` changes to clear cached property maps."""
        self._transparent_map_cache = None
        self.structural_revision += 1

    @property
    def transparent(self) -> np.ndarray:
        """Boolean array of shape (width, height) where True means tile is transparent
        (for FOV)."""
        if self._transparent_map_cache is None:
            self._transparent_map_cache = np.asfortranarray(~self.blocked)
        return self._transparent_map_cache

    def is_in_bounds(self, x: TileCoord, y: TileCoord) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def is_blocked(self, x: TileCoord, y: TileCoord) -> bool:
        """Whether the tile blocks sight. Out-of-bounds tiles are always blocked."""
        if not self.is_in_bounds(x, y):
            return True
        return bool(self.blocked[x, y])

    def set_blocked(self, x: TileCoord, y: TileCoord, blocked: bool) -> None:
        """Set the blocking state of a tile. Ignored for out-of-bounds tiles."""
        if not self.is_in_bounds(x, y):
            logger.debug(f"Ignoring set_blocked outside the map: ({x}, {y})")
            return
        self.blocked[x, y] = blocked
        self.invalidate_property_caches()
