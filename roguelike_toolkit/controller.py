from __future__ import annotations

import logging

from roguelike_toolkit import config
from roguelike_toolkit.environment.fov import FOVAlgorithm, ShadowCastingFOV
from roguelike_toolkit.environment.map import GameMap
from roguelike_toolkit.types import FOVRadius, WorldTilePos

logger = logging.getLogger(__name__)


class Controller:
    """Owns a map, the FOV engine bound to it, and the viewer standing on it.

    Everything that issues compute or query calls gets this object (or its
    `game_map` and `fov`) passed in explicitly.
    """

    def __init__(
        self,
        game_map: GameMap,
        player_pos: WorldTilePos,
        fov_radius: FOVRadius = config.FOV_RADIUS,
        fov_algorithm: FOVAlgorithm = config.FOV_ALGORITHM,
    ) -> None:
        if not game_map.is_in_bounds(*player_pos):
            raise ValueError(f"Player start {player_pos} is outside the map.")

        self.game_map = game_map
        self.fov = ShadowCastingFOV(game_map, algorithm=fov_algorithm)
        self.player_pos: WorldTilePos = player_pos
        self.fov_radius: FOVRadius = fov_radius

        self.recompute_fov()

    def recompute_fov(self) -> None:
        """Drop the previous result and compute the FOV from the player."""
        self.fov.clear_fov()
        px, py = self.player_pos
        self.fov.compute_fov(px, py, self.fov_radius)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"FOV from {self.player_pos}:\n{self.fov.to_text()}")

    def move_player(self, dx: int, dy: int) -> bool:
        """Step the player by (dx, dy) and recompute the FOV.

        Moves onto blocked tiles (which includes anything off the map) are
        refused.

        Returns:
          Whether the player moved.
        """
        x, y = self.player_pos
        target = (x + dx, y + dy)
        if self.game_map.is_blocked(*target):
            logger.debug(f"Move to {target} refused: tile is blocked")
            return False

        self.player_pos = target
        self.recompute_fov()
        return True

    def update(self) -> None:
        """Per-frame bookkeeping: pick up map edits made since the last frame."""
        px, py = self.player_pos
        self.fov.recompute_if_needed(px, py, self.fov_radius)
