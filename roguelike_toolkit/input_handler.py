from __future__ import annotations

import logging

import tcod.event

from roguelike_toolkit.controller import Controller
from roguelike_toolkit.types import Direction

logger = logging.getLogger(__name__)

MOVE_KEYS: dict[tcod.event.KeySym, Direction] = {
    tcod.event.KeySym.UP: (0, -1),
    tcod.event.KeySym.DOWN: (0, 1),
    tcod.event.KeySym.LEFT: (-1, 0),
    tcod.event.KeySym.RIGHT: (1, 0),
}


class InputHandler:
    """Translates tcod events into player moves or a quit request."""

    def __init__(self, controller: Controller) -> None:
        self.controller = controller

    def dispatch(self, event: tcod.event.Event) -> None:
        match event:
            case tcod.event.Quit():
                raise SystemExit()
            case tcod.event.KeyDown(sym=sym):
                self.handle_key(sym)

    def handle_key(self, sym: tcod.event.KeySym) -> bool:
        """Act on a key press.

        Returns:
          Whether the key was recognized.
        """
        if sym == tcod.event.KeySym.ESCAPE:
            raise SystemExit()

        direction = MOVE_KEYS.get(sym)
        if direction is None:
            return False

        dx, dy = direction
        if not self.controller.move_player(dx, dy):
            logger.info(f"Can't move {direction}: the way is blocked")
        return True
