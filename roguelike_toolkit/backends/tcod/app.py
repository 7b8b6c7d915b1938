from __future__ import annotations

from collections.abc import Iterable

import tcod
import tcod.context
import tcod.event
import tcod.tileset
from tcod.console import Console

from roguelike_toolkit import config
from roguelike_toolkit.app import App, AppConfig, TickHook, update_controller
from roguelike_toolkit.controller import Controller
from roguelike_toolkit.util.glyph_buffer import GlyphBuffer


class TCODApp(App):
    """
    The TCOD implementation of the application driver.

    Blocks on tcod's event queue between frames, so a frame is drawn after
    each batch of input rather than at a fixed rate.
    """

    def __init__(
        self,
        app_config: AppConfig,
        controller: Controller,
        tick_hook: TickHook = update_controller,
    ) -> None:
        super().__init__(app_config, controller, tick_hook)

        tileset = None
        if config.TILESET_PATH is not None:
            tileset = tcod.tileset.load_tilesheet(
                config.TILESET_PATH,
                columns=config.TILESET_COLUMNS,
                rows=config.TILESET_ROWS,
                charmap=tcod.tileset.CHARMAP_CP437,
            )
        self.root_console = Console(app_config.width, app_config.height, order="F")
        self.tcod_context = tcod.context.new(
            console=self.root_console,
            tileset=tileset,
            title=app_config.title,
            vsync=app_config.vsync,
        )

    def poll_events(self) -> Iterable[tcod.event.Event]:
        return tcod.event.wait()

    def present(self, buffer: GlyphBuffer) -> None:
        # Both are (width, height) in "F" order.
        self.root_console.rgba[...] = buffer.data
        self.tcod_context.present(self.root_console)

    def run(self) -> None:
        """Starts the main application loop and runs the game."""
        try:
            super().run()
        finally:
            self.tcod_context.close()
