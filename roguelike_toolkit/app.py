from __future__ import annotations

import abc
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TypeAlias

import tcod.event

from roguelike_toolkit.controller import Controller
from roguelike_toolkit.input_handler import InputHandler
from roguelike_toolkit.util.glyph_buffer import GlyphBuffer
from roguelike_toolkit.view.render import render_frame

logger = logging.getLogger(__name__)

# Called once per frame, after input has been processed and before the redraw.
TickHook: TypeAlias = Callable[[Controller], None]


@dataclass
class AppConfig:
    """Configuration for an App implementation."""

    width: int
    height: int
    title: str
    vsync: bool


def update_controller(controller: Controller) -> None:
    """Default tick hook: let the controller catch up with map edits."""
    controller.update()


class App(abc.ABC):
    """
    Drives the frame loop for one controller.

    Each frame polls the backend for events, hands them to the input handler,
    calls the tick hook, redraws the glyph buffer and presents it. Backends
    supply `poll_events` and `present`; the frame order lives here.

    A quit request surfaces as `SystemExit` and ends `run`.
    """

    def __init__(
        self,
        app_config: AppConfig,
        controller: Controller,
        tick_hook: TickHook = update_controller,
    ) -> None:
        self.app_config = app_config
        self.controller = controller
        self.tick_hook = tick_hook
        self.input_handler = InputHandler(controller)
        self.buffer = GlyphBuffer(app_config.width, app_config.height)
        self.frame_count = 0

    @abc.abstractmethod
    def poll_events(self) -> Iterable[tcod.event.Event]:
        """Return the input events that arrived since the last frame."""

    @abc.abstractmethod
    def present(self, buffer: GlyphBuffer) -> None:
        """Show a finished frame."""

    def run_frame(self) -> None:
        # --- Input ---
        for event in self.poll_events():
            self.input_handler.dispatch(event)

        # --- Logic ---
        self.tick_hook(self.controller)

        # --- Rendering ---
        render_frame(self.buffer, self.controller)
        self.present(self.buffer)
        self.frame_count += 1

    def run(self) -> None:
        """Run frames until a quit request arrives."""
        logger.info(f"Starting {self.app_config.title}")
        try:
            while True:
                self.run_frame()
        except SystemExit:
            logger.info(f"Quit after {self.frame_count} frames")
            raise
