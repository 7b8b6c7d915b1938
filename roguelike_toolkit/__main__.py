"""Main entry point for the demo."""

import logging

from . import config
from .app import App, AppConfig
from .controller import Controller
from .environment.generators import make_pillar_lattice


def main() -> None:
    logging.basicConfig(level=config.LOG_LEVEL)

    game_map = make_pillar_lattice(config.MAP_WIDTH, config.MAP_HEIGHT)
    controller = Controller(
        game_map,
        (config.PLAYER_START_X, config.PLAYER_START_Y),
        fov_radius=config.FOV_RADIUS,
        fov_algorithm=config.FOV_ALGORITHM,
    )

    app_config = AppConfig(
        title=config.WINDOW_TITLE,
        width=config.SCREEN_WIDTH,
        height=config.SCREEN_HEIGHT,
        vsync=config.VSYNC,
    )

    match config.APP_BACKEND:
        case "tcod":
            from roguelike_toolkit.backends.tcod.app import TCODApp

            _APP_CLASS = TCODApp
        case _:
            raise ValueError(f"Unknown app backend: {config.APP_BACKEND}")

    app: App = _APP_CLASS(app_config, controller)
    app.run()


if __name__ == "__main__":
    main()
