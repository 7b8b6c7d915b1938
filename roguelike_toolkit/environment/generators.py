"""Ready-made maps for demos, tests and benchmarks."""

from __future__ import annotations

import numpy as np

from roguelike_toolkit.environment.map import GameMap
from roguelike_toolkit.types import TileCoord


def make_open_field(width: TileCoord, height: TileCoord) -> GameMap:
    """A map with no blocked tiles."""
    return GameMap(width, height)


def make_pillar_lattice(width: TileCoord, height: TileCoord) -> GameMap:
    """Block every tile whose x and y are both even.

    This is the map the demo opens on: a regular grid of single-tile pillars
    with open corridors between them.
    """
    game_map = GameMap(width, height)
    xs = np.arange(width)[:, np.newaxis]
    ys = np.arange(height)[np.newaxis, :]
    game_map.blocked[...] = (xs % 2 == 0) & (ys % 2 == 0)
    game_map.invalidate_property_caches()
    return game_map


def make_walled_room(width: TileCoord, height: TileCoord) -> GameMap:
    """An open room whose outermost ring of tiles is blocked."""
    game_map = GameMap(width, height)
    game_map.blocked[0, :] = True
    game_map.blocked[-1, :] = True
    game_map.blocked[:, 0] = True
    game_map.blocked[:, -1] = True
    game_map.invalidate_property_caches()
    return game_map


def make_scattered(
    width: TileCoord, height: TileCoord, wall_fraction: float, seed: int
) -> GameMap:
    """Randomly scatter walls to simulate a dungeon layout."""
    rng = np.random.default_rng(seed)
    game_map = GameMap(width, height)
    game_map.blocked[...] = rng.random((width, height)) < wall_fraction
    game_map.invalidate_property_caches()
    return game_map
