"""Tests for the redraw pass."""

from __future__ import annotations

from roguelike_toolkit import colors, config
from roguelike_toolkit.controller import Controller
from roguelike_toolkit.environment.fov import ShadowCastingFOV
from roguelike_toolkit.environment.map import GameMap
from roguelike_toolkit.util.glyph_buffer import GlyphBuffer
from roguelike_toolkit.view.render import render_frame, render_map


def _render(game_map: GameMap, origin: tuple[int, int], radius: int) -> GlyphBuffer:
    fov = ShadowCastingFOV(game_map)
    fov.compute_fov(*origin, radius)
    buffer = GlyphBuffer(game_map.width, game_map.height)
    render_map(buffer, game_map, fov, origin)
    return buffer


def test_player_glyph_drawn_at_origin() -> None:
    buffer = _render(GameMap(10, 10), (5, 5), 3)
    assert buffer.data[5, 5]["ch"] == config.PLAYER_GLYPH
    assert tuple(buffer.data[5, 5]["fg"]) == colors.to_rgba(colors.PLAYER_COLOR)


def test_lit_floor_lit_wall_and_unseen() -> None:
    game_map = GameMap(10, 10)
    game_map.set_blocked(5, 7, True)
    buffer = _render(game_map, (5, 5), 3)

    # Lit floor
    assert buffer.data[5, 6]["ch"] == config.FLOOR_GLYPH
    assert tuple(buffer.data[5, 6]["fg"]) == colors.to_rgba(colors.LIT_FLOOR)
    # Lit occluder
    assert buffer.data[5, 7]["ch"] == config.WALL_GLYPH
    assert tuple(buffer.data[5, 7]["fg"]) == colors.to_rgba(colors.LIT_WALL)
    # Hidden behind the occluder
    assert buffer.data[5, 8]["ch"] == config.UNSEEN_GLYPH
    assert tuple(buffer.data[5, 8]["bg"]) == colors.to_rgba(colors.UNSEEN)
    # Out of range
    assert buffer.data[0, 0]["ch"] == config.UNSEEN_GLYPH


def test_unseen_wall_is_not_revealed() -> None:
    game_map = GameMap(10, 10)
    game_map.set_blocked(0, 0, True)
    buffer = _render(game_map, (8, 8), 2)
    assert buffer.data[0, 0]["ch"] == config.UNSEEN_GLYPH


def test_render_frame_draws_status_line() -> None:
    controller = Controller(GameMap(40, 10), (3, 4), fov_radius=6)
    buffer = GlyphBuffer(40, 11)

    render_frame(buffer, controller)

    status = "".join(chr(c) for c in buffer.data[:, 10]["ch"])
    assert "@ (3, 4)" in status
    assert "radius 6" in status
    assert buffer.data[3, 4]["ch"] == config.PLAYER_GLYPH
