"""The redraw pass: turns map and visibility state into glyphs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from roguelike_toolkit import colors, config
from roguelike_toolkit.util.glyph_buffer import GlyphBuffer

if TYPE_CHECKING:
    from roguelike_toolkit.controller import Controller
    from roguelike_toolkit.environment.fov import ShadowCastingFOV
    from roguelike_toolkit.environment.map import GameMap
    from roguelike_toolkit.types import WorldTilePos


def render_map(
    buffer: GlyphBuffer,
    game_map: GameMap,
    fov: ShadowCastingFOV,
    player_pos: WorldTilePos,
) -> None:
    """Redraw every map tile, then the player.

    Visible blocked tiles get the wall glyph, visible open tiles the floor
    glyph, and everything else is drawn as unseen.
    """
    buffer.clear(
        config.UNSEEN_GLYPH,
        fg=colors.to_rgba(colors.BACKDROP),
        bg=colors.to_rgba(colors.BACKDROP),
    )

    visible = fov.visible
    buffer.fill_mask(
        ~visible,
        config.UNSEEN_GLYPH,
        fg=colors.to_rgba(colors.UNSEEN),
        bg=colors.to_rgba(colors.UNSEEN),
    )
    buffer.fill_mask(
        visible & game_map.blocked,
        config.WALL_GLYPH,
        fg=colors.to_rgba(colors.LIT_WALL),
    )
    buffer.fill_mask(
        visible & ~game_map.blocked,
        config.FLOOR_GLYPH,
        fg=colors.to_rgba(colors.LIT_FLOOR),
    )

    px, py = player_pos
    buffer.put_char(
        px,
        py,
        config.PLAYER_GLYPH,
        fg=colors.to_rgba(colors.PLAYER_COLOR),
        bg=colors.to_rgba(colors.BACKDROP),
    )


def render_status_line(buffer: GlyphBuffer, controller: Controller) -> None:
    """Print the player position and sight radius below the map."""
    px, py = controller.player_pos
    text = (
        f" @ ({px}, {py})  radius {controller.fov_radius}"
        f"  {controller.fov.algorithm.name}"
    )
    buffer.print(
        0,
        controller.game_map.height,
        text,
        fg=colors.to_rgba(colors.WHITE),
        bg=colors.to_rgba(colors.BLACK),
    )


def render_frame(buffer: GlyphBuffer, controller: Controller) -> None:
    """Full redraw of one frame for *controller*."""
    render_map(buffer, controller.game_map, controller.fov, controller.player_pos)
    render_status_line(buffer, controller)
