from __future__ import annotations

import numpy as np
import pytest

from roguelike_toolkit.environment.fov import ShadowCastingFOV
from roguelike_toolkit.environment.map import GameMap


def test_dimensions() -> None:
    game_map = GameMap(7, 3)
    assert game_map.width == 7
    assert game_map.height == 3
    assert game_map.blocked.shape == (7, 3)
    assert not game_map.blocked.any()


def test_dimensions_are_read_only() -> None:
    game_map = GameMap(7, 3)
    with pytest.raises(AttributeError):
        game_map.width = 10  # type: ignore[misc]


@pytest.mark.parametrize("width,height", [(0, 10), (10, 0), (-1, 5), (5, -1)])
def test_non_positive_dimensions_rejected(width: int, height: int) -> None:
    with pytest.raises(ValueError):
        GameMap(width, height)


def test_no_engine_for_a_zero_width_map() -> None:
    engine = None
    with pytest.raises(ValueError):
        engine = ShadowCastingFOV(GameMap(0, 10))
    assert engine is None


def test_is_in_bounds_edges() -> None:
    game_map = GameMap(10, 5)
    assert game_map.is_in_bounds(0, 0)
    assert game_map.is_in_bounds(9, 4)
    assert not game_map.is_in_bounds(10, 4)
    assert not game_map.is_in_bounds(9, 5)
    assert not game_map.is_in_bounds(-1, 0)
    assert not game_map.is_in_bounds(0, -1)


def test_out_of_bounds_is_blocked() -> None:
    game_map = GameMap(10, 5)
    for x, y in [(-1, 0), (10, 0), (0, 5), (-7, -7), (10**6, 2)]:
        assert game_map.is_blocked(x, y) is True


def test_set_blocked_round_trip() -> None:
    game_map = GameMap(10, 5)
    game_map.set_blocked(3, 2, True)
    assert game_map.is_blocked(3, 2)
    assert not game_map.is_blocked(2, 3)

    game_map.set_blocked(3, 2, False)
    assert not game_map.is_blocked(3, 2)


def test_set_blocked_out_of_bounds_is_ignored() -> None:
    game_map = GameMap(10, 10)
    revision = game_map.structural_revision

    game_map.set_blocked(-1, -1, True)
    game_map.set_blocked(10, 3, False)

    assert game_map.is_blocked(-1, -1)
    assert game_map.is_blocked(10, 3)
    assert not game_map.blocked.any()
    assert game_map.structural_revision == revision


def test_edits_bump_revision_and_refresh_transparent() -> None:
    game_map = GameMap(4, 4)
    assert game_map.transparent.all()
    revision = game_map.structural_revision

    game_map.set_blocked(1, 1, True)

    assert game_map.structural_revision == revision + 1
    assert not game_map.transparent[1, 1]
    np.testing.assert_array_equal(game_map.transparent, ~game_map.blocked)


def test_from_rows() -> None:
    game_map = GameMap.from_rows(
        [
            "#####",
            "#..#",
            "#####",
        ]
    )
    assert (game_map.width, game_map.height) == (5, 3)
    assert game_map.is_blocked(0, 1)
    assert not game_map.is_blocked(1, 1)
    assert game_map.is_blocked(3, 1)
    # Short rows are padded with open tiles.
    assert not game_map.is_blocked(4, 1)
    assert not game_map.transparent[0, 0]


def test_from_rows_empty_is_rejected() -> None:
    with pytest.raises(ValueError):
        GameMap.from_rows([])
