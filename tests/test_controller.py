"""Tests for the Controller that owns the map/FOV pair."""

from __future__ import annotations

import pytest

from roguelike_toolkit.controller import Controller
from roguelike_toolkit.environment.fov import FOVAlgorithm
from roguelike_toolkit.environment.generators import make_pillar_lattice
from roguelike_toolkit.environment.map import GameMap


def test_fov_bound_to_the_controllers_map() -> None:
    game_map = GameMap(10, 10)
    controller = Controller(game_map, (5, 5), fov_radius=3)
    assert controller.fov.game_map is game_map
    assert controller.fov.is_in_fov(5, 8)


def test_algorithm_is_configurable() -> None:
    controller = Controller(
        GameMap(10, 10), (5, 5), fov_algorithm=FOVAlgorithm.MIRRORED_OCTANT
    )
    assert controller.fov.algorithm is FOVAlgorithm.MIRRORED_OCTANT


def test_start_outside_map_rejected() -> None:
    with pytest.raises(ValueError):
        Controller(GameMap(10, 10), (10, 2))


class TestMovePlayer:
    def test_move_recomputes_from_new_position(self) -> None:
        controller = Controller(GameMap(20, 20), (2, 2), fov_radius=2)
        assert controller.fov.is_in_fov(2, 4)

        assert controller.move_player(1, 0)

        assert controller.player_pos == (3, 2)
        assert controller.fov.is_in_fov(5, 2)
        # The previous result was cleared before recomputing.
        assert not controller.fov.is_in_fov(0, 2)

    def test_blocked_move_refused(self) -> None:
        controller = Controller(make_pillar_lattice(10, 10), (5, 5))
        assert not controller.move_player(1, 1)
        assert controller.player_pos == (5, 5)

    def test_move_off_map_refused(self) -> None:
        controller = Controller(GameMap(10, 10), (0, 0))
        assert not controller.move_player(-1, 0)
        assert not controller.move_player(0, -1)
        assert controller.player_pos == (0, 0)


def test_update_picks_up_map_edits() -> None:
    game_map = GameMap(10, 10)
    controller = Controller(game_map, (5, 5), fov_radius=4)
    assert controller.fov.is_in_fov(5, 8)

    game_map.set_blocked(5, 6, True)
    controller.update()

    assert controller.fov.is_in_fov(5, 6)
    assert not controller.fov.is_in_fov(5, 8)


def test_recompute_logs_fov_grid(caplog: pytest.LogCaptureFixture) -> None:
    caplog.clear()
    Controller(GameMap(4, 1), (1, 0), fov_radius=1)
    assert any("***." in record.getMessage() for record in caplog.records)


def test_refused_move_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    controller = Controller(GameMap(3, 3), (0, 0))
    caplog.clear()
    controller.move_player(-1, 0)
    assert "refused" in caplog.text
