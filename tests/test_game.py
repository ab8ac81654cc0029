import pytest

from zombiearena.background import TILE_SIZE
from zombiearena.game import Game, State


@pytest.fixture
def game():
    return Game((1000, 800), seed=4)


def _start(game):
    game.key_pressed("return")
    game.level_up(1)


def test_starts_in_game_over(game):
    assert game.state is State.GAME_OVER
    assert game.running is True


def test_return_from_game_over_levels_up(game):
    game.key_pressed("return")
    assert game.state is State.LEVELING_UP


def test_level_up_starts_play(game):
    game.key_pressed("return")
    assert game.level_up(3) is True
    assert game.state is State.PLAYING
    assert game.arena.width == 500
    assert game.arena.height == 500
    assert game.background.tile_size == TILE_SIZE
    assert len(game.background) > 0
    assert game.player.position == (game.arena.width // 2, game.arena.height // 2)


@pytest.mark.parametrize("choice", [0, 7, -1])
def test_invalid_level_up_choice_ignored(game, choice):
    game.key_pressed("return")
    assert game.level_up(choice) is False
    assert game.state is State.LEVELING_UP


def test_level_up_outside_leveling_state(game):
    assert game.level_up(1) is False
    assert game.state is State.GAME_OVER


def test_pause_and_resume(game):
    _start(game)
    game.key_pressed("return")
    assert game.state is State.PAUSED
    game.key_pressed("Return")
    assert game.state is State.PLAYING


def test_escape_stops_running(game):
    game.key_pressed("escape")
    assert game.running is False


def test_other_keys_ignored(game):
    game.key_pressed("space")
    assert game.state is State.GAME_OVER
    assert game.running is True


def test_update_accumulates_time_and_follows_player(game):
    _start(game)
    game.steer(False, False, False, True)
    start_x = game.player.position[0]
    game.update(0.25, (0, 0))
    game.update(0.25, (0, 0))
    assert game.game_time_total == pytest.approx(0.5)
    assert game.player.position[0] > start_x
    assert game.view_center == game.player.position


def test_update_does_nothing_when_paused(game):
    _start(game)
    game.key_pressed("return")
    before = game.player.position
    game.update(1.0, (0, 0))
    assert game.game_time_total == 0.0
    assert game.player.position == before


def test_steer_ignored_when_not_playing(game):
    _start(game)
    game.key_pressed("return")
    game.steer(True, False, False, False)
    game.key_pressed("return")
    before = game.player.position
    game.update(0.1, (0, 0))
    assert game.player.position == before


def test_mouse_world_position_uses_view(game):
    _start(game)
    game.update(0.0, (0, 0))
    center = game.view_center
    game.update(0.0, (int(game.resolution[0] / 2), int(game.resolution[1] / 2)))
    assert game.mouse_world_position == pytest.approx(center)