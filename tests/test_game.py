import math

import pytest

from raycub.engine import Textures, create_color
from raycub.game import Game, Key, main
from raycub.image import Image
from raycub.mapcheck import Scene, map_to_rectangle
from raycub.params import SceneParams

NORTH = 0x112233
SOUTH = 0x445566
WEST = 0x778899
EAST = 0xAABBCC


def _texture(color):
    image = Image(4, 4)
    image.fill(color)
    return image


@pytest.fixture
def scene():
    grid = map_to_rectangle(["11111", "10001", "10N01", "10001", "11111"])
    params = SceneParams(
        no_path=None,
        so_path=None,
        we_path=None,
        ea_path=None,
        floor_str="10,20,30",
        ceiling_str="200,100,50",
    )
    return Scene(grid=tuple(grid), params=params)


@pytest.fixture
def textures():
    return Textures(
        north=_texture(NORTH),
        south=_texture(SOUTH),
        west=_texture(WEST),
        east=_texture(EAST),
    )


@pytest.fixture
def game(scene, textures):
    return Game(scene, textures, 32, 24)


def test_raw_x11_escape_keysym_stops_game(game):
    assert game.handle_key(0xFF1B) is False
    assert game.running is False


def test_player_starts_at_centre_of_marker(game):
    assert (game.player.x, game.player.y) == (2.5, 2.5)


def test_forward_key_moves_player_north(game):
    assert game.handle_key(Key.W) is True
    assert game.player.y < 2.5
    assert game.player.x == 2.5


def test_backward_undoes_forward(game):
    game.handle_key(Key.W)
    game.handle_key(Key.S)
    assert math.isclose(game.player.y, 2.5)


def test_escape_stops_game(game):
    assert game.handle_key(Key.ESC) is False
    assert game.running is False


def test_unknown_key_is_ignored(game):
    before = (game.player.x, game.player.y, game.player.dir_x, game.player.dir_y)
    assert game.handle_key(12345) is True
    after = (game.player.x, game.player.y, game.player.dir_x, game.player.dir_y)
    assert after == before


def test_left_then_right_restores_direction(game):
    game.handle_key(Key.LEFT)
    assert not math.isclose(game.player.dir_x, 0.0, abs_tol=1e-12)
    game.handle_key(Key.RIGHT)
    assert math.isclose(game.player.dir_x, 0.0, abs_tol=1e-12)
    assert math.isclose(game.player.dir_y, -1.0)


def test_strafes_move_sideways(game):
    game.handle_key(Key.A)
    left_x = game.player.x
    game.handle_key(Key.D)
    game.handle_key(Key.D)
    assert game.player.x != left_x
    assert math.isclose(game.player.y, 2.5)


def test_render_draws_ceiling_wall_and_floor(game, scene):
    label = game.render()
    assert label.endswith(" fps")
    column = game.width // 2
    assert game.frame.get_pixel(column, 0) == create_color(*scene.params.ceiling_color)
    assert game.frame.get_pixel(column, game.height - 1) == create_color(
        *scene.params.floor_color
    )
    assert game.frame.get_pixel(column, game.height // 2) == NORTH


def test_tick_fps_updates_once_a_second(game):
    assert game.tick_fps(0.5) == "0 fps"
    assert game.tick_fps(1.0) == "2 fps"
    assert game.frame_count == 0
    assert game.tick_fps(1.5) == "2 fps"
    assert game.frame_count == 1


def test_invalid_size_is_rejected(scene, textures):
    with pytest.raises(ValueError):
        Game(scene, textures, 0, 10)


def test_main_rejects_bad_extension(capsys):
    assert main(["map.txt"]) == 1
    assert "Error" in capsys.readouterr().err


def test_main_rejects_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.cub")]) == 1
    assert "opening map" in capsys.readouterr().err