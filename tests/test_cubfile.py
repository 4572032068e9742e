import pytest

from raycub.cubfile import (
    HOLE,
    CubError,
    is_map_line,
    is_player,
    read_scene_lines,
    skip_spaces,
    split_scene,
    strspn,
    valid_char,
    valid_name,
)

SCENE = [
    "NO ./north.xpm\n",
    "\n",
    "F 1,2,3\n",
    "111\n",
    "1N1\n",
    "111\n",
]


def test_strspn_counts_leading_accepted_chars():
    assert strspn("  \nx ", " \n") == 3
    assert strspn("abc", " ") == 0
    assert strspn("   ", " ") == len("   ")


@pytest.mark.parametrize(
    "line, expected",
    [
        ("1011\n", True),
        (" 1 N\n", True),
        ("   \n", False),
        ("", False),
        ("NO ./a.xpm\n", False),
        ("\t101\n", False),
    ],
)
def test_is_map_line(line, expected):
    assert is_map_line(line) is expected


@pytest.mark.parametrize("char", ["N", "S", "E", "W"])
def test_is_player_accepts_directions(char):
    assert is_player(char) is True


@pytest.mark.parametrize("char", ["0", "1", " ", "n"])
def test_is_player_rejects_others(char):
    assert is_player(char) is False


def test_valid_char_accepts_grid_characters():
    assert valid_char("10NSEW" + HOLE + "\n") is True


def test_valid_char_rejects_space_and_letters():
    assert valid_char("10 1\n") is False
    assert valid_char("10X1\n") is False


def test_skip_spaces_only_strips_leading_blanks():
    assert skip_spaces(" \t NO x ") == "NO x "


def test_valid_name_accepts_cub():
    assert valid_name("map.cub") == "map.cub"


@pytest.mark.parametrize("name", [".cub", "map.txt", "map.cubx"])
def test_valid_name_rejects(name):
    with pytest.raises(CubError):
        valid_name(name)


def test_split_scene_finds_map_start():
    lines, index = split_scene(SCENE)
    assert lines == SCENE
    assert index == 3


def test_split_scene_without_map():
    lines, index = split_scene(["NO a\n", "F 1,2,3\n"])
    assert index == -1
    assert lines == ["NO a\n", "F 1,2,3\n"]


def test_split_scene_blank_after_map_is_error():
    with pytest.raises(CubError, match="last"):
        split_scene(["111\n", "1N1\n", "\n", "111\n"])


def test_split_scene_tab_after_map_is_error():
    with pytest.raises(CubError):
        split_scene(["111\n", "\tC 1,2,3\n"])


def test_split_scene_empty_is_error():
    with pytest.raises(CubError, match="empty"):
        split_scene([])


def test_read_scene_lines_round_trip(tmp_path):
    path = tmp_path / "scene.cub"
    path.write_text("".join(SCENE))
    lines, index = read_scene_lines(path)
    assert lines == SCENE
    assert index == 3


def test_read_scene_lines_keeps_last_line_without_newline(tmp_path):
    path = tmp_path / "scene.cub"
    path.write_text("111\n1N1\n111")
    lines, index = read_scene_lines(path)
    assert lines == ["111\n", "1N1\n", "111"]
    assert index == 0


def test_read_scene_lines_missing_file(tmp_path):
    with pytest.raises(CubError, match="opening"):
        read_scene_lines(tmp_path / "absent.cub")


def test_read_scene_lines_bad_extension(tmp_path):
    path = tmp_path / "scene.txt"
    path.write_text("111\n")
    with pytest.raises(CubError):
        read_scene_lines(path)