import pytest

from raycub.parser import (
    Scene,
    get_max_width,
    height_until_map,
    is_empty,
    load_textures_and_colors,
    parse_scene,
    remove_space,
    strip_header,
)
from raycub.scenefile import CubError

MAP_ROWS = [
    "111111\n",
    "100N01\n",
    "1000001\n",
    "111111\n",
]

HEADER = [
    "NO ./no.xpm\n",
    "SO ./so.xpm\n",
    "WE ./we.xpm\n",
    "EA ./ea.xpm\n",
    "\n",
    "F 220,100,0\n",
    "C 225,30,0\n",
    "\n",
]


def _unpack(value):
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def test_is_empty():
    assert is_empty(" \t\n")
    assert is_empty("")
    assert not is_empty("  x ")


def test_remove_space():
    assert remove_space(" 1 0 1\n") == "101\n"


def test_get_max_width():
    assert get_max_width(MAP_ROWS) == len("1000001\n")
    assert get_max_width([]) == 0


def test_height_until_map():
    assert height_until_map(HEADER + MAP_ROWS) == len(HEADER)
    assert height_until_map(["   1\n"]) == 0
    assert height_until_map(HEADER) == len(HEADER)


def test_strip_header():
    assert strip_header(HEADER + MAP_ROWS) == MAP_ROWS
    assert strip_header(HEADER) == []


def test_parse_scene_full():
    scene = parse_scene(HEADER + MAP_ROWS)
    assert scene.no_texture == "./no.xpm"
    assert scene.so_texture == "./so.xpm"
    assert scene.we_texture == "./we.xpm"
    assert scene.ea_texture == "./ea.xpm"
    assert _unpack(scene.floor_color) == (220, 100, 0)
    assert _unpack(scene.ceiling_color) == (225, 30, 0)
    assert scene.rows == MAP_ROWS
    assert scene.height == len(MAP_ROWS)
    assert scene.width == get_max_width(MAP_ROWS)


def test_parse_scene_collapses_header_spaces():
    scene = parse_scene(["  NO    ./x.xpm   \n", "F   1,2,3\n"] + MAP_ROWS)
    assert scene.no_texture == "./x.xpm "
    assert _unpack(scene.floor_color) == (1, 2, 3)


def test_missing_entries_keep_defaults():
    scene = parse_scene(MAP_ROWS)
    assert scene.no_texture is None
    assert scene.floor_color == scene.ceiling_color == 0
    assert scene.rows == MAP_ROWS


def test_load_textures_and_colors_fills_scene():
    scene = Scene()
    load_textures_and_colors(scene, ["EA ./east.xpm\n"] + MAP_ROWS)
    assert scene.ea_texture == "./east.xpm"
    assert scene.rows == []


def test_duplicate_texture_rejected():
    with pytest.raises(CubError):
        parse_scene(["NO ./a.xpm\n", "NO ./b.xpm\n"] + MAP_ROWS)


def test_duplicate_color_rejected():
    with pytest.raises(CubError):
        parse_scene(["F 1,2,3\n", "F 4,5,6\n"] + MAP_ROWS)


def test_black_color_may_be_respecified():
    scene = parse_scene(["F 0,0,0\n", "F 4,5,6\n"] + MAP_ROWS)
    assert _unpack(scene.floor_color) == (4, 5, 6)


@pytest.mark.parametrize(
    "line",
    ["XX ./a.xpm\n", "F1,2,3\n", "   \n", "NO\t./a.xpm\n", "C 300,0,0\n", "F 1,2\n", ""],
)
def test_bad_header_lines_rejected(line):
    with pytest.raises(CubError):
        parse_scene([line] + MAP_ROWS)