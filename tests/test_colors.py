import pytest

from raycub.colors import (
    copy_until_newline,
    parse_color,
    remove_extra_space,
    strict_atoi,
)
from raycub.scenefile import CubError


def _unpack(value):
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def test_strict_atoi_plain_number():
    assert strict_atoi("42") == 42


def test_strict_atoi_skips_leading_space_and_plus():
    assert strict_atoi("  +7\n") == 7


def test_strict_atoi_stops_at_newline():
    assert strict_atoi("12\nabc") == 12


@pytest.mark.parametrize("text", ["-1", "+x", "1 ", "1a", "++3"])
def test_strict_atoi_rejects(text):
    with pytest.raises(ValueError):
        strict_atoi(text)


def test_remove_extra_space_collapses_runs():
    assert remove_extra_space("  NO   ./a.xpm  ") == "NO ./a.xpm"


def test_remove_extra_space_keeps_newline():
    assert remove_extra_space("F  1,2,3\n") == "F 1,2,3\n"


def test_remove_extra_space_is_idempotent():
    once = remove_extra_space("  C    10,  20,30   ")
    assert remove_extra_space(once) == once
    assert "  " not in once


def test_remove_extra_space_rejects_tab():
    with pytest.raises(CubError):
        remove_extra_space("NO\t./a.xpm")


def test_copy_until_newline():
    assert copy_until_newline("abc\ndef") == "abc"
    assert copy_until_newline("abc") == "abc"


@pytest.mark.parametrize("rgb", [(220, 100, 0), (0, 0, 0), (255, 255, 255), (1, 2, 3)])
def test_parse_color_round_trip(rgb):
    text = " {},{},{}\n".format(*rgb)
    assert _unpack(parse_color(text)) == rgb


def test_parse_color_allows_space_after_comma():
    assert _unpack(parse_color("10, 20, 30")) == (10, 20, 30)


@pytest.mark.parametrize(
    "text",
    ["1,2", "1,2,3,4", "1,,2,3", "1,,2", "256,0,0", "-1,0,0", " ,1,2", "1 ,2,3", "a,b,c"],
)
def test_parse_color_rejects(text):
    with pytest.raises(CubError):
        parse_color(text)