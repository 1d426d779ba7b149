import io

import pytest

from raycub.scenefile import CubError, check_extension, read_map_lines, report_error


def test_check_extension_accepts_cub_file():
    assert check_extension("maps/level.cub") == "maps/level.cub"


def test_check_extension_accepts_bare_suffix():
    assert check_extension(".cub") == ".cub"


@pytest.mark.parametrize("name", ["level.txt", "cub", "level.cub.bak", "", "level.CUB"])
def test_check_extension_rejects_other_names(name):
    with pytest.raises(CubError, match="Invalid map file"):
        check_extension(name)


def test_read_map_lines_keeps_newlines(tmp_path):
    scene = tmp_path / "scene.cub"
    scene.write_text("NO ./north.xpm\n\n111\n101\n111\n")
    assert read_map_lines(scene) == ["NO ./north.xpm\n", "\n", "111\n", "101\n", "111\n"]


def test_read_map_lines_last_line_without_newline(tmp_path):
    scene = tmp_path / "scene.cub"
    scene.write_text("111\n111")
    assert read_map_lines(scene) == ["111\n", "111"]


def test_read_map_lines_round_trip(tmp_path):
    content = "F 220,100,0\nC 225,30,0\n\n  1111\n  1N01\n  1111\n"
    scene = tmp_path / "scene.cub"
    scene.write_text(content)
    assert "".join(read_map_lines(scene)) == content


def test_read_map_lines_keeps_carriage_returns(tmp_path):
    scene = tmp_path / "scene.cub"
    scene.write_bytes(b"11\r\n11\r\n")
    assert read_map_lines(scene) == ["11\r\n", "11\r\n"]


def test_read_map_lines_empty_file(tmp_path):
    scene = tmp_path / "empty.cub"
    scene.write_text("")
    with pytest.raises(CubError, match="Map file is empty"):
        read_map_lines(scene)


def test_read_map_lines_missing_file(tmp_path):
    with pytest.raises(CubError, match="Map file is empty"):
        read_map_lines(tmp_path / "missing.cub")


def test_report_error_writes_header_and_message():
    stream = io.StringIO()
    report_error("Invalid map.\n", stream)
    assert stream.getvalue() == "Error:\nInvalid map.\n"