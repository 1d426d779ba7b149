"""Checks that a parsed map is closed, well formed and holds one player."""

from __future__ import annotations

import sys
from typing import MutableSequence, Sequence

from raycub.parser import Scene, get_max_width, remove_space, strip_header
from raycub.player import Player, spawn_player
from raycub.scenefile import CubError

_PLAYER_CHARS = "NSWE"
_MAP_CHARS = " 01NSWE\n"
_WALL_OR_SPACE = ("1", " ")
_WALL_SPACE_OR_END = ("1", " ", "\0", "\n")


def _at(row: str, x: int) -> str:
    """Character at ``x``, or NUL past the end of the row."""
    return row[x] if 0 <= x < len(row) else "\0"


def _last_index(row: str) -> int:
    """Index of the last character; an empty row counts as unbounded."""
    return len(row) - 1 if row else sys.maxsize


def exact_width(line: str) -> int:
    """Index of the last character that is neither a space nor a newline, or -1."""
    return len(line.rstrip(" \n")) - 1


def empty_line_check(line: str | None, flag: int) -> bool:
    """True if ``line`` is missing or blank.

    With ``flag`` 0 only newlines count as blank; otherwise spaces do too.
    """
    if line is None:
        return True
    blank = "\n" if flag == 0 else " \n"
    return all(ch in blank for ch in line)


def exact_map_height(rows: Sequence[str]) -> int:
    """Index of the last row that is not blank, or 0 if there is none past the first."""
    for index in range(len(rows) - 1, 0, -1):
        if not empty_line_check(rows[index], 1):
            return index
    return 0


def has_char(chars: str, c: str) -> bool:
    """True if the single character ``c`` occurs in ``chars``."""
    return any(ch == c for ch in chars)


def find_player(rows: MutableSequence[str]) -> Player:
    """Locate the single player start, replace it with floor and return the player.

    Raises CubError if there is no player or more than one.
    """
    player: Player | None = None
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            if ch in _PLAYER_CHARS:
                if player is not None:
                    raise CubError("More than one player on the map.")
                player = spawn_player(x, y, ch)
                rows[y] = row[:x] + "0" + row[x + 1:]
                row = rows[y]
    if player is None:
        raise CubError("No player on the map.")
    return player


def _valid_line(line: str) -> bool:
    if not line:
        return True
    if empty_line_check(line, 1):
        return False
    return all(ch in _MAP_CHARS for ch in line)


def valid_chars(rows: Sequence[str]) -> bool:
    """True if the map rows hold only map characters and no blank rows inside.

    Blank rows after the map may not contain spaces.
    """
    if not rows:
        return False
    height = exact_map_height(rows)
    if not all(_valid_line(rows[y]) for y in range(height - 1)):
        return False
    return not any(" " in row for row in rows[height + 1:])


def _valid_line_borders(line: str, y: int, height: int) -> bool:
    width = len(line)
    for x in range(width - 1):
        on_border = y in (0, height - 1) or x in (0, width - 2)
        if on_border and line[x] != "1":
            return False
    return True


def valid_borders(rows: Sequence[str]) -> bool:
    """True if the first and last rows and each row's ends are walls, spaces ignored."""
    height = len(rows)
    return all(
        _valid_line_borders(remove_space(row), y, height)
        for y, row in enumerate(rows)
    )


def empty_checker(rows: Sequence[str], x: int, y: int) -> bool:
    """True if the floor cell at (x, y) is left open to the outside."""
    if y == 0 or y == len(rows) - 1:
        return False
    current, above, below = rows[y], rows[y - 1], rows[y + 1]
    shorter = min(len(above), len(below))
    if x < shorter and (above[x] in (" ", "\n") or below[x] in (" ", "\n")):
        return True
    return len(current) > shorter and x >= shorter and _at(current, x) == "0"


def _check_middle(rows: Sequence[str], x: int, y: int, above_len: int) -> bool:
    row, above, below = rows[y], rows[y - 1], rows[y + 1]
    below_len = _last_index(below)
    if _at(row, x - 1) not in _WALL_OR_SPACE:
        return True
    if _at(row, x + 1) not in _WALL_OR_SPACE:
        return True
    if len(row) <= above_len and len(row) <= below_len:
        if _at(above, x) not in _WALL_SPACE_OR_END:
            return True
        if _at(below, x) not in _WALL_SPACE_OR_END:
            return True
    if above_len < x <= below_len and _at(below, x) not in _WALL_SPACE_OR_END:
        return True
    return False


def space_checker(rows: Sequence[str], x: int, y: int) -> bool:
    """True if the space at (x, y) touches a cell that is neither wall nor space."""
    height = len(rows)
    if y == 0:
        return _at(rows[1] if height > 1 else "", x) not in _WALL_OR_SPACE
    if y == height - 1:
        return _at(rows[y - 1], x) not in _WALL_OR_SPACE
    width = len(rows[y])
    if 0 < y < height - 1 and 0 < x < width - 1:
        above_len = _last_index(rows[y - 1])
        below_len = _last_index(rows[y + 1])
        if below_len < x < above_len and _at(rows[y - 1], x) not in _WALL_SPACE_OR_END:
            return True
        return _check_middle(rows, x, y, above_len)
    return False


def _valid_line_walls(rows: Sequence[str], y: int) -> bool:
    for x, ch in enumerate(rows[y]):
        if ch == "0" and empty_checker(rows, x, y):
            return False
        if ch == " " and space_checker(rows, x, y):
            return False
    return True


def valid_walls(rows: Sequence[str]) -> bool:
    """True if no floor or space cell above the last row leaks out of the map."""
    return all(_valid_line_walls(rows, y) for y in range(len(rows) - 1))


def validate_map(scene: Scene) -> Scene:
    """Validate the map of ``scene``, place the player and fix its size.

    Raises CubError describing the first problem found.
    """
    rows = list(scene.rows)
    scene.player = find_player(rows)
    scene.rows = rows
    if not valid_chars(rows):
        raise CubError("Invalid characters in map.")
    if not valid_borders(rows):
        raise CubError("Map is not closed by walls.")
    if not valid_walls(rows):
        raise CubError("Map has open cells.")
    scene.rows = strip_header(rows)
    scene.width = get_max_width(scene.rows)
    scene.height = len(scene.rows)
    return scene