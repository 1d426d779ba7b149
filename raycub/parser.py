"""Splitting a scene file into header settings and the map grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from raycub.colors import copy_until_newline, parse_color, remove_extra_space
from raycub.player import Player
from raycub.scenefile import CubError

_WHITESPACE = frozenset(" \f\n\r\t\v")

_TEXTURE_KEYS = {
    "NO": "no_texture",
    "SO": "so_texture",
    "WE": "we_texture",
    "EA": "ea_texture",
}

_COLOR_KEYS = {
    "F": "floor_color",
    "C": "ceiling_color",
}


@dataclass
class Scene:
    """Textures, colours and map rows read from a scene file."""

    rows: list[str] = field(default_factory=list)
    no_texture: str | None = None
    so_texture: str | None = None
    we_texture: str | None = None
    ea_texture: str | None = None
    floor_color: int = 0
    ceiling_color: int = 0
    width: int = 0
    height: int = 0
    player: Player | None = None


def is_empty(text: str) -> bool:
    """True if ``text`` holds only whitespace."""
    return all(ch in _WHITESPACE for ch in text)


def remove_space(line: str) -> str:
    """Return ``line`` with every space removed."""
    return line.replace(" ", "")


def get_max_width(rows: Sequence[str]) -> int:
    """Length of the longest row, newline included."""
    return max((len(row) for row in rows), default=0)


def height_until_map(rows: Sequence[str]) -> int:
    """Index of the first row whose first non-space character is ``1``."""
    for index, row in enumerate(rows):
        if row.lstrip(" ").startswith("1"):
            return index
    return len(rows)


def strip_header(rows: Sequence[str]) -> list[str]:
    """Return the rows from the first map row onward."""
    for index, row in enumerate(rows):
        if remove_space(row).startswith("1"):
            return list(rows[index:])
    return []


def _load_line(scene: Scene, line: str) -> None:
    key = line[:2]
    if key in _TEXTURE_KEYS:
        attr = _TEXTURE_KEYS[key]
        if getattr(scene, attr) is not None:
            raise CubError(f"Duplicate texture {key}.")
        setattr(scene, attr, copy_until_newline(line[3:]))
        return
    head = line[:1]
    if head in _COLOR_KEYS:
        attr = _COLOR_KEYS[head]
        if getattr(scene, attr):
            raise CubError(f"Duplicate color {head}.")
        if line[1:2] != " ":
            raise CubError(f"Invalid color line {head}.")
        setattr(scene, attr, parse_color(line[1:]))
        return
    if head in (" ", "\n"):
        return
    raise CubError(f"Unknown scene entry: {copy_until_newline(line)!r}")


def load_textures_and_colors(scene: Scene, rows: Sequence[str]) -> None:
    """Fill ``scene`` from the header lines that precede the map."""
    for row in rows[: height_until_map(rows)]:
        stripped = row.lstrip(" ")
        indent = len(row) - len(stripped)
        head = stripped[:1]
        if head in ("", "\n") and indent:
            raise CubError("Header line holds only spaces.")
        if head != "1":
            _load_line(scene, remove_extra_space(row))


def parse_scene(rows: Sequence[str]) -> Scene:
    """Parse all lines of a scene file into a Scene."""
    scene = Scene()
    load_textures_and_colors(scene, rows)
    scene.rows = strip_header(rows)
    scene.width = get_max_width(scene.rows)
    scene.height = len(scene.rows)
    return scene