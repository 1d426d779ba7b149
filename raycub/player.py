"""Player position, view direction and movement on the map grid."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

ROTATE_ANGLE = 0.1
FOV = 1.0471975512
DIR_L = 100
SPEED = 200
EMPTY = "0"
WALL = "1"
IMG_SIZE = 1024
WIN_H = 900
WIN_W = 1800

_FACINGS = {
    "N": (0, -1),
    "S": (0, 1),
    "W": (-1, 0),
    "E": (1, 0),
}


@dataclass
class Point:
    """A point in world coordinates."""

    x: float = 0.0
    y: float = 0.0

    def rotate_about(self, cx: float, cy: float, angle: float) -> None:
        """Rotate this point in place around (cx, cy) by ``angle`` radians."""
        dx = self.x - cx
        dy = self.y - cy
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        self.x = dx * cos_a - dy * sin_a + cx
        self.y = dx * sin_a + dy * cos_a + cy


def _cell(value: float) -> int:
    """Grid index of a world coordinate, truncating toward zero."""
    return int(int(value) / IMG_SIZE)


def _is_empty(grid: Sequence[str], row: int, col: int) -> bool:
    if not 0 <= row < len(grid):
        return False
    line = grid[row]
    return 0 <= col < len(line) and line[col] == EMPTY


@dataclass
class Player:
    """The player: position, look-at point and camera plane points."""

    facing: str
    x: float
    y: float
    dir: Point = field(default_factory=Point)
    plane: Point = field(default_factory=Point)
    plane2: Point = field(default_factory=Point)

    def shift_x(self, delta: float) -> None:
        """Move the player and its view points along x by ``SPEED * delta``."""
        step = SPEED * delta
        self.x += step
        self.dir.x += step
        self.plane.x += step
        self.plane2.x += step

    def shift_y(self, delta: float) -> None:
        """Move the player and its view points along y by ``SPEED * delta``."""
        step = SPEED * delta
        self.y += step
        self.dir.y += step
        self.plane.y += step
        self.plane2.y += step

    def _step(self, grid: Sequence[str], dx: float, dy: float) -> None:
        if _is_empty(grid, _cell(self.y), _cell(self.x + SPEED * dx)):
            self.shift_x(dx)
        if _is_empty(grid, _cell(self.y + SPEED * dy), int(self.x / IMG_SIZE)):
            self.shift_y(dy)

    def move_forward(self, grid: Sequence[str]) -> None:
        """Step toward the look-at point, axis by axis, if the target cell is empty."""
        self._step(grid, (self.dir.x - self.x) / DIR_L, (self.dir.y - self.y) / DIR_L)

    def move_backward(self, grid: Sequence[str]) -> None:
        """Step away from the look-at point."""
        self._step(grid, -(self.dir.x - self.x) / DIR_L, -(self.dir.y - self.y) / DIR_L)

    def move_left(self, grid: Sequence[str]) -> None:
        """Strafe to the left of the view direction."""
        self._step(grid, (self.dir.y - self.y) / DIR_L, -(self.dir.x - self.x) / DIR_L)

    def move_right(self, grid: Sequence[str]) -> None:
        """Strafe to the right of the view direction."""
        self._step(grid, -(self.dir.y - self.y) / DIR_L, (self.dir.x - self.x) / DIR_L)

    def _rotate(self, angle: float) -> None:
        for point in (self.dir, self.plane, self.plane2):
            point.rotate_about(self.x, self.y, angle)

    def turn_left(self) -> None:
        """Rotate the view counter-clockwise on screen."""
        self._rotate(-ROTATE_ANGLE)

    def turn_right(self) -> None:
        """Rotate the view clockwise on screen."""
        self._rotate(ROTATE_ANGLE)


def spawn_player(col: int, row: int, facing: str) -> Player:
    """Create a player centred on grid cell (col, row) looking toward ``facing``."""
    try:
        fx, fy = _FACINGS[facing]
    except KeyError:
        raise ValueError(f"invalid player facing: {facing!r}") from None
    x_center = float(col * IMG_SIZE + IMG_SIZE // 2)
    y_center = float(row * IMG_SIZE + IMG_SIZE // 2)
    look = Point(x_center + DIR_L * fx, y_center + DIR_L * fy)
    plane = Point(look.y * FOV, -look.x * FOV)
    return Player(facing=facing, x=x_center, y=y_center, dir=look, plane=plane)