"""Ray casting of the map into a frame of packed RGB pixels."""

from __future__ import annotations

import math
from typing import Mapping, MutableSequence, Sequence

from raycub.player import EMPTY, FOV, IMG_SIZE, WIN_H, WIN_W, Player, Point
from raycub.textures import Texture

_HALF_H = WIN_H // 2
_RAY_STEP = FOV / WIN_W
_PROJECTION = IMG_SIZE * WIN_H // 2


def _cell(value: float) -> int:
    """Grid index of a world coordinate, truncating toward zero."""
    return int(int(value) / IMG_SIZE)


def _remainder(value: float) -> int:
    """Offset of a coordinate inside its cell, with the sign of the coordinate."""
    return int(math.fmod(int(value), IMG_SIZE))


def _steps_in_cell(value: float, delta: float) -> float:
    """Unit steps that certainly keep ``value`` inside its current cell."""
    if delta == 0:
        return math.inf
    if value < 0:
        return 1
    cell = int(value) // IMG_SIZE
    gap = (cell + 1) * IMG_SIZE - value if delta > 0 else value - cell * IMG_SIZE
    return int(gap / abs(delta)) - 1


class Renderer:
    """Draws frames of a map with the given wall textures and colours."""

    def __init__(
        self,
        grid: Sequence[str],
        textures: Mapping[str, Texture],
        floor_color: int,
        ceiling_color: int,
    ) -> None:
        self.grid = grid
        self.textures = textures
        self.floor_color = floor_color
        self.ceiling_color = ceiling_color
        self.width = max((len(row) for row in grid), default=0)
        self.height = len(grid)

    def fill_background(self, pixels: MutableSequence[int]) -> None:
        """Paint the upper half with the ceiling colour and the lower with the floor."""
        split = WIN_W * _HALF_H
        total = WIN_W * WIN_H
        pixels[:split] = [self.ceiling_color] * split
        pixels[split:total] = [self.floor_color] * (total - split)

    def _cell_at(self, row: int, col: int) -> str:
        line = self.grid[row]
        return line[col] if 0 <= col < len(line) else "\0"

    def _march(self, start: Point, dx: float, dy: float) -> Point | None:
        """First point along the ray that lies in a non-floor cell, if any."""
        limit_x = IMG_SIZE * self.width
        limit_y = IMG_SIZE * self.height
        k = 0
        while True:
            x = start.x + k * dx
            y = start.y + k * dy
            row = _cell(y)
            if not 0 <= row < self.height:
                return None
            if x <= -IMG_SIZE or (x >= limit_x and dx >= 0):
                return None
            if x < limit_x and y < limit_y and self._cell_at(row, _cell(x)) != EMPTY:
                return Point(x, y)
            k += max(1, min(_steps_in_cell(x, dx), _steps_in_cell(y, dy)))

    def cast_ray(
        self,
        pixels: MutableSequence[int],
        player: Player,
        target: Point,
        column: int,
        ray_angle: float,
    ) -> bool:
        """Cast one ray from the player through ``target`` and draw its wall slice.

        Returns True if the ray met a wall.
        """
        dx = target.x - player.x
        dy = target.y - player.y
        scale = max(abs(dx), abs(dy))
        if scale == 0:
            return False
        dx /= scale
        dy /= scale
        hit = self._march(Point(player.x, player.y), dx, dy)
        if hit is None:
            return False
        self._draw_slice(pixels, player, hit, dx, column, ray_angle)
        return True

    def _draw_slice(
        self,
        pixels: MutableSequence[int],
        player: Player,
        point: Point,
        dx: float,
        column: int,
        ray_angle: float,
    ) -> None:
        if self._cell_at(_cell(point.y), _cell(point.x)) == EMPTY:
            point = Point(point.x - dx, point.y)
        distance = math.hypot(player.y - point.y, player.x - point.x) * math.cos(abs(ray_angle))
        if distance <= 0:
            return
        half = int(_PROJECTION / distance)
        if half <= 0:
            return
        step = IMG_SIZE / (2 * half)
        offset = 0
        if half > _HALF_H:
            offset = half - _HALF_H
            half = _HALF_H
        self._paint(pixels, point, column, half, offset * step, step)

    def _paint(
        self,
        pixels: MutableSequence[int],
        point: Point,
        column: int,
        half: int,
        tex_row: float,
        step: float,
    ) -> None:
        tx = _remainder(point.x)
        ty = _remainder(point.y)
        last = IMG_SIZE - 1
        if tx == 0:
            texture, tex_col = self.textures["ea"], ty
        elif ty == 0:
            texture, tex_col = self.textures["so"], last - tx
        elif tx == last:
            texture, tex_col = self.textures["we"], last - ty
        elif ty == last:
            texture, tex_col = self.textures["no"], tx
        else:
            return
        source = texture.pixels
        for index in range(_HALF_H - half, min(_HALF_H + half, WIN_H)):
            source_row = min(int(tex_row), last)
            pixels[WIN_W * index + column] = source[source_row * IMG_SIZE + tex_col]
            tex_row += step

    def render(self, player: Player) -> list[int]:
        """Render one full frame seen by ``player`` as WIN_W * WIN_H packed pixels."""
        pixels = [0] * (WIN_W * WIN_H)
        self.fill_background(pixels)
        target = Point(player.dir.x, player.dir.y)
        target.rotate_about(player.x, player.y, -FOV / 2)
        # The ray angle is kept as a whole number, so it stays 0 across the view.
        ray_angle = int(-FOV / 2)
        for column in range(WIN_W):
            self.cast_ray(pixels, player, target, column, ray_angle)
            target.rotate_about(player.x, player.y, _RAY_STEP)
            ray_angle = int(ray_angle + _RAY_STEP)
        return pixels