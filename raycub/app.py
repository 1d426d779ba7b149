"""Loading a scene and running the game window."""

from __future__ import annotations

import sys
from array import array
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Mapping, Sequence

from PIL import Image

from raycub.parser import Scene, parse_scene
from raycub.player import WIN_H, WIN_W, Player
from raycub.render import Renderer
from raycub.scenefile import CubError, check_extension, read_map_lines, report_error
from raycub.textures import Texture, load_textures
from raycub.validation import validate_map

_WORD = "I" if array("I").itemsize == 4 else "L"

_MOVES: dict[str, Callable[[Player, Sequence[str]], None]] = {
    "w": Player.move_forward,
    "a": Player.move_left,
    "s": Player.move_backward,
    "d": Player.move_right,
}

_TURNS: dict[str, Callable[[Player], None]] = {
    "left": Player.turn_left,
    "right": Player.turn_right,
}


@dataclass
class Game:
    """A validated scene with its textures, ready to be played."""

    scene: Scene
    textures: Mapping[str, Texture]
    renderer: Renderer = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.scene.player is None:
            raise CubError("No player on the map.")
        self.renderer = Renderer(
            self.scene.rows, self.textures, self.scene.floor_color, self.scene.ceiling_color
        )

    @property
    def player(self) -> Player:
        """The player of the scene."""
        assert self.scene.player is not None
        return self.scene.player

    def handle_key(self, key: str) -> bool:
        """Apply a key by name; return False when the game should close."""
        if key == "escape":
            return False
        if key in _MOVES:
            _MOVES[key](self.player, self.scene.rows)
        elif key in _TURNS:
            _TURNS[key](self.player)
        return True

    def frame(self) -> list[int]:
        """Render the current view as WIN_W * WIN_H packed ``0xRRGGBB`` pixels."""
        return self.renderer.render(self.player)


def _texture_paths(scene: Scene) -> dict[str, str | None]:
    return {
        "no": scene.no_texture,
        "so": scene.so_texture,
        "we": scene.we_texture,
        "ea": scene.ea_texture,
    }


def load_game(path: str | Path) -> Game:
    """Read, parse and validate a scene file and load its textures.

    Raises CubError at the first problem.
    """
    rows = read_map_lines(check_extension(path))
    scene = validate_map(parse_scene(rows))
    return Game(scene, load_textures(_texture_paths(scene)))


def _frame_rgb(pixels: Sequence[int]) -> bytes:
    words = array(_WORD, pixels)
    if sys.byteorder == "big":
        words.byteswap()
    image = Image.frombytes("RGB", (WIN_W, WIN_H), words.tobytes(), "raw", "BGRX")
    return image.tobytes()


def _run(game: Game) -> None:
    import pygame

    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode((WIN_W, WIN_H))
        except pygame.error as exc:
            raise CubError(str(exc)) from exc
        pygame.display.set_caption("Cub3D")
        pygame.key.set_repeat(200, 30)
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                if event.type == pygame.KEYDOWN and not game.handle_key(
                    pygame.key.name(event.key)
                ):
                    return
            surface = pygame.image.frombuffer(_frame_rgb(game.frame()), (WIN_W, WIN_H), "RGB")
            screen.blit(surface, (0, 0))
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the scene file named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        report_error("Invalid number of arguments.\n")
        return 0
    try:
        path = check_extension(args[0])
    except CubError as exc:
        report_error(f"{exc}\n")
        return 1
    try:
        rows = read_map_lines(path)
    except CubError as exc:
        report_error(f"{exc}\n")
        report_error("Data initialization failed.\n")
        return 0
    try:
        scene = parse_scene(rows)
    except CubError as exc:
        report_error(f"{exc}\n")
        report_error("Map parsing failed.\n")
        return 0
    try:
        scene = validate_map(scene)
    except CubError:
        report_error("Invalid map.\n")
        return 0
    try:
        game = Game(scene, load_textures(_texture_paths(scene)))
        _run(game)
    except CubError as exc:
        report_error(f"{exc}\n")
        report_error("Game start failed.\n")
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())