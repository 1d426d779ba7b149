"""Loading of the four wall textures."""

from __future__ import annotations

import sys
from array import array
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Sequence

from PIL import Image

from raycub.player import IMG_SIZE
from raycub.scenefile import CubError

TEXTURE_KEYS = ("no", "ea", "so", "we")

_WORD = "I" if array("I").itemsize == 4 else "L"


@dataclass(frozen=True)
class Texture:
    """A square wall image stored as row-major packed ``0xRRGGBB`` pixels."""

    width: int
    height: int
    pixels: Sequence[int]
    path: str = ""


def _packed_pixels(image: Image.Image) -> list[int]:
    red, green, blue = image.convert("RGB").split()
    padding = Image.new("L", image.size, 0)
    raw = Image.merge("RGBA", (blue, green, red, padding)).tobytes()
    words = array(_WORD)
    words.frombytes(raw)
    if sys.byteorder == "big":
        words.byteswap()
    return words.tolist()


def load_texture(path: str | Path) -> Texture:
    """Load an image file that must be exactly IMG_SIZE by IMG_SIZE pixels.

    Raises CubError if the file cannot be read or has the wrong size.
    """
    try:
        with Image.open(path) as image:
            size = image.size
            if size != (IMG_SIZE, IMG_SIZE):
                raise CubError(f"Texture {path} is {size[0]}x{size[1]}, not {IMG_SIZE}x{IMG_SIZE}.")
            image.load()
            pixels = _packed_pixels(image)
    except (OSError, ValueError, SyntaxError) as exc:
        raise CubError(f"Cannot load texture {path}.") from exc
    return Texture(width=size[0], height=size[1], pixels=pixels, path=str(path))


def load_textures(paths: Mapping[str, str | Path | None]) -> dict[str, Texture]:
    """Load the ``no``, ``ea``, ``so`` and ``we`` textures, in that order.

    A missing path raises CubError before anything is loaded; a texture that
    fails to load raises CubError naming it.
    """
    if any(paths.get(key) is None for key in TEXTURE_KEYS):
        raise CubError("Texture path not found.")
    textures: dict[str, Texture] = {}
    for key in TEXTURE_KEYS:
        try:
            textures[key] = load_texture(paths[key])
        except CubError as exc:
            raise CubError(f"{key}_img failed") from exc
    return textures