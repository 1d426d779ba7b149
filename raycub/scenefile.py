"""Reading scene files and reporting errors."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

SCENE_SUFFIX = ".cub"


class CubError(Exception):
    """Raised when a scene file cannot be used."""


def check_extension(path: str | Path) -> str:
    """Return ``path`` as a string if it names a ``.cub`` file, else raise CubError."""
    name = str(path)
    if len(name) < len(SCENE_SUFFIX) or not name.endswith(SCENE_SUFFIX):
        raise CubError("Invalid map file.")
    return name


def read_map_lines(path: str | Path) -> list[str]:
    """Read a scene file into lines, each keeping its trailing newline.

    Lines are split on ``\\n`` only; the last line has no newline if the
    file does not end with one. An unreadable or empty file raises CubError.
    """
    try:
        with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise CubError("Map file is empty.") from exc
    if not text:
        raise CubError("Map file is empty.")
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def report_error(message: str, stream: TextIO | None = None) -> None:
    """Write an error report: an ``Error:`` header line followed by ``message``."""
    out = sys.stderr if stream is None else stream
    out.write("Error:\n")
    out.write(message)
    out.flush()