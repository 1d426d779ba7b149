"""Parsing of colour specifications and header line clean-up."""

from __future__ import annotations

from raycub.scenefile import CubError

_WHITESPACE = frozenset(" \f\n\r\t\v")


def _blank(text: str) -> bool:
    return all(ch in _WHITESPACE for ch in text)


def strict_atoi(text: str) -> int:
    """Parse a non-negative decimal number.

    Leading whitespace is skipped and a single ``+`` is allowed before a
    digit. Parsing stops at the first newline. A minus sign, or any other
    character that is not a digit, raises ValueError.
    """
    rest = text.lstrip(" \f\n\r\t\v")
    if rest.startswith("-"):
        raise ValueError(f"negative number: {text!r}")
    if rest.startswith("+") and rest[1:2].isdigit():
        rest = rest[1:]
    rest = rest.split("\n", 1)[0]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            raise ValueError(f"not a number: {text!r}")
        value = value * 10 + ord(ch) - ord("0")
    return value


def remove_extra_space(text: str) -> str:
    """Drop leading spaces, collapse runs of spaces and drop one trailing space.

    A tab anywhere in ``text`` raises CubError.
    """
    if "\t" in text:
        raise CubError("Tab character in scene header.")
    out: list[str] = []
    previous = ""
    for index, ch in enumerate(text):
        if ch != " " or (index > 0 and previous != " "):
            out.append(ch)
        previous = ch
    if out and out[-1] == " ":
        out.pop()
    return "".join(out)


def copy_until_newline(text: str) -> str:
    """Return ``text`` up to, not including, its first newline."""
    return text.split("\n", 1)[0]


def parse_color(text: str) -> int:
    """Parse ``R,G,B`` into a packed ``0xRRGGBB`` integer.

    Exactly two commas are required, each component must be present and
    lie in 0..255. Anything else raises CubError.
    """
    if text.count(",") != 2:
        raise CubError("Invalid color")
    parts = [part for part in text.split(",") if part]
    if len(parts) != 3:
        raise CubError("Invalid Color.")
    if any(_blank(part) for part in parts):
        raise CubError("Invalid color")
    try:
        red, green, blue = (strict_atoi(part) for part in parts)
    except ValueError:
        raise CubError("Invalid color") from None
    if not all(0 <= value <= 255 for value in (red, green, blue)):
        raise CubError("Invalid color")
    return (red << 16) + (green << 8) + blue