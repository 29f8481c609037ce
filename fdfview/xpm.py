"""Reading XPM images into grids of pixel values."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike

from .colors import text_to_rgb, visual_color

TRANSPARENT = -1

_ATOI = re.compile(r"\s*([+-]?\d+)")
_WORD_SEPARATORS = re.compile(r"[ \t]+")
_QUOTED = re.compile(r'"([^"]*)"')

# Channel layouts (red offset, red bits, green offset, green bits, blue
# offset, blue bits) of the usual TrueColor visuals below 24 bits.
_SHIFTS_BY_DEPTH = {
    16: (11, 5, 5, 6, 0, 5),
    15: (10, 5, 5, 5, 0, 5),
}


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


@dataclass
class XpmImage:
    """A decoded image: pixel values row by row and an optional visibility mask.

    ``mask`` is None when the image has no transparent colour; otherwise it
    holds True for every visible pixel and False for every transparent one.
    Transparent pixels keep the value 0.
    """

    width: int
    height: int
    pixels: list[int]
    mask: list[bool] | None = None


def _atoi(token: str) -> int:
    match = _ATOI.match(token)
    return int(match.group(1)) if match else 0


def split_words(text: str) -> list[str]:
    """Split on runs of spaces and tabs; other whitespace stays inside words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _blank_comments(text: str, opener: str, closer: str) -> str:
    pieces: list[str] = []
    in_quote = False
    position = 0
    while position < len(text):
        char = text[position]
        if char == '"':
            in_quote = not in_quote
        elif not in_quote and text.startswith(opener, position):
            end = text.find(closer, position + len(opener))
            stop = len(text) if end == -1 else end + len(closer)
            pieces.append(" " * (stop - position))
            position = stop
            continue
        pieces.append(char)
        position += 1
    return "".join(pieces)


def strip_comments(text: str) -> str:
    """Blank out C comments lying outside double quotes, keeping the text's length.

    Block comments are removed first, then line comments together with the
    newline that ends them.
    """
    return _blank_comments(_blank_comments(text, "/*", "*/"), "//", "\n")


def _shifts_for(depth: int) -> tuple[int, ...]:
    if depth >= 24:
        return ()
    try:
        return _SHIFTS_BY_DEPTH[depth]
    except KeyError:
        raise XpmError(f"no TrueColor layout for depth {depth}") from None


def parse_xpm(lines: Iterable[str], depth: int = 24) -> XpmImage:
    """Decode the strings of an XPM image: header, colour lines, then pixel rows."""
    source = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError(f"missing {what}") from None

    header = split_words(next_line("header"))
    if len(header) < 4:
        raise XpmError("header needs width, height, colour count and characters per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("header values must be positive")
    shifts = _shifts_for(depth)

    # Short colour keys overwrite each other; longer keys keep the first definition.
    last_wins = cpp <= 2
    palette: dict[str, int] = {}
    has_transparency = False
    for _ in range(ncolors):
        line = next_line("colour line")
        words = split_words(line[cpp:])
        try:
            at = words.index("c") + 1
        except ValueError:
            raise XpmError(f"colour line without 'c' key: {line!r}") from None
        if at >= len(words):
            raise XpmError(f"colour line without a colour: {line!r}")
        end = words[at + 1] if at + 1 < len(words) else None
        rgb = text_to_rgb(words[at], end)
        if rgb == TRANSPARENT:
            has_transparency = True
        value = rgb if rgb < 0 else visual_color(rgb, depth, shifts)
        key = line[:cpp]
        if last_wins:
            palette[key] = value
        else:
            palette.setdefault(key, value)

    pixels: list[int] = []
    visible: list[bool] = []
    row_chars = width * cpp
    for _ in range(height):
        line = next_line("pixel row")
        if len(line) < row_chars:
            raise XpmError(f"pixel row too short: {line!r}")
        for start in range(0, row_chars, cpp):
            color = palette.get(line[start:start + cpp], 0)
            if color == TRANSPARENT:
                pixels.append(0)
                visible.append(False)
            else:
                pixels.append(color & 0xFFFFFFFF)
                visible.append(True)
    return XpmImage(width, height, pixels, visible if has_transparency else None)


def xpm_from_data(lines: Iterable[str], depth: int = 24) -> XpmImage:
    """Decode an XPM image given as its list of strings."""
    return parse_xpm(list(lines), depth)


def load_xpm(path: str | PathLike[str], depth: int = 24) -> XpmImage:
    """Read an XPM file: comments are dropped and the quoted strings decoded."""
    with open(path, encoding="utf-8", errors="replace") as handle:
        text = handle.read()
    return parse_xpm(_QUOTED.findall(strip_comments(text)), depth)