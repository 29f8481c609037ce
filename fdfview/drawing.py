"""Pixel canvas, rounding and straight-line drawing in screen space."""

from __future__ import annotations

import math
from array import array
from dataclasses import dataclass

WIDTH = 800
HEIGHT = 600

VERTEX_COLOR = 0xDD9090
EDGE_COLOR = 0xA2D8A0
BACKGROUND_COLOR = 0x000000


@dataclass
class IsoPoint:
    """A point of the projected map, in floating-point screen coordinates."""

    x: float
    y: float


def round_half_up(n: float) -> int:
    """Round by adding one half and truncating toward zero."""
    return math.trunc(n + 0.5)


class Canvas:
    """A 32-bit pixel buffer of fixed size, row by row from the top left."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("canvas size must be positive")
        self.width = width
        self.height = height
        self.pixels = array("I", [0]) * (width * height)

    def put_pixel(self, point: IsoPoint, color: int) -> None:
        """Set the pixel under ``point``; points off the canvas are ignored."""
        if not (0 <= point.y < self.height and point.x >= 0):
            return
        column = round_half_up(point.x)
        row = round_half_up(point.y)
        if column >= self.width or row >= self.height:
            return
        self.pixels[row * self.width + column] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour stored at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        return self.pixels[y * self.width + x]

    def clear(self, color: int = BACKGROUND_COLOR) -> None:
        """Fill the whole canvas with one colour."""
        self.pixels = array("I", [color & 0xFFFFFFFF]) * (self.width * self.height)


def draw_line(canvas: Canvas, a: IsoPoint, b: IsoPoint, color: int = EDGE_COLOR) -> None:
    """Draw a straight line from ``a`` towards ``b`` by stepping along the longer axis.

    The start point itself is not painted; each step advances first and then paints.
    """
    dx = b.x - a.x
    dy = b.y - a.y
    longest = max(abs(dx), abs(dy))
    if longest == 0:
        return
    x_step = dx / longest
    y_step = dy / longest
    x, y = a.x, a.y
    for _ in range(math.ceil(longest)):
        x += x_step
        y += y_step
        canvas.put_pixel(IsoPoint(x, y), color)