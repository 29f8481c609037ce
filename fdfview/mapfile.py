"""Reading .fdf height maps into a grid of scaled vertices."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from os import PathLike

from .drawing import HEIGHT, WIDTH, IsoPoint

_ATOI = re.compile(r"\s*([+-]?\d+)")


class MapError(ValueError):
    """Raised when a map's text cannot be turned into a grid."""


@dataclass
class Vertex:
    """A map point in world coordinates, already multiplied by the scale."""

    x: int
    y: int
    z: int


@dataclass
class Transform:
    """View settings: translation, current scale and the scale last applied."""

    tx: int = WIDTH // 2
    ty: int = HEIGHT // 2
    scale: int = 10
    prev: int = 10


@dataclass
class HeightMap:
    """A rectangular grid of vertices stored row by row."""

    vertices: list[Vertex]
    line_len: int
    lines: int
    transform: Transform = field(default_factory=Transform)
    iso: list[IsoPoint] = field(default_factory=list)

    @property
    def vertex_count(self) -> int:
        """Number of vertices in the grid."""
        return self.lines * self.line_len


def _atoi(token: str) -> int:
    match = _ATOI.match(token)
    return int(match.group(1)) if match else 0


def parse_map(text: str, transform: Transform | None = None) -> HeightMap:
    """Build a height map from the text of an .fdf file.

    Each line holds space-separated heights; anything after a leading integer
    (such as a ",0xRRGGBB" colour) is ignored. All lines must hold the same
    number of values.
    """
    if transform is None:
        transform = Transform()
    rows = text.splitlines()
    if not rows:
        raise MapError("map is empty")
    grid = [row.split() for row in rows]
    line_len = len(grid[0])
    if any(len(words) != line_len for words in grid[1:]):
        raise MapError("map must be rectangle")
    scale = transform.scale
    vertices = [
        Vertex(column * scale, row * scale, _atoi(word) * scale)
        for row, words in enumerate(grid)
        for column, word in enumerate(words)
    ]
    return HeightMap(vertices, line_len, len(grid), transform)


def load_map(path: str | PathLike[str]) -> HeightMap:
    """Read and parse an .fdf file."""
    with open(path, encoding="utf-8", errors="replace") as handle:
        return parse_map(handle.read())