"""Isometric projection of a height map onto the screen."""

from __future__ import annotations

import math

from .drawing import IsoPoint
from .mapfile import HeightMap, Transform, Vertex

_ANGLE = 0.523599


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def rescale(height_map: HeightMap) -> None:
    """Bring every vertex from the previously applied scale to the current one."""
    transform = height_map.transform
    for vertex in height_map.vertices:
        vertex.x = _trunc_div(vertex.x, transform.prev) * transform.scale
        vertex.y = _trunc_div(vertex.y, transform.prev) * transform.scale
        vertex.z = _trunc_div(vertex.z, transform.prev) * transform.scale
    transform.prev = transform.scale


def project_vertex(vertex: Vertex, transform: Transform) -> IsoPoint:
    """Project one world vertex to screen coordinates, shifted by the translation."""
    x = (vertex.x - vertex.y) * math.cos(_ANGLE) + transform.tx
    y = (vertex.x + vertex.y) * math.sin(_ANGLE) - vertex.z + transform.ty
    return IsoPoint(x, y)


def to_iso(height_map: HeightMap) -> list[IsoPoint]:
    """Rescale the map and replace its projected points; return them."""
    rescale(height_map)
    height_map.iso = [
        project_vertex(vertex, height_map.transform) for vertex in height_map.vertices
    ]
    return height_map.iso