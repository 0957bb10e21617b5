"""Distance and equality in 3D coordinate space (x, y, z at indexes 0, 1, 2)."""

from __future__ import annotations

import math
from collections.abc import Sequence

from planegeom.vector import vector_dot


def _div(num: float, den: float) -> float:
    """Divide with IEEE semantics instead of raising on a zero divisor."""
    if den != 0:
        return num / den
    if num == 0 or math.isnan(num) or math.isnan(den):
        return math.nan
    return math.copysign(math.inf, num) * math.copysign(1.0, den)


def distance(point1: Sequence[float], point2: Sequence[float]) -> float:
    """Return the distance between two coordinates, in 2D if either Z is NaN."""
    dx = point1[0] - point2[0]
    dy = point1[1] - point2[1]
    if math.isnan(point1[2]) or math.isnan(point2[2]):
        return math.sqrt(dx * dx + dy * dy)
    dz = point1[2] - point2[2]
    return math.sqrt(dx * dx + dy * dy + dz * dz)


def equals(point1: Sequence[float], other: Sequence[float]) -> bool:
    """Return whether two coordinates are equal in 3D; NaN Z values match."""
    return (
        point1[0] == other[0]
        and point1[1] == other[1]
        and (point1[2] == other[2] or (math.isnan(point1[2]) and math.isnan(other[2])))
    )


def distance_point_to_line(
    point: Sequence[float], line_start: Sequence[float], line_end: Sequence[float]
) -> float:
    """Return the distance from a point to the segment line_start-line_end."""
    if equals(line_start, line_end):
        return distance(point, line_start)

    seg = [line_end[i] - line_start[i] for i in range(3)]
    len2 = seg[0] * seg[0] + seg[1] * seg[1] + seg[2] * seg[2]
    if math.isnan(len2):
        raise ValueError("Ordinates must not be NaN")
    r = (
        (point[0] - line_start[0]) * seg[0]
        + (point[1] - line_start[1]) * seg[1]
        + (point[2] - line_start[2]) * seg[2]
    ) / len2

    if r <= 0.0:
        return distance(point, line_start)
    if r >= 1.0:
        return distance(point, line_end)

    dx, dy, dz = (point[i] - (line_start[i] + r * seg[i]) for i in range(3))
    return math.sqrt(dx * dx + dy * dy + dz * dz)


def distance_line_to_line(
    line1_start: Sequence[float],
    line1_end: Sequence[float],
    line2_start: Sequence[float],
    line2_end: Sequence[float],
) -> float:
    """Return the distance between two 3D segments."""
    if equals(line1_start, line1_end):
        return distance_point_to_line(line1_start, line2_start, line2_end)
    if equals(line2_start, line1_end):
        return distance_point_to_line(line2_start, line1_start, line1_end)

    a = vector_dot(line1_start, line1_end, line1_start, line1_end)
    b = vector_dot(line1_start, line1_end, line2_start, line2_end)
    c = vector_dot(line2_start, line2_end, line2_start, line2_end)
    d = vector_dot(line1_start, line1_end, line2_start, line1_start)
    e = vector_dot(line2_start, line2_end, line2_start, line1_start)

    denom = a * c - b * b
    if math.isnan(denom):
        raise ValueError("Ordinates must not be NaN")

    if denom <= 0.0:
        # Parallel lines: fix s at 0 and use the larger denominator for t.
        s = 0.0
        t = _div(d, b) if b > c else _div(e, c)
    else:
        s = (b * e - c * d) / denom
        t = (a * e - b * d) / denom

    if s < 0:
        return distance_point_to_line(line1_start, line2_start, line2_end)
    if s > 1:
        return distance_point_to_line(line1_end, line2_start, line2_end)
    if t < 0:
        return distance_point_to_line(line2_start, line1_start, line1_end)
    if t > 1:
        return distance_point_to_line(line2_end, line1_start, line1_end)

    closest1 = tuple(line1_start[i] + s * (line1_end[i] - line1_start[i]) for i in range(3))
    closest2 = tuple(line2_start[i] + t * (line2_end[i] - line2_start[i]) for i in range(3))
    return distance(closest1, closest2)