"""Radial ordering of coordinates around a focal point."""

from __future__ import annotations

from collections.abc import Sequence
from fractions import Fraction
from functools import cmp_to_key

from planegeom.orientation import Orientation


def _orientation_index(
    origin: Sequence[float], end: Sequence[float], point: Sequence[float]
) -> Orientation:
    """Return the exact orientation of ``point`` relative to the vector origin->end."""
    ox, oy = Fraction(origin[0]), Fraction(origin[1])
    det = (Fraction(end[0]) - ox) * (Fraction(point[1]) - oy) - (
        Fraction(end[1]) - oy
    ) * (Fraction(point[0]) - ox)
    return Orientation((det > 0) - (det < 0))


def radial_less(
    focal_point: Sequence[float], v1: Sequence[float], v2: Sequence[float]
) -> bool:
    """Return whether ``v1`` sorts before ``v2`` radially around ``focal_point``.

    Counter-clockwise is greater and clockwise is lesser. When the two are
    collinear with the focal point, the nearer one is lesser.
    """
    orient = _orientation_index(focal_point, v1, v2)
    if orient == Orientation.COUNTER_CLOCKWISE:
        return False
    if orient == Orientation.CLOCKWISE:
        return True

    dxp = v1[0] - focal_point[0]
    dyp = v1[1] - focal_point[1]
    dxq = v2[0] - focal_point[0]
    dyq = v2[1] - focal_point[1]
    return dxp * dxp + dyp * dyp < dxq * dxq + dyq * dyq


def radial_sort(
    flat_coords: Sequence[float], stride: int, focal_point: Sequence[float]
) -> list[float]:
    """Return the coordinates of a flat array sorted radially around ``focal_point``.

    Each coordinate keeps all of its ``stride`` ordinates; X and Y are the
    first two.
    """
    if stride < 2:
        raise ValueError(f"stride must be at least 2, got {stride}")
    if len(flat_coords) % stride:
        raise ValueError(
            f"length {len(flat_coords)} is not a multiple of stride {stride}"
        )

    def compare(a: Sequence[float], b: Sequence[float]) -> int:
        if radial_less(focal_point, a, b):
            return -1
        if radial_less(focal_point, b, a):
            return 1
        return 0

    points = [
        tuple(flat_coords[i : i + stride]) for i in range(0, len(flat_coords), stride)
    ]
    ordered = sorted(points, key=cmp_to_key(compare))
    return [value for point in ordered for value in point]