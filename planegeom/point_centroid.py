"""Centroid of a set of points: the average of their X and Y ordinates."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence


class PointCentroidCalculator:
    """Accumulates points and reports their centroid at any time."""

    def __init__(self) -> None:
        self._count = 0
        self._sum_x = 0.0
        self._sum_y = 0.0

    def add_coord(self, coord: Sequence[float]) -> None:
        """Add a coordinate; only its first two ordinates are used."""
        self._count += 1
        self._sum_x += coord[0]
        self._sum_y += coord[1]

    def centroid(self) -> tuple[float, float]:
        """Return the current centroid, or (nan, nan) if nothing was added."""
        if self._count == 0:
            return (math.nan, math.nan)
        return (self._sum_x / self._count, self._sum_y / self._count)


def _centroid_of(coords: Iterable[Sequence[float]]) -> tuple[float, float]:
    calc = PointCentroidCalculator()
    for coord in coords:
        calc.add_coord(coord)
    return calc.centroid()


def points_centroid(point: Sequence[float], *args: Sequence[float]) -> tuple[float, float]:
    """Return the centroid of one or more points."""
    return _centroid_of((point, *args))


def points_centroid_flat(stride: int, point_data: Sequence[float]) -> tuple[float, float]:
    """Return the centroid of the points in a flat coordinate array.

    X and Y are assumed to be the first two ordinates of each coordinate.
    """
    if stride < 2:
        raise ValueError(f"stride must be at least 2, got {stride}")
    return _centroid_of(
        point_data[i : i + stride] for i in range(0, len(point_data), stride)
    )