"""Vector operations in 3D coordinate space."""

from __future__ import annotations

import math
from collections.abc import Sequence


def vector_dot(
    v1_start: Sequence[float],
    v1_end: Sequence[float],
    v2_start: Sequence[float],
    v2_end: Sequence[float],
) -> float:
    """Return the dot product of the vectors v1_start->v1_end and v2_start->v2_end."""
    return sum((v1_end[i] - v1_start[i]) * (v2_end[i] - v2_start[i]) for i in range(3))


def vector_length(vector: Sequence[float]) -> float:
    """Return the length of the vector from the origin to ``vector``."""
    return math.sqrt(vector[0] * vector[0] + vector[1] * vector[1] + vector[2] * vector[2])


def vector_normalize(vector: Sequence[float]) -> tuple[float, float, float]:
    """Return the unit vector pointing from the origin towards ``vector``."""
    length = vector_length(vector)
    return (vector[0] / length, vector[1] / length, vector[2] / length)