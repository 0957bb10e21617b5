"""Angular relationship between points and vectors."""

from __future__ import annotations

import enum


class Orientation(enum.IntEnum):
    """Orientation of a point or vector relative to a base vector."""

    CLOCKWISE = -1
    COLLINEAR = 0
    COUNTER_CLOCKWISE = 1

    def __str__(self) -> str:
        return _LABELS[self]


_LABELS = {
    Orientation.CLOCKWISE: "Clockwise",
    Orientation.COLLINEAR: "Collinear",
    Orientation.COUNTER_CLOCKWISE: "CounterClockwise",
}