"""Point-on-line and line-on-line intersection of 2D segments."""

from __future__ import annotations

import enum
import math
from collections.abc import Sequence
from dataclasses import dataclass, field

Coord2 = tuple[float, float]


class IntersectionType(enum.Enum):
    """Kind of intersection found between two segments."""

    NO_INTERSECTION = enum.auto()
    POINT_INTERSECTION = enum.auto()
    COLLINEAR_INTERSECTION = enum.auto()


@dataclass(frozen=True)
class LineIntersection:
    """Result of an intersection test.

    ``points`` is empty when there is no intersection, holds the single
    intersection point for a point intersection, and the start and end of the
    overlapping part for a collinear intersection.
    """

    type: IntersectionType
    points: tuple[Coord2, ...] = ()
    is_proper: bool = field(default=False, compare=False)

    @property
    def intersects(self) -> bool:
        return self.type is not IntersectionType.NO_INTERSECTION


_NONE = LineIntersection(IntersectionType.NO_INTERSECTION)


def _div(num: float, den: float) -> float:
    """Divide with IEEE semantics instead of raising on a zero divisor."""
    if den != 0:
        return num / den
    if num == 0 or math.isnan(num) or math.isnan(den):
        return math.nan
    return math.copysign(math.inf, num) * math.copysign(1.0, den)


def _xy(coord: Sequence[float]) -> Coord2:
    return (coord[0], coord[1])


def _equal_xy(a: Sequence[float], b: Sequence[float]) -> bool:
    return a[0] == b[0] and a[1] == b[1]


def _same_sign_and_non_zero(a: float, b: float) -> bool:
    return (a > 0 and b > 0) or (a < 0 and b < 0)


def _r_parameter(p1: Sequence[float], p2: Sequence[float], p: Sequence[float]) -> float:
    """Return the position of ``p`` along p1-p2 (0 at p1, 1 at p2)."""
    if abs(p2[0] - p1[0]) > abs(p2[1] - p1[1]):
        return _div(p[0] - p1[0], p2[0] - p1[0])
    return _div(p[1] - p1[1], p2[1] - p1[1])


class NonRobustLineIntersector:
    """Fast intersection using line equations, without robustness guarantees."""

    def point_on_line(
        self,
        point: Sequence[float],
        line_start: Sequence[float],
        line_end: Sequence[float],
    ) -> LineIntersection:
        """Test whether ``point`` lies on the segment line_start-line_end."""
        a1 = line_end[1] - line_start[1]
        b1 = line_start[0] - line_end[0]
        c1 = line_end[0] * line_start[1] - line_start[0] * line_end[1]

        if a1 * point[0] + b1 * point[1] + c1 != 0:
            return _NONE

        dist = _r_parameter(line_start, line_end, point)
        if dist < 0.0 or dist > 1.0:
            return _NONE

        proper = not (_equal_xy(point, line_start) or _equal_xy(point, line_end))
        return LineIntersection(
            IntersectionType.POINT_INTERSECTION, (_xy(point),), is_proper=proper
        )

    def line_on_line(
        self,
        line1_start: Sequence[float],
        line1_end: Sequence[float],
        line2_start: Sequence[float],
        line2_end: Sequence[float],
    ) -> LineIntersection:
        """Intersect the segment line1_start-line1_end with line2_start-line2_end."""
        # Line 1 as a1*x + b1*y + c1 = 0.
        a1 = line1_end[1] - line1_start[1]
        b1 = line1_start[0] - line1_end[0]
        c1 = line1_end[0] * line1_start[1] - line1_start[0] * line1_end[1]

        r3 = a1 * line2_start[0] + b1 * line2_start[1] + c1
        r4 = a1 * line2_end[0] + b1 * line2_end[1] + c1
        if r3 != 0 and r4 != 0 and _same_sign_and_non_zero(r3, r4):
            return _NONE

        a2 = line2_end[1] - line2_start[1]
        b2 = line2_start[0] - line2_end[0]
        c2 = line2_end[0] * line2_start[1] - line2_start[0] * line2_end[1]

        r1 = a2 * line1_start[0] + b2 * line1_start[1] + c2
        r2 = a2 * line1_end[0] + b2 * line1_end[1] + c2
        if r1 != 0 and r2 != 0 and _same_sign_and_non_zero(r1, r2):
            return _NONE

        denom = a1 * b2 - a2 * b1
        if denom == 0:
            return self._collinear(line1_start, line1_end, line2_start, line2_end)

        pa = ((b1 * c2 - b2 * c1) / denom, (a2 * c1 - a1 * c2) / denom)
        proper = not any(
            _equal_xy(pa, end) for end in (line1_start, line1_end, line2_start, line2_end)
        )
        return LineIntersection(
            IntersectionType.POINT_INTERSECTION, (pa,), is_proper=proper
        )

    @staticmethod
    def _collinear(
        line1_start: Sequence[float],
        line1_end: Sequence[float],
        line2_start: Sequence[float],
        line2_end: Sequence[float],
    ) -> LineIntersection:
        r3 = _r_parameter(line1_start, line1_end, line2_start)
        r4 = _r_parameter(line1_start, line1_end, line2_end)
        # Orient line 2 in the same direction as line 1.
        if r3 < r4:
            q3, t3, q4, t4 = line2_start, r3, line2_end, r4
        else:
            q3, t3, q4, t4 = line2_end, r4, line2_start, r3

        if t3 > 1 or t4 < 0:
            return _NONE

        pa = _xy(q3) if t3 > 0 else _xy(line1_start)
        pb = _xy(q4) if t4 < 1 else _xy(line1_end)
        return LineIntersection(IntersectionType.COLLINEAR_INTERSECTION, (pa, pb))


_DEFAULT = NonRobustLineIntersector()


def point_intersects_line(
    point: Sequence[float], line_start: Sequence[float], line_end: Sequence[float]
) -> bool:
    """Return whether ``point`` lies on the segment line_start-line_end."""
    return _DEFAULT.point_on_line(point, line_start, line_end).intersects


def line_intersects_line(
    line1_start: Sequence[float],
    line1_end: Sequence[float],
    line2_start: Sequence[float],
    line2_end: Sequence[float],
) -> LineIntersection:
    """Intersect two segments and describe where and how they meet."""
    return _DEFAULT.line_on_line(line1_start, line1_end, line2_start, line2_end)