import pytest

from planegeom.intersection import (
    IntersectionType,
    LineIntersection,
    NonRobustLineIntersector,
    line_intersects_line,
    point_intersects_line,
)

NONE = IntersectionType.NO_INTERSECTION
POINT = IntersectionType.POINT_INTERSECTION
COLLINEAR = IntersectionType.COLLINEAR_INTERSECTION

POINT_ON_LINE_CASES = [
    ((0, 0), (-1, 0), (1, 0), True),
    ((0, 1), (-1, 1), (1, 1), True),
    ((0, 0), (-1, 1), (1, 0), False),
    ((0, 0), (-1, -1), (1, 1), True),
    ((-1, -1), (-1, -1), (1, 1), True),
    ((1, 1), (-1, -1), (1, 1), True),
]

LINE_ON_LINE_CASES = [
    ("A perfect X at 0", (-1, 0), (1, 0), (0, -1), (0, 1), POINT, [(0, 0)]),
    ("A perfect X at 15, 15", (10, 10), (20, 20), (10, 20), (20, 10), POINT, [(15, 15)]),
    (
        "Same coordinates opposite vectors",
        (10, 10), (20, 20), (20, 20), (10, 10),
        COLLINEAR, [(10, 10), (20, 20)],
    ),
    (
        "Parallel lines opposite directions, within bounds",
        (10, 10), (20, 20), (30, 20), (20, 10),
        NONE, [],
    ),
    (
        "Parallel lines opposite directions, disjointed bounds",
        (10, 10), (20, 20), (-30, -20), (-20, -10),
        NONE, [],
    ),
    ("Disjointed lines, line2 within line1 bounds", (1, 1), (5, 5), (0, 0), (1, 2), NONE, []),
    ("Disjointed lines, line2 partly outside", (0, 0), (5, 5), (0, 1), (5, 6), NONE, []),
    ("Collinear disjointed lines", (1, 1), (5, 5), (-1, -1), (-5, -5), NONE, []),
    ("Shared start, diverging", (0, 0), (5, 5), (0, 0), (4, 5), POINT, [(0, 0)]),
    ("Connected line1 -> line2", (0, 0), (5, 5), (5, 5), (0, 1), POINT, [(5, 5)]),
    ("line2 start on line1", (0, 0), (5, 5), (1, 1), (4, 5), POINT, [(1, 1)]),
    ("line2 end on line1", (0, 0), (5, 5), (0, 1), (4, 4), POINT, [(4, 4)]),
    ("line1 start on line2", (1, 1), (4, 5), (0, 0), (5, 5), POINT, [(1, 1)]),
    ("line1 end on line2", (0, 1), (4, 4), (0, 0), (5, 5), POINT, [(4, 4)]),
]


@pytest.mark.parametrize("point, start, end, expected", POINT_ON_LINE_CASES)
def test_point_intersects_line(point, start, end, expected):
    assert point_intersects_line(point, start, end) is expected


@pytest.mark.parametrize("point, start, end, expected", POINT_ON_LINE_CASES)
def test_intersector_point_on_line(point, start, end, expected):
    result = NonRobustLineIntersector().point_on_line(point, start, end)
    assert result.intersects is expected


@pytest.mark.parametrize(
    "desc, p1, p2, p3, p4, expected_type, expected_points", LINE_ON_LINE_CASES
)
def test_line_intersects_line(desc, p1, p2, p3, p4, expected_type, expected_points):
    result = line_intersects_line(p1, p2, p3, p4)
    assert result.type is expected_type, desc
    assert len(result.points) == len(expected_points), desc
    for got, want in zip(result.points, expected_points):
        assert got == pytest.approx(want, rel=1e-3), desc


def test_proper_intersection_in_interior():
    result = line_intersects_line((-1, 0), (1, 0), (0, -1), (0, 1))
    assert result.is_proper is True


def test_intersection_at_endpoint_is_not_proper():
    result = line_intersects_line((0, 0), (5, 5), (5, 5), (0, 1))
    assert result.is_proper is False
    assert result.points == ((5.0, 5.0),)


def test_point_on_line_endpoint_is_not_proper():
    result = NonRobustLineIntersector().point_on_line((1, 1), (-1, -1), (1, 1))
    assert result.type is POINT
    assert result.is_proper is False
    assert result.points == ((1, 1),)


def test_point_on_line_interior_is_proper():
    result = NonRobustLineIntersector().point_on_line((0, 0), (-1, -1), (1, 1))
    assert result.is_proper is True


def test_no_intersection_has_no_points():
    result = line_intersects_line((1, 1), (5, 5), (-1, -1), (-5, -5))
    assert result == LineIntersection(NONE)
    assert result.points == ()
    assert result.intersects is False


def test_collinear_overlap_is_clipped_to_both_segments():
    result = line_intersects_line((0, 0), (10, 0), (5, 0), (15, 0))
    assert result.type is COLLINEAR
    assert result.points == ((5, 0), (10, 0))


def test_collinear_inner_segment():
    result = line_intersects_line((0, 0), (10, 0), (7, 0), (3, 0))
    assert result.type is COLLINEAR
    assert result.points == ((3, 0), (7, 0))


def test_point_on_degenerate_segment():
    assert point_intersects_line((1, 1), (1, 1), (1, 1)) is True


def test_point_off_segment_extension():
    assert point_intersects_line((2, 2), (-1, -1), (1, 1)) is False