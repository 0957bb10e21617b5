# planegeom

This is a small geometry library for flat coordinate data. It has no
dependencies. Every coordinate is a plain sequence of floats. X and Y come
first, then Z where a function needs it. Many functions take a "flat" array,
with all coordinates laid end to end, together with a `stride`. The stride is
the number of ordinates in each coordinate.

## Installation

```
pip install planegeom
```

To run the test suite:

```
pip install "planegeom[test]"
pytest
```

## Modules

### `planegeom.orientation`

`Orientation` is an `IntEnum` with three members: `CLOCKWISE` (-1),
`COLLINEAR` (0) and `COUNTER_CLOCKWISE` (1). `str()` of a member gives
`"Clockwise"`, `"Collinear"` or `"CounterClockwise"`.

### `planegeom.location`

`Location` is an `IntEnum` with four members: `INTERIOR` (0), `BOUNDARY` (1),
`EXTERIOR` (2) and `NONE` (3). `str()` gives the capitalised name. `symbol()`
gives `"i"`, `"b"`, `"e"` or `"-"`.

### `planegeom.point_centroid`

These functions find the centroid of a set of points by averaging their X and
Y ordinates. The result is an `(x, y)` tuple.

- `points_centroid(point, *more)` takes one or more points.
- `points_centroid_flat(stride, flat_coords)` takes a flat array. It raises
  `ValueError` if `stride` is less than 2.
- `PointCentroidCalculator` collects points one at a time:
  - `add_coord(coord)` adds a point.
  - `centroid()` returns the current centroid. It returns `(nan, nan)` if no
    point has been added yet.

### `planegeom.simplify`

`simplify_flat_coords(flat_coords, threshold, stride)` simplifies a 2D line
with the Douglas-Peucker algorithm.

- It returns the indexes of the points it keeps. These are point indexes,
  not positions in the array.
- The first point and the last point are always kept.
- A line with fewer than three points is returned whole.
- It raises `ValueError` if `stride` is not positive.

### `planegeom.vector`

These functions work on 3D vectors:

- `vector_dot(v1_start, v1_end, v2_start, v2_end)` returns the dot product of
  the two vectors given by their start and end points.
- `vector_length(vector)` returns the length of a vector measured from the
  origin.
- `vector_normalize(vector)` returns the unit vector as a 3-tuple.

### `planegeom.xyz`

These functions measure in 3D:

- `distance(p1, p2)` returns the distance between two points. If either Z is
  NaN, it measures in 2D instead.
- `equals(p1, p2)` compares all three ordinates. Two NaN Z values count as
  equal.
- `distance_point_to_line(point, start, end)` returns the distance from a
  point to a segment.
- `distance_line_to_line(l1_start, l1_end, l2_start, l2_end)` returns the
  distance between two segments.

The last two functions raise `ValueError` when a NaN in the segment
ordinates makes the calculation undefined.

### `planegeom.radial`

These functions order points around a focal point.

- `radial_less(focal_point, v1, v2)` tells whether `v1` comes before `v2`.
  Orientation is exact and decides first: clockwise is lesser. When the two
  points are collinear with the focal point, the nearer one is lesser.
- `radial_sort(flat_coords, stride, focal_point)` returns a new flat list
  sorted in that order. It raises `ValueError` if `stride` is less than 2 or
  does not divide the length of the array.

### `planegeom.intersection`

This module tests intersections between 2D segments.

- `NonRobustLineIntersector` uses line equations:
  - `point_on_line(point, start, end)` tests whether a point lies on a
    segment.
  - `line_on_line(l1_start, l1_end, l2_start, l2_end)` intersects two
    segments.
- Both methods return a `LineIntersection`, which has these fields:
  - `type`: an `IntersectionType`, one of `NO_INTERSECTION`,
    `POINT_INTERSECTION` or `COLLINEAR_INTERSECTION`.
  - `points`: no points, one point, or the two ends of the overlap.
  - `is_proper`: whether the intersection point is away from every segment
    end.
  - `intersects`: true for any type except `NO_INTERSECTION`.
- `point_intersects_line(point, start, end)` returns a `bool`.
- `line_intersects_line(...)` returns a `LineIntersection`.

Both functions use the non-robust intersector.

## Examples

```python
from planegeom.point_centroid import points_centroid_flat
from planegeom.simplify import simplify_flat_coords
from planegeom.xyz import distance
from planegeom.radial import radial_sort
from planegeom.intersection import line_intersects_line

points_centroid_flat(2, [0, 0, 2, 0, 2, 2, 0, 2])     # (1.0, 1.0)

coords = [0, 0, 0, 1, -1, 2, 0, 3, 0, 4, 1, 4, 2, 4.5, 3, 4, 3.5, 4, 4, 4]
simplify_flat_coords(coords, 0.5, 2)                   # [0, 2, 4, 9]

distance([0, 0, 0], [10, 0, 0])                        # 10.0

radial_sort([10, 10, 20, 20, 20, 0, 30, 10, 0, 0, 1, 1], 2, [10, 10])
# [10, 10, 20, 20, 30, 10, 20, 0, 1, 1, 0, 0]

result = line_intersects_line([-1, 0], [1, 0], [0, -1], [0, 1])
result.type, result.points    # (IntersectionType.POINT_INTERSECTION, ((0.0, 0.0),))
```

## What it does not do

- There are no geometry object types such as polygons, line strings or
  rings. Every function works on plain coordinates.
- The only segment intersector is the non-robust one. For nearly parallel or
  extreme inputs, its floating-point results may be unreliable.