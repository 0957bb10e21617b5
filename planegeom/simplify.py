"""Douglas-Peucker simplification of flat coordinate arrays."""

from __future__ import annotations

from collections.abc import Sequence


def simplify_flat_coords(
    flat_coords: Sequence[float], threshold: float, stride: int
) -> list[int]:
    """Simplify a 2D line and return the indexes of the points kept.

    Indexes are point indexes: point ``i`` has X at ``flat_coords[i * stride]``
    and Y at ``flat_coords[i * stride + 1]``. A point is kept when its distance
    from the current segment exceeds ``threshold``.
    """
    if stride <= 0:
        raise ValueError(f"stride must be positive, got {stride}")
    size = len(flat_coords) // stride
    if size < 3:
        return list(range(size))

    def point(i: int) -> Sequence[float]:
        return flat_coords[i * stride : i * stride + stride]

    keep = [False] * size
    keep[0] = keep[-1] = True
    limit = threshold * threshold
    stack = [(0, size - 1)]
    while stack:
        start, end = stack.pop()
        a, b = point(start), point(end)
        max_dist = 0.0
        max_index = 0
        for i in range(start + 1, end):
            dist = _distance_from_segment_squared(a, b, point(i))
            if dist > max_dist:
                max_dist = dist
                max_index = i
        if max_dist > limit:
            keep[max_index] = True
            stack.append((start, max_index))
            stack.append((max_index, end))

    return [i for i, kept in enumerate(keep) if kept]


def _distance_from_segment_squared(
    a: Sequence[float], b: Sequence[float], p: Sequence[float]
) -> float:
    x, y = a[0], a[1]
    dx = b[0] - x
    dy = b[1] - y
    if dx != 0 or dy != 0:
        t = ((p[0] - x) * dx + (p[1] - y) * dy) / (dx * dx + dy * dy)
        if t > 1:
            x, y = b[0], b[1]
        elif t > 0:
            x += dx * t
            y += dy * t
    dx = p[0] - x
    dy = p[1] - y
    return dx * dx + dy * dy