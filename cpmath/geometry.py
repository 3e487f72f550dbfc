"""Plane geometry helpers."""

from collections.abc import Iterable


def polygon_area(xs: Iterable[float], ys: Iterable[float]) -> float:
    """Return the area of a simple polygon given its vertex coordinates in order.

    Uses the shoelace formula; the vertices may be listed clockwise or
    counter-clockwise.
    """
    xs = [float(x) for x in xs]
    ys = [float(y) for y in ys]
    if len(xs) != len(ys):
        raise ValueError("xs and ys must have the same length")
    points = list(zip(xs, ys))
    if not points:
        return 0.0
    previous = points[-1:] + points[:-1]
    total = sum(
        (xj + xi) * (yj - yi) for (xj, yj), (xi, yi) in zip(previous, points)
    )
    return abs(total / 2.0)