"""Internal Bezier curve sampling.

This is an internal module containing helpers for the outline pen.
Not intended for public use.

Curves are sampled at a fixed number of evenly spaced parameter steps per
segment, so a glyph's point density depends only on the resolution setting.
"""

from texttango.domain import Point2D


def sample_quadratic(p0: Point2D, p1: Point2D, p2: Point2D, divisions: int) -> list[Point2D]:
    """Sample a quadratic Bezier segment.

    Args:
        p0: Start point (already emitted by the caller)
        p1: Control point
        p2: End point
        divisions: Number of steps along the curve

    Returns:
        divisions points for t in (0, 1], ending exactly at p2
    """
    points: list[Point2D] = []
    for step in range(1, divisions + 1):
        t = step / divisions
        u = 1.0 - t
        x = u * u * p0[0] + 2 * u * t * p1[0] + t * t * p2[0]
        y = u * u * p0[1] + 2 * u * t * p1[1] + t * t * p2[1]
        points.append((x, y))

    points[-1] = (float(p2[0]), float(p2[1]))
    return points


def sample_cubic(
    p0: Point2D, p1: Point2D, p2: Point2D, p3: Point2D, divisions: int
) -> list[Point2D]:
    """Sample a cubic Bezier segment.

    Args:
        p0: Start point (already emitted by the caller)
        p1: First control point
        p2: Second control point
        p3: End point
        divisions: Number of steps along the curve

    Returns:
        divisions points for t in (0, 1], ending exactly at p3
    """
    points: list[Point2D] = []
    for step in range(1, divisions + 1):
        t = step / divisions
        u = 1.0 - t
        a = u * u * u
        b = 3 * u * u * t
        c = 3 * u * t * t
        d = t * t * t
        x = a * p0[0] + b * p1[0] + c * p2[0] + d * p3[0]
        y = a * p0[1] + b * p1[1] + c * p2[1] + d * p3[1]
        points.append((x, y))

    points[-1] = (float(p3[0]), float(p3[1]))
    return points
