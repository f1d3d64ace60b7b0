"""Planar geometry helpers for outlines and footprints.

This module provides the 2D utilities the outline and base stages share:
- Signed area and winding tests
- Point-in-polygon testing (ray casting)
- Loop cleanup (closing duplicates, micro-segments)
- Footprint generators (rounded rectangle, ellipse)

All functions are pure and operate on lists of (x, y) tuples in a Y-up
coordinate system.
"""

import math

from texttango.core._bezier import sample_quadratic
from texttango.domain import Point2D


def signed_area(points: list[Point2D]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    Args:
        points: Polygon vertices

    Returns:
        Positive for counter-clockwise loops, negative for clockwise loops,
        0.0 for degenerate input.

    Examples:
        >>> signed_area([(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)])
        1.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        x1, y1 = points[i]
        x2, y2 = points[(i + 1) % n]
        area += x1 * y2 - x2 * y1

    return area / 2.0


def winding_sum(points: list[Point2D]) -> float:
    """Edge sum Σ (x2 - x1)(y2 + y1) over the closed loop.

    Equals -2 * signed_area, so with Y pointing up a negative sum means the
    loop runs counter-clockwise.
    """
    total = 0.0
    n = len(points)
    for i in range(n):
        x1, y1 = points[i]
        x2, y2 = points[(i + 1) % n]
        total += (x2 - x1) * (y2 + y1)
    return total


def is_counter_clockwise(points: list[Point2D]) -> bool:
    """True if the loop winds counter-clockwise (Y up)."""
    return winding_sum(points) < 0


def orient_loop(points: list[Point2D], counter_clockwise: bool) -> list[Point2D]:
    """Return the loop wound in the requested direction.

    Args:
        points: Loop vertices
        counter_clockwise: Desired winding

    Returns:
        The same points, reversed if needed
    """
    if is_counter_clockwise(points) != counter_clockwise:
        return list(reversed(points))
    return list(points)


def point_in_polygon(point: Point2D, polygon: list[Point2D]) -> bool:
    """Determine if a point is inside a polygon using ray casting.

    Casts a horizontal ray to the right and counts edge crossings.

    Args:
        point: The point to test
        polygon: Polygon vertices

    Returns:
        True if point is inside polygon, False otherwise
    """
    n = len(polygon)
    if n < 3:
        return False

    inside = False
    x, y = point
    j = n - 1

    for i in range(n):
        xi, yi = polygon[i]
        xj, yj = polygon[j]
        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside
        j = i

    return inside


def drop_closing_duplicate(points: list[Point2D], tolerance: float) -> list[Point2D]:
    """Remove a trailing point that repeats the first one.

    Args:
        points: Loop vertices
        tolerance: Per-axis distance under which the points are equal

    Returns:
        Points without an explicit closing vertex
    """
    if len(points) < 2:
        return list(points)

    first, last = points[0], points[-1]
    if abs(first[0] - last[0]) < tolerance and abs(first[1] - last[1]) < tolerance:
        return list(points[:-1])
    return list(points)


def remove_short_segments(points: list[Point2D], min_segment_sq: float) -> list[Point2D]:
    """Drop points closer than sqrt(min_segment_sq) to the previous kept point.

    The comparison starts from the loop's last point, so a first point that
    coincides with the last one is dropped as well.

    Args:
        points: Loop vertices
        min_segment_sq: Squared distance threshold

    Returns:
        Cleaned vertices, or an empty list if fewer than 3 remain
    """
    if len(points) < 3:
        return []

    result: list[Point2D] = []
    last = points[-1]
    for current in points:
        dx = current[0] - last[0]
        dy = current[1] - last[1]
        if dx * dx + dy * dy > min_segment_sq:
            result.append(current)
            last = current

    return result if len(result) >= 3 else []


def rounded_rectangle(
    width: float, depth: float, radius: float, resolution: int
) -> list[Point2D]:
    """Rectangle centered on the origin with quadratic corner arcs.

    Each corner is a quadratic curve whose control point is the sharp
    corner. The radius is clamped to half the smaller side.

    Args:
        width: Size along X
        depth: Size along Y
        radius: Corner radius
        resolution: Samples per corner curve

    Returns:
        Counter-clockwise loop
    """
    r = max(0.0, min(radius, width / 2.0, depth / 2.0))
    x = -width / 2.0
    y = -depth / 2.0

    if r == 0.0:
        return [(x, y), (x + width, y), (x + width, y + depth), (x, y + depth)]

    points: list[Point2D] = [(x + r, y), (x + width - r, y)]
    points += sample_quadratic((x + width - r, y), (x + width, y), (x + width, y + r), resolution)
    points.append((x + width, y + depth - r))
    points += sample_quadratic(
        (x + width, y + depth - r), (x + width, y + depth), (x + width - r, y + depth), resolution
    )
    points.append((x + r, y + depth))
    points += sample_quadratic((x + r, y + depth), (x, y + depth), (x, y + depth - r), resolution)
    points.append((x, y + r))
    points += sample_quadratic((x, y + r), (x, y), (x + r, y), resolution)
    return points


def ellipse(radius_x: float, radius_y: float, segments: int) -> list[Point2D]:
    """Ellipse centered on the origin.

    Args:
        radius_x: Semi-axis along X
        radius_y: Semi-axis along Y
        segments: Number of vertices

    Returns:
        Counter-clockwise loop
    """
    return [
        (
            radius_x * math.cos(2.0 * math.pi * i / segments),
            radius_y * math.sin(2.0 * math.pi * i / segments),
        )
        for i in range(segments)
    ]
