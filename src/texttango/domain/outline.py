"""2D outline types for glyph cross-sections.

This module defines the planar types the pipeline works with before anything
becomes a solid:
- LoopKind: Whether a loop bounds filled area or a hole
- GlyphOutline: A closed loop of 2D points
- CrossSection: A set of loops filled with the even-odd rule
"""

from dataclasses import dataclass, field
from enum import Enum, auto

Point2D = tuple[float, float]


class LoopKind(Enum):
    """Role of a loop inside a cross-section.

    Outer loops wind counter-clockwise and holes clockwise, measured in the
    Y-up coordinate system fonts use.
    """

    OUTER = auto()
    HOLE = auto()


@dataclass
class GlyphOutline:
    """A closed loop of 2D points.

    The closing segment is implicit: the last point connects back to the
    first, so the first point is never repeated at the end.

    Attributes:
        points: Ordered loop vertices
        kind: Outer boundary or hole
    """

    points: list[Point2D]
    kind: LoopKind = LoopKind.OUTER
    _cached_area: float | None = field(default=None, repr=False, init=False)

    @property
    def is_hole(self) -> bool:
        """True if this loop bounds a hole."""
        return self.kind == LoopKind.HOLE

    def signed_area(self) -> float:
        """Calculate signed area using the shoelace formula.

        Positive for counter-clockwise loops, negative for clockwise loops.
        Result is cached.

        Returns:
            Signed area of the loop
        """
        if self._cached_area is not None:
            return self._cached_area

        n = len(self.points)
        if n < 3:
            self._cached_area = 0.0
            return 0.0

        area = 0.0
        for i in range(n):
            x1, y1 = self.points[i]
            x2, y2 = self.points[(i + 1) % n]
            area += x1 * y2 - x2 * y1

        self._cached_area = area / 2.0
        return self._cached_area

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate the bounding box of the loop.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if not self.points:
            return (0.0, 0.0, 0.0, 0.0)

        xs = [p[0] for p in self.points]
        ys = [p[1] for p in self.points]
        return (min(xs), min(ys), max(xs), max(ys))

    def contains_point(self, x: float, y: float) -> bool:
        """Check if a point is inside the loop using ray casting.

        Args:
            x: X coordinate of point to test
            y: Y coordinate of point to test

        Returns:
            True if the point is inside the loop
        """
        n = len(self.points)
        if n < 3:
            return False

        inside = False
        j = n - 1
        for i in range(n):
            xi, yi = self.points[i]
            xj, yj = self.points[j]
            if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
                inside = not inside
            j = i

        return inside

    def scaled(self, factor: float) -> "GlyphOutline":
        """Return a copy with every coordinate multiplied by factor."""
        return GlyphOutline(
            points=[(x * factor, y * factor) for x, y in self.points],
            kind=self.kind,
        )


@dataclass
class CrossSection:
    """A fillable 2D region made of one or more closed loops.

    Filled with the even-odd rule: a point is inside the region iff an odd
    number of loops enclose it.

    Attributes:
        outlines: Cleaned, consistently wound loops
    """

    outlines: list[GlyphOutline]

    def is_empty(self) -> bool:
        """True if the region has no loops."""
        return len(self.outlines) == 0

    def loops(self) -> list[list[Point2D]]:
        """Return raw point lists, one per loop, in kernel-ready form."""
        return [list(outline.points) for outline in self.outlines]

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Bounding box over all loops as (min_x, min_y, max_x, max_y)."""
        if not self.outlines:
            return (0.0, 0.0, 0.0, 0.0)

        boxes = [outline.bounding_box() for outline in self.outlines]
        return (
            min(b[0] for b in boxes),
            min(b[1] for b in boxes),
            max(b[2] for b in boxes),
            max(b[3] for b in boxes),
        )

    def contains_point(self, x: float, y: float) -> bool:
        """Even-odd membership test for a point.

        Args:
            x: X coordinate
            y: Y coordinate

        Returns:
            True if an odd number of loops enclose the point
        """
        enclosing = sum(1 for outline in self.outlines if outline.contains_point(x, y))
        return enclosing % 2 == 1
