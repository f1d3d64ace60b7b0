"""Converters between fonttools glyph drawings and domain outlines.

Glyphs are drawn into an OutlinePen, which flattens quadratic (TrueType) and
cubic (CFF) segments into polylines. Loops are then tagged as outer or hole
from their nesting depth, which works for both TrueType and CFF winding
conventions.
"""

from typing import Any

from fontTools.pens.basePen import BasePen

from texttango.core._bezier import sample_cubic, sample_quadratic
from texttango.core.geometry import point_in_polygon
from texttango.domain import GlyphOutline, LoopKind, Point2D


class OutlinePen(BasePen):
    """fontTools pen that records glyph contours as flattened point loops.

    BasePen decomposes multi-point qCurveTo/curveTo calls into single
    segments, so only one-segment callbacks are implemented here.

    Example:
        pen = OutlinePen(glyph_set, resolution=16)
        glyph_set["A"].draw(pen)
        loops = pen.loops
    """

    def __init__(self, glyph_set: Any = None, resolution: int = 16) -> None:
        """Initialize the pen.

        Args:
            glyph_set: Glyph set used to resolve components
            resolution: Samples per curve segment
        """
        super().__init__(glyph_set)
        self.resolution = resolution
        self.loops: list[list[Point2D]] = []
        self._current: list[Point2D] = []

    def _moveTo(self, pt: Point2D) -> None:
        self._flush()
        self._current = [(float(pt[0]), float(pt[1]))]

    def _lineTo(self, pt: Point2D) -> None:
        self._current.append((float(pt[0]), float(pt[1])))

    def _qCurveToOne(self, pt1: Point2D, pt2: Point2D) -> None:
        start = self._getCurrentPoint()
        self._current.extend(sample_quadratic(start, pt1, pt2, self.resolution))

    def _curveToOne(self, pt1: Point2D, pt2: Point2D, pt3: Point2D) -> None:
        start = self._getCurrentPoint()
        self._current.extend(sample_cubic(start, pt1, pt2, pt3, self.resolution))

    def _closePath(self) -> None:
        self._flush()

    def _endPath(self) -> None:
        self._flush()

    def _flush(self) -> None:
        if self._current:
            self.loops.append(self._current)
            self._current = []


def tag_loops(loops: list[list[Point2D]]) -> list[GlyphOutline]:
    """Classify loops as outer or hole by even-odd nesting depth.

    A loop enclosed by an odd number of other loops is a hole. The first
    vertex is used as the loop's representative point.

    Args:
        loops: Raw point loops

    Returns:
        GlyphOutlines in input order
    """
    outlines: list[GlyphOutline] = []
    for index, loop in enumerate(loops):
        if not loop:
            continue
        depth = sum(
            1
            for other_index, other in enumerate(loops)
            if other_index != index and point_in_polygon(loop[0], other)
        )
        kind = LoopKind.HOLE if depth % 2 == 1 else LoopKind.OUTER
        outlines.append(GlyphOutline(points=list(loop), kind=kind))
    return outlines


def fonttools_glyph_to_outlines(fonttools_glyph: Any, glyph_set: Any, resolution: int) -> list[GlyphOutline]:
    """Draw a fonttools glyph and return its tagged outlines in font units.

    Args:
        fonttools_glyph: Glyph object from a TTFont glyph set
        glyph_set: The glyph set (for composite glyphs)
        resolution: Samples per curve segment

    Returns:
        Tagged outlines, possibly empty
    """
    pen = OutlinePen(glyph_set, resolution=resolution)
    fonttools_glyph.draw(pen)
    pen._flush()
    return tag_loops(pen.loops)
