"""Shared fixtures: test fonts, an in-memory font service and a box kernel.

BoxKernel approximates every solid by a set of axis-aligned boxes. Extruding
a cross-section yields one box per outer loop, rotation replaces each box by
the bounding box of its rotated corners, and intersection intersects boxes
pairwise. That is exact for the rectangular glyphs used in the pipeline
tests and lets them run without a boolean kernel installed.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

import numpy as np
import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from texttango.config import BaseSpec, TextSettings, sync_pair_configs
from texttango.domain import BoundingBox, CrossSection, GlyphOutline, LoopKind, MeshData
from texttango.exceptions import KernelOperationError

UNITS_PER_EM = 1000


# ---------------------------------------------------------------------------
# Box kernel
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BoxSolid:
    """Solid made of axis-aligned boxes."""

    boxes: tuple[BoundingBox, ...]


def _corners(box: BoundingBox) -> list[tuple[float, float, float]]:
    return [
        (x, y, z)
        for x in (box.min[0], box.max[0])
        for y in (box.min[1], box.max[1])
        for z in (box.min[2], box.max[2])
    ]


def _rotate_point(point, degrees):
    x, y, z = point
    rx, ry, rz = (math.radians(d) for d in degrees)
    # X, then Y, then Z
    y, z = y * math.cos(rx) - z * math.sin(rx), y * math.sin(rx) + z * math.cos(rx)
    x, z = x * math.cos(ry) + z * math.sin(ry), -x * math.sin(ry) + z * math.cos(ry)
    x, y = x * math.cos(rz) - y * math.sin(rz), x * math.sin(rz) + y * math.cos(rz)
    return (round(x, 9), round(y, 9), round(z, 9))


def _boxes_touch(a: BoundingBox, b: BoundingBox, tolerance: float = 1e-9) -> bool:
    return all(
        a.min[i] <= b.max[i] + tolerance and b.min[i] <= a.max[i] + tolerance for i in range(3)
    )


class BoxKernel:
    """SolidKernel double working on axis-aligned boxes.

    Attributes:
        fail_on: Operation names that raise KernelOperationError
        meshed: Solids passed to to_mesh, in call order
    """

    def __init__(self, fail_on: Sequence[str] = ()) -> None:
        self.fail_on = set(fail_on)
        self.meshed: list[BoxSolid] = []
        self.calls: dict[str, int] = {}

    def _enter(self, operation: str) -> None:
        self.calls[operation] = self.calls.get(operation, 0) + 1
        if operation in self.fail_on:
            raise KernelOperationError(operation, "injected failure")

    def make(self, *boxes: tuple[tuple[float, float, float], tuple[float, float, float]]) -> BoxSolid:
        """Build a solid from (min, max) corner pairs."""
        return BoxSolid(tuple(BoundingBox(min=lo, max=hi) for lo, hi in boxes))

    def extrude(self, section: CrossSection, depth: float) -> BoxSolid:
        self._enter("extrude")
        boxes = []
        for outline in section.outlines:
            if outline.is_hole:
                continue
            min_x, min_y, max_x, max_y = outline.bounding_box()
            boxes.append(BoundingBox(min=(min_x, min_y, 0.0), max=(max_x, max_y, depth)))
        return BoxSolid(tuple(boxes))

    def union(self, solids: Sequence[BoxSolid]) -> BoxSolid:
        self._enter("union")
        if not solids:
            raise KernelOperationError("union", "nothing to union")
        return BoxSolid(tuple(box for solid in solids for box in solid.boxes))

    def intersect(self, a: BoxSolid, b: BoxSolid) -> BoxSolid:
        self._enter("intersect")
        boxes = []
        for box_a in a.boxes:
            for box_b in b.boxes:
                lo = tuple(max(box_a.min[i], box_b.min[i]) for i in range(3))
                hi = tuple(min(box_a.max[i], box_b.max[i]) for i in range(3))
                if all(hi[i] >= lo[i] for i in range(3)):
                    boxes.append(BoundingBox(min=lo, max=hi))
        return BoxSolid(tuple(boxes))

    def subtract(self, a: BoxSolid, b: BoxSolid) -> BoxSolid:
        self._enter("subtract")
        kept = [box for box in a.boxes if not any(other.contains(box, 0.0) for other in b.boxes)]
        return BoxSolid(tuple(kept))

    def translate(self, solid: BoxSolid, offset) -> BoxSolid:
        self._enter("translate")
        return BoxSolid(tuple(box.translated(tuple(offset)) for box in solid.boxes))

    def rotate(self, solid: BoxSolid, degrees) -> BoxSolid:
        self._enter("rotate")
        boxes = []
        for box in solid.boxes:
            points = [_rotate_point(corner, degrees) for corner in _corners(box)]
            boxes.append(
                BoundingBox(
                    min=tuple(min(p[i] for p in points) for i in range(3)),
                    max=tuple(max(p[i] for p in points) for i in range(3)),
                )
            )
        return BoxSolid(tuple(boxes))

    def scale(self, solid: BoxSolid, factors) -> BoxSolid:
        self._enter("scale")
        boxes = []
        for box in solid.boxes:
            a = tuple(box.min[i] * factors[i] for i in range(3))
            b = tuple(box.max[i] * factors[i] for i in range(3))
            boxes.append(
                BoundingBox(
                    min=tuple(min(a[i], b[i]) for i in range(3)),
                    max=tuple(max(a[i], b[i]) for i in range(3)),
                )
            )
        return BoxSolid(tuple(boxes))

    def bounding_box(self, solid: BoxSolid) -> BoundingBox:
        self._enter("bounding_box")
        if not solid.boxes:
            return BoundingBox(min=(0.0, 0.0, 0.0), max=(0.0, 0.0, 0.0))
        result = solid.boxes[0]
        for box in solid.boxes[1:]:
            result = result.union(box)
        return result

    def decompose(self, solid: BoxSolid) -> list[BoxSolid]:
        self._enter("decompose")
        boxes = list(solid.boxes)
        parent = list(range(len(boxes)))

        def find(i: int) -> int:
            while parent[i] != i:
                parent[i] = parent[parent[i]]
                i = parent[i]
            return i

        for i in range(len(boxes)):
            for j in range(i + 1, len(boxes)):
                if _boxes_touch(boxes[i], boxes[j]):
                    parent[find(i)] = find(j)

        groups: dict[int, list[BoundingBox]] = {}
        for i, box in enumerate(boxes):
            groups.setdefault(find(i), []).append(box)
        return [BoxSolid(tuple(group)) for group in groups.values()]

    def is_empty(self, solid: BoxSolid) -> bool:
        self._enter("is_empty")
        return len(solid.boxes) == 0

    def cylinder(self, height: float, radius: float, segments: int) -> BoxSolid:
        self._enter("cylinder")
        return self.make(((-radius, -radius, -height / 2), (radius, radius, height / 2)))

    def box(self, size) -> BoxSolid:
        self._enter("box")
        sx, sy, sz = size
        return self.make(((-sx / 2, -sy / 2, -sz / 2), (sx / 2, sy / 2, sz / 2)))

    def to_mesh(self, solid: BoxSolid) -> MeshData:
        self._enter("to_mesh")
        self.meshed.append(solid)
        faces = [
            (0, 2, 1), (1, 2, 3),
            (4, 5, 6), (5, 7, 6),
            (0, 1, 4), (1, 5, 4),
            (2, 6, 3), (3, 6, 7),
            (0, 4, 2), (2, 4, 6),
            (1, 3, 5), (3, 7, 5),
        ]
        vertices = []
        triangles = []
        for index, box in enumerate(solid.boxes):
            vertices.extend(_corners(box))
            triangles.extend(tuple(v + index * 8 for v in face) for face in faces)
        return MeshData(vertices=np.array(vertices), triangles=np.array(triangles))


# ---------------------------------------------------------------------------
# In-memory font service
# ---------------------------------------------------------------------------


def rect(x0: float, y0: float, x1: float, y1: float, kind: LoopKind = LoopKind.OUTER) -> GlyphOutline:
    """Rectangle loop in font units."""
    return GlyphOutline(points=[(x0, y0), (x1, y0), (x1, y1), (x0, y1)], kind=kind)


GLYPHS: dict[str, list[GlyphOutline]] = {
    # 200 x 700 bar
    "I": [rect(100, 0, 300, 700)],
    # 500 x 700 ring
    "O": [rect(50, 0, 550, 700), rect(150, 100, 450, 600, LoopKind.HOLE)],
    # bar over a dot, 100 units apart
    "!": [rect(100, 250, 300, 700), rect(100, 0, 300, 150)],
    "A": [rect(0, 0, 600, 700), rect(200, 300, 400, 500, LoopKind.HOLE)],
    "B": [rect(100, 0, 500, 700)],
    # sliver: 0.04 units tall
    ".": [GlyphOutline(points=[(0.0, 0.0), (400.0, 0.0), (200.0, 0.04)])],
}


class DictFontService:
    """FontService double serving GLYPHS for every font id."""

    def __init__(self, glyphs: dict[str, list[GlyphOutline]] | None = None) -> None:
        self.glyphs = GLYPHS if glyphs is None else glyphs
        self.requests: list[tuple[str, str]] = []

    def get_outlines(self, font_id: str, char: str, resolution: int) -> list[GlyphOutline] | None:
        self.requests.append((font_id, char))
        outlines = self.glyphs.get(char)
        if outlines is None:
            return None
        return [GlyphOutline(points=list(o.points), kind=o.kind) for o in outlines]

    def units_per_em(self, font_id: str) -> int:
        return UNITS_PER_EM


# ---------------------------------------------------------------------------
# Real test font
# ---------------------------------------------------------------------------


def _draw_rects(*rects: tuple[int, int, int, int], clockwise: tuple[bool, ...] = ()):
    pen = TTGlyphPen(None)
    for index, (x0, y0, x1, y1) in enumerate(rects):
        cw = clockwise[index] if index < len(clockwise) else True
        points = [(x0, y0), (x0, y1), (x1, y1), (x1, y0)]
        if not cw:
            points.reverse()
        pen.moveTo(points[0])
        for point in points[1:]:
            pen.lineTo(point)
        pen.closePath()
    return pen.glyph()


def _draw_d():
    pen = TTGlyphPen(None)
    pen.moveTo((100, 0))
    pen.lineTo((100, 700))
    pen.lineTo((300, 700))
    pen.qCurveTo((600, 350), (300, 0))
    pen.closePath()
    return pen.glyph()


def build_test_font(path: Path) -> Path:
    """Write a small TrueType font with rectangular test glyphs.

    Glyphs: I (bar), O (ring with hole), ! (bar over dot), A (block with
    hole), B (block), D (quadratic bowl) and an empty space.
    """
    glyphs = {
        ".notdef": _draw_rects((50, 0, 450, 700), (100, 50, 400, 650), clockwise=(True, False)),
        "space": TTGlyphPen(None).glyph(),
        "I": _draw_rects((100, 0, 300, 700)),
        "O": _draw_rects((50, 0, 550, 700), (150, 100, 450, 600), clockwise=(True, False)),
        "exclam": _draw_rects((100, 250, 300, 700), (100, 0, 300, 150)),
        "A": _draw_rects((0, 0, 600, 700), (200, 300, 400, 500), clockwise=(True, False)),
        "B": _draw_rects((100, 0, 500, 700)),
        "D": _draw_d(),
    }
    cmap = {ord(" "): "space", ord("I"): "I", ord("O"): "O", ord("!"): "exclam",
            ord("A"): "A", ord("B"): "B", ord("D"): "D"}

    builder = FontBuilder(UNITS_PER_EM, isTTF=True)
    builder.setupGlyphOrder(list(glyphs))
    builder.setupCharacterMap(cmap)
    builder.setupGlyf(glyphs)
    # lsb must match each glyph's xMin or drawn outlines shift by the difference
    glyph_table = builder.font["glyf"]
    builder.setupHorizontalMetrics(
        {name: (650, getattr(glyph_table[name], "xMin", 0)) for name in glyphs}
    )
    builder.setupHorizontalHeader(ascent=800, descent=-200)
    builder.setupNameTable({"familyName": "Tango Test", "styleName": "Regular"})
    builder.setupOS2(sTypoAscender=800, sTypoDescender=-200, usWinAscent=800, usWinDescent=200)
    builder.setupPost()
    builder.save(str(path))
    return path


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def font_path(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Path to the generated test font."""
    return build_test_font(tmp_path_factory.mktemp("fonts") / "TangoTest.ttf")


@pytest.fixture
def box_kernel() -> BoxKernel:
    """Fresh box kernel."""
    return BoxKernel()


@pytest.fixture
def kernel_factory():
    """BoxKernel class, for tests that inject failures."""
    return BoxKernel


@pytest.fixture
def fonts() -> DictFontService:
    """In-memory font service with rectangular glyphs."""
    return DictFontService()


@pytest.fixture
def make_settings():
    """Factory for synced settings; no base unless base_height is given."""

    def _make(text1: str, text2: str, base_height: float = 0.0, **kwargs) -> TextSettings:
        base = kwargs.pop("base", None) or BaseSpec(height=base_height)
        settings = TextSettings(text1=text1, text2=text2, font="test-font", base=base, **kwargs)
        return sync_pair_configs(settings)

    return _make
