"""Unit tests for outline extraction and cross-section building."""

import pytest

from texttango.config import GeometryConfig
from texttango.core.geometry import is_counter_clockwise
from texttango.core.outline import OutlineExtractor, build_cross_section, clean_outline
from texttango.domain import GlyphOutline, LoopKind
from texttango.exceptions import MissingGlyphError


@pytest.fixture
def geometry() -> GeometryConfig:
    return GeometryConfig()


class TestCleanOutline:
    """Tests for single-loop cleanup."""

    def test_outer_forced_counter_clockwise(self, geometry):
        outline = GlyphOutline(points=[(0, 0), (0, 10), (10, 10), (10, 0)])
        cleaned = clean_outline(outline, geometry)
        assert cleaned is not None
        assert is_counter_clockwise(cleaned.points)

    def test_hole_forced_clockwise(self, geometry):
        outline = GlyphOutline(points=[(0, 0), (10, 0), (10, 10), (0, 10)], kind=LoopKind.HOLE)
        cleaned = clean_outline(outline, geometry)
        assert cleaned is not None
        assert not is_counter_clockwise(cleaned.points)
        assert cleaned.is_hole

    def test_closing_duplicate_removed(self, geometry):
        outline = GlyphOutline(points=[(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)])
        cleaned = clean_outline(outline, geometry)
        assert cleaned is not None
        assert len(cleaned.points) == 4

    def test_collapsed_loop_discarded(self, geometry):
        outline = GlyphOutline(points=[(0, 0), (0.0001, 0), (0, 0.0001), (0, 0)])
        assert clean_outline(outline, geometry) is None


class TestBuildCrossSection:
    """Tests for build_cross_section."""

    def test_keeps_surviving_loops(self, geometry):
        outer = GlyphOutline(points=[(0, 0), (10, 0), (10, 10), (0, 10)])
        hole = GlyphOutline(points=[(2, 2), (8, 2), (8, 8), (2, 8)], kind=LoopKind.HOLE)
        tiny = GlyphOutline(points=[(0, 0), (0.0001, 0), (0, 0.0001)])
        section = build_cross_section([outer, hole, tiny], geometry)
        assert section is not None
        assert len(section.outlines) == 2
        assert section.contains_point(1, 1)
        assert not section.contains_point(5, 5)

    def test_empty_returns_none(self, geometry):
        assert build_cross_section([], geometry) is None


class TestOutlineExtractor:
    """Tests for OutlineExtractor with an in-memory font service."""

    def test_scales_to_font_size(self, fonts, geometry):
        extractor = OutlineExtractor(fonts, geometry)
        section = extractor.cross_section("I", "test-font", 20.0)
        assert section is not None
        assert section.bounding_box() == pytest.approx((2.0, 0.0, 6.0, 14.0))

    def test_whitespace_is_empty(self, fonts, geometry):
        extractor = OutlineExtractor(fonts, geometry)
        assert extractor.cross_section(" ", "test-font", 20.0) is None
        assert fonts.requests == []

    def test_missing_glyph_raises(self, fonts, geometry):
        extractor = OutlineExtractor(fonts, geometry)
        with pytest.raises(MissingGlyphError) as exc_info:
            extractor.cross_section("Z", "test-font", 20.0)
        assert exc_info.value.char == "Z"
        assert exc_info.value.font_id == "test-font"

    def test_hole_preserved(self, fonts, geometry):
        extractor = OutlineExtractor(fonts, geometry)
        section = extractor.cross_section("O", "test-font", 10.0)
        assert section is not None
        assert [o.kind for o in section.outlines] == [LoopKind.OUTER, LoopKind.HOLE]
        assert not section.contains_point(3.0, 3.5)
        assert section.contains_point(1.0, 3.5)
