"""Unit tests for planar geometry helpers."""

import pytest

from texttango.core._bezier import sample_cubic, sample_quadratic
from texttango.core.geometry import (
    drop_closing_duplicate,
    ellipse,
    is_counter_clockwise,
    orient_loop,
    point_in_polygon,
    remove_short_segments,
    rounded_rectangle,
    signed_area,
    winding_sum,
)

CCW_SQUARE = [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)]
CW_SQUARE = list(reversed(CCW_SQUARE))


class TestWinding:
    """Tests for area and winding helpers."""

    def test_signed_area(self):
        assert signed_area(CCW_SQUARE) == pytest.approx(100.0)
        assert signed_area(CW_SQUARE) == pytest.approx(-100.0)
        assert signed_area(CCW_SQUARE[:2]) == 0.0

    def test_winding_sum_is_negative_for_ccw(self):
        """Edge sum is -2 * area with Y up."""
        assert winding_sum(CCW_SQUARE) == pytest.approx(-200.0)
        assert winding_sum(CW_SQUARE) == pytest.approx(200.0)

    def test_is_counter_clockwise(self):
        assert is_counter_clockwise(CCW_SQUARE)
        assert not is_counter_clockwise(CW_SQUARE)

    def test_orient_loop(self):
        assert orient_loop(CW_SQUARE, counter_clockwise=True) == CCW_SQUARE
        assert orient_loop(CCW_SQUARE, counter_clockwise=True) == CCW_SQUARE
        assert is_counter_clockwise(orient_loop(CCW_SQUARE, counter_clockwise=False)) is False


class TestPointInPolygon:
    """Tests for ray-casting containment."""

    def test_inside_and_outside(self):
        assert point_in_polygon((5.0, 5.0), CCW_SQUARE)
        assert not point_in_polygon((15.0, 5.0), CCW_SQUARE)
        assert not point_in_polygon((5.0, -1.0), CCW_SQUARE)

    def test_concave(self):
        l_shape = [(0, 0), (10, 0), (10, 2), (2, 2), (2, 10), (0, 10)]
        assert point_in_polygon((1.0, 5.0), l_shape)
        assert not point_in_polygon((5.0, 5.0), l_shape)

    def test_degenerate_polygon(self):
        assert not point_in_polygon((0.0, 0.0), [(0.0, 0.0), (1.0, 1.0)])


class TestCleanup:
    """Tests for loop cleanup."""

    def test_drop_closing_duplicate(self):
        loop = [*CCW_SQUARE, (0.00001, 0.0)]
        assert drop_closing_duplicate(loop, 1e-4) == CCW_SQUARE

    def test_keep_distinct_last_point(self):
        assert drop_closing_duplicate(CCW_SQUARE, 1e-4) == CCW_SQUARE

    def test_remove_short_segments(self):
        loop = [(0.0, 0.0), (0.0001, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)]
        assert remove_short_segments(loop, 1e-6) == CCW_SQUARE

    def test_remove_short_segments_starts_from_last_point(self):
        """A first point equal to the last one is dropped."""
        loop = [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0), (0.0, 0.0)]
        assert remove_short_segments(loop, 1e-6) == [(10.0, 0.0), (10.0, 10.0), (0.0, 10.0), (0.0, 0.0)]

    def test_remove_short_segments_collapses_tiny_loops(self):
        loop = [(0.0, 0.0), (0.0001, 0.0), (0.0, 0.0001)]
        assert remove_short_segments(loop, 1e-6) == []


class TestBezier:
    """Tests for curve sampling."""

    def test_quadratic_samples(self):
        points = sample_quadratic((0.0, 0.0), (5.0, 10.0), (10.0, 0.0), 4)
        assert len(points) == 4
        assert points[-1] == (10.0, 0.0)
        assert points[1] == pytest.approx((5.0, 5.0))

    def test_cubic_samples(self):
        points = sample_cubic((0.0, 0.0), (0.0, 10.0), (10.0, 10.0), (10.0, 0.0), 2)
        assert points == [pytest.approx((5.0, 7.5)), (10.0, 0.0)]


class TestFootprints:
    """Tests for base footprints."""

    def test_rounded_rectangle_bounds(self):
        loop = rounded_rectangle(20.0, 10.0, 2.0, 8)
        xs = [p[0] for p in loop]
        ys = [p[1] for p in loop]
        assert min(xs) == pytest.approx(-10.0)
        assert max(xs) == pytest.approx(10.0)
        assert min(ys) == pytest.approx(-5.0)
        assert max(ys) == pytest.approx(5.0)
        assert is_counter_clockwise(loop)

    def test_rounded_rectangle_cuts_corners(self):
        loop = rounded_rectangle(20.0, 10.0, 2.0, 8)
        assert signed_area(loop) < 200.0
        assert (10.0, 5.0) not in loop

    def test_rounded_rectangle_zero_radius(self):
        loop = rounded_rectangle(4.0, 2.0, 0.0, 8)
        assert loop == [(-2.0, -1.0), (2.0, -1.0), (2.0, 1.0), (-2.0, 1.0)]

    def test_rounded_rectangle_clamps_radius(self):
        loop = rounded_rectangle(4.0, 2.0, 50.0, 8)
        ys = [p[1] for p in loop]
        assert max(ys) == pytest.approx(1.0)
        assert min(ys) == pytest.approx(-1.0)

    def test_ellipse(self):
        loop = ellipse(3.0, 2.0, 64)
        assert len(loop) == 64
        assert loop[0] == pytest.approx((3.0, 0.0))
        assert is_counter_clockwise(loop)
        assert max(p[1] for p in loop) == pytest.approx(2.0, abs=1e-9)
