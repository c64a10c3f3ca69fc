"""Unit tests for the geometry kernel."""

import pytest

from glyphforge.core import Part
from glyphforge.core.geometry import (
    intersections,
    nearest_point,
    point_in_polygon,
    signed_area,
)
from glyphforge.domain import Bezier, Line, Point

SQUARE = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]


class TestSignedArea:
    """Tests for signed_area."""

    def test_unit_square(self) -> None:
        """Test area of a unit square."""
        assert signed_area([Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)]) == 1.0

    def test_reversed_square_is_negative(self) -> None:
        """Test that reversed order negates the area."""
        assert signed_area(list(reversed(SQUARE))) == -100.0

    def test_degenerate(self) -> None:
        """Test that fewer than three points have no area."""
        assert signed_area([Point(0, 0), Point(1, 1)]) == 0.0


class TestPointInPolygon:
    """Tests for point_in_polygon."""

    def test_inside(self) -> None:
        assert point_in_polygon(Point(5, 5), SQUARE)

    def test_outside(self) -> None:
        assert not point_in_polygon(Point(15, 5), SQUARE)
        assert not point_in_polygon(Point(5, -1), SQUARE)


class TestNearestPoint:
    """Tests for nearest_point."""

    def test_on_line(self) -> None:
        """Test projection onto a line segment."""
        line = Line(Point(0, 0), Point(10, 0))
        assert nearest_point(line, Point(5, 3)).almost_equals(Point(5, 0))

    def test_clamped_to_line_end(self) -> None:
        """Test that projections beyond the segment clamp to its end."""
        line = Line(Point(0, 0), Point(10, 0))
        assert nearest_point(line, Point(15, 3)).almost_equals(Point(10, 0))

    def test_on_straight_bezier(self) -> None:
        """Test projection onto a bezier lying on the x axis."""
        curve = Bezier(Point(0, 0), Point(10 / 3, 0), Point(20 / 3, 0), Point(10, 0))
        nearest = nearest_point(curve, Point(4, 5))
        assert nearest.x == pytest.approx(4.0, abs=1e-4)
        assert nearest.y == pytest.approx(0.0, abs=1e-9)

    def test_on_circle_part(self) -> None:
        """Test projection onto a placed circle."""
        circle = Part.circle(Point(0, 0), 10)
        nearest = nearest_point(circle, Point(30, 0))
        assert nearest.x == pytest.approx(10.0, abs=1e-6)
        assert nearest.y == pytest.approx(0.0, abs=1e-6)

    def test_empty_path(self) -> None:
        """Test that an empty path has no nearest point."""
        with pytest.raises(ValueError, match="empty"):
            nearest_point(Part.empty(), Point(0, 0))


class TestIntersections:
    """Tests for intersections."""

    def test_line_through_circle_in_order(self) -> None:
        """Test that crossings are ordered along the first path."""
        line = Part.line(Point(-20, 3), Point(20, 3))
        circle = Part.circle(Point(0, 0), 10)
        points = intersections(line, circle)
        assert len(points) == 2
        assert points[0].x == pytest.approx(-(91**0.5), abs=0.05)
        assert points[1].x == pytest.approx(91**0.5, abs=0.05)

    def test_reversed_line_reverses_order(self) -> None:
        """Test that reversing the first path reverses the result."""
        line = Part.line(Point(20, 3), Point(-20, 3))
        circle = Part.circle(Point(0, 0), 10)
        points = intersections(line, circle)
        assert points[0].x > 0 > points[1].x

    def test_ray_from_center_crosses_ring_inside_out(self) -> None:
        """Test that a ray leaving a ring meets the hole before the outer edge."""
        ring = Part.stack(Part.circle(Point(0, 0), 20), Part.circle(Point(0, 0), 10).reverse())
        points = intersections(Part.line(Point(0, 0), Point(30, -15)), ring)
        assert len(points) == 2
        assert points[0].distance_to(Point(0, 0)) == pytest.approx(10.0, abs=0.01)
        assert points[1].distance_to(Point(0, 0)) == pytest.approx(20.0, abs=0.01)

    def test_no_crossing(self) -> None:
        """Test disjoint paths."""
        line = Part.line(Point(-20, 30), Point(20, 30))
        assert intersections(line, Part.circle(Point(0, 0), 10)) == []

    def test_bezier_crossing_bezier(self) -> None:
        """Test an s-curve crossing a flat curve once."""
        a = Part.bezier(Point(0, 0), Point(5, 0), Point(-5, 0), Point(10, 10))
        b = Part.bezier(Point(0, 6), None, None, Point(10, 6))
        points = intersections(a, b)
        assert len(points) == 1
        assert points[0].y == pytest.approx(6.0, abs=1e-3)
        assert 5.0 < points[0].x < 6.0
