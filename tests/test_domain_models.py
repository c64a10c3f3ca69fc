"""Tests for domain models to verify they work correctly."""

import math
from unittest.mock import MagicMock

import pytest

from glyphforge.core import Part
from glyphforge.domain import (
    Bearings,
    Bezier,
    Circle,
    Contour,
    Font,
    FontInfo,
    FontSlant,
    FontStretch,
    FontStyle,
    FontWeight,
    Glyph,
    Line,
    Metrics,
    Point,
    WindingDirection,
)


def square_contour(size: float = 100.0) -> Contour:
    """Square with positive shoelace area in design coordinates."""
    corners = [Point(0, 0), Point(size, 0), Point(size, size), Point(0, size)]
    return Contour([Line(corners[i], corners[(i + 1) % 4]) for i in range(4)])


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_arithmetic(self) -> None:
        """Test vector addition, subtraction, negation and scaling."""
        a = Point(1.0, 2.0)
        b = Point(3.0, -1.0)
        assert a + b == Point(4.0, 1.0)
        assert a - b == Point(-2.0, 3.0)
        assert -a == Point(-1.0, -2.0)
        assert a * 2 == Point(2.0, 4.0)

    def test_point_length_and_distance(self) -> None:
        """Test Euclidean length and distance."""
        assert Point(3.0, 4.0).length == 5.0
        assert Point(1.0, 1.0).distance_to(Point(4.0, 5.0)) == 5.0

    def test_angle_to(self) -> None:
        """Test unsigned angle between vectors."""
        assert Point(0.0, 1.0).angle_to(Point(1.0, 0.0)) == pytest.approx(90.0)
        assert Point(0.0, -1.0).angle_to(Point(1.0, 0.0)) == pytest.approx(90.0)
        assert Point(-1.0, 0.0).angle_to(Point(1.0, 0.0)) == pytest.approx(180.0)

    def test_angle_to_zero_vector_is_nan(self) -> None:
        """Test that a zero vector has no defined angle."""
        assert math.isnan(Point(0.0, 0.0).angle_to(Point(1.0, 0.0)))

    def test_rotate_about_center(self) -> None:
        """Test rotation by 90 degrees about a center."""
        rotated = Point(2.0, 1.0).rotate(90, Point(1.0, 1.0))
        assert rotated.almost_equals(Point(1.0, 2.0))

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        p = Point(100.0, 200.0)
        assert p.to_tuple() == (100.0, 200.0)

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore


class TestSegments:
    """Tests for Line, Bezier and Circle."""

    def test_line_reversed(self) -> None:
        """Test that reversing a line swaps its ends."""
        line = Line(Point(0, 0), Point(10, 5))
        assert line.reversed() == Line(Point(10, 5), Point(0, 0))

    def test_degenerate_line(self) -> None:
        """Test degenerate line detection."""
        assert Line(Point(1, 1), Point(1, 1)).is_degenerate()
        assert not Line(Point(1, 1), Point(2, 1)).is_degenerate()

    def test_bezier_bounds_use_extrema(self) -> None:
        """Test that bezier bounds include the curve's extremum, not its handles."""
        curve = Bezier(Point(0, 0), Point(0, -10), Point(10, -10), Point(10, 0))
        min_x, min_y, max_x, max_y = curve.bounds()
        assert min_x == pytest.approx(0.0)
        assert max_x == pytest.approx(10.0)
        assert min_y == pytest.approx(-7.5)
        assert max_y == pytest.approx(0.0)

    def test_bezier_reversed(self) -> None:
        """Test that reversing a bezier also swaps its handles."""
        curve = Bezier(Point(0, 0), Point(1, 0), Point(2, 1), Point(2, 2))
        assert curve.reversed().points == (Point(2, 2), Point(2, 1), Point(1, 0), Point(0, 0))

    def test_circle_starts_at_leftmost_point(self) -> None:
        """Test that a circle expands to four arcs from its leftmost point."""
        arcs = Circle(Point(0, 0), 10).to_beziers()
        assert len(arcs) == 4
        assert arcs[0].start == Point(-10, 0)
        assert arcs[0].end == Point(0, -10)
        assert arcs[-1].end == Point(-10, 0)


class TestContour:
    """Tests for Contour class."""

    def test_signed_area_counterclockwise(self) -> None:
        """Test signed area for a counter-clockwise square."""
        contour = square_contour()
        assert contour.signed_area() == pytest.approx(10000.0)
        assert contour.winding == WindingDirection.COUNTER_CLOCKWISE

    def test_signed_area_clockwise(self) -> None:
        """Test that reversing flips the area sign and winding."""
        contour = square_contour().reversed()
        assert contour.signed_area() == pytest.approx(-10000.0)
        assert contour.winding == WindingDirection.CLOCKWISE

    def test_area_follows_in_place_edits(self) -> None:
        """Test that replacing the segments after a winding query is seen by the next one."""
        contour = square_contour()
        assert contour.winding == WindingDirection.COUNTER_CLOCKWISE
        contour.segments[:] = square_contour().reversed().segments
        assert contour.signed_area() == pytest.approx(-10000.0)
        assert contour.winding == WindingDirection.CLOCKWISE

    def test_is_closed(self) -> None:
        """Test closure detection."""
        assert square_contour().is_closed()
        open_contour = Contour([Line(Point(0, 0), Point(10, 0))])
        assert not open_contour.is_closed()
        assert not Contour().is_closed()

    def test_polygon_drops_closing_point(self) -> None:
        """Test that flattening a closed contour does not repeat its start."""
        assert len(square_contour().polygon()) == 4

    def test_bounds(self) -> None:
        """Test bounding box calculation."""
        assert square_contour(50.0).bounds() == (0.0, 0.0, 50.0, 50.0)

    def test_copy_is_independent(self) -> None:
        """Test that copying gives an independent segment list."""
        contour = square_contour()
        copied = contour.copy()
        copied.segments.pop()
        assert len(contour.segments) == 4

    def test_winding_opposite(self) -> None:
        """Test opposite winding direction."""
        assert WindingDirection.CLOCKWISE.opposite() == WindingDirection.COUNTER_CLOCKWISE
        assert WindingDirection.COUNTER_CLOCKWISE.opposite() == WindingDirection.CLOCKWISE


class TestGlyph:
    """Tests for Glyph class."""

    @pytest.fixture
    def metrics(self) -> Metrics:
        return Metrics(em=1000, ascent=800, descent=200)

    def test_by_bearings_width(self, metrics: Metrics) -> None:
        """Test that width is left bearing plus outline extent plus right bearing."""
        part = Part([square_contour(100.0)]).translate(Point(-30, 0))
        glyph = Glyph.by_bearings(part, metrics, Bearings(10, 20))
        assert glyph.width == pytest.approx(130.0)
        min_x, _, max_x, _ = glyph.outline.bounds()
        assert min_x == pytest.approx(10.0)
        assert max_x == pytest.approx(110.0)

    def test_by_bearings_empty_outline(self, metrics: Metrics) -> None:
        """Test that an empty outline is as wide as its bearings."""
        glyph = Glyph.by_bearings(Part.empty(), metrics, Bearings(40, 0))
        assert glyph.width == 40

    def test_draw_flips_to_font_space(self, metrics: Metrics) -> None:
        """Test that drawing turns y-down design space into y-up font space."""
        from fontTools.pens.boundsPen import BoundsPen

        part = Part([square_contour(100.0)]).translate(Point(0, -100))
        glyph = Glyph.by_bearings(part, metrics, Bearings(0, 0))
        pen = BoundsPen(None)
        glyph.draw(pen)
        assert pen.bounds == pytest.approx((0.0, 0.0, 100.0, 100.0))


class TestFontIdentity:
    """Tests for FontStyle and Font."""

    def test_regular_style_name(self) -> None:
        """Test that the default style is named Regular."""
        assert FontStyle().style_name == "Regular"

    def test_style_name_omits_normal_parts(self) -> None:
        """Test style names built from weight, stretch and slant."""
        assert FontStyle(weight=FontWeight.BOLD).style_name == "Bold"
        assert FontStyle(stretch=FontStretch.CONDENSED).style_name == "Condensed"
        style = FontStyle(FontWeight.THIN, FontSlant.ITALIC, FontStretch.EXPANDED)
        assert style.style_name == "Thin Expanded Italic"

    def test_style_numbers(self) -> None:
        """Test weight and stretch numbers."""
        style = FontStyle(weight=FontWeight.BOLD, stretch=FontStretch.CONDENSED)
        assert style.weight_number == 700
        assert style.stretch_number == 200

    def test_font_names(self) -> None:
        """Test full, PostScript and extended family names."""
        style = FontStyle(weight=FontWeight.BOLD, stretch=FontStretch.CONDENSED)
        font = Font("Vekos High", style, FontInfo("Someone", "1.0.0"), MagicMock())
        assert font.full_name == "Vekos High Bold Condensed"
        assert font.postscript_name == "VekosHigh-BoldCondensed"
        assert font.extended_family_name == "Vekos High Condensed"
        assert font.copyright == "Someone"
        assert font.version == "1.0.0"

    def test_font_delegates_to_generator(self) -> None:
        """Test that characters and glyphs come from the generator."""
        generator = MagicMock()
        generator.get_chars.return_value = ["a", "b"]
        generator.glyph.return_value = None
        font = Font("Vekos", FontStyle(), FontInfo("Someone", "1.0.0"), generator)
        assert font.get_chars() == ["a", "b"]
        assert font.glyph("z") is None
        generator.glyph.assert_called_once_with("z")
