"""Unit tests for the Part algebra."""

import pytest

from glyphforge.core import Part
from glyphforge.domain import Point, WindingDirection
from glyphforge.exceptions import ContourError, WindingError


def square(size: float = 10.0) -> Part:
    """Closed square chained from four relative lines."""
    return Part.seq(
        Part.line(Point(0, 0), Point(size, 0)),
        Part.line(Point(0, 0), Point(0, size)),
        Part.line(Point(0, 0), Point(-size, 0)),
        Part.line(Point(0, 0), Point(0, -size)),
    )


class TestTransforms:
    """Tests for the rigid transforms."""

    def test_reverse_twice_is_identity(self) -> None:
        part = square()
        assert part.reverse().reverse().almost_equals(part)

    def test_reflections_are_involutions(self) -> None:
        part = square().translate(Point(3, 4))
        assert part.reflect_hor().reflect_hor().almost_equals(part)
        assert part.reflect_ver().reflect_ver().almost_equals(part)

    def test_half_turn_twice_is_identity(self) -> None:
        part = square().move_origin(Point(2, 7))
        assert part.rotate_half_turn().rotate_half_turn().almost_equals(part)

    def test_translate_round_trip(self) -> None:
        part = square().move_origin(Point(1, 2))
        assert part.translate(Point(7, -3)).translate(Point(-7, 3)).almost_equals(part)

    def test_reflection_flips_winding(self) -> None:
        """Test that mirroring flips winding and reversing restores it."""
        part = square()
        winding = part.contours[0].winding
        assert winding == WindingDirection.COUNTER_CLOCKWISE
        mirrored = part.reflect_hor()
        assert mirrored.contours[0].winding == winding.opposite()
        assert mirrored.reverse().contours[0].winding == winding

    def test_reflect_about_origin(self) -> None:
        """Test that mirroring keeps the origin fixed."""
        line = Part.line(Point(0, 0), Point(10, 0)).move_origin(Point(5, 0))
        assert line.reflect_hor().almost_equals(Part.line(Point(10, 0), Point(0, 0)).move_origin(Point(5, 0)))

    def test_rotate_quarter_turn(self) -> None:
        rotated = Part.line(Point(0, 0), Point(1, 0)).rotate(90)
        assert rotated.end.almost_equals(Point(0, 1))

    def test_translate_keeps_origin(self) -> None:
        part = square().move_origin(Point(5, 5))
        moved = part.translate(Point(1, 0))
        assert moved.origin == Point(5, 5)
        assert moved.bounds() == pytest.approx((-4.0, -5.0, 6.0, 5.0))

    def test_move_origin_places_geometry(self) -> None:
        """Test that placed geometry is local geometry minus the origin."""
        part = square().move_origin(Point(5, 5))
        assert part.bounds() == pytest.approx((-5.0, -5.0, 5.0, 5.0))

    def test_move_origin_is_absolute(self) -> None:
        part = square().move_origin(Point(5, 5)).move_origin(Point(1, 1))
        assert part.origin == Point(1, 1)
        assert part.bounds() == pytest.approx((-1.0, -1.0, 9.0, 9.0))

    def test_start_and_end_are_placed(self) -> None:
        line = Part.line(Point(0, 0), Point(3, 4)).move_origin(Point(1, 1))
        assert line.start == Point(-1, -1)
        assert line.end == Point(2, 3)

    def test_clone_is_independent(self) -> None:
        part = square()
        clone = part.clone()
        clone.contours.append(square(5.0).contours[0])
        clone.contours[0].segments.pop()
        assert len(part.contours) == 1
        assert len(part.contours[0].segments) == 4

    def test_bezier_handles_are_relative(self) -> None:
        curve = Part.bezier(Point(0, 0), Point(0, -5), Point(-5, 0), Point(10, -10))
        segment = curve.contours[0].segments[0]
        assert segment.control1 == Point(0, -5)
        assert segment.control2 == Point(5, -10)

    def test_bezier_missing_handle_is_zero(self) -> None:
        curve = Part.bezier(Point(0, 0), None, None, Point(10, 0))
        segment = curve.contours[0].segments[0]
        assert segment.control1 == Point(0, 0)
        assert segment.control2 == Point(10, 0)


class TestSeq:
    """Tests for Part.seq."""

    def test_operands_are_anchored(self) -> None:
        """Test that each operand starts where the previous one ends."""
        trail = Part.seq(
            Part.line(Point(0, 0), Point(10, 0)),
            Part.line(Point(0, 0), Point(0, 10)),
        )
        assert trail.start == Point(0, 0)
        assert trail.end == Point(10, 10)
        assert not trail.contours[0].is_closed()

    def test_first_operand_keeps_its_place(self) -> None:
        trail = Part.seq(
            Part.line(Point(0, 0), Point(10, 0)).move_origin(Point(-5, 0)),
            Part.line(Point(0, 0), Point(0, 10)),
        )
        assert trail.start == Point(5, 0)
        assert trail.end == Point(15, 10)

    def test_closes_exactly(self) -> None:
        contour = square().contours[0]
        assert contour.is_closed(0.0)
        assert len(contour.segments) == 4

    def test_skips_degenerate_segments(self) -> None:
        trail = Part.seq(
            Part.line(Point(0, 0), Point(10, 0)),
            Part.line(Point(0, 0), Point(0, 0)),
            Part.line(Point(0, 0), Point(0, 10)),
        )
        assert len(trail.contours[0].segments) == 2

    def test_single_closed_operand_passes(self) -> None:
        circle = Part.seq(Part.circle(Point(0, 0), 5))
        assert len(circle.contours) == 1
        assert circle.contours[0].is_closed()

    def test_closed_operand_in_chain(self) -> None:
        with pytest.raises(ContourError, match="already closed"):
            Part.seq(Part.circle(Point(0, 0), 5), Part.line(Point(0, 0), Point(1, 0)))

    def test_operand_with_two_contours(self) -> None:
        ring = Part.stack(square(30.0), square(10.0).reverse().translate(Point(10, 10)))
        with pytest.raises(ContourError, match="exactly one contour"):
            Part.seq(ring, Part.line(Point(0, 0), Point(1, 0)))

    def test_no_operands(self) -> None:
        with pytest.raises(ContourError):
            Part.seq()

    def test_all_degenerate(self) -> None:
        with pytest.raises(ContourError, match="degenerate"):
            Part.seq(Part.line(Point(1, 1), Point(1, 1)), Part.line(Point(0, 0), Point(0, 0)))

    def test_single_trail_required_for_endpoints(self) -> None:
        with pytest.raises(ContourError, match="single trail"):
            _ = Part.empty().start


class TestStack:
    """Tests for Part.stack."""

    def test_ring(self) -> None:
        ring = Part.stack(square(30.0), square(10.0).reverse().translate(Point(10, 10)))
        assert len(ring.contours) == 2
        assert ring.contours[0].winding != ring.contours[1].winding

    def test_hole_winding_like_outer(self) -> None:
        with pytest.raises(WindingError, match="like its outer contour"):
            Part.stack(square(30.0), square(10.0).translate(Point(10, 10)))

    def test_hole_outside(self) -> None:
        with pytest.raises(WindingError, match="does not lie inside"):
            Part.stack(square(30.0), square(10.0).reverse().translate(Point(100, 100)))

    def test_open_operand(self) -> None:
        with pytest.raises(ContourError, match="do not coincide"):
            Part.stack(square(30.0), Part.line(Point(10, 10), Point(20, 20)))


class TestUnion:
    """Tests for Part.union."""

    def test_overlapping_squares_merge(self) -> None:
        merged = Part.union(square(10.0), square(10.0).translate(Point(5, 0)))
        assert len(merged.contours) == 1
        assert merged.bounds() == pytest.approx((0.0, 0.0, 15.0, 10.0), abs=1e-3)

    def test_disjoint_squares_stay_apart(self) -> None:
        merged = Part.union(square(10.0), square(10.0).translate(Point(20, 0)))
        assert len(merged.contours) == 2

    def test_ring_keeps_its_hole(self) -> None:
        ring = Part.stack(square(30.0), square(10.0).reverse().translate(Point(10, 10)))
        merged = Part.union(ring)
        assert len(merged.contours) == 2
        assert merged.contours[0].winding != merged.contours[1].winding

    def test_union_uses_placed_geometry(self) -> None:
        merged = Part.union(square(10.0).move_origin(Point(5, 5)))
        assert merged.origin == Point(0, 0)
        assert merged.bounds() == pytest.approx((-5.0, -5.0, 5.0, 5.0), abs=1e-3)

    def test_empty_operands(self) -> None:
        assert Part.union().is_empty()
        assert Part.union(Part.empty()).is_empty()

    def test_open_operand(self) -> None:
        with pytest.raises(ContourError, match="do not coincide"):
            Part.union(square(), Part.line(Point(0, 0), Point(10, 10)))

    def test_inconsistent_winding(self) -> None:
        """Test that a hole wound like its outer contour is rejected."""
        bad = Part(square(30.0).contours + square(10.0).translate(Point(10, 10)).contours)
        with pytest.raises(WindingError):
            Part.union(bad)
