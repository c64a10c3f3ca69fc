"""Directed path algebra used to build glyph outlines.

A Part is a list of contours in local coordinates plus an origin. The
geometry a part contributes when it is composed ("placed" geometry) is its
local geometry shifted by minus the origin, so moving the origin changes
where the part lands without changing its shape.

All operations are pure: they return a new Part and leave their operands
untouched. Primitive trails (lines and beziers) are built in relative terms
and chained with ``seq``; closed shapes are combined with ``union`` (a
polygon union through shapely, curves flattened first) or ``stack`` (a ring
made of an outer contour and a hole).
"""

import logging
from collections.abc import Iterable
from typing import Any

from shapely.geometry import Polygon
from shapely.geometry.base import BaseGeometry
from shapely.geometry.polygon import orient
from shapely.ops import unary_union

from glyphforge.core.geometry import point_in_polygon
from glyphforge.domain import ORIGIN, Bezier, Circle, Contour, Line, Point, Segment
from glyphforge.domain.contour import CLOSURE_TOLERANCE, POINT_TOLERANCE, Bounds
from glyphforge.exceptions import ContourError, WindingError

logger = logging.getLogger(__name__)

# Flattening tolerance of curves entering a union, in font units
UNION_TOLERANCE = 0.1


def _draw_contour(contour: Contour, pen: Any) -> None:
    if not contour.segments:
        return
    pen.moveTo(contour.start.to_tuple())
    for segment in contour.segments:
        if isinstance(segment, Line):
            pen.lineTo(segment.end.to_tuple())
        else:
            pen.curveTo(
                segment.control1.to_tuple(),
                segment.control2.to_tuple(),
                segment.end.to_tuple(),
            )
    if contour.is_closed():
        pen.closePath()
    else:
        pen.endPath()


def _to_shapely(contours: Iterable[Contour]) -> BaseGeometry:
    """Filled region of an operand whose contours passed the nesting check.

    Winding alternates with depth, so the even-odd region built by
    symmetric difference equals the non-zero fill.
    """
    region: BaseGeometry = Polygon()
    for contour in contours:
        points = [point.to_tuple() for point in contour.polygon(UNION_TOLERANCE)]
        if len(points) < 3:
            continue
        ring = Polygon(points)
        if not ring.is_valid:
            ring = ring.buffer(0)
        region = region.symmetric_difference(ring)
    return region


def _iter_polygons(geometry: BaseGeometry) -> list[Polygon]:
    if isinstance(geometry, Polygon):
        return [] if geometry.is_empty else [geometry]
    polygons: list[Polygon] = []
    for item in getattr(geometry, "geoms", []):
        polygons.extend(_iter_polygons(item))
    return polygons


def _ring_contour(coords: Iterable[tuple[float, ...]]) -> Contour:
    points = [Point(x, y) for x, y, *_ in coords]
    return Contour(
        [Line(a, b) for a, b in zip(points, points[1:]) if not a.almost_equals(b, POINT_TOLERANCE)]
    )


def _from_shapely(geometry: BaseGeometry) -> list[Contour]:
    """Contours of a union result, outer rings wound clockwise and holes counter-clockwise."""
    contours = []
    for polygon in _iter_polygons(geometry):
        polygon = orient(polygon, sign=-1.0)
        contours.append(_ring_contour(polygon.exterior.coords))
        contours.extend(_ring_contour(interior.coords) for interior in polygon.interiors)
    return contours


def _check_closed(contours: list[Contour], operation: str) -> None:
    for contour in contours:
        if not contour.is_closed(CLOSURE_TOLERANCE):
            gap = contour.start.distance_to(contour.end)
            raise ContourError(
                f"{operation}: contour endpoints do not coincide "
                f"(start {contour.start.to_tuple()}, end {contour.end.to_tuple()}, gap {gap:.4f})"
            )


def _check_nesting(contours: list[Contour], operation: str) -> None:
    """Check that winding alternates with nesting depth.

    Every outermost contour must wind in the same direction and each nested
    level must wind opposite to the level containing it.
    """
    if len(contours) < 2:
        return
    polygons = [contour.polygon() for contour in contours]
    depths = []
    for i, polygon in enumerate(polygons):
        if not polygon:
            depths.append(0)
            continue
        probe = polygon[0]
        depth = sum(
            1 for j, other in enumerate(polygons) if j != i and point_in_polygon(probe, other)
        )
        depths.append(depth)

    outer = [c.winding for c, d in zip(contours, depths) if d == 0]
    if not outer:
        return
    base = outer[0]
    for contour, depth in zip(contours, depths):
        expected = base if depth % 2 == 0 else base.opposite()
        if contour.winding is not expected:
            raise WindingError(
                f"{operation}: contour at nesting depth {depth} winds "
                f"{contour.winding.name.lower()}, expected {expected.name.lower()}"
            )


def _contains(outer: Contour, inner: Contour) -> bool:
    """Check that a contour lies inside another, allowing contact on the boundary."""
    o_min_x, o_min_y, o_max_x, o_max_y = outer.bounds()
    i_min_x, i_min_y, i_max_x, i_max_y = inner.bounds()
    eps = CLOSURE_TOLERANCE
    if (
        i_min_x < o_min_x - eps
        or i_min_y < o_min_y - eps
        or i_max_x > o_max_x + eps
        or i_max_y > o_max_y + eps
    ):
        return False
    polygon = outer.polygon()
    return any(point_in_polygon(point, polygon) for point in inner.polygon())


class Part:
    """A group of contours with an origin, composed into glyph outlines.

    Attributes:
        contours: Contours in local coordinates
        origin: Local point that is placed at the zero point when composing
    """

    def __init__(self, contours: list[Contour] | None = None, origin: Point = ORIGIN) -> None:
        self.contours: list[Contour] = contours if contours is not None else []
        self.origin = origin

    def __repr__(self) -> str:
        return f"Part(contours={len(self.contours)}, origin={self.origin.to_tuple()})"

    @classmethod
    def line(cls, start: Point, end: Point) -> "Part":
        """Create a straight trail."""
        return cls([Contour([Line(start, end)])])

    @classmethod
    def bezier(
        cls,
        start: Point,
        start_handle: Point | None,
        end_handle: Point | None,
        end: Point,
    ) -> "Part":
        """Create a cubic trail from handles relative to their end points.

        Args:
            start: Start point
            start_handle: Offset of the first control point from ``start``;
                ``None`` for a zero-length handle
            end_handle: Offset of the second control point from ``end``;
                ``None`` for a zero-length handle
            end: End point

        Returns:
            Single-segment trail
        """
        control1 = start + start_handle if start_handle is not None else start
        control2 = end + end_handle if end_handle is not None else end
        return cls([Contour([Bezier(start, control1, control2, end)])])

    @classmethod
    def circle(cls, center: Point, radius: float) -> "Part":
        """Create a closed circle starting at its leftmost point."""
        return cls([Contour(list(Circle(center, radius).to_beziers()))])

    @classmethod
    def empty(cls) -> "Part":
        return cls()

    def _with_contours(self, contours: list[Contour]) -> "Part":
        return Part(contours, self.origin)

    def _map(self, fn: Any) -> "Part":
        return self._with_contours([contour.transformed(fn) for contour in self.contours])

    def clone(self) -> "Part":
        """Deep copy of the contour list; segments are shared immutable values."""
        return self._with_contours([contour.copy() for contour in self.contours])

    def reverse(self) -> "Part":
        """Flip the traversal direction (and therefore the winding) of every contour."""
        return self._with_contours([contour.reversed() for contour in self.contours])

    def reflect_hor(self) -> "Part":
        """Mirror about the vertical axis through the origin."""
        ox = self.origin.x
        return self._map(lambda p: Point(2 * ox - p.x, p.y))

    def reflect_ver(self) -> "Part":
        """Mirror about the horizontal axis through the origin."""
        oy = self.origin.y
        return self._map(lambda p: Point(p.x, 2 * oy - p.y))

    def rotate_half_turn(self) -> "Part":
        """Rotate by 180 degrees about the origin."""
        ox, oy = self.origin.x, self.origin.y
        return self._map(lambda p: Point(2 * ox - p.x, 2 * oy - p.y))

    def rotate(self, angle: float) -> "Part":
        """Rotate by an angle in degrees about the origin."""
        origin = self.origin
        return self._map(lambda p: p.rotate(angle, origin))

    def translate(self, offset: Point) -> "Part":
        """Shift the geometry rigidly; the origin stays where it is."""
        return self._with_contours([contour.translated(offset) for contour in self.contours])

    def move_origin(self, point: Point) -> "Part":
        """Set the origin to a point in local coordinates without moving geometry."""
        return Part([contour.copy() for contour in self.contours], point)

    def placed_contours(self) -> list[Contour]:
        """Contours as they land when the part is composed."""
        if self.origin.almost_equals(ORIGIN, 0.0):
            return [contour.copy() for contour in self.contours]
        return [contour.translated(-self.origin) for contour in self.contours]

    def is_empty(self) -> bool:
        return not any(contour.segments for contour in self.contours)

    def bounds(self) -> Bounds:
        """Bounding box of the placed geometry as (min_x, min_y, max_x, max_y)."""
        boxes = [contour.bounds() for contour in self.placed_contours() if contour.segments]
        if not boxes:
            return (0.0, 0.0, 0.0, 0.0)
        return (
            min(b[0] for b in boxes),
            min(b[1] for b in boxes),
            max(b[2] for b in boxes),
            max(b[3] for b in boxes),
        )

    @property
    def width(self) -> float:
        min_x, _, max_x, _ = self.bounds()
        return max_x - min_x

    def _single(self) -> Contour:
        contours = self.placed_contours()
        if len(contours) != 1 or not contours[0].segments:
            raise ContourError(f"Expected a single trail, got {len(contours)} contours")
        return contours[0]

    @property
    def start(self) -> Point:
        return self._single().start

    @property
    def end(self) -> Point:
        return self._single().end

    def draw(self, pen: Any) -> None:
        """Draw the placed geometry to a fontTools pen in design space."""
        for contour in self.placed_contours():
            _draw_contour(contour, pen)

    def almost_equals(self, other: "Part", tolerance: float = POINT_TOLERANCE) -> bool:
        """Compare placed geometry contour by contour."""
        mine, theirs = self.placed_contours(), other.placed_contours()
        if len(mine) != len(theirs):
            return False
        return all(a.almost_equals(b, tolerance) for a, b in zip(mine, theirs))

    @staticmethod
    def seq(*parts: "Part") -> "Part":
        """Chain trails into one contour.

        Each operand after the first is moved so that it starts where the
        previous one ends; the first keeps its placed position. When the
        chain returns to its start the contour is closed exactly. A single
        closed operand (such as a circle) is passed through unchanged.

        Args:
            *parts: Single-contour trails

        Returns:
            Part holding the chained contour, with its origin at the zero point

        Raises:
            ContourError: If an operand does not hold exactly one contour, or
                a closed operand is chained with others
        """
        if not parts:
            raise ContourError("seq needs at least one operand")

        trails = []
        for index, part in enumerate(parts):
            contours = [contour for contour in part.placed_contours() if contour.segments]
            if len(contours) != 1:
                raise ContourError(
                    f"seq operand {index} must hold exactly one contour, got {len(contours)}"
                )
            trails.append(contours[0])

        if len(trails) == 1:
            return Part([trails[0]])

        segments: list[Segment] = []
        for index, trail in enumerate(trails):
            live = [segment for segment in trail.segments if not segment.is_degenerate()]
            if len(live) > 1 and trail.is_closed():
                raise ContourError(f"seq operand {index} is already closed")
            if not live:
                continue
            if segments:
                offset = segments[-1].end - trail.start
                live = [segment.transformed(lambda p, o=offset: p + o) for segment in live]
            segments.extend(live)

        if not segments:
            raise ContourError("seq operands are all degenerate")

        start, end = segments[0].start, segments[-1].end
        if end.distance_to(start) <= CLOSURE_TOLERANCE and len(segments) > 1:
            last = segments[-1]
            if isinstance(last, Line):
                segments[-1] = Line(last.start, start)
            else:
                segments[-1] = Bezier(last.start, last.control1, last.control2, start)
        return Part([Contour(segments)])

    @staticmethod
    def union(*parts: "Part") -> "Part":
        """Boolean union of the placed geometry of every operand.

        Each operand is validated first: all of its contours must be closed
        and wind consistently by nesting depth, so that the non-zero fill of
        every operand is the intended region. Curves are flattened within
        ``UNION_TOLERANCE`` before the merge, so the result holds lines only.

        Args:
            *parts: Closed parts to merge

        Returns:
            Part holding the merged outline, with its origin at the zero point

        Raises:
            ContourError: If an operand has an open contour
            WindingError: If an operand's contours wind inconsistently
        """
        operands = []
        for part in parts:
            contours = [contour for contour in part.placed_contours() if contour.segments]
            if not contours:
                continue
            _check_closed(contours, "union")
            _check_nesting(contours, "union")
            operands.append(contours)

        if not operands:
            return Part()

        result = unary_union([_to_shapely(contours) for contours in operands])
        if not result.is_valid:
            result = result.buffer(0)

        merged = _from_shapely(result)
        logger.debug("union of %d operands gave %d contours", len(operands), len(merged))
        return Part(merged)

    @staticmethod
    def stack(outer: "Part", inner: "Part") -> "Part":
        """Build a ring from an outer shape and a hole.

        The result keeps both contour sets as one compound part, filled with
        the non-zero rule.

        Args:
            outer: Closed outer shape
            inner: Closed hole, wound opposite to ``outer``

        Returns:
            Compound part with its origin at the zero point

        Raises:
            ContourError: If either operand has an open contour
            WindingError: If a hole winds like its ring or lies outside it
        """
        outer_contours = [contour for contour in outer.placed_contours() if contour.segments]
        inner_contours = [contour for contour in inner.placed_contours() if contour.segments]
        _check_closed(outer_contours, "stack")
        _check_closed(inner_contours, "stack")

        for hole in inner_contours:
            ring = next((c for c in outer_contours if _contains(c, hole)), None)
            if ring is None:
                raise WindingError("stack: hole does not lie inside the outer contour")
            if hole.winding is ring.winding:
                raise WindingError(
                    f"stack: hole winds {hole.winding.name.lower()} like its outer contour"
                )
        return Part(outer_contours + inner_contours)
