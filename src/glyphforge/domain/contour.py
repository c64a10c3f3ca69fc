"""Core geometric types for contour representation.

This module defines the fundamental geometric types used throughout glyphforge:
- Point: A 2D point (design space, y grows downwards)
- Line, Bezier, Circle: The segment variants a contour is made of
- Contour: An ordered, connected sequence of segments
- WindingDirection: Enum for contour winding direction
"""

import math
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Union

# Circle approximation constant for four cubic arcs
KAPPA = 4 * (math.sqrt(2) - 1) / 3

# Distance under which two points are considered the same
POINT_TOLERANCE = 1e-6

# Distance under which a contour's end is considered back at its start
CLOSURE_TOLERANCE = 1e-3


class WindingDirection(Enum):
    """Contour winding direction.

    Determined by the sign of the shoelace area in design coordinates:
    - Positive area: counter-clockwise
    - Negative area: clockwise

    Since design space is y-down, a contour reported as counter-clockwise
    here looks clockwise on screen.
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()

    def opposite(self) -> "WindingDirection":
        """Return the other direction."""
        if self is WindingDirection.CLOCKWISE:
            return WindingDirection.COUNTER_CLOCKWISE
        return WindingDirection.CLOCKWISE


@dataclass(frozen=True, slots=True)
class Point:
    """A point (or vector) in 2D design space.

    Immutable and hashable, so segments built from points can be shared
    between cloned parts.

    Attributes:
        x: X coordinate in font units
        y: Y coordinate in font units (y-down)
    """

    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def __mul__(self, scalar: float) -> "Point":
        return Point(self.x * scalar, self.y * scalar)

    @property
    def length(self) -> float:
        """Euclidean length of the point seen as a vector."""
        return math.hypot(self.x, self.y)

    @property
    def angle(self) -> float:
        """Signed angle of the vector from the positive x axis, in degrees."""
        return math.degrees(math.atan2(self.y, self.x))

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def dot(self, other: "Point") -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def angle_to(self, other: "Point") -> float:
        """Unsigned angle between this vector and another, in degrees.

        The result lies in [0, 180]. It is NaN when either vector has zero
        length, since no direction is defined.

        Args:
            other: Reference direction

        Returns:
            Angle in degrees, or NaN for a zero vector
        """
        div = self.length * other.length
        if div < 1e-12:
            return math.nan
        cosine = max(-1.0, min(1.0, self.dot(other) / div))
        return math.degrees(math.acos(cosine))

    def rotate(self, angle: float, center: "Point | None" = None) -> "Point":
        """Rotate around a center by an angle in degrees.

        Args:
            angle: Rotation angle in degrees
            center: Center of rotation (defaults to the zero point)

        Returns:
            Rotated point
        """
        cx, cy = (center.x, center.y) if center is not None else (0.0, 0.0)
        radians = math.radians(angle)
        cos, sin = math.cos(radians), math.sin(radians)
        dx, dy = self.x - cx, self.y - cy
        return Point(cx + dx * cos - dy * sin, cy + dx * sin + dy * cos)

    def almost_equals(self, other: "Point", tolerance: float = POINT_TOLERANCE) -> bool:
        """Check whether two points coincide within a tolerance."""
        return abs(self.x - other.x) <= tolerance and abs(self.y - other.y) <= tolerance

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)


ORIGIN = Point(0.0, 0.0)

Transform = Callable[[Point], Point]
Bounds = tuple[float, float, float, float]


@dataclass(frozen=True, slots=True)
class Line:
    """A straight segment."""

    start: Point
    end: Point

    def reversed(self) -> "Line":
        return Line(self.end, self.start)

    def transformed(self, fn: Transform) -> "Line":
        return Line(fn(self.start), fn(self.end))

    def point_at(self, t: float) -> Point:
        return Point(
            self.start.x + (self.end.x - self.start.x) * t,
            self.start.y + (self.end.y - self.start.y) * t,
        )

    def bounds(self) -> Bounds:
        return (
            min(self.start.x, self.end.x),
            min(self.start.y, self.end.y),
            max(self.start.x, self.end.x),
            max(self.start.y, self.end.y),
        )

    def flatten(self, tolerance: float = 0.5) -> list[Point]:
        return [self.start, self.end]

    def is_degenerate(self) -> bool:
        return self.start.almost_equals(self.end)

    def almost_equals(self, other: "Segment", tolerance: float = POINT_TOLERANCE) -> bool:
        return (
            isinstance(other, Line)
            and self.start.almost_equals(other.start, tolerance)
            and self.end.almost_equals(other.end, tolerance)
        )


@dataclass(frozen=True, slots=True)
class Bezier:
    """A cubic bezier segment with absolute control points."""

    start: Point
    control1: Point
    control2: Point
    end: Point

    @property
    def points(self) -> tuple[Point, Point, Point, Point]:
        return (self.start, self.control1, self.control2, self.end)

    def reversed(self) -> "Bezier":
        return Bezier(self.end, self.control2, self.control1, self.start)

    def transformed(self, fn: Transform) -> "Bezier":
        return Bezier(fn(self.start), fn(self.control1), fn(self.control2), fn(self.end))

    def point_at(self, t: float) -> Point:
        mt = 1 - t
        a = mt * mt * mt
        b = 3 * mt * mt * t
        c = 3 * mt * t * t
        d = t * t * t
        return Point(
            a * self.start.x + b * self.control1.x + c * self.control2.x + d * self.end.x,
            a * self.start.y + b * self.control1.y + c * self.control2.y + d * self.end.y,
        )

    def bounds(self) -> Bounds:
        """Exact bounding box, using the curve's extrema on both axes."""
        ts = [0.0, 1.0]
        for axis in ("x", "y"):
            p0, p1, p2, p3 = (getattr(p, axis) for p in self.points)
            ts.extend(_extrema(p0, p1, p2, p3))
        points = [self.point_at(t) for t in ts]
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return (min(xs), min(ys), max(xs), max(ys))

    def flatten(self, tolerance: float = 0.5) -> list[Point]:
        """Approximate the curve with a polyline within the tolerance."""
        from glyphforge.core._bezier import flatten_cubic

        return flatten_cubic(list(self.points), tolerance)

    def is_degenerate(self) -> bool:
        return all(self.start.almost_equals(p) for p in self.points[1:])

    def almost_equals(self, other: "Segment", tolerance: float = POINT_TOLERANCE) -> bool:
        return isinstance(other, Bezier) and all(
            a.almost_equals(b, tolerance) for a, b in zip(self.points, other.points)
        )


def _extrema(p0: float, p1: float, p2: float, p3: float) -> list[float]:
    """Parameters in (0, 1) where the derivative of one cubic coordinate vanishes."""
    a = -p0 + 3 * p1 - 3 * p2 + p3
    b = 2 * (p0 - 2 * p1 + p2)
    c = p1 - p0
    roots: list[float] = []
    if abs(a) < 1e-12:
        if abs(b) > 1e-12:
            roots.append(-c / b)
    else:
        disc = b * b - 4 * a * c
        if disc >= 0:
            sq = math.sqrt(disc)
            roots.extend([(-b + sq) / (2 * a), (-b - sq) / (2 * a)])
    return [t for t in roots if 0 < t < 1]


@dataclass(frozen=True, slots=True)
class Circle:
    """A full circle, expanded to four cubic arcs when placed in a contour."""

    center: Point
    radius: float

    def to_beziers(self) -> list[Bezier]:
        """Expand into arcs starting at the leftmost point.

        The arcs run left, top, right, bottom in design space.
        """
        cx, cy, r = self.center.x, self.center.y, self.radius
        k = r * KAPPA
        left = Point(cx - r, cy)
        top = Point(cx, cy - r)
        right = Point(cx + r, cy)
        bottom = Point(cx, cy + r)
        return [
            Bezier(left, Point(cx - r, cy - k), Point(cx - k, cy - r), top),
            Bezier(top, Point(cx + k, cy - r), Point(cx + r, cy - k), right),
            Bezier(right, Point(cx + r, cy + k), Point(cx + k, cy + r), bottom),
            Bezier(bottom, Point(cx - k, cy + r), Point(cx - r, cy + k), left),
        ]


Segment = Union[Line, Bezier]


@dataclass
class Contour:
    """An ordered, connected sequence of segments.

    A contour may be open (a trail still being assembled) or closed (its
    end returns to its start). Segments are immutable values, so copying
    the segment list is enough to get an independent contour.

    Attributes:
        segments: List of segments, each starting where the previous ends
    """

    segments: list[Segment] = field(default_factory=list)

    @property
    def start(self) -> Point:
        return self.segments[0].start

    @property
    def end(self) -> Point:
        return self.segments[-1].end

    def is_closed(self, tolerance: float = CLOSURE_TOLERANCE) -> bool:
        """Check whether the contour ends where it starts."""
        if not self.segments:
            return False
        return self.start.distance_to(self.end) <= tolerance

    def reversed(self) -> "Contour":
        """Return the same contour traversed in the opposite direction."""
        return Contour([segment.reversed() for segment in reversed(self.segments)])

    def transformed(self, fn: Transform) -> "Contour":
        """Apply a point transformation to every segment."""
        return Contour([segment.transformed(fn) for segment in self.segments])

    def translated(self, offset: Point) -> "Contour":
        """Shift the contour rigidly by an offset."""
        return self.transformed(lambda p: p + offset)

    def copy(self) -> "Contour":
        return Contour(list(self.segments))

    def polygon(self, tolerance: float = 0.5) -> list[Point]:
        """Flatten the contour into a polyline.

        The closing point is not repeated, so a closed contour yields a
        polygon suitable for area and containment tests.

        Args:
            tolerance: Maximum distance from the true curve

        Returns:
            List of polyline vertices
        """
        points: list[Point] = []
        for segment in self.segments:
            flattened = segment.flatten(tolerance)
            points.extend(flattened if not points else flattened[1:])
        if len(points) > 1 and points[0].almost_equals(points[-1], CLOSURE_TOLERANCE):
            points.pop()
        return points

    def signed_area(self) -> float:
        """Signed area of the flattened contour, recomputed on every call.

        Positive area means counter-clockwise winding, negative clockwise.
        """
        from glyphforge.core.geometry import signed_area

        return signed_area(self.polygon())

    @property
    def winding(self) -> WindingDirection:
        """Winding direction derived from the signed area."""
        if self.signed_area() > 0:
            return WindingDirection.COUNTER_CLOCKWISE
        return WindingDirection.CLOCKWISE

    def bounds(self) -> Bounds:
        """Calculate the exact bounding box of the contour.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if not self.segments:
            return (0.0, 0.0, 0.0, 0.0)
        boxes = [segment.bounds() for segment in self.segments]
        return (
            min(b[0] for b in boxes),
            min(b[1] for b in boxes),
            max(b[2] for b in boxes),
            max(b[3] for b in boxes),
        )

    def almost_equals(self, other: "Contour", tolerance: float = POINT_TOLERANCE) -> bool:
        """Compare two contours segment by segment."""
        if len(self.segments) != len(other.segments):
            return False
        return all(a.almost_equals(b, tolerance) for a, b in zip(self.segments, other.segments))
