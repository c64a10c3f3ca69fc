"""Geometric operations on points, segments and contours.

This module provides core mathematical utilities for:
- Signed area calculation (shoelace formula)
- Point-in-polygon testing (ray casting algorithm)
- Nearest point calculations on lines, beziers, contours and parts
- Intersections between two paths, ordered along the first one

All functions are pure and stateless.
"""

import math
from collections.abc import Iterable
from typing import TYPE_CHECKING, Union

from glyphforge.core._bezier import cubic_coefficients, solve_cubic_in_unit, split_cubic
from glyphforge.domain import Bezier, Contour, Line, Point, Segment

if TYPE_CHECKING:
    from glyphforge.core.part import Part

Path = Union[Segment, Contour, "Part"]

# Samples taken along a bezier before refining the nearest point
NEAREST_SAMPLES = 100

# Parameter tolerance at which nearest point refinement stops
NEAREST_EPSILON = 1e-8

# Distance under which two intersection points are merged
INTERSECTION_TOLERANCE = 1e-6

# Flatness at which bezier/bezier subdivision falls back to chords
_SUBDIVISION_FLATNESS = 1e-4
_SUBDIVISION_DEPTH = 40


def signed_area(points: list[Point]) -> float:
    """Shoelace area of a closed polyline.

    Positive means counter-clockwise in design coordinates, which is the
    ``WindingDirection.COUNTER_CLOCKWISE`` of a contour. Polylines with
    fewer than three vertices have no area.

    Args:
        points: Polygon vertices, the closing vertex not repeated

    Returns:
        Signed area in square font units
    """
    if len(points) < 3:
        return 0.0
    twice_area = sum(a.x * b.y - b.x * a.y for a, b in zip(points, points[1:] + points[:1]))
    return twice_area / 2.0


def point_in_polygon(point: Point, polygon: list[Point]) -> bool:
    """Determine if a point is inside a polygon using ray casting algorithm.

    Casts a horizontal ray from the point to the right and counts intersections
    with polygon edges. Odd number of intersections = inside, even = outside.

    Args:
        point: The point to test
        polygon: List of points forming the polygon boundary

    Returns:
        True if point is inside polygon, False otherwise
    """
    n = len(polygon)
    if n < 3:
        return False

    inside = False
    x, y = point.x, point.y
    j = n - 1

    for i in range(n):
        xi, yi = polygon[i].x, polygon[i].y
        xj, yj = polygon[j].x, polygon[j].y

        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside

        j = i

    return inside


def _segment_params(p1: Point, p2: Point, p3: Point, p4: Point) -> tuple[float, float] | None:
    """Parameters (t, u) of the crossing of segments p1-p2 and p3-p4, if any."""
    x1, y1 = p1.x, p1.y
    x2, y2 = p2.x, p2.y
    x3, y3 = p3.x, p3.y
    x4, y4 = p4.x, p4.y

    denom = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)

    # Lines are parallel or coincident
    if abs(denom) < 1e-12:
        return None

    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / denom
    u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / denom

    eps = 1e-9
    if -eps <= t <= 1 + eps and -eps <= u <= 1 + eps:
        return min(max(t, 0.0), 1.0), min(max(u, 0.0), 1.0)
    return None


def nearest_point_on_segment(point: Point, seg_start: Point, seg_end: Point) -> tuple[Point, float]:
    """Find the closest point on a line segment to a given point.

    Projects the point onto the infinite line, then clamps to the segment endpoints.

    Args:
        point: The point to project
        seg_start: Start point of line segment
        seg_end: End point of line segment

    Returns:
        Tuple of (nearest_point, distance)
    """
    dx = seg_end.x - seg_start.x
    dy = seg_end.y - seg_start.y

    segment_length_sq = dx * dx + dy * dy
    if segment_length_sq < 1e-12:
        return seg_start, point.distance_to(seg_start)

    t = ((point.x - seg_start.x) * dx + (point.y - seg_start.y) * dy) / segment_length_sq
    t = max(0.0, min(1.0, t))

    nearest = Point(seg_start.x + t * dx, seg_start.y + t * dy)
    return nearest, point.distance_to(nearest)


def nearest_point_on_bezier(point: Point, bezier: Bezier) -> tuple[Point, float]:
    """Find the closest point on a cubic bezier to a given point.

    Samples the curve uniformly, then refines around the best sample by
    stepping in both directions and halving the step whenever neither
    direction improves, until the step falls below the parameter tolerance.

    Args:
        point: The point to project
        bezier: The curve to search

    Returns:
        Tuple of (nearest_point, distance)
    """
    min_dist = math.inf
    min_t = 0.0

    def refine(t: float) -> bool:
        nonlocal min_dist, min_t
        if 0.0 <= t <= 1.0:
            candidate = bezier.point_at(t)
            dist = (candidate.x - point.x) ** 2 + (candidate.y - point.y) ** 2
            if dist < min_dist:
                min_dist = dist
                min_t = t
                return True
        return False

    for i in range(NEAREST_SAMPLES + 1):
        refine(i / NEAREST_SAMPLES)

    step = 1 / (NEAREST_SAMPLES * 2)
    while step > NEAREST_EPSILON:
        if not refine(min_t - step) and not refine(min_t + step):
            step /= 2

    nearest = bezier.point_at(min_t)
    return nearest, point.distance_to(nearest)


def _path_contours(path: Path) -> list[Contour]:
    if isinstance(path, (Line, Bezier)):
        return [Contour([path])]
    if isinstance(path, Contour):
        return [path]
    return path.placed_contours()


def nearest_point(path: Path, point: Point) -> Point:
    """Find the closest point on a segment, contour or part.

    Parts are searched on their placed geometry, across all contours.

    Args:
        path: Segment, contour or part to search
        point: The point to project

    Returns:
        The nearest point on the path

    Raises:
        ValueError: If the path has no segments
    """
    best: Point | None = None
    best_dist = math.inf
    for contour in _path_contours(path):
        for segment in contour.segments:
            if isinstance(segment, Line):
                candidate, dist = nearest_point_on_segment(point, segment.start, segment.end)
            else:
                candidate, dist = nearest_point_on_bezier(point, segment)
            if dist < best_dist:
                best, best_dist = candidate, dist
    if best is None:
        raise ValueError("Cannot find nearest point on an empty path")
    return best


def _line_line(a: Line, b: Line) -> list[float]:
    params = _segment_params(a.start, a.end, b.start, b.end)
    return [params[0]] if params is not None else []


def _bezier_line(bezier: Bezier, line: Line) -> list[tuple[float, float]]:
    """Parameters (t on bezier, u on line) of the crossings of a bezier and a line."""
    direction = line.end - line.start
    length_sq = direction.dot(direction)
    if length_sq < 1e-24:
        return []

    # Signed distance of each control point from the line, scaled by its length
    dists = [
        direction.x * (p.y - line.start.y) - direction.y * (p.x - line.start.x)
        for p in bezier.points
    ]
    result = []
    for t in solve_cubic_in_unit(*cubic_coefficients(*dists)):
        p = bezier.point_at(t)
        u = (p - line.start).dot(direction) / length_sq
        if -1e-9 <= u <= 1 + 1e-9:
            result.append((t, min(max(u, 0.0), 1.0)))
    return result


def _flatness(points: list[Point]) -> float:
    p0, p3 = points[0], points[-1]
    chord = p3 - p0
    length = chord.length
    if length < 1e-12:
        return max(p.distance_to(p0) for p in points)
    return max(abs(chord.x * (p.y - p0.y) - chord.y * (p.x - p0.x)) / length for p in points)


def _box(points: list[Point]) -> tuple[float, float, float, float]:
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return (min(xs), min(ys), max(xs), max(ys))


def _bezier_bezier(
    a: list[Point],
    a_range: tuple[float, float],
    b: list[Point],
    b_range: tuple[float, float],
    depth: int,
    result: list[float],
) -> None:
    """Collect parameters on curve a where it crosses curve b, by bounding-box subdivision."""
    box_a, box_b = _box(a), _box(b)
    eps = 1e-9
    if (
        box_a[2] < box_b[0] - eps
        or box_b[2] < box_a[0] - eps
        or box_a[3] < box_b[1] - eps
        or box_b[3] < box_a[1] - eps
    ):
        return

    if depth >= _SUBDIVISION_DEPTH or (
        _flatness(a) < _SUBDIVISION_FLATNESS and _flatness(b) < _SUBDIVISION_FLATNESS
    ):
        params = _segment_params(a[0], a[-1], b[0], b[-1])
        if params is not None:
            t = a_range[0] + params[0] * (a_range[1] - a_range[0])
            result.append(t)
        return

    a_mid = (a_range[0] + a_range[1]) / 2
    b_mid = (b_range[0] + b_range[1]) / 2
    a_left, a_right = split_cubic(a, 0.5)
    b_left, b_right = split_cubic(b, 0.5)
    for a_part, a_sub in ((a_left, (a_range[0], a_mid)), (a_right, (a_mid, a_range[1]))):
        for b_part, b_sub in ((b_left, (b_range[0], b_mid)), (b_right, (b_mid, b_range[1]))):
            _bezier_bezier(a_part, a_sub, b_part, b_sub, depth + 1, result)


def segment_intersections(a: Segment, b: Segment) -> list[float]:
    """Parameters on segment a where it crosses segment b, unsorted."""
    if isinstance(a, Line) and isinstance(b, Line):
        return _line_line(a, b)
    if isinstance(a, Bezier) and isinstance(b, Line):
        return [t for t, _ in _bezier_line(a, b)]
    if isinstance(a, Line) and isinstance(b, Bezier):
        return [u for _, u in _bezier_line(b, a)]
    result: list[float] = []
    _bezier_bezier(list(a.points), (0.0, 1.0), list(b.points), (0.0, 1.0), 0, result)
    return result


def _merge(points: Iterable[Point]) -> list[Point]:
    merged: list[Point] = []
    for point in points:
        if not merged or not merged[-1].almost_equals(point, INTERSECTION_TOLERANCE):
            merged.append(point)
    return merged


def intersections(path_a: Path, path_b: Path) -> list[Point]:
    """Find all crossing points of two paths, ordered along the first path.

    Crossings are sorted by contour index, segment index and curve parameter
    on ``path_a``. Points found twice (at a joint between two segments, or
    where two subdivision cells meet) are merged.

    Args:
        path_a: Path whose direction defines the order of the result
        path_b: Path crossed by ``path_a``

    Returns:
        Crossing points in order along ``path_a``
    """
    contours_b = _path_contours(path_b)
    result: list[Point] = []
    for contour_a in _path_contours(path_a):
        found: list[tuple[int, float, Point]] = []
        for index, segment_a in enumerate(contour_a.segments):
            for contour_b in contours_b:
                for segment_b in contour_b.segments:
                    for t in segment_intersections(segment_a, segment_b):
                        found.append((index, t, segment_a.point_at(t)))
        found.sort(key=lambda item: (item[0], item[1]))
        points = _merge(point for _, _, point in found)
        if (
            len(points) > 1
            and contour_a.is_closed()
            and points[0].almost_equals(points[-1], INTERSECTION_TOLERANCE)
        ):
            points.pop()
        result.extend(points)
    return result
