"""Internal Bezier curve helpers.

This is an internal module containing the subdivision, flattening and
polynomial routines used by the geometry functions. Not intended for public use.
"""

import math

from glyphforge.domain import Point


def split_cubic(points: list[Point], t: float) -> tuple[list[Point], list[Point]]:
    """Split a cubic Bezier curve at parameter t using De Casteljau's algorithm.

    Args:
        points: List of 4 control points [p0, p1, p2, p3]
        t: Split parameter in [0, 1]

    Returns:
        Control points of the left and right halves
    """
    p0, p1, p2, p3 = points

    def lerp(a: Point, b: Point) -> Point:
        return Point(a.x + (b.x - a.x) * t, a.y + (b.y - a.y) * t)

    q1 = lerp(p0, p1)
    q2 = lerp(p1, p2)
    q3 = lerp(p2, p3)
    r1 = lerp(q1, q2)
    r2 = lerp(q2, q3)
    mid = lerp(r1, r2)
    return [p0, q1, r1, mid], [mid, r2, q3, p3]


def flatten_cubic(points: list[Point], tolerance: float) -> list[Point]:
    """Flatten a cubic Bezier curve using recursive subdivision.

    Args:
        points: List of 4 control points [p0, p1, p2, p3]
        tolerance: Maximum distance from true curve

    Returns:
        List of points approximating the curve
    """
    p0, p1, p2, p3 = points

    # Distance of both handles from the chord bounds the flatness error
    chord = p3 - p0
    length = chord.length
    if length < 1e-12:
        deviation = max(p1.distance_to(p0), p2.distance_to(p0))
    else:
        deviation = max(
            abs(chord.x * (p.y - p0.y) - chord.y * (p.x - p0.x)) / length for p in (p1, p2)
        )

    if deviation <= tolerance:
        return [p0, p3]

    left, right = split_cubic(points, 0.5)
    return flatten_cubic(left, tolerance)[:-1] + flatten_cubic(right, tolerance)


def cubic_coefficients(p0: float, p1: float, p2: float, p3: float) -> tuple[float, float, float, float]:
    """Power basis coefficients (a, b, c, d) of one cubic coordinate: a*t^3 + b*t^2 + c*t + d."""
    a = -p0 + 3 * p1 - 3 * p2 + p3
    b = 3 * p0 - 6 * p1 + 3 * p2
    c = -3 * p0 + 3 * p1
    d = p0
    return a, b, c, d


def solve_cubic_in_unit(a: float, b: float, c: float, d: float) -> list[float]:
    """Find the real roots of a*t^3 + b*t^2 + c*t + d in [0, 1].

    The polynomial is bracketed between its critical points and each sign
    change is refined by bisection.

    Returns:
        Sorted roots in [0, 1]
    """

    def value(t: float) -> float:
        return ((a * t + b) * t + c) * t + d

    # Critical points split [0, 1] into monotonic pieces
    cuts = [0.0, 1.0]
    da, db, dc = 3 * a, 2 * b, c
    if abs(da) < 1e-12:
        if abs(db) > 1e-12:
            cuts.append(-dc / db)
    else:
        disc = db * db - 4 * da * dc
        if disc >= 0:
            sq = math.sqrt(disc)
            cuts.extend([(-db + sq) / (2 * da), (-db - sq) / (2 * da)])
    cuts = sorted(t for t in cuts if 0.0 <= t <= 1.0)

    roots: list[float] = []
    for lo, hi in zip(cuts, cuts[1:]):
        f_lo, f_hi = value(lo), value(hi)
        if abs(f_lo) < 1e-9:
            roots.append(lo)
            continue
        if f_lo * f_hi > 0:
            continue
        for _ in range(60):
            mid = (lo + hi) / 2
            f_mid = value(mid)
            if (f_lo < 0) == (f_mid < 0):
                lo, f_lo = mid, f_mid
            else:
                hi = mid
        roots.append((lo + hi) / 2)
    if cuts and abs(value(cuts[-1])) < 1e-9:
        roots.append(cuts[-1])

    unique: list[float] = []
    for root in sorted(roots):
        if not unique or root - unique[-1] > 1e-9:
            unique.append(root)
    return unique
