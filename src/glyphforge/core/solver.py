"""Stroke-width solver for bezier handle lengths.

A curved stroke is drawn as two bezier edges. For one edge fixed, the
solver searches the handle length of the other edge so that the apparent
stroke width, measured from the midpoint of the stroke to the nearest point
on the searched edge, matches the width expected for the local stroke angle.
The expected width interpolates linearly between the vertical stroke
thickness (horizontal strokes) and the horizontal stroke thickness
(vertical strokes).
"""

import math
from collections.abc import Callable

from glyphforge.core.geometry import nearest_point
from glyphforge.domain import Bezier, Point

_X_AXIS = Point(1.0, 0.0)


class StrokeSolver:
    """Grid search over handle lengths.

    Attributes:
        hor_thickness: Width of vertical strokes (measured horizontally)
        ver_thickness: Width of horizontal strokes (measured vertically)
        step: Grid spacing of the handle search
    """

    def __init__(self, hor_thickness: float, ver_thickness: float, step: float = 0.5) -> None:
        if step <= 0:
            raise ValueError(f"Search step must be positive, got {step}")
        self.hor_thickness = hor_thickness
        self.ver_thickness = ver_thickness
        self.step = step

    def ideal_thickness(self, angle: float) -> float:
        """Expected stroke width at an angle in degrees.

        0 degrees is a horizontal stroke, 90 degrees a vertical one. Angles
        outside that range (and NaN) give an infinite width, so that any
        error computed from them loses every comparison.
        """
        if 0 <= angle <= 90:
            hor_weight = angle / 90
            ver_weight = 1 - angle / 90
            return hor_weight * self.hor_thickness + ver_weight * self.ver_thickness
        return math.inf

    def _error(self, curve: Bezier, base: Point) -> float:
        nearest = nearest_point(curve, base)
        angle = (nearest - base).angle_to(_X_AXIS) - 90
        return abs(nearest.distance_to(base) - self.ideal_thickness(angle) / 2)

    def tail_error(self, handle: float, other_handle: float, bend: float, height: float) -> float:
        """Width error of a descending tail edge.

        The edge runs from the zero point down to ``(-bend, height)``,
        leaving vertically with the searched handle and arriving vertically
        with the fixed one.
        """
        curve = Bezier(
            Point(0.0, 0.0),
            Point(0.0, handle),
            Point(-bend, height - other_handle),
            Point(-bend, height),
        )
        base = Point(-bend / 2 + self.hor_thickness / 2, height / 2)
        return self._error(curve, base)

    def spine_error(self, handle: float, other_handle: float, bend: float, width: float) -> float:
        """Width error of a rising spine edge.

        The edge runs from the zero point to ``(width, -bend)``, leaving
        horizontally with the searched handle and arriving horizontally with
        the fixed one.
        """
        curve = Bezier(
            Point(0.0, 0.0),
            Point(handle, 0.0),
            Point(width - other_handle, -bend),
            Point(width, -bend),
        )
        base = Point(width / 2, -bend / 2 + self.ver_thickness / 2)
        return self._error(curve, base)

    def search_handle(self, error: Callable[[float], float], limit: float) -> float:
        """Find the grid handle length with the smallest error.

        Candidates are ``0, step, 2 * step, ...`` up to ``limit``. Ties keep
        the first candidate; if every error is infinite the result is 0.

        Args:
            error: Error of a candidate handle length
            limit: Largest candidate

        Returns:
            Best handle length
        """
        result = 0.0
        minimum = math.inf
        count = int(math.floor(limit / self.step + 1e-9))
        for index in range(count + 1):
            handle = index * self.step
            value = error(handle)
            if value < minimum:
                minimum = value
                result = handle
        return result

    def search_tail_handle(self, other_handle: float, bend: float, height: float) -> float:
        return self.search_handle(
            lambda handle: self.tail_error(handle, other_handle, bend, height), height
        )

    def search_spine_handle(self, other_handle: float, bend: float, width: float) -> float:
        return self.search_handle(
            lambda handle: self.spine_error(handle, other_handle, bend, width), width
        )
