"""Core generation engine for glyphforge.

This module contains the main building blocks:

- Geometry: nearest points, intersections, area and containment tests
- Part: directed path algebra (seq, union, stack, reflections, rotations)
- StrokeSolver: bezier handle search matching stroke widths
- Generator: base class with metric memo, part cache and glyph registry
"""

from glyphforge.core.generator import Generator, metric, part_builder
from glyphforge.core.geometry import (
    intersections,
    nearest_point,
    nearest_point_on_bezier,
    nearest_point_on_segment,
    point_in_polygon,
    signed_area,
)
from glyphforge.core.part import Part
from glyphforge.core.solver import StrokeSolver

__all__ = [
    "Generator",
    "Part",
    "StrokeSolver",
    "intersections",
    "metric",
    "nearest_point",
    "nearest_point_on_bezier",
    "nearest_point_on_segment",
    "part_builder",
    "point_in_polygon",
    "signed_area",
]
