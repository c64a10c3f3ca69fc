"""Domain models for glyphforge.

This module contains the value types the generator works with: points,
segments and contours in design space, finished glyphs with their metrics,
and the identity of a font.

Key classes:
- Point: A 2D point (y-down design space)
- Line, Bezier, Circle: Segment variants
- Contour: A connected sequence of segments
- Glyph: A placed outline with metrics and advance width
- Font: A family style paired with its generator
"""

from glyphforge.domain.contour import (
    KAPPA,
    ORIGIN,
    Bezier,
    Circle,
    Contour,
    Line,
    Point,
    Segment,
    WindingDirection,
)
from glyphforge.domain.font import Font, FontInfo, FontSlant, FontStretch, FontStyle, FontWeight
from glyphforge.domain.glyph import Bearings, Glyph, Metrics

__all__: list[str] = [
    # Constants
    "KAPPA",
    "ORIGIN",
    # Enums
    "WindingDirection",
    "FontWeight",
    "FontStretch",
    "FontSlant",
    # Geometry
    "Point",
    "Line",
    "Bezier",
    "Circle",
    "Segment",
    "Contour",
    # Glyphs and fonts
    "Metrics",
    "Bearings",
    "Glyph",
    "FontStyle",
    "FontInfo",
    "Font",
]
