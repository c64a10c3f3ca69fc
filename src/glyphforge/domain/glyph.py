"""Glyph representation and metrics.

This module defines the glyph domain model: a finished outline together with
the vertical metrics of its font and the horizontal advance derived from its
side bearings.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from fontTools.pens.transformPen import TransformPen

from glyphforge.domain.contour import Point

if TYPE_CHECKING:
    from glyphforge.core.part import Part


@dataclass(frozen=True)
class Metrics:
    """Vertical metrics shared by every glyph of a font.

    Attributes:
        em: Units per em
        ascent: Distance from the baseline up to the top of the em box
        descent: Distance from the baseline down to the bottom of the em box
    """

    em: float
    ascent: float
    descent: float


@dataclass(frozen=True)
class Bearings:
    """Left and right side bearings of a glyph."""

    left: float
    right: float


@dataclass
class Glyph:
    """A finished glyph ready for export.

    Attributes:
        outline: Outline part in design space (y-down)
        metrics: Font-wide vertical metrics
        bearings: Side bearings used to place the outline
        width: Advance width in font units
    """

    outline: "Part"
    metrics: Metrics
    bearings: Bearings
    width: float

    @classmethod
    def by_bearings(cls, part: "Part", metrics: Metrics, bearings: Bearings) -> "Glyph":
        """Place an outline between its side bearings.

        The outline is shifted horizontally so its left edge sits at
        ``bearings.left``. The advance width is the left bearing plus the
        horizontal extent of the outline plus the right bearing; an empty
        outline has zero extent.

        Args:
            part: Outline to place
            metrics: Font-wide vertical metrics
            bearings: Side bearings

        Returns:
            New glyph owning the shifted outline
        """
        if part.is_empty():
            return cls(part, metrics, bearings, bearings.left + bearings.right)
        min_x, _, max_x, _ = part.bounds()
        outline = part.translate(Point(bearings.left - min_x, 0.0))
        width = bearings.left + (max_x - min_x) + bearings.right
        return cls(outline, metrics, bearings, width)

    def draw(self, pen: Any) -> None:
        """Draw the outline to a fontTools pen in font space (y-up)."""
        self.outline.draw(TransformPen(pen, (1, 0, 0, -1, 0, 0)))
