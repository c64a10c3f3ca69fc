"""Base class for per-style glyph generators.

A generator owns an immutable family config and derives everything else
from it: numeric metrics (memoized on first access), primitive parts
(cached once and cloned on every read) and a character table mapping each
supported character to the method that builds its glyph.
"""

import functools
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from glyphforge.config import GeometryConfig
from glyphforge.core.part import Part
from glyphforge.core.solver import StrokeSolver
from glyphforge.domain import Bearings, Glyph, Metrics, Point
from glyphforge.exceptions import DuplicateGlyphError

logger = logging.getLogger(__name__)

ConfigT = TypeVar("ConfigT", bound=BaseModel)
GlyphBuilder = Callable[[], Glyph]
T = TypeVar("T")


def metric(method: Callable[[Any], T]) -> property:
    """Turn a zero-argument method into a property memoized under its name."""
    name = method.__name__

    @functools.wraps(method)
    def getter(self: "Generator[Any]") -> T:
        return self.memo(name, lambda: method(self))

    return property(getter)


def part_builder(method: Callable[[Any], Part]) -> Callable[[Any], Part]:
    """Route a zero-argument part method through the generator's part cache."""
    name = method.__name__

    @functools.wraps(method)
    def wrapper(self: "Generator[Any]") -> Part:
        return self.cached_part(name, lambda: method(self))

    return wrapper


class Generator(ABC, Generic[ConfigT]):
    """Character to outline mapping for one font style.

    Subclasses describe a family: its metrics, its primitive parts and the
    glyph builders registered from ``register_glyphs``.

    Attributes:
        config: Immutable family parameters
        geometry: Solver settings
    """

    def __init__(self, config: ConfigT, geometry: GeometryConfig | None = None) -> None:
        self.config = config
        self.geometry = geometry or GeometryConfig()
        self._memo: dict[str, Any] = {}
        self._parts: dict[str, Part] = {}
        self._builders: dict[str, GlyphBuilder] = {}
        self.register_glyphs()

    @abstractmethod
    def register_glyphs(self) -> None:
        """Register every glyph builder of the family."""

    @property
    @abstractmethod
    def metrics(self) -> Metrics:
        """Vertical metrics of the font."""

    @property
    @abstractmethod
    def bearings(self) -> Bearings:
        """Default side bearings."""

    @property
    @abstractmethod
    def hor_thickness(self) -> float:
        """Width of vertical strokes."""

    @property
    @abstractmethod
    def ver_thickness(self) -> float:
        """Width of horizontal strokes."""

    def memo(self, name: str, compute: Callable[[], T]) -> T:
        """Return the value stored under a name, computing it on first access."""
        if name in self._memo:
            return self._memo[name]
        return self._memo.setdefault(name, compute())

    def cached_part(self, name: str, build: Callable[[], Part]) -> Part:
        """Return a clone of the part stored under a name, building it on first access.

        The stored part is never handed out; every caller, the first one
        included, gets an independent clone.
        """
        part = self._parts.get(name)
        if part is None:
            logger.debug("Building part %s", name)
            part = self._parts.setdefault(name, build())
        return part.clone()

    def register(self, builder: GlyphBuilder, *chars: str) -> None:
        """Map characters to a glyph builder.

        Raises:
            DuplicateGlyphError: If a character is already registered
        """
        for char in chars:
            if char in self._builders:
                raise DuplicateGlyphError(char)
            self._builders[char] = builder

    def get_chars(self) -> list[str]:
        """Registered characters in registration order."""
        return list(self._builders)

    def glyph(self, char: str) -> Glyph | None:
        """Build the glyph of a character, or None if it is not supported."""
        builder = self._builders.get(char)
        if builder is None:
            return None
        glyph = builder()
        logger.debug("Built glyph %r with width %.2f", char, glyph.width)
        return glyph

    @metric
    def solver(self) -> StrokeSolver:
        return StrokeSolver(self.hor_thickness, self.ver_thickness, self.geometry.solver_step)

    def make_glyph(self, *parts: Part, bearings: Bearings | None = None) -> Glyph:
        """Union placed parts into one outline and set it between side bearings."""
        return Glyph.by_bearings(Part.union(*parts), self.metrics, bearings or self.bearings)

    @staticmethod
    def quarter(width: float, height: float, handle_ratio: float = 0.1) -> Part:
        """Rising quarter curve from a vertical tangent at the zero point to a horizontal one."""
        return Part.bezier(
            Point(0, 0), Point(0, -height * handle_ratio), Point(-width, 0), Point(width, -height)
        )

    def ring(self, outer_left: Part, outer_right: Part, inner: Part, thickness: float) -> Part:
        """Build a bowl from quarter curves.

        Quarters run from the left end up to the top end. The outer edge uses
        ``outer_left`` for its left half and ``outer_right`` (mirrored) for
        its right half, so the two halves can differ; the inner edge is
        shifted right by the stroke thickness and reversed to form the hole.

        Args:
            outer_left: Outer quarter of the left half
            outer_right: Outer quarter of the right half, drawn as a left quarter
            inner: Inner quarter
            thickness: Horizontal stroke thickness

        Returns:
            Ring with its origin at its leftmost point
        """
        outer = Part.seq(
            outer_left.reflect_ver(),
            outer_right.rotate_half_turn().reverse(),
            outer_right.reflect_hor(),
            outer_left.reverse(),
        )
        hole = Part.seq(
            inner.reflect_ver(),
            inner.rotate_half_turn().reverse(),
            inner.reflect_hor(),
            inner.reverse(),
        )
        return Part.stack(outer, hole.reverse().translate(Point(thickness, 0)))
