"""Unit tests for the Generator base class."""

import pytest
from pydantic import BaseModel

from glyphforge.config import GeometryConfig
from glyphforge.core import Generator, Part, StrokeSolver, metric, part_builder
from glyphforge.domain import Bearings, Glyph, Metrics, Point, WindingDirection
from glyphforge.exceptions import DuplicateGlyphError


class BoxConfig(BaseModel):
    size: float = 10.0


class BoxGenerator(Generator[BoxConfig]):
    """Two-glyph family used to exercise the caches and the registry."""

    def __init__(self, config: BoxConfig, geometry: GeometryConfig | None = None) -> None:
        self.metric_calls = 0
        self.part_calls = 0
        super().__init__(config, geometry)

    def register_glyphs(self) -> None:
        self.register(self.glyph_box, "b", "B")
        self.register(self.glyph_pair, "p")

    @metric
    def metrics(self) -> Metrics:
        return Metrics(em=1000, ascent=800, descent=200)

    @metric
    def bearings(self) -> Bearings:
        return Bearings(5, 5)

    @metric
    def hor_thickness(self) -> float:
        return 10.0

    @metric
    def ver_thickness(self) -> float:
        return 5.0

    @metric
    def double_size(self) -> float:
        self.metric_calls += 1
        return self.config.size * 2

    @part_builder
    def box(self) -> Part:
        self.part_calls += 1
        size = self.config.size
        return Part.seq(
            Part.line(Point(0, 0), Point(size, 0)),
            Part.line(Point(0, 0), Point(0, -size)),
            Part.line(Point(0, 0), Point(-size, 0)),
            Part.line(Point(0, 0), Point(0, size)),
        )

    def glyph_box(self) -> Glyph:
        return self.make_glyph(self.box())

    def glyph_pair(self) -> Glyph:
        return self.make_glyph(self.box(), self.box().translate(Point(20, 0)))


@pytest.fixture
def generator() -> BoxGenerator:
    return BoxGenerator(BoxConfig())


class TestCaches:
    """Tests for metric memoization and the part cache."""

    def test_metric_is_memoized(self, generator: BoxGenerator) -> None:
        assert generator.double_size == 20.0
        assert generator.double_size == 20.0
        assert generator.metric_calls == 1

    def test_part_built_once(self, generator: BoxGenerator) -> None:
        generator.box()
        generator.box()
        assert generator.part_calls == 1

    def test_cached_parts_are_independent(self, generator: BoxGenerator) -> None:
        """Test that mutating one read never affects the next one."""
        first = generator.box()
        first.contours[0].segments.clear()
        first.contours.clear()
        second = generator.box()
        assert first is not second
        assert len(second.contours) == 1
        assert len(second.contours[0].segments) == 4

    def test_solver_uses_thicknesses_and_step(self) -> None:
        generator = BoxGenerator(BoxConfig(), GeometryConfig(solver_step=1.0))
        solver = generator.solver
        assert isinstance(solver, StrokeSolver)
        assert solver.hor_thickness == 10.0
        assert solver.ver_thickness == 5.0
        assert solver.step == 1.0
        assert generator.solver is solver


class TestRegistry:
    """Tests for glyph registration and lookup."""

    def test_registration_order(self, generator: BoxGenerator) -> None:
        assert generator.get_chars() == ["b", "B", "p"]

    def test_unknown_char(self, generator: BoxGenerator) -> None:
        assert generator.glyph("z") is None

    def test_shared_builder(self, generator: BoxGenerator) -> None:
        lower = generator.glyph("b")
        upper = generator.glyph("B")
        assert lower is not None and upper is not None
        assert lower.width == upper.width

    def test_duplicate_registration(self, generator: BoxGenerator) -> None:
        with pytest.raises(DuplicateGlyphError) as exc_info:
            generator.register(generator.glyph_box, "p")
        assert exc_info.value.char == "p"

    def test_glyph_width(self, generator: BoxGenerator) -> None:
        glyph = generator.glyph("b")
        assert glyph is not None
        assert glyph.width == pytest.approx(20.0)

    def test_union_of_placed_parts(self, generator: BoxGenerator) -> None:
        glyph = generator.glyph("p")
        assert glyph is not None
        assert len(glyph.outline.contours) == 2
        assert glyph.width == pytest.approx(40.0)


class TestShapes:
    """Tests for the shared quarter and ring helpers."""

    def test_quarter(self) -> None:
        quarter = Generator.quarter(100, 50)
        assert quarter.start == Point(0, 0)
        assert quarter.end == Point(100, -50)
        segment = quarter.contours[0].segments[0]
        assert segment.control1 == Point(0, -5)
        assert segment.control2 == Point(0, -50)

    def test_ring(self, generator: BoxGenerator) -> None:
        """Test that a ring is two opposite contours starting at its leftmost point."""
        ring = generator.ring(
            Generator.quarter(100, 50),
            Generator.quarter(100, 50),
            Generator.quarter(90, 45),
            10,
        )
        assert len(ring.contours) == 2
        outer, hole = ring.contours
        assert outer.winding == WindingDirection.CLOCKWISE
        assert hole.winding == WindingDirection.COUNTER_CLOCKWISE
        assert ring.bounds() == pytest.approx((0.0, -50.0, 200.0, 50.0))
        assert hole.bounds() == pytest.approx((10.0, -45.0, 190.0, 45.0))
