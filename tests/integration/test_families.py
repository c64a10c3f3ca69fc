"""Integration tests building every glyph of the Vekos and Kaleg families."""

import pytest

from glyphforge.config import GeometryConfig
from glyphforge.domain import Font, FontStretch, FontStyle, FontWeight
from glyphforge.families import (
    EdgeJoin,
    FontRegistry,
    KalegGenerator,
    VekosGenerator,
    create_kaleg_font,
    create_vekos_font,
)


def outline_width(font: Font, char: str) -> float:
    glyph = font.glyph(char)
    assert glyph is not None
    return glyph.outline.width


@pytest.fixture(scope="module")
def vekos() -> Font:
    return create_vekos_font(FontStyle())


@pytest.fixture(scope="module")
def kaleg() -> Font:
    return create_kaleg_font(FontStyle(), EdgeJoin.SHARP)


class TestVekos:
    """Tests for the Vekos family."""

    def test_every_char_builds(self, vekos: Font) -> None:
        """Test that every registered character yields a glyph placed between its bearings."""
        for char in vekos.get_chars():
            glyph = vekos.glyph(char)
            assert glyph is not None, char
            bearings = glyph.bearings
            if glyph.outline.is_empty():
                assert glyph.width == pytest.approx(bearings.left + bearings.right), char
                continue
            min_x, _, _, _ = glyph.outline.bounds()
            assert min_x == pytest.approx(bearings.left, abs=1e-2), char
            expected = bearings.left + glyph.outline.width + bearings.right
            assert glyph.width == pytest.approx(expected, abs=1e-2), char

    def test_config_of_regular_style(self, vekos: Font) -> None:
        config = vekos.generator.config
        assert config.weight_const == pytest.approx(1.0)
        assert config.stretch_const == pytest.approx(1.0)
        assert config.contrast_ratio == 0.75

    def test_bowl_width(self, vekos: Font) -> None:
        """Test that the outline of a is exactly one bowl wide."""
        assert outline_width(vekos, "a") == pytest.approx(450.0, abs=1e-2)

    def test_xal_width(self, vekos: Font) -> None:
        """Test that two narrow bowls overlap by one stroke."""
        assert outline_width(vekos, "x") == pytest.approx(710.0, abs=1e-2)

    def test_bowl_is_a_ring(self, vekos: Font) -> None:
        glyph = vekos.glyph("a")
        assert glyph is not None
        assert len(glyph.outline.contours) == 2

    def test_uppercase_matches_lowercase(self, vekos: Font) -> None:
        for lower, upper in (("a", "A"), ("t", "T"), ("n", "N")):
            lower_glyph = vekos.glyph(lower)
            upper_glyph = vekos.glyph(upper)
            assert lower_glyph is not None and upper_glyph is not None
            assert lower_glyph.width == upper_glyph.width

    def test_dot_rests_on_baseline(self, vekos: Font) -> None:
        glyph = vekos.glyph(".")
        assert glyph is not None
        _, min_y, _, max_y = glyph.outline.bounds()
        assert max_y == pytest.approx(VekosGenerator.OVERSHOOT, abs=1e-2)
        assert min_y < 0

    def test_space_is_empty(self, vekos: Font) -> None:
        glyph = vekos.glyph(" ")
        assert glyph is not None
        assert glyph.outline.is_empty()
        assert glyph.width == pytest.approx(450.0 * 0.55)

    def test_unknown_char(self, vekos: Font) -> None:
        assert vekos.glyph("w") is None

    def test_metrics(self, vekos: Font) -> None:
        metrics = vekos.generator.metrics
        assert metrics.ascent == 760
        assert metrics.descent == 290
        assert metrics.em == 1050


class TestVekosStyles:
    """Tests for the style to config mapping."""

    def test_bold_condensed(self) -> None:
        font = create_vekos_font(FontStyle(weight=FontWeight.BOLD, stretch=FontStretch.CONDENSED))
        assert font.full_name == "Vekos Bold Condensed"
        assert font.generator.config.weight_const == pytest.approx(1.5)
        assert font.generator.config.stretch_const == pytest.approx(0.85)

    def test_expanded(self) -> None:
        font = create_vekos_font(FontStyle(stretch=FontStretch.EXPANDED))
        assert font.generator.config.stretch_const == pytest.approx(1.25)

    def test_high_contrast(self) -> None:
        font = create_vekos_font(FontStyle(), high_contrast=True)
        assert font.family_name == "Vekos High"
        assert font.generator.ver_thickness == pytest.approx(20.0)

    def test_bold_glyphs_build(self) -> None:
        font = create_vekos_font(FontStyle(weight=FontWeight.BOLD))
        for char in ("a", "l", "5", "1", "3", "?"):
            assert font.glyph(char) is not None, char


class TestKaleg:
    """Tests for the Kaleg family."""

    @pytest.mark.parametrize("edge_join", list(EdgeJoin))
    @pytest.mark.parametrize("beaked", [False, True])
    def test_every_char_builds(self, edge_join: EdgeJoin, beaked: bool) -> None:
        font = create_kaleg_font(FontStyle(), edge_join, beaked=beaked)
        for char in font.get_chars():
            glyph = font.glyph(char)
            assert glyph is not None, char
            bearings = glyph.bearings
            expected = bearings.left + glyph.outline.width + bearings.right
            assert glyph.width == pytest.approx(expected, abs=1e-2), char

    def test_bowl_width(self, kaleg: Font) -> None:
        generator = kaleg.generator
        assert isinstance(generator, KalegGenerator)
        hor = 95 * 280 / 300
        assert generator.hor_thickness == pytest.approx(hor)
        assert generator.bowl_width == pytest.approx(400 + hor / 2)
        assert outline_width(kaleg, "o") == pytest.approx(generator.bowl_width, abs=1e-2)

    def test_x_width(self, kaleg: Font) -> None:
        generator = kaleg.generator
        expected = generator.bowl_width * 0.9 * 2 - generator.hor_thickness
        assert generator.x_width == pytest.approx(expected)
        assert outline_width(kaleg, "x") == pytest.approx(expected, abs=1e-2)

    def test_joins_change_corners_only(self) -> None:
        """Test that the join never changes the width of a letter."""
        widths = {
            join: outline_width(create_kaleg_font(FontStyle(), join), "t") for join in EdgeJoin
        }
        assert widths[EdgeJoin.BEVEL] == pytest.approx(widths[EdgeJoin.SHARP], abs=1e-2)
        assert widths[EdgeJoin.ROUND] == pytest.approx(widths[EdgeJoin.SHARP], abs=1e-2)

    def test_family_names(self) -> None:
        assert create_kaleg_font(FontStyle(), EdgeJoin.ROUND).family_name == "Kaleg Round"
        beaked = create_kaleg_font(FontStyle(), EdgeJoin.BEVEL, beaked=True)
        assert beaked.family_name == "Kaleg Bevel Beaked"


class TestFontRegistry:
    """Tests for the preset registry."""

    def test_ids(self) -> None:
        ids = FontRegistry.ids()
        assert len(ids) == 20
        assert ids[0] == "vkr"
        assert "krhr" in ids

    def test_unknown_id(self) -> None:
        assert FontRegistry.get("nope") is None

    def test_fonts_are_kept(self) -> None:
        assert FontRegistry.get("vkcb") is FontRegistry.get("vkcb")

    def test_full_names(self) -> None:
        font = FontRegistry.get("vkcb")
        assert font is not None
        assert font.full_name == "Vekos Bold Condensed"
        kaleg = FontRegistry.get("krhr")
        assert kaleg is not None
        assert kaleg.full_name == "Kaleg Round Beaked Regular"

    def test_get_all(self) -> None:
        fonts = FontRegistry.get_all()
        assert len(fonts) == 20
        assert len({font.full_name for font in fonts}) == 20

    def test_solver_settings_reach_generator(self) -> None:
        """Test that a custom solver step builds a separate font using that step."""
        geometry = GeometryConfig(solver_step=1.0)
        font = FontRegistry.get("vkr", geometry)
        assert font is not None
        assert font is not FontRegistry.get("vkr")
        assert font.generator.solver.step == 1.0
        assert font.glyph("a") is not None

    def test_default_solver_settings_are_cached(self) -> None:
        assert FontRegistry.get("ksr", GeometryConfig()) is FontRegistry.get("ksr")

    def test_factories_take_solver_settings(self) -> None:
        geometry = GeometryConfig(solver_step=2.0)
        vekos = create_vekos_font(FontStyle(), geometry=geometry)
        kaleg = create_kaleg_font(FontStyle(), EdgeJoin.SHARP, geometry=geometry)
        assert vekos.generator.solver.step == 2.0
        assert kaleg.generator.geometry.solver_step == 2.0
