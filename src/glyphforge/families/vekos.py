"""The Vekos family.

Vekos letters are built from a small set of quarter curves: the bowl, the
narrow bowl used in pairs, beaks, tails and legs. Most letters come in pairs
where the second one adds a transphone mark (a small wave) to the right of
the first, and many letters are reflections or half turns of another.

Every part that two strokes overlap in is thinned on one side by a small
correction so the overlap does not look heavier than a single stroke.
"""

import logging

from pydantic import BaseModel, ConfigDict, Field

from glyphforge.config import GeometryConfig
from glyphforge.core import Generator, Part, intersections, metric, part_builder
from glyphforge.domain import Bearings, Font, FontInfo, FontStyle, Glyph, Metrics, Point
from glyphforge.exceptions import IntersectionError

logger = logging.getLogger(__name__)

VEKOS_INFO = FontInfo("Copyright 2019 Ziphil", "1.2.0")


class VekosConfig(BaseModel):
    """Style parameters of a Vekos font."""

    model_config = ConfigDict(frozen=True)

    weight_const: float = Field(gt=0.0, description="Stroke weight multiplier, 1 at regular")
    stretch_const: float = Field(gt=0.0, description="Width multiplier, 1 at normal stretch")
    contrast_ratio: float = Field(
        gt=0.0, le=1.0, description="Horizontal stroke thickness relative to vertical strokes"
    )


class VekosGenerator(Generator[VekosConfig]):
    """Glyph generator of the Vekos family."""

    MEAN = 500
    DESCENT = 250
    EXTRA_DESCENT = 40
    EXTRA_ASCENT = 10
    OVERSHOOT = 10

    def register_glyphs(self) -> None:
        self.register(self.glyph_les, "l", "L")
        self.register(self.glyph_res, "r", "R")
        self.register(self.glyph_pal, "p", "P")
        self.register(self.glyph_bol, "b", "B")
        self.register(self.glyph_cal, "c", "C")
        self.register(self.glyph_qol, "q", "Q")
        self.register(self.glyph_kal, "k", "K")
        self.register(self.glyph_gol, "g", "G")
        self.register(self.glyph_yes, "y", "Y")
        self.register(self.glyph_hes, "h", "H")
        self.register(self.glyph_sal, "s", "S")
        self.register(self.glyph_zol, "z", "Z")
        self.register(self.glyph_tal, "t", "T")
        self.register(self.glyph_dol, "d", "D")
        self.register(self.glyph_fal, "f", "F")
        self.register(self.glyph_vol, "v", "V")
        self.register(self.glyph_xal, "x", "X")
        self.register(self.glyph_jol, "j", "J")
        self.register(self.glyph_nes, "n", "N")
        self.register(self.glyph_mes, "m", "M")
        self.register(self.glyph_at, "a", "A")
        self.register(self.glyph_at_acute, "á", "Á")
        self.register(self.glyph_at_grave, "à", "À")
        self.register(self.glyph_at_circumflex, "â", "Â")
        self.register(self.glyph_it, "i", "I")
        self.register(self.glyph_it_acute, "í", "Í")
        self.register(self.glyph_it_grave, "ì", "Ì")
        self.register(self.glyph_it_circumflex, "î", "Î")
        self.register(self.glyph_et, "e", "E")
        self.register(self.glyph_et_acute, "é", "É")
        self.register(self.glyph_et_grave, "è", "È")
        self.register(self.glyph_et_circumflex, "ê", "Ê")
        self.register(self.glyph_ut, "u", "U")
        self.register(self.glyph_ut_acute, "ú", "Ú")
        self.register(self.glyph_ut_grave, "ù", "Ù")
        self.register(self.glyph_ut_circumflex, "û", "Û")
        self.register(self.glyph_ot, "o", "O")
        self.register(self.glyph_ot_acute, "ó", "Ó")
        self.register(self.glyph_ot_grave, "ò", "Ò")
        self.register(self.glyph_ot_circumflex, "ô", "Ô")
        self.register(self.glyph_rac, "6")
        self.register(self.glyph_pav, "4")
        self.register(self.glyph_qic, "2")
        self.register(self.glyph_keq, "8")
        self.register(self.glyph_nuf, "0")
        self.register(self.glyph_xef, "5")
        self.register(self.glyph_tas, "1")
        self.register(self.glyph_vun, "9")
        self.register(self.glyph_yus, "3")
        self.register(self.glyph_siz, "7")
        self.register(self.glyph_tadek, ",")
        self.register(self.glyph_dek, ".")
        self.register(self.glyph_kaltak, ":")
        self.register(self.glyph_middot, "·")
        self.register(self.glyph_badek, "!")
        self.register(self.glyph_padek, "?")
        self.register(self.glyph_nok, "'")
        self.register(self.glyph_dikak, "ʻ")
        self.register(self.glyph_fek, "-")
        self.register(self.glyph_fohak, "…")
        self.register(self.glyph_dash, "—")
        self.register(self.glyph_opening_rakut, "[", "«")
        self.register(self.glyph_closing_rakut, "]", "»")
        self.register(self.glyph_space, " ")

    # Metrics

    @metric
    def bearing(self) -> float:
        return self.bowl_width * 0.09

    @metric
    def metrics(self) -> Metrics:
        ascent = self.MEAN + self.DESCENT + self.EXTRA_ASCENT
        descent = self.DESCENT + self.EXTRA_DESCENT
        return Metrics(em=ascent + descent, ascent=ascent, descent=descent)

    @metric
    def bearings(self) -> Bearings:
        return Bearings(self.bearing, self.bearing)

    @metric
    def hor_thickness(self) -> float:
        return self.config.weight_const * 100

    @metric
    def ver_thickness(self) -> float:
        return self.hor_thickness * self.config.contrast_ratio

    @metric
    def bowl_width(self) -> float:
        return (self.config.weight_const * 80 + 370) * self.config.stretch_const

    def _centered(self, part: Part, width: float) -> Part:
        """Place a part whose origin is its center on the baseline, left edge at zero."""
        return part.translate(Point(width / 2, -self.MEAN / 2))

    # Bowl

    @part_builder
    def outer_bowl(self) -> Part:
        """Outer quarter of the bowl, from its left end up to its top end."""
        return self.quarter(self.bowl_width / 2, self.MEAN / 2 + self.OVERSHOOT)

    @part_builder
    def inner_bowl(self) -> Part:
        """Inner quarter of the bowl, from its left end up to its top end."""
        return self.quarter(
            self.bowl_width / 2 - self.hor_thickness,
            self.MEAN / 2 - self.ver_thickness + self.OVERSHOOT,
        )

    @part_builder
    def bowl(self) -> Part:
        """Round ring shared by most letters; origin at its center."""
        ring = self.ring(self.outer_bowl(), self.outer_bowl(), self.inner_bowl(), self.hor_thickness)
        return ring.move_origin(Point(self.bowl_width / 2, 0))

    # Les tail

    @metric
    def les_tail_bend(self) -> float:
        return self.bowl_width * 0.6

    @metric
    def les_tail_correction(self) -> float:
        return self.hor_thickness * 0.3

    @part_builder
    def left_les_tail(self) -> Part:
        bend = self.les_tail_bend - self.hor_thickness / 2 + self.les_tail_correction
        virtual_bend = self.les_tail_bend
        height = self.MEAN / 2 + self.DESCENT
        bottom_handle = self.DESCENT * 1.08
        top_handle = self.solver.search_tail_handle(bottom_handle, virtual_bend, height)
        return Part.bezier(Point(0, 0), Point(0, top_handle), Point(0, -bottom_handle), Point(-bend, height))

    @part_builder
    def right_les_tail(self) -> Part:
        bend = self.les_tail_bend - self.hor_thickness / 2
        height = self.MEAN / 2 + self.DESCENT
        top_handle = self.DESCENT * 1.08
        bottom_handle = self.solver.search_tail_handle(top_handle, bend, height)
        return Part.bezier(Point(0, 0), Point(0, top_handle), Point(0, -bottom_handle), Point(-bend, height))

    @part_builder
    def cut(self) -> Part:
        """Horizontal stroke end, left to right."""
        return Part.line(Point(0, 0), Point(self.hor_thickness, 0))

    @part_builder
    def vertical_cut(self) -> Part:
        """Vertical stroke end, top to bottom."""
        return Part.line(Point(0, 0), Point(0, self.ver_thickness))

    @part_builder
    def les_tail(self) -> Part:
        """Descender of l, reused as ascender and mirrored descender.

        The left side is thinned where it overlaps the bowl. The origin is
        the top left corner the uncorrected tail would have.
        """
        part = Part.seq(
            self.left_les_tail(),
            self.cut(),
            self.right_les_tail().reverse(),
            Part.line(Point(0, 0), Point(-self.hor_thickness + self.les_tail_correction, 0)),
        )
        return part.move_origin(Point(-self.les_tail_correction, 0))

    @part_builder
    def les(self) -> Part:
        return Part.union(
            self.bowl(),
            self.les_tail().translate(Point(self.bowl_width / 2 - self.hor_thickness, 0)),
        )

    # Transphone

    @metric
    def transphone_bend(self) -> float:
        return self.bowl_width * 0.15

    @metric
    def transphone_gap(self) -> float:
        return self.bowl_width * 0.18

    @part_builder
    def transphone_segment(self) -> Part:
        height = self.MEAN / 2
        return Part.bezier(Point(0, 0), None, Point(0, -height * 0.6), Point(self.transphone_bend, height))

    @part_builder
    def transphone_cut(self) -> Part:
        return Part.line(Point(0, 0), Point(self.hor_thickness * 0.95, 0))

    @part_builder
    def transphone(self) -> Part:
        """Wave mark; origin at the left middle of its bulge."""
        part = Part.seq(
            self.transphone_segment(),
            self.transphone_segment().reflect_ver().reverse(),
            self.transphone_cut(),
            self.transphone_segment().reflect_ver(),
            self.transphone_segment().reverse(),
            self.transphone_cut().reverse(),
        )
        return part.move_origin(Point(self.transphone_bend, self.MEAN / 2))

    def _transphone_after(self, width: float) -> Part:
        return self.transphone().translate(Point(width + self.transphone_gap, -self.MEAN / 2))

    def glyph_les(self) -> Glyph:
        return self.make_glyph(self._centered(self.les(), self.bowl_width))

    def glyph_res(self) -> Glyph:
        return self.make_glyph(
            self._centered(self.les(), self.bowl_width),
            self._transphone_after(self.bowl_width),
        )

    def glyph_pal(self) -> Glyph:
        return self.make_glyph(self._centered(self.les().rotate_half_turn(), self.bowl_width))

    def glyph_bol(self) -> Glyph:
        return self.make_glyph(
            self._centered(self.les().rotate_half_turn(), self.bowl_width),
            self._transphone_after(self.bowl_width),
        )

    def glyph_cal(self) -> Glyph:
        return self.make_glyph(self._centered(self.les().reflect_hor(), self.bowl_width))

    def glyph_qol(self) -> Glyph:
        return self.make_glyph(
            self._centered(self.les().reflect_hor(), self.bowl_width),
            self._transphone_after(self.bowl_width),
        )

    def glyph_kal(self) -> Glyph:
        return self.make_glyph(self._centered(self.les().reflect_ver(), self.bowl_width))

    def glyph_gol(self) -> Glyph:
        return self.make_glyph(
            self._centered(self.les().reflect_ver(), self.bowl_width),
            self._transphone_after(self.bowl_width),
        )

    # Yes

    @metric
    def yes_leg_bend(self) -> float:
        return self.bowl_width * 0.15

    @part_builder
    def yes_leg(self) -> Part:
        height = self.MEAN / 2
        return Part.bezier(Point(0, 0), Point(0, height * 0.6), None, Point(self.yes_leg_bend, height))

    @part_builder
    def yes(self) -> Part:
        part = Part.seq(
            self.yes_leg(),
            self.cut(),
            self.yes_leg().reverse(),
            self.inner_bowl(),
            self.inner_bowl().reflect_hor().reverse(),
            self.yes_leg().reflect_hor(),
            self.cut(),
            self.yes_leg().reflect_hor().reverse(),
            self.outer_bowl().reflect_hor(),
            self.outer_bowl().reverse(),
        )
        return part.move_origin(Point(self.bowl_width / 2, 0))

    def glyph_yes(self) -> Glyph:
        return self.make_glyph(self._centered(self.yes(), self.bowl_width))

    def glyph_hes(self) -> Glyph:
        return self.make_glyph(
            self._centered(self.yes(), self.bowl_width),
            self._transphone_after(self.bowl_width),
        )

    def glyph_sal(self) -> Glyph:
        return self.make_glyph(self._centered(self.yes().reflect_ver(), self.bowl_width))

    def glyph_zol(self) -> Glyph:
        return self.make_glyph(
            self._centered(self.yes().reflect_ver(), self.bowl_width),
            self._transphone_after(self.bowl_width),
        )

    # Tal

    @metric
    def tal_beak_width(self) -> float:
        return self.bowl_width / 2 * 0.95

    @metric
    def tal_beak_height(self) -> float:
        return self.MEAN * 0.35

    @metric
    def tal_width(self) -> float:
        return self.bowl_width / 2 + self.tal_beak_width

    @part_builder
    def outer_tal_beak(self) -> Part:
        """Outer edge of the beak, from its right end up to its top end."""
        width = self.tal_beak_width
        height = self.tal_beak_height + self.OVERSHOOT
        return Part.bezier(Point(0, 0), Point(0, -height * 0.05), Point(width, 0), Point(-width, -height))

    @part_builder
    def inner_tal_beak(self) -> Part:
        width = self.tal_beak_width - self.hor_thickness
        height = self.tal_beak_height - self.ver_thickness + self.OVERSHOOT
        return Part.bezier(Point(0, 0), Point(0, -height * 0.05), Point(width, 0), Point(-width, -height))

    @part_builder
    def tal(self) -> Part:
        part = Part.seq(
            self.outer_bowl().reflect_ver(),
            self.outer_tal_beak().reflect_ver().reverse(),
            self.cut().reverse(),
            self.inner_tal_beak().reflect_ver(),
            self.inner_bowl().reflect_ver().reverse(),
            self.inner_bowl(),
            self.inner_tal_beak().reverse(),
            self.cut(),
            self.outer_tal_beak(),
            self.outer_bowl().reverse(),
        )
        return part.move_origin(Point(self.tal_width / 2, 0))

    def glyph_tal(self) -> Glyph:
        return self.make_glyph(self._centered(self.tal(), self.tal_width))

    def glyph_dol(self) -> Glyph:
        return self.make_glyph(
            self._centered(self.tal(), self.tal_width),
            self._transphone_after(self.tal_width),
        )

    def glyph_fal(self) -> Glyph:
        return self.make_glyph(self._centered(self.tal().reflect_hor(), self.tal_width))

    def glyph_vol(self) -> Glyph:
        return self.make_glyph(
            self._centered(self.tal().reflect_hor(), self.tal_width),
            self._transphone_after(self.tal_width),
        )

    # Narrow bowl and xal

    @metric
    def narrow_bowl_virtual_width(self) -> float:
        """Apparent width of a narrow bowl; the built one is thinner on its right side."""
        return self.bowl_width * 0.9

    @metric
    def narrow_bowl_correction(self) -> float:
        return self.hor_thickness * 0.15

    @metric
    def xal_width(self) -> float:
        return self.narrow_bowl_virtual_width * 2 - self.hor_thickness

    @part_builder
    def outer_left_narrow_bowl(self) -> Part:
        return self.quarter(self.narrow_bowl_virtual_width / 2, self.MEAN / 2 + self.OVERSHOOT)

    @part_builder
    def outer_right_narrow_bowl(self) -> Part:
        """Outer quarter of the right half, drawn mirrored like a left quarter."""
        return self.quarter(
            self.narrow_bowl_virtual_width / 2 - self.narrow_bowl_correction,
            self.MEAN / 2 + self.OVERSHOOT,
        )

    @part_builder
    def inner_narrow_bowl(self) -> Part:
        return self.quarter(
            self.narrow_bowl_virtual_width / 2 - self.hor_thickness,
            self.MEAN / 2 - self.ver_thickness + self.OVERSHOOT,
        )

    @part_builder
    def narrow_bowl(self) -> Part:
        ring = self.ring(
            self.outer_left_narrow_bowl(),
            self.outer_right_narrow_bowl(),
            self.inner_narrow_bowl(),
            self.hor_thickness,
        )
        return ring.move_origin(Point(self.narrow_bowl_virtual_width / 2, 0))

    @part_builder
    def xal(self) -> Part:
        part = Part.union(
            self.narrow_bowl(),
            self.narrow_bowl()
            .reflect_hor()
            .translate(Point(self.narrow_bowl_virtual_width - self.hor_thickness, 0)),
        )
        return part.move_origin(Point(self.xal_width / 2 - self.narrow_bowl_virtual_width / 2, 0))

    def glyph_xal(self) -> Glyph:
        return self.make_glyph(self._centered(self.xal(), self.xal_width))

    def glyph_jol(self) -> Glyph:
        return self.make_glyph(
            self._centered(self.xal(), self.xal_width),
            self._transphone_after(self.xal_width),
        )

    # Nes

    @metric
    def spine_width(self) -> float:
        return self.bowl_width * 0.5

    @metric
    def nes_width(self) -> float:
        return self.narrow_bowl_virtual_width + self.spine_width

    @part_builder
    def nes_leg(self) -> Part:
        """Closing leg of n, top to bottom, bending left."""
        height = self.MEAN / 2
        return Part.bezier(Point(0, 0), Point(0, height * 0.6), None, Point(-self.yes_leg_bend, height))

    @part_builder
    def top_spine(self) -> Part:
        width = self.spine_width
        bend = self.MEAN - self.ver_thickness + self.OVERSHOOT * 2
        right_handle = width * 1.05
        left_handle = self.solver.search_spine_handle(right_handle, bend, width)
        return Part.bezier(Point(0, 0), Point(left_handle, 0), Point(-right_handle, 0), Point(width, -bend))

    @part_builder
    def bottom_spine(self) -> Part:
        width = self.spine_width
        bend = self.MEAN - self.ver_thickness + self.OVERSHOOT * 2
        left_handle = width * 1.05
        right_handle = self.solver.search_spine_handle(left_handle, bend, width)
        return Part.bezier(Point(0, 0), Point(left_handle, 0), Point(-right_handle, 0), Point(width, -bend))

    @part_builder
    def nes(self) -> Part:
        part = Part.seq(
            self.outer_left_narrow_bowl().reflect_ver(),
            self.bottom_spine(),
            self.inner_narrow_bowl().reflect_hor().reverse(),
            self.nes_leg(),
            self.cut(),
            self.nes_leg().reverse(),
            self.outer_left_narrow_bowl().reflect_hor(),
            self.top_spine().reverse(),
            self.inner_narrow_bowl().reflect_ver().reverse(),
            self.nes_leg().rotate_half_turn(),
            self.cut().reverse(),
            self.nes_leg().rotate_half_turn().reverse(),
        )
        return part.move_origin(Point(self.nes_width / 2, 0))

    def glyph_nes(self) -> Glyph:
        return self.make_glyph(self._centered(self.nes(), self.nes_width))

    def glyph_mes(self) -> Glyph:
        return self.make_glyph(
            self._centered(self.nes(), self.nes_width),
            self._transphone_after(self.nes_width),
        )

    # Diacritics

    @metric
    def diacritic_hor_thickness(self) -> float:
        return min(self.config.weight_const * 90, self.config.weight_const * 40 + 35)

    @metric
    def diacritic_ver_thickness(self) -> float:
        return self.diacritic_hor_thickness * self.config.contrast_ratio

    @metric
    def acute_width(self) -> float:
        return self.bowl_width * 0.6

    @metric
    def acute_height(self) -> float:
        return self.DESCENT * 0.55

    @metric
    def circumflex_width(self) -> float:
        return self.bowl_width * 0.5

    @metric
    def circumflex_height(self) -> float:
        return self.DESCENT * 0.75

    @metric
    def diacritic_gap(self) -> float:
        return self.DESCENT * 0.25

    @part_builder
    def outer_acute(self) -> Part:
        return self.quarter(self.acute_width / 2, self.acute_height)

    @part_builder
    def inner_acute(self) -> Part:
        return self.quarter(
            self.acute_width / 2 - self.diacritic_hor_thickness,
            self.acute_height - self.diacritic_ver_thickness,
        )

    @part_builder
    def acute_cut(self) -> Part:
        return Part.line(Point(0, 0), Point(self.diacritic_hor_thickness, 0))

    @part_builder
    def acute(self) -> Part:
        """Arch shaped accent; origin at its bottom center."""
        part = Part.seq(
            self.acute_cut(),
            self.inner_acute(),
            self.inner_acute().reflect_hor().reverse(),
            self.acute_cut(),
            self.outer_acute().reflect_hor(),
            self.outer_acute().reverse(),
        )
        return part.move_origin(Point(self.acute_width / 2, 0))

    @part_builder
    def outer_circumflex(self) -> Part:
        return self.quarter(self.circumflex_width / 2, self.circumflex_height / 2)

    @part_builder
    def inner_circumflex(self) -> Part:
        return self.quarter(
            self.circumflex_width / 2 - self.diacritic_hor_thickness,
            self.circumflex_height / 2 - self.diacritic_ver_thickness,
        )

    @part_builder
    def circumflex(self) -> Part:
        """Small ring accent; origin at its bottom center."""
        ring = self.ring(
            self.outer_circumflex(),
            self.outer_circumflex(),
            self.inner_circumflex(),
            self.diacritic_hor_thickness,
        )
        return ring.move_origin(Point(self.circumflex_width / 2, self.circumflex_height / 2))

    @part_builder
    def upper_acute(self) -> Part:
        return self.acute().translate(Point(self.bowl_width / 2, -self.MEAN - self.diacritic_gap))

    @part_builder
    def upper_grave(self) -> Part:
        return self.acute().reflect_ver().translate(
            Point(self.bowl_width / 2, -self.MEAN - self.acute_height - self.diacritic_gap)
        )

    @part_builder
    def upper_circumflex(self) -> Part:
        return self.circumflex().translate(Point(self.bowl_width / 2, -self.MEAN - self.diacritic_gap))

    @part_builder
    def lower_acute(self) -> Part:
        return self.acute().reflect_ver().translate(Point(self.tal_beak_width, self.diacritic_gap))

    @part_builder
    def lower_grave(self) -> Part:
        return self.acute().translate(
            Point(self.tal_beak_width, self.acute_height + self.diacritic_gap)
        )

    @part_builder
    def lower_circumflex(self) -> Part:
        return self.circumflex().translate(
            Point(self.tal_beak_width, self.circumflex_height + self.diacritic_gap)
        )

    def glyph_at(self) -> Glyph:
        return self.make_glyph(self._centered(self.bowl(), self.bowl_width))

    def glyph_at_acute(self) -> Glyph:
        return self.make_glyph(self._centered(self.bowl(), self.bowl_width), self.upper_acute())

    def glyph_at_grave(self) -> Glyph:
        return self.make_glyph(self._centered(self.bowl(), self.bowl_width), self.upper_grave())

    def glyph_at_circumflex(self) -> Glyph:
        return self.make_glyph(self._centered(self.bowl(), self.bowl_width), self.upper_circumflex())

    # It

    @metric
    def it_tail_bend(self) -> float:
        return self.bowl_width * 0.6

    @metric
    def link_width(self) -> float:
        return self.bowl_width * 0.8

    @part_builder
    def left_it_tail(self) -> Part:
        bend = self.it_tail_bend - self.hor_thickness / 2
        height = self.MEAN / 2 + self.DESCENT
        top_handle = self.DESCENT * 1.2
        bottom_handle = self.solver.search_tail_handle(top_handle, bend, height)
        return Part.bezier(Point(0, 0), Point(0, top_handle), Point(0, -bottom_handle), Point(bend, height))

    @part_builder
    def right_it_tail(self) -> Part:
        bend = self.it_tail_bend - self.hor_thickness / 2
        height = self.MEAN / 2 + self.DESCENT
        bottom_handle = self.DESCENT * 1.2
        top_handle = self.solver.search_tail_handle(bottom_handle, bend, height)
        return Part.bezier(Point(0, 0), Point(0, top_handle), Point(0, -bottom_handle), Point(bend, height))

    @part_builder
    def it(self) -> Part:
        part = Part.seq(
            self.left_it_tail(),
            self.cut(),
            self.right_it_tail().reverse(),
            self.inner_bowl(),
            self.inner_tal_beak().reverse(),
            self.cut(),
            self.outer_tal_beak(),
            self.outer_bowl().reverse(),
        )
        return part.move_origin(Point(self.tal_width / 2, 0))

    def glyph_it(self) -> Glyph:
        return self.make_glyph(self._centered(self.it(), self.tal_width))

    def glyph_it_acute(self) -> Glyph:
        return self.make_glyph(self._centered(self.it(), self.tal_width), self.upper_acute())

    def glyph_it_grave(self) -> Glyph:
        return self.make_glyph(self._centered(self.it(), self.tal_width), self.upper_grave())

    def glyph_it_circumflex(self) -> Glyph:
        return self.make_glyph(self._centered(self.it(), self.tal_width), self.upper_circumflex())

    def glyph_et(self) -> Glyph:
        return self.make_glyph(self._centered(self.it().rotate_half_turn(), self.tal_width))

    def glyph_et_acute(self) -> Glyph:
        return self.make_glyph(
            self._centered(self.it().rotate_half_turn(), self.tal_width), self.lower_acute()
        )

    def glyph_et_grave(self) -> Glyph:
        return self.make_glyph(
            self._centered(self.it().rotate_half_turn(), self.tal_width), self.lower_grave()
        )

    def glyph_et_circumflex(self) -> Glyph:
        return self.make_glyph(
            self._centered(self.it().rotate_half_turn(), self.tal_width), self.lower_circumflex()
        )

    # Ut

    @metric
    def ut_tail_bend(self) -> float:
        return self.bowl_width * 0.45

    @metric
    def link_upper_correction(self) -> float:
        return self.ver_thickness * 0.1

    @metric
    def link_lower_correction(self) -> float:
        return self.ver_thickness * 0.1

    @part_builder
    def outer_link(self) -> Part:
        width = self.link_width
        height = self.MEAN / 2 - self.link_lower_correction
        return Part.bezier(Point(0, 0), Point(0, height * 0.02), Point(-width, 0), Point(width, height))

    @part_builder
    def inner_link(self) -> Part:
        width = self.link_width - self.hor_thickness
        height = self.MEAN / 2 - self.ver_thickness
        return Part.bezier(Point(0, 0), Point(0, height * 0.02), Point(-width, 0), Point(width, height))

    @part_builder
    def left_ut_tail(self) -> Part:
        bend = self.ut_tail_bend + self.hor_thickness / 2
        return self.quarter(bend, self.DESCENT + self.ver_thickness - self.link_upper_correction)

    @part_builder
    def right_ut_tail(self) -> Part:
        return self.quarter(self.ut_tail_bend - self.hor_thickness / 2, self.DESCENT)

    @part_builder
    def upper_ut(self) -> Part:
        """Part of u above the baseline, thinned at the bottom where the tail joins."""
        part = Part.seq(
            self.outer_link(),
            Part.line(Point(0, 0), Point(0, -self.ver_thickness + self.link_lower_correction)),
            self.inner_link().reverse(),
            self.inner_bowl(),
            self.inner_tal_beak().reverse(),
            self.cut(),
            self.outer_tal_beak(),
            self.outer_bowl().reverse(),
        )
        return part.move_origin(Point(self.tal_width / 2, 0))

    @part_builder
    def ut_tail(self) -> Part:
        """Descender of u, thinned at the top; origin at its top right corner."""
        return Part.seq(
            self.left_ut_tail().reverse(),
            self.cut(),
            self.right_ut_tail(),
            Part.line(Point(0, 0), Point(0, -self.ver_thickness + self.link_upper_correction)),
        )

    @part_builder
    def ut(self) -> Part:
        return Part.union(
            self.upper_ut(),
            self.ut_tail().translate(
                Point(
                    -self.tal_width / 2 + self.link_width,
                    self.MEAN / 2 - self.ver_thickness + self.link_upper_correction,
                )
            ),
        )

    def glyph_ut(self) -> Glyph:
        return self.make_glyph(self._centered(self.ut(), self.tal_width))

    def glyph_ut_acute(self) -> Glyph:
        return self.make_glyph(self._centered(self.ut(), self.tal_width), self.upper_acute())

    def glyph_ut_grave(self) -> Glyph:
        return self.make_glyph(self._centered(self.ut(), self.tal_width), self.upper_grave())

    def glyph_ut_circumflex(self) -> Glyph:
        return self.make_glyph(self._centered(self.ut(), self.tal_width), self.upper_circumflex())

    def glyph_ot(self) -> Glyph:
        return self.make_glyph(self._centered(self.ut().rotate_half_turn(), self.tal_width))

    def glyph_ot_acute(self) -> Glyph:
        return self.make_glyph(
            self._centered(self.ut().rotate_half_turn(), self.tal_width), self.lower_acute()
        )

    def glyph_ot_grave(self) -> Glyph:
        return self.make_glyph(
            self._centered(self.ut().rotate_half_turn(), self.tal_width), self.lower_grave()
        )

    def glyph_ot_circumflex(self) -> Glyph:
        return self.make_glyph(
            self._centered(self.ut().rotate_half_turn(), self.tal_width), self.lower_circumflex()
        )

    # Digits

    @part_builder
    def rac(self) -> Part:
        return Part.union(
            self.yes().rotate_half_turn(),
            self.les_tail().translate(Point(self.bowl_width / 2 - self.hor_thickness, 0)),
        )

    def glyph_rac(self) -> Glyph:
        return self.make_glyph(self._centered(self.rac(), self.bowl_width))

    def glyph_pav(self) -> Glyph:
        return self.make_glyph(self._centered(self.rac().rotate_half_turn(), self.bowl_width))

    def glyph_qic(self) -> Glyph:
        return self.make_glyph(self._centered(self.rac().reflect_hor(), self.bowl_width))

    def glyph_keq(self) -> Glyph:
        return self.make_glyph(self._centered(self.rac().reflect_ver(), self.bowl_width))

    @metric
    def solidus_thickness_ratio(self) -> float:
        return min(-self.config.weight_const * 0.12 + 1.084, 1)

    @metric
    def solidus_grade(self) -> float:
        return self.MEAN / 2 * 0.8

    @metric
    def solidus_direction(self) -> Point:
        return Point(self.bowl_width / 2, -self.solidus_grade)

    @metric
    def solidus_length(self) -> float:
        """Length of the slash of 0, reaching half a stroke into the bowl on both sides."""
        ray = Part.line(Point(0, 0), self.solidus_direction)
        crossings = intersections(ray, self.bowl())
        if len(crossings) < 2:
            raise IntersectionError(
                f"Slash ray crosses the bowl {len(crossings)} times, expected 2"
            )
        raw_length = crossings[1].distance_to(Point(0, 0))
        return raw_length * 2 - self.hor_thickness

    @metric
    def solidus_angle(self) -> float:
        return -self.solidus_direction.angle_to(Point(1, 0))

    @metric
    def solidus_thickness(self) -> float:
        return self.solver.ideal_thickness(-self.solidus_angle) * self.solidus_thickness_ratio

    @part_builder
    def solidus_segment(self) -> Part:
        """Long edge of the slash, horizontal before the slash is rotated."""
        return Part.line(Point(0, 0), Point(self.solidus_length, 0))

    @part_builder
    def solidus_cut(self) -> Part:
        return Part.line(Point(0, 0), Point(0, self.solidus_thickness))

    @part_builder
    def solidus(self) -> Part:
        part = Part.seq(
            self.solidus_cut(),
            self.solidus_segment(),
            self.solidus_cut().reverse(),
            self.solidus_segment().reverse(),
        )
        part = part.move_origin(Point(self.solidus_length / 2, self.solidus_thickness / 2))
        return part.rotate(self.solidus_angle)

    @part_builder
    def nuf(self) -> Part:
        return Part.union(self.bowl(), self.solidus())

    def glyph_nuf(self) -> Glyph:
        return self.make_glyph(self._centered(self.nuf(), self.bowl_width))

    @metric
    def xef_beak_width(self) -> float:
        return self.narrow_bowl_virtual_width / 2 * 0.95

    @metric
    def xef_beak_height(self) -> float:
        return self.MEAN * 0.35

    @metric
    def xef_half_virtual_width(self) -> float:
        return self.narrow_bowl_virtual_width / 2 + self.xef_beak_width

    @metric
    def xef_width(self) -> float:
        return self.xef_half_virtual_width * 2 - self.hor_thickness

    @part_builder
    def outer_xef_beak(self) -> Part:
        return self.quarter(self.xef_beak_width, self.xef_beak_height + self.OVERSHOOT, 0.05)

    @part_builder
    def inner_xef_beak(self) -> Part:
        return self.quarter(
            self.xef_beak_width - self.hor_thickness,
            self.xef_beak_height - self.ver_thickness + self.OVERSHOOT,
            0.05,
        )

    @part_builder
    def xef_half(self) -> Part:
        """Left half of 5, thinned on the right where the halves overlap."""
        part = Part.seq(
            self.outer_right_narrow_bowl().reflect_hor(),
            self.outer_xef_beak().reverse(),
            self.cut(),
            self.inner_xef_beak(),
            self.inner_narrow_bowl().reflect_hor().reverse(),
            self.inner_narrow_bowl().rotate_half_turn(),
            self.inner_xef_beak().reflect_ver().reverse(),
            self.cut().reverse(),
            self.outer_xef_beak().reflect_ver(),
            self.outer_right_narrow_bowl().rotate_half_turn().reverse(),
        )
        return part.move_origin(
            Point(-self.xef_half_virtual_width / 2 + self.narrow_bowl_correction, 0)
        )

    @part_builder
    def xef(self) -> Part:
        part = Part.union(
            self.xef_half(),
            self.xef_half()
            .reflect_hor()
            .translate(Point(self.xef_half_virtual_width - self.hor_thickness, 0)),
        )
        return part.move_origin(Point(self.xef_width / 2 - self.xef_half_virtual_width / 2, 0))

    def glyph_xef(self) -> Glyph:
        return self.make_glyph(self._centered(self.xef(), self.xef_width))

    @metric
    def tas_beak_height(self) -> float:
        return self.MEAN * 0.3

    @metric
    def tas_shoulder_width(self) -> float:
        return self.bowl_width / 2

    @metric
    def tas_shoulder_straight_height(self) -> float:
        """Straight run joining the shoulder curve to the crossbar, so the join is not pointed."""
        return self.ver_thickness * 0.5

    @metric
    def tas_crossbar_altitude(self) -> float:
        return self.MEAN * 0.45

    @metric
    def tas_width(self) -> float:
        return self.bowl_width / 2 + max(self.tas_shoulder_width, self.tal_beak_width)

    @part_builder
    def outer_tas_beak(self) -> Part:
        width = self.tal_beak_width
        height = self.tas_beak_height + self.OVERSHOOT
        return Part.bezier(Point(0, 0), Point(0, -height * 0.05), Point(width, 0), Point(-width, -height))

    @part_builder
    def inner_tas_beak(self) -> Part:
        width = self.tal_beak_width - self.hor_thickness
        height = self.tas_beak_height - self.ver_thickness + self.OVERSHOOT
        return Part.bezier(Point(0, 0), Point(0, -height * 0.05), Point(width, 0), Point(-width, -height))

    @part_builder
    def outer_tas_shoulder(self) -> Part:
        width = self.tas_shoulder_width
        height = (
            self.tas_crossbar_altitude
            + self.ver_thickness / 2
            - self.tas_shoulder_straight_height
            + self.OVERSHOOT
        )
        return Part.bezier(Point(0, 0), Point(0, height * 0.1), Point(width, 0), Point(-width, height))

    @part_builder
    def inner_tas_shoulder(self) -> Part:
        width = self.tas_shoulder_width - self.hor_thickness
        height = (
            self.tas_crossbar_altitude
            - self.ver_thickness / 2
            - self.tas_shoulder_straight_height
            + self.OVERSHOOT
        )
        return Part.bezier(Point(0, 0), Point(0, height * 0.1), Point(width, 0), Point(-width, height))

    @part_builder
    def tas_shoulder_straight(self) -> Part:
        return Part.line(Point(0, 0), Point(0, -self.tas_shoulder_straight_height))

    @part_builder
    def tas_frame(self) -> Part:
        part = Part.seq(
            self.outer_bowl().reflect_ver(),
            self.outer_tas_shoulder().reverse(),
            self.tas_shoulder_straight(),
            self.cut().reverse(),
            self.tas_shoulder_straight().reverse(),
            self.inner_tas_shoulder(),
            self.inner_bowl().reflect_ver().reverse(),
            self.inner_bowl(),
            self.inner_tas_beak().reverse(),
            self.cut(),
            self.outer_tas_beak(),
            self.outer_bowl().reverse(),
        )
        return part.move_origin(Point(self.tas_width / 2, 0))

    @part_builder
    def tas_crossbar(self) -> Part:
        """Crossbar of 1; origin at its top left corner."""
        return self.horizontal_bar(self.bowl_width / 2 + self.tas_shoulder_width - self.hor_thickness)

    @part_builder
    def tas(self) -> Part:
        return Part.union(
            self.tas_frame(),
            self.tas_crossbar().translate(
                Point(
                    self.hor_thickness / 2 - self.tas_width / 2,
                    -self.tas_crossbar_altitude + self.MEAN / 2 - self.ver_thickness / 2,
                )
            ),
        )

    def glyph_tas(self) -> Glyph:
        return self.make_glyph(self._centered(self.tas(), self.tas_width))

    def glyph_vun(self) -> Glyph:
        return self.make_glyph(self._centered(self.tas().rotate_half_turn(), self.tas_width))

    @metric
    def yus_width(self) -> float:
        return self.bowl_width * 1.3

    @metric
    def yus_shoulder_straight_width(self) -> float:
        return self.hor_thickness * 0.7

    @metric
    def yus_crossbar_latitude(self) -> float:
        return self.yus_width / 2 * 0.95

    @part_builder
    def outer_yus_bowl(self) -> Part:
        return self.quarter(self.yus_width / 2, self.MEAN / 2 + self.OVERSHOOT)

    @part_builder
    def inner_yus_bowl(self) -> Part:
        return self.quarter(
            self.yus_width / 2 - self.hor_thickness,
            self.MEAN / 2 - self.ver_thickness + self.OVERSHOOT,
        )

    @part_builder
    def outer_yus_shoulder(self) -> Part:
        width = (
            self.yus_crossbar_latitude
            + self.hor_thickness / 2
            - self.yus_shoulder_straight_width
        )
        height = self.MEAN / 2
        return Part.bezier(Point(0, 0), Point(0, height * 0.1), Point(-width, 0), Point(width, height))

    @part_builder
    def inner_yus_shoulder(self) -> Part:
        width = (
            self.yus_crossbar_latitude
            - self.hor_thickness / 2
            - self.yus_shoulder_straight_width
        )
        height = self.MEAN / 2 - self.ver_thickness
        return Part.bezier(Point(0, 0), Point(0, height * 0.1), Point(-width, 0), Point(width, height))

    @part_builder
    def yus_shoulder_straight(self) -> Part:
        return Part.line(Point(0, 0), Point(self.yus_shoulder_straight_width, 0))

    @part_builder
    def yus_frame(self) -> Part:
        # The leg of 3 has the same shape as the closing leg of n
        part = Part.seq(
            self.outer_yus_shoulder(),
            self.yus_shoulder_straight(),
            self.vertical_cut().reverse(),
            self.yus_shoulder_straight().reverse(),
            self.inner_yus_shoulder().reverse(),
            self.inner_yus_bowl(),
            self.inner_yus_bowl().reflect_hor().reverse(),
            self.nes_leg(),
            self.cut(),
            self.nes_leg().reverse(),
            self.outer_yus_bowl().reflect_hor(),
            self.outer_yus_bowl().reverse(),
        )
        return part.move_origin(Point(self.yus_width / 2, 0))

    @part_builder
    def yus_crossbar(self) -> Part:
        """Vertical bar of 3; origin at its top left corner."""
        return self.vertical_bar(self.MEAN - self.ver_thickness)

    @part_builder
    def yus(self) -> Part:
        return Part.union(
            self.yus_frame(),
            self.yus_crossbar().translate(
                Point(
                    self.yus_crossbar_latitude - self.yus_width / 2 - self.hor_thickness / 2,
                    -self.MEAN / 2 + self.ver_thickness / 2,
                )
            ),
        )

    def glyph_yus(self) -> Glyph:
        return self.make_glyph(self._centered(self.yus(), self.yus_width))

    def glyph_siz(self) -> Glyph:
        return self.make_glyph(self._centered(self.yus().rotate_half_turn(), self.yus_width))

    # Punctuation

    def horizontal_bar(self, length: float) -> Part:
        """Horizontal bar of vertical stroke thickness; origin at its top left corner."""
        segment = Part.line(Point(0, 0), Point(length, 0))
        return Part.seq(self.vertical_cut(), segment, self.vertical_cut().reverse(), segment.reverse())

    def vertical_bar(self, length: float) -> Part:
        """Vertical bar of horizontal stroke thickness; origin at its top left corner."""
        segment = Part.line(Point(0, 0), Point(0, length))
        return Part.seq(segment, self.cut(), segment.reverse(), self.cut().reverse())

    @metric
    def dot_width(self) -> float:
        return min(self.config.weight_const * 150, self.config.weight_const * 100 + 30)

    @metric
    def dot_gap(self) -> float:
        return self.bowl_width * 0.09

    @part_builder
    def dot(self) -> Part:
        """Round dot; origin at the bottom left of its box, raised by the overshoot."""
        part = Part.seq(Part.circle(Point(0, 0), self.dot_width / 2))
        return part.move_origin(Point(-self.dot_width / 2, self.dot_width / 2 - self.OVERSHOOT))

    @part_builder
    def floating_dot(self) -> Part:
        """Same dot as ``dot`` with its origin at its left end."""
        part = Part.seq(Part.circle(Point(0, 0), self.dot_width / 2))
        return part.move_origin(Point(-self.dot_width / 2, 0))

    def glyph_tadek(self) -> Glyph:
        return self.make_glyph(self.dot())

    def glyph_dek(self) -> Glyph:
        return self.make_glyph(
            self.dot(),
            self.dot().translate(Point(self.dot_width + self.dot_gap, 0)),
        )

    @metric
    def kaltak_bearing(self) -> float:
        return self.bearing * 1.8

    def glyph_kaltak(self) -> Glyph:
        return self.make_glyph(
            self.dot(),
            self.floating_dot().translate(Point(0, -self.MEAN * 0.7)),
            bearings=Bearings(self.kaltak_bearing, self.kaltak_bearing),
        )

    def glyph_middot(self) -> Glyph:
        return self.make_glyph(self.floating_dot().translate(Point(0, -self.MEAN / 2)))

    @metric
    def badek_gap(self) -> float:
        return (self.MEAN + self.DESCENT) * 0.13

    @metric
    def badek_stem_height(self) -> float:
        return self.MEAN + self.DESCENT - self.dot_width - self.badek_gap + self.OVERSHOOT

    @metric
    def badek_bearings(self) -> Bearings:
        return Bearings(self.bearing * 1.8, self.bearing)

    @part_builder
    def badek_stem(self) -> Part:
        """Stem of the exclamation mark; origin at its bottom left corner."""
        segment = Part.line(Point(0, 0), Point(0, self.badek_stem_height))
        return Part.seq(self.cut(), segment.reverse(), self.cut().reverse(), segment)

    def _over_two_dots(self, stem: Part) -> Glyph:
        return self.make_glyph(
            self.dot(),
            self.dot().translate(Point(self.dot_width + self.dot_gap, 0)),
            stem.translate(
                Point(
                    self.dot_width / 2 - self.hor_thickness / 2,
                    -self.dot_width - self.badek_gap + self.OVERSHOOT,
                )
            ),
            bearings=self.badek_bearings,
        )

    def glyph_badek(self) -> Glyph:
        return self._over_two_dots(self.badek_stem())

    @metric
    def padek_bend(self) -> float:
        return min(self.dot_width + self.dot_gap, self.bowl_width * 0.3)

    @part_builder
    def left_padek_stem(self) -> Part:
        height = self.badek_stem_height
        bottom_handle = height * 0.55
        top_handle = self.solver.search_tail_handle(bottom_handle, self.padek_bend, height)
        return Part.bezier(
            Point(0, 0), Point(0, top_handle), Point(0, -bottom_handle), Point(-self.padek_bend, height)
        )

    @part_builder
    def right_padek_stem(self) -> Part:
        height = self.badek_stem_height
        top_handle = height * 0.55
        bottom_handle = self.solver.search_tail_handle(top_handle, self.padek_bend, height)
        return Part.bezier(
            Point(0, 0), Point(0, top_handle), Point(0, -bottom_handle), Point(-self.padek_bend, height)
        )

    @part_builder
    def padek_stem(self) -> Part:
        """Curved stem of the question mark; origin at its bottom left corner."""
        return Part.seq(
            self.cut(),
            self.right_padek_stem().reverse(),
            self.cut().reverse(),
            self.left_padek_stem(),
        )

    def glyph_padek(self) -> Glyph:
        return self._over_two_dots(self.padek_stem())

    @part_builder
    def nok(self) -> Part:
        return self.vertical_bar((self.MEAN + self.DESCENT) * 0.3)

    def glyph_nok(self) -> Glyph:
        return self.make_glyph(self.nok().translate(Point(0, -self.MEAN - self.DESCENT)))

    @metric
    def dikak_bend(self) -> float:
        return self.bowl_width * 0.15

    @part_builder
    def dikak_stem(self) -> Part:
        height = (self.MEAN + self.DESCENT) * 0.3
        return Part.bezier(Point(0, 0), None, Point(0, -height * 0.6), Point(-self.dikak_bend, height))

    @part_builder
    def dikak(self) -> Part:
        return Part.seq(
            self.dikak_stem(),
            self.cut(),
            self.dikak_stem().reverse(),
            self.cut().reverse(),
        )

    def glyph_dikak(self) -> Glyph:
        return self.make_glyph(
            self.dikak().translate(Point(self.dikak_bend, -self.MEAN - self.DESCENT)),
            bearings=Bearings(self.bearing, -self.bearing * 0.5),
        )

    @part_builder
    def fek(self) -> Part:
        return self.horizontal_bar(self.bowl_width * 0.6)

    def glyph_fek(self) -> Glyph:
        return self.make_glyph(
            self.fek().translate(Point(0, -self.MEAN / 2 - self.ver_thickness / 2))
        )

    @part_builder
    def fohak(self) -> Part:
        return self.horizontal_bar(self.bowl_width * 1.5)

    def glyph_fohak(self) -> Glyph:
        return self.make_glyph(self.fohak().translate(Point(0, -self.ver_thickness)))

    @part_builder
    def dash(self) -> Part:
        return self.horizontal_bar(self.bowl_width * 2)

    def glyph_dash(self) -> Glyph:
        return self.make_glyph(
            self.dash().translate(Point(0, -self.MEAN / 2 - self.ver_thickness / 2))
        )

    @metric
    def rakut_width(self) -> float:
        return self.bowl_width * 0.55

    @part_builder
    def opening_rakut(self) -> Part:
        """Corner bracket; origin at its top left corner."""
        return Part.union(
            self.vertical_bar((self.MEAN + self.DESCENT) * 0.6),
            self.horizontal_bar(self.rakut_width),
        )

    def glyph_opening_rakut(self) -> Glyph:
        return self.make_glyph(
            self.opening_rakut().translate(Point(0, -self.MEAN - self.DESCENT))
        )

    def glyph_closing_rakut(self) -> Glyph:
        return self.make_glyph(
            self.opening_rakut()
            .reflect_hor()
            .translate(Point(self.rakut_width, -self.MEAN - self.DESCENT))
        )

    def glyph_space(self) -> Glyph:
        return self.make_glyph(Part.empty(), bearings=Bearings(self.bowl_width * 0.55, 0))


def create_vekos_font(
    style: FontStyle,
    high_contrast: bool = False,
    geometry: GeometryConfig | None = None,
) -> Font:
    """Create a Vekos font for a style.

    Args:
        style: Weight, slant and stretch of the font
        high_contrast: Use thin horizontal strokes
        geometry: Solver settings, the defaults when None

    Returns:
        Font backed by a new generator
    """
    weight = style.weight_number
    stretch = style.stretch_number
    weight_const = (weight * 0.5 + 100) / 300
    if stretch < 300:
        stretch_const = (stretch * 0.15 + 55) / 100
    else:
        stretch_const = (stretch * 0.25 + 25) / 100
    contrast_ratio = 0.2 if high_contrast else 0.75
    config = VekosConfig(
        weight_const=weight_const,
        stretch_const=stretch_const,
        contrast_ratio=contrast_ratio,
    )
    family_name = "Vekos High" if high_contrast else "Vekos"
    logger.debug("Creating %s %s with %s", family_name, style.style_name, config)
    return Font(family_name, style, VEKOS_INFO, VekosGenerator(config, geometry))
