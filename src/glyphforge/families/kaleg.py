"""The Kaleg family.

Kaleg is the angular sibling of Vekos: round bowls are kept, but the other
letters are made of straight stems and edge bars meeting at corners. The
outer corners take one of three joins (sharp, bevel, round), and the
beaked variant adds wedge shaped beaks and tails to the stem ends.
"""

import logging
from collections.abc import Collection
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from glyphforge.config import GeometryConfig
from glyphforge.core import Generator, Part, metric, part_builder
from glyphforge.domain import KAPPA, Bearings, Font, FontInfo, FontStyle, Glyph, Metrics, Point

logger = logging.getLogger(__name__)

KALEG_INFO = FontInfo("Ziphil", "1.0.0")


class EdgeJoin(str, Enum):
    """Shape of the outer corner where an edge bar meets a stem."""

    SHARP = "sharp"
    BEVEL = "bevel"
    ROUND = "round"


class KalegConfig(BaseModel):
    """Style parameters of a Kaleg font."""

    model_config = ConfigDict(frozen=True)

    weight_const: float = Field(gt=0.0, description="Stroke weight multiplier")
    contrast_ratio: float = Field(gt=0.0, le=1.0, description="Horizontal stroke thickness ratio")
    edge_ratio: float = Field(gt=0.0, description="Edge bar thickness relative to stems")
    edge_contrast_ratio: float = Field(
        gt=0.0, le=1.0, description="Thickness of the free end of an edge bar"
    )
    bowl_ratio: float = Field(gt=0.0, description="Bowl width relative to the mean line height")
    beak_ratio: float = Field(ge=0.0, description="Beak width relative to the bowl, 0 for none")
    leg_ratio: float = Field(ge=0.0, description="Leg bend relative to the bowl, 0 for straight")
    tail_ratio: float = Field(ge=0.0, description="Tail width relative to the bowl, 0 for none")
    edge_join: EdgeJoin = EdgeJoin.SHARP


class KalegGenerator(Generator[KalegConfig]):
    """Glyph generator of the Kaleg family."""

    MEAN = 500
    DESCENT = 250
    EXTRA_DESCENT = 40
    EXTRA_ASCENT = 10
    OVERSHOOT = 10

    def register_glyphs(self) -> None:
        self.register(self.glyph_o, "o", "O")
        self.register(self.glyph_q, "q", "Q")
        self.register(self.glyph_p, "p", "P")
        self.register(self.glyph_b, "b", "B")
        self.register(self.glyph_d, "d", "D")
        self.register(self.glyph_k, "k", "K")
        self.register(self.glyph_g, "g", "G")
        self.register(self.glyph_t, "t", "T")
        self.register(self.glyph_f, "f", "F")
        self.register(self.glyph_n, "n", "N")
        self.register(self.glyph_u, "u", "U")
        self.register(self.glyph_i, "i", "I")
        self.register(self.glyph_l, "l", "L")
        self.register(self.glyph_j, "j", "J")
        self.register(self.glyph_x, "x", "X")
        self.register(self.glyph_e, "e", "E")
        self.register(self.glyph_period, ".")
        self.register(self.glyph_comma, ",")
        self.register(self.glyph_colon, ":")
        self.register(self.glyph_hyphen, "-")
        self.register(self.glyph_space, " ")

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
        return self.config.weight_const * 95

    @metric
    def ver_thickness(self) -> float:
        return self.hor_thickness * self.config.contrast_ratio

    @metric
    def edge_thickness(self) -> float:
        """Vertical thickness of edge bars."""
        return self.hor_thickness * self.config.edge_ratio

    @metric
    def edge_end_thickness(self) -> float:
        return self.edge_thickness * self.config.edge_contrast_ratio

    @metric
    def bowl_width(self) -> float:
        return self.MEAN * self.config.bowl_ratio + self.hor_thickness * 0.5

    @metric
    def beak_width(self) -> float:
        return self.bowl_width * self.config.beak_ratio

    @metric
    def leg_bend(self) -> float:
        return self.bowl_width * self.config.leg_ratio

    @metric
    def tail_width(self) -> float:
        return self.bowl_width * self.config.tail_ratio

    @metric
    def join_size(self) -> float:
        return self.hor_thickness * 0.5

    @metric
    def stem_correction(self) -> float:
        return self.hor_thickness * 0.3

    def _centered(self, part: Part, width: float) -> Part:
        return part.translate(Point(width / 2, -self.MEAN / 2))

    def outline(self, vertices: list[Point], joined: Collection[int] = ()) -> Part:
        """Closed polygon whose listed corners are cut by the edge join.

        Args:
            vertices: Corners in drawing order
            joined: Indices of the corners that take the edge join

        Returns:
            Single closed contour starting after the first corner
        """
        join = self.config.edge_join
        size = self.join_size
        count = len(vertices)
        entries, exits, joins = [], [], []
        for index, vertex in enumerate(vertices):
            if join is EdgeJoin.SHARP or index not in joined:
                entries.append(vertex)
                exits.append(vertex)
                joins.append(None)
                continue
            before = vertices[index - 1] - vertex
            after = vertices[(index + 1) % count] - vertex
            entry = vertex + before * (size / before.length)
            leave = vertex + after * (size / after.length)
            if join is EdgeJoin.BEVEL:
                joins.append(Part.line(entry, leave))
            else:
                joins.append(Part.bezier(entry, (vertex - entry) * KAPPA, (vertex - leave) * KAPPA, leave))
            entries.append(entry)
            exits.append(leave)

        trails = []
        for index in [*range(1, count), 0]:
            trails.append(Part.line(exits[index - 1], entries[index]))
            if joins[index] is not None:
                trails.append(joins[index])
        return Part.seq(*trails)

    # Bowls

    @part_builder
    def outer_bowl(self) -> Part:
        return self.quarter(self.bowl_width / 2, self.MEAN / 2 + self.OVERSHOOT)

    @part_builder
    def inner_bowl(self) -> Part:
        return self.quarter(
            self.bowl_width / 2 - self.hor_thickness,
            self.MEAN / 2 - self.ver_thickness + self.OVERSHOOT,
        )

    @part_builder
    def bowl(self) -> Part:
        ring = self.ring(self.outer_bowl(), self.outer_bowl(), self.inner_bowl(), self.hor_thickness)
        return ring.move_origin(Point(self.bowl_width / 2, 0))

    @metric
    def narrow_bowl_virtual_width(self) -> float:
        return self.bowl_width * 0.9

    @metric
    def narrow_bowl_correction(self) -> float:
        return self.hor_thickness * 0.15

    @metric
    def x_width(self) -> float:
        return self.narrow_bowl_virtual_width * 2 - self.hor_thickness

    @part_builder
    def narrow_bowl(self) -> Part:
        """Bowl of x, thinned on its right side where it overlaps its mirror."""
        width = self.narrow_bowl_virtual_width
        outer_left = self.quarter(width / 2, self.MEAN / 2 + self.OVERSHOOT)
        outer_right = self.quarter(width / 2 - self.narrow_bowl_correction, self.MEAN / 2 + self.OVERSHOOT)
        inner = self.quarter(
            width / 2 - self.hor_thickness,
            self.MEAN / 2 - self.ver_thickness + self.OVERSHOOT,
        )
        ring = self.ring(outer_left, outer_right, inner, self.hor_thickness)
        return ring.move_origin(Point(width / 2, 0))

    # Stems

    def stem(self, height: float, beak: float = 0.0, tail: float = 0.0, correction: float = 0.0) -> Part:
        """Vertical stem with its top left corner at the zero point.

        Args:
            height: Length of the stem
            beak: Width of the wedge on the left of the top end
            tail: Width of the wedge on the left of the bottom end
            correction: Amount the stem is thinned from the left

        Returns:
            Closed stem outline
        """
        left = correction
        right = self.hor_thickness
        vertices = [Point(left - beak, 0), Point(right, 0), Point(right, height)]
        if tail > 0:
            vertices += [Point(left - tail, height), Point(left, height - self.edge_thickness)]
        else:
            vertices.append(Point(left, height))
        if beak > 0:
            vertices.append(Point(left, self.edge_thickness))
        return self.outline(vertices)

    @part_builder
    def ascending_bowl(self) -> Part:
        """Bowl with a stem rising on its right side; origin at the bowl center."""
        stem = self.stem(self.MEAN + self.DESCENT, beak=self.beak_width, correction=self.stem_correction)
        return Part.union(
            self.bowl(),
            stem.translate(Point(self.bowl_width / 2 - self.hor_thickness, -self.MEAN / 2 - self.DESCENT)),
        )

    @part_builder
    def descending_bowl(self) -> Part:
        """Bowl with a stem falling on its right side; origin at the bowl center."""
        stem = self.stem(self.MEAN + self.DESCENT, tail=self.tail_width, correction=self.stem_correction)
        return Part.union(
            self.bowl(),
            stem.translate(Point(self.bowl_width / 2 - self.hor_thickness, -self.MEAN / 2)),
        )

    def glyph_o(self) -> Glyph:
        return self.make_glyph(self._centered(self.bowl(), self.bowl_width))

    def glyph_d(self) -> Glyph:
        return self.make_glyph(self._centered(self.ascending_bowl(), self.bowl_width))

    def glyph_b(self) -> Glyph:
        return self.make_glyph(self._centered(self.ascending_bowl().reflect_hor(), self.bowl_width))

    def glyph_q(self) -> Glyph:
        return self.make_glyph(self._centered(self.descending_bowl(), self.bowl_width))

    def glyph_p(self) -> Glyph:
        return self.make_glyph(self._centered(self.descending_bowl().reflect_hor(), self.bowl_width))

    def glyph_i(self) -> Glyph:
        stem = self.stem(self.MEAN, beak=self.beak_width)
        return self.make_glyph(stem.translate(Point(0, -self.MEAN)))

    def glyph_l(self) -> Glyph:
        stem = self.stem(self.MEAN + self.DESCENT, beak=self.beak_width)
        return self.make_glyph(stem.translate(Point(0, -self.MEAN - self.DESCENT)))

    def glyph_j(self) -> Glyph:
        stem = self.stem(self.MEAN + self.DESCENT, beak=self.beak_width, tail=self.tail_width)
        return self.make_glyph(stem.translate(Point(0, -self.MEAN)))

    # Edges

    @part_builder
    def corner(self) -> Part:
        """Edge bar over a stem on its left, origin at the center of its box."""
        width = self.bowl_width
        height = self.MEAN
        vertices = [
            Point(0, 0),
            Point(width, 0),
            Point(width, self.edge_end_thickness),
            Point(self.hor_thickness, self.edge_thickness),
            Point(self.hor_thickness, height),
            Point(0, height),
        ]
        return self.outline(vertices, joined={0}).move_origin(Point(width / 2, height / 2))

    @part_builder
    def arch(self) -> Part:
        """Two legs joined by an edge bar, origin at the center of its box."""
        width = self.bowl_width
        height = self.MEAN
        hor = self.hor_thickness
        leg = self.leg_bend
        vertices = [
            Point(0, 0),
            Point(width, 0),
            Point(width + leg, height),
            Point(width - hor + leg, height),
            Point(width - hor, self.edge_thickness),
            Point(hor, self.edge_thickness),
            Point(hor - leg, height),
            Point(-leg, height),
        ]
        return self.outline(vertices, joined={0, 1}).move_origin(Point(width / 2, height / 2))

    def glyph_t(self) -> Glyph:
        return self.make_glyph(self._centered(self.corner(), self.bowl_width))

    def glyph_f(self) -> Glyph:
        return self.make_glyph(self._centered(self.corner().reflect_hor(), self.bowl_width))

    def glyph_k(self) -> Glyph:
        return self.make_glyph(self._centered(self.corner().reflect_ver(), self.bowl_width))

    def glyph_g(self) -> Glyph:
        return self.make_glyph(self._centered(self.corner().rotate_half_turn(), self.bowl_width))

    def glyph_n(self) -> Glyph:
        return self.make_glyph(self._centered(self.arch(), self.bowl_width))

    def glyph_u(self) -> Glyph:
        return self.make_glyph(self._centered(self.arch().rotate_half_turn(), self.bowl_width))

    @part_builder
    def x(self) -> Part:
        width = self.narrow_bowl_virtual_width
        part = Part.union(
            self.narrow_bowl(),
            self.narrow_bowl().reflect_hor().translate(Point(width - self.hor_thickness, 0)),
        )
        return part.move_origin(Point(self.x_width / 2 - width / 2, 0))

    def glyph_x(self) -> Glyph:
        return self.make_glyph(self._centered(self.x(), self.x_width))

    @part_builder
    def e(self) -> Part:
        """Bowl crossed by an edge bar at mid height."""
        half_bar = self.bowl_width / 2 - self.hor_thickness / 2
        half_edge = self.edge_thickness / 2
        bar = self.outline(
            [
                Point(-half_bar, -half_edge),
                Point(half_bar, -half_edge),
                Point(half_bar, half_edge),
                Point(-half_bar, half_edge),
            ]
        )
        return Part.union(self.bowl(), bar)

    def glyph_e(self) -> Glyph:
        return self.make_glyph(self._centered(self.e(), self.bowl_width))

    # Punctuation

    @metric
    def dot_width(self) -> float:
        return self.hor_thickness * 1.2

    @part_builder
    def dot(self) -> Part:
        """Square dot resting on the baseline, every corner joined."""
        size = self.dot_width
        vertices = [Point(0, -size), Point(size, -size), Point(size, 0), Point(0, 0)]
        return self.outline(vertices, joined={0, 1, 2, 3})

    def glyph_period(self) -> Glyph:
        return self.make_glyph(self.dot())

    def glyph_comma(self) -> Glyph:
        size = self.dot_width
        vertices = [Point(0, -size), Point(size, -size), Point(size, size * 0.8), Point(0, 0)]
        return self.make_glyph(self.outline(vertices, joined={0, 1}))

    def glyph_colon(self) -> Glyph:
        return self.make_glyph(
            self.dot(),
            self.dot().translate(Point(0, -self.MEAN + self.dot_width)),
        )

    def glyph_hyphen(self) -> Glyph:
        width = self.bowl_width * 0.6
        top = -self.MEAN / 2 - self.edge_thickness / 2
        bottom = -self.MEAN / 2 + self.edge_thickness / 2
        vertices = [Point(0, top), Point(width, top), Point(width, bottom), Point(0, bottom)]
        return self.make_glyph(self.outline(vertices))

    def glyph_space(self) -> Glyph:
        return self.make_glyph(Part.empty(), bearings=Bearings(self.bowl_width * 0.55, 0))


def create_kaleg_font(
    style: FontStyle,
    edge_join: EdgeJoin,
    beaked: bool = False,
    geometry: GeometryConfig | None = None,
) -> Font:
    """Create a Kaleg font for a style.

    The stretch of the style only shows in its name; Kaleg has one width.

    Args:
        style: Weight, slant and stretch of the font
        edge_join: Join of outer corners
        beaked: Add beaks and tails to stem ends
        geometry: Solver settings, the defaults when None

    Returns:
        Font backed by a new generator
    """
    weight_const = (style.weight_number * 0.45 + 100) / 300
    contrast_ratio = 0.75
    config = KalegConfig(
        weight_const=weight_const,
        contrast_ratio=contrast_ratio,
        edge_ratio=contrast_ratio,
        edge_contrast_ratio=1,
        bowl_ratio=0.8,
        beak_ratio=0.2 if beaked else 0,
        leg_ratio=0,
        tail_ratio=0.3 if beaked else 0,
        edge_join=edge_join,
    )
    family_name = f"Kaleg {edge_join.value.capitalize()}"
    if beaked:
        family_name += " Beaked"
    logger.debug("Creating %s %s with %s", family_name, style.style_name, config)
    return Font(family_name, style, KALEG_INFO, KalegGenerator(config, geometry))
