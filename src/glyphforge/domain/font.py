"""Font identity: family name, style descriptor and info record.

A Font pairs this identity with one glyph generator. Everything outside
the generator (registry, exporter, CLI) only talks to fonts through the
members defined here.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from glyphforge.domain.glyph import Glyph

if TYPE_CHECKING:
    from glyphforge.core.generator import Generator


class FontWeight(Enum):
    """Named weights with their OS/2 weight class."""

    THIN = 100
    EXTRA_LIGHT = 200
    LIGHT = 300
    REGULAR = 400
    MEDIUM = 500
    SEMI_BOLD = 600
    BOLD = 700
    EXTRA_BOLD = 800
    HEAVY = 900

    @property
    def title(self) -> str:
        return self.name.replace("_", " ").title()


class FontStretch(Enum):
    """Named widths with the stretch number the family formulas expect."""

    ULTRA_CONDENSED = 100
    CONDENSED = 200
    NORMAL = 300
    EXPANDED = 400
    ULTRA_EXPANDED = 500

    @property
    def title(self) -> str:
        return self.name.replace("_", " ").title()


class FontSlant(Enum):
    """Upright or italic."""

    UPRIGHT = "upright"
    ITALIC = "italic"


@dataclass(frozen=True)
class FontStyle:
    """Style descriptor of one font in a family."""

    weight: FontWeight = FontWeight.REGULAR
    slant: FontSlant = FontSlant.UPRIGHT
    stretch: FontStretch = FontStretch.NORMAL

    @property
    def weight_number(self) -> int:
        return self.weight.value

    @property
    def stretch_number(self) -> int:
        return self.stretch.value

    @property
    def style_name(self) -> str:
        """Human readable style, e.g. "Bold Condensed" or "Regular".

        The regular weight and normal stretch are omitted unless nothing
        else is left to name.
        """
        words = []
        if self.weight is not FontWeight.REGULAR:
            words.append(self.weight.title)
        if self.stretch is not FontStretch.NORMAL:
            words.append(self.stretch.title)
        if self.slant is FontSlant.ITALIC:
            words.append("Italic")
        return " ".join(words) if words else "Regular"


@dataclass(frozen=True)
class FontInfo:
    """Copyright and version strings written to the name table."""

    copyright: str
    version: str


class Font:
    """A named style of a family, backed by a glyph generator.

    Attributes:
        family_name: Family name, e.g. "Vekos"
        style: Style descriptor
        info: Copyright and version record
        generator: Generator producing the glyphs
    """

    def __init__(
        self,
        family_name: str,
        style: FontStyle,
        info: FontInfo,
        generator: "Generator",
    ) -> None:
        self.family_name = family_name
        self.style = style
        self.info = info
        self.generator = generator

    def __repr__(self) -> str:
        return f"Font({self.full_name!r})"

    @property
    def full_name(self) -> str:
        return f"{self.family_name} {self.style.style_name}"

    @property
    def postscript_name(self) -> str:
        family = self.family_name.replace(" ", "")
        style = self.style.style_name.replace(" ", "")
        return f"{family}-{style}"

    @property
    def extended_family_name(self) -> str:
        """Family name including the stretch, grouping weights and slants."""
        if self.style.stretch is FontStretch.NORMAL:
            return self.family_name
        return f"{self.family_name} {self.style.stretch.title}"

    @property
    def copyright(self) -> str:
        return self.info.copyright

    @property
    def version(self) -> str:
        return self.info.version

    def get_chars(self) -> list[str]:
        return self.generator.get_chars()

    def glyph(self, char: str) -> Glyph | None:
        return self.generator.glyph(char)
