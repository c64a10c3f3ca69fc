"""Named style presets of every family."""

from collections.abc import Callable

from glyphforge.config import GeometryConfig
from glyphforge.domain import Font, FontStretch, FontStyle, FontWeight
from glyphforge.families.kaleg import EdgeJoin, create_kaleg_font
from glyphforge.families.vekos import create_vekos_font

REGULAR = FontStyle(weight=FontWeight.REGULAR)
BOLD = FontStyle(weight=FontWeight.BOLD)
THIN = FontStyle(weight=FontWeight.THIN)
CONDENSED_REGULAR = FontStyle(weight=FontWeight.REGULAR, stretch=FontStretch.CONDENSED)
CONDENSED_BOLD = FontStyle(weight=FontWeight.BOLD, stretch=FontStretch.CONDENSED)
CONDENSED_THIN = FontStyle(weight=FontWeight.THIN, stretch=FontStretch.CONDENSED)
EXPANDED_REGULAR = FontStyle(weight=FontWeight.REGULAR, stretch=FontStretch.EXPANDED)
EXPANDED_BOLD = FontStyle(weight=FontWeight.BOLD, stretch=FontStretch.EXPANDED)
EXPANDED_THIN = FontStyle(weight=FontWeight.THIN, stretch=FontStretch.EXPANDED)

FONT_FACTORIES: dict[str, Callable[[GeometryConfig | None], Font]] = {
    "vkr": lambda geometry: create_vekos_font(REGULAR, geometry=geometry),
    "vkb": lambda geometry: create_vekos_font(BOLD, geometry=geometry),
    "vkt": lambda geometry: create_vekos_font(THIN, geometry=geometry),
    "vkcr": lambda geometry: create_vekos_font(CONDENSED_REGULAR, geometry=geometry),
    "vkcb": lambda geometry: create_vekos_font(CONDENSED_BOLD, geometry=geometry),
    "vkct": lambda geometry: create_vekos_font(CONDENSED_THIN, geometry=geometry),
    "vker": lambda geometry: create_vekos_font(EXPANDED_REGULAR, geometry=geometry),
    "vkeb": lambda geometry: create_vekos_font(EXPANDED_BOLD, geometry=geometry),
    "vket": lambda geometry: create_vekos_font(EXPANDED_THIN, geometry=geometry),
    "vkhr": lambda geometry: create_vekos_font(REGULAR, high_contrast=True, geometry=geometry),
    "vkhb": lambda geometry: create_vekos_font(BOLD, high_contrast=True, geometry=geometry),
    "ksr": lambda geometry: create_kaleg_font(REGULAR, EdgeJoin.SHARP, geometry=geometry),
    "ksb": lambda geometry: create_kaleg_font(BOLD, EdgeJoin.SHARP, geometry=geometry),
    "kbr": lambda geometry: create_kaleg_font(REGULAR, EdgeJoin.BEVEL, geometry=geometry),
    "kbb": lambda geometry: create_kaleg_font(BOLD, EdgeJoin.BEVEL, geometry=geometry),
    "krr": lambda geometry: create_kaleg_font(REGULAR, EdgeJoin.ROUND, geometry=geometry),
    "krb": lambda geometry: create_kaleg_font(BOLD, EdgeJoin.ROUND, geometry=geometry),
    "kshr": lambda geometry: create_kaleg_font(REGULAR, EdgeJoin.SHARP, beaked=True, geometry=geometry),
    "kbhr": lambda geometry: create_kaleg_font(REGULAR, EdgeJoin.BEVEL, beaked=True, geometry=geometry),
    "krhr": lambda geometry: create_kaleg_font(REGULAR, EdgeJoin.ROUND, beaked=True, geometry=geometry),
}


class FontRegistry:
    """Lookup of preset fonts by id.

    Fonts with the default solver settings are created on first lookup and
    kept, so a generator's caches are shared by every caller asking for the
    same id. Other solver settings always give a new font.
    """

    _fonts: dict[str, Font] = {}

    @classmethod
    def ids(cls) -> list[str]:
        return list(FONT_FACTORIES)

    @classmethod
    def get(cls, font_id: str, geometry: GeometryConfig | None = None) -> Font | None:
        """Return the preset font with an id, or None if there is none."""
        factory = FONT_FACTORIES.get(font_id)
        if factory is None:
            return None
        if geometry is not None and geometry != GeometryConfig():
            return factory(geometry)
        if font_id not in cls._fonts:
            cls._fonts.setdefault(font_id, factory(None))
        return cls._fonts[font_id]

    @classmethod
    def get_all(cls) -> list[Font]:
        fonts = []
        for font_id in FONT_FACTORIES:
            font = cls.get(font_id)
            if font is not None:
                fonts.append(font)
        return fonts
