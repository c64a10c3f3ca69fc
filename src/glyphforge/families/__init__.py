"""Typeface families and their style presets.

- Vekos: round constructed script with transphone marks and diacritics
- Kaleg: angular sibling of Vekos with selectable corner joins
- FontRegistry: preset ids such as ``vkr`` or ``ksr`` mapped to fonts
"""

from glyphforge.families.kaleg import EdgeJoin, KalegConfig, KalegGenerator, create_kaleg_font
from glyphforge.families.registry import FontRegistry
from glyphforge.families.vekos import VekosConfig, VekosGenerator, create_vekos_font

__all__ = [
    "EdgeJoin",
    "FontRegistry",
    "KalegConfig",
    "KalegGenerator",
    "VekosConfig",
    "VekosGenerator",
    "create_kaleg_font",
    "create_vekos_font",
]
