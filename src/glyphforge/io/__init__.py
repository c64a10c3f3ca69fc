"""Font export layer for glyphforge.

This module turns generated glyphs into files using fonttools: an
OpenType font with CFF outlines, or one SVG file per glyph.

Key classes:
- FontWriter: Build glyphs and save them
"""

from glyphforge.io.writer import FontWriter, default_output_path, glyph_name

__all__ = [
    "FontWriter",
    "default_output_path",
    "glyph_name",
]
