"""Glyphforge - Parametric outline generator for constructed-script typefaces.

Glyphforge builds the glyph outlines of the Vekos and Kaleg families from a
handful of style parameters (weight, stretch, contrast, corner join) and
exports them as OpenType fonts or SVG files.

Example:
    $ glyphforge build vkr

This will create out/vekos-regular.otf.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
