"""Font writer for exporting generated glyphs.

This module provides the FontWriter class, which collects the glyphs of a
font and saves them either as an OpenType (CFF) font or as one SVG file per
glyph.
"""

import logging
import time
from collections.abc import Callable
from pathlib import Path

import structlog
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.boundsPen import BoundsPen
from fontTools.pens.svgPathPen import SVGPathPen
from fontTools.pens.t2CharStringPen import T2CharStringPen

from glyphforge.domain import Font, Glyph
from glyphforge.exceptions import FontSaveError, GlyphforgeError
from glyphforge.utils.logging import GenerationLogger

logger = logging.getLogger(__name__)

NOTDEF = ".notdef"

ProgressCallback = Callable[[int, int], None]


def glyph_name(char: str) -> str:
    """Production name of a character, e.g. "uni0061"."""
    return f"uni{ord(char):04X}"


def default_output_path(font: Font, output_dir: Path = Path("out"), suffix: str = ".otf") -> Path:
    """Output path named after the full name of a font.

    Converts: "Vekos Bold Condensed" -> out/vekos-bold-condensed.otf

    Args:
        font: Font being exported
        output_dir: Directory holding the output
        suffix: File suffix, empty for a directory

    Returns:
        Path inside ``output_dir``
    """
    stem = "-".join(font.full_name.split()).lower()
    return output_dir / f"{stem}{suffix}"


class FontWriter:
    """Writes the glyphs of a generated font.

    Glyphs are built once on first use. A glyph that fails to build is
    logged and left out; the rest of the font is still written.

    Example:
        writer = FontWriter(font)
        path = writer.write_otf()
    """

    def __init__(self, font: Font, generation_logger: GenerationLogger | None = None) -> None:
        """Initialize the font writer.

        Args:
            font: Font to export
            generation_logger: Logger collecting per-glyph statistics
        """
        self._font = font
        self._logger = generation_logger or GenerationLogger(structlog.get_logger("glyphforge"))
        self._glyphs: dict[str, Glyph] | None = None

    @property
    def generation_logger(self) -> GenerationLogger:
        return self._logger

    def glyphs(self, progress_callback: ProgressCallback | None = None) -> dict[str, Glyph]:
        """Build every registered glyph, keyed by character.

        Args:
            progress_callback: Called with (completed, total) after each character

        Returns:
            Built glyphs in registration order
        """
        if self._glyphs is not None:
            return self._glyphs

        chars = self._font.get_chars()
        self._logger.log_font_start(self._font.full_name, len(chars))
        self._logger.stats.start_time = time.time()

        glyphs: dict[str, Glyph] = {}
        for completed, char in enumerate(chars, start=1):
            if progress_callback is not None and completed > 1:
                progress_callback(completed - 1, len(chars))
            started = time.perf_counter()
            try:
                glyph = self._font.glyph(char)
            except GlyphforgeError as e:
                self._logger.log_glyph_error(char, e)
                continue
            if glyph is None:
                self._logger.log_glyph_skipped(char, "no builder")
                continue
            duration_ms = (time.perf_counter() - started) * 1000
            self._logger.log_glyph_written(char, glyph.width, len(glyph.outline.contours), duration_ms)
            glyphs[char] = glyph

        if progress_callback is not None:
            progress_callback(len(chars), len(chars))
        self._logger.stats.end_time = time.time()
        self._glyphs = glyphs
        return glyphs

    def write_otf(self, output_path: Path | None = None) -> Path:
        """Save the font as an OpenType font with CFF outlines.

        Args:
            output_path: Target file, defaults to ``out/<full-name>.otf``

        Returns:
            Path of the written file

        Raises:
            FontSaveError: If the font cannot be built or written
        """
        path = output_path or default_output_path(self._font)
        glyphs = self.glyphs()
        metrics = self._font.generator.metrics
        em = round(metrics.em)
        ascent = round(metrics.ascent)
        descent = round(metrics.descent)

        glyph_order = [NOTDEF] + [glyph_name(char) for char in glyphs]
        cmap = {ord(char): glyph_name(char) for char in glyphs}

        char_strings = {}
        horizontal_metrics = {}

        notdef_width = round(em / 2)
        pen = T2CharStringPen(notdef_width, None)
        char_strings[NOTDEF] = pen.getCharString()
        horizontal_metrics[NOTDEF] = (notdef_width, 0)

        for char, glyph in glyphs.items():
            name = glyph_name(char)
            width = round(glyph.width)
            pen = T2CharStringPen(width, None)
            glyph.draw(pen)
            char_strings[name] = pen.getCharString()

            bounds_pen = BoundsPen(None)
            glyph.draw(bounds_pen)
            lsb = round(bounds_pen.bounds[0]) if bounds_pen.bounds else 0
            horizontal_metrics[name] = (width, lsb)

        family_name = self._font.extended_family_name
        style_name = self._font.style.style_name
        try:
            builder = FontBuilder(em, isTTF=False)
            builder.setupGlyphOrder(glyph_order)
            builder.setupCharacterMap(cmap)
            builder.setupCFF(
                self._font.postscript_name,
                {"FullName": self._font.full_name, "version": self._font.version},
                char_strings,
                {},
            )
            builder.setupMaxp()
            builder.setupHorizontalMetrics(horizontal_metrics)
            builder.setupHorizontalHeader(ascent=ascent, descent=-descent)
            builder.setupNameTable(
                {
                    "copyright": self._font.copyright,
                    "familyName": family_name,
                    "styleName": style_name,
                    "uniqueFontIdentifier": f"{self._font.postscript_name};{self._font.version}",
                    "fullName": self._font.full_name,
                    "version": f"Version {self._font.version}",
                    "psName": self._font.postscript_name,
                }
            )
            builder.setupOS2(
                usWeightClass=self._font.style.weight_number,
                sTypoAscender=ascent,
                sTypoDescender=-descent,
                sTypoLineGap=0,
                usWinAscent=ascent,
                usWinDescent=descent,
            )
            builder.setupPost()
            path.parent.mkdir(parents=True, exist_ok=True)
            builder.save(str(path))
        except (OSError, ValueError, KeyError) as e:
            raise FontSaveError(str(path), str(e)) from e

        logger.info("Wrote %d glyphs to %s", len(glyphs), path)
        return path

    def write_svg(self, output_dir: Path | None = None) -> Path:
        """Save one SVG file per glyph, named by decimal code point.

        Outlines stay in design space (y-down); the view box covers the em
        box and the advance width is stored in a ``glyph-width`` attribute.

        Args:
            output_dir: Target directory, defaults to ``out/<full-name>``

        Returns:
            Path of the directory holding the files

        Raises:
            FontSaveError: If a file cannot be written
        """
        directory = output_dir or default_output_path(self._font, suffix="")
        try:
            directory.mkdir(parents=True, exist_ok=True)
            for char, glyph in self.glyphs().items():
                pen = SVGPathPen(None)
                glyph.outline.draw(pen)
                metrics = glyph.metrics
                svg = (
                    '<svg xmlns="http://www.w3.org/2000/svg" '
                    f'viewBox="0 {-metrics.ascent:g} {glyph.width:g} {metrics.em:g}" '
                    f'glyph-width="{glyph.width:g}">'
                    f'<path d="{pen.getCommands()}"/></svg>\n'
                )
                (directory / f"{ord(char)}.svg").write_text(svg, encoding="utf-8")
        except OSError as e:
            raise FontSaveError(str(directory), str(e)) from e

        logger.info("Wrote %d SVG glyphs to %s", len(self.glyphs()), directory)
        return directory
