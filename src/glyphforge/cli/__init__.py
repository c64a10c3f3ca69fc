"""Command-line interface for glyphforge.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Listing of preset fonts and their characters
- Progress bar while glyphs are generated
- OpenType or per-glyph SVG output
"""

from glyphforge.cli.app import cli, main

__all__ = ["cli", "main"]
