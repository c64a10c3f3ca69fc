"""CLI application entry point for glyphforge.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from glyphforge import __version__
from glyphforge.cli.output import (
    SYM_DOT,
    console,
    create_progress,
    print_error,
    print_font_info,
    print_font_table,
    print_header,
    print_step,
    print_success,
)
from glyphforge.config import (
    GeometryConfig,
    GlyphforgeSettings,
    LoggingConfig,
    OutputConfig,
    OutputFormat,
)
from glyphforge.domain import Font
from glyphforge.exceptions import FontNotFoundError, FontSaveError, GlyphforgeError
from glyphforge.families import FontRegistry
from glyphforge.io import FontWriter, default_output_path
from glyphforge.utils import GenerationLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="glyphforge",
    help="Generate constructed-script typefaces from style parameters.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Glyphforge[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Generate constructed-script typefaces from style parameters."""


def _get_font(font_id: str, geometry: GeometryConfig | None = None) -> Font:
    font = FontRegistry.get(font_id, geometry)
    if font is None:
        raise FontNotFoundError(font_id)
    return font


@app.command("list")
def list_fonts() -> None:
    """List the preset font ids."""
    print_font_table([(font_id, _get_font(font_id)) for font_id in FontRegistry.ids()])


@app.command()
def chars(
    font_id: Annotated[str, typer.Argument(help="Preset font id, e.g. vkr", show_default=False)],
) -> None:
    """Show the characters a font supports."""
    try:
        font = _get_font(font_id)
    except FontNotFoundError as e:
        print_error(str(e), details="Run 'glyphforge list' to see the available ids.")
        raise typer.Exit(code=1)

    supported = font.get_chars()
    console.print(f"[bold]{font.full_name}[/bold] {SYM_DOT} {len(supported)} characters")
    console.print("  " + " ".join(supported), markup=False)


@app.command()
def build(
    font_id: Annotated[str, typer.Argument(help="Preset font id, e.g. vkr", show_default=False)],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: out/{full-name}.otf, or a directory with --svg)",
        ),
    ] = None,
    svg: Annotated[
        bool,
        typer.Option(
            "--svg",
            help="Write one SVG file per glyph instead of an OpenType font",
        ),
    ] = False,
    solver_step: Annotated[
        float,
        typer.Option(
            "--solver-step",
            min=0.01,
            max=10.0,
            help="Grid spacing of the stroke handle search (outlines match the references at 0.5)",
        ),
    ] = 0.5,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Generate a font and save it.

    Example:
        glyphforge build vkb

    This will create out/vekos-bold.otf.
    """
    settings = GlyphforgeSettings(
        geometry=GeometryConfig(solver_step=solver_step),
        output=OutputConfig(format=OutputFormat.SVG if svg else OutputFormat.OTF),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )
    structured_logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    try:
        font = _get_font(font_id, settings.geometry)

        if not quiet:
            print_header(__version__)
            print_step("Generating glyphs")
            print_font_info(font, len(font.get_chars()))

        generation_logger = GenerationLogger(structured_logger)
        writer = FontWriter(font, generation_logger)

        if not quiet:
            with create_progress() as progress:
                task_id = progress.add_task("Generating", total=len(font.get_chars()))

                def update_progress(completed: int, _total: int) -> None:
                    progress.update(task_id, completed=completed)

                writer.glyphs(progress_callback=update_progress)
        else:
            writer.glyphs()

        if settings.output.format is OutputFormat.SVG:
            suffix = ""
        else:
            suffix = f".{settings.output.format.value}"
        target = output or default_output_path(font, settings.output.output_dir, suffix)

        if not quiet:
            print_step("Writing")
        if settings.output.format is OutputFormat.SVG:
            written_path = writer.write_svg(target)
        else:
            written_path = writer.write_otf(target)

        stats = generation_logger.stats
        if not quiet:
            print_success(
                output_path=str(written_path),
                total_time_s=stats.duration_seconds,
                written=stats.written_count,
                errors=stats.error_count,
            )

    except FontNotFoundError as e:
        print_error(str(e), details="Run 'glyphforge list' to see the available ids.")
        raise typer.Exit(code=1)
    except FontSaveError as e:
        print_error(f"Could not save font: {e.reason}")
        raise typer.Exit(code=1)
    except GlyphforgeError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
