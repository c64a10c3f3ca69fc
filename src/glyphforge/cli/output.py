"""Rich console output helpers for the CLI.

Everything the CLI prints goes through the shared Rich console defined
here, so the symbols and colors stay the same across commands.
"""

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from glyphforge.domain import Font

console = Console()

# Symbols shared by every command
SYM_STEP = "▸"
SYM_OK = "✓"
SYM_ERR = "✗"
SYM_DOT = "·"


def create_progress() -> Progress:
    """Create a rich progress bar for glyph generation.

    Returns:
        Progress bar bound to the shared console.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Package version
    """
    console.print(f"\n[bold]Glyphforge[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_font_table(fonts: list[tuple[str, Font]]) -> None:
    """Print preset ids with their font names.

    Args:
        fonts: Pairs of preset id and font
    """
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("ID")
    table.add_column("Name")
    table.add_column("Version", style="dim")
    for font_id, font in fonts:
        table.add_row(font_id, font.full_name, font.version)
    console.print(table)


def print_font_info(font: Font, char_count: int) -> None:
    """Print the identity of the font being built.

    Args:
        font: Font being built
        char_count: Number of supported characters
    """
    metrics = font.generator.metrics
    line = Text("  ")
    line.append(font.full_name, style="bold")
    line.append(f" ({font.postscript_name})")
    console.print(line)
    console.print(f"  {char_count} characters {SYM_DOT} {metrics.em:g} UPM")


def _format_time(seconds: float) -> str:
    """Render a duration as ms, seconds or minutes."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(output_path: str, total_time_s: float, written: int, errors: int) -> None:
    """Print the output location and glyph counts after a build.

    Args:
        output_path: Path to the output file or directory
        total_time_s: Total generation time in seconds
        written: Number of glyphs written
        errors: Number of glyphs that failed to build
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)

    error_style = "red" if errors > 0 else "green"
    console.print(f"  {written} glyphs {SYM_DOT} [{error_style}]{errors} errors[/{error_style}]")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Hint printed on a second line
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
