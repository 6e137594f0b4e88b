"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables, mask previews and formatted messages.
"""

import numpy as np
from rich.console import Console
from rich.table import Table
from rich.text import Text

from scanfill.utils import RenderStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Scanfill[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_canvas_info(width: int, height: int, polygons: int, rule: str) -> None:
    """Print canvas and fill settings.

    Args:
        width: Canvas width in pixels
        height: Canvas height in pixels
        polygons: Number of polygons to rasterize
        rule: Default fill rule name
    """
    plural = "polygon" if polygons == 1 else "polygons"
    console.print(f"  {width}×{height} px {SYM_DOT} {polygons} {plural} {SYM_DOT} {rule}")


def mask_to_text(mask: np.ndarray, filled_char: str = "#", empty_char: str = ".") -> str:
    """Convert a boolean mask to one line of characters per row."""
    return "\n".join(
        "".join(filled_char if cell else empty_char for cell in row) for row in mask
    )


def print_mask_preview(
    mask: np.ndarray,
    max_width: int,
    filled_char: str = "#",
    empty_char: str = ".",
) -> None:
    """Print an ASCII preview of a mask.

    Masks wider than ``max_width`` are not printed.

    Args:
        mask: Boolean (height, width) mask
        max_width: Widest mask to print
        filled_char: Character for interior pixels
        empty_char: Character for exterior pixels
    """
    height, width = mask.shape
    if width > max_width:
        console.print(f"  [dim]preview skipped: {width} columns > {max_width}[/dim]")
        return
    if height == 0 or width == 0:
        console.print("  [dim](empty canvas)[/dim]")
        return

    # Text keeps markup characters such as "[" literal
    for line in mask_to_text(mask, filled_char, empty_char).splitlines():
        console.print(Text("  " + line))


def print_coverage_table(stats: RenderStats) -> None:
    """Print per-polygon pixel coverage.

    Args:
        stats: Statistics from a rendering run
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Polygon")
    table.add_column("Pixels", justify="right")
    for name, pixels in stats.coverage:
        style = "dim" if pixels == 0 else ""
        table.add_row(Text(name), f"{pixels:,}", style=style)
    console.print(table)


def print_success(pixels: int, total_pixels: int, duration_s: float | None = None) -> None:
    """Print success message with coverage summary.

    Args:
        pixels: Number of covered pixels
        total_pixels: Number of pixels on the canvas
        duration_s: Rendering time in seconds
    """
    percent = (pixels / total_pixels * 100) if total_pixels else 0.0
    time_str = f" in {duration_s * 1000:.1f}ms" if duration_s is not None else ""
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green]{time_str}")
    console.print(f"  {pixels:,} of {total_pixels:,} pixels {SYM_DOT} {percent:.1f}% covered")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
