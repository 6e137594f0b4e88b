"""CLI application entry point for scanfill.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from scanfill import __version__
from scanfill.cli.output import (
    console,
    mask_to_text,
    print_canvas_info,
    print_coverage_table,
    print_error,
    print_header,
    print_mask_preview,
    print_step,
    print_success,
)
from scanfill.config import LoggingConfig, RasterConfig, ScanfillSettings
from scanfill.core import Rasterizer, SceneRenderer
from scanfill.domain import CanvasSpec, FillRule, Polygon
from scanfill.exceptions import ScanfillError, SceneLoadError
from scanfill.io import SceneReader
from scanfill.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="scanfill",
    help="Rasterize polygons with the scan-line algorithm (non-zero or even-odd fill).",
    add_completion=False,
    no_args_is_help=True,
)

RULE_HELP = "Fill rule (non-zero|even-odd)"


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Scanfill[/bold blue] v{__version__}")
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
    """Rasterize polygons into masks and color buffers."""


def _parse_rule(rule: str) -> FillRule:
    try:
        return FillRule(rule.lower())
    except ValueError:
        print_error(
            f"Invalid fill rule: {rule}",
            details="Valid values: non-zero, even-odd",
        )
        raise typer.Exit(code=1)


def _build_settings(
    rule: FillRule,
    log_file: Path | None,
    log_level: str,
) -> ScanfillSettings:
    try:
        return ScanfillSettings(
            raster=RasterConfig(fill_rule=rule),
            logging=LoggingConfig(log_file=log_file, log_level=log_level),
        )
    except ValidationError as e:
        print_error("Invalid options", details=str(e))
        raise typer.Exit(code=1)


@app.command(context_settings={"ignore_unknown_options": True})
def mask(
    width: Annotated[
        int,
        typer.Argument(help="Canvas width in pixels", min=0, show_default=False),
    ],
    height: Annotated[
        int,
        typer.Argument(help="Canvas height in pixels", min=0, show_default=False),
    ],
    coords: Annotated[
        list[float],
        typer.Argument(
            help="Flat vertex coordinates: x0 y0 x1 y1 ... (negative values may also follow --)",
            show_default=False,
        ),
    ],
    rule: Annotated[
        str,
        typer.Option("--rule", "-r", help=RULE_HELP),
    ] = "non-zero",
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Write detailed logs to file"),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Print only the mask"),
    ] = False,
) -> None:
    """Rasterize one polygon and print its interior mask.

    Negative coordinates are clipped to the canvas. They can be given
    directly or after ``--``.

    Example:
        scanfill mask 8 10 0 0 8 0 8 10 --rule even-odd
        scanfill mask --rule even-odd 8 10 -- -4 -4 12 0 4 14
    """
    fill_rule = _parse_rule(rule)

    polygon = Polygon.from_flat(coords)
    if polygon is None:
        print_error(
            f"Odd number of coordinates: {len(coords)}",
            details="Coordinates are given as x y pairs.",
        )
        raise typer.Exit(code=1)

    settings = _build_settings(fill_rule, log_file, log_level)
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    try:
        spec = CanvasSpec(width, height)
        result = Rasterizer(settings.raster, logger).interior(polygon, spec)
    except ScanfillError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if quiet:
        if result.size:
            typer.echo(mask_to_text(result))
        return

    print_header(__version__)
    print_canvas_info(width, height, 1, fill_rule.value)
    print_step("Interior")
    print_mask_preview(
        result,
        max_width=settings.render.preview_max_width,
        filled_char=settings.render.filled_char,
        empty_char=settings.render.empty_char,
    )
    print_success(int(result.sum()), result.size)


@app.command()
def scene(
    scene_file: Annotated[
        Path,
        typer.Argument(help="Path to a JSON scene file", show_default=False),
    ],
    rule: Annotated[
        str,
        typer.Option("--rule", "-r", help=f"{RULE_HELP} for polygons without one"),
    ] = "non-zero",
    preview: Annotated[
        bool,
        typer.Option("--preview/--no-preview", help="Print an ASCII preview of covered pixels"),
    ] = True,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Write detailed logs to file"),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Minimal console output"),
    ] = False,
) -> None:
    """Composite the polygons of a scene file and report their coverage.

    Polygons are multiply-blended in file order onto the background.

    Example:
        scanfill scene shapes.json --rule even-odd
    """
    fill_rule = _parse_rule(rule)

    # Validate input file exists
    if not scene_file.exists():
        print_error(
            f"Input file not found: {scene_file}",
            details=f"The file '{scene_file}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not scene_file.is_file():
        print_error(
            f"Input path is not a file: {scene_file}",
            details="Please provide a path to a JSON scene file.",
        )
        raise typer.Exit(code=1)

    settings = _build_settings(fill_rule, log_file, log_level)
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    try:
        if not quiet:
            print_header(__version__)
            print_step("Loading scene")

        reader = SceneReader(scene_file)
        reader.load()
        loaded = reader.scene

        if not quiet:
            print_canvas_info(
                loaded.spec.width, loaded.spec.height, len(loaded.layers), fill_rule.value
            )
            print_step("Rendering")

        renderer = SceneRenderer(settings, logger)
        renderer.render(loaded)
        covered = renderer.coverage
        stats = renderer.stats
    except SceneLoadError as e:
        print_error(f"Could not load scene: {e.reason}")
        raise typer.Exit(code=1)
    except ScanfillError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if quiet:
        typer.echo(f"{int(covered.sum())}")
        return

    print_coverage_table(stats)
    if preview:
        print_step("Preview")
        print_mask_preview(
            covered,
            max_width=settings.render.preview_max_width,
            filled_char=settings.render.filled_char,
            empty_char=settings.render.empty_char,
        )
    print_success(int(covered.sum()), covered.size, stats.duration_seconds)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
