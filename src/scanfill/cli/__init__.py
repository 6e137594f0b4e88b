"""Command-line interface for scanfill.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- ASCII previews of interior masks
- Scene compositing with per-polygon coverage
- Verbose/quiet output modes
"""

from scanfill.cli.app import cli, main

__all__ = ["cli", "main"]
