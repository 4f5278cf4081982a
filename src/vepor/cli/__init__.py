"""Command-line interface for vepor.

This module provides the demo CLI using Typer with rich output for
readable reports of resolved shapes.

Key features:
- Listing of built-in demo scenes
- Segment, area, orientation and bounding box reports
- Point-in-shape queries with exit codes
"""

from vepor.cli.app import cli, main

__all__ = ["cli", "main"]
