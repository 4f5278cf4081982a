"""CLI application entry point for vepor.

This module provides the demo CLI interface using Typer.
"""

import time
from pathlib import Path
from typing import Annotated

import typer

from vepor import __version__
from vepor.cli.output import (
    console,
    print_containment,
    print_error,
    print_header,
    print_measurements,
    print_points,
    print_scene_list,
    print_segment_table,
    print_step,
    print_summary,
)
from vepor.cli.scenes import Scene, get_scene, list_scenes
from vepor.config import LoggingConfig, ReportConfig, VeporSettings
from vepor.core import (
    compute_signed_area,
    find_shape_intersections,
    is_shape_counter_clockwise,
    point_inside_shape,
    resolve_shape,
)
from vepor.domain import Point, ResolvedShape, Subtract, Union, Xor
from vepor.exceptions import VeporError
from vepor.utils import ResolutionLogger, configure_logging

# Exit code of `contains` when the point is outside the shape
EXIT_OUTSIDE = 2

# Create the Typer app
app = typer.Typer(
    name="vepor",
    help="Resolve, measure and query 2D shapes built from arcs and lines.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Vepor[/bold blue] v{__version__}")
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
    """Resolve, measure and query 2D shapes built from arcs and lines."""


@app.command()
def scenes() -> None:
    """List the built-in demo scenes."""
    print_scene_list([(scene.name, scene.description) for scene in list_scenes()])


@app.command()
def inspect(
    scene_name: Annotated[
        str,
        typer.Argument(
            help="Name of a built-in scene (see `vepor scenes`)",
            show_default=False,
        ),
    ],
    precision: Annotated[
        int,
        typer.Option(
            "--precision",
            "-p",
            help="Decimal places for printed numbers (0-12)",
            min=0,
            max=12,
        ),
    ] = 4,
    segments: Annotated[
        bool,
        typer.Option(
            "--segments/--no-segments",
            help="Print the resolved segment table",
        ),
    ] = True,
    intersections: Annotated[
        bool,
        typer.Option(
            "--intersections/--no-intersections",
            help="Print operand intersection points of boolean scenes",
        ),
    ] = True,
    control_points: Annotated[
        bool,
        typer.Option(
            "--control-points",
            help="Print the control points of the resolved shape",
        ),
    ] = False,
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
    """Resolve a scene and report its segments, area and orientation.

    Example:
        vepor inspect union --control-points
    """
    settings = VeporSettings(
        report=ReportConfig(
            precision=precision,
            show_segments=segments,
            show_intersections=intersections,
            show_control_points=control_points,
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )
    resolution_logger = _create_logger(settings, quiet)
    resolution_logger.start_run()

    try:
        scene = get_scene(scene_name)
        if not quiet:
            print_header(__version__)
            print_step(f"Resolving {scene.name}")
            console.print(f"  {scene.description}")

        resolved, operand_intersections = _resolve_scene(scene, resolution_logger)
        _report_scene(resolved, operand_intersections, settings.report, quiet)

        stats = resolution_logger.finish_run()
        if not quiet:
            print_summary(
                total_time_s=stats.duration_seconds,
                scenes=stats.scenes_resolved,
                segments=stats.segments_produced,
                intersections=stats.intersections_found,
                errors=stats.error_count,
            )

    except VeporError as e:
        resolution_logger.log_scene_error(scene_name, e)
        resolution_logger.finish_run()
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def contains(
    scene_name: Annotated[
        str,
        typer.Argument(help="Name of a built-in scene", show_default=False),
    ],
    x: Annotated[float, typer.Argument(help="X coordinate of the query point")],
    y: Annotated[float, typer.Argument(help="Y coordinate of the query point")],
    precision: Annotated[
        int,
        typer.Option(
            "--precision",
            "-p",
            help="Decimal places for printed numbers (0-12)",
            min=0,
            max=12,
        ),
    ] = 4,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
) -> None:
    """Test whether a point lies inside a scene.

    Exits with code 0 when the point is inside and 2 when it is outside.
    """
    settings = VeporSettings(
        report=ReportConfig(precision=precision),
        logging=LoggingConfig(log_level=log_level),
    )
    resolution_logger = _create_logger(settings, quiet=False)
    resolution_logger.start_run()

    try:
        scene = get_scene(scene_name)
        resolved, _ = _resolve_scene(scene, resolution_logger, with_intersections=False)
    except VeporError as e:
        resolution_logger.log_scene_error(scene_name, e)
        resolution_logger.finish_run()
        print_error(str(e))
        raise typer.Exit(code=1)

    point = Point(x, y)
    inside = point_inside_shape(point, resolved)
    resolution_logger.log_containment_query(scene.name, x, y, inside)
    resolution_logger.finish_run()
    print_containment(scene.name, point, inside, settings.report)

    if not inside:
        raise typer.Exit(code=EXIT_OUTSIDE)


def _create_logger(settings: VeporSettings, quiet: bool) -> ResolutionLogger:
    """Configure logging from settings and wrap it for statistics."""
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    return ResolutionLogger(logger)


def _resolve_scene(
    scene: Scene,
    resolution_logger: ResolutionLogger,
    with_intersections: bool = True,
) -> tuple[ResolvedShape, list[Point] | None]:
    """Resolve a scene, and for boolean scenes its operand intersections.

    Args:
        scene: Scene to resolve
        resolution_logger: Logger receiving timing and counts
        with_intersections: Whether to compute operand intersections

    Returns:
        Tuple of (resolved shape, intersection points or None for primitives)
    """
    resolution_logger.log_scene_start(scene.name)
    start = time.perf_counter()

    resolved = resolve_shape(scene.shape)

    operand_intersections: list[Point] | None = None
    if with_intersections and isinstance(scene.shape, (Union, Subtract, Xor)):
        operand_intersections = find_shape_intersections(
            resolve_shape(scene.shape.left),
            resolve_shape(scene.shape.right),
        )

    resolution_logger.log_scene_resolved(
        scene.name,
        segments=len(resolved),
        intersections=len(operand_intersections or []),
        duration_ms=(time.perf_counter() - start) * 1000,
    )
    return resolved, operand_intersections


def _report_scene(
    resolved: ResolvedShape,
    operand_intersections: list[Point] | None,
    report: ReportConfig,
    quiet: bool,
) -> None:
    """Print the inspection report for a resolved scene."""
    if quiet:
        console.print(report.format_number(compute_signed_area(resolved)))
        return

    if report.show_segments:
        print_step(f"{len(resolved)} segments")
        print_segment_table(resolved.segments, report)

    print_step("Measurements")
    print_measurements(
        signed_area=compute_signed_area(resolved),
        counter_clockwise=is_shape_counter_clockwise(resolved),
        bbox=resolved.bounding_box(),
        report=report,
    )

    if report.show_intersections and operand_intersections is not None:
        print_step("Operands")
        print_points("intersection points", operand_intersections, report)

    if report.show_control_points:
        print_step("Control points")
        print_points("control points", resolved.control_points(), report)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
