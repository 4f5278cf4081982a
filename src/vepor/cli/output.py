"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from vepor.config import ReportConfig
from vepor.domain import (
    Arc,
    BoundingBox,
    ClosePath,
    ConnectedArc,
    DrawPoint,
    Line,
    PathSegment,
    Point,
)

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def format_point(point: Point, report: ReportConfig) -> str:
    """Format a point as (x, y) with the configured precision."""
    return f"({report.format_number(point.x)}, {report.format_number(point.y)})"


def describe_segment(segment: PathSegment, report: ReportConfig) -> tuple[str, str]:
    """Describe a path segment for the segment table.

    Args:
        segment: Segment to describe
        report: Report settings (number precision)

    Returns:
        Tuple of (kind, details)
    """
    fmt = report.format_number
    if isinstance(segment, Line):
        return "Line", (
            f"{format_point(segment.start, report)} -> {format_point(segment.end, report)}"
        )
    if isinstance(segment, Arc):
        return "Arc", (
            f"center {format_point(segment.center, report)} r={fmt(segment.radius)} "
            f"{fmt(segment.start_angle)}° -> {fmt(segment.end_angle)}°"
        )
    if isinstance(segment, ConnectedArc):
        return "ConnectedArc", (
            f"center {format_point(segment.center, report)} r={fmt(segment.radius)} "
            f"{format_point(segment.start_point, report)} -> "
            f"{format_point(segment.end_point, report)}"
        )
    if isinstance(segment, DrawPoint):
        return "DrawPoint", format_point(segment.point, report)
    if isinstance(segment, ClosePath):
        return "ClosePath", ""
    return type(segment).__name__, ""


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Vepor[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_scene_list(scenes: list[tuple[str, str]]) -> None:
    """Print the registered scenes.

    Args:
        scenes: (name, description) pairs
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Scene")
    table.add_column("Description")
    for name, description in scenes:
        table.add_row(name, description)
    console.print(table)


def print_segment_table(segments: list[PathSegment], report: ReportConfig) -> None:
    """Print resolved segments, one row per segment.

    Args:
        segments: Resolved path segments
        report: Report settings
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("#", justify="right")
    table.add_column("Segment")
    table.add_column("Geometry")
    for index, segment in enumerate(segments):
        kind, details = describe_segment(segment, report)
        table.add_row(str(index), kind, details)
    console.print(table)


def print_measurements(
    signed_area: float,
    counter_clockwise: bool,
    bbox: BoundingBox,
    report: ReportConfig,
) -> None:
    """Print area, orientation and bounding box.

    Args:
        signed_area: Signed area of the resolved shape
        counter_clockwise: Orientation flag
        bbox: Bounding box of the drawn geometry
        report: Report settings
    """
    fmt = report.format_number
    orientation = "counter-clockwise" if counter_clockwise else "clockwise"
    console.print(f"  Signed area     {fmt(signed_area)}")
    console.print(f"  Area            {fmt(abs(signed_area))}")
    console.print(f"  Orientation     {orientation}")
    console.print(
        f"  Bounding box    {format_point(bbox.min, report)} {SYM_DOT} "
        f"{format_point(bbox.max, report)}"
    )


def print_points(title: str, points: list[Point], report: ReportConfig) -> None:
    """Print a titled list of points.

    Args:
        title: Heading for the list
        points: Points to print
        report: Report settings
    """
    console.print(f"  [green]{len(points)}[/green] {title}")
    for point in points:
        console.print(f"    {format_point(point, report)}")


def print_containment(scene_name: str, point: Point, inside: bool, report: ReportConfig) -> None:
    """Print the answer to a containment query.

    Args:
        scene_name: Queried scene
        point: Query point
        inside: Whether the point is inside
        report: Report settings
    """
    line = Text("  ")
    line.append(format_point(point, report), style="bold")
    if inside:
        line.append(f" {SYM_OK} inside ", style="green")
    else:
        line.append(f" {SYM_ERR} outside ", style="yellow")
    line.append(scene_name)
    console.print(line)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.1f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_summary(
    total_time_s: float,
    scenes: int,
    segments: int,
    intersections: int,
    errors: int,
) -> None:
    """Print completion message with run statistics.

    Args:
        total_time_s: Total run time in seconds
        scenes: Number of scenes resolved
        segments: Number of segments produced
        intersections: Number of operand intersection points found
        errors: Number of errors encountered
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    error_style = "red" if errors > 0 else "green"
    console.print(
        f"  {scenes} scenes {SYM_DOT} {segments} segments {SYM_DOT} "
        f"{intersections} intersections {SYM_DOT} "
        f"[{error_style}]{errors} errors[/{error_style}]"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
