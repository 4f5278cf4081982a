"""Primitive math and path geometry.

This module provides the numeric building blocks of the kernel:
- Point distance and angle-in-arc membership
- Point-in-circle and point-in-rectangle predicates
- Starting point and midpoint of path segments
- Signed area integration (shoelace for lines, closed-form Green's theorem
  integral for arcs) and orientation
- Control points and bounding boxes of segment lists

All functions are pure and stateless. Tolerances are fixed: coordinates are
compared with COORD_EPSILON and angles with ANGLE_EPSILON.
"""

import math
from collections.abc import Iterable, Sequence

from vepor.domain import (
    ORIGIN,
    Arc,
    BoundingBox,
    ClosePath,
    ConnectedArc,
    DrawPoint,
    Line,
    PathSegment,
    Point,
    point_on_circle,
)

COORD_EPSILON = 1e-10
ANGLE_EPSILON = 1e-6


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points.

    Examples:
        >>> distance(Point(0.0, 0.0), Point(3.0, 4.0))
        5.0
    """
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    return math.sqrt(dx * dx + dy * dy)


def normalize_angle(angle: float) -> float:
    """Normalize an angle in degrees into [0, 360)."""
    return angle % 360.0


def is_angle_in_arc(angle: float, start_angle: float, end_angle: float) -> bool:
    """Check whether an angle lies within the sweep of an arc.

    All three angles are normalized to [0, 360). A sweep whose normalized
    span is zero or a whole turn is treated as a full circle, so an arc with
    equal start and end angles contains every angle. Arcs whose normalized
    start is larger than the end cross 0 degrees.

    Args:
        angle: Angle to test, in degrees
        start_angle: Arc start angle, in degrees
        end_angle: Arc end angle, in degrees

    Returns:
        True if the angle is inside the sweep (within ANGLE_EPSILON)

    Examples:
        >>> is_angle_in_arc(45.0, 0.0, 90.0)
        True
        >>> is_angle_in_arc(5.0, 340.0, 10.0)
        True
        >>> is_angle_in_arc(180.0, 340.0, 10.0)
        False
    """
    a = normalize_angle(angle)
    start = normalize_angle(start_angle)
    end = normalize_angle(end_angle)

    span = abs(end - start)
    if span < COORD_EPSILON or abs(span - 360.0) < COORD_EPSILON:
        return True

    if start <= end:
        return start - ANGLE_EPSILON <= a <= end + ANGLE_EPSILON
    return a >= start - ANGLE_EPSILON or a <= end + ANGLE_EPSILON


def angle_of(point: Point, center: Point) -> float:
    """Polar angle of point around center, in degrees."""
    return math.degrees(math.atan2(point.y - center.y, point.x - center.x))


def point_inside_circle(point: Point, center: Point, radius: float) -> bool:
    """Strict point-in-circle test."""
    return distance(point, center) < radius


def point_inside_rectangle(point: Point, top_left: Point, bottom_right: Point) -> bool:
    """Inclusive point-in-rectangle test for a box given by its min and max corners."""
    return (
        top_left.x <= point.x <= bottom_right.x
        and top_left.y <= point.y <= bottom_right.y
    )


def points_coincide(p1: Point, p2: Point) -> bool:
    """Check whether two points are equal within COORD_EPSILON on each axis."""
    return abs(p1.x - p2.x) <= COORD_EPSILON and abs(p1.y - p2.y) <= COORD_EPSILON


def get_starting_point(segments: Iterable[PathSegment]) -> Point | None:
    """Find the first point a path passes through.

    Lines yield their start, arcs the point at their start angle, connected
    arcs their stored start point and point markers the marked point.
    ClosePath entries are skipped.

    Args:
        segments: Path segments in traversal order

    Returns:
        The starting point, or None when no segment provides one
    """
    for segment in segments:
        if isinstance(segment, Line):
            return segment.start
        if isinstance(segment, Arc):
            return segment.start_point
        if isinstance(segment, ConnectedArc):
            return segment.start_point
        if isinstance(segment, DrawPoint):
            return segment.point
    return None


def get_segment_midpoint(segment: PathSegment) -> Point:
    """Representative point of a segment for inside/outside sampling.

    Lines use the arithmetic midpoint and arcs the point at the mean of
    their start and end angles. ClosePath has no extent and maps to the
    origin; a point marker maps to itself.

    Args:
        segment: Segment to sample

    Returns:
        Midpoint of the segment
    """
    if isinstance(segment, Line):
        return Point(
            (segment.start.x + segment.end.x) / 2.0,
            (segment.start.y + segment.end.y) / 2.0,
        )
    if isinstance(segment, (Arc, ConnectedArc)):
        mid_angle = (segment.start_angle + segment.end_angle) / 2.0
        return point_on_circle(segment.center, segment.radius, mid_angle)
    if isinstance(segment, DrawPoint):
        return segment.point
    return ORIGIN


def _shoelace(p1: Point, p2: Point) -> float:
    return (p1.x * p2.y - p2.x * p1.y) / 2.0


def _connector(current: Point, target: Point) -> float:
    # Implicit straight edge joining the cursor to the next segment
    if points_coincide(current, target):
        return 0.0
    return _shoelace(current, target)


def _normalize_sweep(sweep: float) -> float:
    if not math.isfinite(sweep):
        return sweep
    while sweep > 360.0:
        sweep -= 360.0
    while sweep < -360.0:
        sweep += 360.0
    return sweep


def arc_area_term(center: Point, radius: float, start_angle: float, end_angle: float) -> float:
    """Closed-form contribution of an arc to the signed area.

    Integrates x dy along x = cx + r cos t, y = cy + r sin t:

        cx * r * (sin(end) - sin(start)) + r^2 * (sweep/2 + sin(2 end)/4 - sin(2 start)/4)

    with the sweep normalized into [-360, 360] degrees before conversion.

    Args:
        center: Arc center
        radius: Arc radius
        start_angle: Start angle in degrees
        end_angle: End angle in degrees

    Returns:
        Area contribution of the arc
    """
    if not (math.isfinite(start_angle) and math.isfinite(end_angle)):
        return math.nan

    start_rad = math.radians(start_angle)
    end_rad = math.radians(end_angle)
    sweep_rad = math.radians(_normalize_sweep(end_angle - start_angle))

    term1 = center.x * radius * (math.sin(end_rad) - math.sin(start_rad))
    term2 = radius * radius * (
        sweep_rad / 2.0 + math.sin(2.0 * end_rad) / 4.0 - math.sin(2.0 * start_rad) / 4.0
    )
    return term1 + term2


def signed_area_of_path(segments: Sequence[PathSegment]) -> float:
    """Calculate the signed area enclosed by a path.

    A cursor starts at the path's starting point. Whenever a segment does
    not begin where the cursor is, the implicit connecting edge is added
    first. ClosePath adds the edge back to the first point and point markers
    contribute nothing.

    The sign encodes orientation:
    - Positive area: counter-clockwise
    - Negative area: clockwise

    Args:
        segments: Path segments in traversal order

    Returns:
        Signed area, 0.0 for a path with no starting point

    Examples:
        >>> square = [
        ...     Line(Point(0, 0), Point(1, 0)),
        ...     Line(Point(1, 0), Point(1, 1)),
        ...     Line(Point(1, 1), Point(0, 1)),
        ...     Line(Point(0, 1), Point(0, 0)),
        ... ]
        >>> signed_area_of_path(square)
        1.0
    """
    first_point = get_starting_point(segments)
    if first_point is None:
        return 0.0

    area = 0.0
    current = first_point

    for segment in segments:
        if isinstance(segment, Line):
            area += _connector(current, segment.start)
            area += _shoelace(segment.start, segment.end)
            current = segment.end
        elif isinstance(segment, (Arc, ConnectedArc)):
            area += _connector(current, segment.start_point)
            area += arc_area_term(
                segment.center, segment.radius, segment.start_angle, segment.end_angle
            )
            current = segment.end_point
        elif isinstance(segment, ClosePath):
            area += _connector(current, first_point)

    return area


def area_of_path(segments: Sequence[PathSegment]) -> float:
    """Absolute area enclosed by a path."""
    return abs(signed_area_of_path(segments))


def is_counter_clockwise(segments: Sequence[PathSegment]) -> bool:
    """Check whether a path winds counter-clockwise (positive signed area)."""
    return signed_area_of_path(segments) > 0.0


def control_points(segments: Iterable[PathSegment]) -> list[Point]:
    """Collect the snapping targets of a path.

    Args:
        segments: Path segments

    Returns:
        Line endpoints, arc centers and connected-arc centers and endpoints
    """
    points: list[Point] = []
    for segment in segments:
        points.extend(segment.control_points())
    return points


def bounding_box(segments: Iterable[PathSegment]) -> BoundingBox:
    """Bounding box of the geometry a path draws.

    Lines contribute their endpoints. Arcs contribute their endpoints and the
    axis extremes (0, 90, 180 and 270 degrees) that fall inside their sweep.
    Zero-radius connectors contribute only their explicit endpoints.

    Args:
        segments: Path segments

    Returns:
        Tight axis-aligned box; a zero box at the origin for an empty path

    Examples:
        >>> bounding_box([Arc(Point(10.0, 10.0), 5.0, 0.0, 180.0)]).min
        Point(x=5.0, y=10.0)
    """
    points: list[Point] = []
    for segment in segments:
        points.extend(segment.extent_points())
    return BoundingBox.from_points(points)
