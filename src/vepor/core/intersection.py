"""Pairwise intersection of lines and circular arcs.

Each routine returns a list of zero, one or two points. Every returned point
lies on both inputs within the kernel tolerances (COORD_EPSILON on
coordinates, ANGLE_EPSILON on arc angles).

Degenerate inputs never raise:
- Zero-length segments are treated as points
- Parallel and collinear segments yield no points
- Concentric circles yield no points, even when the radii are equal
"""

import math

from vepor.core.geometry import (
    COORD_EPSILON,
    angle_of,
    distance,
    is_angle_in_arc,
)
from vepor.domain import Point


def _point_on_segment(point: Point, seg_start: Point, seg_end: Point) -> list[Point]:
    # Parametrize along the dominant axis of the segment
    span_x = seg_end.x - seg_start.x
    span_y = seg_end.y - seg_start.y

    if abs(span_x) > abs(span_y):
        t = (point.x - seg_start.x) / span_x
    elif span_y != 0.0:
        t = (point.y - seg_start.y) / span_y
    else:
        return []

    if -COORD_EPSILON <= t <= 1.0 + COORD_EPSILON:
        px = seg_start.x + t * span_x
        py = seg_start.y + t * span_y
        if abs(px - point.x) < COORD_EPSILON and abs(py - point.y) < COORD_EPSILON:
            return [point]
    return []


def _is_degenerate(start: Point, end: Point) -> bool:
    return abs(start.x - end.x) < COORD_EPSILON and abs(start.y - end.y) < COORD_EPSILON


def line_line_intersection(
    l1_start: Point, l1_end: Point, l2_start: Point, l2_end: Point
) -> list[Point]:
    """Find the intersection of two line segments.

    Uses parametric line equations; both parameters must fall in [0, 1]
    with COORD_EPSILON slack. Zero-length segments are tested as points for
    membership on the other segment.

    Args:
        l1_start: First endpoint of segment 1
        l1_end: Second endpoint of segment 1
        l2_start: First endpoint of segment 2
        l2_end: Second endpoint of segment 2

    Returns:
        A single intersection point, or an empty list when the segments miss,
        are parallel, or are collinear

    Examples:
        >>> line_line_intersection(
        ...     Point(0.0, 0.0), Point(10.0, 10.0), Point(0.0, 10.0), Point(10.0, 0.0)
        ... )
        [Point(x=5.0, y=5.0)]
    """
    l1_is_point = _is_degenerate(l1_start, l1_end)
    l2_is_point = _is_degenerate(l2_start, l2_end)

    if l1_is_point and l2_is_point:
        if _is_degenerate(l1_start, l2_start):
            return [l1_start]
        return []

    if l1_is_point:
        return _point_on_segment(l1_start, l2_start, l2_end)

    if l2_is_point:
        return _point_on_segment(l2_start, l1_start, l1_end)

    x1, y1 = l1_start.x, l1_start.y
    x2, y2 = l1_end.x, l1_end.y
    x3, y3 = l2_start.x, l2_start.y
    x4, y4 = l2_end.x, l2_end.y

    denom = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)

    # Parallel or collinear
    if abs(denom) < COORD_EPSILON:
        return []

    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / denom
    u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / denom

    lo, hi = -COORD_EPSILON, 1.0 + COORD_EPSILON
    if lo <= t <= hi and lo <= u <= hi:
        return [Point(x1 + t * (x2 - x1), y1 + t * (y2 - y1))]

    return []


def line_arc_intersection(
    line_start: Point,
    line_end: Point,
    center: Point,
    radius: float,
    start_angle: float,
    end_angle: float,
) -> list[Point]:
    """Find the intersections of a line segment with a circular arc.

    Substitutes the parametric line into the circle equation and solves the
    resulting quadratic in t. Roots outside [0, 1] (with COORD_EPSILON slack)
    or outside the arc's sweep are rejected. The second root is only
    evaluated when the discriminant is clearly positive, so a tangent line
    yields one point.

    Args:
        line_start: Start of the line segment
        line_end: End of the line segment
        center: Arc center
        radius: Arc radius
        start_angle: Arc start angle in degrees
        end_angle: Arc end angle in degrees

    Returns:
        Zero, one or two intersection points
    """
    dx = line_end.x - line_start.x
    dy = line_end.y - line_start.y
    fx = line_start.x - center.x
    fy = line_start.y - center.y

    a = dx * dx + dy * dy

    if a < COORD_EPSILON:
        dist = math.sqrt(fx * fx + fy * fy)
        if abs(dist - radius) < COORD_EPSILON and is_angle_in_arc(
            angle_of(line_start, center), start_angle, end_angle
        ):
            return [line_start]
        return []

    b = 2.0 * (fx * dx + fy * dy)
    c = fx * fx + fy * fy - radius * radius

    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        return []

    sqrt_disc = math.sqrt(discriminant)
    roots = [(-b - sqrt_disc) / (2.0 * a)]
    if discriminant > COORD_EPSILON:
        roots.append((-b + sqrt_disc) / (2.0 * a))

    intersections: list[Point] = []
    for t in roots:
        if -COORD_EPSILON <= t <= 1.0 + COORD_EPSILON:
            point = Point(line_start.x + t * dx, line_start.y + t * dy)
            if is_angle_in_arc(angle_of(point, center), start_angle, end_angle):
                intersections.append(point)

    return intersections


def _on_both_arcs(
    point: Point,
    c1: Point,
    start1: float,
    end1: float,
    c2: Point,
    start2: float,
    end2: float,
) -> bool:
    return is_angle_in_arc(angle_of(point, c1), start1, end1) and is_angle_in_arc(
        angle_of(point, c2), start2, end2
    )


def arc_arc_intersection(
    c1: Point,
    r1: float,
    start1: float,
    end1: float,
    c2: Point,
    r2: float,
    start2: float,
    end2: float,
) -> list[Point]:
    """Find the intersections of two circular arcs.

    Uses the standard two-circle construction: the chord between the
    intersection points lies at distance a = (r1^2 - r2^2 + d^2) / (2d) from
    the first center, with half-length h = sqrt(r1^2 - a^2). Each candidate
    must lie within the sweep of both arcs.

    Args:
        c1: First arc center
        r1: First arc radius
        start1: First arc start angle in degrees
        end1: First arc end angle in degrees
        c2: Second arc center
        r2: Second arc radius
        start2: Second arc start angle in degrees
        end2: Second arc end angle in degrees

    Returns:
        Zero, one (tangency) or two intersection points. Concentric arcs
        return an empty list since their overlap is not a finite point set.
    """
    d = distance(c1, c2)

    # Too far apart, or one circle strictly inside the other
    if d > r1 + r2 + COORD_EPSILON or d < abs(r1 - r2) - COORD_EPSILON:
        return []

    if d < COORD_EPSILON:
        return []

    external = abs(d - (r1 + r2)) < COORD_EPSILON
    if external or abs(d - abs(r1 - r2)) < COORD_EPSILON:
        # Internal tangency with the smaller circle first touches on the far side
        t = r1 / d if external or r1 >= r2 else -r1 / d
        point = Point(c1.x + t * (c2.x - c1.x), c1.y + t * (c2.y - c1.y))
        if _on_both_arcs(point, c1, start1, end1, c2, start2, end2):
            return [point]
        return []

    a = (r1 * r1 - r2 * r2 + d * d) / (2.0 * d)
    h_squared = r1 * r1 - a * a

    if h_squared < -COORD_EPSILON:
        return []

    # Rounding can push a tangent chord slightly negative
    h = math.sqrt(h_squared) if h_squared > 0.0 else 0.0

    px = c1.x + a * (c2.x - c1.x) / d
    py = c1.y + a * (c2.y - c1.y) / d
    offset_x = h * (c2.y - c1.y) / d
    offset_y = h * (c2.x - c1.x) / d

    candidates = [Point(px + offset_x, py - offset_y)]
    if h > COORD_EPSILON:
        candidates.append(Point(px - offset_x, py + offset_y))

    return [
        point
        for point in candidates
        if _on_both_arcs(point, c1, start1, end1, c2, start2, end2)
    ]
