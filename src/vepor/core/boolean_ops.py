"""Boolean operations on resolved shapes.

Union, subtraction and XOR share one retention strategy: every segment of
each operand (except ClosePath) is sampled at its midpoint and tested for
containment in the other operand. Whole segments are kept or dropped; they
are never re-trimmed at the computed intersection points, so a segment that
crosses the other boundary more than once is classified by its midpoint
alone.

| Operation | Keep from A if  | Keep from B if            |
|-----------|-----------------|---------------------------|
| Union     | midpoint not in B | midpoint not in A       |
| Subtract  | midpoint not in B | midpoint in A, reversed |
| Xor       | midpoint not in B | midpoint not in A       |

Union additionally appends a zero-radius ConnectedArc marker for every
intersection point. Non-empty results end with a single ClosePath.
"""

import logging

from vepor.core.containment import point_inside_shape
from vepor.core.geometry import (
    area_of_path,
    get_segment_midpoint,
    is_counter_clockwise,
    signed_area_of_path,
)
from vepor.core.intersection import (
    arc_arc_intersection,
    line_arc_intersection,
    line_line_intersection,
)
from vepor.domain import (
    ORIGIN,
    Arc,
    ClosePath,
    ConnectedArc,
    Line,
    PathSegment,
    Point,
    ResolvedShape,
)

logger = logging.getLogger(__name__)


def segment_intersections(seg1: PathSegment, seg2: PathSegment) -> list[Point]:
    """Intersect two path segments.

    Lines pair with lines and arcs; Arc and ConnectedArc are both treated as
    arcs. ClosePath and point markers never intersect anything.

    Args:
        seg1: First segment
        seg2: Second segment

    Returns:
        Intersection points of the two segments
    """
    arc_types = (Arc, ConnectedArc)

    if isinstance(seg1, Line) and isinstance(seg2, Line):
        return line_line_intersection(seg1.start, seg1.end, seg2.start, seg2.end)
    if isinstance(seg1, Line) and isinstance(seg2, arc_types):
        return line_arc_intersection(
            seg1.start, seg1.end, seg2.center, seg2.radius, seg2.start_angle, seg2.end_angle
        )
    if isinstance(seg1, arc_types) and isinstance(seg2, Line):
        return line_arc_intersection(
            seg2.start, seg2.end, seg1.center, seg1.radius, seg1.start_angle, seg1.end_angle
        )
    if isinstance(seg1, arc_types) and isinstance(seg2, arc_types):
        return arc_arc_intersection(
            seg1.center,
            seg1.radius,
            seg1.start_angle,
            seg1.end_angle,
            seg2.center,
            seg2.radius,
            seg2.start_angle,
            seg2.end_angle,
        )
    return []


def find_shape_intersections(shape1: ResolvedShape, shape2: ResolvedShape) -> list[Point]:
    """Find every intersection point between two resolved shapes.

    Runs the pairwise routines over the full cross product of segments, so
    a point where several segments meet may be reported more than once.

    Args:
        shape1: First shape
        shape2: Second shape

    Returns:
        Intersection points in segment order
    """
    intersections: list[Point] = []
    for seg1 in shape1.segments:
        for seg2 in shape2.segments:
            intersections.extend(segment_intersections(seg1, seg2))
    return intersections


def _retain(
    shape: ResolvedShape, other: ResolvedShape, keep_inside: bool
) -> list[PathSegment]:
    kept: list[PathSegment] = []
    for segment in shape.segments:
        if isinstance(segment, ClosePath):
            continue
        inside = point_inside_shape(get_segment_midpoint(segment), other)
        if inside == keep_inside:
            kept.append(segment)
    return kept


def _reverse(segment: PathSegment) -> PathSegment:
    if isinstance(segment, (Line, Arc)):
        return segment.reversed()
    return segment


def _close(segments: list[PathSegment]) -> ResolvedShape:
    if segments:
        segments.append(ClosePath())
    return ResolvedShape(segments)


def intersection_marker(point: Point) -> ConnectedArc:
    """Degenerate zero-radius connector standing in for an intersection point."""
    return ConnectedArc(ORIGIN, 0.0, 0.0, 0.0, point, point)


def compute_union(
    shape1: ResolvedShape, shape2: ResolvedShape, intersections: list[Point]
) -> ResolvedShape:
    """Compute the union of two shapes.

    Keeps the segments of each shape lying outside the other and appends one
    marker per intersection point.

    Args:
        shape1: First operand
        shape2: Second operand
        intersections: Intersection points of the operands

    Returns:
        New resolved shape; the operands are not modified
    """
    from_first = _retain(shape1, shape2, keep_inside=False)
    from_second = _retain(shape2, shape1, keep_inside=False)
    markers = [intersection_marker(point) for point in intersections]

    logger.debug(
        "Union: kept %d + %d segments, %d markers",
        len(from_first),
        len(from_second),
        len(markers),
    )
    return _close(from_first + from_second + markers)


def compute_subtract(
    shape1: ResolvedShape, shape2: ResolvedShape, intersections: list[Point]
) -> ResolvedShape:
    """Compute shape1 minus shape2.

    Keeps the segments of shape1 outside shape2, plus the segments of shape2
    inside shape1 with their direction reversed so the hole winds opposite
    to the outer boundary.

    Args:
        shape1: Shape to subtract from
        shape2: Shape to remove
        intersections: Intersection points of the operands (unused)

    Returns:
        New resolved shape; the operands are not modified
    """
    from_first = _retain(shape1, shape2, keep_inside=False)
    hole = [_reverse(segment) for segment in _retain(shape2, shape1, keep_inside=True)]

    logger.debug(
        "Subtract: kept %d segments, %d reversed hole segments",
        len(from_first),
        len(hole),
    )
    return _close(from_first + hole)


def compute_xor(
    shape1: ResolvedShape, shape2: ResolvedShape, intersections: list[Point]
) -> ResolvedShape:
    """Compute the symmetric difference of two shapes.

    Args:
        shape1: First operand
        shape2: Second operand
        intersections: Intersection points of the operands (unused)

    Returns:
        New resolved shape; the operands are not modified
    """
    from_first = _retain(shape1, shape2, keep_inside=False)
    from_second = _retain(shape2, shape1, keep_inside=False)

    logger.debug("Xor: kept %d + %d segments", len(from_first), len(from_second))
    return _close(from_first + from_second)


def compute_signed_area(shape: ResolvedShape) -> float:
    """Signed area of a resolved shape."""
    return signed_area_of_path(shape.segments)


def compute_area(shape: ResolvedShape) -> float:
    """Absolute area of a resolved shape."""
    return area_of_path(shape.segments)


def is_shape_counter_clockwise(shape: ResolvedShape) -> bool:
    """Check whether a resolved shape winds counter-clockwise."""
    return is_counter_clockwise(shape.segments)
