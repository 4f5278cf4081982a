"""Point-in-shape testing by ray casting.

A horizontal ray is cast from the query point far to the right and the
crossings with every boundary segment are counted. An odd count means the
point is inside.
"""

from vepor.core.geometry import COORD_EPSILON, distance
from vepor.core.intersection import line_arc_intersection, line_line_intersection
from vepor.domain import Arc, ConnectedArc, Line, Point, ResolvedShape

# Exceeds the extent of any practical shape
RAY_LENGTH = 10000.0


def point_inside_shape(point: Point, shape: ResolvedShape) -> bool:
    """Determine whether a point lies inside a resolved shape.

    Lines contribute one crossing when the ray hits them and arcs contribute
    one crossing per ray/arc intersection. ClosePath and point markers never
    count.

    A full-circle arc short-circuits to inside when the point is strictly
    closer to its center than the radius: a ray starting near the circle's
    rightmost edge can otherwise produce an even count from tangency
    artifacts.

    Args:
        point: The point to test
        shape: Resolved shape forming one or more closed loops

    Returns:
        True if the point is inside the shape, False otherwise

    Examples:
        >>> circle = ResolvedShape([Arc(Point(0.0, 0.0), 5.0, 0.0, 360.0)])
        >>> point_inside_shape(Point(3.0, 0.0), circle)
        True
        >>> point_inside_shape(Point(10.0, 0.0), circle)
        False
    """
    ray_end = Point(point.x + RAY_LENGTH, point.y)
    crossings = 0

    for segment in shape.segments:
        if isinstance(segment, Line):
            if line_line_intersection(point, ray_end, segment.start, segment.end):
                crossings += 1
        elif isinstance(segment, Arc):
            crossings += len(
                line_arc_intersection(
                    point,
                    ray_end,
                    segment.center,
                    segment.radius,
                    segment.start_angle,
                    segment.end_angle,
                )
            )
            if segment.is_full_circle() and (
                distance(point, segment.center) < segment.radius - COORD_EPSILON
            ):
                return True
        elif isinstance(segment, ConnectedArc):
            crossings += len(
                line_arc_intersection(
                    point,
                    ray_end,
                    segment.center,
                    segment.radius,
                    segment.start_angle,
                    segment.end_angle,
                )
            )

    return crossings % 2 == 1
