"""Shape expression resolution.

Turns a shape expression tree into a flat ResolvedShape:
- Circle: one full-sweep arc
- Rectangle: four lines followed by ClosePath
- Scale: the inner resolution scaled about its own starting point
- Union/Subtract/Xor: both sides resolved, intersected, then combined

Resolution is purely recursive and keeps no state between calls.
"""

import logging
from collections.abc import Callable

from vepor.core.boolean_ops import (
    compute_subtract,
    compute_union,
    compute_xor,
    find_shape_intersections,
)
from vepor.core.geometry import get_starting_point
from vepor.domain import (
    Arc,
    BooleanShape,
    Circle,
    ClosePath,
    Line,
    Point,
    Rectangle,
    ResolvedShape,
    Scale,
    Shape,
    Subtract,
    Union,
    Xor,
)

logger = logging.getLogger(__name__)

BooleanOperator = Callable[[ResolvedShape, ResolvedShape, list[Point]], ResolvedShape]

_OPERATORS: dict[type, BooleanOperator] = {
    Union: compute_union,
    Subtract: compute_subtract,
    Xor: compute_xor,
}


def resolve_circle(circle: Circle) -> ResolvedShape:
    """Resolve a circle into a single 0 to 360 degree arc."""
    return ResolvedShape([Arc(circle.center, circle.radius, 0.0, 360.0)])


def resolve_rectangle(rectangle: Rectangle) -> ResolvedShape:
    """Resolve a rectangle into its four edges and a ClosePath.

    Edges run top-left -> top-right -> bottom-right -> bottom-left -> top-left.
    """
    top_left = rectangle.top_left
    top_right = rectangle.top_right
    bottom_right = rectangle.bottom_right
    bottom_left = rectangle.bottom_left
    return ResolvedShape(
        [
            Line(top_left, top_right),
            Line(top_right, bottom_right),
            Line(bottom_right, bottom_left),
            Line(bottom_left, top_left),
            ClosePath(),
        ]
    )


def resolve_scale(scale: Scale) -> ResolvedShape:
    """Resolve a scaled shape.

    The scale center is the starting point of the inner resolution, not its
    centroid. For a circle that is the point at angle 0 on its boundary.

    Args:
        scale: Scale expression

    Returns:
        Scaled resolution. When the inner resolution has no starting point
        there is nothing to scale and it is returned unchanged.
    """
    inner = resolve_shape(scale.shape)
    center = get_starting_point(inner.segments)
    if center is None:
        logger.debug("Scale: inner shape has no starting point, left unscaled")
        return inner

    return ResolvedShape([segment.scaled(center, scale.factor) for segment in inner.segments])


def resolve_boolean(shape: BooleanShape) -> ResolvedShape:
    """Resolve both operands and combine them with the matching operator."""
    left = resolve_shape(shape.left)
    right = resolve_shape(shape.right)
    intersections = find_shape_intersections(left, right)

    logger.debug(
        "%s: %d + %d segments, %d intersections",
        type(shape).__name__,
        len(left),
        len(right),
        len(intersections),
    )
    return _OPERATORS[type(shape)](left, right, intersections)


def resolve_shape(shape: Shape) -> ResolvedShape:
    """Evaluate a shape expression into a flat resolved shape.

    Args:
        shape: Shape expression tree

    Returns:
        Freshly built resolved shape

    Raises:
        TypeError: If shape is not a shape expression node

    Examples:
        >>> resolved = resolve_shape(Rectangle(Point(0, 0), Point(10, 5)))
        >>> len(resolved)
        5
    """
    if isinstance(shape, Circle):
        return resolve_circle(shape)
    if isinstance(shape, Rectangle):
        return resolve_rectangle(shape)
    if isinstance(shape, Scale):
        return resolve_scale(shape)
    if isinstance(shape, (Union, Subtract, Xor)):
        return resolve_boolean(shape)
    raise TypeError(f"Expected a shape expression, got {type(shape).__name__}")
