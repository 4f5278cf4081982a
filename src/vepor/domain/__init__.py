"""Domain models for vepor.

This module contains the value types the geometry kernel works with:

- Immutable shape expressions (frozen dataclasses) built by the caller
- Immutable path segments produced by resolution
- ResolvedShape, the ordered segment list returned by every kernel call

Key classes:
- Point: A 2D point
- Line, Arc, ConnectedArc, ClosePath, DrawPoint: Path segment variants
- ResolvedShape: Flattened boundary of a shape
- BoundingBox: Axis-aligned bounds
- Circle, Rectangle, Union, Subtract, Xor, Scale: Shape expression nodes
"""

from vepor.domain.path import (
    ORIGIN,
    Arc,
    BoundingBox,
    ClosePath,
    ConnectedArc,
    DrawPoint,
    Line,
    PathSegment,
    Point,
    ResolvedShape,
    point_on_circle,
)
from vepor.domain.shape import (
    BooleanShape,
    Circle,
    Rectangle,
    Scale,
    Shape,
    Subtract,
    Union,
    Xor,
)

__all__: list[str] = [
    "ORIGIN",
    # Path types
    "Arc",
    "BoundingBox",
    "ClosePath",
    "ConnectedArc",
    "DrawPoint",
    "Line",
    "PathSegment",
    "Point",
    "ResolvedShape",
    "point_on_circle",
    # Shape expressions
    "BooleanShape",
    "Circle",
    "Rectangle",
    "Scale",
    "Shape",
    "Subtract",
    "Union",
    "Xor",
]
