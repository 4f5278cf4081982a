"""Geometry kernel for vepor.

This module contains the core algorithms for:

- Primitive math (distance, angle-in-arc membership)
- Pairwise intersection of lines and circular arcs
- Path geometry (starting point, midpoints, signed area, orientation)
- Point-in-shape testing by ray casting
- Boolean operations (union, subtract, xor) on resolved shapes
- Resolution of shape expression trees

All functions are:
- Stateless (safe to call from any thread)
- Pure (inputs are never modified; results are freshly built)
- Total on numeric input (degenerate cases return empty results)

Key functions:
- resolve_shape: Evaluate a shape expression into path segments
- find_shape_intersections: Intersection points of two resolved shapes
- point_inside_shape: Ray-casting containment test
- signed_area_of_path / area_of_path / is_counter_clockwise: Measurement
"""

from vepor.core.boolean_ops import (
    compute_area,
    compute_signed_area,
    compute_subtract,
    compute_union,
    compute_xor,
    find_shape_intersections,
    is_shape_counter_clockwise,
)
from vepor.core.containment import point_inside_shape
from vepor.core.geometry import (
    area_of_path,
    bounding_box,
    control_points,
    distance,
    get_segment_midpoint,
    get_starting_point,
    is_angle_in_arc,
    is_counter_clockwise,
    point_inside_circle,
    point_inside_rectangle,
    signed_area_of_path,
)
from vepor.core.intersection import (
    arc_arc_intersection,
    line_arc_intersection,
    line_line_intersection,
)
from vepor.core.resolver import resolve_shape

__all__ = [
    # Intersection engine
    "arc_arc_intersection",
    "line_arc_intersection",
    "line_line_intersection",
    # Path geometry
    "area_of_path",
    "bounding_box",
    "control_points",
    "distance",
    "get_segment_midpoint",
    "get_starting_point",
    "is_angle_in_arc",
    "is_counter_clockwise",
    "point_inside_circle",
    "point_inside_rectangle",
    "signed_area_of_path",
    # Containment
    "point_inside_shape",
    # Boolean operator
    "compute_area",
    "compute_signed_area",
    "compute_subtract",
    "compute_union",
    "compute_xor",
    "find_shape_intersections",
    "is_shape_counter_clockwise",
    # Resolver
    "resolve_shape",
]
