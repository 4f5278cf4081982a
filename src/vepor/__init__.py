"""Vepor - Boolean operations and measurement for 2D arc and line shapes.

Vepor resolves shape expressions (circles, rectangles, scaling, union,
subtraction and XOR) into path segments made of straight lines and circular
arcs, then answers geometric queries on them: intersection points,
point-in-shape containment, exact signed area and orientation.

Example:
    >>> from vepor.core import resolve_shape, compute_area
    >>> from vepor.domain import Circle, Point
    >>> round(compute_area(resolve_shape(Circle(Point(0, 0), 1.0))), 6)
    3.141593
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
