"""Shape expression tree.

A shape expression describes how a figure is built from primitives
(circles, rectangles) combined by scaling and boolean operations. The tree
is immutable and owned by the caller; the resolver only reads it.
"""

from dataclasses import dataclass

from vepor.domain.path import Point
from vepor.exceptions import InvalidShapeError


@dataclass(frozen=True, slots=True)
class Circle:
    """A full circle.

    Attributes:
        center: Circle center
        radius: Circle radius (must not be negative)
    """

    center: Point
    radius: float

    def __post_init__(self) -> None:
        if self.radius < 0:
            raise InvalidShapeError("circle", f"radius must be >= 0, got {self.radius}")

    @classmethod
    def through(cls, center: Point, rim: Point) -> "Circle":
        """Circle centered at center whose boundary passes through rim.

        Args:
            center: Circle center
            rim: Any point on the circle

        Returns:
            Circle instance
        """
        return cls(center, center.distance_to(rim))


@dataclass(frozen=True, slots=True)
class Rectangle:
    """An axis-aligned rectangle given by two opposite corners.

    Attributes:
        top_left: First corner, start of the boundary traversal
        bottom_right: Opposite corner
    """

    top_left: Point
    bottom_right: Point

    @property
    def top_right(self) -> Point:
        return Point(self.bottom_right.x, self.top_left.y)

    @property
    def bottom_left(self) -> Point:
        return Point(self.top_left.x, self.bottom_right.y)

    @classmethod
    def from_corners(cls, p1: Point, p2: Point) -> "Rectangle":
        """Normalize two arbitrary corners into a rectangle.

        With y pointing up, the top-left corner has the smallest x and the
        largest y.

        Args:
            p1: One corner
            p2: The opposite corner

        Returns:
            Rectangle instance
        """
        return cls(
            Point(min(p1.x, p2.x), max(p1.y, p2.y)),
            Point(max(p1.x, p2.x), min(p1.y, p2.y)),
        )


@dataclass(frozen=True, slots=True)
class Union:
    """Union of two shapes."""

    left: "Shape"
    right: "Shape"


@dataclass(frozen=True, slots=True)
class Subtract:
    """The left shape with the right shape removed."""

    left: "Shape"
    right: "Shape"


@dataclass(frozen=True, slots=True)
class Xor:
    """Symmetric difference of two shapes."""

    left: "Shape"
    right: "Shape"


@dataclass(frozen=True, slots=True)
class Scale:
    """A shape scaled about its own starting point.

    Attributes:
        shape: Shape to scale
        factor: Linear scale factor (must not be negative)
    """

    shape: "Shape"
    factor: float

    def __post_init__(self) -> None:
        if self.factor < 0:
            raise InvalidShapeError("scale", f"factor must be >= 0, got {self.factor}")


Shape = Circle | Rectangle | Union | Subtract | Xor | Scale

BooleanShape = Union | Subtract | Xor
