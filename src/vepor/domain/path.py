"""Path segment types for resolved shape boundaries.

This module defines the concrete geometry produced by shape resolution:
- Point: An immutable 2D point
- Line, Arc, ConnectedArc, ClosePath, DrawPoint: The path segment variants
- ResolvedShape: An ordered list of path segments
- BoundingBox: Axis-aligned bounds of a set of points

Arc angles are always stored in degrees. Conversion to radians happens at the
point of use and is never stored.
"""

import math
from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        dx = other.x - self.x
        dy = other.y - self.y
        return math.sqrt(dx * dx + dy * dy)

    def scaled(self, center: "Point", factor: float) -> "Point":
        """Scale this point about a center by the given factor.

        Args:
            center: Fixed point of the scaling
            factor: Linear scale factor

        Returns:
            New scaled point
        """
        return Point(
            center.x + factor * (self.x - center.x),
            center.y + factor * (self.y - center.y),
        )


ORIGIN = Point(0.0, 0.0)


def point_on_circle(center: Point, radius: float, angle: float) -> Point:
    """Point on a circle at the given angle in degrees."""
    rad = math.radians(angle)
    return Point(center.x + radius * math.cos(rad), center.y + radius * math.sin(rad))


def sweep_extremes(
    center: Point, radius: float, start_angle: float, end_angle: float
) -> list[Point]:
    """Axis-aligned extreme points of a circle that fall inside an arc's sweep.

    The sweep runs from start_angle towards increasing angles. A sweep whose
    span is zero or at least a whole turn covers the full circle.

    Args:
        center: Circle center
        radius: Circle radius
        start_angle: Sweep start in degrees
        end_angle: Sweep end in degrees

    Returns:
        Points at 0, 90, 180 and 270 degrees that lie within the sweep
    """
    span = end_angle - start_angle
    if abs(span) < 360.0 and span % 360.0 != 0.0:
        span %= 360.0
    else:
        span = 360.0

    return [
        point_on_circle(center, radius, axis)
        for axis in (0.0, 90.0, 180.0, 270.0)
        if (axis - start_angle) % 360.0 <= span
    ]


@dataclass(frozen=True, slots=True)
class Line:
    """A directed straight edge from start to end."""

    start: Point
    end: Point

    def reversed(self) -> "Line":
        """Same edge traversed from end to start."""
        return Line(self.end, self.start)

    def scaled(self, center: Point, factor: float) -> "Line":
        return Line(self.start.scaled(center, factor), self.end.scaled(center, factor))

    def control_points(self) -> list[Point]:
        return [self.start, self.end]

    def extent_points(self) -> list[Point]:
        return [self.start, self.end]


@dataclass(frozen=True, slots=True)
class Arc:
    """A directed circular arc.

    The sweep runs from start_angle to end_angle in increasing-angle
    direction. A full circle is stored as a literal 0 to 360 sweep.

    Attributes:
        center: Circle center
        radius: Circle radius (>= 0)
        start_angle: Start angle in degrees
        end_angle: End angle in degrees
    """

    center: Point
    radius: float
    start_angle: float
    end_angle: float

    @property
    def start_point(self) -> Point:
        """Point at the start angle."""
        return point_on_circle(self.center, self.radius, self.start_angle)

    @property
    def end_point(self) -> Point:
        """Point at the end angle."""
        return point_on_circle(self.center, self.radius, self.end_angle)

    def is_full_circle(self, tolerance: float = 1e-6) -> bool:
        """Check whether the sweep covers at least a whole turn."""
        return abs(self.end_angle - self.start_angle) >= 360.0 - tolerance

    def reversed(self) -> "Arc":
        """Same arc with start and end angles swapped."""
        return Arc(self.center, self.radius, self.end_angle, self.start_angle)

    def scaled(self, center: Point, factor: float) -> "Arc":
        return Arc(
            self.center.scaled(center, factor),
            self.radius * factor,
            self.start_angle,
            self.end_angle,
        )

    def control_points(self) -> list[Point]:
        return [self.center]

    def extent_points(self) -> list[Point]:
        """Endpoints plus the axis extremes inside the sweep."""
        return [
            self.start_point,
            self.end_point,
            *sweep_extremes(self.center, self.radius, self.start_angle, self.end_angle),
        ]


@dataclass(frozen=True, slots=True)
class ConnectedArc:
    """An arc carrying explicit endpoint coordinates.

    Used for synthetic connectors, where center and radius may be
    degenerate (a zero-radius marker standing in for an intersection point).
    """

    center: Point
    radius: float
    start_angle: float
    end_angle: float
    start_point: Point
    end_point: Point

    def scaled(self, center: Point, factor: float) -> "ConnectedArc":
        return ConnectedArc(
            self.center.scaled(center, factor),
            self.radius * factor,
            self.start_angle,
            self.end_angle,
            self.start_point.scaled(center, factor),
            self.end_point.scaled(center, factor),
        )

    def control_points(self) -> list[Point]:
        return [self.center, self.start_point, self.end_point]

    def extent_points(self) -> list[Point]:
        """Explicit endpoints, plus the sweep extremes of a non-degenerate arc.

        Zero-radius markers carry a placeholder center, so only their
        endpoints count.
        """
        points = [self.start_point, self.end_point]
        if self.radius > 0.0:
            points.extend(
                sweep_extremes(self.center, self.radius, self.start_angle, self.end_angle)
            )
        return points


@dataclass(frozen=True, slots=True)
class ClosePath:
    """Implicit straight edge from the current point back to the path's first point."""

    def scaled(self, center: Point, factor: float) -> "ClosePath":
        return self

    def control_points(self) -> list[Point]:
        return []

    def extent_points(self) -> list[Point]:
        return []


@dataclass(frozen=True, slots=True)
class DrawPoint:
    """A point marker with no geometric extent."""

    point: Point

    def scaled(self, center: Point, factor: float) -> "DrawPoint":
        return DrawPoint(self.point.scaled(center, factor))

    def control_points(self) -> list[Point]:
        return []

    def extent_points(self) -> list[Point]:
        return [self.point]


PathSegment = Line | Arc | ConnectedArc | ClosePath | DrawPoint


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned bounding box.

    Attributes:
        min: Corner with the smallest coordinates
        max: Corner with the largest coordinates
    """

    min: Point
    max: Point

    @classmethod
    def from_points(cls, points: list[Point]) -> "BoundingBox":
        """Build the tightest box around the points.

        An empty list yields a zero-size box at the origin.
        """
        if not points:
            return cls(ORIGIN, ORIGIN)

        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(Point(min(xs), min(ys)), Point(max(xs), max(ys)))

    def contains(self, point: Point) -> bool:
        """Inclusive containment test."""
        return (
            self.min.x <= point.x <= self.max.x
            and self.min.y <= point.y <= self.max.y
        )

    @property
    def width(self) -> float:
        return self.max.x - self.min.x

    @property
    def height(self) -> float:
        return self.max.y - self.min.y


@dataclass
class ResolvedShape:
    """A flattened boundary made of path segments.

    Segment order defines traversal order for area integration and for the
    implicit closing edge. Each resolution or boolean call produces a fresh
    instance; inputs are never mutated.

    Attributes:
        segments: Ordered path segments
    """

    segments: list[PathSegment] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[PathSegment]:
        return iter(self.segments)

    def is_empty(self) -> bool:
        return not self.segments

    def control_points(self) -> list[Point]:
        """Collect snapping targets of every segment.

        Lines contribute both endpoints, arcs their center, connected arcs
        their center and both endpoints. Close and point markers contribute
        nothing.

        Returns:
            Control points in segment order
        """
        points: list[Point] = []
        for segment in self.segments:
            points.extend(segment.control_points())
        return points

    def bounding_box(self) -> BoundingBox:
        """Bounding box of the drawn geometry.

        Arcs contribute their endpoints and every axis extreme inside their
        sweep, so a full circle spans center +- radius on both axes.
        """
        points: list[Point] = []
        for segment in self.segments:
            points.extend(segment.extent_points())
        return BoundingBox.from_points(points)
