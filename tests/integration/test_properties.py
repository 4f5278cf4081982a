"""Integration tests for kernel-wide properties and end-to-end scenarios.

These tests resolve shape expressions through the public kernel API and
check properties that must hold across modules:
- Circle containment matches the radius test away from the boundary
- Squares have +-s^2 area depending on orientation
- Intersection points lie on both inputs and arc/arc search is symmetric
- Boolean results are well formed (single trailing ClosePath, markers)
"""

import math

import pytest

from vepor.core import (
    arc_arc_intersection,
    compute_area,
    compute_signed_area,
    distance,
    find_shape_intersections,
    is_shape_counter_clockwise,
    line_arc_intersection,
    point_inside_shape,
    resolve_shape,
    signed_area_of_path,
)
from vepor.domain import (
    Arc,
    Circle,
    ClosePath,
    ConnectedArc,
    Line,
    Point,
    Rectangle,
    Scale,
    Subtract,
    Union,
    Xor,
)

CIRCLE = Circle(Point(10.0, 10.0), 5.0)
RECTANGLE = Rectangle(Point(8.0, 8.0), Point(15.0, 12.0))


class TestScenarios:
    """End-to-end scenarios through resolve_shape."""

    def test_circle_rectangle_intersections(self):
        """A circle and an overlapping rectangle meet at three points."""
        points = find_shape_intersections(resolve_shape(CIRCLE), resolve_shape(RECTANGLE))
        assert len(points) == 3
        assert Point(15.0, 10.0) in points

    def test_two_overlapping_circles(self):
        """Two radius 5 circles six units apart meet at (3, +-4)."""
        points = find_shape_intersections(
            resolve_shape(Circle(Point(0.0, 0.0), 5.0)),
            resolve_shape(Circle(Point(6.0, 0.0), 5.0)),
        )
        assert len(points) == 2
        assert all(p.x == pytest.approx(3.0) for p in points)
        assert points[0].y + points[1].y == pytest.approx(0.0, abs=1e-10)

    def test_tangent_circles(self):
        """Externally tangent circles meet once at (3, 0)."""
        points = find_shape_intersections(
            resolve_shape(Circle(Point(0.0, 0.0), 3.0)),
            resolve_shape(Circle(Point(6.0, 0.0), 3.0)),
        )
        assert len(points) == 1
        assert points[0].to_tuple() == pytest.approx((3.0, 0.0), abs=1e-10)

    def test_disjoint_circles(self):
        """Circles far apart never meet."""
        points = find_shape_intersections(
            resolve_shape(Circle(Point(0.0, 0.0), 2.0)),
            resolve_shape(Circle(Point(10.0, 0.0), 2.0)),
        )
        assert points == []

    def test_containment_in_circle(self):
        """The center is inside and a distant point is outside."""
        resolved = resolve_shape(CIRCLE)
        assert point_inside_shape(Point(10.0, 10.0), resolved)
        assert not point_inside_shape(Point(20.0, 20.0), resolved)

    def test_rectangle_area_and_orientation(self):
        """The rectangle from (0, 0) to (10, 5) has area 50, counter-clockwise."""
        resolved = resolve_shape(Rectangle(Point(0.0, 0.0), Point(10.0, 5.0)))
        assert len(resolved) == 5
        assert compute_signed_area(resolved) == pytest.approx(50.0)
        assert compute_area(resolved) == pytest.approx(50.0)
        assert is_shape_counter_clockwise(resolved)

    def test_scaled_circle(self):
        """Doubling a circle about its starting point doubles the radius."""
        resolved = resolve_shape(Scale(CIRCLE, 2.0))
        assert len(resolved) == 1
        arc = resolved.segments[0]
        assert isinstance(arc, Arc)
        assert arc.radius == 10.0
        assert arc.center == Point(5.0, 10.0)
        assert compute_area(resolved) == pytest.approx(100.0 * math.pi, abs=1e-9)


class TestCircleProperties:
    """Containment and area properties of circles."""

    @pytest.mark.parametrize(
        "center,radius",
        [(Point(0.0, 0.0), 1.0), (Point(10.0, 10.0), 5.0), (Point(-3.0, 7.0), 12.5)],
    )
    def test_area_is_pi_r_squared(self, center, radius):
        """Full circles integrate to pi r^2 wherever they are."""
        resolved = resolve_shape(Circle(center, radius))
        assert compute_signed_area(resolved) == pytest.approx(
            math.pi * radius * radius, abs=1e-9
        )

    @pytest.mark.parametrize("fraction", [0.0, 0.1, 0.5, 0.9])
    @pytest.mark.parametrize("angle", [0.0, 45.0, 135.0, 200.0, 300.0])
    def test_points_within_radius_inside(self, fraction, angle):
        """Points strictly inside the radius are inside."""
        center, radius = Point(10.0, 10.0), 5.0
        rad = math.radians(angle)
        point = Point(
            center.x + fraction * radius * math.cos(rad),
            center.y + fraction * radius * math.sin(rad),
        )
        assert point_inside_shape(point, resolve_shape(Circle(center, radius)))

    @pytest.mark.parametrize("factor", [1.2, 2.0, 3.5])
    @pytest.mark.parametrize("angle", [0.0, 45.0, 135.0, 200.0, 300.0])
    def test_points_beyond_radius_outside(self, factor, angle):
        """Points clearly beyond the radius are outside."""
        center, radius = Point(10.0, 10.0), 5.0
        rad = math.radians(angle)
        point = Point(
            center.x + factor * radius * math.cos(rad),
            center.y + factor * radius * math.sin(rad),
        )
        assert not point_inside_shape(point, resolve_shape(Circle(center, radius)))


class TestSquareOrientation:
    """Signed area of squares by orientation."""

    @pytest.mark.parametrize("side", [1.0, 3.0, 10.0, 250.0])
    def test_counter_clockwise_square(self, side):
        """A counter-clockwise square has area s^2."""
        corners = [Point(0.0, 0.0), Point(side, 0.0), Point(side, side), Point(0.0, side)]
        path = [Line(corners[i], corners[(i + 1) % 4]) for i in range(4)]
        assert signed_area_of_path(path) == pytest.approx(side * side)

    @pytest.mark.parametrize("side", [1.0, 3.0, 10.0, 250.0])
    def test_clockwise_square(self, side):
        """A clockwise square has area -s^2."""
        corners = [Point(0.0, 0.0), Point(0.0, side), Point(side, side), Point(side, 0.0)]
        path = [Line(corners[i], corners[(i + 1) % 4]) for i in range(4)]
        assert signed_area_of_path(path) == pytest.approx(-side * side)


class TestIntersectionProperties:
    """Round-trip and symmetry properties of the intersection engine."""

    @pytest.mark.parametrize(
        "start,end",
        [
            (Point(-10.0, 1.0), Point(10.0, 2.0)),
            (Point(0.0, -10.0), Point(3.0, 10.0)),
            (Point(-7.0, -7.0), Point(7.0, 7.0)),
        ],
    )
    def test_line_arc_points_on_both(self, start, end):
        """Every line/arc point lies on the segment and on the circle."""
        center, radius = Point(0.0, 0.0), 5.0
        points = line_arc_intersection(start, end, center, radius, 0.0, 360.0)
        assert len(points) == 2
        length = distance(start, end)
        for p in points:
            assert distance(p, center) == pytest.approx(radius, abs=1e-9)
            assert distance(start, p) + distance(p, end) == pytest.approx(length, abs=1e-9)

    @pytest.mark.parametrize(
        "c2,r2,count",
        [
            (Point(6.0, 0.0), 5.0, 2),
            (Point(3.0, 4.0), 2.0, 2),
            (Point(-2.0, 1.0), 6.0, 2),
            (Point(10.0, 0.0), 5.0, 1),
            (Point(2.0, 0.0), 3.0, 1),
            (Point(0.0, -3.0), 2.0, 1),
            (Point(-4.0, 0.0), 9.0, 1),
        ],
    )
    def test_arc_arc_symmetric(self, c2, r2, count):
        """Swapping arc arguments yields the same points, tangencies included."""
        c1, r1 = Point(0.0, 0.0), 5.0
        forward = arc_arc_intersection(c1, r1, 0.0, 360.0, c2, r2, 0.0, 360.0)
        backward = arc_arc_intersection(c2, r2, 0.0, 360.0, c1, r1, 0.0, 360.0)
        assert len(forward) == len(backward) == count

        def key(p):
            return (round(p.x, 9), round(p.y, 9))

        for p, q in zip(sorted(forward, key=key), sorted(backward, key=key)):
            assert p.to_tuple() == pytest.approx(q.to_tuple(), abs=1e-9)
            assert distance(p, c1) == pytest.approx(r1, abs=1e-9)
            assert distance(p, c2) == pytest.approx(r2, abs=1e-9)


class TestPathAreas:
    """Areas of paths mixing arcs and lines."""

    def test_semicircle(self):
        """Upper semicircle closed by its diameter has half the disk area."""
        path = [
            Arc(Point(0.0, 0.0), 5.0, 0.0, 180.0),
            Line(Point(-5.0, 0.0), Point(5.0, 0.0)),
            ClosePath(),
        ]
        assert signed_area_of_path(path) == pytest.approx(12.5 * math.pi, abs=1e-9)

    def test_mixed_path(self):
        """A line, a semicircle and a degenerate closing line."""
        path = [
            Line(Point(0.0, 0.0), Point(10.0, 0.0)),
            Arc(Point(5.0, 0.0), 5.0, 0.0, 180.0),
            Line(Point(0.0, 0.0), Point(0.0, 0.0)),
            ClosePath(),
        ]
        assert signed_area_of_path(path) == pytest.approx(12.5 * math.pi, abs=1e-9)

    def test_unequal_arcs_form_circle(self):
        """A circle split into unequal consecutive arcs keeps its area."""
        cuts = [0.0, 70.0, 160.0, 200.0, 290.0, 360.0]
        path = [
            Arc(Point(0.0, 0.0), 5.0, cuts[i], cuts[i + 1]) for i in range(len(cuts) - 1)
        ]
        assert signed_area_of_path(path) == pytest.approx(25.0 * math.pi, abs=1e-9)


class TestBooleanStructure:
    """Structural properties of boolean results."""

    @pytest.mark.parametrize("operator", [Union, Subtract, Xor])
    def test_single_trailing_close_path(self, operator):
        """Non-empty boolean results end with exactly one ClosePath."""
        resolved = resolve_shape(operator(CIRCLE, RECTANGLE))
        assert isinstance(resolved.segments[-1], ClosePath)
        assert sum(isinstance(s, ClosePath) for s in resolved) == 1

    def test_union_markers_match_intersections(self):
        """Union appends one zero-radius marker per intersection point."""
        intersections = find_shape_intersections(resolve_shape(CIRCLE), resolve_shape(RECTANGLE))
        resolved = resolve_shape(Union(CIRCLE, RECTANGLE))
        markers = [s for s in resolved if isinstance(s, ConnectedArc)]
        assert [m.start_point for m in markers] == intersections
        assert all(m.radius == 0.0 and m.start_point == m.end_point for m in markers)

    def test_subtract_reverses_hole(self):
        """Subtracted segments appear reversed."""
        resolved = resolve_shape(Subtract(CIRCLE, RECTANGLE))
        lines = [s for s in resolved if isinstance(s, Line)]
        assert lines[0] == Line(Point(15.0, 8.0), Point(8.0, 8.0))
        assert len(lines) == 4

    def test_xor_has_no_markers(self):
        """Xor never emits intersection markers."""
        resolved = resolve_shape(Xor(CIRCLE, RECTANGLE))
        assert not any(isinstance(s, ConnectedArc) for s in resolved)

    def test_operands_unchanged(self):
        """Resolving a boolean leaves resolutions of its operands identical."""
        before = resolve_shape(CIRCLE)
        resolve_shape(Union(CIRCLE, RECTANGLE))
        assert resolve_shape(CIRCLE) == before
