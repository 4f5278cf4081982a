"""Unit tests for boolean operations on resolved shapes.

Tests cover:
- Segment pair dispatch and shape-wide intersection search
- Union, subtract and xor retention rules
- Union intersection markers and trailing ClosePath
- Operand immutability
- Area and orientation wrappers
"""

import math

import pytest

from vepor.core.boolean_ops import (
    compute_area,
    compute_signed_area,
    compute_subtract,
    compute_union,
    compute_xor,
    find_shape_intersections,
    intersection_marker,
    is_shape_counter_clockwise,
    segment_intersections,
)
from vepor.domain import (
    ORIGIN,
    Arc,
    ClosePath,
    ConnectedArc,
    DrawPoint,
    Line,
    Point,
    ResolvedShape,
)


def circle(center: Point, radius: float) -> ResolvedShape:
    return ResolvedShape([Arc(center, radius, 0.0, 360.0)])


def rectangle(top_left: Point, bottom_right: Point) -> ResolvedShape:
    top_right = Point(bottom_right.x, top_left.y)
    bottom_left = Point(top_left.x, bottom_right.y)
    return ResolvedShape(
        [
            Line(top_left, top_right),
            Line(top_right, bottom_right),
            Line(bottom_right, bottom_left),
            Line(bottom_left, top_left),
            ClosePath(),
        ]
    )


@pytest.fixture
def circle_shape():
    """Circle at (10, 10) with radius 5."""
    return circle(Point(10.0, 10.0), 5.0)


@pytest.fixture
def rect_shape():
    """Rectangle overlapping the right side of circle_shape."""
    return rectangle(Point(8.0, 8.0), Point(15.0, 12.0))


class TestSegmentIntersections:
    """Tests for pairwise segment dispatch."""

    def test_line_line(self):
        """Two crossing lines."""
        a = Line(Point(0.0, 0.0), Point(10.0, 10.0))
        b = Line(Point(0.0, 10.0), Point(10.0, 0.0))
        assert segment_intersections(a, b) == [Point(5.0, 5.0)]

    def test_line_arc_either_order(self):
        """Line/arc pairs are handled in both argument orders."""
        line = Line(Point(-10.0, 0.0), Point(10.0, 0.0))
        arc = Arc(Point(0.0, 0.0), 5.0, -90.0, 90.0)
        assert segment_intersections(line, arc) == [Point(5.0, 0.0)]
        assert segment_intersections(arc, line) == [Point(5.0, 0.0)]

    def test_connected_arc_treated_as_arc(self):
        """Connected arcs intersect like arcs."""
        connected = ConnectedArc(
            Point(6.0, 0.0), 5.0, 0.0, 360.0, Point(11.0, 0.0), Point(11.0, 0.0)
        )
        arc = Arc(Point(0.0, 0.0), 5.0, 0.0, 360.0)
        assert len(segment_intersections(arc, connected)) == 2

    def test_markers_never_intersect(self):
        """ClosePath and point markers yield nothing."""
        line = Line(Point(-10.0, 0.0), Point(10.0, 0.0))
        assert segment_intersections(ClosePath(), line) == []
        assert segment_intersections(line, DrawPoint(Point(0.0, 0.0))) == []


class TestFindShapeIntersections:
    """Tests for shape-wide intersection search."""

    def test_circle_rectangle(self, circle_shape, rect_shape):
        """Top and bottom edges cross, the right edge is tangent."""
        points = find_shape_intersections(circle_shape, rect_shape)
        assert len(points) == 3
        assert points[1] == Point(15.0, 10.0)
        assert points[0].y == pytest.approx(8.0)
        assert points[2].y == pytest.approx(12.0)

    def test_overlapping_circles(self):
        """Two overlapping circles cross twice."""
        points = find_shape_intersections(
            circle(Point(0.0, 0.0), 5.0), circle(Point(6.0, 0.0), 5.0)
        )
        assert sorted(p.to_tuple() for p in points) == [(3.0, -4.0), (3.0, 4.0)]

    def test_empty_operand(self, circle_shape):
        """An empty shape has no intersections."""
        assert find_shape_intersections(circle_shape, ResolvedShape()) == []


class TestUnion:
    """Tests for compute_union."""

    def test_circle_rectangle(self, circle_shape, rect_shape):
        """Keeps the circle, drops covered edges, adds one marker per point."""
        intersections = find_shape_intersections(circle_shape, rect_shape)
        result = compute_union(circle_shape, rect_shape, intersections)

        assert len(result) == 5
        assert result.segments[0] == circle_shape.segments[0]
        markers = result.segments[1:4]
        assert markers == [intersection_marker(p) for p in intersections]
        assert isinstance(result.segments[-1], ClosePath)

    def test_marker_shape(self):
        """Markers are zero-radius connected arcs at the origin."""
        marker = intersection_marker(Point(3.0, 4.0))
        assert marker == ConnectedArc(ORIGIN, 0.0, 0.0, 0.0, Point(3.0, 4.0), Point(3.0, 4.0))

    def test_disjoint_circles(self):
        """Disjoint operands keep all their segments."""
        a = circle(Point(0.0, 0.0), 2.0)
        b = circle(Point(10.0, 0.0), 2.0)
        result = compute_union(a, b, find_shape_intersections(a, b))
        assert result.segments == [a.segments[0], b.segments[0], ClosePath()]

    def test_exactly_one_trailing_close_path(self, rect_shape):
        """Operand ClosePath entries are never copied."""
        far = rectangle(Point(100.0, 100.0), Point(110.0, 110.0))
        result = compute_union(rect_shape, far, [])
        closes = [s for s in result if isinstance(s, ClosePath)]
        assert len(closes) == 1
        assert isinstance(result.segments[-1], ClosePath)
        assert len(result) == 9

    def test_empty_operands(self):
        """Two empty shapes give an empty result without ClosePath."""
        assert compute_union(ResolvedShape(), ResolvedShape(), []).is_empty()

    def test_operands_not_modified(self, circle_shape, rect_shape):
        """Inputs are left unchanged and the result is a new object."""
        before_circle = list(circle_shape.segments)
        before_rect = list(rect_shape.segments)
        intersections = find_shape_intersections(circle_shape, rect_shape)
        result = compute_union(circle_shape, rect_shape, intersections)

        assert circle_shape.segments == before_circle
        assert rect_shape.segments == before_rect
        assert result is not circle_shape
        assert result.segments is not circle_shape.segments


class TestSubtract:
    """Tests for compute_subtract."""

    def test_circle_minus_rectangle(self, circle_shape, rect_shape):
        """Rectangle edges inside the circle are reversed into the result."""
        result = compute_subtract(circle_shape, rect_shape, [])

        assert len(result) == 6
        assert result.segments[0] == circle_shape.segments[0]
        reversed_edges = [s.reversed() for s in rect_shape.segments[:4]]
        assert result.segments[1:5] == reversed_edges
        assert isinstance(result.segments[-1], ClosePath)

    def test_hole_is_reversed_arc(self):
        """A circle inside a square becomes a reversed arc hole."""
        outer = rectangle(Point(0.0, 0.0), Point(10.0, 10.0))
        hole = circle(Point(5.0, 5.0), 2.0)
        result = compute_subtract(outer, hole, find_shape_intersections(outer, hole))

        assert result.segments[:4] == outer.segments[:4]
        assert result.segments[4] == Arc(Point(5.0, 5.0), 2.0, 360.0, 0.0)
        assert compute_signed_area(result) == pytest.approx(100.0 - 4.0 * math.pi, abs=1e-9)

    def test_connected_arc_not_reversed(self):
        """Only lines and arcs are reversed."""
        outer = rectangle(Point(0.0, 0.0), Point(10.0, 10.0))
        connected = ConnectedArc(
            Point(5.0, 5.0), 1.0, 0.0, 360.0, Point(6.0, 5.0), Point(6.0, 5.0)
        )
        result = compute_subtract(outer, ResolvedShape([connected]), [])
        assert connected in result.segments

    def test_inner_minus_enclosing_is_empty(self):
        """Subtracting an enclosing shape leaves nothing."""
        inner = rectangle(Point(2.0, 2.0), Point(4.0, 4.0))
        outer = rectangle(Point(0.0, 0.0), Point(10.0, 10.0))
        assert compute_subtract(inner, outer, []).is_empty()


class TestXor:
    """Tests for compute_xor."""

    def test_circle_rectangle(self, circle_shape, rect_shape):
        """Every rectangle edge lies in the circle, so only the arc remains."""
        result = compute_xor(circle_shape, rect_shape, [])
        assert result.segments == [circle_shape.segments[0], ClosePath()]

    def test_disjoint_circles(self):
        """Disjoint operands keep all their segments and no markers."""
        a = circle(Point(0.0, 0.0), 2.0)
        b = circle(Point(10.0, 0.0), 2.0)
        result = compute_xor(a, b, [])
        assert result.segments == [a.segments[0], b.segments[0], ClosePath()]
        assert not any(isinstance(s, ConnectedArc) for s in result)


class TestAreaWrappers:
    """Tests for area and orientation of resolved shapes."""

    def test_circle_area(self):
        """Circle area is pi r^2."""
        assert compute_area(circle(Point(10.0, 10.0), 5.0)) == pytest.approx(
            25.0 * math.pi, abs=1e-9
        )

    def test_rectangle_area_and_orientation(self):
        """A rectangle traversed from its min corner is counter-clockwise."""
        shape = rectangle(Point(0.0, 0.0), Point(10.0, 5.0))
        assert compute_signed_area(shape) == pytest.approx(50.0)
        assert compute_area(shape) == pytest.approx(50.0)
        assert is_shape_counter_clockwise(shape)

    def test_empty_shape(self):
        """An empty shape has zero area and is not counter-clockwise."""
        assert compute_area(ResolvedShape()) == 0.0
        assert not is_shape_counter_clockwise(ResolvedShape())
