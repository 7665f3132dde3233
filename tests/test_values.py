import math

import numpy as np
import pytest

from geolisp.errors import GeometryError
from geolisp.geometry import RandomSource, distance
from geolisp.values import (
    INDETERMINATE,
    UNDEFINED,
    Angle,
    Circle,
    Label,
    Lineseg,
    Point,
    Triangle,
    is_number,
    kind_name,
)


def _random_triangles(count, seed=2024):
    rng = np.random.default_rng(seed)
    triangles = []
    while len(triangles) < count:
        (ax, ay), (bx, by), (cx, cy) = rng.uniform(-10.0, 10.0, size=(3, 2))
        cross = (bx - ax) * (cy - ay) - (by - ay) * (cx - ax)
        if abs(cross) < 1.0:
            continue
        triangles.append(Triangle(Point(ax, ay), Point(bx, by), Point(cx, cy)))
    return triangles


def _distance_to_line(point, a, b):
    return abs((b.x - a.x) * (a.y - point.y) - (a.x - point.x) * (b.y - a.y)) / distance(a, b)


def test_point_coordinates_are_floats():
    point = Point(1, 2)

    assert type(point.x) is float
    assert point.coords == (1.0, 2.0)
    assert point.midpoint(Point(3, 4)) == Point(2, 3)


def test_collinear_points_do_not_make_a_triangle():
    with pytest.raises(GeometryError) as exc:
        Triangle(Point(0, 0), Point(1, 1), Point(2, 2))

    assert 'collinear' in str(exc.value)


def test_repeated_vertex_is_collinear():
    with pytest.raises(GeometryError):
        Triangle(Point(0, 0), Point(0, 0), Point(1, 2))


@pytest.mark.parametrize('triangle', _random_triangles(25))
def test_triangle_centers_satisfy_their_definitions(triangle):
    a, b, c = triangle.vertices

    o = triangle.circumcenter()
    assert distance(o, a) == pytest.approx(distance(o, b), rel=1e-9)
    assert distance(o, a) == pytest.approx(distance(o, c), rel=1e-9)

    g = triangle.centroid()
    assert g.x == pytest.approx((a.x + b.x + c.x) / 3)
    assert g.y == pytest.approx((a.y + b.y + c.y) / 3)

    h = triangle.orthocenter()
    assert (h.x - a.x) * (c.x - b.x) + (h.y - a.y) * (c.y - b.y) == pytest.approx(0.0, abs=1e-6)
    assert (h.x - b.x) * (c.x - a.x) + (h.y - b.y) * (c.y - a.y) == pytest.approx(0.0, abs=1e-6)
    assert (h.x - c.x) * (b.x - a.x) + (h.y - c.y) * (b.y - a.y) == pytest.approx(0.0, abs=1e-6)

    i = triangle.incenter()
    r = triangle.inradius()
    for p, q in ((a, b), (b, c), (c, a)):
        assert _distance_to_line(i, p, q) == pytest.approx(r, rel=1e-9)


def test_triangle_area_and_sides():
    triangle = Triangle(Point(0, 0), Point(4, 0), Point(0, 3))

    assert triangle.side_lengths() == (5.0, 3.0, 4.0)
    assert triangle.area() == pytest.approx(6.0)
    assert [side.length for side in triangle.sides()] == [4.0, 5.0, 3.0]


def test_circle_rejects_negative_radius():
    with pytest.raises(GeometryError):
        Circle(Point(0, 0), -0.5)

    assert Circle(Point(0, 0), 0).radius == 0.0


def test_random_points_lie_on_the_circle():
    circle = Circle(Point(0, 0), 5)
    source = RandomSource.from_seed(99)

    for _ in range(1000):
        point = circle.get_point(source)
        assert distance(circle.center, point) == pytest.approx(5.0)
        assert circle.is_point_on_circle(point)


def test_is_point_on_circle_tolerance():
    circle = Circle(Point(1, 1), 2)

    assert circle.is_point_on_circle(Point(3, 1))
    assert circle.is_point_on_circle(Point(3 + 1e-8, 1))
    assert not circle.is_point_on_circle(Point(3.01, 1))


def test_on_circle_tolerance_scales_with_radius():
    circle = Circle(Point(0, 0), 1e12)
    source = RandomSource.from_seed(4)

    for _ in range(100):
        assert circle.is_point_on_circle(circle.get_point(source))
    assert circle.is_point_on_circle(Point(1e12 + 1e5, 0))
    assert not circle.is_point_on_circle(Point(1e12 + 1e7, 0))


def test_point_on_arc_sweeps_away_from_vertex():
    circle = Circle(Point(0, 0), 1)
    start = Point(1, 0)

    end = circle.get_point_on_arc(start, Point(0, 1), 45)
    assert end.coords == pytest.approx((0.0, -1.0), abs=1e-12)
    assert Angle(start, Point(0, 1), end).degrees == pytest.approx(45.0)

    end = circle.get_point_on_arc(start, Point(0, -1), 45)
    assert end.coords == pytest.approx((0.0, 1.0), abs=1e-12)
    assert Angle(start, Point(0, -1), end).degrees == pytest.approx(45.0)


def test_point_on_arc_validates_inputs():
    circle = Circle(Point(0, 0), 1)

    with pytest.raises(GeometryError) as exc:
        circle.get_point_on_arc(Point(2, 0), Point(0, 1), 30)
    assert 'not on the circle' in str(exc.value)

    with pytest.raises(GeometryError) as exc:
        circle.get_point_on_arc(Point(1, 0), Point(0, 1), 190)
    assert 'exceeds 180' in str(exc.value)


def test_lineseg_slope_and_intercept():
    seg = Lineseg(Point(1, 1), Point(3, 5))

    assert seg.slope() == 2.0
    assert seg.y_intercept() == -1.0
    assert seg.midpoint == Point(2, 3)
    assert Lineseg(Point(2, 0), Point(2, 7)).slope() == math.inf


def test_degenerate_segment_cannot_intersect():
    with pytest.raises(GeometryError):
        Lineseg(Point(1, 1), Point(1, 1)).intersect(Lineseg(Point(0, 0), Point(1, 0)))


def test_angle_degrees():
    assert Angle(Point(1, 0), Point(0, 0), Point(0, 1)).degrees == pytest.approx(90.0)
    assert Angle(Point(1, 0), Point(0, 0), Point(-1, 0)).degrees == pytest.approx(180.0)
    assert Angle(Point(0, 1), Point(0, 0), Point(1, 0)).degrees == pytest.approx(90.0)


def test_label_text():
    label = Label('p', Point(1.5, -2))

    assert label.text == 'p 1.5 -2'
    assert label.anchor == Point(1.5, -2)


@pytest.mark.parametrize(
    'value, expected',
    [
        (True, 'bool'),
        (1, 'int'),
        (1.0, 'float'),
        ('x', 'string'),
        (INDETERMINATE, 'indeterminate'),
        (UNDEFINED, 'undefined'),
        (Point(0, 0), 'point'),
        (Lineseg(Point(0, 0), Point(1, 1)), 'line segment'),
        (Circle(Point(0, 0), 1), 'circle'),
    ],
)
def test_kind_name(value, expected):
    assert kind_name(value) == expected


def test_is_number_excludes_bools():
    assert is_number(3)
    assert is_number(2.5)
    assert not is_number(False)
    assert not is_number('3')
