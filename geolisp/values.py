"""Value model: native scalars, two markers and the geometric kinds."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple, Union

import numpy as np

from .errors import GeometryError
from .geometry import ON_CIRCLE_TOLERANCE, distance, midpoint_coords, normalize_angle, polar_angle

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .geometry import RandomSource


class _Marker:
    """Singleton placeholder value."""

    __slots__ = ('_name',)

    def __init__(self, name: str):
        self._name = name

    def __repr__(self) -> str:
        return self._name


# unbound variable reference seen before substitution
INDETERMINATE = _Marker('INDETERMINATE')
# result of an assignment, nothing to display
UNDEFINED = _Marker('UNDEFINED')

# Int values are signed 64-bit
INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))

    @property
    def coords(self) -> Tuple[float, float]:
        return self.x, self.y

    def midpoint(self, other: 'Point') -> 'Point':
        return Point(*midpoint_coords(self, other))

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)


@dataclass(frozen=True)
class Lineseg:
    start: Point
    end: Point

    @property
    def length(self) -> float:
        return distance(self.start, self.end)

    @property
    def is_degenerate(self) -> bool:
        return self.start == self.end

    @property
    def midpoint(self) -> Point:
        return self.start.midpoint(self.end)

    def slope(self) -> float:
        """Slope of the carrier line; ``inf`` for vertical segments."""

        dx = self.end.x - self.start.x
        if dx == 0.0:
            return math.inf
        return (self.end.y - self.start.y) / dx

    def y_intercept(self) -> float:
        return self.start.y - self.slope() * self.start.x

    def _require_proper(self) -> None:
        if self.is_degenerate:
            raise GeometryError('Line segment has zero length')

    def intersect(self, other: 'Lineseg') -> Point:
        """Intersection of the carrier lines of two segments."""

        self._require_proper()
        other._require_proper()
        m1 = self.slope()
        m2 = other.slope()
        if m1 == m2:
            raise GeometryError('Line segments are parallel')

        if math.isinf(m1):
            x = self.start.x
            return Point(x, m2 * x + other.y_intercept())
        if math.isinf(m2):
            x = other.start.x
            return Point(x, m1 * x + self.y_intercept())

        b1 = self.y_intercept()
        x = (other.y_intercept() - b1) / (m1 - m2)
        return Point(x, m1 * x + b1)

    def intersect_circle(self, circle: 'Circle', index: int) -> Point:
        """One of the (up to two) points where the carrier line meets ``circle``.

        ``index`` 0 picks the root with the larger x (larger y for vertical
        lines); 1 picks the other. Under tangency both indices give the same
        point.
        """

        if index not in (0, 1):
            raise GeometryError('Index must be either 0 or 1')
        self._require_proper()

        c, d = circle.center.x, circle.center.y
        r = circle.radius
        m = self.slope()

        if math.isinf(m):
            x = self.start.x
            disc = r * r - (x - c) ** 2
            if disc < 0.0:
                raise GeometryError('No intersection points')
            root = math.sqrt(disc)
            return Point(x, d + root if index == 0 else d - root)

        n = self.y_intercept()
        qa = 1.0 + m * m
        qb = 2.0 * (m * n - m * d - c)
        qc = c * c + d * d + n * n - 2.0 * n * d - r * r
        disc = qb * qb - 4.0 * qa * qc
        if disc < 0.0:
            raise GeometryError('No intersection points')
        root = math.sqrt(disc)
        x = (-qb + root) / (2.0 * qa) if index == 0 else (-qb - root) / (2.0 * qa)
        return Point(x, m * x + n)


@dataclass(frozen=True)
class Circle:
    center: Point
    radius: float

    def __post_init__(self) -> None:
        object.__setattr__(self, 'radius', float(self.radius))
        if self.radius < 0.0:
            raise GeometryError(f'Circle radius must be non-negative, got {self.radius:g}')

    def point_at(self, theta: float) -> Point:
        return Point(
            self.center.x + self.radius * math.cos(theta),
            self.center.y + self.radius * math.sin(theta),
        )

    def get_point(self, source: 'RandomSource') -> Point:
        """Uniformly random point on the boundary."""

        return self.point_at(source.angle())

    def is_point_on_circle(self, point: Point, tol: float = ON_CIRCLE_TOLERANCE) -> bool:
        """``tol`` is relative to the radius once the radius exceeds 1."""

        return abs(distance(self.center, point) - self.radius) <= tol * max(1.0, self.radius)

    def get_point_on_arc(self, start: Point, vertex: Point, degree: float) -> Point:
        """End point of an inscribed angle of ``degree`` at ``vertex``.

        The end point is reached by rotating ``start`` about the center by
        twice ``degree``, sweeping along the larger of the two arcs between
        ``start`` and ``vertex`` so that the vertex stays off the subtended
        arc.
        """

        if degree > 180.0:
            raise GeometryError('Degree exceeds 180 degrees')
        for name, point in (('start', start), ('vertex', vertex)):
            if not self.is_point_on_circle(point):
                raise GeometryError(f'Angle {name} point is not on the circle')

        theta_start = polar_angle(self.center, start)
        theta_vertex = polar_angle(self.center, vertex)
        gap = normalize_angle(theta_vertex - theta_start)
        direction = 1.0 if gap >= math.pi else -1.0
        end = self.point_at(theta_start + direction * 2.0 * math.radians(degree))

        if not self.is_point_on_circle(end):
            raise GeometryError('Angle end point is not on the circle')
        return end


@dataclass(frozen=True)
class Triangle:
    a: Point
    b: Point
    c: Point

    def __post_init__(self) -> None:
        a, b, c = self.a, self.b, self.c
        if (a.x - b.x) * (a.y - c.y) == (a.x - c.x) * (a.y - b.y):
            raise GeometryError('Points are collinear')

    @property
    def vertices(self) -> Tuple[Point, Point, Point]:
        return self.a, self.b, self.c

    def sides(self) -> Tuple[Lineseg, Lineseg, Lineseg]:
        return Lineseg(self.a, self.b), Lineseg(self.b, self.c), Lineseg(self.c, self.a)

    def side_lengths(self) -> Tuple[float, float, float]:
        """Lengths of the sides opposite ``a``, ``b`` and ``c``."""

        return distance(self.b, self.c), distance(self.c, self.a), distance(self.a, self.b)

    def _solve(self, rows, rhs) -> Point:
        try:
            x, y = np.linalg.solve(np.array(rows, dtype=float), np.array(rhs, dtype=float))
        except np.linalg.LinAlgError as exc:
            raise GeometryError('Triangle is too close to degenerate') from exc
        return Point(float(x), float(y))

    def circumcenter(self) -> Point:
        """Intersection of the perpendicular bisectors of ``ab`` and ``ac``."""

        a, b, c = (p.as_array() for p in self.vertices)
        ab = b - a
        ac = c - a
        return self._solve(
            [ab, ac],
            [0.5 * (b.dot(b) - a.dot(a)), 0.5 * (c.dot(c) - a.dot(a))],
        )

    def incenter(self) -> Point:
        """Vertex average weighted by the opposite side lengths."""

        weights = self.side_lengths()
        coords = np.array([p.coords for p in self.vertices], dtype=float)
        x, y = np.average(coords, axis=0, weights=weights)
        return Point(float(x), float(y))

    def orthocenter(self) -> Point:
        """Intersection of the altitudes from ``a`` and ``b``."""

        a, b, c = (p.as_array() for p in self.vertices)
        bc = c - b
        ca = c - a
        return self._solve([bc, ca], [bc.dot(a), ca.dot(b)])

    def centroid(self) -> Point:
        return Point((self.a.x + self.b.x + self.c.x) / 3.0, (self.a.y + self.b.y + self.c.y) / 3.0)

    def area(self) -> float:
        """Heron's formula."""

        la, lb, lc = self.side_lengths()
        s = 0.5 * (la + lb + lc)
        return math.sqrt(max(s * (s - la) * (s - lb) * (s - lc), 0.0))

    def inradius(self) -> float:
        s = 0.5 * sum(self.side_lengths())
        return self.area() / s


@dataclass(frozen=True)
class Angle:
    start: Point
    center: Point
    end: Point

    def rays(self) -> Tuple[Lineseg, Lineseg]:
        return Lineseg(self.center, self.start), Lineseg(self.center, self.end)

    @property
    def degrees(self) -> float:
        """Measured (unsigned) angle at ``center`` in degrees."""

        ux, uy = self.start.x - self.center.x, self.start.y - self.center.y
        vx, vy = self.end.x - self.center.x, self.end.y - self.center.y
        return math.degrees(abs(math.atan2(ux * vy - uy * vx, ux * vx + uy * vy)))


def _format_coord(value: float) -> str:
    return f'{value:g}'


@dataclass(frozen=True)
class Label:
    """Name of a point-valued variable anchored at its coordinates."""

    name: str
    point: Point

    @property
    def anchor(self) -> Point:
        return self.point

    @property
    def text(self) -> str:
        return f'{self.name} {_format_coord(self.point.x)} {_format_coord(self.point.y)}'


Value = Union[int, float, str, bool, _Marker, Point, Lineseg, Circle, Triangle, Angle, Label]

_KIND_NAMES = (
    (Point, 'point'),
    (Lineseg, 'line segment'),
    (Circle, 'circle'),
    (Triangle, 'triangle'),
    (Angle, 'angle'),
    (Label, 'label'),
)


def kind_name(value: object) -> str:
    """Human readable kind of ``value`` for error messages."""

    if isinstance(value, bool):
        return 'bool'
    if isinstance(value, int):
        return 'int'
    if isinstance(value, float):
        return 'float'
    if isinstance(value, str):
        return 'string'
    if value is INDETERMINATE:
        return 'indeterminate'
    if value is UNDEFINED:
        return 'undefined'
    for cls, name in _KIND_NAMES:
        if isinstance(value, cls):
            return name
    return type(value).__name__


def is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
