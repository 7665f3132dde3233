"""Operations callable from scripts and the name registry.

Every operation exposes ``call(args, source)``. An operation may accept
several argument shapes ("cases"); they are tried in declaration order and
the first case whose arity and type checks pass decides the result. A case
signals a shape mismatch by raising :class:`SignatureError`; any other error
means the case matched and the error is final.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, List, Sequence, Tuple, Type, TypeVar

from .errors import (
    ArgumentTypeError,
    ArithmeticDomainError,
    ArityError,
    GeometryError,
    InvalidVariableNameError,
    SignatureError,
)
from .geometry import RandomSource, distance
from .logging_utils import apply_debug_logging
from .values import INT_MAX, INT_MIN, Angle, Circle, Lineseg, Point, Triangle, Value, is_number, kind_name

logger = logging.getLogger(__name__)

T = TypeVar('T')

ASSIGNMENT = 'setq'
DEFAULT_CIRCLE_RADIUS = 5.0

_KIND_LABELS = {
    Point: 'a point',
    Lineseg: 'a line segment',
    Circle: 'a circle',
    Triangle: 'a triangle',
    Angle: 'an angle',
}


def is_valid_variable(name: str) -> bool:
    """A letter followed by letters, digits, ``_`` or ``-``."""

    if not name or not name[0].isalpha():
        return False
    return all(ch.isalnum() or ch in '_-' for ch in name[1:])


def _expect_arity(args: Sequence[Value], count: int, what: str) -> None:
    if len(args) != count:
        noun = 'argument' if count == 1 else 'arguments'
        raise ArityError(f'{what} requires exactly {count} {noun}, got {len(args)}')


def _expect(args: Sequence[Value], index: int, cls: Type[T], what: str) -> T:
    value = args[index]
    if not isinstance(value, cls):
        raise ArgumentTypeError(
            f'{what} expects {_KIND_LABELS[cls]} as argument {index + 1}, got {kind_name(value)}'
        )
    return value


def _expect_number(args: Sequence[Value], index: int, what: str) -> float:
    value = args[index]
    if not is_number(value):
        raise ArgumentTypeError(
            f'{what} expects a number as argument {index + 1}, got {kind_name(value)}'
        )
    return float(value)


class Operation:
    """Base class; subclasses list their case methods in ``cases``."""

    name = ''
    cases: Tuple[str, ...] = ('apply',)
    signatures: Tuple[str, ...] = ()

    def call(self, args: Sequence[Value], source: RandomSource) -> Value:
        *fallible, last = self.cases
        for case in fallible:
            try:
                return getattr(self, case)(args, source)
            except SignatureError as exc:
                logger.debug('%s: case %s rejected arguments: %s', self.name, case, exc)
        # errors from the last case propagate unchanged
        return getattr(self, last)(args, source)

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.name!r})'


# ---------------------------------------------------------------------------
# Arithmetic


class ArithmeticOperation(Operation):
    verb = ''

    def apply(self, args: Sequence[Value], source: RandomSource) -> Value:
        _expect_arity(args, 2, self.name)
        a, b = args
        # exact type checks keep bools out and forbid int/float mixing
        if type(a) is int and type(b) is int:
            result = self.on_ints(a, b)
            if not INT_MIN <= result <= INT_MAX:
                raise ArithmeticDomainError(f'Integer overflow in {self.verb}')
            return result
        if type(a) is float and type(b) is float:
            return self.on_floats(a, b)
        raise ArgumentTypeError(f'Invalid types for {self.verb}: {kind_name(a)} and {kind_name(b)}')

    def on_ints(self, a: int, b: int) -> int:
        raise NotImplementedError

    def on_floats(self, a: float, b: float) -> float:
        raise NotImplementedError


class Add(ArithmeticOperation):
    name = '+'
    verb = 'addition'
    signatures = ('(int int)', '(float float)')

    def on_ints(self, a, b):
        return a + b

    def on_floats(self, a, b):
        return a + b


class Subtract(ArithmeticOperation):
    name = '-'
    verb = 'subtraction'
    signatures = ('(int int)', '(float float)')

    def on_ints(self, a, b):
        return a - b

    def on_floats(self, a, b):
        return a - b


class Multiply(ArithmeticOperation):
    name = '*'
    verb = 'multiplication'
    signatures = ('(int int)', '(float float)')

    def on_ints(self, a, b):
        return a * b

    def on_floats(self, a, b):
        return a * b


class Divide(ArithmeticOperation):
    name = '/'
    verb = 'division'
    signatures = ('(int int)', '(float float)')

    def on_ints(self, a, b):
        if b == 0:
            raise ArithmeticDomainError('Integer division by zero')
        quotient = abs(a) // abs(b)
        return quotient if (a < 0) == (b < 0) else -quotient

    def on_floats(self, a, b):
        if b == 0.0:
            if a == 0.0 or math.isnan(a):
                return math.nan
            return math.copysign(math.inf, a) * math.copysign(1.0, b)
        return a / b


# ---------------------------------------------------------------------------
# Assignment and fallback


class Assign(Operation):
    name = ASSIGNMENT
    signatures = ('(name value)',)

    def apply(self, args: Sequence[Value], source: RandomSource) -> Value:
        _expect_arity(args, 2, self.name)
        target = args[0]
        if not isinstance(target, str) or not is_valid_variable(target):
            raise InvalidVariableNameError(target)
        return args[1]


class NoOp(Operation):
    name = 'nop'
    signatures = ('(...)',)

    def apply(self, args: Sequence[Value], source: RandomSource) -> Value:
        return 0


# ---------------------------------------------------------------------------
# Constructors


class MakePoint(Operation):
    name = 'point'
    cases = ('from_coords', 'on_circle')
    signatures = ('(x y)', '(circle)')

    def from_coords(self, args, source):
        _expect_arity(args, 2, 'Point')
        return Point(_expect_number(args, 0, 'Point'), _expect_number(args, 1, 'Point'))

    def on_circle(self, args, source):
        _expect_arity(args, 1, 'Point')
        return _expect(args, 0, Circle, 'Point').get_point(source)


class MakeLineseg(Operation):
    name = 'lineseg'
    cases = ('from_points',)
    signatures = ('(point point)',)

    def from_points(self, args, source):
        _expect_arity(args, 2, 'Line segment')
        return Lineseg(_expect(args, 0, Point, 'Line segment'), _expect(args, 1, Point, 'Line segment'))


class MakeAngle(Operation):
    name = 'angle'
    cases = ('from_points',)
    signatures = ('(start vertex end)',)

    def from_points(self, args, source):
        _expect_arity(args, 3, 'Angle')
        start, center, end = (_expect(args, i, Point, 'Angle') for i in range(3))
        return Angle(start, center, end)


class MakeInscribedAngle(Operation):
    name = 'iangle'
    cases = ('from_circle_degrees',)
    signatures = ('(circle degrees)',)

    def from_circle_degrees(self, args, source):
        _expect_arity(args, 2, 'Inscribed angle')
        circle = _expect(args, 0, Circle, 'Inscribed angle')
        degree = _expect_number(args, 1, 'Inscribed angle')
        if degree > 180.0:
            raise GeometryError('Degree exceeds 180 degrees')

        radius = circle.radius
        # longest chord between start and vertex that still leaves room for the arc
        max_distance = math.sin(math.radians(180.0 - degree)) * radius * 2.0

        def draw():
            return circle.get_point(source), circle.get_point(source)

        def accept(pair):
            chord = distance(*pair)
            if degree > 90.0 and chord > max_distance:
                return False
            if max_distance > radius and chord < radius:
                return False
            return True

        start, vertex = source.sample(draw, accept, f'inscribed angle of {degree:g} degrees')
        end = circle.get_point_on_arc(start, vertex, degree)
        return Angle(start, vertex, end)


class MakeCircle(Operation):
    name = 'circle'
    cases = ('default', 'from_point_radius')
    signatures = ('()', '(center radius)')

    def default(self, args, source):
        _expect_arity(args, 0, 'Circle')
        return Circle(Point(0.0, 0.0), DEFAULT_CIRCLE_RADIUS)

    def from_point_radius(self, args, source):
        _expect_arity(args, 2, 'Circle')
        center = _expect(args, 0, Point, 'Circle')
        return Circle(center, _expect_number(args, 1, 'Circle'))


class MakeTriangle(Operation):
    name = 'triangle'
    cases = ('from_points', 'from_circle', 'from_angle')
    signatures = ('(point point point)', '(circle)', '(angle)')

    def from_points(self, args, source):
        _expect_arity(args, 3, 'Triangle')
        a, b, c = (_expect(args, i, Point, 'Triangle') for i in range(3))
        return Triangle(a, b, c)

    def from_circle(self, args, source):
        _expect_arity(args, 1, 'Triangle')
        circle = _expect(args, 0, Circle, 'Triangle')
        min_gap = circle.radius / 2.0

        def draw():
            return circle.get_point(source), circle.get_point(source), circle.get_point(source)

        def accept(points):
            first, second, third = points
            return (
                distance(first, second) >= min_gap
                and distance(second, third) >= min_gap
                and distance(third, first) >= min_gap
            )

        return Triangle(*source.sample(draw, accept, 'well separated triangle vertices'))

    def from_angle(self, args, source):
        _expect_arity(args, 1, 'Triangle')
        angle = _expect(args, 0, Angle, 'Triangle')
        return Triangle(angle.start, angle.center, angle.end)


# ---------------------------------------------------------------------------
# Queries


class Midpoint(Operation):
    name = 'midpoint'
    cases = ('from_points', 'from_lineseg')
    signatures = ('(point point)', '(lineseg)')

    def from_points(self, args, source):
        _expect_arity(args, 2, 'Midpoint')
        return _expect(args, 0, Point, 'Midpoint').midpoint(_expect(args, 1, Point, 'Midpoint'))

    def from_lineseg(self, args, source):
        _expect_arity(args, 1, 'Midpoint')
        return _expect(args, 0, Lineseg, 'Midpoint').midpoint


class TriangleProperty(Operation):
    """Query answered by the ``Triangle`` method of the same name."""

    cases = ('from_triangle',)
    signatures = ('(triangle)',)

    def __init__(self, name: str):
        self.name = name

    def from_triangle(self, args, source):
        what = self.name.capitalize()
        _expect_arity(args, 1, what)
        triangle = _expect(args, 0, Triangle, what)
        return getattr(triangle, self.name)()


class Intersect(Operation):
    name = 'intersect'
    cases = ('from_linesegs', 'from_lineseg_circle')
    signatures = ('(lineseg lineseg)', '(lineseg circle index)')

    def from_linesegs(self, args, source):
        _expect_arity(args, 2, 'Intersect')
        first = _expect(args, 0, Lineseg, 'Intersect')
        return first.intersect(_expect(args, 1, Lineseg, 'Intersect'))

    def from_lineseg_circle(self, args, source):
        _expect_arity(args, 3, 'Intersect')
        lineseg = _expect(args, 0, Lineseg, 'Intersect')
        circle = _expect(args, 1, Circle, 'Intersect')
        index = args[2]
        if type(index) is not int:
            raise ArgumentTypeError(f'Intersect expects an int index as argument 3, got {kind_name(index)}')
        return lineseg.intersect_circle(circle, index)


# ---------------------------------------------------------------------------
# Registry

NOP = NoOp()

OPERATIONS: Dict[str, Operation] = {
    op.name: op
    for op in (
        Add(),
        Subtract(),
        Multiply(),
        Divide(),
        Assign(),
        MakePoint(),
        MakeLineseg(),
        MakeAngle(),
        MakeInscribedAngle(),
        MakeCircle(),
        MakeTriangle(),
        Midpoint(),
        TriangleProperty('circumcenter'),
        TriangleProperty('incenter'),
        TriangleProperty('orthocenter'),
        TriangleProperty('centroid'),
        TriangleProperty('inradius'),
        Intersect(),
    )
}


def lookup_operation(name: str) -> Operation:
    """Registered operation for ``name``; unknown names get the no-op."""

    return OPERATIONS.get(name, NOP)


def describe_operations() -> List[str]:
    lines = []
    for name, op in OPERATIONS.items():
        for signature in op.signatures:
            lines.append(f'({name} {signature[1:]}' if signature != '()' else f'({name})')
    return lines


apply_debug_logging(globals(), logger=logger)
