from typing import Iterable

from .values import INDETERMINATE, UNDEFINED, Angle, Circle, Label, Lineseg, Point, Triangle, _Marker


def num_str(value: float) -> str:
    return f"{value:g}"


def point_str(point: Point) -> str:
    return f"({num_str(point.x)}, {num_str(point.y)})"


def is_printable_value(value: object) -> bool:
    return isinstance(value, (bool, int, float, str, _Marker, Point, Lineseg, Circle, Triangle, Angle, Label))


def format_value(value: object) -> str:
    """One-line rendering of an evaluator value."""

    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return num_str(value)
    if isinstance(value, str):
        return value
    if value is INDETERMINATE:
        return "indeterminate"
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, Point):
        return f"point {point_str(value)}"
    if isinstance(value, Lineseg):
        return f"lineseg {point_str(value.start)} {point_str(value.end)}"
    if isinstance(value, Circle):
        return f"circle center {point_str(value.center)} radius {num_str(value.radius)}"
    if isinstance(value, Triangle):
        return "triangle " + " ".join(point_str(p) for p in value.vertices)
    if isinstance(value, Angle):
        pts = " ".join(point_str(p) for p in (value.start, value.center, value.end))
        return f"angle {pts} measure {num_str(value.degrees)}"
    if isinstance(value, Label):
        return f"label {value.text}"
    raise ValueError(f"cannot format value {value!r}")


def print_values(values: Iterable[object]) -> str:
    """Render an output list one value per line; assignments print nothing."""

    lines = [format_value(value) for value in values if value is not UNDEFINED]
    return "".join(line + "\n" for line in lines)
