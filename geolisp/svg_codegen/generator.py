"""SVG renderer for evaluator output."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple
from xml.sax.saxutils import escape

from ..values import Angle, Circle, Label, Lineseg, Point, Triangle

logger = logging.getLogger(__name__)

Coord = Tuple[float, float]
Rect = Tuple[float, float, float, float]  # (min_x, max_x, min_y, max_y)
Segment = Tuple[Coord, Coord]

DEFAULT_SCALE = 40.0
DEFAULT_MARGIN = 1.0
DOT_RADIUS_PX = 2.5
STROKE_WIDTH_PX = 1.5
FONT_SIZE_PX = 12.0
LABEL_WIDTH_EM = 0.6
LABEL_HEIGHT_EM = 1.0
LABEL_GAP_PX = 4.0
ANGLE_MARK_RADIUS = 0.4
ANGLE_MARK_FRACTION = 0.3

ANCHOR_SEQUENCE = [
    "above",
    "above right",
    "right",
    "below right",
    "below",
    "below left",
    "left",
    "above left",
]

ANCHOR_DIRECTIONS: Dict[str, Coord] = {
    "above": (0.0, 1.0),
    "below": (0.0, -1.0),
    "left": (-1.0, 0.0),
    "right": (1.0, 0.0),
    "above right": (math.sqrt(0.5), math.sqrt(0.5)),
    "below right": (math.sqrt(0.5), -math.sqrt(0.5)),
    "below left": (-math.sqrt(0.5), -math.sqrt(0.5)),
    "above left": (-math.sqrt(0.5), math.sqrt(0.5)),
}


@dataclass
class PlacedLabel:
    text: str
    anchor: str
    center: Coord
    rect: Rect
    overlaps: bool


@dataclass
class RenderPlan:
    """World-coordinate primitives collected from the output values."""

    dots: List[Coord] = field(default_factory=list)
    segments: List[Segment] = field(default_factory=list)
    circles: List[Tuple[Coord, float]] = field(default_factory=list)
    polygons: List[Tuple[Coord, ...]] = field(default_factory=list)
    angle_marks: List[Tuple[Coord, Coord, Coord]] = field(default_factory=list)
    labels: List[Label] = field(default_factory=list)

    def add_dot(self, point: Point) -> None:
        if point.coords not in self.dots:
            self.dots.append(point.coords)

    def all_coords(self) -> List[Coord]:
        coords: List[Coord] = list(self.dots)
        for a, b in self.segments:
            coords.extend((a, b))
        for (cx, cy), r in self.circles:
            coords.extend(((cx - r, cy - r), (cx + r, cy + r)))
        for polygon in self.polygons:
            coords.extend(polygon)
        return coords


def build_render_plan(values: Iterable[object]) -> RenderPlan:
    plan = RenderPlan()
    for value in values:
        if isinstance(value, Point):
            plan.add_dot(value)
        elif isinstance(value, Lineseg):
            plan.segments.append((value.start.coords, value.end.coords))
        elif isinstance(value, Circle):
            plan.circles.append((value.center.coords, value.radius))
        elif isinstance(value, Triangle):
            plan.polygons.append(tuple(p.coords for p in value.vertices))
            plan.segments.extend((s.start.coords, s.end.coords) for s in value.sides())
        elif isinstance(value, Angle):
            for ray in value.rays():
                plan.segments.append((ray.start.coords, ray.end.coords))
            plan.angle_marks.append((value.start.coords, value.center.coords, value.end.coords))
        elif isinstance(value, Label):
            plan.add_dot(value.anchor)
            plan.labels.append(value)
        else:
            # scalars, strings and assignment results have no drawing
            logger.debug("Skipping non-geometric value %r", value)
    return plan


def _coords_bbox(points: Sequence[Coord]) -> Rect:
    if not points:
        return (0.0, 0.0, 0.0, 0.0)
    xs = [pt[0] for pt in points]
    ys = [pt[1] for pt in points]
    return (min(xs), max(xs), min(ys), max(ys))


def _rect_from_center(center: Coord, width: float, height: float) -> Rect:
    half_w = 0.5 * width
    half_h = 0.5 * height
    return (center[0] - half_w, center[0] + half_w, center[1] - half_h, center[1] + half_h)


def _point_in_rect(point: Coord, rect: Rect) -> bool:
    x, y = point
    return rect[0] - 1e-9 <= x <= rect[1] + 1e-9 and rect[2] - 1e-9 <= y <= rect[3] + 1e-9


def _rect_intersects_rect(r1: Rect, r2: Rect) -> bool:
    return not (r1[1] < r2[0] or r2[1] < r1[0] or r1[3] < r2[2] or r2[3] < r1[2])


def _orientation(p: Coord, q: Coord, r: Coord) -> float:
    return (q[1] - p[1]) * (r[0] - q[0]) - (q[0] - p[0]) * (r[1] - q[1])


def _segments_cross(p1: Coord, p2: Coord, q1: Coord, q2: Coord) -> bool:
    o1 = _orientation(p1, p2, q1)
    o2 = _orientation(p1, p2, q2)
    o3 = _orientation(q1, q2, p1)
    o4 = _orientation(q1, q2, p2)
    return (o1 > 0) != (o2 > 0) and (o3 > 0) != (o4 > 0)


def _segment_intersects_rect(segment: Segment, rect: Rect) -> bool:
    start, end = segment
    if _point_in_rect(start, rect) or _point_in_rect(end, rect):
        return True
    corners = [(rect[0], rect[2]), (rect[1], rect[2]), (rect[1], rect[3]), (rect[0], rect[3])]
    edges = zip(corners, corners[1:] + corners[:1])
    return any(_segments_cross(start, end, e1, e2) for e1, e2 in edges)


def place_label(
    text: str,
    point: Coord,
    segments: Sequence[Segment],
    placed: Sequence[PlacedLabel],
    scale: float,
) -> PlacedLabel:
    """Put ``text`` next to ``point`` at the first anchor free of collisions.

    Falls back to the anchor with the fewest collisions (labels weigh more
    than strokes).
    """

    width = LABEL_WIDTH_EM * FONT_SIZE_PX * max(len(text), 1) / scale
    height = LABEL_HEIGHT_EM * FONT_SIZE_PX / scale
    scored: List[Tuple[int, PlacedLabel]] = []
    for anchor in ANCHOR_SEQUENCE:
        dx, dy = ANCHOR_DIRECTIONS[anchor]
        # push the box out far enough that its near edge clears the dot
        offset = (DOT_RADIUS_PX + LABEL_GAP_PX) / scale + 0.5 * (abs(dx) * width + abs(dy) * height)
        center = (point[0] + dx * offset, point[1] + dy * offset)
        rect = _rect_from_center(center, width, height)
        hits_segments = sum(1 for seg in segments if _segment_intersects_rect(seg, rect))
        hits_labels = sum(1 for other in placed if _rect_intersects_rect(rect, other.rect))
        score = hits_segments + 3 * hits_labels
        candidate = PlacedLabel(text, anchor, center, rect, score > 0)
        if score == 0:
            return candidate
        scored.append((score, candidate))
    # min keeps the earliest anchor among equal scores
    _, best = min(scored, key=lambda item: item[0])
    logger.debug("Label %r overlaps at every anchor; using %s", text, best.anchor)
    return best


def _fmt(value: float) -> str:
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


class _Canvas:
    """Maps world coordinates (y up) onto SVG pixels (y down)."""

    def __init__(self, bbox: Rect, scale: float, margin: float):
        self.min_x, self.max_x, self.min_y, self.max_y = bbox
        self.scale = scale
        self.margin = margin
        self.width = (self.max_x - self.min_x + 2.0 * margin) * scale
        self.height = (self.max_y - self.min_y + 2.0 * margin) * scale

    def xy(self, coord: Coord) -> Tuple[str, str]:
        x = (coord[0] - self.min_x + self.margin) * self.scale
        y = (self.max_y - coord[1] + self.margin) * self.scale
        return _fmt(x), _fmt(y)

    def length(self, value: float) -> str:
        return _fmt(value * self.scale)


def _angle_mark_path(canvas: _Canvas, start: Coord, vertex: Coord, end: Coord) -> Optional[str]:
    u = (start[0] - vertex[0], start[1] - vertex[1])
    v = (end[0] - vertex[0], end[1] - vertex[1])
    lu = math.hypot(*u)
    lv = math.hypot(*v)
    if lu <= 1e-9 or lv <= 1e-9:
        return None
    radius = min(ANGLE_MARK_RADIUS, ANGLE_MARK_FRACTION * min(lu, lv))
    p1 = (vertex[0] + u[0] / lu * radius, vertex[1] + u[1] / lu * radius)
    p2 = (vertex[0] + v[0] / lv * radius, vertex[1] + v[1] / lv * radius)
    # counter-clockwise in world space is clockwise on screen
    sweep = 1 if u[0] * v[1] - u[1] * v[0] > 0 else 0
    x1, y1 = canvas.xy(p1)
    x2, y2 = canvas.xy(p2)
    r = canvas.length(radius)
    return f'<path d="M {x1} {y1} A {r} {r} 0 0 {sweep} {x2} {y2}" />'


def generate_svg_code(
    values: Iterable[object],
    *,
    scale: float = DEFAULT_SCALE,
    margin: float = DEFAULT_MARGIN,
) -> List[str]:
    """Return the SVG element lines (without the ``<svg>`` wrapper)."""

    plan = build_render_plan(values)
    canvas = _Canvas(_coords_bbox(plan.all_coords()), scale, margin)
    return _emit_elements(plan, canvas)


def _emit_elements(plan: RenderPlan, canvas: _Canvas) -> List[str]:
    lines: List[str] = [
        f'<g fill="none" stroke="black" stroke-width="{_fmt(STROKE_WIDTH_PX)}">'
    ]
    for (cx, cy), radius in plan.circles:
        x, y = canvas.xy((cx, cy))
        lines.append(f'  <circle cx="{x}" cy="{y}" r="{canvas.length(radius)}" />')
    for polygon in plan.polygons:
        pts = " ".join(",".join(canvas.xy(pt)) for pt in polygon)
        lines.append(f'  <polygon points="{pts}" />')
    for start, end in plan.segments:
        x1, y1 = canvas.xy(start)
        x2, y2 = canvas.xy(end)
        lines.append(f'  <line x1="{x1}" y1="{y1}" x2="{x2}" y2="{y2}" />')
    for start, vertex, end in plan.angle_marks:
        path = _angle_mark_path(canvas, start, vertex, end)
        if path is not None:
            lines.append(f"  {path}")
    lines.append("</g>")

    if plan.dots:
        lines.append('<g fill="black" stroke="none">')
        for dot in plan.dots:
            x, y = canvas.xy(dot)
            lines.append(f'  <circle cx="{x}" cy="{y}" r="{_fmt(DOT_RADIUS_PX)}" />')
        lines.append("</g>")

    if plan.labels:
        lines.append(
            f'<g font-family="sans-serif" font-size="{_fmt(FONT_SIZE_PX)}" '
            'text-anchor="middle" dominant-baseline="central">'
        )
        placed: List[PlacedLabel] = []
        for label in plan.labels:
            result = place_label(label.name, label.anchor.coords, plan.segments, placed, canvas.scale)
            placed.append(result)
            x, y = canvas.xy(result.center)
            lines.append(
                f'  <text x="{x}" y="{y}"><title>{escape(label.text)}</title>{escape(label.name)}</text>'
            )
        lines.append("</g>")
    return lines


def generate_svg_document(
    values: Iterable[object],
    *,
    scale: float = DEFAULT_SCALE,
    margin: float = DEFAULT_MARGIN,
) -> str:
    """Render evaluator output as a standalone SVG document."""

    if scale <= 0:
        raise ValueError(f"scale must be positive, got {scale}")
    plan = build_render_plan(values)
    canvas = _Canvas(_coords_bbox(plan.all_coords()), scale, margin)
    body = _emit_elements(plan, canvas)
    width = _fmt(canvas.width)
    height = _fmt(canvas.height)
    header = (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">'
    )
    return "\n".join([header, *body, "</svg>"]) + "\n"
