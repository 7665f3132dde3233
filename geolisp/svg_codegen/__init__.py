"""Evaluator output → SVG rendering helpers."""

from .generator import (
    build_render_plan,
    generate_svg_code,
    generate_svg_document,
    place_label,
)

__all__ = [
    "build_render_plan",
    "generate_svg_code",
    "generate_svg_document",
    "place_label",
]
