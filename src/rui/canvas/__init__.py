"""Canvas drawing: command recorder, paths and text metrics."""

from .canvas import (
    Canvas,
    FontParams,
    GradientStop,
    LineCap,
    LineJoin,
    PatternRepeat,
    TextAlign,
    TextBaseline,
    TextMetrics,
    font_text,
)
from .path import Path

__all__ = [
    "Canvas",
    "Path",
    # Styles
    "FontParams",
    "GradientStop",
    "LineCap",
    "LineJoin",
    "PatternRepeat",
    "TextAlign",
    "TextBaseline",
    # Measurement
    "TextMetrics",
    "font_text",
]
