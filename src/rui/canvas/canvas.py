"""
Canvas
Drawing command recorder for a CanvasView.

Every call appends JavaScript against the view's 2D context; ``finish``
returns the whole draw as one script. Gradients and patterns get a
script-local variable name (``gradient1``, ``pattern2`` ...) so a draw
can set one as fill style and later reuse it as stroke style.
"""

import json
import math
from dataclasses import dataclass
from enum import IntEnum
from itertools import count
from typing import Any

from ..core.logging_config import get_logger
from ..data import DataObject
from ..values import Color, SizeUnit, format_float, parse_color, parse_float
from .path import Path

logger = get_logger(__name__)


class LineJoin(IntEnum):
    MITER = 0
    ROUND = 1
    BEVEL = 2


class LineCap(IntEnum):
    BUTT = 0
    ROUND = 1
    SQUARE = 2


class TextBaseline(IntEnum):
    ALPHABETIC = 0
    TOP = 1
    MIDDLE = 2
    BOTTOM = 3
    HANGING = 4
    IDEOGRAPHIC = 5


class TextAlign(IntEnum):
    LEFT = 0
    RIGHT = 1
    CENTER = 2
    START = 3
    END = 4


class PatternRepeat(IntEnum):
    NO_REPEAT = 0
    REPEAT = 1
    REPEAT_X = 2
    REPEAT_Y = 3


_PATTERN_REPEAT = ("no-repeat", "repeat", "repeat-x", "repeat-y")


@dataclass
class GradientStop:
    offset: float
    color: Color


@dataclass
class FontParams:
    italic: bool = False
    small_caps: bool = False
    weight: int = 0
    line_height: SizeUnit | None = None


@dataclass
class TextMetrics:
    width: float = 0.0
    ascent: float = 0.0
    descent: float = 0.0
    left: float = 0.0
    right: float = 0.0

    @classmethod
    def from_answer(cls, answer: DataObject) -> "TextMetrics":
        def number(tag: str) -> float:
            return parse_float(answer.property_value(tag) or "") or 0.0

        return cls(number("width"), number("ascent"), number("descent"), number("left"), number("right"))


def _args(*values: float) -> str:
    return ",".join(format_float(value) for value in values)


def _color(value: Color | str) -> str:
    if isinstance(value, str):
        value = parse_color(value)
    return json.dumps(value.css_string())


def font_text(name: str, size: SizeUnit, params: FontParams | None = None) -> str:
    """CSS ``font`` shorthand used by ``ctx.font``."""
    parts = []
    if params is not None:
        if params.italic:
            parts.append("italic")
        if params.small_caps:
            parts.append("small-caps")
        if 0 < params.weight < 10:
            parts.append(str(params.weight * 100))
        elif params.weight >= 100:
            parts.append(str(params.weight))
    font_size = size.css_string("1rem")
    if params is not None and params.line_height is not None and not params.line_height.is_auto():
        font_size += "/" + params.line_height.css_string("")
    parts.append(font_size)
    parts.append(name or "serif")
    return " ".join(parts)


class Canvas:
    """Recorder bound to one canvas view."""

    def __init__(self, view: Any):
        self.view = view
        self._names = count(1)
        self._script: list[str] = [
            f"const canvas = document.getElementById({json.dumps(view.html_id())});",
            "\nconst ctx = canvas.getContext('2d');",
            "\nconst dpr = window.devicePixelRatio || 1;",
            "\nctx.canvas.width = dpr * canvas.clientWidth;",
            "\nctx.canvas.height = dpr * canvas.clientHeight;",
            "\nctx.scale(dpr, dpr);",
        ]

    def _write(self, text: str) -> None:
        self._script.append(text)

    def finish(self) -> str:
        """The recorded draw as one script block."""
        return "{\n" + "".join(self._script) + "\n}"

    def width(self) -> float:
        return self.view.frame.width

    def height(self) -> float:
        return self.view.frame.height

    # ========================================================================
    # State
    # ========================================================================

    def save(self) -> None:
        self._write("\nctx.save();")

    def restore(self) -> None:
        self._write("\nctx.restore();")

    def clip_rect(self, x: float, y: float, width: float, height: float) -> None:
        self._write(f"\nctx.beginPath();\nctx.rect({_args(x, y, width, height)});\nctx.clip();")

    def clip_path(self, path: Path) -> None:
        self._write(path.script_text() + "\nctx.clip();")

    def set_scale(self, x: float, y: float) -> None:
        self._write(f"\nctx.scale({_args(x, y)});")

    def set_translation(self, x: float, y: float) -> None:
        self._write(f"\nctx.translate({_args(x, y)});")

    def set_rotation(self, angle: float) -> None:
        self._write(f"\nctx.rotate({_args(angle)});")

    def set_transformation(
        self, x_scale: float, y_scale: float, x_skew: float, y_skew: float, dx: float, dy: float
    ) -> None:
        self._write(f"\nctx.transform({_args(x_scale, y_skew, x_skew, y_scale, dx, dy)});")

    def reset_transformation(self) -> None:
        self._write("\nctx.resetTransform();\nctx.scale(dpr, dpr);")

    # ========================================================================
    # Styles
    # ========================================================================

    def set_solid_color_fill_style(self, color: Color | str) -> None:
        self._write(f"\nctx.fillStyle = {_color(color)};")

    def set_solid_color_stroke_style(self, color: Color | str) -> None:
        self._write(f"\nctx.strokeStyle = {_color(color)};")

    def _gradient(self, create: str, color0: Color | str, color1: Color | str, stops: list[GradientStop]) -> str:
        name = f"gradient{next(self._names)}"
        self._write(f"\nconst {name} = ctx.{create};")
        self._write(f"\n{name}.addColorStop(0, {_color(color0)});")
        for stop in stops:
            if 0 <= stop.offset <= 1:
                self._write(f"\n{name}.addColorStop({format_float(stop.offset)}, {_color(stop.color)});")
        self._write(f"\n{name}.addColorStop(1, {_color(color1)});")
        return name

    def linear_gradient(
        self,
        x0: float,
        y0: float,
        color0: Color | str,
        x1: float,
        y1: float,
        color1: Color | str,
        stops: list[GradientStop] | None = None,
    ) -> str:
        """Create a linear gradient and return its variable name."""
        return self._gradient(f"createLinearGradient({_args(x0, y0, x1, y1)})", color0, color1, stops or [])

    def radial_gradient(
        self,
        x0: float,
        y0: float,
        r0: float,
        color0: Color | str,
        x1: float,
        y1: float,
        r1: float,
        color1: Color | str,
        stops: list[GradientStop] | None = None,
    ) -> str:
        """Create a radial gradient and return its variable name."""
        create = f"createRadialGradient({_args(x0, y0, r0, x1, y1, r1)})"
        return self._gradient(create, color0, color1, stops or [])

    def image_pattern(self, image: Any, repeat: PatternRepeat = PatternRepeat.REPEAT) -> str | None:
        """Create a pattern from a loaded image; None when the image is not ready."""
        if image is None or not image.ready:
            logger.warning("canvas_image_not_ready", url=getattr(image, "url", None))
            return None
        name = f"pattern{next(self._names)}"
        url = json.dumps(image.url)
        self._write(
            f"\nconst {name} = images.has({url}) ? "
            f"ctx.createPattern(images.get({url}), '{_PATTERN_REPEAT[repeat]}') : null;"
        )
        return name

    def set_fill_style(self, name: str) -> None:
        """Fill with a gradient or pattern created in this draw."""
        self._write(f"\nif ({name}) ctx.fillStyle = {name};")

    def set_stroke_style(self, name: str) -> None:
        self._write(f"\nif ({name}) ctx.strokeStyle = {name};")

    def set_linear_gradient_fill_style(self, *args: Any, **kwargs: Any) -> None:
        self.set_fill_style(self.linear_gradient(*args, **kwargs))

    def set_radial_gradient_fill_style(self, *args: Any, **kwargs: Any) -> None:
        self.set_fill_style(self.radial_gradient(*args, **kwargs))

    def set_image_fill_style(self, image: Any, repeat: PatternRepeat = PatternRepeat.REPEAT) -> None:
        name = self.image_pattern(image, repeat)
        if name is not None:
            self.set_fill_style(name)

    def set_line_width(self, width: float) -> None:
        if width > 0:
            self._write(f"\nctx.lineWidth = {format_float(width)};")

    def set_line_join(self, join: LineJoin) -> None:
        self._write(f"\nctx.lineJoin = '{LineJoin(join).name.lower()}';")

    def set_line_cap(self, cap: LineCap) -> None:
        self._write(f"\nctx.lineCap = '{LineCap(cap).name.lower()}';")

    def set_line_dash(self, dash: list[float], offset: float = 0.0) -> None:
        self._write(f"\nctx.setLineDash([{_args(*dash)}]);")
        if offset >= 0:
            self._write(f"\nctx.lineDashOffset = {format_float(offset)};")

    def set_font(self, name: str, size: SizeUnit, params: FontParams | None = None) -> None:
        self._write(f"\nctx.font = {json.dumps(font_text(name, size, params))};")

    def set_text_baseline(self, baseline: TextBaseline) -> None:
        self._write(f"\nctx.textBaseline = '{TextBaseline(baseline).name.lower()}';")

    def set_text_align(self, align: TextAlign) -> None:
        self._write(f"\nctx.textAlign = '{TextAlign(align).name.lower()}';")

    def set_shadow(self, offset_x: float, offset_y: float, blur: float, color: Color | str) -> None:
        if isinstance(color, str):
            color = parse_color(color)
        if color.alpha > 0 and blur >= 0:
            self._write(
                f"\nctx.shadowColor = {_color(color)};"
                f"\nctx.shadowOffsetX = {format_float(offset_x)};"
                f"\nctx.shadowOffsetY = {format_float(offset_y)};"
                f"\nctx.shadowBlur = {format_float(blur)};"
            )

    def reset_shadow(self) -> None:
        self._write(
            "\nctx.shadowColor = 'rgba(0,0,0,0)';\nctx.shadowOffsetX = 0;"
            "\nctx.shadowOffsetY = 0;\nctx.shadowBlur = 0;"
        )

    # ========================================================================
    # Drawing
    # ========================================================================

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        self._write(f"\nctx.clearRect({_args(x, y, width, height)});")

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        self._write(f"\nctx.fillRect({_args(x, y, width, height)});")

    def stroke_rect(self, x: float, y: float, width: float, height: float) -> None:
        self._write(f"\nctx.strokeRect({_args(x, y, width, height)});")

    def fill_and_stroke_rect(self, x: float, y: float, width: float, height: float) -> None:
        self.fill_rect(x, y, width, height)
        self.stroke_rect(x, y, width, height)

    def _rounded_rect(self, x: float, y: float, width: float, height: float, r: float) -> None:
        path = self.new_path()
        path.move_to(x, y + r)
        path.arc(x + r, y + r, r, math.pi, math.pi * 1.5, True)
        path.line_to(x + width - r, y)
        path.arc(x + width - r, y + r, r, math.pi * 1.5, math.pi * 2, True)
        path.line_to(x + width, y + height - r)
        path.arc(x + width - r, y + height - r, r, 0, math.pi / 2, True)
        path.line_to(x + r, y + height)
        path.arc(x + r, y + height - r, r, math.pi / 2, math.pi, True)
        path.close()
        self._write(path.script_text())

    def fill_rounded_rect(self, x: float, y: float, width: float, height: float, r: float) -> None:
        self._rounded_rect(x, y, width, height, r)
        self._write("\nctx.fill();")

    def stroke_rounded_rect(self, x: float, y: float, width: float, height: float, r: float) -> None:
        self._rounded_rect(x, y, width, height, r)
        self._write("\nctx.stroke();")

    def _ellipse(self, x: float, y: float, radius_x: float, radius_y: float, rotation: float) -> None:
        self._write(
            f"\nctx.beginPath();\nctx.moveTo({_args(x + radius_x, y)});"
            f"\nctx.ellipse({_args(x, y, radius_x, radius_y, rotation)},0,Math.PI*2);"
        )

    def fill_ellipse(self, x: float, y: float, radius_x: float, radius_y: float, rotation: float = 0) -> None:
        if radius_x >= 0 and radius_y >= 0:
            self._ellipse(x, y, radius_x, radius_y, rotation)
            self._write("\nctx.fill();")

    def stroke_ellipse(self, x: float, y: float, radius_x: float, radius_y: float, rotation: float = 0) -> None:
        if radius_x >= 0 and radius_y >= 0:
            self._ellipse(x, y, radius_x, radius_y, rotation)
            self._write("\nctx.stroke();")

    def new_path(self) -> Path:
        return Path()

    def fill_path(self, path: Path) -> None:
        self._write(path.script_text() + "\nctx.fill();")

    def stroke_path(self, path: Path) -> None:
        self._write(path.script_text() + "\nctx.stroke();")

    def fill_and_stroke_path(self, path: Path) -> None:
        self._write(path.script_text() + "\nctx.fill();\nctx.stroke();")

    def draw_line(self, x0: float, y0: float, x1: float, y1: float) -> None:
        self._write(f"\nctx.beginPath();\nctx.moveTo({_args(x0, y0)});\nctx.lineTo({_args(x1, y1)});\nctx.stroke();")

    def fill_text(self, x: float, y: float, text: str) -> None:
        self._write(f"\nctx.fillText({json.dumps(text, ensure_ascii=False)},{_args(x, y)});")

    def stroke_text(self, x: float, y: float, text: str) -> None:
        self._write(f"\nctx.strokeText({json.dumps(text, ensure_ascii=False)},{_args(x, y)});")

    def _draw_image(self, image: Any, args: str) -> None:
        if image is None or not image.ready:
            logger.warning("canvas_image_not_ready", url=getattr(image, "url", None))
            return
        url = json.dumps(image.url)
        self._write(f"\nif (images.has({url})) ctx.drawImage(images.get({url}),{args});")

    def draw_image(self, x: float, y: float, image: Any) -> None:
        self._draw_image(image, _args(x, y))

    def draw_image_in_rect(self, x: float, y: float, width: float, height: float, image: Any) -> None:
        self._draw_image(image, _args(x, y, width, height))

    def draw_image_fragment(
        self,
        src_x: float,
        src_y: float,
        src_width: float,
        src_height: float,
        dst_x: float,
        dst_y: float,
        dst_width: float,
        dst_height: float,
        image: Any,
    ) -> None:
        self._draw_image(image, _args(src_x, src_y, src_width, src_height, dst_x, dst_y, dst_width, dst_height))

    # ========================================================================
    # Measurement
    # ========================================================================

    def text_metrics(self, text: str, font_name: str, font_size: SizeUnit, params: FontParams | None = None) -> TextMetrics:
        """Measure text in the browser (getter-RPC); zero metrics when it does not answer."""
        answer = self.view.session.remote_value(
            "canvasTextMetrics", self.view.html_id(), font_text(font_name, font_size, params), text
        )
        if answer is None or answer.property_value("errorText") is not None:
            return TextMetrics()
        return TextMetrics.from_answer(answer)
