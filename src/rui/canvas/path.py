"""Canvas path: sub-path commands replayed with ``ctx.beginPath()``."""

from ..values import format_float


def _args(*values: float) -> str:
    return ",".join(format_float(value) for value in values)


class Path:
    """
    Recorded path geometry.

    Angles are in radians, measured clockwise from the positive x axis.
    """

    def __init__(self) -> None:
        self._script: list[str] = ["\nctx.beginPath();"]

    def move_to(self, x: float, y: float) -> None:
        self._script.append(f"\nctx.moveTo({_args(x, y)});")

    def line_to(self, x: float, y: float) -> None:
        self._script.append(f"\nctx.lineTo({_args(x, y)});")

    def arc_to(self, x0: float, y0: float, x1: float, y1: float, radius: float) -> None:
        if radius > 0:
            self._script.append(f"\nctx.arcTo({_args(x0, y0, x1, y1, radius)});")

    def arc(
        self, x: float, y: float, radius: float, start_angle: float, end_angle: float, clockwise: bool
    ) -> None:
        if radius > 0:
            counter = "false" if clockwise else "true"
            self._script.append(f"\nctx.arc({_args(x, y, radius, start_angle, end_angle)},{counter});")

    def bezier_curve_to(self, cp0x: float, cp0y: float, cp1x: float, cp1y: float, x: float, y: float) -> None:
        self._script.append(f"\nctx.bezierCurveTo({_args(cp0x, cp0y, cp1x, cp1y, x, y)});")

    def quadratic_curve_to(self, cpx: float, cpy: float, x: float, y: float) -> None:
        self._script.append(f"\nctx.quadraticCurveTo({_args(cpx, cpy, x, y)});")

    def ellipse(
        self,
        x: float,
        y: float,
        radius_x: float,
        radius_y: float,
        rotation: float,
        start_angle: float,
        end_angle: float,
        clockwise: bool,
    ) -> None:
        if radius_x > 0 and radius_y > 0:
            counter = "false" if clockwise else "true"
            args = _args(x, y, radius_x, radius_y, rotation, start_angle, end_angle)
            self._script.append(f"\nctx.ellipse({args},{counter});")

    def close(self) -> None:
        self._script.append("\nctx.closePath();")

    def script_text(self) -> str:
        return "".join(self._script)
