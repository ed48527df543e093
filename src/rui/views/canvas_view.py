"""Canvas view: a ``<canvas>`` element redrawn by a draw handler."""

from typing import Any, Callable

from ..canvas import Canvas
from ..core.errors import IncompatibleTypeError
from .factory import register_view_creator
from .view import View

DRAW_FUNCTION = "draw-function"


class CanvasView(View):
    """
    Drawing surface.

    ``draw-function`` is called as ``fn(canvas)`` with a fresh ``Canvas``
    whenever the view is redrawn: on ``redraw()`` and on every resize
    (the client reports the size of a new canvas right after rendering it).
    """

    view_tag = "CanvasView"

    def _set(self, tag: str, value: Any) -> list[str]:
        if tag == DRAW_FUNCTION:
            if not callable(value):
                raise IncompatibleTypeError(
                    f"draw function is not callable: {value!r}", tag=tag, value=repr(value)
                )
            self._properties[tag] = value
            return [tag]
        return super()._set(tag, value)

    def draw_function(self) -> Callable[[Canvas], Any] | None:
        return self._properties.get(DRAW_FUNCTION)

    def html_tag(self) -> str:
        return "canvas"

    def property_changed(self, tag: str) -> None:
        if tag == DRAW_FUNCTION:
            self.redraw()
        else:
            super().property_changed(tag)

    def redraw(self) -> None:
        """Record the draw handler and send the script."""
        if not self.created:
            return
        canvas = Canvas(self)
        draw = self.draw_function()
        if draw is not None:
            draw(canvas)
        else:
            canvas.clear_rect(0, 0, self.frame.width, self.frame.height)
        self.session.run_script(canvas.finish())

    def on_resize(self, x: float, y: float, width: float, height: float) -> None:
        super().on_resize(x, y, width, height)
        self.redraw()


register_view_creator(CanvasView)
