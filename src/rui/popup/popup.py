"""
Popup
A modal box wrapping a content view.

The content is framed by a grid: an optional title bar (title text or view
plus a ``✕`` close button), the content itself and an optional row of
buttons. A popup with an arrow sits in the centre cell of a 3×3 grid and
the arrow, a CSS border triangle, takes the cell on the requested side.
The whole frame is placed inside a full-size layer grid that aligns it.
"""

from dataclasses import dataclass
from typing import Any, Callable

from ..containers import ColumnLayout, GridLayout
from ..core.errors import IncompatibleTypeError, report_error
from ..core.logging_config import get_logger
from ..events import fire, listeners_from_value, names
from ..properties import ENUM_PROPERTIES, bool_property, enum_property, size_property, string_property, tags
from ..styles import ViewStyle
from ..values import SizeUnit, format_float, fr, percent, px
from ..values.enums import ArrowAlign, ArrowPosition, HorizontalAlign, VerticalAlign
from ..views import Button, TextView, View

logger = get_logger(__name__)

# Params the popup itself interprets; everything else styles the frame
POPUP_TAGS = frozenset(
    {
        tags.TITLE_STYLE,
        tags.CLOSE_BUTTON,
        tags.OUTSIDE_CLOSE,
        tags.VERTICAL_ALIGN,
        tags.HORIZONTAL_ALIGN,
        tags.BUTTONS_ALIGN,
        tags.ARROW,
        tags.ARROW_ALIGN,
        tags.ARROW_SIZE,
        tags.ARROW_WIDTH,
        tags.ARROW_OFFSET,
    }
)

DEFAULT_ARROW_SIZE = px(16)
DEFAULT_ARROW_WIDTH = px(16)


@dataclass
class PopupButton:
    """A button of the popup's button row; without ``on_click`` it dismisses the popup."""

    title: str
    on_click: Callable[["Popup"], Any] | None = None


def _enum_text(tag: str, index: int) -> str:
    return ENUM_PROPERTIES[tag].values[index]


def arrow_cells(position: int) -> tuple[tuple[int, int], tuple[int, int]]:
    """``((row, column), (row, column))`` of the popup and of the arrow in the 3×3 frame."""
    if position == ArrowPosition.TOP:
        return (1, 1), (0, 1)
    if position == ArrowPosition.BOTTOM:
        return (1, 1), (2, 1)
    if position == ArrowPosition.LEFT:
        return (1, 1), (1, 0)
    return (1, 1), (1, 2)


class Popup:
    """
    A popup around ``view``.

    Args:
        view: Content of the popup
        params: Popup settings (``title``, ``close-button``,
            ``outside-close``, ``buttons``, ``arrow``...) and any style
            properties of the frame
    """

    def __init__(self, view: View, params: dict[str, Any] | None = None):
        self.view = view
        self.session = view.session
        self._settings = ViewStyle()
        self._dismiss_listeners = []

        title: View | None = None
        buttons: list[PopupButton] = []
        frame_params: dict[str, Any] = {}
        for tag, value in (params or {}).items():
            tag = self._settings.normalize(tag)
            if tag == names.DISMISS_EVENT:
                try:
                    self._dismiss_listeners = listeners_from_value(tag, value)
                except IncompatibleTypeError as e:
                    report_error(e)
            elif tag == tags.TITLE:
                title = self._title_view(value)
            elif tag == tags.BUTTONS:
                buttons = self._buttons(value)
            elif tag in POPUP_TAGS:
                self._settings.set(tag, value)
            else:
                frame_params[tag] = value

        session = self.session
        popup_view = GridLayout(
            session,
            {
                tags.STYLE: "ruiPopup",
                tags.MAX_WIDTH: percent(100),
                tags.MAX_HEIGHT: percent(100),
                tags.CELL_VERTICAL_ALIGN: "stretch",
                tags.CELL_HORIZONTAL_ALIGN: "stretch",
                # Clicks inside the popup never reach the layer
                names.CLICK_EVENT: lambda: None,
            },
        )
        popup_view.set_params(frame_params)

        cell_height: list[SizeUnit | str] = []
        view_row = 0
        if title is not None or self.close_button:
            view_row = 1
            popup_view.append(self._title_bar(title))
            cell_height.append(SizeUnit())

        view.set(tags.ROW, view_row)
        popup_view.append(view)
        cell_height.append(fr(1))

        if buttons:
            popup_view.append(self._buttons_row(buttons, view_row + 1))
            cell_height.append(SizeUnit())
        popup_view.set(tags.CELL_HEIGHT, cell_height)
        self.popup_view = popup_view

        self.layer_view = GridLayout(
            session,
            {
                tags.STYLE: "ruiPopupLayer",
                tags.CELL_VERTICAL_ALIGN: _enum_text(
                    tags.VERTICAL_ALIGN, enum_property(self._settings, tags.VERTICAL_ALIGN, session, VerticalAlign.CENTER)
                ),
                tags.CELL_HORIZONTAL_ALIGN: _enum_text(
                    tags.HORIZONTAL_ALIGN,
                    enum_property(self._settings, tags.HORIZONTAL_ALIGN, session, HorizontalAlign.CENTER),
                ),
                tags.MAX_WIDTH: percent(100),
                tags.MAX_HEIGHT: percent(100),
                tags.CONTENT: ColumnLayout(session, {tags.CONTENT: self._framed(popup_view)}),
            },
        )
        if self.outside_close:
            self.layer_view.set(names.CLICK_EVENT, self.dismiss)

    def __repr__(self) -> str:
        return f"Popup({self.view!r})"

    # ========================================================================
    # Settings
    # ========================================================================

    @property
    def close_button(self) -> bool:
        return bool(bool_property(self._settings, tags.CLOSE_BUTTON, self.session))

    @property
    def outside_close(self) -> bool:
        return bool(bool_property(self._settings, tags.OUTSIDE_CLOSE, self.session))

    def arrow(self) -> int:
        return enum_property(self._settings, tags.ARROW, self.session)

    def _title_view(self, value: Any) -> View | None:
        if isinstance(value, View):
            return value
        if isinstance(value, str):
            return TextView(self.session, {tags.TEXT: value})
        report_error(IncompatibleTypeError(f"invalid popup title: {value!r}", tag=tags.TITLE, value=repr(value)))
        return None

    def _buttons(self, value: Any) -> list[PopupButton]:
        if isinstance(value, PopupButton):
            return [value]
        if isinstance(value, (list, tuple)) and all(isinstance(item, PopupButton) for item in value):
            return list(value)
        report_error(IncompatibleTypeError(f"invalid popup buttons: {value!r}", tag=tags.BUTTONS, value=repr(value)))
        return []

    # ========================================================================
    # Frame
    # ========================================================================

    def _title_bar(self, title: View | None) -> GridLayout:
        session = self.session
        title_height = "@ruiPopupTitleHeight"
        title_bar = GridLayout(
            session,
            {
                tags.ROW: 0,
                tags.STYLE: string_property(self._settings, tags.TITLE_STYLE, session) or "ruiPopupTitle",
                tags.CELL_WIDTH: [fr(1), title_height],
                tags.CELL_VERTICAL_ALIGN: "center",
                tags.PADDING_LEFT: px(12),
            },
        )
        if title is not None:
            title_bar.append(title)
        if self.close_button:
            title_bar.append(
                GridLayout(
                    session,
                    {
                        tags.COLUMN: 1,
                        tags.WIDTH: title_height,
                        tags.HEIGHT: title_height,
                        tags.CELL_HORIZONTAL_ALIGN: "center",
                        tags.CELL_VERTICAL_ALIGN: "center",
                        tags.TEXT_SIZE: px(20),
                        tags.CONTENT: "✕",
                        names.CLICK_EVENT: self.dismiss,
                    },
                )
            )
        return title_bar

    def _buttons_row(self, buttons: list[PopupButton], row: int) -> GridLayout:
        session = self.session
        panel = GridLayout(session, {tags.STYLE: "ruiPopupButtons", tags.CELL_WIDTH: [fr(1)] * len(buttons)})
        for column, button in enumerate(buttons):
            panel.append(
                Button(
                    session,
                    {tags.COLUMN: column, tags.CONTENT: button.title, names.CLICK_EVENT: self._button_click(button)},
                )
            )
        align = enum_property(self._settings, tags.BUTTONS_ALIGN, session, HorizontalAlign.RIGHT)
        return GridLayout(
            session,
            {
                tags.ROW: row,
                tags.CELL_HORIZONTAL_ALIGN: _enum_text(tags.BUTTONS_ALIGN, align),
                tags.CONTENT: panel,
            },
        )

    def _button_click(self, button: PopupButton) -> Callable[[], None]:
        def click() -> None:
            if button.on_click is not None:
                button.on_click(self)
            else:
                self.dismiss()

        return click

    def _framed(self, popup_view: GridLayout) -> View:
        position = self.arrow()
        if position == ArrowPosition.NONE:
            return popup_view
        session = self.session
        (popup_row, popup_column), (arrow_row, arrow_column) = arrow_cells(position)
        popup_view.set(tags.ROW, popup_row)
        popup_view.set(tags.COLUMN, popup_column)
        arrow = self._arrow_view(position)
        arrow.set(tags.ROW, arrow_row)
        arrow.set(tags.COLUMN, arrow_column)
        return GridLayout(
            session,
            {
                tags.CELL_WIDTH: [SizeUnit(), SizeUnit(), SizeUnit()],
                tags.CELL_HEIGHT: [SizeUnit(), SizeUnit(), SizeUnit()],
                tags.CONTENT: [popup_view, arrow],
            },
        )

    def _arrow_view(self, position: int) -> View:
        """Border triangle pointing away from the popup."""
        session = self.session
        size = size_property(self._settings, tags.ARROW_SIZE, session) or DEFAULT_ARROW_SIZE
        width = size_property(self._settings, tags.ARROW_WIDTH, session) or DEFAULT_ARROW_WIDTH
        offset = size_property(self._settings, tags.ARROW_OFFSET, session)
        half = SizeUnit(width.type, width.value / 2)
        color = "@ruiPopupBackgroundColor"

        vertical = position in (ArrowPosition.TOP, ArrowPosition.BOTTOM)
        # The side facing the popup carries the color
        solid_side = {
            ArrowPosition.TOP: "bottom",
            ArrowPosition.BOTTOM: "top",
            ArrowPosition.LEFT: "right",
            ArrowPosition.RIGHT: "left",
        }[position]
        sides = ("left", "right") if vertical else ("top", "bottom")
        params: dict[str, Any] = {tags.WIDTH: px(0), tags.HEIGHT: px(0)}
        for side in sides:
            params[f"border-{side}-style"] = "solid"
            params[f"border-{side}-width"] = half
            params[f"border-{side}-color"] = "transparent"
        params[f"border-{solid_side}-style"] = "solid"
        params[f"border-{solid_side}-width"] = size
        params[f"border-{solid_side}-color"] = color

        align = enum_property(self._settings, tags.ARROW_ALIGN, session, ArrowAlign.CENTER)
        if vertical:
            params[tags.CELL_HORIZONTAL_SELF_ALIGN] = ("left", "right", "center")[align]
        else:
            params[tags.CELL_VERTICAL_SELF_ALIGN] = ("top", "bottom", "center")[align]
        if offset is not None and offset.value:
            if align == ArrowAlign.END:
                params[tags.MARGIN_RIGHT if vertical else tags.MARGIN_BOTTOM] = offset
            else:
                params[tags.MARGIN_LEFT if vertical else tags.MARGIN_TOP] = offset
        logger.debug("popup_arrow", side=solid_side, size=size.css_string(), width=format_float(width.value))
        return View(session, params)

    # ========================================================================
    # Show / dismiss
    # ========================================================================

    def show(self) -> None:
        self.session.popups.show(self)

    def dismiss(self) -> None:
        """Remove the popup from the screen and notify the dismiss listeners."""
        if self.session.popups.dismiss(self):
            fire(self._dismiss_listeners, self)

    def add_dismiss_listener(self, fn: Callable[..., Any]) -> None:
        self._dismiss_listeners += listeners_from_value(names.DISMISS_EVENT, fn)

    def render(self, buffer: list[str]) -> None:
        self.layer_view.render(buffer)

    def detach(self) -> None:
        self.layer_view.detach()
