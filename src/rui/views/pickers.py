"""
Pickers
Number, date, time and color inputs and the drop-down list.

Each picker keeps its value in one property. Values typed or chosen in the
browser arrive as ``textChanged`` (``itemSelected`` for the drop-down
list), are stored without being echoed back, and reach the change
listeners as ``(new value, old value)``. Values set on the server are sent
to the element with ``setInputValue``.
"""

from datetime import date, datetime, time
from html import escape
from typing import Any, Callable

from ..core.errors import IncompatibleTypeError, InvalidFormatError
from ..core.logging_config import get_logger
from ..data import DataObject
from ..events import fire, names
from ..properties import ENUM_PROPERTIES, color_property, enum_property, float_property, int_property, tags
from ..values import Color, format_float, parse_color, parse_float, parse_int
from .factory import register_view_creator
from .list_view import index_list, text_list
from .view import View

logger = get_logger(__name__)

SLIDER = 1

HTML_DATE_FORMAT = "%Y-%m-%d"
DATE_FORMATS = (
    HTML_DATE_FORMAT,
    "%b-%d-%y",
    "%b-%d-%Y",
    "%d-%b-%Y",
    "%B %d, %Y",
    "%d %B %Y",
    "%m/%d/%y",
    "%m/%d/%Y",
    "%m%d%y",
    "%Y%m%d",
)
TIME_FORMATS = ("%H:%M", "%H:%M:%S", "%I:%M %p", "%I:%M%p")

_UNSET = object()


def _parse_formats(tag: str, text: str, formats: tuple[str, ...], convert: Callable[[datetime], Any]) -> Any:
    for text_format in formats:
        try:
            return convert(datetime.strptime(text, text_format))
        except ValueError:
            continue
    raise InvalidFormatError(f'invalid "{tag}" value: "{text}"', tag=tag, value=text)


def to_date(tag: str, value: Any) -> date | None:
    """
    Date of a ``date-picker-*`` value.

    Returns:
        The date, or None for an empty string

    Raises:
        IncompatibleTypeError: If the value is not a date, datetime or string
        InvalidFormatError: If a string matches none of the accepted formats
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        return _parse_formats(tag, text, DATE_FORMATS, lambda parsed: parsed.date())
    raise IncompatibleTypeError(
        f'invalid value type of "{tag}" property: {type(value).__name__}', tag=tag, value=repr(value)
    )


def to_time(tag: str, value: Any) -> time | None:
    """Time of a ``time-picker-*`` value; None for an empty string."""
    if isinstance(value, datetime):
        return value.time()
    if isinstance(value, time):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        return _parse_formats(tag, text, TIME_FORMATS, lambda parsed: parsed.time())
    raise IncompatibleTypeError(
        f'invalid value type of "{tag}" property: {type(value).__name__}', tag=tag, value=repr(value)
    )


class InputPicker(View):
    """
    Common part of the ``<input>`` based pickers.

    Subclasses name their value tag, limit tags and change event, and
    convert values to and from the text form the element uses.
    """

    html_disabled = True
    focusable_by_default = True

    input_type = "text"
    value_tag = ""
    min_tag = ""
    max_tag = ""
    step_tag = ""
    changed_event = ""

    def __init__(self, session, params: dict[str, Any] | DataObject | None = None):
        self._last_value: Any = _UNSET
        super().__init__(session, params)
        self._last_value = self.value()

    def value(self) -> Any:
        return self.get(self.value_tag)

    def set_value(self, value: Any) -> bool:
        return self.set(self.value_tag, value)

    def format_value(self, value: Any) -> str:
        raise NotImplementedError

    def parse_input(self, text: str) -> Any:
        """Value of the element text, or None if it does not parse."""
        raise NotImplementedError

    def input_type_attribute(self) -> str:
        return self.input_type

    def limit_attributes(self) -> dict[str, str]:
        """``min``, ``max`` and ``step`` attributes that are set."""
        result = {}
        for attribute, tag in (("min", self.min_tag), ("max", self.max_tag)):
            value = self.get(tag) if tag else None
            if value is not None:
                result[attribute] = self.format_value(value)
        step = int_property(self, self.step_tag, self.session) if self.step_tag else None
        if step is not None and step > 0:
            result["step"] = str(step)
        return result

    def _limit_attribute(self, tag: str) -> str:
        if tag == self.min_tag:
            return "min"
        if tag == self.max_tag:
            return "max"
        if tag == self.step_tag:
            return "step"
        return ""

    def _apply_changes(self, changed: list[str]) -> None:
        super()._apply_changes(changed)
        if self.value_tag in changed:
            self._value_changed()

    def _value_changed(self) -> None:
        value = self.value()
        old, self._last_value = self._last_value, value
        if old is not _UNSET and old != value:
            fire(self.listeners(self.changed_event), self, value, old)

    # ========================================================================
    # HTML
    # ========================================================================

    def html_tag(self) -> str:
        return "input"

    def html_properties(self, buffer: list[str], disabled: bool) -> None:
        super().html_properties(buffer, disabled)
        buffer.append(f' type="{self.input_type_attribute()}"')
        for attribute, text in self.limit_attributes().items():
            buffer.append(f' {attribute}="{escape(text)}"')
        value = self.value()
        if value is not None:
            buffer.append(f' value="{escape(self.format_value(value))}"')

    def html_events(self, buffer: list[str]) -> None:
        super().html_events(buffer)
        buffer.append(' oninput="editViewInputEvent(this)"')

    def send_value(self) -> None:
        value = self.value()
        text = "" if value is None else self.format_value(value)
        self.session.call_function("setInputValue", self.html_id(), text)

    def property_changed(self, tag: str) -> None:
        attribute = self._limit_attribute(tag)
        if tag == self.value_tag:
            self.send_value()
        elif attribute:
            value = self.limit_attributes().get(attribute)
            if value is None:
                self.session.remove_property(self.html_id(), attribute)
            else:
                self.session.update_property(self.html_id(), attribute, value)
        else:
            super().property_changed(tag)

    # ========================================================================
    # Events
    # ========================================================================

    def handle_command(self, command: str, data: DataObject) -> bool:
        if command == "textChanged":
            text = data.property_value("text") or ""
            value = self.parse_input(text)
            if value is None:
                logger.debug("picker_input_ignored", view=self.view_tag, text=text)
            elif value != self.value():
                self._properties[self.value_tag] = value
                # The client already shows the value
                super(View, self)._apply_changes([self.value_tag])
                self._value_changed()
            return True
        return super().handle_command(command, data)


class NumberPicker(InputPicker):
    """A number editor or a slider (``number-picker-type``)."""

    view_tag = "NumberPicker"
    default_style = "ruiNumberPicker"
    value_tag = tags.NUMBER_PICKER_VALUE
    min_tag = tags.NUMBER_PICKER_MIN
    max_tag = tags.NUMBER_PICKER_MAX
    step_tag = tags.NUMBER_PICKER_STEP
    changed_event = names.NUMBER_CHANGED_EVENT

    aliases = {
        **View.aliases,
        "type": tags.NUMBER_PICKER_TYPE,
        "min": tags.NUMBER_PICKER_MIN,
        "max": tags.NUMBER_PICKER_MAX,
        "step": tags.NUMBER_PICKER_STEP,
        "value": tags.NUMBER_PICKER_VALUE,
        "precision": tags.NUMBER_PICKER_PRECISION,
    }

    def value(self) -> float:
        value = float_property(self, tags.NUMBER_PICKER_VALUE, self.session)
        return 0.0 if value is None else value

    def is_slider(self) -> bool:
        return enum_property(self, tags.NUMBER_PICKER_TYPE, self.session) == SLIDER

    def input_type_attribute(self) -> str:
        picker_type = enum_property(self, tags.NUMBER_PICKER_TYPE, self.session)
        return ENUM_PROPERTIES[tags.NUMBER_PICKER_TYPE].css_value(picker_type) or "number"

    def min_max(self) -> tuple[float | None, float | None]:
        """Limits; a slider without limits runs from 0 to 1."""
        low = float_property(self, tags.NUMBER_PICKER_MIN, self.session)
        high = float_property(self, tags.NUMBER_PICKER_MAX, self.session)
        if self.is_slider():
            low = 0.0 if low is None else low
            high = 1.0 if high is None else high
        return low, high

    def format_value(self, value: Any) -> str:
        precision = int_property(self, tags.NUMBER_PICKER_PRECISION, self.session)
        if precision is not None and precision > 0:
            return f"{value:.{precision}f}"
        return format_float(value)

    def parse_input(self, text: str) -> float | None:
        return parse_float(text)

    def limit_attributes(self) -> dict[str, str]:
        result = {}
        for attribute, limit in zip(("min", "max"), self.min_max()):
            if limit is not None and abs(limit) != float("inf"):
                result[attribute] = format_float(limit)
        step = float_property(self, tags.NUMBER_PICKER_STEP, self.session)
        result["step"] = format_float(step) if step else "any"
        return result

    def property_changed(self, tag: str) -> None:
        if tag == tags.NUMBER_PICKER_TYPE:
            html_id = self.html_id()
            self.session.update_property(html_id, "type", self.input_type_attribute())
            for attribute in ("min", "max"):
                value = self.limit_attributes().get(attribute)
                if value is None:
                    self.session.remove_property(html_id, attribute)
                else:
                    self.session.update_property(html_id, attribute, value)
        elif tag == tags.NUMBER_PICKER_PRECISION:
            self.send_value()
        else:
            super().property_changed(tag)


class DatePicker(InputPicker):
    """A ``<input type="date">``; values are ``datetime.date``."""

    view_tag = "DatePicker"
    default_style = "ruiDatePicker"
    input_type = "date"
    value_tag = tags.DATE_PICKER_VALUE
    min_tag = tags.DATE_PICKER_MIN
    max_tag = tags.DATE_PICKER_MAX
    step_tag = tags.DATE_PICKER_STEP
    changed_event = names.DATE_CHANGED_EVENT

    aliases = {
        **View.aliases,
        "min": tags.DATE_PICKER_MIN,
        "max": tags.DATE_PICKER_MAX,
        "step": tags.DATE_PICKER_STEP,
        "value": tags.DATE_PICKER_VALUE,
    }

    _DATE_TAGS = frozenset({tags.DATE_PICKER_MIN, tags.DATE_PICKER_MAX, tags.DATE_PICKER_VALUE})

    def _set(self, tag: str, value: Any) -> list[str]:
        if tag in self._DATE_TAGS:
            converted = to_date(tag, value)
            return self._remove(tag) if converted is None else self._store(tag, converted)
        return super()._set(tag, value)

    def format_value(self, value: date) -> str:
        return value.strftime(HTML_DATE_FORMAT)

    def parse_input(self, text: str) -> date | None:
        try:
            return datetime.strptime(text.strip(), HTML_DATE_FORMAT).date()
        except ValueError:
            return None


class TimePicker(InputPicker):
    """A ``<input type="time">``; values are ``datetime.time``, the step is in seconds."""

    view_tag = "TimePicker"
    default_style = "ruiTimePicker"
    input_type = "time"
    value_tag = tags.TIME_PICKER_VALUE
    min_tag = tags.TIME_PICKER_MIN
    max_tag = tags.TIME_PICKER_MAX
    step_tag = tags.TIME_PICKER_STEP
    changed_event = names.TIME_CHANGED_EVENT

    aliases = {
        **View.aliases,
        "min": tags.TIME_PICKER_MIN,
        "max": tags.TIME_PICKER_MAX,
        "step": tags.TIME_PICKER_STEP,
        "value": tags.TIME_PICKER_VALUE,
    }

    _TIME_TAGS = frozenset({tags.TIME_PICKER_MIN, tags.TIME_PICKER_MAX, tags.TIME_PICKER_VALUE})

    def _set(self, tag: str, value: Any) -> list[str]:
        if tag in self._TIME_TAGS:
            converted = to_time(tag, value)
            return self._remove(tag) if converted is None else self._store(tag, converted)
        return super()._set(tag, value)

    def format_value(self, value: time) -> str:
        return value.strftime("%H:%M:%S" if value.second else "%H:%M")

    def parse_input(self, text: str) -> time | None:
        for text_format in ("%H:%M", "%H:%M:%S"):
            try:
                return datetime.strptime(text.strip(), text_format).time()
            except ValueError:
                continue
        return None


class ColorPicker(InputPicker):
    """A ``<input type="color">``; the value defaults to black."""

    view_tag = "ColorPicker"
    default_style = "ruiColorPicker"
    input_type = "color"
    value_tag = tags.COLOR_PICKER_VALUE
    changed_event = names.COLOR_CHANGED_EVENT

    aliases = {**View.aliases, "value": tags.COLOR_PICKER_VALUE}

    def value(self) -> Color:
        color = color_property(self, tags.COLOR_PICKER_VALUE, self.session)
        return Color(0xFF000000) if color is None else color

    def format_value(self, value: Color) -> str:
        return value.rgb_string().lower()

    def parse_input(self, text: str) -> Color | None:
        try:
            return parse_color(text)
        except InvalidFormatError:
            return None


class DropDownList(View):
    """
    A ``<select>`` of text items.

    ``current`` is the selected index; indexes listed in ``disabled-items``
    cannot be chosen. ``drop-down-event`` listeners get
    ``(new index, old index)``.
    """

    view_tag = "DropDownList"
    default_style = "ruiDropDownList"
    html_disabled = True
    focusable_by_default = True

    def __init__(self, session, params: dict[str, Any] | DataObject | None = None):
        self._last_current: int | None = None
        super().__init__(session, params)
        self._last_current = self.current()

    def items(self) -> list[str]:
        return list(self._properties.get(tags.ITEMS) or [])

    def disabled_items(self) -> list[int]:
        return list(self._properties.get(tags.DISABLED_ITEMS) or [])

    def current(self) -> int:
        current = int_property(self, tags.CURRENT, self.session)
        return 0 if current is None else current

    def _set(self, tag: str, value: Any) -> list[str]:
        if tag == tags.ITEMS:
            items = text_list(tag, value)
            return self._store(tag, items) if items else self._remove(tag)
        if tag == tags.DISABLED_ITEMS:
            indexes = index_list(tag, value)
            return self._store(tag, indexes) if indexes else self._remove(tag)
        return super()._set(tag, value)

    def _apply_changes(self, changed: list[str]) -> None:
        super()._apply_changes(changed)
        if tags.CURRENT in changed:
            self._current_changed()

    def _current_changed(self) -> None:
        current = self.current()
        old, self._last_current = self._last_current, current
        if old is not None and old != current:
            fire(self.listeners(names.DROP_DOWN_EVENT), self, current, old)

    # ========================================================================
    # HTML
    # ========================================================================

    def html_tag(self) -> str:
        return "select"

    def html_properties(self, buffer: list[str], disabled: bool) -> None:
        super().html_properties(buffer, disabled)
        buffer.append(' size="1"')

    def html_events(self, buffer: list[str]) -> None:
        super().html_events(buffer)
        buffer.append(' onchange="dropDownListEvent(this, event)"')

    def html_subviews(self, buffer: list[str]) -> None:
        current = self.current()
        disabled = set(self.disabled_items())
        for index, item in enumerate(self.items()):
            buffer.append("<option")
            if index == current:
                buffer.append(" selected")
            if index in disabled:
                buffer.append(" disabled")
            buffer.append(f">{escape(self.session.get_string(item))}</option>")

    def property_changed(self, tag: str) -> None:
        if tag in (tags.ITEMS, tags.DISABLED_ITEMS):
            self.update_inner_html()
        elif tag == tags.CURRENT:
            self.session.call_function("selectDropDownListItem", self.html_id(), self.current())
        else:
            super().property_changed(tag)

    def handle_command(self, command: str, data: DataObject) -> bool:
        if command == "itemSelected":
            number = parse_int(data.property_value("number") or "")
            if number is None or not 0 <= number < len(self.items()):
                logger.error("drop_down_item_out_of_range", number=data.property_value("number"))
            elif number != self.current():
                self._properties[tags.CURRENT] = number
                super(View, self)._apply_changes([tags.CURRENT])
                self._current_changed()
            return True
        return super().handle_command(command, data)


register_view_creator(NumberPicker)
register_view_creator(DatePicker)
register_view_creator(TimePicker)
register_view_creator(ColorPicker)
register_view_creator(DropDownList)
