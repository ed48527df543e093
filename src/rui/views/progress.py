"""Progress bar: a ``<progress>`` element."""

from ..properties import float_property, tags
from ..values import format_float
from .factory import register_view_creator
from .view import View

_ATTRIBUTES = {tags.PROGRESS_BAR_MAX: "max", tags.PROGRESS_BAR_VALUE: "value"}


class ProgressBar(View):
    """Shows ``progress-value`` out of ``progress-max`` (default 1)."""

    view_tag = "ProgressBar"
    default_style = "ruiProgressBar"

    aliases = {
        **View.aliases,
        "max": tags.PROGRESS_BAR_MAX,
        "progress-bar-max": tags.PROGRESS_BAR_MAX,
        "value": tags.PROGRESS_BAR_VALUE,
        "progress-bar-value": tags.PROGRESS_BAR_VALUE,
    }

    def max_value(self) -> float:
        value = float_property(self, tags.PROGRESS_BAR_MAX, self.session)
        return 1.0 if value is None else value

    def value(self) -> float:
        value = float_property(self, tags.PROGRESS_BAR_VALUE, self.session)
        return 0.0 if value is None else value

    def html_tag(self) -> str:
        return "progress"

    def html_properties(self, buffer: list[str], disabled: bool) -> None:
        super().html_properties(buffer, disabled)
        buffer.append(f' max="{format_float(self.max_value())}" value="{format_float(self.value())}"')

    def property_changed(self, tag: str) -> None:
        if tag == tags.PROGRESS_BAR_MAX:
            self.session.update_property(self.html_id(), _ATTRIBUTES[tag], self.max_value())
        elif tag == tags.PROGRESS_BAR_VALUE:
            self.session.update_property(self.html_id(), _ATTRIBUTES[tag], self.value())
        else:
            super().property_changed(tag)


register_view_creator(ProgressBar)
