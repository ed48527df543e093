"""Image view: an ``<img>`` inside a sizing box."""

from html import escape

from ..data import DataObject
from ..events import fire, names
from ..properties import ENUM_PROPERTIES, enum_property, string_property, tags
from .factory import register_view_creator
from .view import View

_IMAGE_TAGS = frozenset({tags.SOURCE, tags.ALT_TEXT, tags.FIT})


class ImageView(View):
    """
    Displays the image at ``src``.

    ``@name`` sources resolve through the theme's image constants (with the
    dark variant in dark mode). Browser load results arrive as
    ``loaded-event`` and ``error-event``.
    """

    view_tag = "ImageView"
    system_class = "ruiImageView"

    def source(self) -> str:
        src = string_property(self, tags.SOURCE, self.session) or ""
        if src.startswith("@"):
            src = self.session.image_constant(src[1:]) or ""
        return src

    def image_html(self) -> str:
        html_id = self.html_id()
        src = self.source()
        if not src:
            return ""
        attributes = [f'<img id="{html_id}image" src="{escape(src)}"']
        alt = string_property(self, tags.ALT_TEXT, self.session)
        if alt:
            attributes.append(f' alt="{escape(self.session.get_string(alt))}"')
        fit = enum_property(self, tags.FIT, self.session)
        if fit > 0:
            attributes.append(f' style="object-fit: {ENUM_PROPERTIES[tags.FIT].css_value(fit)};"')
        attributes.append(' onload="imageViewLoaded(this, event)" onerror="imageViewError(this, event)">')
        return "".join(attributes)

    def html_subviews(self, buffer: list[str]) -> None:
        buffer.append(self.image_html())

    def property_changed(self, tag: str) -> None:
        if tag in _IMAGE_TAGS:
            self.session.update_inner_html(self.html_id(), self.image_html())
        else:
            super().property_changed(tag)

    def handle_command(self, command: str, data: DataObject) -> bool:
        if command == "imageViewLoaded":
            fire(self.listeners(names.IMAGE_LOADED_EVENT), self)
        elif command == "imageViewError":
            fire(self.listeners(names.IMAGE_ERROR_EVENT), self, data.property_value("message") or "")
        else:
            return super().handle_command(command, data)
        return True


register_view_creator(ImageView)
