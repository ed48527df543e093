"""
Theme
Named constants, colors, images and styles, plus @media style variants.

A theme is built from ``theme { ... }`` .rui text. Constant lookups
follow ``@name`` chains, prefer touch/dark variants when asked, and detect
reference cycles.
"""

import re
from dataclasses import dataclass, field, replace

from ..core.errors import DataParseError, InvalidFormatError, report_error
from ..core.logging_config import get_logger
from ..data import DataObject, NodeType, parse_data
from ..properties import node_to_value
from ..styles import CSSStyleBuilder, ViewStyle
from ..values import Color, parse_color

logger = get_logger(__name__)

# Separators that split a composite constant value, in search order
CONSTANT_SEPARATORS = ",:;|/ "

_SIZE_RULE = re.compile(r"^(width|height)(\d*)(?:-(\d*))?$")


class MediaOrientation:
    DEFAULT = 0
    PORTRAIT = 1
    LANDSCAPE = 2


@dataclass
class MediaRule:
    """A ``styles:<qualifiers>`` section: styles that apply under @media conditions."""

    orientation: int = MediaOrientation.DEFAULT
    min_width: int = 0
    max_width: int = 0
    min_height: int = 0
    max_height: int = 0
    styles: dict[str, ViewStyle] = field(default_factory=dict)

    def key(self) -> tuple[int, int, int, int, int]:
        return self.orientation, self.min_width, self.min_height, self.max_width, self.max_height

    def css_text(self) -> str:
        text = ""
        if self.orientation == MediaOrientation.PORTRAIT:
            text += " and (orientation: portrait)"
        elif self.orientation == MediaOrientation.LANDSCAPE:
            text += " and (orientation: landscape)"

        for name, low, high in (
            ("width", self.min_width, self.max_width),
            ("height", self.min_height, self.max_height),
        ):
            if low != high:
                if low > 0:
                    text += f" and (min-{name}: {low}.001px)"
                if high > 0:
                    text += f" and (max-{name}: {high}px)"
            elif low > 0:
                text += f" and ({name}: {low}px)"
        return text


def parse_media_rule(section: str) -> MediaRule:
    """
    Parse a ``styles:portrait:width320-640`` section name.

    Raises:
        InvalidFormatError: On unknown, duplicate or empty qualifiers
    """
    rule = MediaRule()
    for element in section.split(":")[1:]:
        if element in ("portrait", "landscape"):
            if rule.orientation != MediaOrientation.DEFAULT:
                raise InvalidFormatError(f'duplicate orientation in "{section}"', value=section)
            rule.orientation = (
                MediaOrientation.PORTRAIT if element == "portrait" else MediaOrientation.LANDSCAPE
            )
            continue

        match = _SIZE_RULE.match(element)
        if match is None:
            raise InvalidFormatError(f'unknown element "{element}" in "{section}"', value=section)
        name, first, second = match.groups()
        if second is None:
            low, high = 0, int(first) if first else 0
        else:
            low, high = int(first or 0), int(second or 0)
        if low == 0 and high == 0:
            raise InvalidFormatError(f'invalid "{name}" arguments in "{section}"', value=section)
        if getattr(rule, f"min_{name}") or getattr(rule, f"max_{name}"):
            raise InvalidFormatError(f'duplicate "{name}" in "{section}"', value=section)
        setattr(rule, f"min_{name}", low)
        setattr(rule, f"max_{name}", high)
    return rule


def _style_from_object(obj: DataObject) -> ViewStyle:
    style = ViewStyle()
    for node in obj.nodes:
        style.set(node.tag, node_to_value(node))
    return style


def _style_names(styles: dict[str, ViewStyle]) -> list[str]:
    """``rui*`` styles first, then the rest, each group sorted."""
    system = sorted(name for name in styles if name.startswith("rui"))
    custom = sorted(name for name in styles if not name.startswith("rui"))
    return system + custom


class Theme:
    """Constants, colors, images and styles of one theme."""

    def __init__(self, name: str = ""):
        self.name = name
        self.constants: dict[str, str] = {}
        self.touch_constants: dict[str, str] = {}
        self.colors: dict[str, str] = {}
        self.dark_colors: dict[str, str] = {}
        self.images: dict[str, str] = {}
        self.dark_images: dict[str, str] = {}
        self.styles: dict[str, ViewStyle] = {}
        self.media_rules: list[MediaRule] = []

    # ========================================================================
    # Loading
    # ========================================================================

    def add_text(self, text: str) -> bool:
        """
        Merge ``theme { ... }`` text into this theme.

        Returns:
            False if the text does not parse or is not a theme
        """
        try:
            data = parse_data(text)
        except DataParseError as e:
            report_error(e, source="theme")
            return False
        if data.tag != "theme":
            return False
        self.add_object(data)
        return True

    def add_object(self, data: DataObject) -> None:
        sections = {
            "constants": self.constants,
            "constants:touch": self.touch_constants,
            "colors": self.colors,
            "colors:dark": self.dark_colors,
            "images": self.images,
            "images:dark": self.dark_images,
        }
        for node in data.nodes:
            if node.tag == "name" and node.type == NodeType.TEXT:
                self.name = node.text
            elif node.tag in sections and node.type == NodeType.OBJECT:
                target = sections[node.tag]
                for item in node.object.nodes:
                    if item.type == NodeType.TEXT:
                        target[item.tag] = item.text
            elif node.tag == "styles" and node.type == NodeType.ARRAY:
                for item in node.array:
                    if isinstance(item, DataObject):
                        self.styles[item.tag] = _style_from_object(item)
            elif node.tag.startswith("styles:") and node.type == NodeType.ARRAY:
                try:
                    rule = parse_media_rule(node.tag)
                except InvalidFormatError as e:
                    report_error(e, source="theme")
                    continue
                for item in node.array:
                    if isinstance(item, DataObject):
                        rule.styles[item.tag] = _style_from_object(item)
                self._add_media_rule(rule)

    def _add_media_rule(self, rule: MediaRule) -> None:
        for existing in self.media_rules:
            if existing.key() == rule.key():
                existing.styles.update(rule.styles)
                return
        self.media_rules.append(rule)
        self.media_rules.sort(key=MediaRule.key)

    def append(self, other: "Theme") -> None:
        """Overlay another theme's entries on this one."""
        self.constants.update(other.constants)
        self.touch_constants.update(other.touch_constants)
        self.colors.update(other.colors)
        self.dark_colors.update(other.dark_colors)
        self.images.update(other.images)
        self.dark_images.update(other.dark_images)
        self.styles.update(other.styles)
        for rule in other.media_rules:
            self._add_media_rule(replace(rule, styles=dict(rule.styles)))

    def copy(self) -> "Theme":
        result = Theme(self.name)
        result.append(self)
        return result

    def style(self, name: str) -> ViewStyle | None:
        return self.styles.get(name)

    def set_style(self, name: str, style: ViewStyle | None) -> None:
        if style is None:
            self.styles.pop(name, None)
        else:
            self.styles[name] = style

    # ========================================================================
    # Constant resolution
    # ========================================================================

    def constant(self, name: str, touch: bool = False, _chain: tuple[str, ...] = ()) -> str | None:
        """Value of a constant with every ``@`` reference in it resolved."""
        chain = _chain + (name,)
        while True:
            value = self.touch_constants.get(name) if touch else None
            if value is None:
                value = self.constants.get(name)
            if value is None:
                logger.warning("constant_not_found", constant=name)
                return None
            if len(value) < 2 or "@" not in value:
                return value
            if any(separator in value for separator in CONSTANT_SEPARATORS):
                return self.resolve_constants(value, touch, chain)
            if value[0] != "@":
                return value
            name = value[1:]
            if name in chain:
                logger.error("constant_cycle", constant=name)
                return None
            chain += (name,)

    def resolve_constants(self, value: str, touch: bool = False, _chain: tuple[str, ...] = ()) -> str | None:
        """Resolve every ``@name`` in a composite value split on the first separator."""
        if "@" not in value:
            return value
        positions = [(value.find(sep), sep) for sep in CONSTANT_SEPARATORS if sep in value]
        if not positions:
            if value[0] == "@":
                return self.constant(value[1:], touch, _chain)
            return None

        index, separator = min(positions)
        head = value[:index].strip()
        tail = value[index + 1:].strip()
        if len(head) > 1 and head[0] == "@":
            resolved = self.constant(head[1:], touch, _chain)
            if resolved is None:
                return None
            head = resolved
        resolved_tail = self.resolve_constants(tail, touch, _chain)
        if resolved_tail is None:
            return None
        return head + separator + resolved_tail

    def _follow(self, name: str, primary: dict[str, str] | None, fallback: dict[str, str], kind: str) -> str | None:
        chain = [name]
        while True:
            value = primary.get(name) if primary is not None else None
            if value is None:
                value = fallback.get(name)
            if value is None:
                logger.warning(f"{kind}_not_found", constant=name)
                return None
            if not value or value[0] != "@":
                return value
            name = value[1:]
            if name in chain:
                logger.error(f"{kind}_cycle", constant=name)
                return None
            chain.append(name)

    def color(self, name: str, dark: bool = False) -> Color | None:
        text = self._follow(name, self.dark_colors if dark else None, self.colors, "color")
        if text is None:
            return None
        try:
            return parse_color(text)
        except InvalidFormatError as e:
            report_error(e, constant=name)
            return None

    def image(self, name: str, dark: bool = False) -> str | None:
        return self._follow(name, self.dark_images if dark else None, self.images, "image")

    # ========================================================================
    # Style sheet
    # ========================================================================

    def css_text(self, session) -> str:
        """Style sheet of every style, then the @media blocks."""
        builder = CSSStyleBuilder()
        for name in _style_names(self.styles):
            builder.start_style(name)
            self.styles[name].css_view_style(builder, session)
            builder.end_style()

        for rule in self.media_rules:
            builder.start_media(rule.css_text())
            for name in _style_names(rule.styles):
                builder.start_style(name)
                rule.styles[name].css_view_style(builder, session)
                builder.end_style()
            builder.end_media()
        return builder.finish()


def create_theme_from_text(text: str) -> Theme | None:
    theme = Theme()
    return theme if theme.add_text(text) else None
