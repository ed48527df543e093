"""
CSS text builders.

The builders share the ``add``/``add_values`` interface so property
serializers can write into any of them:

- ``CSSBuilder``: inline declaration list ``key: value; key2: value2;``
- ``CSSValueBuilder``: values only, used to compute a single CSS value
- ``CSSStyleBuilder``: a style sheet with rules, @media blocks and @keyframes
- ``CSSDeclarations``: an ordered mapping, diffed to send only changed declarations
"""

from typing import Protocol

# Theme styles rendered as element selectors instead of classes
SYSTEM_STYLES = {
    "ruiApp": "body",
    "ruiDefault": "div",
    "ruiArticle": "article",
    "ruiSection": "section",
    "ruiAside": "aside",
    "ruiHeader": "header",
    "ruiMain": "main",
    "ruiFooter": "footer",
    "ruiNavigation": "nav",
    "ruiFigure": "figure",
    "ruiFigureCaption": "figcaption",
    "ruiButton": "button",
    "ruiP": "p",
    "ruiParagraph": "p",
    "ruiH1": "h1",
    "ruiH2": "h2",
    "ruiH3": "h3",
    "ruiH4": "h4",
    "ruiH5": "h5",
    "ruiH6": "h6",
    "ruiBlockquote": "blockquote",
    "ruiCode": "code",
}

# Layout styles defined by the client stylesheet; never emitted
DISABLED_STYLES = frozenset(
    {
        "ruiRoot",
        "ruiPopupLayer",
        "ruiAbsoluteLayout",
        "ruiGridLayout",
        "ruiListLayout",
        "ruiStackLayout",
        "ruiStackPageLayout",
        "ruiTabsLayout",
        "ruiImageView",
    }
)


class CSSWriter(Protocol):
    def add(self, key: str, value: str) -> None: ...

    def add_values(self, key: str, separator: str, *values: str) -> None: ...


class CSSBuilder:
    """Inline style attribute builder."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def add(self, key: str, value: str) -> None:
        if value:
            self._parts.append(f"{key}: {value};")

    def add_values(self, key: str, separator: str, *values: str) -> None:
        if values:
            self._parts.append(f"{key}: {separator.join(values)};")

    def finish(self) -> str:
        return " ".join(self._parts)


class CSSValueBuilder:
    """Collects the values only; keys are ignored."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def add(self, key: str, value: str) -> None:
        if value:
            self._parts.append(value)

    def add_values(self, key: str, separator: str, *values: str) -> None:
        if values:
            self._parts.append(separator.join(values))

    def finish(self) -> str:
        return "".join(self._parts)


class CSSDeclarations(dict):
    """Declarations keyed by CSS property; a later value replaces an earlier one."""

    def add(self, key: str, value: str) -> None:
        if value:
            self[key] = value

    def add_values(self, key: str, separator: str, *values: str) -> None:
        if values:
            self[key] = separator.join(values)

    def css_text(self) -> str:
        return " ".join(f"{key}: {value};" for key, value in self.items())

    def diff(self, previous: dict[str, str]) -> list[tuple[str, str]]:
        """
        ``(key, value)`` updates turning ``previous`` into these declarations.

        Removed keys come first with an empty value, so a shorthand that
        gives way to its longhands is cleared before they are set.
        """
        removed = [(key, "") for key in previous if key not in self]
        changed = [(key, value) for key, value in self.items() if previous.get(key) != value]
        return removed + changed


class CSSStyleBuilder:
    """Style sheet builder: one rule per theme style."""

    def __init__(self) -> None:
        self._lines: list[str] = []
        self._media = False
        self._skip = False

    def _indent(self) -> str:
        return "\t" if self._media else ""

    def start_media(self, rule: str) -> None:
        self._lines.append(f"@media screen{rule} {{\n")
        self._media = True

    def end_media(self) -> None:
        self._lines.append("}\n")
        self._media = False

    def start_style(self, name: str) -> None:
        self._skip = name in DISABLED_STYLES
        if self._skip:
            return
        selector = SYSTEM_STYLES.get(name, "." + name)
        self._lines.append(f"{self._indent()}{selector} {{\n")

    def end_style(self) -> None:
        if not self._skip:
            self._lines.append(f"{self._indent()}}}\n")
        self._skip = False

    def start_animation(self, name: str) -> None:
        self._media = True
        self._lines.append(f"\n@keyframes {name} {{\n")

    def end_animation(self) -> None:
        self._lines.append("}\n")
        self._media = False

    def start_animation_frame(self, name: str) -> None:
        self._lines.append(f"\t{name} {{\n")

    def end_animation_frame(self) -> None:
        self._lines.append("\t}\n")

    def add(self, key: str, value: str) -> None:
        if value and not self._skip:
            self._lines.append(f"{self._indent()}\t{key}: {value};\n")

    def add_values(self, key: str, separator: str, *values: str) -> None:
        if values and not self._skip:
            self._lines.append(f"{self._indent()}\t{key}: {separator.join(values)};\n")

    def finish(self) -> str:
        return "".join(self._lines)
