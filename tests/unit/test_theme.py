"""Tests for themes, string tables and resources."""

import pytest

from rui.core import InvalidFormatError
from rui.theme import (
    MediaOrientation,
    StringTables,
    Theme,
    create_theme_from_text,
    package_text,
    parse_media_rule,
    resources,
)
from rui.theme.resources import ResourceRegistry
from rui.values import Color


class ThemeResolver:
    """Constant source backed by a theme."""

    def __init__(self, theme: Theme):
        self.theme = theme

    def get_constant(self, name):
        return self.theme.constant(name, False)

    def get_color_constant(self, name):
        return self.theme.color(name, False)


# ============================================================================
# Constants and Colors
# ============================================================================

@pytest.mark.unit
def test_theme_name(theme):
    """Test the theme name is read."""
    assert theme.name == "test"


@pytest.mark.unit
def test_constant_lookup(theme):
    """Test plain and composite constants."""
    assert theme.constant("gap") == "8px"
    assert theme.constant("pair") == "8px,4px"
    assert theme.constant("missing") is None


@pytest.mark.unit
def test_constant_cycle(theme):
    """Test reference cycles resolve to None."""
    assert theme.constant("loop1") is None


@pytest.mark.unit
def test_touch_constants(theme):
    """Test touch variants win on touch screens."""
    assert theme.constant("padding", touch=False) == "6px"
    assert theme.constant("padding", touch=True) == "12px"
    assert theme.constant("gap", touch=True) == "8px"


@pytest.mark.unit
def test_color_lookup(theme):
    """Test colors, aliases and dark variants."""
    assert theme.color("accent") == Color(0xFF0000FF)
    assert theme.color("alias") == Color(0xFF0000FF)
    assert theme.color("accent", dark=True) == Color(0xFFFFFF00)
    assert theme.color("alias", dark=True) == Color(0xFFFFFF00)
    assert theme.color("missing") is None


@pytest.mark.unit
def test_rejects_non_theme_text():
    """Test text that is not a theme object."""
    assert create_theme_from_text("strings { }") is None
    assert create_theme_from_text("theme {") is None


# ============================================================================
# Styles and Media Rules
# ============================================================================

@pytest.mark.unit
def test_styles_loaded(theme):
    """Test style sections become view styles."""
    assert theme.style("card") is not None
    assert theme.style("missing") is None
    assert len(theme.media_rules) == 1
    assert theme.media_rules[0].orientation == MediaOrientation.LANDSCAPE


@pytest.mark.unit
def test_theme_css_text(theme):
    """Test system styles come first and media blocks last."""
    assert theme.css_text(ThemeResolver(theme)) == (
        ".ruiCard {\n\tcolor: rgb(255,0,0);\n}\n"
        ".card {\n\tpadding: 8px;\n\tbackground-color: rgb(0,0,255);\n}\n"
        "@media screen and (orientation: landscape) {\n\t.card {\n\t\twidth: 100px;\n\t}\n}\n"
    )


@pytest.mark.unit
def test_parse_media_rule():
    """Test media qualifiers."""
    rule = parse_media_rule("styles:portrait:width320-640:height480")
    assert rule.orientation == MediaOrientation.PORTRAIT
    assert (rule.min_width, rule.max_width) == (320, 640)
    assert (rule.min_height, rule.max_height) == (0, 480)
    assert rule.css_text() == (
        " and (orientation: portrait) and (min-width: 320.001px) and (max-width: 640px)"
        " and (max-height: 480px)"
    )


@pytest.mark.unit
@pytest.mark.parametrize(
    "section",
    ["styles:sideways", "styles:portrait:landscape", "styles:width0", "styles:width100:width200"],
)
def test_parse_media_rule_invalid(section):
    """Test invalid qualifiers are rejected."""
    with pytest.raises(InvalidFormatError):
        parse_media_rule(section)


@pytest.mark.unit
def test_append_and_copy(theme):
    """Test overlaying themes."""
    overlay = create_theme_from_text("theme { constants = _{ gap = 2px } }")
    copy = theme.copy()
    copy.append(overlay)
    assert copy.constant("gap") == "2px"
    assert theme.constant("gap") == "8px"
    assert copy.style("card") is theme.style("card")


# ============================================================================
# String Tables
# ============================================================================

@pytest.mark.unit
def test_string_tables():
    """Test both string table layouts and fallbacks."""
    tables = StringTables()
    assert tables.add_text("strings { fr = _{ Yes = Oui, No = Non } }")
    assert tables.add_text("strings:de { Yes = Ja }")
    assert not tables.add_text("theme { }")

    assert tables.get_string("Yes", "fr") == ("Oui", True)
    assert tables.get_string("No", "de", ["fr"]) == ("Non", True)
    assert tables.get_string("Cancel", "fr") == ("Cancel", False)
    assert tables.languages() == ["de", "fr"]


# ============================================================================
# Resources
# ============================================================================

@pytest.mark.unit
def test_default_theme_registered():
    """Test the packaged theme extends the default theme."""
    assert resources.default_theme.styles
    assert "function updateInnerHTML" in package_text("app.js")


@pytest.mark.unit
def test_add_resources_directory(tmp_path):
    """Test scanning a resources directory."""
    (tmp_path / "themes").mkdir()
    (tmp_path / "themes" / "dark.rui").write_text("theme { name = dark, constants = _{ gap = 1px } }")
    (tmp_path / "strings").mkdir()
    (tmp_path / "strings" / "fr.rui").write_text("strings:fr { Hello = Bonjour }")
    (tmp_path / "images").mkdir()
    (tmp_path / "images" / "icon.png").write_bytes(b"\x89PNG")
    (tmp_path / "images" / "icon@2x.png").write_bytes(b"\x89PNG")

    registry = ResourceRegistry()
    registry.add_resources(tmp_path)

    assert registry.theme("dark").constant("gap") == "1px"
    assert registry.strings.get_string("Hello", "fr") == ("Bonjour", True)
    assert registry.resource_file("icon.png") == tmp_path / "images" / "icon.png"
    assert [item.scale for item in registry.src_set("icon.png")] == [2.0]
    assert registry.resource_file("../secret") is None
