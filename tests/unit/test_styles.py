"""Tests for the style engine."""

import pytest

from rui.properties import tags
from rui.styles import (
    Bounds,
    CSSBuilder,
    CSSDeclarations,
    CSSStyleBuilder,
    ViewStyle,
    new_conic_gradient,
    new_linear_gradient,
    new_radial_gradient,
    new_shadow,
)
from rui.values import Color, px


def css_of(style: ViewStyle, session=None) -> str:
    builder = CSSBuilder()
    style.css_view_style(builder, session)
    return builder.finish()


# ============================================================================
# Gradients
# ============================================================================

@pytest.mark.unit
def test_linear_gradient_css():
    """Test a two-stop linear gradient with a direction."""
    gradient = new_linear_gradient(
        {
            "direction": "to bottom",
            "gradient": [{"color": "#F00", "pos": "0%"}, {"color": "#00F", "pos": "100%"}],
        }
    )
    assert gradient.css_value(None) == "linear-gradient(to bottom, #FF0000 0%, #0000FF 100%) "


@pytest.mark.unit
def test_repeating_linear_gradient():
    """Test the repeating flag changes the function name."""
    gradient = new_linear_gradient({"gradient": "red 0px, blue 10px", "repeating": True})
    assert gradient.css_value(None).startswith("repeating-linear-gradient(")


@pytest.mark.unit
def test_gradient_angle_direction():
    """Test an angle direction."""
    gradient = new_linear_gradient({"gradient": "red, blue", "direction": "45deg"})
    assert gradient.css_value(None) == "linear-gradient(45deg, #FF0000, #0000FF) "


@pytest.mark.unit
def test_translucent_stop_uses_rgba():
    """Test stops with alpha are written as rgba()."""
    gradient = new_linear_gradient({"gradient": "#80FF0000, blue"})
    assert "rgba(255,0,0,.50)" in gradient.css_value(None)


@pytest.mark.unit
def test_gradient_needs_two_stops():
    """Test a single stop is rejected."""
    gradient = new_linear_gradient({"gradient": "red"})
    assert gradient.get(tags.GRADIENT) is None
    assert gradient.css_value(None) == ""


@pytest.mark.unit
def test_radial_gradient_shape():
    """Test the radial shape with no radius or center."""
    gradient = new_radial_gradient({"gradient": "red, blue", "shape": "circle"})
    assert gradient.css_value(None) == "radial-gradient(circle, #FF0000, #0000FF) "


@pytest.mark.unit
def test_conic_gradient_from():
    """Test the conic start angle."""
    gradient = new_conic_gradient({"gradient": "red, blue", "from": "90deg"})
    assert gradient.css_value(None) == "conic-gradient(from 90deg, #FF0000, #0000FF) "


@pytest.mark.unit
def test_background_with_color():
    """Test layers and the background color share the shorthand."""
    style = ViewStyle(
        {
            tags.BACKGROUND: new_linear_gradient({"gradient": "red, blue"}),
            tags.BACKGROUND_COLOR: "white",
        }
    )
    assert css_of(style) == "background: linear-gradient(#FF0000, #0000FF) rgb(255,255,255);"


@pytest.mark.unit
def test_background_from_text():
    """Test a background layer given as .rui text."""
    style = ViewStyle({tags.BACKGROUND: 'linear-gradient { gradient = "red, blue" }'})
    assert len(style.background_layers()) == 1


# ============================================================================
# Border
# ============================================================================

@pytest.mark.unit
def test_uniform_border_collapses():
    """Test equal sides collapse into the border shorthand."""
    style = ViewStyle({tags.BORDER: {"style": "solid", "width": "1px", "color": "#000"}})
    assert css_of(style) == "border: 1px solid rgb(0,0,0);"


@pytest.mark.unit
def test_side_override_expands_border():
    """Test one differing side switches to longhand declarations."""
    style = ViewStyle({tags.BORDER: {"style": "solid", "width": "1px", "color": "#000"}})
    assert style.set("border-top-color", "red")
    assert style.get("border-top-color") == Color(0xFFFF0000)
    assert css_of(style) == (
        "border-style: solid; border-width: 1px; "
        "border-color: rgb(255,0,0) rgb(0,0,0) rgb(0,0,0) rgb(0,0,0);"
    )

    style.remove("border-top-color")
    assert css_of(style) == "border: 1px solid rgb(0,0,0);"


@pytest.mark.unit
def test_border_leaf_notifies_aggregate():
    """Test leaf changes report both the leaf and the aggregate."""
    seen = []
    style = ViewStyle()
    style.set_change_listener(tags.BORDER, lambda bag, tag: seen.append(tag))
    style.set_change_listener("border-left-width", lambda bag, tag: seen.append(tag))
    style.set("border-left-width", "2px")
    assert seen == ["border-left-width", tags.BORDER]


@pytest.mark.unit
def test_border_without_style_is_silent():
    """Test a border with no line style writes nothing."""
    style = ViewStyle({tags.BORDER: {"width": "1px", "color": "#000"}})
    assert css_of(style) == ""


@pytest.mark.unit
@pytest.mark.parametrize(
    "tag, value",
    [
        (tags.BORDER, {"style": "solid", "width": "abc"}),
        (tags.RADIUS, {"x": "4px", "y": "abc"}),
        (tags.OUTLINE, {"style": "solid", "width": "abc"}),
        (tags.TRANSFORM, {"translate-y": "2px", "translate-x": "abc"}),
    ],
)
def test_rejected_composite_leaf_refuses_whole_value(tag, value):
    """Test a composite with one bad leaf is refused as a whole."""
    style = ViewStyle()
    assert not style.set(tag, value)
    assert style.get(tag) is None
    assert style.is_empty()


# ============================================================================
# Bounds, sizes and misc
# ============================================================================

@pytest.mark.unit
def test_padding_forms():
    """Test one, two and four value padding."""
    assert css_of(ViewStyle({tags.PADDING: "4px"})) == "padding: 4px;"
    assert css_of(ViewStyle({tags.PADDING: "1px, 2px"})) == "padding: 1px 2px 1px 2px;"
    style = ViewStyle({tags.PADDING: "1px, 2px, 3px, 4px"})
    assert style.get(tags.PADDING) == Bounds(px(1), px(2), px(3), px(4))


@pytest.mark.unit
@pytest.mark.parametrize("tag", [tags.MARGIN, tags.PADDING])
def test_rejected_bounds_keep_all_sides(tag):
    """Test an invalid side leaves every side untouched."""
    style = ViewStyle({tag: "9px"})
    assert not style.set(tag, "1px, 2px, abc, 4px")
    assert style.get(tag) == Bounds(px(9), px(9), px(9), px(9))


@pytest.mark.unit
def test_padding_side_updates_aggregate():
    """Test a side tag changes the aggregate value."""
    style = ViewStyle({tags.PADDING: 4})
    style.set(tags.PADDING_LEFT, 8)
    assert style.get(tags.PADDING) == Bounds(px(4), px(4), px(4), px(8))
    style.remove(tags.PADDING)
    assert style.is_empty()


@pytest.mark.unit
def test_style_aliases():
    """Test CSS-like aliases map to the canonical tags."""
    style = ViewStyle({"font-size": "12px", "font-weight": "bold"})
    assert style.get(tags.TEXT_SIZE) == px(12)
    assert css_of(style) == "font-size: 12px; font-weight: bold;"


@pytest.mark.unit
def test_visibility_and_opacity():
    """Test visibility and opacity declarations."""
    assert css_of(ViewStyle({tags.VISIBILITY: "gone"})) == "display: none;"
    assert css_of(ViewStyle({tags.VISIBILITY: "invisible", tags.OPACITY: 0.5})) == (
        "visibility: hidden; opacity: 0.5;"
    )


@pytest.mark.unit
def test_box_shadow():
    """Test a single box shadow."""
    style = ViewStyle({tags.SHADOW: new_shadow("1px", "2px", "3px", color="#80000000")})
    assert css_of(style) == "box-shadow: 1px 2px 3px 0 rgba(0,0,0,.50);"


@pytest.mark.unit
def test_invisible_shadow_skipped():
    """Test transparent shadows write nothing."""
    style = ViewStyle({tags.SHADOW: new_shadow("1px", "2px", color="#00000000")})
    assert css_of(style) == ""


@pytest.mark.unit
def test_grid_cell_sizes():
    """Test grid templates from cell sizes."""
    style = ViewStyle({tags.CELL_WIDTH: "1fr, 1fr", tags.ROW: "0:1"})
    assert css_of(style) == "grid-row: 1 / 3; grid-template-columns: repeat(2, 1fr);"


@pytest.mark.unit
def test_constants_resolve_through_session(theme):
    """Test @constant values are resolved by the session."""

    class Resolver:
        def get_constant(self, name):
            return theme.constant(name, False)

        def get_color_constant(self, name):
            return theme.color(name, False)

    style = ViewStyle({tags.WIDTH: "@gap", tags.TEXT_COLOR: "@accent"})
    assert css_of(style, Resolver()) == "width: 8px; color: rgb(0,0,255);"


# ============================================================================
# CSS builders
# ============================================================================

@pytest.mark.unit
def test_css_declarations_diff():
    """Test removed keys come first with empty values."""
    previous = {"border": "1px solid", "width": "10px"}
    current = CSSDeclarations()
    current.add("width", "10px")
    current.add("border-color", "red")
    assert current.diff(previous) == [("border", ""), ("border-color", "red")]
    assert current.css_text() == "width: 10px; border-color: red;"


@pytest.mark.unit
def test_style_sheet_builder():
    """Test system styles become element selectors and layout styles are skipped."""
    builder = CSSStyleBuilder()
    builder.start_style("ruiButton")
    builder.add("color", "red")
    builder.end_style()
    builder.start_style("ruiStackLayout")
    builder.add("color", "blue")
    builder.end_style()
    builder.start_media(" and (orientation: landscape)")
    builder.start_style("card")
    builder.add("width", "100px")
    builder.end_style()
    builder.end_media()
    assert builder.finish() == (
        "button {\n\tcolor: red;\n}\n"
        "@media screen and (orientation: landscape) {\n\t.card {\n\t\twidth: 100px;\n\t}\n}\n"
    )
