"""Tests for value types."""

import math

import pytest
from hypothesis import given, strategies as st

from rui.core import InvalidFormatError
from rui.values import (
    AngleType,
    Color,
    Range,
    SizeType,
    SizeUnit,
    auto_size,
    deg,
    format_float,
    parse_angle,
    parse_color,
    parse_range,
    parse_size,
    percent,
    px,
    string_to_color,
    string_to_size_unit,
)


# ============================================================================
# Color Tests
# ============================================================================

@pytest.mark.unit
def test_color_components():
    """Test packing and unpacking ARGB components."""
    color = Color.argb(0x80, 0xFF, 0x10, 0x01)
    assert color.alpha == 0x80
    assert color.red == 0xFF
    assert color.green == 0x10
    assert color.blue == 0x01
    assert str(color) == "#80FF1001"


@pytest.mark.unit
def test_translucent_color_css():
    """Test a translucent color renders with a two-digit alpha."""
    color = parse_color("#80FF0000")
    assert color.css_string() == "rgba(255,0,0,.50)"
    assert color.rgb_string() == "#FF0000"


@pytest.mark.unit
def test_opaque_color_css():
    """Test an opaque color renders as rgb()."""
    assert parse_color("#00F").css_string() == "rgb(0,0,255)"


@pytest.mark.unit
@pytest.mark.parametrize(
    "text,expected",
    [
        ("#AABBCCDD", 0xAABBCCDD),
        ("#112233", 0xFF112233),
        ("#8F00", 0x88FF0000),
        ("#0F0", 0xFF00FF00),
        ("rgb(1, 2, 3)", 0xFF010203),
        ("rgba(255, 0, 0, 50%)", 0x7FFF0000),
        ("red", 0xFFFF0000),
        ("Transparent", 0),
    ],
)
def test_parse_color_formats(text, expected):
    """Test every accepted color format."""
    assert parse_color(text) == expected


@pytest.mark.unit
@pytest.mark.parametrize("text", ["", "#", "#12345", "#GGGGGG", "rgb(300,0,0)", "no-such-color"])
def test_parse_color_invalid(text):
    """Test invalid colors raise InvalidFormatError."""
    with pytest.raises(InvalidFormatError):
        parse_color(text)


@pytest.mark.unit
def test_string_to_color_failure():
    """Test the lenient parser returns None."""
    assert string_to_color("nonsense") is None


@pytest.mark.unit
@given(st.integers(min_value=0, max_value=0xFFFFFFFF))
def test_color_text_round_trip(value):
    """Test parse_color(str(color)) gives back the color."""
    color = Color(value)
    assert parse_color(str(color)) == color


# ============================================================================
# Size Tests
# ============================================================================

@pytest.mark.unit
def test_size_text():
    """Test size text forms."""
    assert str(px(16)) == "16px"
    assert str(percent(100)) == "100%"
    assert str(auto_size()) == "auto"
    assert px(0).css_string() == "0"
    assert auto_size().css_string("") == ""


@pytest.mark.unit
@pytest.mark.parametrize(
    "text,expected",
    [
        ("0", SizeUnit(SizeType.PIXEL, 0.0)),
        ("auto", SizeUnit()),
        ("none", SizeUnit()),
        ("", SizeUnit()),
        ("1.5em", SizeUnit(SizeType.EM, 1.5)),
        ("2rem", SizeUnit(SizeType.REM, 2.0)),
        ("50%", SizeUnit(SizeType.PERCENT, 50.0)),
        ("12", SizeUnit(SizeType.PIXEL, 12.0)),
    ],
)
def test_parse_size(text, expected):
    """Test size parsing."""
    assert parse_size(text) == expected


@pytest.mark.unit
def test_parse_size_function():
    """Test CSS size functions are kept verbatim."""
    size = parse_size("calc(100% - 8px)")
    assert size.type == SizeType.FUNCTION
    assert size.css_string() == "calc(100% - 8px)"


@pytest.mark.unit
def test_parse_size_invalid():
    """Test invalid sizes."""
    with pytest.raises(InvalidFormatError):
        parse_size("wide")
    assert string_to_size_unit("12zz") is None


@pytest.mark.unit
def test_auto_sizes_are_equal():
    """Test auto sizes compare equal regardless of value."""
    assert SizeUnit(SizeType.AUTO, 3.0) == auto_size()
    assert hash(SizeUnit(SizeType.AUTO, 3.0)) == hash(auto_size())


# ============================================================================
# Angle, Range and Number Tests
# ============================================================================

@pytest.mark.unit
def test_parse_angle_units():
    """Test angle suffixes, including grad before rad."""
    assert parse_angle("90deg") == deg(90)
    assert parse_angle("100grad").type == AngleType.GRADIAN
    assert parse_angle("1.5").type == AngleType.RADIAN
    assert parse_angle("π").type == AngleType.PI_RADIAN


@pytest.mark.unit
def test_angle_conversion():
    """Test converting degrees to radians."""
    assert math.isclose(deg(180).to_radian().value, math.pi)


@pytest.mark.unit
def test_parse_range():
    """Test range parsing."""
    assert parse_range("2:5") == Range(2, 5)
    assert parse_range("3") == Range(3, 3)
    assert str(Range(1, 4)) == "1:4"
    with pytest.raises(InvalidFormatError):
        parse_range("a:b")


@pytest.mark.unit
def test_format_float():
    """Test number formatting."""
    assert format_float(1.0) == "1"
    assert format_float(0.5) == "0.5"
    assert format_float(-3.0) == "-3"
