"""Tests for the property bag and coercion."""

import pytest
from hypothesis import given, strategies as st

from rui.data import parse_data
from rui.properties import (
    PropertyBag,
    enum_css_value,
    enum_property,
    is_constant_name,
    parse_bool,
    same_value,
    size_property,
    tags,
)
from rui.values import Color, Range, SizeType, SizeUnit, px


class ConstantTable:
    """Constant source backed by a dict."""

    def __init__(self, constants: dict[str, str]):
        self.constants = constants

    def get_constant(self, name):
        return self.constants.get(name)

    def get_color_constant(self, name):
        return None


# ============================================================================
# Set and Get
# ============================================================================

@pytest.mark.unit
def test_set_coerces_by_kind():
    """Test values are stored in their typed form."""
    bag = PropertyBag()
    assert bag.set(tags.WIDTH, "16px")
    assert bag.set(tags.TEXT_COLOR, "#F00")
    assert bag.set(tags.Z_INDEX, "3")
    assert bag.set(tags.DISABLED, "yes")
    assert bag.set(tags.ROW, "1:2")

    assert bag.get(tags.WIDTH) == px(16)
    assert bag.get(tags.TEXT_COLOR) == Color(0xFFFF0000)
    assert bag.get(tags.Z_INDEX) == 3
    assert bag.get(tags.DISABLED) is True
    assert bag.get(tags.ROW) == Range(1, 2)


@pytest.mark.unit
def test_tags_are_normalized():
    """Test tag case and surrounding spaces are ignored."""
    bag = PropertyBag()
    bag.set("  Width ", 10)
    assert bag.get("WIDTH") == SizeUnit(SizeType.PIXEL, 10.0)
    assert "width" in bag
    assert bag.all_tags() == ["width"]


@pytest.mark.unit
@pytest.mark.parametrize(
    "tag,value",
    [
        (tags.OPACITY, 2),
        (tags.Z_INDEX, True),
        (tags.WIDTH, "wide"),
        (tags.TEXT_COLOR, "not-a-color"),
        (tags.VISIBILITY, "sometimes"),
        (tags.DISABLED, "maybe"),
    ],
)
def test_invalid_values_are_rejected(tag, value):
    """Test invalid values are reported and leave the bag unchanged."""
    bag = PropertyBag()
    assert bag.set(tag, value) is False
    assert bag.is_empty()


@pytest.mark.unit
def test_empty_and_none_remove():
    """Test None and empty strings remove a property."""
    bag = PropertyBag({tags.WIDTH: "10px", tags.TOOLTIP: "tip"})
    assert bag.set(tags.WIDTH, None)
    assert bag.set(tags.TOOLTIP, "")
    assert bag.is_empty()


@pytest.mark.unit
def test_auto_size_removes():
    """Test setting a size to auto removes it."""
    bag = PropertyBag({tags.HEIGHT: 20})
    bag.set(tags.HEIGHT, "auto")
    assert tags.HEIGHT not in bag


@pytest.mark.unit
def test_constant_reference_kept_verbatim():
    """Test @constant values are stored as written and resolved on read."""
    bag = PropertyBag({tags.WIDTH: "@gap"})
    assert bag.get(tags.WIDTH) == "@gap"
    assert size_property(bag, tags.WIDTH, ConstantTable({"gap": "8px"})) == px(8)
    assert size_property(bag, tags.WIDTH, ConstantTable({})) is None


@pytest.mark.unit
def test_enum_values():
    """Test enums store indices and project their CSS values."""
    bag = PropertyBag({tags.TEXT_WEIGHT: "bold", tags.ORIENTATION: "horizontal"})
    assert enum_property(bag, tags.TEXT_WEIGHT, None) == 7
    assert enum_css_value(bag, tags.TEXT_WEIGHT, None) == "bold"
    assert enum_css_value(bag, tags.ORIENTATION, None) == "row"
    assert enum_css_value(bag, tags.OVERFLOW, None) == ""


@pytest.mark.unit
def test_set_params_from_data_object():
    """Test setting several properties from parsed text."""
    bag = PropertyBag()
    assert bag.set_params(parse_data("_{ width = 5px, tooltip = hello }"))
    assert bag.get(tags.WIDTH) == px(5)
    assert bag.get(tags.TOOLTIP) == "hello"


@pytest.mark.unit
def test_copy_and_equality():
    """Test copies compare equal."""
    bag = PropertyBag({tags.WIDTH: 1, tags.TOOLTIP: "x"})
    copy = PropertyBag()
    copy.copy_from(bag)
    assert copy == bag
    copy.set(tags.WIDTH, 2)
    assert copy != bag


@pytest.mark.unit
def test_clear():
    """Test clearing notifies every listener."""
    seen = []
    bag = PropertyBag({tags.WIDTH: 1})
    bag.set_change_listener(tags.WIDTH, lambda b, tag: seen.append(tag))
    bag.clear()
    assert bag.is_empty()
    assert seen == [tags.WIDTH]


# ============================================================================
# Change Listeners
# ============================================================================

@pytest.mark.unit
def test_change_listener_fires_after_commit():
    """Test the listener sees the new value."""
    seen = []
    bag = PropertyBag()
    bag.set_change_listener(tags.WIDTH, lambda b, tag: seen.append(b.get(tag)))
    bag.set(tags.WIDTH, 4)
    bag.set(tags.WIDTH, 4)
    bag.remove(tags.WIDTH)
    assert seen == [px(4), None]


@pytest.mark.unit
def test_change_listener_unregister():
    """Test passing None unregisters the listener."""
    seen = []
    bag = PropertyBag()
    bag.set_change_listener(tags.WIDTH, lambda b, tag: seen.append(tag))
    bag.set_change_listener(tags.WIDTH, None)
    bag.set(tags.WIDTH, 4)
    assert seen == []


# ============================================================================
# Properties
# ============================================================================

_TAGS = st.sampled_from([tags.WIDTH, tags.TEXT_COLOR, tags.Z_INDEX, tags.TOOLTIP, tags.OPACITY])
_VALUES = {
    tags.WIDTH: st.integers(min_value=1, max_value=1000),
    tags.TEXT_COLOR: st.integers(min_value=0, max_value=0xFFFFFFFF).map(Color),
    tags.Z_INDEX: st.integers(min_value=-100, max_value=100),
    tags.TOOLTIP: st.text(min_size=1).filter(lambda text: text.strip() != ""),
    tags.OPACITY: st.floats(min_value=0.0, max_value=1.0),
}


@pytest.mark.unit
@given(data=st.data())
def test_set_then_remove_restores_bag(data):
    """Test set followed by remove leaves the bag as it was."""
    bag = PropertyBag({tags.MARGIN_LEFT: 3})
    before = PropertyBag()
    before.copy_from(bag)

    tag = data.draw(_TAGS)
    assert bag.set(tag, data.draw(_VALUES[tag]))
    bag.remove(tag)
    assert bag == before


@pytest.mark.unit
@given(data=st.data())
def test_set_none_equals_remove(data):
    """Test set(tag, None) behaves like remove(tag)."""
    tag = data.draw(_TAGS)
    value = data.draw(_VALUES[tag])
    first = PropertyBag({tag: value})
    second = PropertyBag({tag: value})
    first.set(tag, None)
    second.remove(tag)
    assert first == second


@pytest.mark.unit
@given(st.text())
def test_normalize_idempotent(text):
    """Test normalizing twice gives the same tag."""
    bag = PropertyBag()
    assert bag.normalize(bag.normalize(text)) == bag.normalize(text)


# ============================================================================
# Helpers
# ============================================================================

@pytest.mark.unit
def test_same_value_distinguishes_bool():
    """Test True and 1 are different values."""
    assert not same_value(True, 1)
    assert same_value(px(1), px(1))


@pytest.mark.unit
def test_constant_names():
    """Test @name detection."""
    assert is_constant_name("@gap")
    assert is_constant_name('@"a b"')
    assert not is_constant_name("@a b")
    assert not is_constant_name("gap")


@pytest.mark.unit
def test_parse_bool():
    """Test boolean texts."""
    assert parse_bool("ON") is True
    assert parse_bool("0") is False
    assert parse_bool("perhaps") is None
