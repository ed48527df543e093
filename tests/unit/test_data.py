"""Tests for the .rui data parser and writer."""

import pytest
from returns.pipeline import is_successful

from rui.core import DataParseError
from rui.data import (
    DataObject,
    NodeType,
    parse_data,
    parse_data_result,
    parse_data_text,
    quote,
    write_object,
)


# ============================================================================
# Parser Tests
# ============================================================================

@pytest.mark.unit
def test_parse_event_message():
    """Test parsing an inbound event message."""
    obj = parse_data("click-event{id=id000003, button=0}")
    assert obj.tag == "click-event"
    assert obj.property_value("id") == "id000003"
    assert obj.property_value("button") == "0"
    assert obj.property_value("missing") is None


@pytest.mark.unit
def test_parse_nested_values():
    """Test objects, anonymous objects and arrays."""
    obj = parse_data(
        """
        View {
            id = root,
            padding = _{ top = 4px, left = 8px },
            content = [
                TextView { text = "Hello, world" },
                plain,
            ],
            tags = [a, b, c],
        }
        """
    )
    assert obj.tag == "View"
    padding = obj.property_object("padding")
    assert padding is not None
    assert padding.tag == "_"
    assert padding.property_value("left") == "8px"

    content = obj.property_by_tag("content")
    assert content.type == NodeType.ARRAY
    assert isinstance(content.array[0], DataObject)
    assert content.array[0].property_value("text") == "Hello, world"
    assert content.array[1] == "plain"
    assert obj.property_by_tag("tags").array == ["a", "b", "c"]


@pytest.mark.unit
def test_parse_newline_separators():
    """Test newlines separate nodes like commas."""
    obj = parse_data("obj {\n  a = 1\n  b = 2\n}")
    assert obj.property_value("a") == "1"
    assert obj.property_value("b") == "2"


@pytest.mark.unit
def test_parse_strings_and_escapes():
    """Test quoted, escaped and raw strings."""
    obj = parse_data("obj { a = \"tab\\there\", b = 'it\\'s', c = `raw \\n text`, d = \"\\x41\\u00e9\" }")
    assert obj.property_value("a") == "tab\there"
    assert obj.property_value("b") == "it's"
    assert obj.property_value("c") == "raw \\n text"
    assert obj.property_value("d") == "Aé"


@pytest.mark.unit
def test_parse_comments():
    """Test line and block comments are skipped."""
    obj = parse_data("obj { // first\n a = 1 /* inline */ , b = 2 }")
    assert obj.property_value("a") == "1"
    assert obj.property_value("b") == "2"


@pytest.mark.unit
def test_parse_error_position():
    """Test syntax errors report their line."""
    with pytest.raises(DataParseError) as exc_info:
        parse_data("obj {\n  a = }")
    assert exc_info.value.line == 2


@pytest.mark.unit
@pytest.mark.parametrize("text", ["obj { a = 1", "obj", "obj { a 1 }", 'obj { a = "open }', "obj { a = \"\\q\" }"])
def test_parse_invalid_text(text):
    """Test malformed text raises DataParseError."""
    with pytest.raises(DataParseError):
        parse_data(text)


@pytest.mark.unit
def test_parse_data_result():
    """Test the Result-returning parser."""
    assert is_successful(parse_data_result("obj { a = 1 }"))
    failure = parse_data_result("obj {")
    assert not is_successful(failure)
    assert isinstance(failure.failure(), DataParseError)


@pytest.mark.unit
def test_parse_data_text_failure():
    """Test the lenient parser returns None."""
    assert parse_data_text("{") is None


# ============================================================================
# Object Tests
# ============================================================================

@pytest.mark.unit
def test_set_property_replaces_in_place():
    """Test setting an existing tag keeps its position."""
    obj = DataObject("obj")
    obj.set_property_value("a", "1")
    obj.set_property_value("b", "2")
    obj.set_property_value("a", "3")
    assert [node.tag for node in obj.nodes] == ["a", "b"]
    assert obj.property_value("a") == "3"

    removed = obj.remove_property("a")
    assert removed.text == "3"
    assert obj.remove_property("a") is None


@pytest.mark.unit
def test_to_params_skips_empty():
    """Test empty texts and empty arrays are dropped."""
    obj = parse_data('obj { a = "", b = x, c = [], d = [y, ""] }')
    assert obj.to_params() == {"b": "x", "d": ["y"]}


# ============================================================================
# Writer Tests
# ============================================================================

@pytest.mark.unit
def test_quote():
    """Test single tokens stay bare."""
    assert quote("id000001") == "id000001"
    assert quote("#FF0000") == "#FF0000"
    assert quote("two words") == '"two words"'
    assert quote('say "hi"\n') == '"say \\"hi\\"\\n"'
    assert quote("") == '""'


@pytest.mark.unit
def test_write_object_layout():
    """Test the writer's indentation."""
    obj = DataObject("obj")
    obj.set_property_value("text", "Hello world")
    obj.set_property_array("items", ["a", "b"])
    assert write_object(obj) == 'obj {\n\ttext = "Hello world",\n\titems = [a, b],\n}'


@pytest.mark.unit
def test_writer_output_parses_back():
    """Test written text reads back into an equal object."""
    source = parse_data(
        'View { id = "main view", style = _{ color = red }, content = [TextView { text = "a\\tb" }, x] }'
    )
    assert parse_data(str(source)) == source
