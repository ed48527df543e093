"""Serialize DataObjects back to .rui text."""

from .objects import DataObject, DataValue, NodeType

_SIMPLE_SYMBOLS = frozenset("+-@_.:#%π°")

_ESCAPES = (
    ("\\", "\\\\"),
    ("\t", "\\t"),
    ("\r", "\\r"),
    ("\n", "\\n"),
    ('"', '\\"'),
)


def _is_simple(text: str) -> bool:
    if not text:
        return False
    return all(
        ("0" <= ch <= "9") or ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ch in _SIMPLE_SYMBOLS
        for ch in text
    )


def quote(text: str) -> str:
    """Return text bare when it is a single token, otherwise double-quoted and escaped."""
    if _is_simple(text):
        return text
    for old, new in _ESCAPES:
        text = text.replace(old, new)
    return f'"{text}"'


def _write_value(value: DataValue, indent: str) -> str:
    if isinstance(value, DataObject):
        return write_object(value, indent)
    return quote(value)


def write_object(obj: DataObject, indent: str = "") -> str:
    """
    Write an object as indented .rui text.

    Args:
        obj: Object to write
        indent: Indentation of the line the object starts on

    Returns:
        Text that ``parse_data_text`` reads back into an equal object
    """
    inner = indent + "\t"
    lines = [f"{quote(obj.tag)} {{"]
    for node in obj.nodes:
        if node.type == NodeType.ARRAY:
            items = [_write_value(item, inner + "\t") for item in node.array]
            if not items:
                text = "[]"
            elif any(isinstance(item, DataObject) for item in node.array):
                body = "".join(f"{inner}\t{item},\n" for item in items)
                text = f"[\n{body}{inner}]"
            else:
                text = "[" + ", ".join(items) + "]"
        else:
            text = _write_value(node.value, inner)
        lines.append(f"{inner}{quote(node.tag)} = {text},")
    lines.append(f"{indent}}}")
    return "\n".join(lines)
