"""
.rui text parser.

Grammar::

    object = tag "{" [ node { ("," | "\\n") node } ] "}"
    node   = tag "=" ( text | object | "{" ... "}" | "[" [ value { "," value } ] "]" )
    value  = text | object

Texts are bare tokens, ``"..."``/``'...'`` with escapes, or backtick raw
strings. ``// line`` and ``/* block */`` comments are skipped.
"""

from returns.result import Failure, Result, Success

from ..core.errors import DataParseError, report_error
from .objects import DataNode, DataObject, DataValue

_STOP_SYMBOLS = frozenset("={}[],'\"`/")

_SIMPLE_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    '"': '"',
    "'": "'",
    "\\": "\\",
}


class _Parser:
    """Recursive-descent parser over a NUL-terminated copy of the text."""

    def __init__(self, text: str):
        if "\r" in text:
            text = text.replace("\r\n", "\n").replace("\r", "\n")
        self.data = text + "\0"
        self.size = len(text)
        self.pos = 0
        self.line = 1
        self.line_start = 0

    def error(self, message: str) -> DataParseError:
        return DataParseError(message, self.line, self.pos - self.line_start)

    @property
    def current(self) -> str:
        return self.data[self.pos] if self.pos < self.size else "\0"

    def skip_spaces(self, skip_newline: bool) -> None:
        while self.pos < self.size:
            ch = self.data[self.pos]
            if ch == "\n":
                if not skip_newline:
                    return
                self.line += 1
                self.line_start = self.pos + 1
            elif ch == "/":
                following = self.data[self.pos + 1]
                if following == "/":
                    end = self.data.find("\n", self.pos)
                    self.pos = (end if end >= 0 else self.size) - 1
                elif following == "*":
                    end = self.data.find("*/", self.pos + 2)
                    if end < 0 or end >= self.size:
                        raise self.error("unexpected end of text in comment")
                    comment = self.data[self.pos : end]
                    newlines = comment.count("\n")
                    if newlines:
                        self.line += newlines
                        self.line_start = self.pos + comment.rfind("\n") + 1
                    self.pos = end + 1
                else:
                    return
            elif not ch.isspace():
                return
            self.pos += 1

    def _read_escaped(self, start: int, stop: str) -> str:
        chars = []
        pos = start
        while True:
            if pos >= self.size:
                self.pos = pos
                raise self.error("unexpected end of text")
            ch = self.data[pos]
            if ch == stop:
                break
            if ch != "\\":
                chars.append(ch)
                pos += 1
                continue

            code = self.data[pos + 1] if pos + 1 < self.size else "\0"
            if code in _SIMPLE_ESCAPES:
                chars.append(_SIMPLE_ESCAPES[code])
                pos += 2
            elif code in "xXuU":
                width = 2 if code in "xX" else 4
                digits = self.data[pos + 2 : pos + 2 + width]
                if len(digits) != width or any(d not in "0123456789abcdefABCDEF" for d in digits):
                    self.pos = pos
                    raise self.error(f'invalid escape sequence in "{self.data[start:pos + 2]}"')
                chars.append(chr(int(digits, 16)))
                pos += 2 + width
            else:
                self.pos = pos
                raise self.error(f'invalid escape sequence in "{self.data[start:pos + 2]}"')

        self.pos = pos + 1
        return "".join(chars)

    def parse_tag(self) -> str:
        self.skip_spaces(True)
        ch = self.current

        if ch == "`":
            end = self.data.find("`", self.pos + 1)
            if end < 0 or end >= self.size:
                self.pos = self.size
                raise self.error("unexpected end of text")
            text = self.data[self.pos + 1 : end]
            self.line += text.count("\n")
            self.pos = end + 1
            self.skip_spaces(False)
            return text

        if ch in ("'", '"'):
            text = self._read_escaped(self.pos + 1, ch)
            self.skip_spaces(False)
            return text

        start = self.pos
        while self.pos < self.size:
            ch = self.data[self.pos]
            if ch.isspace() or ch in _STOP_SYMBOLS:
                break
            self.pos += 1
        text = self.data[start : self.pos]
        self.skip_spaces(False)
        return text

    def parse_node(self) -> DataNode:
        tag = self.parse_tag()
        self.skip_spaces(True)
        if self.current != "=":
            raise self.error("expected '=' after a tag name")

        self.pos += 1
        self.skip_spaces(True)
        ch = self.current
        if ch == "[":
            return DataNode(tag, self.parse_array())
        if ch == "{":
            return DataNode(tag, self.parse_object("_"))
        if ch in "}]=":
            raise self.error("expected '[', '{' or a tag name after '='")

        text = self.parse_tag()
        if self.current == "{":
            return DataNode(tag, self.parse_object(text))
        return DataNode(tag, text)

    def parse_object(self, tag: str) -> DataObject:
        if self.current != "{":
            raise self.error("expected '{'")
        self.pos += 1
        obj = DataObject(tag)

        while self.pos < self.size:
            self.skip_spaces(True)
            if self.current == "}":
                self.pos += 1
                self.skip_spaces(False)
                return obj

            obj.nodes.append(self.parse_node())

            ch = self.current
            if ch == "}":
                self.pos += 1
                self.skip_spaces(False)
                return obj
            if ch not in (",", "\n"):
                raise self.error("expected '}', '\\n' or ','")
            if ch == ",":
                self.pos += 1
            self.skip_spaces(True)
            while self.current == ",":
                self.pos += 1
                self.skip_spaces(True)

        raise self.error("unexpected end of text")

    def parse_array(self) -> list[DataValue]:
        self.pos += 1
        array: list[DataValue] = []

        while self.pos < self.size:
            self.skip_spaces(True)
            while self.current == ",":
                self.pos += 1
                self.skip_spaces(True)
            if self.pos >= self.size:
                break
            if self.current == "]":
                self.pos += 1
                self.skip_spaces(False)
                return array

            text = self.parse_tag()
            if self.current == "{":
                array.append(self.parse_object(text))
            else:
                array.append(text)

            if self.current not in ("]", ",", "\n"):
                raise self.error("expected ']' or ','")

        raise self.error("unexpected end of text")


def parse_data(text: str) -> DataObject:
    """
    Parse .rui text into a DataObject.

    Args:
        text: Source text containing one top-level object

    Returns:
        Parsed object

    Raises:
        DataParseError: On syntax errors
    """
    parser = _Parser(text)
    tag = parser.parse_tag()
    return parser.parse_object(tag)


def parse_data_result(text: str) -> Result[DataObject, DataParseError]:
    """Parse .rui text into a Result instead of raising."""
    try:
        return Success(parse_data(text))
    except DataParseError as e:
        return Failure(e)


def parse_data_text(text: str) -> DataObject | None:
    """Parse .rui text, logging and returning None on failure."""
    try:
        return parse_data(text)
    except DataParseError as e:
        report_error(e)
        return None
