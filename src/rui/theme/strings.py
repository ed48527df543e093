"""Localized string tables loaded from ``strings`` .rui files."""

from ..core.errors import DataParseError, report_error
from ..core.logging_config import get_logger
from ..data import DataObject, NodeType, parse_data

logger = get_logger(__name__)


class StringTables:
    """Per-language tag -> text tables."""

    def __init__(self) -> None:
        self._tables: dict[str, dict[str, str]] = {}

    def _merge(self, obj: DataObject, language: str) -> None:
        table = self._tables.setdefault(language, {})
        for node in obj.nodes:
            if node.type == NodeType.TEXT:
                table[node.tag] = node.text

    def add_text(self, text: str) -> bool:
        """
        Load ``strings { lang = _{ key = value } }`` or ``strings:lang { key = value }``.

        Returns:
            False if the text does not parse or is not a string table
        """
        try:
            data = parse_data(text)
        except DataParseError as e:
            report_error(e, source="strings")
            return False

        if data.tag == "strings":
            for node in data.nodes:
                if node.type == NodeType.OBJECT:
                    self._merge(node.object, node.tag)
            return True
        if data.tag.startswith("strings:") and len(data.tag) > 8:
            self._merge(data, data.tag[8:])
            return True
        return False

    def lookup(self, tag: str, language: str) -> str | None:
        table = self._tables.get(language)
        if table is None:
            return None
        return table.get(tag)

    def get_string(self, tag: str, language: str, fallbacks: list[str] | tuple[str, ...] = ()) -> tuple[str, bool]:
        """
        Text of ``tag`` in ``language``, then in each fallback language.

        Returns:
            (text, found); the tag itself when no table has it
        """
        for lang in (language, *fallbacks):
            if not lang:
                continue
            text = self.lookup(tag, lang)
            if text is not None:
                return text, True
        logger.debug("string_not_found", tag=tag, language=language)
        return tag, False

    def languages(self) -> list[str]:
        return sorted(self._tables)

    def clear(self) -> None:
        self._tables.clear()
