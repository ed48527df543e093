"""
Property bag: a tag-keyed mapping with normalization, typed coercion and
post-commit change notification.

Every view, style and composite sub-property is a ``PropertyBag``. The
public ``set``/``remove`` entry points never raise: framework errors are
reported to the log and turned into ``False``.
"""

from typing import Any, Callable, Iterable

from ..core.errors import RUIError, UnknownTagError, report_error
from ..data import DataNode, DataObject, NodeType
from .coerce import coerce_value
from .schema import PropertyKind, property_kind


ChangeListener = Callable[[Any, str], None]


def same_value(old: Any, new: Any) -> bool:
    """Structural equality that does not confuse ``True`` with ``1``."""
    return type(old) is type(new) and old == new


class PropertyBag:
    """
    Base property storage.

    Subclasses customize behaviour through three hooks:
    ``normalize`` (alias collapsing), ``_set`` / ``_remove`` (returning the
    list of observably changed tags) and ``_apply_changes`` (what happens
    after a commit).
    """

    # None accepts any tag
    supported_tags: frozenset[str] | None = None

    # Alias -> canonical tag
    aliases: dict[str, str] = {}

    # Local tag -> tag whose schema entry types it
    schema_tags: dict[str, str] = {}

    def __init__(self, params: dict[str, Any] | DataObject | None = None):
        self._properties: dict[str, Any] = {}
        self._change_listeners: dict[str, ChangeListener] = {}
        if params is not None:
            self.set_params(params)

    # ========================================================================
    # Public API
    # ========================================================================

    def normalize(self, tag: str) -> str:
        """Canonical form of a tag. Idempotent."""
        tag = tag.strip().lower()
        return self.aliases.get(tag, tag)

    def get(self, tag: str) -> Any:
        """Stored value of a tag, or None when absent."""
        return self._get(self.normalize(tag))

    def set(self, tag: str, value: Any) -> bool:
        """
        Set a property. ``None`` removes it.

        Args:
            tag: Property name (aliases accepted)
            value: New value

        Returns:
            True if the value was accepted (even when nothing changed)
        """
        tag = self.normalize(tag)
        try:
            changed = self._remove(tag) if value is None else self._set(tag, value)
        except RUIError as e:
            report_error(e, tag=tag, bag=type(self).__name__)
            return False
        self._apply_changes(changed)
        return True

    def remove(self, tag: str) -> None:
        """Remove a property and everything it controls."""
        tag = self.normalize(tag)
        self._apply_changes(self._remove(tag))

    def all_tags(self) -> list[str]:
        return list(self._properties)

    def is_empty(self) -> bool:
        return not self._properties

    def clear(self) -> None:
        changed = list(self._properties)
        self._properties.clear()
        self._apply_changes(changed)

    def set_change_listener(self, tag: str, listener: ChangeListener | None) -> None:
        """Register the single post-commit callback of a tag; None unregisters."""
        tag = self.normalize(tag)
        if listener is None:
            self._change_listeners.pop(tag, None)
        else:
            self._change_listeners[tag] = listener

    def set_params(self, params: dict[str, Any] | DataObject) -> bool:
        """Set several properties from a mapping or a DataObject."""
        if isinstance(params, DataObject):
            items: Iterable[tuple[str, Any]] = (
                (node.tag, node_to_value(node)) for node in params.nodes
            )
        else:
            items = params.items()
        result = True
        for tag, value in items:
            result = self.set(tag, value) and result
        return result

    def copy_from(self, other: "PropertyBag") -> None:
        """Replace the contents with a copy of another bag's properties."""
        self._properties = dict(other._properties)

    def __contains__(self, tag: str) -> bool:
        return self.normalize(tag) in self._properties

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and other._properties == self._properties

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._properties!r})"

    # ========================================================================
    # Hooks
    # ========================================================================

    def schema_tag(self, tag: str) -> str:
        return self.schema_tags.get(tag, tag)

    def property_kind(self, tag: str) -> PropertyKind:
        return property_kind(self.schema_tag(tag))

    def _get(self, tag: str) -> Any:
        return self._properties.get(tag)

    def _check_tag(self, tag: str) -> None:
        if self.supported_tags is not None and tag not in self.supported_tags:
            raise UnknownTagError(
                f'"{tag}" property is not supported by {type(self).__name__}', tag=tag
            )

    def _set(self, tag: str, value: Any) -> list[str]:
        self._check_tag(tag)
        return self._set_plain(tag, value)

    def _set_plain(self, tag: str, value: Any) -> list[str]:
        stored = coerce_value(self.schema_tag(tag), value, self.property_kind(tag))
        if stored is None:
            return self._remove(tag)
        return self._store(tag, stored)

    def _store(self, tag: str, value: Any) -> list[str]:
        if tag in self._properties and same_value(self._properties[tag], value):
            return []
        self._properties[tag] = value
        return [tag]

    def _remove(self, tag: str) -> list[str]:
        if tag in self._properties:
            del self._properties[tag]
            return [tag]
        return []

    def _apply_changes(self, changed: list[str]) -> None:
        for tag in changed:
            listener = self._change_listeners.get(tag)
            if listener is not None:
                listener(self, tag)


def node_to_value(node: DataNode) -> Any:
    """Plain Python value of a DataNode: text, DataObject or list."""
    if node.type == NodeType.TEXT:
        return node.text
    if node.type == NodeType.OBJECT:
        return node.object
    return node.array
