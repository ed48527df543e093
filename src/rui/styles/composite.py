"""Base class of the nested property bags (border, radius, outline, ...)."""

from typing import Any

from ..core.errors import IncompatibleTypeError
from ..data import DataObject, parse_data
from ..properties import ENUM_PROPERTIES, PropertyBag, PropertyKind, node_to_value


def split_values(text: str) -> list[str]:
    """Split a comma separated list of one to four values."""
    return [part.strip() for part in text.split(",")]


class CompositeProperty(PropertyBag):
    """
    A property family stored as its own bag.

    ``prefix`` is stripped by ``normalize`` so the same composite accepts
    both its local leaf names (``left-style``) and the view-level names
    (``border-left-style``).
    """

    prefix = ""
    object_tag = "_"

    def normalize(self, tag: str) -> str:
        tag = tag.strip().lower()
        tag = self.aliases.get(tag, tag)
        if self.prefix and tag.startswith(self.prefix):
            tag = tag[len(self.prefix):]
        return self.aliases.get(tag, tag)

    def clone(self) -> "CompositeProperty":
        result = type(self)()
        result.copy_from(self)
        return result

    @classmethod
    def from_value(cls, tag: str, value: Any) -> "CompositeProperty":
        """
        Build the composite from any accepted ``set`` input.

        Raises:
            IncompatibleTypeError: If the value cannot describe this family
        """
        if isinstance(value, cls):
            return value.clone()
        if isinstance(value, (DataObject, dict)):
            result = cls()
            result._set_leaves(value)
            return result
        if isinstance(value, str):
            return cls.from_value(tag, parse_data(value))
        raise IncompatibleTypeError(
            f'invalid value type of "{tag}" property: {type(value).__name__}',
            tag=tag,
            value=repr(value),
        )

    def _set_leaves(self, params: dict[str, Any] | DataObject) -> None:
        """Set every leaf or raise on the first one that is rejected."""
        if isinstance(params, DataObject):
            items = [(node.tag, node_to_value(node)) for node in params.nodes]
        else:
            items = list(params.items())
        for tag, value in items:
            tag = self.normalize(tag)
            if value is None:
                self._remove(tag)
            else:
                self._set(tag, value)

    def value_text(self, tag: str) -> str:
        value = self._properties.get(tag)
        if value is None:
            return ""
        kind = self.property_kind(tag)
        if kind == PropertyKind.ENUM and isinstance(value, int):
            return ENUM_PROPERTIES[self.schema_tag(tag)].values[value]
        if kind == PropertyKind.BOOL and isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    def to_data_object(self) -> DataObject:
        result = DataObject(self.object_tag)
        for tag in self._properties:
            result.set_property_value(tag, self.value_text(tag))
        return result

    def __str__(self) -> str:
        return self.to_data_object().to_text()
