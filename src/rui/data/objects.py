"""In-memory form of .rui data: objects made of tagged nodes."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class NodeType(str, Enum):
    """Kind of value held by a DataNode."""

    TEXT = "text"
    OBJECT = "object"
    ARRAY = "array"


DataValue = Union[str, "DataObject"]


@dataclass
class DataNode:
    """A ``tag = value`` pair inside an object."""

    tag: str
    value: Union[str, "DataObject", list[DataValue]]

    @property
    def type(self) -> NodeType:
        if isinstance(self.value, list):
            return NodeType.ARRAY
        if isinstance(self.value, DataObject):
            return NodeType.OBJECT
        return NodeType.TEXT

    @property
    def text(self) -> str:
        return self.value if isinstance(self.value, str) else ""

    @property
    def object(self) -> "DataObject | None":
        return self.value if isinstance(self.value, DataObject) else None

    @property
    def array(self) -> list[DataValue]:
        return self.value if isinstance(self.value, list) else []


@dataclass
class DataObject:
    """
    Tagged object: ``tag { key = value, ... }``.

    Node order is preserved; tags are unique when set through
    ``set_property_value``/``set_property_object`` but the parser keeps
    duplicates as written.
    """

    tag: str
    nodes: list[DataNode] = field(default_factory=list)

    def properties_count(self) -> int:
        return len(self.nodes)

    def property(self, index: int) -> DataNode | None:
        if 0 <= index < len(self.nodes):
            return self.nodes[index]
        return None

    def property_by_tag(self, tag: str) -> DataNode | None:
        for node in self.nodes:
            if node.tag == tag:
                return node
        return None

    def property_value(self, tag: str) -> str | None:
        """Text of a text node, or None if absent or not text."""
        node = self.property_by_tag(tag)
        if node is not None and node.type == NodeType.TEXT:
            return node.text
        return None

    def property_object(self, tag: str) -> "DataObject | None":
        node = self.property_by_tag(tag)
        return node.object if node is not None else None

    def _set_node(self, node: DataNode) -> None:
        for i, existing in enumerate(self.nodes):
            if existing.tag == node.tag:
                self.nodes[i] = node
                return
        self.nodes.append(node)

    def set_property_value(self, tag: str, value: str) -> None:
        self._set_node(DataNode(tag, value))

    def set_property_object(self, tag: str, obj: "DataObject") -> None:
        self._set_node(DataNode(tag, obj))

    def set_property_array(self, tag: str, values: list[DataValue]) -> None:
        self._set_node(DataNode(tag, list(values)))

    def remove_property(self, tag: str) -> DataNode | None:
        for i, node in enumerate(self.nodes):
            if node.tag == tag:
                return self.nodes.pop(i)
        return None

    def to_params(self) -> dict[str, object]:
        """Non-empty nodes as a plain mapping (text, objects, or lists of both)."""
        params: dict[str, object] = {}
        for node in self.nodes:
            if node.type == NodeType.TEXT:
                if node.text:
                    params[node.tag] = node.text
            elif node.type == NodeType.OBJECT:
                params[node.tag] = node.object
            else:
                items = [item for item in node.array if item != ""]
                if items:
                    params[node.tag] = items
        return params

    def to_text(self, indent: str = "") -> str:
        from .writer import write_object

        return write_object(self, indent)

    def __str__(self) -> str:
        return self.to_text()
