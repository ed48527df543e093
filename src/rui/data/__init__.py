"""The .rui data tree: objects, parser and writer."""

from .objects import DataNode, DataObject, DataValue, NodeType
from .parser import parse_data, parse_data_result, parse_data_text
from .writer import quote, write_object

__all__ = [
    "DataNode",
    "DataObject",
    "DataValue",
    "NodeType",
    "parse_data",
    "parse_data_result",
    "parse_data_text",
    "quote",
    "write_object",
]
