"""Property model: tag table, schema, coercion, bag and resolvers."""

from . import tags
from .schema import ENUM_PROPERTIES, EnumSpec, PropertyKind, property_kind
from .coerce import coerce_value, is_constant_name, parse_bool
from .bag import PropertyBag, node_to_value, same_value
from .resolve import (
    angle_property,
    bool_property,
    color_property,
    enum_css_value,
    enum_property,
    float_property,
    int_property,
    range_property,
    size_property,
    string_property,
    value_to_angle,
    value_to_bool,
    value_to_color,
    value_to_enum,
    value_to_float,
    value_to_int,
    value_to_range,
    value_to_size,
    value_to_string,
)

__all__ = [
    "tags",
    # Schema
    "ENUM_PROPERTIES",
    "EnumSpec",
    "PropertyKind",
    "property_kind",
    # Coercion
    "coerce_value",
    "is_constant_name",
    "parse_bool",
    # Bag
    "PropertyBag",
    "node_to_value",
    "same_value",
    # Resolvers
    "angle_property",
    "bool_property",
    "color_property",
    "enum_css_value",
    "enum_property",
    "float_property",
    "int_property",
    "range_property",
    "size_property",
    "string_property",
    "value_to_angle",
    "value_to_bool",
    "value_to_color",
    "value_to_enum",
    "value_to_float",
    "value_to_int",
    "value_to_range",
    "value_to_size",
    "value_to_string",
]
