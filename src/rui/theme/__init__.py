"""Themes, constants, string tables and the resource registry."""

from .theme import (
    CONSTANT_SEPARATORS,
    MediaOrientation,
    MediaRule,
    Theme,
    create_theme_from_text,
    parse_media_rule,
)
from .strings import StringTables
from .resources import ResourceRegistry, ScaledImage, add_resources, package_text, resources

__all__ = [
    # Theme
    "CONSTANT_SEPARATORS",
    "MediaOrientation",
    "MediaRule",
    "Theme",
    "create_theme_from_text",
    "parse_media_rule",
    # Strings
    "StringTables",
    # Registry
    "ResourceRegistry",
    "ScaledImage",
    "add_resources",
    "package_text",
    "resources",
]
