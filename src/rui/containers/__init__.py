"""Layout containers: list, grid, absolute, column, stack and tabs."""

from .layouts import AbsoluteLayout, ColumnLayout, GridLayout, ListLayout
from .stack import POP_TAG, PUSH_TAG, StackLayout
from .tabs import TabsLayout

__all__ = [
    "AbsoluteLayout",
    "ColumnLayout",
    "GridLayout",
    "ListLayout",
    # Stack
    "POP_TAG",
    "PUSH_TAG",
    "StackLayout",
    "TabsLayout",
]
