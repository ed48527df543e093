"""
Layouts
Containers that only differ in how the browser places their children.

The placement itself is plain CSS: the system class (defined by the client
stylesheet) selects flex, grid or absolute positioning, the container's own
properties project to the matching CSS declarations and ``child_css`` adds
the per-child declarations a layout needs.
"""

from typing import Any

from ..properties import tags
from ..styles import CSSDeclarations
from ..views import View, ViewsContainer, register_view_creator


class ListLayout(ViewsContainer):
    """
    Flex container. ``orientation`` picks the main axis, ``list-wrap``
    wrapping; ``gap`` sets both the row and the column gap.
    """

    view_tag = "ListLayout"
    system_class = "ruiListLayout"

    aliases = {
        **ViewsContainer.aliases,
        "wrap": tags.LIST_WRAP,
        "row-gap": tags.LIST_ROW_GAP,
        "column-gap": tags.LIST_COLUMN_GAP,
    }

    def _set(self, tag: str, value: Any) -> list[str]:
        if tag == tags.GAP:
            return self._set_plain(tags.LIST_ROW_GAP, value) + self._set_plain(tags.LIST_COLUMN_GAP, value)
        return super()._set(tag, value)

    def _remove(self, tag: str) -> list[str]:
        if tag == tags.GAP:
            return super()._remove(tags.LIST_ROW_GAP) + super()._remove(tags.LIST_COLUMN_GAP)
        return super()._remove(tag)

    def _get(self, tag: str) -> Any:
        if tag == tags.GAP:
            row = self._properties.get(tags.LIST_ROW_GAP)
            return row if row == self._properties.get(tags.LIST_COLUMN_GAP) else None
        return super()._get(tag)

    def child_css(self, child: View, builder: CSSDeclarations) -> None:
        builder.add("flex", "0 0 auto")


class GridLayout(ViewsContainer):
    """
    CSS grid container.

    ``cell-width`` / ``cell-height`` define the tracks, children choose
    their cells with ``row`` and ``column`` (ranges such as ``1:2``).
    ``vertical-align`` and ``horizontal-align`` align the cell content.
    """

    view_tag = "GridLayout"
    system_class = "ruiGridLayout"

    aliases = {
        **ViewsContainer.aliases,
        "vertical-align": tags.CELL_VERTICAL_ALIGN,
        "horizontal-align": tags.CELL_HORIZONTAL_ALIGN,
        "row-gap": tags.GRID_ROW_GAP,
        "column-gap": tags.GRID_COLUMN_GAP,
    }


class AbsoluteLayout(ViewsContainer):
    """Children are positioned by their own ``left``/``top``/``right``/``bottom``."""

    view_tag = "AbsoluteLayout"
    system_class = "ruiAbsoluteLayout"

    def child_css(self, child: View, builder: CSSDeclarations) -> None:
        builder.add("position", "absolute")


class ColumnLayout(ViewsContainer):
    """Multi-column text flow; ``gap`` is the column gap."""

    view_tag = "ColumnLayout"

    aliases = {**ViewsContainer.aliases, "gap": tags.COLUMN_GAP}


register_view_creator(ListLayout)
register_view_creator(GridLayout)
register_view_creator(AbsoluteLayout)
register_view_creator(ColumnLayout)
