"""
View Factory
Build view trees from .rui templates and find views by id path.

A template is a DataObject whose tag names the view class
(``ListLayout { orientation = start-to-end, content = [...] }``). Widget
modules register their classes under ``view_tag`` when imported.
"""

from typing import Any

from ..core.errors import NotFoundError, UnknownTagError, report_error
from ..core.logging_config import get_logger
from ..data import DataObject, parse_data_text

logger = get_logger(__name__)

_creators: dict[str, Any] = {}


def register_view_creator(view_class: Any, tag: str = "") -> None:
    """Make a view class available to templates under ``tag`` (default: its ``view_tag``)."""
    _creators[(tag or view_class.view_tag).lower()] = view_class


def view_creator(tag: str) -> Any:
    return _creators.get(tag.lower())


def create_view_from_object(session, obj: DataObject) -> Any:
    """
    Build a view (and its content) from a template object.

    Outbound updates are suppressed while the tree is built; the caller
    renders it once attached.

    Returns:
        The view, or None if the tag names no registered view class
    """
    view_class = view_creator(obj.tag)
    if view_class is None:
        report_error(UnknownTagError(f'unknown view "{obj.tag}"', tag=obj.tag))
        return None
    with session.updates_ignored():
        return view_class(session, obj)


def create_view_from_text(session, text: str) -> Any:
    """Parse .rui text and build the view it describes; None on any error."""
    obj = parse_data_text(text)
    if obj is None:
        return None
    return create_view_from_object(session, obj)


def _find(view: Any, view_id: str) -> Any:
    if view.id == view_id:
        return view
    for child in view.subviews():
        found = _find(child, view_id)
        if found is not None:
            return found
    return None


def view_by_id(root: Any, *path: str) -> Any:
    """
    Find a view below ``root`` by a path of ids.

    Each path element may itself be ``/``-joined; every segment is searched
    for depth first starting at the view the previous segment found.

    Returns:
        The view, or None if a segment is not found
    """
    view = root
    for element in path:
        for view_id in element.split("/"):
            if not view_id:
                continue
            if view is None:
                return None
            found = _find(view, view_id)
            if found is None:
                report_error(NotFoundError(f'view "{view_id}" not found', view_id=view_id, path="/".join(path)))
                return None
            view = found
    return view
