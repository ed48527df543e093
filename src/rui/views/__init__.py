"""Views: the base view, basic widgets and the template factory."""

from .factory import (
    create_view_from_object,
    create_view_from_text,
    register_view_creator,
    view_by_id,
    view_creator,
)
from .view import View, transition_property
from .container import ViewsContainer
from .text import TextView
from .button import Button, Checkbox
from .image import ImageView
from .media import AudioPlayer, MEDIA_DOM_EVENTS, MediaPlayer, VideoPlayer
from .canvas_view import DRAW_FUNCTION, CanvasView
from .custom import CustomView
from .edit import EditView
from .list_view import ListAdapter, ListView, TextListAdapter, ViewListAdapter
from .pickers import ColorPicker, DatePicker, DropDownList, InputPicker, NumberPicker, TimePicker
from .progress import ProgressBar
from .table import SimpleTableAdapter, TableAdapter, TableView

__all__ = [
    # Factory
    "create_view_from_object",
    "create_view_from_text",
    "register_view_creator",
    "view_by_id",
    "view_creator",
    # Base
    "View",
    "ViewsContainer",
    "transition_property",
    # Widgets
    "AudioPlayer",
    "Button",
    "CanvasView",
    "Checkbox",
    "CustomView",
    "DRAW_FUNCTION",
    "ImageView",
    "MEDIA_DOM_EVENTS",
    "MediaPlayer",
    "TextView",
    "VideoPlayer",
    # Inputs
    "ColorPicker",
    "DatePicker",
    "DropDownList",
    "EditView",
    "InputPicker",
    "NumberPicker",
    "ProgressBar",
    "TimePicker",
    # Lists and tables
    "ListAdapter",
    "ListView",
    "SimpleTableAdapter",
    "TableAdapter",
    "TableView",
    "TextListAdapter",
    "ViewListAdapter",
]
