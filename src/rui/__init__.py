"""
RUI
Server-driven UI: the view graph lives in Python, the browser renders it.

The HTTP front door lives in ``rui.server``.
"""

from .core import AppParams, Settings, configure_logging, get_logger, get_settings
from .values import Color, SizeUnit, AngleUnit, Range, Frame, string_to_color, px, em, percent, fr, deg
from .values.enums import (
    ArrowAlign,
    ArrowPosition,
    HorizontalAlign,
    ListWrap,
    Orientation,
    StackAnimation,
    TabsPosition,
    VerticalAlign,
)
from .data import DataObject, parse_data_text
from .properties import tags
from .styles import ViewStyle, new_linear_gradient, new_radial_gradient
from .animation import Animation, KeyframeAnimation
from .events import KeyEvent, MouseEvent, PointerEvent, TouchEvent, names
from .theme import Theme, add_resources
from .views import (
    AudioPlayer,
    Button,
    CanvasView,
    Checkbox,
    ColorPicker,
    CustomView,
    DatePicker,
    DropDownList,
    EditView,
    ImageView,
    ListView,
    NumberPicker,
    ProgressBar,
    TableView,
    TextView,
    TimePicker,
    VideoPlayer,
    View,
    ViewsContainer,
    create_view_from_object,
    create_view_from_text,
    view_by_id,
)
from .containers import AbsoluteLayout, ColumnLayout, GridLayout, ListLayout, StackLayout, TabsLayout
from .canvas import Canvas, Path
from .session import Session, SessionContent
from .popup import Popup, PopupButton, show_cancellable_question, show_message, show_question

__version__ = "0.1.0"

__all__ = [
    # Config
    "AppParams",
    "Settings",
    "configure_logging",
    "get_logger",
    "get_settings",
    # Values
    "AngleUnit",
    "Color",
    "Frame",
    "Range",
    "SizeUnit",
    "deg",
    "em",
    "fr",
    "percent",
    "px",
    "string_to_color",
    "ArrowAlign",
    "ArrowPosition",
    "HorizontalAlign",
    "ListWrap",
    "Orientation",
    "StackAnimation",
    "TabsPosition",
    "VerticalAlign",
    # Data
    "DataObject",
    "parse_data_text",
    # Properties and styles
    "tags",
    "ViewStyle",
    "new_linear_gradient",
    "new_radial_gradient",
    "Animation",
    "KeyframeAnimation",
    # Events
    "names",
    "KeyEvent",
    "MouseEvent",
    "PointerEvent",
    "TouchEvent",
    # Theme
    "Theme",
    "add_resources",
    # Views
    "AudioPlayer",
    "Button",
    "CanvasView",
    "Checkbox",
    "ColorPicker",
    "CustomView",
    "DatePicker",
    "DropDownList",
    "EditView",
    "ImageView",
    "ListView",
    "NumberPicker",
    "ProgressBar",
    "TableView",
    "TextView",
    "TimePicker",
    "VideoPlayer",
    "View",
    "ViewsContainer",
    "create_view_from_object",
    "create_view_from_text",
    "view_by_id",
    # Containers
    "AbsoluteLayout",
    "ColumnLayout",
    "GridLayout",
    "ListLayout",
    "StackLayout",
    "TabsLayout",
    # Canvas
    "Canvas",
    "Path",
    # Session
    "Session",
    "SessionContent",
    # Popups
    "Popup",
    "PopupButton",
    "show_message",
    "show_question",
    "show_cancellable_question",
]
