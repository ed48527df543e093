"""Browser session: bridge, worker, images and per-tab state."""

from .bridge import Bridge, RecordingBridge, error_answer, js_call, js_value
from .content import SessionContent
from .images import Image, ImageLoadingStatus, ImageManager
from .worker import SessionWorker
from .session import POPUP_LAYER_ID, ROOT_VIEW_ID, Session, hotkey_code

__all__ = [
    # Bridge
    "Bridge",
    "RecordingBridge",
    "error_answer",
    "js_call",
    "js_value",
    # Session
    "POPUP_LAYER_ID",
    "ROOT_VIEW_ID",
    "Session",
    "SessionContent",
    "SessionWorker",
    "hotkey_code",
    # Images
    "Image",
    "ImageLoadingStatus",
    "ImageManager",
]
