"""HTTP front door: bootstrap page, resources and the session websocket."""

from .app import create_app, serve_socket, start_app
from .application import Application
from .bridge import WebSocketBridge
from .page import start_page

__all__ = [
    "Application",
    "WebSocketBridge",
    "create_app",
    "serve_socket",
    "start_app",
    "start_page",
]
