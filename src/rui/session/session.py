"""
Session
Per-tab state: view index, theme, bridge, popups, images and timers.

All view mutations of a session run on its worker thread. Inbound browser
messages are dispatched by ``handle_message``: answers and image results
go to their managers, system commands are handled here, and everything
else is routed to the view whose html id the message carries.
"""

import threading
import time
from contextlib import contextmanager
from itertools import count
from typing import Any, Callable, Iterator
from urllib.parse import urlparse

from ..animation import KeyframeAnimation
from ..core.config import POPUP_LAYER_ID, ROOT_VIEW_ID, AppParams
from ..core.errors import InvalidFormatError, report_error
from ..core.logging_config import LogContext, get_logger
from ..core.metrics import metrics_collector
from ..data import DataObject, NodeType, parse_data
from ..events import KeyEvent, names
from ..popup.manager import PopupManager
from ..styles import ViewStyle
from ..theme import Theme, resources
from ..values import Color, parse_color, parse_float
from .bridge import Bridge
from .content import SessionContent
from .images import ImageManager
from .worker import SessionWorker

logger = get_logger(__name__)

# Hotkey modifier letters in canonical order
_MODIFIER_LETTERS = (("alt", "a"), ("ctrl", "c"), ("meta", "m"), ("shift", "s"))


def hotkey_code(key_code: str, control_keys: frozenset[str] | set[str] | tuple[str, ...] = ()) -> str:
    """``keya-cs`` style key of a hotkey: lowercased code plus modifier letters."""
    code = key_code.lower()
    letters = "".join(letter for name, letter in _MODIFIER_LETTERS if name in control_keys)
    return f"{code}-{letters}" if letters else code


class Session:
    """State of one connected browser tab."""

    def __init__(
        self,
        session_id: int,
        content: SessionContent | None = None,
        params: AppParams | None = None,
        bridge: Bridge | None = None,
    ):
        self.id = session_id
        self.content = content
        self.params = params or AppParams()
        self.bridge = bridge

        # Client info
        self.touch_screen = False
        self.dark_theme = False
        self.text_direction = "ltr"
        self.language = ""
        self.languages: list[str] = []
        self.pixel_ratio = 1.0
        self.user_agent = ""
        self.screen_width = 0
        self.screen_height = 0
        self.client_storage: dict[str, str] = {}

        # View graph
        self.root_view: Any = None
        self._view_ids = count(1)
        self._views: dict[str, Any] = {}
        self._ignore_updates = 0
        self.focused_html_id = ""

        # Theme and animations
        self._custom_theme: Theme | None = None
        self._theme: Theme | None = None
        self._animations: dict[str, tuple[KeyframeAnimation, int]] = {}

        self._hotkeys: dict[str, Callable[..., Any]] = {}
        self._timer_ids = count(1)
        self._timers: dict[int, Callable[..., Any]] = {}

        self.pause_time: float | None = None
        self._auto_close_timer: threading.Timer | None = None
        self.closed = False

        self.images = ImageManager(self)
        self.popups = PopupManager(self)
        self.worker = SessionWorker(session_id, self.handle_message)

    def __repr__(self) -> str:
        return f"Session({self.id})"

    # ========================================================================
    # View index
    # ========================================================================

    def next_view_id(self) -> str:
        return f"id{next(self._view_ids):06d}"

    def register_view(self, view: Any) -> None:
        self._views[view.html_id()] = view

    def unregister_view(self, html_id: str) -> None:
        self._views.pop(html_id, None)
        if self.focused_html_id == html_id:
            self.focused_html_id = ""

    def view_by_html_id(self, html_id: str) -> Any:
        return self._views.get(html_id)

    def set_root_view(self, view: Any) -> None:
        self.root_view = view
        if view is not None:
            view.set_parent_html_id(ROOT_VIEW_ID)

    # ========================================================================
    # Update gate and outbound wrappers
    # ========================================================================

    def ignore_updates(self) -> bool:
        return self.bridge is None or self.bridge.closed or self._ignore_updates > 0

    def set_ignore_updates(self, ignore: bool) -> None:
        if ignore:
            self._ignore_updates += 1
        elif self._ignore_updates > 0:
            self._ignore_updates -= 1

    @contextmanager
    def updates_ignored(self) -> Iterator[None]:
        """Suppress outbound view updates inside the block."""
        self.set_ignore_updates(True)
        try:
            yield
        finally:
            self.set_ignore_updates(False)

    @contextmanager
    def update_script(self, html_id: str = "") -> Iterator[None]:
        """Send every update made inside the block as one frame."""
        self.start_update_script(html_id)
        try:
            yield
        finally:
            self.finish_update_script(html_id)

    def start_update_script(self, html_id: str = "") -> None:
        if self.bridge is not None:
            self.bridge.start_update_script(html_id)

    def finish_update_script(self, html_id: str = "") -> None:
        if self.bridge is not None:
            self.bridge.finish_update_script(html_id)

    def call_function(self, function: str, *args: Any) -> None:
        if self.bridge is not None:
            self.bridge.call_function(function, *args)

    def run_script(self, script: str) -> None:
        if self.bridge is not None:
            self.bridge.send_message(script)

    def update_inner_html(self, html_id: str, html: str) -> None:
        if not self.ignore_updates():
            self.bridge.update_inner_html(html_id, html)

    def append_to_inner_html(self, html_id: str, html: str) -> None:
        if not self.ignore_updates():
            self.bridge.append_to_inner_html(html_id, html)

    def update_css_property(self, html_id: str, name: str, value: str) -> None:
        if not self.ignore_updates():
            self.bridge.update_css_property(html_id, name, value)

    def update_property(self, html_id: str, name: str, value: Any) -> None:
        if not self.ignore_updates():
            self.bridge.update_property(html_id, name, value)

    def remove_property(self, html_id: str, name: str) -> None:
        if not self.ignore_updates():
            self.bridge.remove_property(html_id, name)

    def remote_value(self, function: str, *args: Any) -> DataObject | None:
        """Getter-RPC; None when there is no bridge."""
        if self.bridge is None:
            logger.warning("getter_without_bridge", function=function)
            return None
        return self.bridge.remote_value(function, *args)

    def html_property_value(self, html_id: str, name: str) -> str:
        answer = self.remote_value("getPropertyValue", html_id, name)
        if answer is None:
            return ""
        return answer.property_value("value") or ""

    # ========================================================================
    # Theme, constants and strings
    # ========================================================================

    def current_theme(self) -> Theme:
        if self._theme is None:
            theme = resources.default_theme.copy()
            if self._custom_theme is not None:
                theme.append(self._custom_theme)
            self._theme = theme
        return self._theme

    def set_theme(self, theme: Theme | str | None) -> bool:
        """Switch to a theme object or a registered theme name, then reload the page."""
        if isinstance(theme, str):
            found = resources.theme(theme)
            if found is None:
                logger.error("theme_not_found", theme=theme)
                return False
            theme = found
        self._custom_theme = theme
        self._theme = None
        self.reload()
        return True

    def set_dark_theme(self, dark: bool) -> None:
        if self.dark_theme != dark:
            self.dark_theme = dark
            self.reload()

    def get_constant(self, name: str) -> str | None:
        return self.current_theme().constant(name, self.touch_screen)

    def get_color_constant(self, name: str) -> Color | None:
        return self.current_theme().color(name, self.dark_theme)

    def image_constant(self, name: str) -> str | None:
        return self.current_theme().image(name, self.dark_theme)

    def style(self, name: str) -> ViewStyle | None:
        return self.current_theme().style(name)

    def get_string(self, tag: str) -> str:
        """Localized text of a tag; the tag itself when no table has it."""
        text, _ = resources.strings.get_string(tag, self.language, self.languages)
        return text

    def set_language(self, language: str) -> None:
        if language != self.language:
            self.language = language
            self.reload()

    # ========================================================================
    # Keyframe animations
    # ========================================================================

    def use_animation(self, animation: KeyframeAnimation) -> None:
        """Reference an animation; its @keyframes rule is sent on first use."""
        entry = self._animations.get(animation.name)
        if entry is not None:
            self._animations[animation.name] = (animation, entry[1] + 1)
            return
        self._animations[animation.name] = (animation, 1)
        if not self.ignore_updates():
            self.call_function("appendAnimationCSS", animation.keyframes_css(self))

    def release_animation(self, animation: KeyframeAnimation) -> None:
        """Drop a reference; the last release removes the @keyframes rule."""
        entry = self._animations.get(animation.name)
        if entry is None:
            return
        if entry[1] > 1:
            self._animations[animation.name] = (animation, entry[1] - 1)
            return
        del self._animations[animation.name]
        if not self.ignore_updates():
            self.call_function("removeAnimationCSS", animation.name)

    def animation_names(self) -> list[str]:
        return list(self._animations)

    def animation_css(self) -> str:
        return "".join(animation.keyframes_css(self) for animation, _ in self._animations.values())

    def css_text(self) -> str:
        """Complete style sheet of the page: theme styles, then @keyframes rules."""
        return self.current_theme().css_text(self) + self.animation_css()

    # ========================================================================
    # Page
    # ========================================================================

    def root_html(self) -> str:
        if self.root_view is None:
            return ""
        buffer: list[str] = []
        self.root_view.render(buffer)
        return "".join(buffer)

    def reload(self) -> None:
        """Send the style sheet and re-render the whole view tree."""
        if self.bridge is None or self.bridge.closed:
            return
        with self.update_script():
            self.call_function("setStyles", self.css_text())
            if self.root_view is not None:
                self.bridge.update_inner_html(ROOT_VIEW_ID, self.root_html())
                self.call_function("scanElementsSize")
            if self.popups.popups:
                self.popups.update_layer()

    def start(self) -> bool:
        """
        Build the root view from the content and render the page.

        Returns:
            False if the content refused to create a root view
        """
        if self.content is None:
            logger.error("session_without_content")
            return False
        with self.updates_ignored():
            root = self.content.create_root_view(self)
        if root is None:
            logger.error("root_view_not_created")
            return False
        self.set_root_view(root)
        self.reload()
        metrics_collector.record_session_opened()
        logger.info("session_started", root=type(root).__name__)
        self.content.on_start(self)
        self.content.on_resume(self)
        return True

    def set_title(self, title: str) -> None:
        self.call_function("setTitle", self.get_string(title))

    def set_title_color(self, color: Color | str) -> None:
        if isinstance(color, str):
            try:
                color = parse_color(color)
            except InvalidFormatError as e:
                report_error(e)
                return
        self.call_function("setTitleColor", color.css_string())

    def open_url(self, url: str) -> None:
        parsed = urlparse(url)
        if not parsed.scheme and not url.startswith("/"):
            logger.error("invalid_url", url=url)
            return
        self.call_function("openURL", url)

    def focus_view(self, view: Any) -> None:
        self.call_function("focus", view.html_id())

    def blur_view(self, view: Any) -> None:
        self.call_function("blur", view.html_id())

    # ========================================================================
    # Client storage, hotkeys and timers
    # ========================================================================

    def client_item(self, key: str) -> str | None:
        return self.client_storage.get(key)

    def set_client_item(self, key: str, value: str) -> None:
        self.client_storage[key] = value
        self.call_function("localStorageSet", key, value)

    def remove_client_item(self, key: str) -> None:
        self.client_storage.pop(key, None)
        self.call_function("localStorageRemove", key)

    def remove_all_client_items(self) -> None:
        self.client_storage.clear()
        self.call_function("localStorageClear")

    def set_hotkey(
        self,
        key_code: str,
        control_keys: frozenset[str] | set[str] | tuple[str, ...],
        fn: Callable[["Session"], Any] | None,
    ) -> None:
        """Bind ``fn(session)`` to a key code (``KeyA``, ``F5`` ...) plus modifiers; None unbinds."""
        code = hotkey_code(key_code, control_keys)
        if fn is None:
            self._hotkeys.pop(code, None)
        else:
            self._hotkeys[code] = fn

    def _hotkey(self, event: KeyEvent) -> None:
        if self.popups.key_event(event):
            return
        fn = self._hotkeys.get(hotkey_code(event.code, event.control_keys()))
        if fn is not None:
            fn(self)

    def start_timer(self, ms: int, fn: Callable[["Session"], Any]) -> int:
        """Run ``fn(session)`` every ``ms`` milliseconds; returns the timer id."""
        if self.bridge is None:
            logger.warning("timer_without_bridge")
            return 0
        timer_id = next(self._timer_ids)
        self._timers[timer_id] = fn
        self.call_function("startTimer", ms, timer_id)
        return timer_id

    def stop_timer(self, timer_id: int) -> None:
        if self._timers.pop(timer_id, None) is not None:
            self.call_function("stopTimer", timer_id)

    # ========================================================================
    # Inbound messages
    # ========================================================================

    def post(self, message: DataObject) -> None:
        """Hand an inbound message to the session thread."""
        if message.tag == "answer" and self.bridge is not None:
            self.bridge.answer_received(message)
            return
        self.worker.start()
        self.worker.post(message)

    def post_call(self, fn: Callable[[], Any]) -> None:
        self.worker.start()
        self.worker.post_call(fn)

    def handle_text(self, text: str) -> None:
        try:
            message = parse_data(text)
        except InvalidFormatError as e:
            report_error(e, source="inbound")
            return
        self.handle_message(message)

    def handle_message(self, message: DataObject) -> None:
        """Dispatch one inbound message; updates it causes go out as one frame."""
        command = message.tag
        metrics_collector.record_inbound(command)
        with LogContext(command=command), self.update_script():
            self._dispatch(command, message)

    def _dispatch(self, command: str, message: DataObject) -> None:
        if command == "answer":
            if self.bridge is not None:
                self.bridge.answer_received(message)
        elif command == "imageLoaded":
            self.images.image_loaded(message)
        elif command == "imageError":
            self.images.image_load_error(message)
        elif command == "session-close":
            self.close()
        elif command == "session-pause":
            self.on_pause()
        elif command == "session-resume":
            self.on_resume()
        elif command == "timer":
            self._handle_timer(message)
        elif command == "root-size":
            self._handle_root_size(message)
        elif command == "resize":
            self._handle_resize(message)
        elif command == "sessionInfo":
            self.handle_session_info(message)
        elif command == "storageError":
            logger.error("client_storage_error", error=message.property_value("error"))
        else:
            self._handle_view_event(command, message)

    def _handle_view_event(self, command: str, message: DataObject) -> None:
        html_id = message.property_value("id")
        if html_id is None:
            logger.error("event_without_id", command=command)
            return
        if html_id == POPUP_LAYER_ID:
            self.popups.handle_layer_event(command, message)
        elif html_id != "body":
            view = self.view_by_html_id(html_id)
            if view is None:
                logger.debug("event_view_not_found", html_id=html_id, command=command)
            else:
                with LogContext(view_id=html_id):
                    view.handle_command(command, message)
        if command == names.KEY_DOWN_EVENT:
            self._hotkey(KeyEvent.from_data(message))

    def _handle_timer(self, message: DataObject) -> None:
        text = message.property_value("timerID")
        try:
            timer_id = int(text or "")
        except ValueError:
            logger.error("invalid_timer_id", timer_id=text)
            return
        fn = self._timers.get(timer_id)
        if fn is None:
            logger.error("timer_not_found", timer_id=timer_id)
            return
        fn(self)

    def _handle_root_size(self, message: DataObject) -> None:
        width = parse_float(message.property_value("width") or "")
        height = parse_float(message.property_value("height") or "")
        if width:
            self.screen_width = int(width)
        if height:
            self.screen_height = int(height)

    def _handle_resize(self, message: DataObject) -> None:
        node = message.property_by_tag("views")
        if node is None or node.type != NodeType.ARRAY:
            logger.error("resize_without_views")
            return
        for item in node.array:
            if not isinstance(item, DataObject):
                continue

            def number(tag: str) -> float:
                return parse_float(item.property_value(tag) or "") or 0.0

            html_id = item.property_value("id") or ""
            frame = (number("x"), number("y"), number("width"), number("height"))
            base, _, index = html_id.partition("-")
            view = self.view_by_html_id(base)
            if view is None:
                logger.debug("resize_view_not_found", html_id=html_id)
            elif index:
                view.on_item_resize(index, *frame)
            else:
                view.on_resize(*frame)
                view.set_scroll(
                    number("scroll-x"), number("scroll-y"), number("scroll-width"), number("scroll-height")
                )

    def handle_session_info(self, info: DataObject) -> None:
        """Apply the client description sent with ``startSession``/``sessionInfo``."""
        def flag(text: str) -> bool:
            return text in ("1", "true")

        if (value := info.property_value("touch")) is not None:
            self.touch_screen = flag(value)
        if (value := info.property_value("user-agent")) is not None:
            self.user_agent = value
        if info.property_value("direction") == "rtl":
            self.text_direction = "rtl"
        if (value := info.property_value("language")) is not None:
            self.language = value
        if (value := info.property_value("languages")) is not None:
            self.languages = [lang.strip() for lang in value.split(",") if lang.strip()]
        if (value := info.property_value("dark")) is not None:
            self.dark_theme = flag(value)
        if (value := info.property_value("pixel-ratio")) is not None:
            ratio = parse_float(value)
            if ratio is None:
                logger.error("invalid_pixel_ratio", value=value)
            else:
                self.pixel_ratio = ratio
        storage = info.property_object("storage")
        if storage is not None:
            for node in storage.nodes:
                if node.type == NodeType.TEXT:
                    self.client_storage[node.tag] = node.text
        self._theme = None

    # ========================================================================
    # Lifecycle
    # ========================================================================

    def on_pause(self) -> None:
        self.pause_time = time.monotonic()
        if self.content is not None:
            self.content.on_pause(self)
        if self.params.socket_auto_close > 0:
            self._cancel_auto_close()
            self._auto_close_timer = threading.Timer(
                self.params.socket_auto_close, self.post_call, args=(self._auto_close,)
            )
            self._auto_close_timer.daemon = True
            self._auto_close_timer.start()

    def on_resume(self) -> None:
        self.pause_time = None
        self._cancel_auto_close()
        if self.content is not None:
            self.content.on_resume(self)

    def _cancel_auto_close(self) -> None:
        if self._auto_close_timer is not None:
            self._auto_close_timer.cancel()
            self._auto_close_timer = None

    def _auto_close(self) -> None:
        if self.pause_time is None or self.closed:
            return
        if time.monotonic() - self.pause_time >= self.params.socket_auto_close:
            logger.info("session_auto_closed", paused_for=self.params.socket_auto_close)
            self.close()

    def on_disconnect(self) -> None:
        if self.content is not None:
            self.content.on_disconnect(self)

    def on_reconnect(self, bridge: Bridge) -> None:
        """Attach a new bridge to a live session and re-render the page."""
        self.bridge = bridge
        self.reload()
        if self.content is not None:
            self.content.on_reconnect(self)

    def close(self) -> None:
        """Finish the session: hooks, then bridge and worker shutdown."""
        if self.closed:
            return
        self.closed = True
        self._cancel_auto_close()
        if self.content is not None:
            if self.pause_time is None:
                self.content.on_pause(self)
            self.content.on_finish(self)
        if self.bridge is not None:
            self.bridge.close()
        self.worker.stop()
        metrics_collector.record_session_closed()
        logger.info("session_closed")
