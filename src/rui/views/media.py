"""
Media Players
Audio and video players built on the ``<audio>``/``<video>`` elements.

Playback commands are fire-and-forget calls into the client; the current
playback state is read back through getter-RPCs.
"""

from html import escape

from ..data import DataObject
from ..events import fire, names
from ..properties import (
    ENUM_PROPERTIES,
    bool_property,
    enum_property,
    float_property,
    string_property,
    tags,
)
from ..values import format_float, parse_float
from .factory import register_view_creator
from .view import View

# Media event tag -> DOM event
MEDIA_DOM_EVENTS = {
    names.ABORT_EVENT: "abort",
    names.CAN_PLAY_EVENT: "canplay",
    names.CAN_PLAY_THROUGH_EVENT: "canplaythrough",
    names.COMPLETE_EVENT: "complete",
    names.EMPTIED_EVENT: "emptied",
    names.ENDED_EVENT: "ended",
    names.LOADED_DATA_EVENT: "loadeddata",
    names.LOADED_METADATA_EVENT: "loadedmetadata",
    names.LOAD_START_EVENT: "loadstart",
    names.PAUSE_EVENT: "pause",
    names.PLAY_EVENT: "play",
    names.PLAYING_EVENT: "playing",
    names.PROGRESS_EVENT: "progress",
    names.SEEKED_EVENT: "seeked",
    names.SEEKING_EVENT: "seeking",
    names.STALLED_EVENT: "stalled",
    names.SUSPEND_EVENT: "suspend",
    names.WAITING_EVENT: "waiting",
    names.DURATION_CHANGED_EVENT: "durationchange",
    names.RATE_CHANGED_EVENT: "ratechange",
    names.TIME_UPDATE_EVENT: "timeupdate",
    names.VOLUME_CHANGED_EVENT: "volumechange",
    names.PLAYER_ERROR_EVENT: "error",
}

_ATTRIBUTE_TAGS = frozenset({tags.CONTROLS, tags.LOOP, tags.MUTED, tags.PRELOAD})


class MediaPlayer(View):
    """Common part of the audio and video players."""

    def sources(self) -> list[str]:
        """Comma-separated ``src`` alternatives, in preference order."""
        value = string_property(self, tags.SOURCE, self.session) or ""
        return [item.strip() for item in value.split(",") if item.strip()]

    def html_properties(self, buffer: list[str], disabled: bool) -> None:
        super().html_properties(buffer, disabled)
        for tag in (tags.CONTROLS, tags.LOOP, tags.MUTED):
            if bool_property(self, tag, self.session):
                buffer.append(f" {tag}")
        preload = enum_property(self, tags.PRELOAD, self.session, 2)
        buffer.append(f' preload="{ENUM_PROPERTIES[tags.PRELOAD].css_value(preload)}"')

    def html_events(self, buffer: list[str]) -> None:
        super().html_events(buffer)
        for tag, dom_event in MEDIA_DOM_EVENTS.items():
            if self.listeners(tag):
                buffer.append(f' on{dom_event}="{self._media_script(tag)}"')

    @staticmethod
    def _media_script(tag: str) -> str:
        if tag in names.MEDIA_VALUE_EVENTS:
            return f"mediaValueEvent(this, '{tag}', event)"
        if tag == names.PLAYER_ERROR_EVENT:
            return "mediaErrorEvent(this, event)"
        return f"mediaEvent(this, '{tag}')"

    def html_subviews(self, buffer: list[str]) -> None:
        for src in self.sources():
            buffer.append(f'<source src="{escape(src)}">')

    def property_changed(self, tag: str) -> None:
        html_id = self.html_id()
        if tag == tags.SOURCE:
            buffer: list[str] = []
            self.html_subviews(buffer)
            self.session.update_inner_html(html_id, "".join(buffer))
            self.session.call_function("mediaLoad", html_id)
        elif tag in _ATTRIBUTE_TAGS:
            if tag == tags.PRELOAD:
                value = enum_property(self, tag, self.session, 2)
                self.session.update_property(html_id, tag, ENUM_PROPERTIES[tag].css_value(value))
            elif bool_property(self, tag, self.session):
                self.session.update_property(html_id, tag, True)
            else:
                self.session.remove_property(html_id, tag)
        elif tag in MEDIA_DOM_EVENTS:
            attribute = "on" + MEDIA_DOM_EVENTS[tag]
            if self.listeners(tag):
                self.session.update_property(html_id, attribute, self._media_script(tag))
            else:
                self.session.remove_property(html_id, attribute)
        else:
            super().property_changed(tag)

    # ========================================================================
    # Playback
    # ========================================================================

    def play(self) -> None:
        self.session.call_function("mediaPlay", self.html_id())

    def pause(self) -> None:
        self.session.call_function("mediaPause", self.html_id())

    def set_current_time(self, seconds: float) -> None:
        self.session.call_function("mediaSetCurrentTime", self.html_id(), float(seconds))

    def set_playback_rate(self, rate: float) -> None:
        self.session.call_function("mediaSetPlaybackRate", self.html_id(), float(rate))

    def set_volume(self, volume: float) -> None:
        if 0 <= volume <= 1:
            self.session.call_function("mediaSetVolume", self.html_id(), float(volume))

    def _remote(self, name: str) -> str:
        answer = self.session.remote_value("mediaGet", self.html_id(), name)
        if answer is None:
            return ""
        return answer.property_value("value") or ""

    def _remote_number(self, name: str) -> float:
        return parse_float(self._remote(name)) or 0.0

    def current_time(self) -> float:
        return self._remote_number("currentTime")

    def duration(self) -> float:
        return self._remote_number("duration")

    def playback_rate(self) -> float:
        return self._remote_number("playbackRate")

    def volume(self) -> float:
        return self._remote_number("volume")

    def is_ended(self) -> bool:
        return self._remote("ended") in ("1", "true")

    def is_paused(self) -> bool:
        return self._remote("paused") in ("1", "true")

    # ========================================================================
    # Events
    # ========================================================================

    def handle_command(self, command: str, data: DataObject) -> bool:
        if command in names.MEDIA_EVENTS:
            fire(self.listeners(command), self)
        elif command in names.MEDIA_VALUE_EVENTS:
            fire(self.listeners(command), self, parse_float(data.property_value("value") or "") or 0.0)
        elif command == names.PLAYER_ERROR_EVENT:
            code = int(parse_float(data.property_value("code") or "") or 0)
            fire(self.listeners(command), self, code, data.property_value("message") or "")
        else:
            return super().handle_command(command, data)
        return True


class AudioPlayer(MediaPlayer):
    view_tag = "AudioPlayer"

    def html_tag(self) -> str:
        return "audio"


class VideoPlayer(MediaPlayer):
    view_tag = "VideoPlayer"

    def html_tag(self) -> str:
        return "video"

    def html_properties(self, buffer: list[str], disabled: bool) -> None:
        super().html_properties(buffer, disabled)
        for tag, attribute in ((tags.VIDEO_WIDTH, "width"), (tags.VIDEO_HEIGHT, "height")):
            value = float_property(self, tag, self.session)
            if value:
                buffer.append(f' {attribute}="{format_float(value)}"')
        poster = string_property(self, tags.POSTER, self.session)
        if poster:
            buffer.append(f' poster="{escape(poster)}"')

    def property_changed(self, tag: str) -> None:
        html_id = self.html_id()
        if tag in (tags.VIDEO_WIDTH, tags.VIDEO_HEIGHT):
            attribute = "width" if tag == tags.VIDEO_WIDTH else "height"
            value = float_property(self, tag, self.session)
            if value:
                self.session.update_property(html_id, attribute, format_float(value))
            else:
                self.session.remove_property(html_id, attribute)
        elif tag == tags.POSTER:
            poster = string_property(self, tag, self.session)
            if poster:
                self.session.update_property(html_id, "poster", poster)
            else:
                self.session.remove_property(html_id, "poster")
        else:
            super().property_changed(tag)


register_view_creator(AudioPlayer)
register_view_creator(VideoPlayer)
