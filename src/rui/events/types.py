"""Event payloads decoded from inbound browser messages."""

from dataclasses import dataclass, field

from ..data import DataObject
from ..values import parse_float


def _number(obj: DataObject, key: str, default: float = 0.0) -> float:
    text = obj.property_value(key)
    if text is None:
        return default
    value = parse_float(text)
    return default if value is None else value


def _flag(obj: DataObject, key: str) -> bool:
    return obj.property_value(key) in ("1", "true")


@dataclass
class MouseEvent:
    time_stamp: float = 0.0
    button: int = 0
    buttons: int = 0
    x: float = 0.0
    y: float = 0.0
    client_x: float = 0.0
    client_y: float = 0.0
    screen_x: float = 0.0
    screen_y: float = 0.0
    ctrl_key: bool = False
    shift_key: bool = False
    alt_key: bool = False
    meta_key: bool = False

    @classmethod
    def _from_data(cls, obj: DataObject, **extra):
        return cls(
            time_stamp=_number(obj, "timeStamp"),
            button=int(_number(obj, "button")),
            buttons=int(_number(obj, "buttons")),
            x=_number(obj, "x"),
            y=_number(obj, "y"),
            client_x=_number(obj, "clientX"),
            client_y=_number(obj, "clientY"),
            screen_x=_number(obj, "screenX"),
            screen_y=_number(obj, "screenY"),
            ctrl_key=_flag(obj, "ctrlKey"),
            shift_key=_flag(obj, "shiftKey"),
            alt_key=_flag(obj, "altKey"),
            meta_key=_flag(obj, "metaKey"),
            **extra,
        )

    @classmethod
    def from_data(cls, obj: DataObject) -> "MouseEvent":
        return cls._from_data(obj)


@dataclass
class PointerEvent(MouseEvent):
    pointer_id: int = 0
    width: float = 0.0
    height: float = 0.0
    pressure: float = 0.0
    tangential_pressure: float = 0.0
    tilt_x: float = 0.0
    tilt_y: float = 0.0
    twist: float = 0.0
    pointer_type: str = ""
    is_primary: bool = False

    @classmethod
    def from_data(cls, obj: DataObject) -> "PointerEvent":
        return cls._from_data(
            obj,
            pointer_id=int(_number(obj, "pointerId")),
            width=_number(obj, "width"),
            height=_number(obj, "height"),
            pressure=_number(obj, "pressure"),
            tangential_pressure=_number(obj, "tangentialPressure"),
            tilt_x=_number(obj, "tiltX"),
            tilt_y=_number(obj, "tiltY"),
            twist=_number(obj, "twist"),
            pointer_type=obj.property_value("pointerType") or "",
            is_primary=_flag(obj, "isPrimary"),
        )


@dataclass
class Touch:
    identifier: int = 0
    x: float = 0.0
    y: float = 0.0
    client_x: float = 0.0
    client_y: float = 0.0
    screen_x: float = 0.0
    screen_y: float = 0.0
    radius_x: float = 0.0
    radius_y: float = 0.0
    rotation_angle: float = 0.0
    force: float = 0.0

    @classmethod
    def from_data(cls, obj: DataObject) -> "Touch":
        return cls(
            identifier=int(_number(obj, "identifier")),
            x=_number(obj, "x"),
            y=_number(obj, "y"),
            client_x=_number(obj, "clientX"),
            client_y=_number(obj, "clientY"),
            screen_x=_number(obj, "screenX"),
            screen_y=_number(obj, "screenY"),
            radius_x=_number(obj, "radiusX"),
            radius_y=_number(obj, "radiusY"),
            rotation_angle=_number(obj, "rotationAngle"),
            force=_number(obj, "force"),
        )


@dataclass
class TouchEvent:
    time_stamp: float = 0.0
    touches: list[Touch] = field(default_factory=list)
    ctrl_key: bool = False
    shift_key: bool = False
    alt_key: bool = False
    meta_key: bool = False

    @classmethod
    def from_data(cls, obj: DataObject) -> "TouchEvent":
        node = obj.property_by_tag("touches")
        touches = [Touch.from_data(item) for item in node.array if isinstance(item, DataObject)] if node else []
        return cls(
            time_stamp=_number(obj, "timeStamp"),
            touches=touches,
            ctrl_key=_flag(obj, "ctrlKey"),
            shift_key=_flag(obj, "shiftKey"),
            alt_key=_flag(obj, "altKey"),
            meta_key=_flag(obj, "metaKey"),
        )


@dataclass
class KeyEvent:
    time_stamp: float = 0.0
    key: str = ""
    code: str = ""
    repeat: bool = False
    ctrl_key: bool = False
    shift_key: bool = False
    alt_key: bool = False
    meta_key: bool = False

    @classmethod
    def from_data(cls, obj: DataObject) -> "KeyEvent":
        return cls(
            time_stamp=_number(obj, "timeStamp"),
            key=obj.property_value("key") or "",
            code=obj.property_value("code") or "",
            repeat=_flag(obj, "repeat"),
            ctrl_key=_flag(obj, "ctrlKey"),
            shift_key=_flag(obj, "shiftKey"),
            alt_key=_flag(obj, "altKey"),
            meta_key=_flag(obj, "metaKey"),
        )

    def control_keys(self) -> frozenset[str]:
        """Names of the held modifier keys: ``ctrl``, ``shift``, ``alt``, ``meta``."""
        return frozenset(
            name
            for name, held in (
                ("ctrl", self.ctrl_key),
                ("shift", self.shift_key),
                ("alt", self.alt_key),
                ("meta", self.meta_key),
            )
            if held
        )
