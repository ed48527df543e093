"""
Image Manager
Browser-side image loading for canvas drawing and image views.

``load`` asks the client to fetch an image; the client answers with
``imageLoaded{url, width, height}`` or ``imageError{url, message}``.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable

from ..core.logging_config import get_logger
from ..data import DataObject
from ..values import parse_float

logger = get_logger(__name__)


class ImageLoadingStatus(IntEnum):
    LOADING = 0
    READY = 1
    ERROR = 2


@dataclass(eq=False)
class Image:
    url: str
    status: ImageLoadingStatus = ImageLoadingStatus.LOADING
    error: str = ""
    width: float = 0.0
    height: float = 0.0
    listeners: list[Callable[["Image"], None]] = field(default_factory=list)

    @property
    def ready(self) -> bool:
        return self.status == ImageLoadingStatus.READY

    def _notify(self) -> None:
        listeners, self.listeners = self.listeners, []
        for listener in listeners:
            listener(self)


class ImageManager:
    def __init__(self, session):
        self._session = session
        self._images: dict[str, Image] = {}

    def load(self, url: str, on_loaded: Callable[[Image], None] | None = None) -> Image:
        """
        Start loading an image, or return it when it is already loaded.

        ``@name`` urls are resolved through the theme's image constants.
        """
        if url.startswith("@"):
            resolved = self._session.image_constant(url[1:])
            if resolved:
                url = resolved

        image = self._images.get(url)
        if image is not None and image.status == ImageLoadingStatus.READY:
            if on_loaded is not None:
                on_loaded(image)
            return image
        if image is not None and image.status == ImageLoadingStatus.LOADING:
            if on_loaded is not None:
                image.listeners.append(on_loaded)
            return image

        image = Image(url, listeners=[on_loaded] if on_loaded is not None else [])
        self._images[url] = image
        self._session.call_function("loadImage", url)
        return image

    def image(self, url: str) -> Image | None:
        return self._images.get(url)

    def image_loaded(self, obj: DataObject) -> None:
        url = obj.property_value("url")
        image = self._images.get(url or "")
        if image is None:
            logger.warning("unexpected_image_loaded", url=url)
            return
        image.status = ImageLoadingStatus.READY
        image.width = parse_float(obj.property_value("width") or "") or 0.0
        image.height = parse_float(obj.property_value("height") or "") or 0.0
        image._notify()

    def image_load_error(self, obj: DataObject) -> None:
        url = obj.property_value("url")
        image = self._images.pop(url or "", None)
        if image is None:
            logger.warning("unexpected_image_error", url=url)
            return
        image.status = ImageLoadingStatus.ERROR
        image.error = obj.property_value("message") or ""
        logger.error("image_load_failed", url=url, error=image.error)
        image._notify()
