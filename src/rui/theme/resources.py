"""
Resource Registry
Themes, string tables, images and raw files available to every session.

Populated before the first session starts and read-only afterwards.
Layout of a resources directory::

    themes/   *.rui theme files (nested directories allowed)
    strings/  *.rui string tables
    images/   image files, served by name; ``icon@2x.png`` joins a srcset
    views/    *.rui view templates
    raw/      any other file
"""

import re
from dataclasses import dataclass, field
from importlib import resources as package_resources
from pathlib import Path

from ..core.errors import ResourceMissingError, report_error
from ..core.logging_config import get_logger
from .strings import StringTables
from .theme import Theme

logger = get_logger(__name__)

IMAGE_DIR = "images"
THEME_DIR = "themes"
VIEW_DIR = "views"
RAW_DIR = "raw"
STRINGS_DIR = "strings"

IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".svg", ".gif", ".bmp", ".webp"}

_SCALED_NAME = re.compile(r"^(?P<base>.+)@(?P<scale>\d+(?:\.\d+)?)x(?P<ext>\.[^.]+)$")


@dataclass
class ScaledImage:
    name: str
    scale: float


def _files(root: Path, suffix: str | None = None) -> list[Path]:
    """Non-hidden files below ``root`` in a stable order."""
    if not root.is_dir():
        return []
    result = []
    for path in sorted(root.rglob("*")):
        if any(part.startswith(".") for part in path.relative_to(root).parts):
            continue
        if path.is_file() and (suffix is None or path.suffix.lower() == suffix):
            result.append(path)
    return result


@dataclass
class ResourceRegistry:
    default_theme: Theme = field(default_factory=Theme)
    themes: dict[str, Theme] = field(default_factory=dict)
    strings: StringTables = field(default_factory=StringTables)
    images: dict[str, Path] = field(default_factory=dict)
    image_src_sets: dict[str, list[ScaledImage]] = field(default_factory=dict)
    paths: list[Path] = field(default_factory=list)

    def register_theme_text(self, text: str) -> bool:
        """Unnamed themes extend the default theme; named ones are merged by name."""
        theme = Theme()
        if not theme.add_text(text):
            return False
        if not theme.name:
            self.default_theme.append(theme)
        elif theme.name in self.themes:
            self.themes[theme.name].append(theme)
        else:
            self.themes[theme.name] = theme
        return True

    def register_image(self, path: Path, name: str) -> None:
        self.images[name] = path
        if "@" not in name:
            return
        match = _SCALED_NAME.match(name)
        if match is None:
            logger.error(
                "invalid_image_name",
                file=str(path),
                expected="name[@<scale>x].ext",
            )
            return
        key = match["base"] + match["ext"]
        scale = float(match["scale"])
        variants = self.image_src_sets.setdefault(key, [])
        if all(variant.scale != scale for variant in variants):
            variants.append(ScaledImage(name, scale))

    def add_resources(self, path: str | Path) -> None:
        """Scan a resources directory and register everything in it."""
        root = Path(path)
        if not root.is_dir():
            report_error(ResourceMissingError(f"resources directory {root} not found", path=str(root)))
            return
        self.paths.append(root)

        images = root / IMAGE_DIR
        for file in _files(images):
            if file.suffix.lower() in IMAGE_EXTENSIONS:
                self.register_image(file, file.relative_to(images).as_posix())

        for file in _files(root / THEME_DIR, ".rui"):
            if not self.register_theme_text(file.read_text(encoding="utf-8")):
                logger.error("theme_file_rejected", file=str(file))

        for file in _files(root / STRINGS_DIR, ".rui"):
            if not self.strings.add_text(file.read_text(encoding="utf-8")):
                logger.error("strings_file_rejected", file=str(file))

        logger.info(
            "resources_loaded",
            path=str(root),
            images=len(self.images),
            themes=len(self.themes),
            languages=self.strings.languages(),
        )

    def theme(self, name: str) -> Theme | None:
        if not name:
            return self.default_theme
        return self.themes.get(name)

    def src_set(self, name: str) -> list[ScaledImage]:
        return sorted(self.image_src_sets.get(name, []), key=lambda item: item.scale)

    def resource_file(self, name: str) -> Path | None:
        """Path of a servable file: a registered image or a file under a resources directory."""
        if name in self.images and self.images[name].is_file():
            return self.images[name]
        for root in self.paths:
            for candidate in (root / name, root / IMAGE_DIR / name):
                if candidate.is_file() and root in candidate.resolve().parents:
                    return candidate
        return None

    def _read(self, directory: str, name: str) -> str | None:
        for root in self.paths:
            file = root / directory / name
            if file.is_file():
                return file.read_text(encoding="utf-8")
        report_error(ResourceMissingError(f'"{name}" resource not found', directory=directory, name=name))
        return None

    def raw_resource(self, name: str) -> bytes | None:
        for root in self.paths:
            file = root / RAW_DIR / name
            if file.is_file():
                return file.read_bytes()
        report_error(ResourceMissingError(f'"{name}" raw file not found', name=name))
        return None

    def view_text(self, name: str) -> str | None:
        """Text of a view template from ``views/``; ``.rui`` is appended when missing."""
        if not name.lower().endswith(".rui"):
            name += ".rui"
        return self._read(VIEW_DIR, name)

    def all_raw_resources(self) -> list[str]:
        names = set()
        for root in self.paths:
            raw = root / RAW_DIR
            names.update(file.relative_to(raw).as_posix() for file in _files(raw))
        return sorted(names)


def package_text(name: str) -> str:
    """Text of a file shipped in ``rui/resources``."""
    return package_resources.files("rui").joinpath("resources", name).read_text(encoding="utf-8")


def _create_registry() -> ResourceRegistry:
    registry = ResourceRegistry()
    registry.register_theme_text(package_text("default_theme.rui"))
    return registry


resources = _create_registry()


def add_resources(path: str | Path) -> None:
    resources.add_resources(path)
