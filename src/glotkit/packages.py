from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import logging
import yaml

from .errors import MisconfiguredWidgetError

logger = logging.getLogger(__name__)

MANIFEST_NAME = "package.yaml"
DEFAULT_MARKUP_DICT = "dictionary.json"

@dataclass(frozen=True)
class WidgetPackage:
    name: str
    root_folder: Path
    markup_dict: str = DEFAULT_MARKUP_DICT

    @property
    def assets_folder(self) -> Path:
        return self.root_folder / "assets"

    @property
    def markup_dict_path(self) -> Path:
        return self.root_folder / self.markup_dict

class PackageLoader:
    """Maps widget type names to the folders that ship them."""

    def __init__(self, widgets_dir: Path, overrides: dict[str, Path] | None = None):
        self.widgets_dir = widgets_dir
        self.overrides = dict(overrides or {})
        self._cache: dict[str, WidgetPackage] = {}

    def load(self, identity: str) -> WidgetPackage:
        pkg = self._cache.get(identity)
        if pkg is None:
            pkg = self._cache[identity] = self._read(identity)
        return pkg

    def _read(self, identity: str) -> WidgetPackage:
        if not identity:
            raise MisconfiguredWidgetError("Widget identity is empty")

        root = self.overrides.get(identity, self.widgets_dir / identity)
        if not root.is_dir():
            raise MisconfiguredWidgetError(
                f"No widget package for {identity!r}",
                path=str(root),
                hint="add the package folder or map it under widgets.packages",
            )

        markup_dict = DEFAULT_MARKUP_DICT
        manifest = root / MANIFEST_NAME
        if manifest.exists():
            meta = yaml.safe_load(manifest.read_text(encoding="utf-8")) or {}
            if not isinstance(meta, dict):
                raise MisconfiguredWidgetError("Package manifest must be a YAML mapping", path=str(manifest))
            markup_dict = str(meta.get("markup_dict", DEFAULT_MARKUP_DICT))

        logger.debug("Loaded widget package %s from %s", identity, root)
        return WidgetPackage(name=identity, root_folder=root, markup_dict=markup_dict)
