from __future__ import annotations

from pathlib import Path, PurePosixPath
from urllib.parse import quote, urlsplit
import logging

from PIL import Image

from .config import Config
from .errors import AssetNotFoundError
from .packages import PackageLoader

logger = logging.getLogger(__name__)

SRCSET_FOLDER = "_srcset"

# Formats that are served as-is: vector or possibly animated.
_KEEP_AS_IS = {".svg", ".gif", ".ico"}

def _is_absolute_url(asset: str) -> bool:
    parts = urlsplit(asset)
    return bool(parts.scheme or parts.netloc)

def _relative(asset: str) -> PurePosixPath:
    return PurePosixPath(asset.lstrip("/"))

class AssetManager:
    """
    Finds assets in one of two tiers.

    Site-level assets live in the site's assets folder. Widget assets live
    in the ``assets`` folder of the widget's package. Every lookup names its
    tier explicitly; there is no fallback from one tier to the other.
    """

    def __init__(self, config: Config, packages: PackageLoader):
        self.config = config
        self.packages = packages

    def _locate(self, folder: Path, asset: str) -> Path:
        base = folder.resolve()
        target = (base / _relative(asset)).resolve()
        if base not in target.parents or not target.is_file():
            raise AssetNotFoundError(f"Asset {asset!r} not found", path=str(folder))
        return target

    # Site tier

    def get_asset_path(self, asset: str, widget: str | None = None) -> Path:
        return self._locate(self.config.assets_dir, asset)

    def make_asset_url(self, asset: str, widget: str | None = None) -> str:
        if _is_absolute_url(asset):
            return asset
        self.get_asset_path(asset, widget)
        return f"{self.config.base_url}assets/{quote(_relative(asset).as_posix())}"

    def get_asset_contents(self, asset: str, widget: str | None = None) -> bytes:
        return self.get_asset_path(asset, widget).read_bytes()

    # Widget tier

    def get_widget_asset_path(self, asset: str, widget: str) -> Path:
        pkg = self.packages.load(widget)
        return self._locate(pkg.assets_folder, asset)

    def make_widget_asset_url(self, asset: str, widget: str) -> str:
        if _is_absolute_url(asset):
            return asset
        self.get_widget_asset_path(asset, widget)
        rel = quote(_relative(asset).as_posix())
        return f"{self.config.base_url}widgets/{quote(widget)}/assets/{rel}"

    def get_widget_asset_contents(self, asset: str, widget: str) -> bytes:
        return self.get_widget_asset_path(asset, widget).read_bytes()

    # Images

    def get_image_size(self, asset: str) -> tuple[int, int]:
        path = self.get_asset_path(asset)
        with Image.open(path) as img:
            return img.size

    def get_img_srcset(self, asset: str) -> dict[str, str] | str:
        """
        Write down-scaled copies of a site image and describe them.

        Returns the asset name unchanged for images that are kept as-is
        or that Pillow cannot read.
        """
        if _is_absolute_url(asset):
            return asset
        path = self.get_asset_path(asset)
        if path.suffix.lower() in _KEEP_AS_IS:
            return asset

        src = self.make_asset_url(asset)
        rel_parent = _relative(asset).parent
        out_dir = self.config.output_dir / "assets" / SRCSET_FOLDER
        entries = []
        try:
            with Image.open(path) as img:
                if getattr(img, "is_animated", False):
                    return asset
                width, height = img.size
                for w in self.config.srcset_widths:
                    if w >= width:
                        break
                    rel = rel_parent / f"{path.stem}-{w}w{path.suffix}"
                    target = out_dir / rel
                    if not target.exists():
                        target.parent.mkdir(parents=True, exist_ok=True)
                        img.resize((w, max(1, round(height * w / width))), Image.LANCZOS).save(target)
                    entries.append(f"{self.config.base_url}assets/{SRCSET_FOLDER}/{quote(rel.as_posix())} {w}w")
        except OSError as e:
            logger.warning("Cannot optimize image %s: %s", asset, e)
            return asset

        entries.append(f"{src} {width}w")
        return {
            "src": src,
            "srcset": ", ".join(entries),
            "sizes": f"(max-width: {width}px) 100vw, {width}px",
        }
