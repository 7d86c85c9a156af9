from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any
import json
import logging

from .assets import AssetManager
from .code import SiteCode
from .config import Config
from .errors import DataError
from .localizer import Localizer
from .packages import PackageLoader, WidgetPackage
from .pages import PageReader
from .prerender import PagePreRenderer

if TYPE_CHECKING:
    from .widget import WidgetContext

logger = logging.getLogger(__name__)

class Renderer:
    """
    Rendering context for one page in one language.

    Widgets receive it at construction and read everything through it. Pages
    rendered concurrently must each get their own instance.
    """

    def __init__(
        self,
        config: Config,
        page_name: str = "",
        language: str | None = None,
        static: bool = False,
        draft_name: str = "",
    ):
        self.config = config
        self.language = language or config.main_language
        if self.language not in config.available_languages:
            raise ValueError(
                f"Unsupported language {self.language!r}. Available: {config.available_languages}"
            )
        self.static = static
        self.draft_name = draft_name
        self.code = SiteCode()

        self._pages = PageReader(config.pages, current=page_name)
        self._page_name = page_name or (self._pages.get_home_page() if config.pages else "")
        self._pages.current = self._page_name
        self._packages = PackageLoader(config.widgets_dir, config.package_overrides)
        self._assets: AssetManager | None = None
        self._localizer: Localizer | None = None
        self._pre_renderer: PagePreRenderer | None = None

    @property
    def domain(self) -> str | None:
        return self.config.domain

    def website_name(self) -> str:
        return self.config.website_name

    def page_name(self) -> str:
        return self._page_name

    def get_language(self) -> str:
        return self.language

    def get_draft_name(self) -> str:
        return self.draft_name

    def get_lang_settings(self) -> dict[str, Any]:
        return self.config.lang_settings

    def get_available_languages(self) -> list[str]:
        return self.config.available_languages

    def get_main_language(self) -> str:
        return self.config.main_language

    def is_static_rendering(self) -> bool:
        return self.static

    def get_breakpoints(self) -> dict[str, int]:
        return self.config.breakpoints

    def get_page_level_widgets(self) -> list[dict]:
        return self.config.head_widgets

    def get_page_map(self) -> dict[str, dict]:
        return self.config.pages

    def get_widget_settings(self, widget: str) -> dict[str, Any]:
        return dict(self.config.widget_settings.get(widget) or {})

    # Services

    def get_page_info(self) -> PageReader:
        return self._pages

    def get_assets(self) -> AssetManager:
        if self._assets is None:
            self._assets = AssetManager(self.config, self._packages)
        return self._assets

    def get_localizer(self) -> Localizer:
        if self._localizer is None:
            self._localizer = Localizer(
                self.language, self.config.main_language, self.config.available_languages
            )
        return self._localizer

    def get_pre_renderer(self) -> PagePreRenderer:
        if self._pre_renderer is None:
            self._pre_renderer = PagePreRenderer(self.config.output_dir, self._page_name, self.language)
        return self._pre_renderer

    def close(self) -> None:
        if self._pre_renderer is not None:
            self._pre_renderer.close()

    def load_widget_package(self, widget: str) -> WidgetPackage:
        return self._packages.load(widget)

    def localize(self, value: Any, lang: str | None = None) -> str:
        return self.get_localizer().localize(value, lang)

    def get_link_type(self, href: str) -> str:
        return self.get_localizer().get_link_type(href)

    def read_json_file(self, path: str | Path) -> dict:
        p = Path(path)
        try:
            data = json.loads(p.read_text(encoding="utf-8"))
        except OSError as e:
            raise DataError(f"Cannot read {p.name}: {e.strerror or e}", path=str(p)) from e
        except json.JSONDecodeError as e:
            raise DataError(f"Invalid JSON in {p.name}: {e}", path=str(p)) from e
        if not isinstance(data, dict):
            raise DataError(f"{p.name} must contain a JSON object", path=str(p))
        logger.debug("Read %s (%d keys)", p, len(data))
        return data

    def refresh_params_for(self, widget: WidgetContext) -> list[str] | None:
        """Refresh parameters that apply, which needs the widget to ship client code."""
        if not widget.get_has_js_code():
            return None
        return widget.get_refresh_params()
