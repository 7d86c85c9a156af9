"""Base class for renderable widgets.

A widget reads its rendering context only through the accessors defined
here. The accessors are sealed: subclasses may not redefine them, and
customize behavior through the hooks in ``EXTENSION_HOOKS`` instead.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Protocol
import json
import logging
import re

from .assets import AssetManager
from .pages import PageReader
from .prerender import PagePreRenderer
from .renderer import Renderer

logger = logging.getLogger(__name__)

# Methods a widget may redefine; everything else on Widget is sealed.
EXTENSION_HOOKS = frozenset({
    "get_on_ready_code",
    "website_name",
    "get_widget_settings",
    "page_name",
    "get_language",
    "get_draft_name",
    "get_lang_settings",
    "get_available_languages",
    "get_main_language",
})

_NUMERIC = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
# An escaped backslash or an escaped double quote inside JSON output.
_ESCAPED_QUOTE = re.compile(r'\\\\|\\"')

class WidgetContext(Protocol):
    """What a renderer may rely on from any widget."""

    def get_settings(self, key: str | None = None) -> Any: ...
    def get_refresh_params(self) -> list[str] | None: ...
    def get_has_js_code(self) -> bool: ...
    def get_on_ready_code(self) -> str | None: ...

class Widget:
    # Filled in once the class body below is complete.
    _SEALED: frozenset[str] = frozenset()

    def __init__(self, renderer: Renderer, options: Mapping[str, Any] | None = None, holder_id: str = ""):
        self.renderer = renderer
        self.options = dict(options or {})
        # Owning type is fixed here so lookups always use the concrete class.
        self._identity = type(self).__name__
        self._holder_id = holder_id or f"{self._identity.lower()}-{id(self):x}"
        self._refresh_params: list[str] | None = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        clash = Widget._SEALED.intersection(vars(cls))
        if clash:
            raise TypeError(f"{cls.__name__} cannot override sealed widget methods: {sorted(clash)}")

    @property
    def identity(self) -> str:
        return self._identity

    def holder_id(self) -> str:
        return self._holder_id

    def get_settings(self, key: str | None = None) -> Any:
        if not key:
            return self.options
        value = self.options.get(key)
        return [] if value is None else value

    def get_refresh_params(self) -> list[str] | None:
        return None if self._refresh_params is None else list(self._refresh_params)

    @staticmethod
    def array_subset(keys: Iterable[str], params: Mapping[str, Any]) -> dict[str, Any]:
        return {k: params[k] for k in keys if params.get(k) is not None}

    @staticmethod
    def jsol_encode(params: Any) -> str:
        """
        Encode ``params`` as a JavaScript object literal.

        Unlike JSON, keys and strings are wrapped in single quotes. Quotes
        inside strings are hex escaped and numeric strings become numbers.
        """
        def numeric(v):
            if isinstance(v, dict):
                return {k: numeric(x) for k, x in v.items()}
            if isinstance(v, (list, tuple)):
                return [numeric(x) for x in v]
            if isinstance(v, str) and _NUMERIC.match(v):
                return int(v) if v.lstrip("+-").isdigit() else float(v)
            return v

        out = json.dumps(numeric(params), separators=(",", ":"))
        out = _ESCAPED_QUOTE.sub(lambda m: m.group(0) if m.group(0) == "\\\\" else "\\u0022", out)
        out = out.replace("'", "\\u0027")
        return out.replace('"', "'")

    # Rendering context

    def get_head_widgets(self) -> list[dict]:
        return self.renderer.get_page_level_widgets()

    def get_page_settings(self) -> dict[str, dict]:
        return self.renderer.get_page_map()

    def get_page_name_from_url(self, url: str) -> str | None:
        return self.renderer.get_page_info().get_page_name_from_url(url)

    def get_home_page(self) -> str:
        return self.renderer.get_page_info().get_home_page()

    def is_static_rendering(self) -> bool:
        return self.renderer.is_static_rendering()

    def get_website_domain_name(self) -> str | None:
        return self.renderer.domain

    def get_active_languages(self) -> list[str]:
        return self.get_lang_settings().get("languages", [])

    def website_name(self) -> str:
        return self.renderer.website_name()

    def get_widget_settings(self) -> dict[str, Any]:
        return self.renderer.get_widget_settings(self._identity)

    def page_name(self) -> str:
        return self.renderer.page_name()

    def get_language(self) -> str:
        return self.renderer.get_language()

    def get_draft_name(self) -> str:
        return getattr(self.renderer, "get_draft_name", lambda: "")()

    def get_lang_settings(self) -> dict[str, Any]:
        return self.renderer.get_lang_settings()

    def get_available_languages(self) -> list[str]:
        return self.renderer.get_available_languages()

    def get_main_language(self) -> str:
        return self.renderer.get_main_language()

    def get_client_breakpoints(self) -> dict[str, int]:
        return self.renderer.get_breakpoints()

    def get_has_js_code(self) -> bool:
        return self.renderer.code.has_js_code(self._identity, self._holder_id)

    # Text

    def localize(self, data: Any, lang: str | None = None) -> str:
        return self.renderer.localize(data, lang)

    def get_link_type(self, href: str) -> str:
        return self.renderer.get_link_type(href)

    def parse_href_param(self, href: str) -> str:
        return self.renderer.get_localizer().parse_href_param(href)

    def get_text(self, name: str, default: Any = "") -> Any:
        """
        Text for ``name`` from this widget's markup dictionary, localized.

        ``default`` is returned as given when the dictionary has no ``name``
        key or maps it to null. Any other value goes through localization,
        even when no language has a value for it.
        """
        pkg = self.renderer.load_widget_package(self._identity)
        contents = self.renderer.read_json_file(pkg.markup_dict_path)
        if contents.get(name) is None:
            logger.debug("%s: no markup entry %r, using default", self._identity, name)
            return default
        return self.localize(contents[name])

    # Assets

    def get_assets(self) -> AssetManager:
        return self.renderer.get_assets()

    def make_asset_url(self, asset: str, widget: str | None = "", advance: bool = False) -> str:
        if advance:
            return self.get_assets().make_widget_asset_url(asset, self._identity)
        return self.get_assets().make_asset_url(asset, self._identity)

    def get_asset_path(self, asset: str, folder: str = "assets", widget_asset: bool = False) -> Path:
        if widget_asset:
            return self.get_assets().get_widget_asset_path(asset, self._identity)
        return self.get_assets().get_asset_path(asset, self._identity)

    def get_file_contents(self, asset: str, folder: str = "assets", widget_asset: bool = False) -> bytes:
        if widget_asset:
            return self.get_assets().get_widget_asset_contents(asset, self._identity)
        return self.get_assets().get_asset_contents(asset, self._identity)

    # Site structure

    def get_page(self) -> PageReader:
        return self.renderer.get_page_info()

    def get_pre_renderer(self) -> PagePreRenderer:
        return self.renderer.get_pre_renderer()

    # Extension hooks

    def get_on_ready_code(self) -> str | None:
        """Client code to run once the page is ready. Override to supply it."""
        return None

    # Protected

    def _enable_image_optimization(self, asset: str) -> dict[str, str] | str:
        """The asset as-is while developing, a responsive source set when exporting."""
        if not self.is_static_rendering():
            return asset
        return self.get_assets().get_img_srcset(asset)

    def _set_refresh_params(self, params: Iterable[str]) -> None:
        """
        Declare parameters whose change requires a page refresh.

        The list only matters for widgets that ship client code. It can be
        set once per widget instance.
        """
        if self._refresh_params is not None:
            raise RuntimeError(f"{self._identity}: refresh parameters are already set")
        self._refresh_params = list(params)

Widget._SEALED = frozenset(
    name for name, value in vars(Widget).items()
    if callable(value) or isinstance(value, (property, staticmethod))
) - EXTENSION_HOOKS - {"__init__", "__init_subclass__"}
