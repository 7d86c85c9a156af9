"""Deprecated widget helpers.

Widgets written against the older API can extend ``LegacyWidget`` instead
of ``Widget``. Every helper warns and forwards to the service that now owns
the behavior: ``get_assets()``, ``get_page()`` or ``get_pre_renderer()``.
"""
from __future__ import annotations

from functools import wraps
from typing import Any
import json
import warnings

from .packages import WidgetPackage
from .renderer import Renderer
from .widget import Widget

def deprecated(replacement: str):
    def decorate(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            warnings.warn(
                f"{fn.__name__}() is deprecated; use {replacement} instead",
                DeprecationWarning,
                stacklevel=2,
            )
            return fn(*args, **kwargs)
        return wrapper
    return decorate

class LegacyWidget(Widget):

    @deprecated("get_assets().get_image_size()")
    def get_image_size(self, asset: str) -> tuple[int, int]:
        return self.get_assets().get_image_size(asset)

    @deprecated("get_file_contents(asset, widget_asset=True)")
    def load_asset_json(self, name: str) -> Any:
        """
        Parse a JSON asset from the widget's own package.

        Older releases read the site-level asset folder here, because the
        widget flag landed on the ``folder`` argument. This reads the widget
        tier, as the name says.
        """
        return json.loads(self.get_file_contents(name, widget_asset=True))

    @deprecated("get_file_contents(asset, widget_asset=True)")
    def load_asset_file(self, name: str) -> bytes:
        """Raw asset bytes from the widget's own package, not the site folder."""
        return self.get_file_contents(name, widget_asset=True)

    @deprecated("get_page().get_page_info()")
    def get_page_info(self, page_name: str = "", is_home: bool = False):
        return self.get_page().get_page_info(page_name, is_home)

    @deprecated("get_page().get_all_page_names()")
    def get_all_page_names(self) -> list[str]:
        return self.get_page().get_all_page_names()

    @deprecated("get_page().get_website_pages()")
    def get_website_pages(self, folder: str | None = "", exclude: str = "") -> list[str]:
        return self.get_page().get_website_pages(folder, exclude)

    @deprecated("get_page().get_website_widgets()")
    def get_website_widgets(self, params: dict | None) -> list[dict]:
        return self.get_page().get_website_widgets(params)

    @deprecated("get_page().get_next_folder()")
    def get_next_folder(self, page_name: str = "") -> list[str]:
        return self.get_page().get_next_folder(page_name)

    @deprecated("get_page().get_next_page()")
    def get_next_page(self, page_name: str = "") -> dict:
        return self.get_page().get_next_page(page_name)

    @deprecated("get_page().get_prev_page()")
    def get_prev_page(self, page_name: str = "") -> dict:
        return self.get_page().get_prev_page(page_name)

    @deprecated("get_pre_renderer().get_element_from_page_by_id()")
    def get_element_from_page_by_id(self, id: str, page: str = ""):
        return self.get_pre_renderer().get_element_from_page_by_id(id, page)

    @deprecated("get_pre_renderer().get_elements_from_page_by_tag()")
    def get_elements_from_page_by_tag(self, tag: str, page: str = ""):
        return self.get_pre_renderer().get_elements_from_page_by_tag(tag, page)

    @deprecated("get_pre_renderer().get_elements_from_page_by_class()")
    def get_elements_from_page_by_class(self, cls: str, page: str = ""):
        return self.get_pre_renderer().get_elements_from_page_by_class(cls, page)

    @deprecated("renderer.code.add_head_html()")
    def _add_page_metadata(self, html: str | list[str]) -> None:
        self.renderer.code.add_head_html(html)

    @classmethod
    @deprecated("renderer.load_widget_package()")
    def read_widget_package(cls, renderer: Renderer, widget: type | None = None) -> WidgetPackage:
        return renderer.load_widget_package((widget or cls).__name__)
