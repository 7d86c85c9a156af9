from __future__ import annotations

import logging
from pathlib import PurePosixPath
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit

logger = logging.getLogger(__name__)

LINK_EXTERNAL = "external"
LINK_ASSET = "asset"
LINK_PAGE = "page"
LINK_ANCHOR = "anchor"

_PAGE_SUFFIXES = {"", ".html", ".htm"}

class Localizer:
    """Picks language-specific values and normalizes internal links."""

    def __init__(self, language: str, main_language: str, available: list[str] | None = None):
        self.language = language
        self.main_language = main_language
        self.available = list(available or [main_language])

    def localize(self, value: Any, lang: str | None = None) -> str:
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        if not isinstance(value, dict):
            return str(value)

        lang = lang or self.language
        if lang in value:
            return self.localize(value[lang])
        if self.main_language in value:
            logger.debug("No %r entry, falling back to main language %r", lang, self.main_language)
            return self.localize(value[self.main_language])
        return ""

    def get_link_type(self, href: str) -> str:
        parts = urlsplit(href)
        if parts.scheme or parts.netloc:
            return LINK_EXTERNAL
        if not parts.path:
            return LINK_ANCHOR if parts.fragment else LINK_PAGE
        segments = [s for s in parts.path.split("/") if s]
        if segments and segments[0] == "assets":
            return LINK_ASSET
        if PurePosixPath(parts.path).suffix.lower() not in _PAGE_SUFFIXES:
            return LINK_ASSET
        return LINK_PAGE

    def parse_href_param(self, href: str) -> str:
        """
        Rebuild an internal page link from its parts.

        The language travels as a ``lang`` query parameter on input and
        becomes a path prefix on output, except for the main language.
        """
        if self.get_link_type(href) != LINK_PAGE:
            return href

        parts = urlsplit(href)
        query = parse_qsl(parts.query, keep_blank_values=True)
        lang = next((v for k, v in query if k == "lang"), "") or self.language
        params = [(k, v) for k, v in query if k != "lang"]

        path = parts.path.strip("/")
        page = str(PurePosixPath(path).with_suffix("")) if path else ""

        if lang not in self.available:
            logger.warning("Link %r names unknown language %r", href, lang)

        out = f"/{page}" if lang == self.main_language else f"/{lang}/{page}"
        if params:
            out += "?" + urlencode(params)
        if parts.fragment:
            out += "#" + parts.fragment
        return out
