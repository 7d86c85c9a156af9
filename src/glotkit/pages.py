from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any
import logging

from .errors import PageNotFoundError

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class PageRecord:
    name: str
    title: Any = ""
    folder: str = ""
    url: str = ""
    home: bool = False
    widgets: list[dict[str, Any]] = field(default_factory=list)
    settings: dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)

def _record(name: str, raw: dict | None) -> PageRecord:
    raw = raw or {}
    known = {"title", "folder", "url", "home", "widgets"}
    return PageRecord(
        name=name,
        title=raw.get("title", name),
        folder=str(raw.get("folder", "")),
        url=str(raw.get("url", name)).strip("/"),
        home=bool(raw.get("home", False)),
        widgets=list(raw.get("widgets") or []),
        settings={k: v for k, v in raw.items() if k not in known},
    )

class PageReader:
    """Read-only index over the site's ordered page map."""

    def __init__(self, pages: dict[str, dict], current: str = ""):
        self._pages = {name: _record(name, raw) for name, raw in pages.items()}
        self.current = current

    def _names(self) -> list[str]:
        return list(self._pages)

    def get_all_page_names(self) -> list[str]:
        return self._names()

    def get_home_page(self) -> str:
        for rec in self._pages.values():
            if rec.home:
                return rec.name
        names = self._names()
        if not names:
            raise PageNotFoundError("Site has no pages")
        return names[0]

    def get_page_info(self, name: str = "", is_home: bool = False) -> PageRecord:
        if is_home:
            name = self.get_home_page()
        elif not name:
            name = self.current
        rec = self._pages.get(name)
        if rec is None:
            raise PageNotFoundError(f"Unknown page {name!r}")
        return rec

    def get_page_name_from_url(self, url: str) -> str | None:
        path = url.split("#", 1)[0].split("?", 1)[0].strip("/")
        if path.endswith(".html"):
            path = path[: -len(".html")]
        if not path:
            return self.get_home_page() if self._pages else None
        for rec in self._pages.values():
            if rec.url == path or rec.name == path:
                return rec.name
        logger.debug("No page matches url %r", url)
        return None

    def get_website_pages(self, folder: str | None = "", exclude: str = "") -> list[str]:
        return [
            rec.name for rec in self._pages.values()
            if (not folder or rec.folder == folder) and rec.name != exclude
        ]

    def get_website_widgets(self, params: dict | None = None) -> list[dict[str, Any]]:
        params = params or {}
        wanted = params.get("type")
        folder = params.get("folder")
        out = []
        for rec in self._pages.values():
            if folder and rec.folder != folder:
                continue
            for w in rec.widgets:
                if wanted and w.get("type") != wanted:
                    continue
                out.append({"page": rec.name, **w})
        return out

    def _neighbour(self, name: str, step: int) -> dict[str, Any]:
        names = self._names()
        rec = self.get_page_info(name)
        i = names.index(rec.name) + step
        if 0 <= i < len(names):
            return self._pages[names[i]].as_dict()
        return {}

    def get_next_page(self, name: str = "") -> dict[str, Any]:
        return self._neighbour(name, 1)

    def get_prev_page(self, name: str = "") -> dict[str, Any]:
        return self._neighbour(name, -1)

    def get_next_folder(self, name: str = "") -> list[str]:
        """Pages of the first folder, after the page's own, in site order."""
        rec = self.get_page_info(name)
        names = self._names()
        folder = None
        for n in names[names.index(rec.name) + 1:]:
            f = self._pages[n].folder
            if f != rec.folder:
                folder = f
                break
        if folder is None:
            return []
        return self.get_website_pages(folder) if folder else [n for n in names if not self._pages[n].folder]
