from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import logging
from playwright.sync_api import sync_playwright

from .errors import PageNotFoundError

logger = logging.getLogger(__name__)

# Runs inside the page; keeps the payload JSON-friendly.
_DESCRIBE_JS = """els => els.map(e => ({
  tag: e.tagName.toLowerCase(),
  id: e.id || "",
  classes: Array.from(e.classList),
  text: e.textContent || "",
  html: e.outerHTML,
}))"""

@dataclass(frozen=True)
class Element:
    tag: str
    id: str = ""
    classes: list[str] = field(default_factory=list)
    text: str = ""
    html: str = ""

class PagePreRenderer:
    """
    Queries pages that an earlier pass already rendered to disk.

    Pages are read from ``<output>/<lang>/<page>.html`` and loaded into a
    headless browser started on first use.
    """

    def __init__(self, output_dir: Path, page_name: str, language: str, browser: str = "chromium"):
        self.output_dir = output_dir
        self.page_name = page_name
        self.language = language
        self.browser_name = browser
        self._pw = None
        self._browser = None
        self._pages: dict[str, object] = {}

    def page_file(self, page: str = "") -> Path:
        page = page or self.page_name
        path = self.output_dir / self.language / f"{page}.html"
        if not path.is_file():
            raise PageNotFoundError(f"Page {page!r} has not been pre-rendered", path=str(path))
        return path

    def _page(self, page: str):
        path = self.page_file(page)
        key = str(path)
        if key not in self._pages:
            if self._browser is None:
                self._pw = sync_playwright().start()
                self._browser = getattr(self._pw, self.browser_name).launch(headless=True)
            p = self._browser.new_page()
            p.set_content(path.read_text(encoding="utf-8"))
            self._pages[key] = p
            logger.debug("Loaded pre-rendered page %s", path)
        return self._pages[key]

    def _query(self, selector: str, page: str) -> list[Element]:
        found = self._page(page).eval_on_selector_all(selector, _DESCRIBE_JS)
        return [Element(**e) for e in found]

    def get_element_from_page_by_id(self, id: str, page: str = "") -> Element | None:
        found = self._query(f'[id="{id}"]', page)
        return found[0] if found else None

    def get_elements_from_page_by_tag(self, tag: str, page: str = "") -> list[Element]:
        return self._query(tag, page)

    def get_elements_from_page_by_class(self, cls: str, page: str = "") -> list[Element]:
        return self._query(f'[class~="{cls}"]', page)

    def close(self) -> None:
        if self._browser is not None:
            self._browser.close()
            self._pw.stop()
        self._browser = None
        self._pw = None
        self._pages.clear()

    def __enter__(self) -> PagePreRenderer:
        return self

    def __exit__(self, *exc) -> None:
        self.close()
