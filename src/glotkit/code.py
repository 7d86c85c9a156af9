from __future__ import annotations

class SiteCode:
    """Client code and head markup collected while a page renders."""

    def __init__(self) -> None:
        self._js: dict[tuple[str, str], list[str]] = {}
        self._head: list[str] = []

    def add_js_code(self, widget: str, holder_id: str, code: str) -> None:
        if code:
            self._js.setdefault((widget, holder_id), []).append(code)

    def has_js_code(self, widget: str, holder_id: str) -> bool:
        return bool(self._js.get((widget, holder_id)))

    def js_code(self, widget: str, holder_id: str) -> list[str]:
        return list(self._js.get((widget, holder_id), []))

    def add_head_html(self, html: str | list[str]) -> None:
        if isinstance(html, str):
            html = [html]
        self._head.extend(h for h in html if h)

    @property
    def head_html(self) -> str:
        return "\n".join(self._head)
