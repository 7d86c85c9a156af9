from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
import os
import yaml

DEFAULT_SRCSET_WIDTHS = [480, 768, 1200]

DEFAULT_BREAKPOINTS = {
    "sm": 576,
    "md": 768,
    "lg": 992,
    "xl": 1200,
}

def _expand(path: str) -> str:
    return os.path.expanduser(os.path.expandvars(path))

@dataclass(frozen=True)
class Config:
    raw: dict
    base_dir: Path = field(default_factory=Path.cwd)

    def _folder(self, key: str, default: str) -> Path:
        p = Path(_expand(str(self.raw.get("paths", {}).get(key, default))))
        return p if p.is_absolute() else self.base_dir / p

    @property
    def website_name(self) -> str:
        return str(self.raw.get("website", {}).get("name", ""))

    @property
    def domain(self) -> str | None:
        return self.raw.get("website", {}).get("domain")

    @property
    def lang_settings(self) -> dict[str, Any]:
        langs = dict(self.raw.get("languages", {}))
        active = list(langs.get("languages", ["en"]))
        langs["languages"] = active
        langs.setdefault("available", list(active))
        langs.setdefault("main", active[0] if active else "en")
        return langs

    @property
    def main_language(self) -> str:
        return str(self.lang_settings["main"])

    @property
    def available_languages(self) -> list[str]:
        return list(self.lang_settings["available"])

    @property
    def assets_dir(self) -> Path:
        return self._folder("assets", "assets")

    @property
    def widgets_dir(self) -> Path:
        return self._folder("widgets", "widgets")

    @property
    def output_dir(self) -> Path:
        return self._folder("output", "build")

    @property
    def base_url(self) -> str:
        url = str(self.raw.get("assets", {}).get("base_url", "/"))
        return url if url.endswith("/") else url + "/"

    @property
    def srcset_widths(self) -> list[int]:
        widths = self.raw.get("images", {}).get("srcset_widths", DEFAULT_SRCSET_WIDTHS)
        return sorted(int(w) for w in widths)

    @property
    def breakpoints(self) -> dict[str, int]:
        return dict(self.raw.get("breakpoints", DEFAULT_BREAKPOINTS))

    @property
    def pages(self) -> dict[str, dict]:
        return dict(self.raw.get("pages") or {})

    @property
    def head_widgets(self) -> list[dict]:
        return list(self.raw.get("head_widgets") or [])

    @property
    def widget_settings(self) -> dict[str, dict]:
        return {k: v for k, v in (self.raw.get("widgets") or {}).items() if k != "packages"}

    @property
    def package_overrides(self) -> dict[str, Path]:
        out = {}
        for name, folder in ((self.raw.get("widgets") or {}).get("packages") or {}).items():
            p = Path(_expand(str(folder)))
            out[name] = p if p.is_absolute() else self.base_dir / p
        return out

def load_config(path: str | Path) -> Config:
    p = Path(_expand(str(path)))
    raw = yaml.safe_load(p.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError("site config must contain a YAML mapping at top level.")
    return Config(raw=raw, base_dir=p.resolve().parent)
