from __future__ import annotations

import argparse
import logging
import sys

from .config import load_config
from .errors import GlotError
from .renderer import Renderer
from .widget import Widget

def _widget_for(renderer: Renderer, name: str) -> Widget:
    # Widget identity is the class name, so inspect through a stand-in class.
    return type(name, (Widget,), {})(renderer)

def _cmd_text(renderer: Renderer, args: argparse.Namespace) -> None:
    widget = _widget_for(renderer, args.widget)
    print(widget.get_text(args.key, args.default))

def _cmd_asset(renderer: Renderer, args: argparse.Namespace) -> None:
    widget = _widget_for(renderer, args.widget)
    url = widget.make_asset_url(args.asset, advance=args.widget_asset)
    path = widget.get_asset_path(args.asset, widget_asset=args.widget_asset)
    print(url)
    print(path)

def _cmd_pages(renderer: Renderer, args: argparse.Namespace) -> None:
    reader = renderer.get_page_info()
    home = reader.get_home_page()
    for name in reader.get_website_pages(args.folder):
        rec = reader.get_page_info(name)
        mark = "*" if name == home else " "
        print(f"{mark} {name:<24} {renderer.localize(rec.title)}")

def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="glotkit")
    ap.add_argument("--config", default="site.yaml", help="Path to site.yaml")
    ap.add_argument("--lang", help="Render language (default: main language)")
    ap.add_argument("--page", default="", help="Current page name (default: home page)")
    ap.add_argument("--static", action="store_true", help="Resolve as in static export mode")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log resolution steps")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("text", help="Look up a localized text in a widget's markup dictionary")
    p.add_argument("widget")
    p.add_argument("key")
    p.add_argument("--default", default="")
    p.set_defaults(func=_cmd_text)

    p = sub.add_parser("asset", help="Resolve an asset URL and path")
    p.add_argument("widget")
    p.add_argument("asset")
    p.add_argument("--widget-asset", action="store_true", help="Look in the widget package instead of the site")
    p.set_defaults(func=_cmd_asset)

    p = sub.add_parser("pages", help="List site pages")
    p.add_argument("--folder", default="")
    p.set_defaults(func=_cmd_pages)

    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        cfg = load_config(args.config)
        renderer = Renderer(cfg, page_name=args.page, language=args.lang, static=args.static)
        args.func(renderer, args)
    except (GlotError, ValueError, OSError) as e:
        print(f"glotkit: {e}", file=sys.stderr)
        return 1
    return 0
