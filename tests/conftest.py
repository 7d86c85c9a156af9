import json
import textwrap

import pytest
from PIL import Image

from glotkit.config import load_config
from glotkit.renderer import Renderer


SITE_YAML = """\
website:
  name: Demo site
  domain: demo.example.org
languages:
  languages: [en, fr]
  available: [en, fr, de]
  main: en
paths:
  assets: assets
  widgets: widgets
  output: build
assets:
  base_url: /
images:
  srcset_widths: [100, 200, 1000]
breakpoints:
  sm: 500
  lg: 1000
head_widgets:
  - type: Analytics
    id: ga
pages:
  home:
    title: {en: Home, fr: Accueil}
    home: true
    widgets:
      - {type: Gallery, id: g1}
  about:
    title: {en: About, fr: "À propos"}
    url: about-us
    theme: dark
  post1:
    title: First post
    folder: blog
    widgets:
      - {type: Gallery, id: g2}
      - {type: Menu, id: m1}
  post2:
    title: Second post
    folder: blog
  contact:
    title: Contact
widgets:
  Gallery:
    columns: 3
  packages:
    Menu: packages/menu-widget
"""


def _png(path, size, color):
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGB", size, color).save(path)


def _write_json(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")


@pytest.fixture
def site(tmp_path):
    """A site tree with site assets and a few widget packages."""
    (tmp_path / "site.yaml").write_text(SITE_YAML, encoding="utf-8")

    assets = tmp_path / "assets"
    _png(assets / "hero.png", (400, 200), "red")
    (assets / "data.txt").write_text("site data", encoding="utf-8")
    (assets / "logo.svg").write_text("<svg/>", encoding="utf-8")

    widgets = tmp_path / "widgets"
    _write_json(widgets / "BaseGallery" / "dictionary.json", {
        "caption": {"en": "Base caption"},
    })
    _png(widgets / "BaseGallery" / "assets" / "hero.png", (50, 50), "green")

    _write_json(widgets / "Gallery" / "dictionary.json", {
        "title": {"en": "Gallery", "fr": "Galerie"},
        "only_en": {"en": "Only English"},
        "empty": {"en": "", "fr": ""},
        "plain": "Same everywhere",
        "subtitle": None,
    })
    _png(widgets / "Gallery" / "assets" / "hero.png", (80, 80), "blue")
    (widgets / "Gallery" / "assets" / "data.txt").write_text("gallery data", encoding="utf-8")
    _write_json(widgets / "Gallery" / "assets" / "config.json", {"autoplay": True})

    menu = tmp_path / "packages" / "menu-widget"
    menu.mkdir(parents=True)
    (menu / "package.yaml").write_text(textwrap.dedent("""\
        markup_dict: labels.json
    """), encoding="utf-8")
    _write_json(menu / "labels.json", {"open": {"en": "Open", "fr": "Ouvrir"}})

    (widgets / "Broken").mkdir()
    (widgets / "Broken" / "dictionary.json").write_text("{not json", encoding="utf-8")
    (widgets / "NoDict").mkdir()

    return tmp_path


@pytest.fixture
def config(site):
    return load_config(site / "site.yaml")


@pytest.fixture
def renderer(config):
    return Renderer(config, page_name="home")


@pytest.fixture
def renderer_fr(config):
    return Renderer(config, page_name="home", language="fr")
