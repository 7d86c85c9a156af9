from PIL import Image
import pytest

from glotkit.assets import AssetManager
from glotkit.config import Config
from glotkit.errors import AssetNotFoundError, MisconfiguredWidgetError
from glotkit.packages import PackageLoader


@pytest.fixture
def assets(config):
    return AssetManager(config, PackageLoader(config.widgets_dir, config.package_overrides))


def test_site_and_widget_urls(assets):
    assert assets.make_asset_url("hero.png", "Gallery") == "/assets/hero.png"
    assert assets.make_widget_asset_url("hero.png", "Gallery") == "/widgets/Gallery/assets/hero.png"


def test_absolute_urls_pass_through(assets):
    url = "https://cdn.example.org/x.png"
    assert assets.make_asset_url(url) == url
    assert assets.make_widget_asset_url(url, "Gallery") == url


def test_base_url(site):
    cfg = Config(raw={"assets": {"base_url": "https://static.example.org"}}, base_dir=site)
    am = AssetManager(cfg, PackageLoader(cfg.widgets_dir))
    assert am.make_asset_url("hero.png") == "https://static.example.org/assets/hero.png"


def test_cannot_escape_folder(assets):
    with pytest.raises(AssetNotFoundError):
        assets.get_asset_path("../site.yaml")
    with pytest.raises(AssetNotFoundError):
        assets.get_widget_asset_path("../dictionary.json", "Gallery")


def test_folder_is_not_an_asset(assets):
    with pytest.raises(AssetNotFoundError):
        assets.get_asset_path("")


def test_widget_tier_needs_package(assets):
    with pytest.raises(MisconfiguredWidgetError):
        assets.make_widget_asset_url("hero.png", "Unknown")


def test_image_size(assets):
    assert assets.get_image_size("hero.png") == (400, 200)


def test_srcset_writes_scaled_copies(assets, config):
    out = assets.get_img_srcset("hero.png")
    assert out["src"] == "/assets/hero.png"
    assert out["srcset"] == (
        "/assets/_srcset/hero-100w.png 100w, "
        "/assets/_srcset/hero-200w.png 200w, "
        "/assets/hero.png 400w"
    )
    assert out["sizes"] == "(max-width: 400px) 100vw, 400px"
    with Image.open(config.output_dir / "assets" / "_srcset" / "hero-100w.png") as img:
        assert img.size == (100, 50)


def test_srcset_keeps_vector_images(assets):
    assert assets.get_img_srcset("logo.svg") == "logo.svg"


def test_srcset_keeps_unreadable_images(assets, site):
    (site / "assets" / "fake.png").write_bytes(b"not an image")
    assert assets.get_img_srcset("fake.png") == "fake.png"


def test_srcset_missing_image(assets):
    with pytest.raises(AssetNotFoundError):
        assets.get_img_srcset("missing.png")
