import pytest

from glotkit.config import DEFAULT_BREAKPOINTS, Config, load_config


def test_folders_resolve_against_config_dir(config, site):
    site = site.resolve()
    assert config.assets_dir == site / "assets"
    assert config.widgets_dir == site / "widgets"
    assert config.output_dir == site / "build"


def test_language_settings(config):
    assert config.lang_settings["languages"] == ["en", "fr"]
    assert config.main_language == "en"
    assert config.available_languages == ["en", "fr", "de"]


def test_language_defaults():
    cfg = Config(raw={"languages": {"languages": ["de", "en"]}})
    assert cfg.main_language == "de"
    assert cfg.available_languages == ["de", "en"]


def test_defaults_for_empty_config(tmp_path):
    cfg = Config(raw={}, base_dir=tmp_path)
    assert cfg.main_language == "en"
    assert cfg.base_url == "/"
    assert cfg.breakpoints == DEFAULT_BREAKPOINTS
    assert cfg.pages == {}
    assert cfg.head_widgets == []
    assert cfg.widget_settings == {}
    assert cfg.package_overrides == {}
    assert cfg.output_dir == tmp_path / "build"


def test_base_url_gets_trailing_slash():
    assert Config(raw={"assets": {"base_url": "https://cdn.example.org/site"}}).base_url == "https://cdn.example.org/site/"


def test_widget_settings_exclude_package_map(config, site):
    assert config.widget_settings == {"Gallery": {"columns": 3}}
    assert config.package_overrides == {"Menu": site.resolve() / "packages" / "menu-widget"}


def test_srcset_widths_sorted():
    assert Config(raw={"images": {"srcset_widths": [800, "200", 400]}}).srcset_widths == [200, 400, 800]


def test_rejects_non_mapping(tmp_path):
    p = tmp_path / "site.yaml"
    p.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(p)
