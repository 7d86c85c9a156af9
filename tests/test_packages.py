import pytest

from glotkit.errors import MisconfiguredWidgetError
from glotkit.packages import DEFAULT_MARKUP_DICT, PackageLoader


@pytest.fixture
def loader(config):
    return PackageLoader(config.widgets_dir, config.package_overrides)


def test_default_layout(loader, config):
    pkg = loader.load("Gallery")
    assert pkg.root_folder == config.widgets_dir / "Gallery"
    assert pkg.markup_dict == DEFAULT_MARKUP_DICT
    assert pkg.assets_folder == config.widgets_dir / "Gallery" / "assets"


def test_override_and_manifest(loader, config):
    pkg = loader.load("Menu")
    assert pkg.root_folder == config.package_overrides["Menu"]
    assert pkg.markup_dict_path.name == "labels.json"


def test_cached(loader):
    assert loader.load("Gallery") is loader.load("Gallery")


def test_missing_package(loader):
    with pytest.raises(MisconfiguredWidgetError) as exc:
        loader.load("Nope")
    assert "widgets.packages" in str(exc.value)


def test_empty_identity(loader):
    with pytest.raises(MisconfiguredWidgetError):
        loader.load("")


def test_bad_manifest(loader, config):
    (config.widgets_dir / "NoDict" / "package.yaml").write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(MisconfiguredWidgetError):
        loader.load("NoDict")
