from glotkit.cli import main


def test_text(site, capsys):
    assert main(["--config", str(site / "site.yaml"), "--lang", "fr", "text", "Gallery", "title"]) == 0
    assert capsys.readouterr().out.strip() == "Galerie"


def test_text_default(site, capsys):
    assert main(["--config", str(site / "site.yaml"), "text", "Gallery", "caption", "--default", "Untitled"]) == 0
    assert capsys.readouterr().out.strip() == "Untitled"


def test_asset(site, capsys):
    assert main(["--config", str(site / "site.yaml"), "asset", "Gallery", "hero.png", "--widget-asset"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "/widgets/Gallery/assets/hero.png"
    assert lines[1].endswith("hero.png")


def test_pages(site, capsys):
    assert main(["--config", str(site / "site.yaml"), "--lang", "fr", "pages"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 5
    assert lines[0].startswith("* home")
    assert lines[0].endswith("Accueil")


def test_errors_are_reported(site, capsys):
    assert main(["--config", str(site / "site.yaml"), "asset", "Gallery", "missing.png"]) == 1
    assert "missing.png" in capsys.readouterr().err


def test_missing_config(tmp_path, capsys):
    assert main(["--config", str(tmp_path / "nope.yaml"), "pages"]) == 1
    assert capsys.readouterr().err.startswith("glotkit:")
