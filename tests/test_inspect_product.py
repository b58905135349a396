"""Tests for inspect_product.py"""

import json
import logging

import pytest

import inspect_product
from mobilebuy.common import config_loader


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers main() attaches to the package logger."""
    yield
    logger = logging.getLogger("mobilebuy")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()


@pytest.fixture
def product_file(tmp_path, product_json):
    path = tmp_path / "product.json"
    path.write_text(product_json, encoding="utf-8")
    return path


class TestMain:
    def test_report(self, product_file, capsys):
        assert inspect_product.main(["--file", str(product_file), "--quiet"]) == 0
        out = capsys.readouterr().out
        assert "Title: Canvas Sneaker" in out
        assert "TAGS (3 items)" in out
        assert "VARIANTS (3 variants)" in out
        assert "SELECTION" not in out

    def test_select_by_options(self, product_file, capsys):
        code = inspect_product.main(
            ["--file", str(product_file), "--option", "Small", "--option", "Blue", "--quiet"]
        )
        out = capsys.readouterr().out
        assert code == 0
        assert "Variant: 1002 Small / Blue" in out
        assert "canvas-sneaker-blue.jpg" in out

    def test_select_by_id_uses_product_image(self, product_file, capsys):
        code = inspect_product.main(["--file", str(product_file), "--variant-id", "1003", "--quiet"])
        out = capsys.readouterr().out
        assert code == 0
        assert "Image:   https://cdn.example.com/s/files/canvas-sneaker.jpg" in out

    def test_no_matching_variant(self, product_file):
        code = inspect_product.main(
            ["--file", str(product_file), "--option", "Large", "--option", "Green", "--quiet"]
        )
        assert code == 1

    def test_unknown_variant_id(self, product_file):
        assert inspect_product.main(["--file", str(product_file), "--variant-id", "5", "--quiet"]) == 1

    def test_malformed_product(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"product_id": "abc", "variants": [{"id": 1}]}), encoding="utf-8")
        assert inspect_product.main(["--file", str(path), "--quiet"]) == 1

    def test_missing_file(self, tmp_path):
        assert inspect_product.main(["--file", str(tmp_path / "missing.json"), "--quiet"]) == 1

    def test_default_variant_noted(self, tmp_path, capsys):
        path = tmp_path / "single.json"
        path.write_text(json.dumps({
            "product_id": "9",
            "title": "Gift Wrap",
            "variants": [{"id": 90, "title": "Default Title", "price": "5.00"}],
        }), encoding="utf-8")

        assert inspect_product.main(["--file", str(path), "--quiet"]) == 0
        assert "VARIANTS (1 variants - default variant only)" in capsys.readouterr().out

    def test_runs_without_config_directory(self, product_file, tmp_path, monkeypatch, capsys):
        workdir = tmp_path / "elsewhere"
        workdir.mkdir()
        monkeypatch.setattr(config_loader, "__file__", str(workdir / "pkg" / "common" / "config_loader.py"))
        monkeypatch.chdir(workdir)

        assert inspect_product.main(["--file", str(product_file), "--quiet"]) == 0
        captured = capsys.readouterr()
        assert "Title: Canvas Sneaker" in captured.out
        assert "=" * 80 in captured.out
        assert "default storefront settings" in captured.err
