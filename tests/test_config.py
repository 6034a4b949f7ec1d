"""Tests for configuration loading."""

import pytest

from src.wp_export.utils.config_loader import ExportConfig, load_config


def test_defaults():
    config = ExportConfig()
    assert config.project_id_version == "Polylang/3.6"
    assert config.product_url == "https://polylang.pro/"


def test_from_yaml(tmp_path):
    path = tmp_path / "export.yaml"
    path.write_text(
        "app_version: '3.7'\nsite_url: https://example.org\nextra_key: kept\n",
        encoding="utf-8",
    )

    config = ExportConfig.from_yaml(path)
    assert config.project_id_version == "Polylang/3.7"
    assert config.site_url == "https://example.org"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")
