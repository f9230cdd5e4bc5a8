"""Tests for cleanuri/common/config_loader.py"""

import pytest

from cleanuri.common.config_loader import load_config, load_site_providers


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("CLEANURI_CONFIG_DIR", str(tmp_path))
    return tmp_path


class TestLoadConfig:
    def test_loads_yaml(self, config_dir):
        (config_dir / "test.yaml").write_text("key: value\n", encoding="utf-8")
        assert load_config("test.yaml") == {"key": "value"}

    def test_empty_file(self, config_dir):
        (config_dir / "empty.yaml").write_text("", encoding="utf-8")
        assert load_config("empty.yaml") == {}

    def test_missing_file(self, config_dir):
        with pytest.raises(FileNotFoundError):
            load_config("nonexistent_file.yaml")

    def test_missing_override_dir(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CLEANURI_CONFIG_DIR", str(tmp_path / "missing"))
        with pytest.raises(FileNotFoundError):
            load_config("sites.yaml")


class TestLoadSiteProviders:
    def test_loads_providers(self, config_dir):
        (config_dir / "sites.yaml").write_text(
            "providers:\n"
            "  cleanuri.site.Site:\n"
            "    - shops.a:ShopA\n"
            "    - shops.b:ShopB\n",
            encoding="utf-8",
        )
        assert load_site_providers() == {"cleanuri.site.Site": ["shops.a:ShopA", "shops.b:ShopB"]}

    def test_null_provider_list(self, config_dir):
        (config_dir / "sites.yaml").write_text("providers:\n  cleanuri.site.Site:\n", encoding="utf-8")
        assert load_site_providers() == {"cleanuri.site.Site": []}

    def test_no_providers_key(self, config_dir):
        (config_dir / "sites.yaml").write_text("other: 1\n", encoding="utf-8")
        assert load_site_providers() == {}

    def test_non_list_providers(self, config_dir):
        (config_dir / "sites.yaml").write_text(
            "providers:\n  cleanuri.site.Site: shops.a:ShopA\n", encoding="utf-8",
        )
        with pytest.raises(ValueError):
            load_site_providers()


class TestShippedConfig:
    def test_shipped_sites_yaml(self, monkeypatch):
        monkeypatch.delenv("CLEANURI_CONFIG_DIR", raising=False)
        assert load_site_providers() == {"cleanuri.site.Site": []}
