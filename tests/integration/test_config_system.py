"""Integration tests for configuration and catalog loading."""

import os

import pytest
import yaml

from pydantic import ValidationError

from woo_category_widget.config.defaults import get_default_config
from woo_category_widget.config.loader import (
    get_config_path,
    load_catalog_file,
    load_config,
    load_config_file,
    save_config,
)
from woo_category_widget.config.schema import PluginConfig


@pytest.fixture
def sample_config():
    """Create a sample configuration."""
    return PluginConfig(
        version=1,
        catalog_placeholder_src="https://cdn/placeholder.png",
        catalog_path="/srv/catalog.yaml",
        element_id="hero-card",
    )


@pytest.mark.integration
class TestConfigLoading:
    """Tests for configuration loading."""

    def test_missing_config_uses_defaults_without_writing(self, isolated_config_home):
        """Test that defaults are used and no file is created when config is missing."""
        config = load_config()

        assert config == get_default_config()

        config_file = isolated_config_home / "woo-category-widget" / "config.yaml"
        assert not config_file.exists()

    def test_loads_existing_config(self, sample_config):
        """Test loading an existing configuration file."""
        save_config(sample_config)

        loaded_config = load_config()

        assert loaded_config.catalog_path == "/srv/catalog.yaml"
        assert loaded_config.element_id == "hero-card"
        assert loaded_config.catalog_placeholder_src == "https://cdn/placeholder.png"

    def test_handles_invalid_yaml(self, capsys):
        """Test that invalid YAML falls back to defaults."""
        config_file = get_config_path()
        config_file.parent.mkdir(parents=True, exist_ok=True)
        config_file.write_text("invalid: yaml: content: [[[")

        config = load_config()

        assert config == get_default_config()
        assert "Using default configuration." in capsys.readouterr().err

    def test_handles_unknown_keys(self):
        """Test that schema violations fall back to defaults."""
        config_file = get_config_path()
        config_file.parent.mkdir(parents=True, exist_ok=True)
        config_file.write_text("version: 1\nunknown_key: true\n")

        assert load_config() == get_default_config()

        with pytest.raises(ValidationError):
            load_config_file()

    def test_empty_file_uses_defaults(self):
        config_file = get_config_path()
        config_file.parent.mkdir(parents=True, exist_ok=True)
        config_file.write_text("")

        assert load_config_file() == PluginConfig()

    def test_reloads_after_change(self, sample_config):
        save_config(sample_config)
        assert load_config().element_id == "hero-card"

        updated = sample_config.model_copy(update={"element_id": "other"})
        save_config(updated)
        path = get_config_path()
        stat = path.stat()
        os.utime(path, (stat.st_atime, stat.st_mtime + 10))

        assert load_config().element_id == "other"


@pytest.mark.integration
class TestCatalogLoading:
    """Tests for catalog file loading."""

    def test_loads_catalog_file(self, tmp_path, sample_catalog_payload):
        path = tmp_path / "catalog.yaml"
        path.write_text(yaml.safe_dump(sample_catalog_payload))

        data = load_catalog_file(path)

        assert [c.slug for c in data.categories] == ["shoes", "hats", "empty"]
        assert data.attachments[301] == "https://site/uploads/hats.jpg"
        assert data.categories[1].meta == {"thumbnail_id": 301}

    def test_rejects_invalid_catalog(self, tmp_path):
        path = tmp_path / "catalog.yaml"
        path.write_text("categories:\n  - slug: no-id\n")

        with pytest.raises(ValidationError):
            load_catalog_file(path)

    def test_missing_catalog_file(self, tmp_path):
        with pytest.raises(OSError):
            load_catalog_file(tmp_path / "missing.yaml")
