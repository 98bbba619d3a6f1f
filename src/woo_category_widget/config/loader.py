"""Configuration and catalog file loading."""

import os
import sys

from pathlib import Path
from typing import Optional, Union

import yaml

from pydantic import ValidationError

from .defaults import get_default_config
from .schema import CatalogData, PluginConfig

# Module-level cache for config
_cached_config: Optional[PluginConfig] = None
_cached_mtime: float = 0.0


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.getenv("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(config_home) / "woo-category-widget"


def get_config_path() -> Path:
    """Get the full configuration file path."""
    return get_config_dir() / "config.yaml"


def load_config_file() -> PluginConfig:
    """Load and validate the config file without any fallback.

    Raises:
        OSError: If the file cannot be read
        yaml.YAMLError: If the file is not valid YAML
        ValidationError: If the contents do not match the schema
    """
    with open(get_config_path(), encoding="utf-8") as f:
        config_data = yaml.safe_load(f)

    if config_data is None:
        config_data = {}

    return PluginConfig(**config_data)


def load_config() -> PluginConfig:
    """Load configuration, reusing the parsed file until its mtime changes.

    A missing file means defaults; nothing is written. An unreadable or
    invalid file also falls back to defaults, with a warning on stderr.
    """
    global _cached_config, _cached_mtime

    config_path = get_config_path()

    try:
        mtime = config_path.stat().st_mtime
    except OSError:
        return get_default_config()

    if _cached_config is not None and mtime == _cached_mtime:
        return _cached_config

    try:
        config = load_config_file()
    except (yaml.YAMLError, ValidationError, OSError) as e:
        print(
            f"Warning: Failed to load config from {config_path}: {e}",
            file=sys.stderr,
        )
        print("Using default configuration.", file=sys.stderr)
        return get_default_config()

    _cached_config = config
    _cached_mtime = mtime
    return config


def save_config(config: PluginConfig) -> None:
    """Save configuration to YAML file."""
    config_path = get_config_path()
    config_dir = config_path.parent

    config_dir.mkdir(parents=True, exist_ok=True)

    config_dict = config.model_dump(mode="python")

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)


def load_catalog_file(path: Union[str, Path]) -> CatalogData:
    """Load a catalog snapshot from a YAML file.

    Args:
        path: Path to the catalog YAML file

    Returns:
        Validated catalog data

    Raises:
        OSError: If the file cannot be read
        yaml.YAMLError: If the file is not valid YAML
        ValidationError: If the contents do not match the schema
    """
    with open(path, encoding="utf-8") as f:
        catalog_data = yaml.safe_load(f)

    if catalog_data is None:
        catalog_data = {}

    return CatalogData(**catalog_data)
