"""Default configuration for the category widget."""

from .schema import PluginConfig


def get_default_config() -> PluginConfig:
    """Generate the default plugin configuration."""
    return PluginConfig(version=1)
