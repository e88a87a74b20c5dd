"""Configuration module for the plugin SDK."""

from .settings import PluginConfig, get_config, load_config

__all__ = ["PluginConfig", "get_config", "load_config"]
