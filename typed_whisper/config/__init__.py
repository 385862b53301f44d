"""Configuration loader utilities."""

from .loader import DEFAULT_CONFIG_PATH, ModelConfig, load_config

__all__ = ["ModelConfig", "DEFAULT_CONFIG_PATH", "load_config"]
