"""Configuration loading, schema, and defaults."""

from dxrel.config.loader import ConfigError, load_config
from dxrel.config.schema import DxrelConfig, OutputFormat

__all__ = [
    "ConfigError",
    "DxrelConfig",
    "OutputFormat",
    "load_config",
]
