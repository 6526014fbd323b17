"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, build_settings, load_settings_file
from .runtime_settings import GenerationSettings

__all__ = [
    "GenerationSettings",
    "ConfigurationError",
    "build_settings",
    "load_settings_file",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
