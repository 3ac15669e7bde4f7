"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration, resolve_record_type
from .runtime_settings import CompilerSettings, GenerationConfig, IndexOutputSettings

__all__ = [
    "CompilerSettings",
    "GenerationConfig",
    "IndexOutputSettings",
    "ConfigurationError",
    "load_configuration",
    "resolve_record_type",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
