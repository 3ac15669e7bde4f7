"""Configuration loader service."""

from __future__ import annotations

import importlib
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from opensearch_mapping_builder.schema_compilation.record_fields import is_record_type
from opensearch_mapping_builder.schema_serialization.index_settings import IndexSettings

from .runtime_settings import CompilerSettings, GenerationConfig, IndexOutputSettings


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> GenerationConfig:
    """Load and validate the generation configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    record = _require_import_path(parsed.get("record"), "record")
    compiler = _parse_compiler_section(parsed.get("compiler"))
    index = _parse_index_section(parsed.get("index"))

    return GenerationConfig(path=path, record=record, compiler=compiler, index=index)


def resolve_record_type(import_path: str, search_path: Path | str | None = None) -> type[Any]:
    """Import the dataclass named by ``package.module:ClassName``.

    ``search_path`` (usually the configuration file's directory) is put on
    ``sys.path`` first, so record modules next to the configuration import
    without setting ``PYTHONPATH``.
    """
    module_name, _, attribute_path = _require_import_path(import_path, "record").partition(":")
    if search_path is not None:
        _ensure_on_sys_path(Path(search_path))
    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigurationError(f"Cannot import record module '{module_name}': {exc}") from exc
    for attribute in attribute_path.split("."):
        try:
            target = getattr(target, attribute)
        except AttributeError as exc:
            raise ConfigurationError(
                f"Record '{attribute_path}' not found in module '{module_name}'."
            ) from exc
    if not is_record_type(target):
        raise ConfigurationError(f"Record '{import_path}' must be a dataclass type.")
    return target


def _ensure_on_sys_path(directory: Path) -> None:
    entry = str(directory.resolve())
    if entry not in sys.path:
        sys.path.insert(0, entry)
        importlib.invalidate_caches()


def _parse_compiler_section(value: Any) -> CompilerSettings:
    if value is None:
        return CompilerSettings()
    section = _require_mapping(value, "compiler")
    defaults = CompilerSettings()
    max_depth = _require_positive_int(
        section.get("max_depth", defaults.max_depth), "compiler.max_depth"
    )
    omit_unsupported_types = _require_bool(
        section.get("omit_unsupported_types", defaults.omit_unsupported_types),
        "compiler.omit_unsupported_types",
    )
    return CompilerSettings(max_depth=max_depth, omit_unsupported_types=omit_unsupported_types)


def _parse_index_section(value: Any) -> IndexOutputSettings:
    if value is None:
        return IndexOutputSettings()
    section = _require_mapping(value, "index")
    strict_mapping = _require_bool(section.get("strict_mapping", False), "index.strict_mapping")
    settings_value = section.get("settings")
    settings = None
    if settings_value is not None:
        settings_section = _require_mapping(settings_value, "index.settings")
        try:
            settings = IndexSettings.from_mapping(settings_section)
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"index.settings: {exc}") from exc
    return IndexOutputSettings(strict_mapping=strict_mapping, settings=settings)


def _require_import_path(value: Any, field_name: str) -> str:
    import_path = _require_non_empty_string(value, field_name)
    module_name, separator, attribute_path = import_path.partition(":")
    if not separator or not module_name.strip() or not attribute_path.strip():
        raise ConfigurationError(f"{field_name} must look like 'package.module:ClassName'.")
    return import_path


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
