"""Schema serialization exports."""

from .errors import JsonFormattingError, SchemaSerializationError
from .index_generator import (
    STRICT_DYNAMIC_MAPPING,
    IndexGenerationOptions,
    IndexGenerator,
    build_properties,
)
from .index_settings import IndexSettings
from .json_formatter import IndentedJsonFormatter, JsonFormatter

__all__ = [
    "STRICT_DYNAMIC_MAPPING",
    "IndentedJsonFormatter",
    "IndexGenerationOptions",
    "IndexGenerator",
    "IndexSettings",
    "JsonFormatter",
    "JsonFormattingError",
    "SchemaSerializationError",
    "build_properties",
]
