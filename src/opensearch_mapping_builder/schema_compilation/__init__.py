"""Schema compilation exports."""

from .errors import ReservedTemporalTypeError, SchemaCompilationError, UnsupportedFieldTypeError
from .record_fields import ANNOTATION_METADATA_KEY, describe_record_fields
from .schema_compiler import DEFAULT_MAX_DEPTH, SchemaCompiler, resolve_field_type
from .schema_models import FieldSchemaNode, RecordField, SchemaTree

__all__ = [
    "ANNOTATION_METADATA_KEY",
    "DEFAULT_MAX_DEPTH",
    "FieldSchemaNode",
    "RecordField",
    "ReservedTemporalTypeError",
    "SchemaCompilationError",
    "SchemaCompiler",
    "SchemaTree",
    "UnsupportedFieldTypeError",
    "describe_record_fields",
    "resolve_field_type",
]
