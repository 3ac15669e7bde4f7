"""Derive OpenSearch index mappings and bulk request bodies from Python dataclasses."""

import logging

from .bulk_ingestion import BulkBodyError, BulkDocument, RequestBodyBuilder
from .date_formats import (
    DateParseError,
    OpenSearchDateType,
    TimeBasicDate,
    TimeBasicDateTime,
    TimeBasicDateTimeNoMillis,
)
from .field_naming import FieldNameTransformer, SnakeCaser
from .schema_compilation import (
    ANNOTATION_METADATA_KEY,
    DEFAULT_MAX_DEPTH,
    FieldSchemaNode,
    ReservedTemporalTypeError,
    SchemaCompilationError,
    SchemaCompiler,
    SchemaTree,
    UnsupportedFieldTypeError,
)
from .schema_serialization import (
    IndentedJsonFormatter,
    IndexGenerationOptions,
    IndexGenerator,
    IndexSettings,
    JsonFormatter,
    JsonFormattingError,
    SchemaSerializationError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ANNOTATION_METADATA_KEY",
    "DEFAULT_MAX_DEPTH",
    "BulkBodyError",
    "BulkDocument",
    "DateParseError",
    "FieldNameTransformer",
    "FieldSchemaNode",
    "IndentedJsonFormatter",
    "IndexGenerationOptions",
    "IndexGenerator",
    "IndexSettings",
    "JsonFormatter",
    "JsonFormattingError",
    "OpenSearchDateType",
    "RequestBodyBuilder",
    "ReservedTemporalTypeError",
    "SchemaCompilationError",
    "SchemaCompiler",
    "SchemaSerializationError",
    "SchemaTree",
    "SnakeCaser",
    "TimeBasicDate",
    "TimeBasicDateTime",
    "TimeBasicDateTimeNoMillis",
    "UnsupportedFieldTypeError",
]
