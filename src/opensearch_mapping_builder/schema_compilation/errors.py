"""Schema compilation errors."""

from __future__ import annotations


class SchemaCompilationError(Exception):
    """Raised when a record type cannot be compiled into an index mapping."""


class UnsupportedFieldTypeError(SchemaCompilationError):
    """Raised for fields that are neither primitive, date-capable, nor records."""


class ReservedTemporalTypeError(SchemaCompilationError):
    """Raised for fields declared with a bare ``datetime`` or ``date`` type."""

    def __init__(self, field_name: str) -> None:
        super().__init__(
            f"Field '{field_name}' uses a bare datetime/date type, which has no canonical "
            "OpenSearch format. Use TimeBasicDateTime, TimeBasicDateTimeNoMillis, TimeBasicDate "
            "or a custom type implementing OpenSearchDateType instead."
        )
        self.field_name = field_name
