"""Schema serialization errors."""

from __future__ import annotations


class SchemaSerializationError(Exception):
    """Raised when a generated document cannot be encoded or formatted."""


class JsonFormattingError(SchemaSerializationError):
    """Raised by formatters for input that is not valid JSON."""
