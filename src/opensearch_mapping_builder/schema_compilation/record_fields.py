"""Type-descriptor walk over dataclass record types."""

from __future__ import annotations

import dataclasses
import typing
from typing import Any

from .errors import SchemaCompilationError
from .schema_models import RecordField

ANNOTATION_METADATA_KEY = "opensearch"


def record_type_of(record: Any) -> type[Any]:
    """Return the dataclass type of ``record``, accepting either a class or an instance."""
    record_type = record if isinstance(record, type) else type(record)
    if not dataclasses.is_dataclass(record_type):
        raise SchemaCompilationError(
            f"Expected a dataclass type or instance, got {record_type.__qualname__}."
        )
    return record_type


def is_record_type(candidate: Any) -> bool:
    return isinstance(candidate, type) and dataclasses.is_dataclass(candidate)


def describe_record_fields(record_type: type[Any]) -> list[RecordField]:
    """List the record's fields in declaration order with resolved annotations and raw tags."""
    try:
        hints = typing.get_type_hints(record_type, include_extras=True)
    except (NameError, TypeError) as exc:
        raise SchemaCompilationError(
            f"Cannot resolve type hints of {record_type.__qualname__}: {exc}"
        ) from exc

    described: list[RecordField] = []
    for record_field in dataclasses.fields(record_type):
        tag = record_field.metadata.get(ANNOTATION_METADATA_KEY, "")
        if not isinstance(tag, str):
            raise SchemaCompilationError(
                f"Annotation of field '{record_field.name}' must be a string, "
                f"got {type(tag).__name__}."
            )
        described.append(
            RecordField(
                name=record_field.name,
                annotation=hints.get(record_field.name, record_field.type),
                tag=tag,
            )
        )
    return described
