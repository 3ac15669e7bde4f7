"""Compiles dataclass record types into OpenSearch index mapping trees."""

from __future__ import annotations

import collections.abc
import logging
import types
import typing
from datetime import date, datetime
from typing import Any

from opensearch_mapping_builder.annotation_parsing import (
    OPTION_ANALYZER,
    OPTION_COPY_TO,
    OPTION_FORMAT,
    OPTION_INDEX_PREFIXES,
    OPTION_SEARCH_ANALYZER,
    OPTION_TYPE,
    get_option_value,
    parse_list_option,
    parse_map_option,
)
from opensearch_mapping_builder.date_formats import is_date_capable
from opensearch_mapping_builder.field_naming import FieldNameTransformer, SnakeCaser

from .errors import ReservedTemporalTypeError, SchemaCompilationError, UnsupportedFieldTypeError
from .record_fields import describe_record_fields, is_record_type, record_type_of
from .schema_models import FieldSchemaNode, RecordField, SchemaTree

DEFAULT_MAX_DEPTH = 2
DATE_FIELD_TYPE = "date"

_LOGGER = logging.getLogger(__name__)

_PRIMITIVE_FIELD_TYPES: tuple[tuple[type, str], ...] = (
    (bool, "boolean"),
    (int, "integer"),
    (float, "float"),
    (str, "text"),
)
_RESERVED_TEMPORAL_TYPES = (datetime, date)
_COLLECTION_ORIGINS = frozenset(
    {
        list,
        tuple,
        set,
        frozenset,
        collections.abc.Sequence,
        collections.abc.MutableSequence,
        collections.abc.Set,
        collections.abc.MutableSet,
        collections.abc.Collection,
        collections.abc.Iterable,
    }
)


class SchemaCompiler:
    """Walks a record type and builds its mapping tree.

    Nested records are followed up to ``max_depth`` levels (the root record is
    level 1); deeper record fields are left out of the mapping, which is how
    self-referencing records are kept finite.
    """

    def __init__(
        self,
        *,
        max_depth: int = DEFAULT_MAX_DEPTH,
        field_name_transformer: FieldNameTransformer | None = None,
        omit_unsupported_types: bool = False,
    ) -> None:
        if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 1:
            raise ValueError(f"max_depth must be a positive integer, got {max_depth!r}.")
        self._max_depth = max_depth
        self._field_name_transformer = field_name_transformer or SnakeCaser()
        self._omit_unsupported_types = omit_unsupported_types

    @property
    def max_depth(self) -> int:
        return self._max_depth

    def compile(self, record: Any) -> SchemaTree:
        """Compile a dataclass type (or instance) into a schema tree."""
        record_type = record_type_of(record)
        nodes = self._compile_fields(record_type, level=1, path_prefix="")
        _LOGGER.debug("Compiled %s into %d top-level fields", record_type.__qualname__, len(nodes))
        return tuple(nodes)

    def _compile_fields(
        self, record_type: type[Any], *, level: int, path_prefix: str
    ) -> list[FieldSchemaNode]:
        nodes: list[FieldSchemaNode] = []
        seen_names: set[str] = set()
        for record_field in describe_record_fields(record_type):
            field_path = (
                record_field.name if not path_prefix else f"{path_prefix}.{record_field.name}"
            )
            node = self._compile_field(record_field, level=level, field_path=field_path)
            if node is None:
                continue
            if node.name in seen_names:
                raise SchemaCompilationError(f"Duplicate mapped field name detected: {field_path}")
            seen_names.add(node.name)
            nodes.append(node)
        return nodes

    def _compile_field(
        self, record_field: RecordField, *, level: int, field_path: str
    ) -> FieldSchemaNode | None:
        resolved = resolve_field_type(record_field.annotation)
        if resolved in _RESERVED_TEMPORAL_TYPES:
            raise ReservedTemporalTypeError(field_path)

        tag = record_field.tag
        date_format = _date_format_of(resolved, field_path)
        type_name = _resolve_type_name(resolved, tag, date_format)
        field_format = get_option_value(tag, OPTION_FORMAT) or date_format or None
        name = self._transform_name(record_field.name, field_path)

        if type_name:
            return _leaf_node(name, type_name, field_format, tag)

        if is_record_type(resolved):
            if level + 1 > self._max_depth:
                _LOGGER.debug("Omitting %s: max depth %d reached", field_path, self._max_depth)
                return None
            children = self._compile_fields(resolved, level=level + 1, path_prefix=field_path)
            if not children:
                _LOGGER.debug("Omitting %s: nested record has no mapped fields", field_path)
                return None
            return FieldSchemaNode(name=name, format=field_format, children=tuple(children))

        if self._omit_unsupported_types:
            _LOGGER.debug("Skipping %s: unsupported type %r", field_path, record_field.annotation)
            return None
        raise UnsupportedFieldTypeError(
            f"Field not supported: {field_path} ({record_field.annotation!r}). "
            "Use omit_unsupported_types=True to skip fields of unsupported types."
        )

    def _transform_name(self, name: str, field_path: str) -> str:
        try:
            transformed = self._field_name_transformer.transform_field_name(name)
        except ValueError as exc:
            raise SchemaCompilationError(
                f"Cannot transform field name {field_path}: {exc}"
            ) from exc
        if not transformed:
            raise SchemaCompilationError(
                f"Field name of {field_path} transformed to an empty name."
            )
        return transformed


def resolve_field_type(annotation: Any) -> Any:
    """Strip Optional/Annotated wrappers and homogeneous collections down to the element type."""
    resolved = _unwrap_optional(annotation)
    origin = typing.get_origin(resolved)
    if origin not in _COLLECTION_ORIGINS:
        return resolved

    args = typing.get_args(resolved)
    if origin is tuple and not (len(args) == 2 and args[1] is Ellipsis) and len(args) != 1:
        return resolved
    if not args:
        return resolved
    return _unwrap_optional(args[0])


def _unwrap_optional(annotation: Any) -> Any:
    current = annotation
    while True:
        origin = typing.get_origin(current)
        if origin is typing.Annotated:
            current = typing.get_args(current)[0]
            continue
        if origin is typing.Union or origin is types.UnionType:
            members = [arg for arg in typing.get_args(current) if arg is not type(None)]
            if len(members) == 1:
                current = members[0]
                continue
        return current


def _resolve_type_name(resolved: Any, tag: str, date_format: str) -> str:
    type_override = get_option_value(tag, OPTION_TYPE)
    if type_override:
        return type_override
    primitive_type = _primitive_field_type(resolved)
    if primitive_type:
        return primitive_type
    if date_format:
        return DATE_FIELD_TYPE
    return ""


def _primitive_field_type(resolved: Any) -> str:
    if not isinstance(resolved, type) or is_date_capable(resolved):
        return ""
    for python_type, field_type in _PRIMITIVE_FIELD_TYPES:
        if issubclass(resolved, python_type):
            return field_type
    return ""


def _date_format_of(resolved: Any, field_path: str) -> str:
    if not is_date_capable(resolved):
        return ""
    try:
        date_format = resolved.opensearch_field_type()
    except TypeError as exc:
        raise SchemaCompilationError(
            f"Cannot read the date format of {field_path}: "
            f"{resolved.__qualname__}.opensearch_field_type must be a classmethod ({exc})"
        ) from exc
    return str(date_format)


def _leaf_node(name: str, type_name: str, field_format: str | None, tag: str) -> FieldSchemaNode:
    index_prefixes = get_option_value(tag, OPTION_INDEX_PREFIXES)
    analyzer = get_option_value(tag, OPTION_ANALYZER)
    search_analyzer = get_option_value(tag, OPTION_SEARCH_ANALYZER)
    copy_to = get_option_value(tag, OPTION_COPY_TO)
    prefixes = types.MappingProxyType(parse_map_option(index_prefixes)) if index_prefixes else None
    return FieldSchemaNode(
        name=name,
        type_name=type_name,
        format=field_format,
        index_prefixes=prefixes,
        analyzer=analyzer or None,
        search_analyzer=search_analyzer or None,
        copy_to=parse_list_option(copy_to) if copy_to else None,
    )
