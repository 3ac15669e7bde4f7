"""Schema compilation entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RecordField:
    """One declared field of a record type, as seen by the schema compiler."""

    name: str
    annotation: Any
    tag: str


@dataclass(frozen=True)
class FieldSchemaNode:  # pylint: disable=too-many-instance-attributes
    """One leaf field or nested object in a compiled index mapping.

    Leaves carry ``type_name``; parents carry ``children`` and an empty ``type_name``.
    """

    name: str
    type_name: str = ""
    format: str | None = None
    children: tuple[FieldSchemaNode, ...] = ()
    index_prefixes: Mapping[str, str] | None = field(default=None, hash=False)
    analyzer: str | None = None
    search_analyzer: str | None = None
    copy_to: tuple[str, ...] | None = None

    @property
    def is_leaf(self) -> bool:
        return bool(self.type_name)


SchemaTree = tuple[FieldSchemaNode, ...]
