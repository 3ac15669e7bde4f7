"""Builds OpenSearch index creation and mapping update documents from schema trees."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from opensearch_mapping_builder.schema_compilation.schema_models import FieldSchemaNode

from .errors import SchemaSerializationError
from .index_settings import IndexSettings
from .json_formatter import IndentedJsonFormatter, JsonFormatter

STRICT_DYNAMIC_MAPPING = "strict"

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class IndexGenerationOptions:
    """Options affecting the generated index document."""

    strict_mapping: bool = False


class IndexGenerator:
    """Serializes schema trees into canonical JSON documents."""

    def __init__(self, json_formatter: JsonFormatter | None = None) -> None:
        self._json_formatter = json_formatter or IndentedJsonFormatter()

    def generate_index_json(
        self,
        tree: Iterable[FieldSchemaNode],
        settings: IndexSettings | None = None,
        options: IndexGenerationOptions | None = None,
    ) -> bytes:
        """Return the body of a create-index request.

        Shape: ``{"mappings": {"properties": ..., ["dynamic": "strict"]}, ["settings": ...]}``.
        """
        generation_options = options or IndexGenerationOptions()
        mappings: dict[str, Any] = {"properties": build_properties(tree)}
        if generation_options.strict_mapping:
            mappings["dynamic"] = STRICT_DYNAMIC_MAPPING
        document: dict[str, Any] = {"mappings": mappings}
        wire_settings = settings.to_wire() if settings is not None else {}
        if wire_settings:
            document["settings"] = wire_settings
        _LOGGER.debug(
            "Generating index document (strict=%s, settings=%d)",
            generation_options.strict_mapping,
            len(wire_settings),
        )
        return self._render(document)

    def generate_mapping_update_json(self, tree: Iterable[FieldSchemaNode]) -> bytes:
        """Return the body of a put-mapping request: ``{"properties": ...}``."""
        _LOGGER.debug("Generating mapping update document")
        return self._render({"properties": build_properties(tree)})

    def _render(self, document: dict[str, Any]) -> bytes:
        try:
            encoded = json.dumps(document, ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise SchemaSerializationError(f"encode_index_document: {exc}") from exc
        try:
            return self._json_formatter.format_json(encoded)
        except SchemaSerializationError as exc:
            raise type(exc)(f"format_json: {exc}") from exc
        except (ValueError, OSError) as exc:
            raise SchemaSerializationError(f"format_json: {exc}") from exc


def build_properties(tree: Iterable[FieldSchemaNode]) -> dict[str, Any]:
    """Convert schema nodes into an OpenSearch ``properties`` object."""
    return {node.name: _node_to_mapping(node) for node in tree}


def _node_to_mapping(node: FieldSchemaNode) -> dict[str, Any]:
    if not node.is_leaf:
        return {"properties": build_properties(node.children)}

    mapping: dict[str, Any] = {"type": node.type_name}
    if node.format:
        mapping["format"] = node.format
    if node.index_prefixes is not None:
        mapping["index_prefixes"] = dict(node.index_prefixes)
    if node.analyzer:
        mapping["analyzer"] = node.analyzer
    if node.search_analyzer:
        mapping["search_analyzer"] = node.search_analyzer
    if node.copy_to:
        mapping["copy_to"] = list(node.copy_to)
    return mapping
