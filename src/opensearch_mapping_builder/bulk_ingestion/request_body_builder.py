"""Bulk API request body assembly."""

from __future__ import annotations

import dataclasses
import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from opensearch_mapping_builder.date_formats import OpenSearchDateType

_LOGGER = logging.getLogger(__name__)


class BulkBodyError(Exception):
    """Raised when a document cannot be encoded into a bulk request body."""


@dataclass(frozen=True)
class BulkDocument:
    """A document to index, with its destination index and ``_id``."""

    document: Any
    index: str
    document_id: str


class RequestBodyBuilder:
    """Builds newline-delimited bodies for the ``POST _bulk`` API."""

    def build_index_body(self, documents: Iterable[BulkDocument]) -> str:
        """Return one ``index`` action line and one source line per document.

        Every line is newline-terminated. No documents give an empty body, not
        a lone newline, so callers can skip the request entirely.
        """
        lines: list[str] = []
        for bulk_document in documents:
            action = {"index": {"_index": bulk_document.index, "_id": bulk_document.document_id}}
            lines.append(_encode(action))
            try:
                lines.append(_encode(bulk_document.document))
            except (TypeError, ValueError) as exc:
                raise BulkBodyError(
                    f"Cannot encode document {bulk_document.document_id!r} "
                    f"for index {bulk_document.index!r}: {exc}"
                ) from exc
        _LOGGER.debug("Built bulk body with %d documents", len(lines) // 2)
        return "".join(f"{line}\n" for line in lines)


def _encode(value: Any) -> str:
    return json.dumps(value, default=_encode_default, separators=(",", ":"), ensure_ascii=False)


def _encode_default(value: Any) -> Any:
    if isinstance(value, OpenSearchDateType):
        return value.marshal_text()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {item.name: getattr(value, item.name) for item in dataclasses.fields(value)}
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
