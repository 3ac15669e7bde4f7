"""JSON formatting strategies applied to generated documents."""

from __future__ import annotations

import json
from typing import Protocol

from .errors import JsonFormattingError

DEFAULT_INDENT = 3


class JsonFormatter(Protocol):
    """Canonicalizes a JSON document."""

    def format_json(self, data: bytes) -> bytes: ...


class IndentedJsonFormatter:
    """Re-emits JSON with lexicographically sorted keys and fixed indentation."""

    def __init__(self, indent: int = DEFAULT_INDENT) -> None:
        self._indent = indent

    def format_json(self, data: bytes) -> bytes:
        try:
            parsed = json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise JsonFormattingError(f"json.loads: {exc}") from exc
        formatted = json.dumps(parsed, indent=self._indent, sort_keys=True, ensure_ascii=False)
        return formatted.encode("utf-8")
