"""JSON formatter tests."""

from __future__ import annotations

import pytest
from opensearch_mapping_builder.schema_serialization import (
    IndentedJsonFormatter,
    JsonFormattingError,
)


def test_sorts_keys_and_indents_with_three_spaces() -> None:
    input_json = b'{"name":"tom",   "age":\n\n80,"foo":{}}'

    result = IndentedJsonFormatter().format_json(input_json)

    assert result.decode("utf-8") == '{\n   "age": 80,\n   "foo": {},\n   "name": "tom"\n}'


def test_keeps_non_ascii_text() -> None:
    result = IndentedJsonFormatter().format_json('{"city":"Zürich"}'.encode())

    assert "Zürich" in result.decode("utf-8")


def test_invalid_json_raises_formatting_error() -> None:
    with pytest.raises(JsonFormattingError):
        IndentedJsonFormatter().format_json(b"{not-json}")
