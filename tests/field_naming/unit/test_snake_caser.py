"""Snake case field name transformer tests."""

from __future__ import annotations

import pytest
from opensearch_mapping_builder.field_naming import SnakeCaser


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Foo", "foo"),
        ("FOo", "foo"),
        ("FOO", "foo"),
        ("foo", "foo"),
        ("fooBar", "foo_bar"),
        ("FooBar", "foo_bar"),
        ("FOOBar", "foo_bar"),
        ("HTTPServer", "http_server"),
        ("FooBarBaz123", "foo_bar_baz_123"),
        ("Foo123Bar", "foo_123_bar"),
        ("Foo123BarBaz123", "foo_123_bar_baz_123"),
        ("123", "123"),
        ("123foo", "123foo"),
        ("123Foo", "123_foo"),
        ("full_address", "full_address"),
        ("Foo_Bar", "foo_bar"),
        ("age2", "age_2"),
    ],
)
def test_transforms_names_to_snake_case(name: str, expected: str) -> None:
    assert SnakeCaser().transform_field_name(name) == expected


@pytest.mark.parametrize(
    "name",
    ["A", "AB", "ABc", "aB1", "X9Y", "ID", "UserID42Token", "a1B2C3", "ZZZzzz9", "q"],
)
def test_alphanumeric_names_never_produce_stray_delimiters(name: str) -> None:
    result = SnakeCaser().transform_field_name(name)

    assert "__" not in result
    assert not result.startswith("_")
    assert not result.endswith("_")
