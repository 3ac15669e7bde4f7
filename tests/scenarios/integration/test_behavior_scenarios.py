"""Scenario-style integration tests from record type to index document."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime

import pytest
from opensearch_mapping_builder import (
    IndexGenerationOptions,
    IndexGenerator,
    ReservedTemporalTypeError,
    SchemaCompiler,
    TimeBasicDateTime,
)


@dataclass
class Location:
    full_address: str = ""
    confirmed: bool = False


@dataclass
class Listing:
    id: int = 0
    price: float = 0.0
    location: Location = field(default_factory=Location)


@dataclass
class Product:
    name: str = field(
        default="", metadata={"opensearch": "index_prefixes:min_chars=2;max_chars=10"}
    )


@dataclass
class Appointment:
    title: str = ""
    starts_at: datetime | None = field(
        default=None, metadata={"opensearch": "type:keyword,format:basic_date_time"}
    )


@dataclass
class Category:
    name: str = ""
    updated_at: TimeBasicDateTime | None = None
    parent: Category | None = None
    children: list[Category] = field(default_factory=list)


def test_nested_record_compiles_to_expected_index_document() -> None:
    tree = SchemaCompiler().compile(Listing)

    document = IndexGenerator().generate_index_json(tree)

    expected = (
        '{"mappings":{"properties":{"id":{"type":"integer"},"price":{"type":"float"},'
        '"location":{"properties":{"full_address":{"type":"text"},'
        '"confirmed":{"type":"boolean"}}}}}}'
    )
    assert json.loads(document) == json.loads(expected)
    assert list(json.loads(document)["mappings"]["properties"]) == ["id", "location", "price"]


def test_serializing_the_same_tree_twice_is_byte_identical() -> None:
    tree = SchemaCompiler().compile(Listing)
    generator = IndexGenerator()

    assert generator.generate_index_json(tree) == generator.generate_index_json(tree)
    assert generator.generate_mapping_update_json(tree) == generator.generate_mapping_update_json(
        tree
    )


def test_index_prefixes_annotation_reaches_the_leaf() -> None:
    document = json.loads(IndexGenerator().generate_index_json(SchemaCompiler().compile(Product)))

    assert document["mappings"]["properties"]["name"] == {
        "type": "text",
        "index_prefixes": {"min_chars": "2", "max_chars": "10"},
    }


def test_bare_timestamp_fails_even_with_annotations() -> None:
    with pytest.raises(ReservedTemporalTypeError, match="starts_at"):
        SchemaCompiler(omit_unsupported_types=True).compile(Appointment)


@pytest.mark.parametrize("max_depth", [1, 2, 3, 4])
def test_self_referencing_record_stays_within_depth(max_depth: int) -> None:
    tree = SchemaCompiler(max_depth=max_depth).compile(Category)
    document = json.loads(
        IndexGenerator().generate_index_json(
            tree, options=IndexGenerationOptions(strict_mapping=True)
        )
    )

    def leaf_depth(properties: dict) -> int:
        depths = [
            1 + leaf_depth(value["properties"]) if "properties" in value else 1
            for value in properties.values()
        ]
        return max(depths)

    assert document["mappings"]["dynamic"] == "strict"
    assert leaf_depth(document["mappings"]["properties"]) == max_depth
    assert document["mappings"]["properties"]["updated_at"] == {
        "type": "date",
        "format": "basic_date_time",
    }
