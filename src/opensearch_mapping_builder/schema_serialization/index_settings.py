"""Index-level settings passed through to the index creation document."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any

_WIRE_NAME = "wire_name"


def _setting(wire_name: str | None = None) -> Any:
    metadata = {_WIRE_NAME: wire_name} if wire_name else {}
    return field(default=None, metadata=metadata)


@dataclass(frozen=True)
class IndexSettings:  # pylint: disable=too-many-instance-attributes
    """OpenSearch index settings; every setting is optional and sent verbatim when set."""

    # Static settings
    number_of_shards: int | None = _setting()
    number_of_routing_shards: int | None = _setting()
    shard_check_on_startup: str | None = _setting("shard.check_on_startup")
    codec: str | None = _setting()
    routing_partition_size: int | None = _setting()
    soft_deletes_retention_lease_period: str | None = _setting(
        "soft_deletes.retention_lease.period"
    )
    load_fixed_bitset_filters_eagerly: bool | None = _setting()
    hidden: bool | None = _setting()

    # Dynamic settings
    number_of_replicas: int | None = _setting()
    auto_expand_replicas: str | None = _setting()
    search_idle_after: str | None = _setting("search.idle.after")
    refresh_interval: str | None = _setting()
    max_result_window: int | None = _setting()
    max_inner_result_window: int | None = _setting()
    max_rescore_window: int | None = _setting()
    max_docvalue_fields_search: int | None = _setting()
    max_script_fields: int | None = _setting()
    max_ngram_diff: int | None = _setting()
    max_shingle_diff: int | None = _setting()
    max_refresh_listeners: int | None = _setting()
    analyze_max_token_count: int | None = _setting("analyze.max_token_count")
    highlight_max_analyzed_offset: int | None = _setting("highlight.max_analyzed_offset")
    max_terms_count: int | None = _setting()
    max_regex_length: int | None = _setting()
    query_default_field: tuple[str, ...] | None = _setting("query.default_field")
    routing_allocation_enable: str | None = _setting("routing.allocation.enable")
    routing_rebalance_enable: str | None = _setting("routing.rebalance.enable")
    gc_deletes: str | None = _setting()
    default_pipeline: str | None = _setting()
    final_pipeline: str | None = _setting()

    def to_wire(self) -> dict[str, Any]:
        """Return the settings that are set, keyed by their OpenSearch names."""
        wire: dict[str, Any] = {}
        for setting in fields(self):
            value = getattr(self, setting.name)
            if value is None:
                continue
            if isinstance(value, tuple):
                value = list(value)
            wire[setting.metadata.get(_WIRE_NAME, setting.name)] = value
        return wire

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> IndexSettings:
        """Build settings from a mapping keyed by attribute names or OpenSearch names.

        Raises:
          ValueError: If a key does not name a known setting.
        """
        names_by_key: dict[str, str] = {}
        for setting in fields(cls):
            names_by_key[setting.name] = setting.name
            names_by_key[setting.metadata.get(_WIRE_NAME, setting.name)] = setting.name

        kwargs: dict[str, Any] = {}
        for key, value in values.items():
            attribute = names_by_key.get(key)
            if attribute is None:
                raise ValueError(f"Unknown index setting: {key}")
            if isinstance(value, list):
                value = tuple(value)
            kwargs[attribute] = value
        return cls(**kwargs)
