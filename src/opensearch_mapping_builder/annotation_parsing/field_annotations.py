"""Parser for the per-field annotation mini-language.

An annotation is a comma-separated list of ``name:value`` options, e.g.
``"type:text, analyzer:standard, copy_to:all_text,foo_text"``. A segment
without a colon continues the value of the preceding option, which lets a
single option carry a comma-separated list.
"""

from __future__ import annotations

OPTION_TYPE = "type"
OPTION_FORMAT = "format"
OPTION_INDEX_PREFIXES = "index_prefixes"
OPTION_ANALYZER = "analyzer"
OPTION_SEARCH_ANALYZER = "search_analyzer"
OPTION_COPY_TO = "copy_to"

_OPTION_SEPARATOR = ","
_NAME_VALUE_SEPARATOR = ":"
_PAIR_SEPARATOR = ";"
_KEY_VALUE_SEPARATOR = "="


def get_option_value(annotation: str, option_name: str) -> str:
    """Return the trimmed value of ``option_name`` in ``annotation``, or ``""`` if absent."""
    if not annotation:
        return ""

    segments = annotation.split(_OPTION_SEPARATOR)
    current_name = ""
    current_value = ""
    last_index = len(segments) - 1
    for index, raw_segment in enumerate(segments):
        segment = raw_segment.strip()
        name, separator, value = segment.partition(_NAME_VALUE_SEPARATOR)
        if separator:
            if current_name and current_name == option_name:
                return current_value.strip()
            current_name = name.strip()
            current_value = value.strip()
        elif current_name:
            if current_value:
                current_value += _OPTION_SEPARATOR
            current_value += segment

        if index == last_index and current_name == option_name:
            return current_value.strip()
    return ""


def parse_map_option(value: str) -> dict[str, str]:
    """Parse ``"min_chars=2;max_chars=10"`` into ``{"min_chars": "2", "max_chars": "10"}``.

    Pairs without ``=`` are dropped; values keep any further ``=`` characters.
    """
    parsed: dict[str, str] = {}
    for pair in value.split(_PAIR_SEPARATOR):
        key, separator, pair_value = pair.partition(_KEY_VALUE_SEPARATOR)
        if separator:
            parsed[key] = pair_value
    return parsed


def parse_list_option(value: str, delimiter: str = _OPTION_SEPARATOR) -> tuple[str, ...] | None:
    """Split ``value`` on ``delimiter`` into trimmed, non-empty items (``None`` if none remain)."""
    if not value.strip():
        return None
    items = tuple(item.strip() for item in value.split(delimiter) if item.strip())
    return items or None
