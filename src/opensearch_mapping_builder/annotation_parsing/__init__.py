"""Field annotation parsing exports."""

from .field_annotations import (
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

__all__ = [
    "OPTION_ANALYZER",
    "OPTION_COPY_TO",
    "OPTION_FORMAT",
    "OPTION_INDEX_PREFIXES",
    "OPTION_SEARCH_ANALYZER",
    "OPTION_TYPE",
    "get_option_value",
    "parse_list_option",
    "parse_map_option",
]
