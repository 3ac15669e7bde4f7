"""Date wrapper types with fixed OpenSearch wire formats."""

from .date_types import (
    DateParseError,
    OpenSearchDateType,
    TimeBasicDate,
    TimeBasicDateTime,
    TimeBasicDateTimeNoMillis,
    is_date_capable,
)

__all__ = [
    "DateParseError",
    "OpenSearchDateType",
    "TimeBasicDate",
    "TimeBasicDateTime",
    "TimeBasicDateTimeNoMillis",
    "is_date_capable",
]
