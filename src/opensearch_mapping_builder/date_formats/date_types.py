"""Date wrappers that marshal into OpenSearch built-in date formats.

Plain ``datetime`` fields have no canonical wire format, so records wrap their
timestamps in one of these types (or in a custom type implementing
:class:`OpenSearchDateType`) to pin the format used in both the mapping and the
indexed documents.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta, timezone
from typing import Any, Protocol, Self, runtime_checkable

_DATE_TIME_PATTERN = re.compile(
    r"^(?P<stamp>\d{8}T\d{6})(?:\.(?P<fraction>\d{1,3}))?(?P<offset>[+-]\d{2}:\d{2})$"
)
_DATE_TIME_NO_MILLIS_PATTERN = re.compile(r"^(?P<stamp>\d{8}T\d{6})(?P<offset>[+-]\d{2}:\d{2})$")
_DATE_PATTERN = re.compile(r"^\d{8}$")


class DateParseError(ValueError):
    """Raised when text does not match a date wrapper's fixed format."""


@runtime_checkable
class OpenSearchDateType(Protocol):
    """Capability of types that map to an OpenSearch ``date`` field.

    ``opensearch_field_type`` reports the date format (e.g. ``basic_date``) and
    must be callable on the class itself.
    """

    @classmethod
    def opensearch_field_type(cls) -> str: ...

    def marshal_text(self) -> str: ...


def is_date_capable(candidate: Any) -> bool:
    """Return True if ``candidate`` is a class implementing :class:`OpenSearchDateType`."""
    return isinstance(candidate, type) and issubclass(candidate, OpenSearchDateType)


@dataclass(frozen=True)
class TimeBasicDateTime:
    """Marshals into the ``basic_date_time`` format, e.g. ``20190323T213446.567+00:00``."""

    value: datetime

    @classmethod
    def opensearch_field_type(cls) -> str:
        return "basic_date_time"

    def marshal_text(self) -> str:
        moment = _aware(self.value)
        fraction = f"{moment.microsecond // 1000:03d}".rstrip("0")
        millis = f".{fraction}" if fraction else ""
        return f"{moment:%Y%m%dT%H%M%S}{millis}{_format_offset(moment)}"

    @classmethod
    def unmarshal_text(cls, text: str) -> Self:
        match = _DATE_TIME_PATTERN.fullmatch(text.strip())
        if match is None:
            raise DateParseError(f"Invalid basic_date_time value: {text!r}")
        moment = _parse_stamp(match["stamp"], match["offset"], text)
        fraction = match["fraction"]
        if fraction:
            moment = moment.replace(microsecond=int(fraction.ljust(3, "0")) * 1000)
        return cls(moment)


@dataclass(frozen=True)
class TimeBasicDateTimeNoMillis:
    """Marshals into the ``basic_date_time_no_millis`` format, e.g. ``20190323T213446+00:00``."""

    value: datetime

    @classmethod
    def opensearch_field_type(cls) -> str:
        return "basic_date_time_no_millis"

    def marshal_text(self) -> str:
        moment = _aware(self.value)
        return f"{moment:%Y%m%dT%H%M%S}{_format_offset(moment)}"

    @classmethod
    def unmarshal_text(cls, text: str) -> Self:
        match = _DATE_TIME_NO_MILLIS_PATTERN.fullmatch(text.strip())
        if match is None:
            raise DateParseError(f"Invalid basic_date_time_no_millis value: {text!r}")
        return cls(_parse_stamp(match["stamp"], match["offset"], text))


@dataclass(frozen=True)
class TimeBasicDate:
    """Marshals into the ``basic_date`` format, e.g. ``20190323``."""

    value: datetime

    @classmethod
    def opensearch_field_type(cls) -> str:
        return "basic_date"

    def marshal_text(self) -> str:
        return f"{_aware(self.value):%Y%m%d}"

    @classmethod
    def unmarshal_text(cls, text: str) -> Self:
        stripped = text.strip()
        if not _DATE_PATTERN.fullmatch(stripped):
            raise DateParseError(f"Invalid basic_date value: {text!r}")
        try:
            moment = datetime.strptime(stripped, "%Y%m%d").replace(tzinfo=UTC)
        except ValueError as exc:
            raise DateParseError(f"Invalid basic_date value: {text!r}") from exc
        return cls(moment)


def _aware(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment


def _format_offset(moment: datetime) -> str:
    offset = moment.utcoffset() or timedelta(0)
    sign = "-" if offset < timedelta(0) else "+"
    total_minutes = abs(int(offset.total_seconds())) // 60
    hours, minutes = divmod(total_minutes, 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


def _parse_stamp(stamp: str, offset: str, text: str) -> datetime:
    try:
        moment = datetime.strptime(stamp, "%Y%m%dT%H%M%S")
    except ValueError as exc:
        raise DateParseError(f"Invalid date value: {text!r}") from exc
    sign = -1 if offset.startswith("-") else 1
    hours, minutes = (int(part) for part in offset[1:].split(":"))
    return moment.replace(tzinfo=timezone(sign * timedelta(hours=hours, minutes=minutes)))
