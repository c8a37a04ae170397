"""Time unit precision and ISO-8601 rendering of datetime values."""

from __future__ import annotations

from datetime import datetime, timedelta
from enum import Enum
from typing import Optional


class TimeUnit(str, Enum):
    """Precision at which a time value is kept and displayed."""

    NANOSECOND = "nanosecond"
    MICROSECOND = "microsecond"
    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"


def truncate(value: datetime, time_unit: TimeUnit) -> datetime:
    """Zero every field of ``value`` finer than ``time_unit``.

    The timezone is left untouched. ``datetime`` stops at microseconds, so
    nanosecond precision returns the value as is.
    """
    if time_unit in (TimeUnit.NANOSECOND, TimeUnit.MICROSECOND):
        return value
    if time_unit == TimeUnit.MILLISECOND:
        return value.replace(microsecond=value.microsecond - value.microsecond % 1000)
    if time_unit == TimeUnit.SECOND:
        return value.replace(microsecond=0)
    if time_unit == TimeUnit.MINUTE:
        return value.replace(second=0, microsecond=0)
    if time_unit == TimeUnit.HOUR:
        return value.replace(minute=0, second=0, microsecond=0)
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def _format_offset(offset: timedelta) -> str:
    # Seconds of a sub-minute offset are dropped, as in ``%:z``.
    seconds = int(offset.total_seconds())
    sign = "-" if seconds < 0 else "+"
    hours, minutes = divmod(abs(seconds) // 60, 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


def _auto_fraction(nanosecond: int) -> str:
    """Fraction with as few of 3, 6 or 9 digits as needed, nothing when zero."""
    if nanosecond == 0:
        return ""
    if nanosecond % 1_000_000 == 0:
        return f".{nanosecond // 1_000_000:03d}"
    if nanosecond % 1000 == 0:
        return f".{nanosecond // 1000:06d}"
    return f".{nanosecond:09d}"


def get_iso_time_string(value: datetime, time_unit: TimeUnit, nanosecond: Optional[int] = None) -> str:
    """Render a timezone-aware datetime as ISO-8601 at the given precision.

    Fields finer than ``time_unit`` are left out of the string, the UTC
    offset is always kept. ``nanosecond`` is the full sub-second fraction
    when it is finer than ``value.microsecond`` can hold:

    >>> from datetime import timezone, timedelta
    >>> dt = datetime(2021, 11, 3, 14, 30, 5, tzinfo=timezone(timedelta(hours=1)))
    >>> get_iso_time_string(dt, TimeUnit.HOUR)
    '2021-11-03T14+01:00'
    """
    offset = value.utcoffset()
    if offset is None:
        raise ValueError("datetime value must be timezone-aware")
    if nanosecond is None:
        nanosecond = value.microsecond * 1000

    date_part = f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
    if time_unit == TimeUnit.DAY:
        body = date_part
    elif time_unit == TimeUnit.HOUR:
        body = f"{date_part}T{value.hour:02d}"
    elif time_unit == TimeUnit.MINUTE:
        body = f"{date_part}T{value.hour:02d}:{value.minute:02d}"
    else:
        body = f"{date_part}T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
        if time_unit == TimeUnit.MILLISECOND:
            body += f".{nanosecond // 1_000_000:03d}"
        elif time_unit == TimeUnit.MICROSECOND:
            body += f".{nanosecond // 1000:06d}"
        elif time_unit == TimeUnit.NANOSECOND:
            body += _auto_fraction(nanosecond)

    return body + _format_offset(offset)
