"""Datetime metric: a timestamp with UTC offset, kept at a fixed precision."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Optional

from glean_metrics.error_recording import record_error
from glean_metrics.schemas import CommonMetricData, DatetimeValue, ErrorType, TimeUnit

from .base import MetricType

if TYPE_CHECKING:
    from glean_metrics.glean import Glean

logger = logging.getLogger(__name__)

MAX_NANOS = 999_999_999


class DatetimeMetric(MetricType):
    """Records a single date/time with its timezone offset.

    The value is stored together with ``time_unit`` and displayed truncated
    to that precision. Setting never raises: rejected input is logged and
    counted as an ``invalid_value`` error for this metric.
    """

    def __init__(self, meta: CommonMetricData, time_unit: TimeUnit):
        self.meta = meta
        self.time_unit = TimeUnit(time_unit)

    @classmethod
    def new(cls, meta: CommonMetricData, time_unit: TimeUnit) -> "DatetimeMetric":
        return cls(meta, time_unit)

    @classmethod
    def with_meta(cls, meta: CommonMetricData, *, time_unit: TimeUnit) -> "DatetimeMetric":
        """Create from metadata. The precision has no default and must be given."""
        return cls(meta, time_unit)

    def set_with_details(
        self,
        glean: Glean,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        nano: int,
        offset_seconds: int,
    ) -> None:
        """Set the metric from individual date/time components.

        Args:
            glean: The Glean instance this metric belongs to
            year: Year to set the metric to
            month: Month (1-12)
            day: Day of the month (1-based)
            hour: Hour (0-23)
            minute: Minute (0-59)
            second: Second (0-59)
            nano: Nanosecond fraction of the last whole second
            offset_seconds: Offset from UTC in seconds, east positive

        Components that do not form exactly one valid date/time record an
        error instead of a value.
        """
        try:
            if not 0 <= nano <= MAX_NANOS:
                raise ValueError(f"nanosecond must be in 0..{MAX_NANOS}")
            tz = timezone(timedelta(seconds=offset_seconds))
            value = datetime(year, month, day, hour, minute, second, nano // 1000, tzinfo=tz)
        except (ValueError, OverflowError, TypeError) as exc:
            record_error(
                glean,
                self.meta,
                ErrorType.INVALID_VALUE,
                f"DatetimeMetric.set: invalid input data ({exc}). Not recording.",
            )
            return

        self._set(glean, value, nano)

    def set(self, glean: Glean, value: datetime) -> None:
        """Set the metric to a date/time which includes the timezone offset.

        Args:
            glean: The Glean instance this metric belongs to
            value: Timezone-aware date/time to record
        """
        self._set(glean, value, None)

    def _set(self, glean: Glean, value: datetime, nanosecond: Optional[int]) -> None:
        if not self.should_record(glean):
            logger.debug("Not recording %s: recording is disabled.", self.meta.identifier())
            return

        if not isinstance(value, datetime) or value.utcoffset() is None:
            record_error(
                glean,
                self.meta,
                ErrorType.INVALID_VALUE,
                "DatetimeMetric.set: value has no timezone offset. Not recording.",
            )
            return

        glean.record(self.meta, DatetimeValue(value=value, time_unit=self.time_unit, nanosecond=nanosecond))

    def _stored(self, glean: Glean, storage_name: str) -> Optional[DatetimeValue]:
        value = glean.storage().snapshot_metric(storage_name, self.meta.identifier())
        if isinstance(value, DatetimeValue):
            return value
        return None

    def test_get_value(self, glean: Glean, storage_name: str) -> Optional[datetime]:
        """**Test-only API.**

        Get the currently stored value as a datetime, truncated to the
        ``time_unit`` precision it was recorded with. The offset is kept.

        This doesn't clear the stored value.
        """
        stored = self._stored(glean, storage_name)
        if stored is None:
            return None
        return stored.truncated()

    def test_get_value_as_string(self, glean: Glean, storage_name: str) -> Optional[str]:
        """**Test-only API.**

        Get the currently stored value as an ISO-8601 string, truncated to
        the ``time_unit`` precision.

        This doesn't clear the stored value.
        """
        stored = self._stored(glean, storage_name)
        if stored is None:
            return None
        return stored.as_json()
