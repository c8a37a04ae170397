"""Counter metric."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from glean_metrics.schemas import CommonMetricData, CounterValue, ErrorType, Metric

from .base import MetricType

if TYPE_CHECKING:
    from glean_metrics.glean import Glean

logger = logging.getLogger(__name__)


class CounterMetric(MetricType):
    """A count that only goes up."""

    def __init__(self, meta: CommonMetricData):
        self.meta = meta

    @classmethod
    def new(cls, meta: CommonMetricData) -> "CounterMetric":
        return cls(meta)

    @classmethod
    def with_meta(cls, meta: CommonMetricData, **kwargs) -> "CounterMetric":
        return cls(meta)

    def add(self, glean: Glean, amount: int = 1) -> None:
        """Increase the counter by ``amount``.

        Non-positive amounts are rejected and counted as an invalid value.
        """
        if not self.should_record(glean):
            return

        if amount <= 0:
            # Imported here: error recording is itself built on counters.
            from glean_metrics.error_recording import record_error

            record_error(glean, self.meta, ErrorType.INVALID_VALUE, f"Added negative or zero value {amount}")
            return

        def increment(old: Optional[Metric]) -> Metric:
            if isinstance(old, CounterValue):
                return CounterValue(value=old.value + amount)
            return CounterValue(value=amount)

        glean.record_with(self.meta, increment)

    def test_get_value(self, glean: Glean, storage_name: str) -> Optional[int]:
        """**Test-only API.** Current count, or None if never recorded."""
        value = glean.storage().snapshot_metric(storage_name, self.meta.identifier())
        if isinstance(value, CounterValue):
            return value.value
        return None
