"""Behavior shared by every metric type."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from glean_metrics.schemas import CommonMetricData

if TYPE_CHECKING:
    from glean_metrics.glean import Glean


class MetricType(ABC):
    """A metric definition: its metadata plus type-specific settings.

    Metric objects hold no recorded value; values live in the storage of the
    Glean instance passed to each call.
    """

    meta: CommonMetricData

    @classmethod
    @abstractmethod
    def with_meta(cls, meta: CommonMetricData, **kwargs) -> "MetricType":
        """Create the metric from its metadata."""

    def should_record(self, glean: Glean) -> bool:
        return glean.should_record(self.meta)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.meta.identifier()!r})"
