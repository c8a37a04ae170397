"""Metric types."""

from .base import MetricType
from .counter import CounterMetric
from .datetime_metric import DatetimeMetric

__all__ = ["MetricType", "CounterMetric", "DatetimeMetric"]
