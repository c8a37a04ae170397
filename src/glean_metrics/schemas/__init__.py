"""Schema exports."""

from .base import SchemaBase
from .errors import ErrorType
from .metadata import CommonMetricData, Lifetime
from .metrics import BooleanValue, CounterValue, DatetimeValue, Metric, MetricKind, StringValue
from .time_unit import TimeUnit, get_iso_time_string, truncate

__all__ = [
    "SchemaBase",
    "ErrorType",
    "CommonMetricData",
    "Lifetime",
    "BooleanValue",
    "CounterValue",
    "DatetimeValue",
    "Metric",
    "MetricKind",
    "StringValue",
    "TimeUnit",
    "get_iso_time_string",
    "truncate",
]
