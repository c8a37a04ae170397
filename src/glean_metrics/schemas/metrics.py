"""Stored metric values.

Storage holds one tagged value per metric identifier. The ``kind`` tag tells
readers which variant they got; a reader expecting one kind treats every
other kind as "no value".
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import Field, field_validator, model_validator

from .base import SchemaBase
from .time_unit import TimeUnit, get_iso_time_string, truncate


class MetricKind(str, Enum):
    """Variants a stored value can take."""

    BOOLEAN = "boolean"
    COUNTER = "counter"
    STRING = "string"
    DATETIME = "datetime"


class BooleanValue(SchemaBase):
    kind: Literal[MetricKind.BOOLEAN] = MetricKind.BOOLEAN
    value: bool

    def as_json(self) -> Any:
        return self.value


class CounterValue(SchemaBase):
    kind: Literal[MetricKind.COUNTER] = MetricKind.COUNTER
    value: int

    def as_json(self) -> Any:
        return self.value


class StringValue(SchemaBase):
    kind: Literal[MetricKind.STRING] = MetricKind.STRING
    value: str

    def as_json(self) -> Any:
        return self.value


class DatetimeValue(SchemaBase):
    """A timezone-aware timestamp plus the precision it was recorded with."""

    kind: Literal[MetricKind.DATETIME] = MetricKind.DATETIME
    value: datetime
    time_unit: TimeUnit
    # Full sub-second fraction; ``value`` only holds its microseconds.
    nanosecond: int = Field(ge=0, le=999_999_999)

    @model_validator(mode="before")
    @classmethod
    def _default_nanosecond(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("nanosecond") is None and isinstance(data.get("value"), datetime):
            data = {**data, "nanosecond": data["value"].microsecond * 1000}
        return data

    @field_validator("value")
    @classmethod
    def _require_offset(cls, value: datetime) -> datetime:
        if value.utcoffset() is None:
            raise ValueError("datetime value must carry a UTC offset")
        return value

    @model_validator(mode="after")
    def _nanosecond_matches_value(self) -> "DatetimeValue":
        if self.nanosecond // 1000 != self.value.microsecond:
            raise ValueError("nanosecond does not match the microseconds of value")
        return self

    def truncated(self) -> datetime:
        """Return the timestamp with fields finer than ``time_unit`` zeroed."""
        return truncate(self.value, self.time_unit)

    def as_json(self) -> Any:
        return get_iso_time_string(self.value, self.time_unit, self.nanosecond)


Metric = Annotated[
    Union[BooleanValue, CounterValue, StringValue, DatetimeValue],
    Field(discriminator="kind"),
]
