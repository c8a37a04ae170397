"""Metric metadata shared by every metric type."""

from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import Field, field_validator

from .base import SchemaBase


class Lifetime(str, Enum):
    """How long a recorded value survives in storage."""

    PING = "ping"  # Cleared when the ping it belongs to is collected
    APPLICATION = "application"  # Cleared on application restart
    USER = "user"  # Kept until the user profile is reset


class CommonMetricData(SchemaBase):
    """Identity and recording rules of a metric.

    Owned by whoever defines the metric. The identifier is used as the
    storage key; ``send_in_pings`` lists the storage partitions a value is
    written into.
    """

    name: str
    category: str = Field(default="")
    send_in_pings: List[str] = Field(default_factory=lambda: ["metrics"])
    lifetime: Lifetime = Field(default=Lifetime.PING)
    disabled: bool = Field(default=False)

    @field_validator("name")
    @classmethod
    def _name_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("metric name must not be empty")
        return value

    def identifier(self) -> str:
        """Return ``category.name``, or just ``name`` for uncategorized metrics."""
        if self.category:
            return f"{self.category}.{self.name}"
        return self.name
