"""Common schema utilities and base classes."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SchemaBase(BaseModel):
    """Base model with common config for glean-metrics schemas.

    Schemas are immutable once built: metric metadata lives for the whole
    process and stored values are replaced, never mutated.
    """

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True, frozen=True)
