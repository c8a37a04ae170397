"""Error types recorded against metrics."""

from __future__ import annotations

from enum import Enum


class ErrorType(str, Enum):
    """Kinds of recording errors counted per metric."""

    INVALID_VALUE = "invalid_value"  # Value rejected (bad date, negative count, ...)
    INVALID_LABEL = "invalid_label"
    INVALID_STATE = "invalid_state"
    INVALID_OVERFLOW = "invalid_overflow"
