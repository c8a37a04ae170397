"""Recording of errors against metrics.

A rejected value never raises to the caller. It is logged and counted in
``glean.error.<error type>`` labelled with the offending metric's
identifier, so the problem shows up in the data itself.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from glean_metrics.metrics.counter import CounterMetric
from glean_metrics.schemas import CommonMetricData, ErrorType, Lifetime

if TYPE_CHECKING:
    from glean_metrics.glean import Glean

logger = logging.getLogger(__name__)

ERROR_CATEGORY = "glean.error"


def _error_meta(meta: CommonMetricData, error_type: ErrorType) -> CommonMetricData:
    # Errors go to the metric's own pings and always to "metrics".
    pings = list(meta.send_in_pings)
    if "metrics" not in pings:
        pings.append("metrics")
    return CommonMetricData(
        name=f"{error_type.value}/{meta.identifier()}",
        category=ERROR_CATEGORY,
        send_in_pings=pings,
        lifetime=Lifetime.PING,
    )


def record_error(
    glean: Glean,
    meta: CommonMetricData,
    error_type: ErrorType,
    message: str,
    num_errors: int = 1,
) -> None:
    """Log ``message`` and count ``num_errors`` errors for the metric.

    Args:
        glean: Instance to record into
        meta: Metadata of the metric the error is about
        error_type: Kind of error
        message: Human-readable description for the log
        num_errors: How many errors to count
    """
    logger.warning("%s: %s", meta.identifier(), message)
    CounterMetric(_error_meta(meta, error_type)).add(glean, num_errors)


def get_num_recorded_errors(
    glean: Glean,
    meta: CommonMetricData,
    error_type: ErrorType,
    storage_name: Optional[str] = None,
) -> int:
    """Number of errors of ``error_type`` counted for the metric.

    Reads the metric's first ping unless ``storage_name`` is given, and
    "metrics" for a metric sent in no ping.
    """
    ping = storage_name or (meta.send_in_pings[0] if meta.send_in_pings else "metrics")
    return CounterMetric(_error_meta(meta, error_type)).test_get_value(glean, ping) or 0
