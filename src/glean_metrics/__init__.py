"""glean-metrics package root.

The public API is the Glean instance, the metric types and the schema types
exposed in ``glean_metrics.schemas``.
"""

__version__ = "0.1.0"

from glean_metrics.glean import Glean  # noqa: F401
from glean_metrics.config_loader import GleanConfig  # noqa: F401
from glean_metrics.metrics import CounterMetric, DatetimeMetric, MetricType  # noqa: F401
from glean_metrics.schemas import *  # noqa: F401,F403
from glean_metrics.schemas import __all__ as SCHEMA_EXPORTS

__all__ = ["__version__", "Glean", "GleanConfig", "CounterMetric", "DatetimeMetric", "MetricType"] + SCHEMA_EXPORTS
