"""Configuration loading for glean-metrics.

Two optional YAML files live in a config directory:

* ``glean.yaml`` holds instance settings (application id, initial upload flag).
* ``metrics.yaml`` declares metrics by category.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import yaml
from pydantic import ValidationError

from glean_metrics.exceptions import ConfigLoadError, SchemaValidationError
from glean_metrics.metrics import CounterMetric, DatetimeMetric, MetricType
from glean_metrics.schemas import CommonMetricData, Lifetime, TimeUnit


@dataclass(frozen=True)
class GleanConfig:
    application_id: str = "unknown"
    upload_enabled: bool = True


def _load_yaml(config_dir: str, file_name: str) -> Optional[Dict[str, Any]]:
    path = os.path.join(config_dir, file_name)
    if not os.path.exists(path):
        return None

    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigLoadError(file_name, f"Invalid YAML: {e}")
    except OSError as e:
        raise ConfigLoadError(file_name, str(e))

    if data is not None and not isinstance(data, dict):
        raise ConfigLoadError(file_name, "Top level must be a mapping")
    return data or None


def load_glean_config(config_dir: str) -> GleanConfig:
    """Load glean.yaml (optional).

    Expected format:
    application_id: "org.example.app"
    upload_enabled: true

    Returns:
        GleanConfig, with defaults for anything the file leaves out
    """
    data = _load_yaml(config_dir, "glean.yaml")
    if not data:
        return GleanConfig()

    upload_enabled = data.get("upload_enabled", True)
    if not isinstance(upload_enabled, bool):
        raise ConfigLoadError("glean.yaml", "upload_enabled must be a boolean")

    return GleanConfig(
        application_id=str(data.get("application_id", "unknown")),
        upload_enabled=upload_enabled,
    )


def load_metrics_manifest(config_dir: str) -> Optional[Dict[str, Any]]:
    """Load metrics.yaml (optional).

    Returns:
        Dict with loaded metric definitions, or None if file doesn't exist
    """
    return _load_yaml(config_dir, "metrics.yaml")


def parse_metric_definitions(data: Optional[Dict[str, Any]]) -> Dict[str, MetricType]:
    """Build metric objects from loaded metrics YAML.

    Expected format:
    browser:
      first_run:
        type: "datetime"
        time_unit: "day"
        lifetime: "user"
        send_in_pings: ["metrics", "baseline"]
      page_loads:
        type: "counter"

    Returns:
        Metrics keyed by identifier (``category.name``)
    """
    if not data:
        return {}

    metrics: Dict[str, MetricType] = {}
    for category, definitions in data.items():
        if not isinstance(definitions, dict):
            raise SchemaValidationError("metrics.yaml", str(category), "Category must map metric names to definitions")

        for name, definition in definitions.items():
            path = f"{category}.{name}"
            if not isinstance(definition, dict):
                raise SchemaValidationError("metrics.yaml", path, "Metric definition must be a mapping")

            meta = _parse_meta(path, str(category), str(name), definition)
            metric_type = definition.get("type")
            if metric_type == "datetime":
                metrics[meta.identifier()] = DatetimeMetric.new(meta, _parse_time_unit(path, definition))
            elif metric_type == "counter":
                metrics[meta.identifier()] = CounterMetric.new(meta)
            else:
                raise SchemaValidationError("metrics.yaml", f"{path}.type", f"Unsupported metric type: {metric_type!r}")

    return metrics


def _parse_meta(path: str, category: str, name: str, definition: Dict[str, Any]) -> CommonMetricData:
    send_in_pings: List[str] = definition.get("send_in_pings", ["metrics"])
    try:
        return CommonMetricData(
            name=name,
            category=category,
            send_in_pings=send_in_pings,
            lifetime=Lifetime(definition.get("lifetime", "ping")),
            disabled=definition.get("disabled", False),
        )
    except (ValueError, ValidationError) as e:
        raise SchemaValidationError("metrics.yaml", path, str(e))


def _parse_time_unit(path: str, definition: Dict[str, Any]) -> TimeUnit:
    if "time_unit" not in definition:
        raise SchemaValidationError("metrics.yaml", f"{path}.time_unit", "datetime metrics must declare a time_unit")
    try:
        return TimeUnit(definition["time_unit"])
    except ValueError:
        raise SchemaValidationError("metrics.yaml", f"{path}.time_unit", f"Unknown time unit: {definition['time_unit']!r}")
