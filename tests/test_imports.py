"""Ensure public API surface is the Glean instance, metric types and schemas."""


def test_glean_importable():
    from glean_metrics import Glean

    assert Glean is not None


def test_public_exports():
    import glean_metrics

    required = [
        "Glean",
        "GleanConfig",
        "DatetimeMetric",
        "CounterMetric",
        "CommonMetricData",
        "Lifetime",
        "TimeUnit",
        "ErrorType",
        "__version__",
    ]
    for name in required:
        assert hasattr(glean_metrics, name), f"Missing public export: {name}"


def test_storage_internals_not_exported():
    import glean_metrics

    for name in ["StorageManager", "record_error"]:
        assert not hasattr(glean_metrics, name), f"Internal leaked: {name}"
