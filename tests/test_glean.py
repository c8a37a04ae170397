"""Glean instance tests."""

import tempfile
from datetime import datetime, timezone
from pathlib import Path

from glean_metrics import CommonMetricData, DatetimeMetric, Glean, GleanConfig, TimeUnit
from glean_metrics.storage import StorageManager


def make_metric(disabled=False):
    meta = CommonMetricData(category="app", name="started", send_in_pings=["metrics"], disabled=disabled)
    return DatetimeMetric.new(meta, TimeUnit.SECOND)


class TestUploadFlag:
    """Upload-enabled flag handling."""

    def test_default_enabled(self):
        """Test upload is enabled by default."""
        assert Glean().is_upload_enabled() is True

    def test_config_sets_initial_flag(self):
        """Test the config sets the initial upload flag."""
        assert Glean(GleanConfig(upload_enabled=False)).is_upload_enabled() is False

    def test_should_record(self):
        """Test should_record follows upload flag and metric disabled."""
        glean = Glean()
        assert glean.should_record(make_metric().meta) is True
        assert glean.should_record(make_metric(disabled=True).meta) is False
        glean.set_upload_enabled(False)
        assert glean.should_record(make_metric().meta) is False

    def test_toggle_is_seen_by_metrics(self):
        """Test metrics see the flag as it is toggled."""
        glean = Glean()
        metric = make_metric()
        glean.set_upload_enabled(False)
        metric.set(glean, datetime(2021, 1, 1, tzinfo=timezone.utc))
        glean.set_upload_enabled(True)
        assert metric.test_get_value_as_string(glean, "metrics") is None
        metric.set(glean, datetime(2021, 1, 1, tzinfo=timezone.utc))
        assert metric.test_get_value_as_string(glean, "metrics") == "2021-01-01T00:00:00+00:00"

    def test_disabling_clears_stored_values(self):
        """Test disabling upload clears stored values."""
        glean = Glean()
        metric = make_metric()
        metric.set(glean, datetime(2021, 1, 1, tzinfo=timezone.utc))
        glean.set_upload_enabled(False)
        assert glean.snapshot("metrics") is None


class TestInstance:
    """Instance construction and snapshots."""

    def test_uses_given_storage(self):
        """Test the instance keeps the storage it is given."""
        storage = StorageManager()
        glean = Glean(storage=storage)
        assert glean.storage() is storage

    def test_snapshot_clears_ping(self):
        """Test snapshot with clear_store empties the ping."""
        glean = Glean()
        make_metric().set(glean, datetime(2021, 1, 1, tzinfo=timezone.utc))
        assert glean.snapshot("metrics", clear_store=True) == {
            "datetime": {"app.started": "2021-01-01T00:00:00+00:00"}
        }
        assert glean.snapshot("metrics") is None

    def test_from_config_dir(self):
        """Test creating an instance from a config directory."""
        with tempfile.TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / "glean.yaml").write_text('application_id: "org.example"\nupload_enabled: false\n')
            glean = Glean.from_config_dir(tmpdir)
            assert glean.application_id == "org.example"
            assert glean.is_upload_enabled() is False
