"""The Glean instance: global recording state shared by all metrics."""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, Optional

from glean_metrics.config_loader import GleanConfig, load_glean_config
from glean_metrics.schemas import CommonMetricData, Metric
from glean_metrics.storage import StorageManager

logger = logging.getLogger(__name__)


class Glean:
    """Holds the upload-enabled flag and the storage every metric writes to."""

    def __init__(self, config: Optional[GleanConfig] = None, storage: Optional[StorageManager] = None):
        """Initialize a Glean instance.

        Args:
            config: Instance settings (defaults if None)
            storage: Storage to record into (a fresh in-memory one if None)
        """
        self.config = config or GleanConfig()
        self._storage = storage or StorageManager()
        self._upload_enabled = self.config.upload_enabled
        self._flag_lock = threading.RLock()

    @classmethod
    def from_config_dir(cls, config_dir: str) -> "Glean":
        """Create an instance from the glean.yaml found in ``config_dir``."""
        return cls(load_glean_config(config_dir))

    @property
    def application_id(self) -> str:
        return self.config.application_id

    def storage(self) -> StorageManager:
        return self._storage

    def is_upload_enabled(self) -> bool:
        with self._flag_lock:
            return self._upload_enabled

    def set_upload_enabled(self, flag: bool) -> None:
        """Toggle collection at runtime.

        Turning upload off drops every stored value so nothing collected
        before the user opted out can be sent later.
        """
        with self._flag_lock:
            if self._upload_enabled == flag:
                return
            self._upload_enabled = flag

            if not flag:
                logger.info("Upload disabled for %s; clearing stored metrics.", self.application_id)
                self._storage.clear_all()

    def should_record(self, meta: CommonMetricData) -> bool:
        """Whether a write for the metric described by ``meta`` is persisted."""
        return self.is_upload_enabled() and not meta.disabled

    def record(self, meta: CommonMetricData, value: Metric) -> None:
        """Store ``value`` if ``meta`` may record, atomically with the upload flag.

        A write racing with ``set_upload_enabled(False)`` either lands before
        the clear or is skipped.
        """
        with self._flag_lock:
            if self.should_record(meta):
                self._storage.record(meta, value)

    def record_with(self, meta: CommonMetricData, transform: Callable[[Optional[Metric]], Metric]) -> None:
        """Like ``record``, for a read-modify-write of the stored value."""
        with self._flag_lock:
            if self.should_record(meta):
                self._storage.record_with(meta, transform)

    def snapshot(self, ping_name: str, clear_store: bool = False) -> Optional[Dict[str, Dict[str, Any]]]:
        """Collect every value stored for ``ping_name``."""
        return self._storage.snapshot(ping_name, clear_store=clear_store)
