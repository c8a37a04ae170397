"""In-memory metric storage, partitioned by lifetime and ping."""

from __future__ import annotations

import threading
from typing import Any, Callable, Dict, Optional

from glean_metrics.schemas import CommonMetricData, Lifetime, Metric


class StorageManager:
    """Current value of every metric, per storage partition.

    Values are addressed by ``(lifetime, storage_name, identifier)``. A
    storage name is the name of a ping the value is sent in. Writes replace
    the previous value (last write wins) and all access goes through one lock,
    so concurrent writers to the same identifier are serialized.
    """

    # Search order used when reading a single metric back
    LIFETIME_ORDER = (Lifetime.PING, Lifetime.APPLICATION, Lifetime.USER)

    def __init__(self):
        self._data: Dict[Lifetime, Dict[str, Dict[str, Metric]]] = {
            lifetime: {} for lifetime in Lifetime
        }
        self._lock = threading.Lock()

    def record(self, meta: CommonMetricData, value: Metric) -> None:
        """Store ``value`` for the metric in every ping it is sent in.

        Args:
            meta: Metadata of the metric being recorded
            value: Tagged value to store
        """
        identifier = meta.identifier()
        with self._lock:
            partitions = self._data[meta.lifetime]
            for ping in meta.send_in_pings:
                partitions.setdefault(ping, {})[identifier] = value

    def record_with(
        self,
        meta: CommonMetricData,
        transform: Callable[[Optional[Metric]], Metric],
    ) -> None:
        """Atomically replace the stored value with ``transform(old_value)``.

        ``transform`` receives ``None`` when the metric has no value yet in a
        given ping.
        """
        identifier = meta.identifier()
        with self._lock:
            partitions = self._data[meta.lifetime]
            for ping in meta.send_in_pings:
                store = partitions.setdefault(ping, {})
                store[identifier] = transform(store.get(identifier))

    def snapshot_metric(self, storage_name: str, identifier: str) -> Optional[Metric]:
        """Return the stored value of one metric, or None if it has none.

        Does not clear anything.
        """
        with self._lock:
            for lifetime in self.LIFETIME_ORDER:
                value = self._data[lifetime].get(storage_name, {}).get(identifier)
                if value is not None:
                    return value
        return None

    def snapshot(self, storage_name: str, clear_store: bool = False) -> Optional[Dict[str, Dict[str, Any]]]:
        """Return every value stored for a ping, grouped by metric kind.

        Args:
            storage_name: Ping whose values to collect
            clear_store: If True, drop the ping-lifetime values after reading

        Returns:
            ``{kind: {identifier: json_value}}``, or None if nothing is stored
        """
        result: Dict[str, Dict[str, Any]] = {}
        with self._lock:
            for lifetime in self.LIFETIME_ORDER:
                for identifier, value in self._data[lifetime].get(storage_name, {}).items():
                    result.setdefault(value.kind.value, {})[identifier] = value.as_json()
            if clear_store:
                self._data[Lifetime.PING].pop(storage_name, None)

        return result or None

    def clear_lifetime(self, lifetime: Lifetime) -> None:
        """Drop every value with the given lifetime."""
        with self._lock:
            self._data[lifetime] = {}

    def clear_all(self) -> None:
        """Drop every stored value."""
        with self._lock:
            for lifetime in Lifetime:
                self._data[lifetime] = {}
