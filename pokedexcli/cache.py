"""A thread-safe byte cache whose entries expire after a fixed interval."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from datetime import timedelta


@dataclass(frozen=True)
class _Entry:
    created_at: float
    value: bytes


class Cache:
    """Store bytes by key and drop entries older than ``interval``.

    A background thread wakes once per interval and removes every entry
    whose age exceeds the interval. ``interval`` is in seconds or a
    :class:`datetime.timedelta`.
    """

    def __init__(self, interval: float | timedelta) -> None:
        seconds = interval.total_seconds() if isinstance(interval, timedelta) else float(interval)
        if seconds <= 0:
            raise ValueError("cache interval must be positive")
        self.interval = seconds
        self._lock = threading.Lock()
        self._store: dict[str, _Entry] = {}
        self._stopped = threading.Event()
        self._reaper = threading.Thread(target=self._reap_loop, name="cache-reaper", daemon=True)
        self._reaper.start()

    def add(self, key: str, value: bytes) -> None:
        """Add or replace the entry for ``key``."""
        with self._lock:
            self._store[key] = _Entry(time.monotonic(), bytes(value))

    def get(self, key: str) -> bytes | None:
        """Return the value stored for ``key``, or None if there is none."""
        with self._lock:
            entry = self._store.get(key)
        return None if entry is None else entry.value

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._store

    def close(self) -> None:
        """Stop the background reaper."""
        self._stopped.set()
        if self._reaper is not threading.current_thread():
            self._reaper.join()

    def __enter__(self) -> Cache:
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _reap(self) -> None:
        now = time.monotonic()
        with self._lock:
            expired = [key for key, entry in self._store.items() if now - entry.created_at > self.interval]
            for key in expired:
                del self._store[key]

    def _reap_loop(self) -> None:
        while not self._stopped.wait(self.interval):
            self._reap()