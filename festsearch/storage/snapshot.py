"""Process-wide event snapshot cache.

Lifecycle: empty until the first ``get()``, which loads a snapshot; the
snapshot is served until ``ttl`` seconds have passed, after which the next
``get()`` reloads it. Reloads are single-flight: concurrent callers that
find the snapshot expired wait on one lock and only the first performs the
load.
"""

import logging
import threading
import time
from collections.abc import Callable

from ..core.models import Feed

logger = logging.getLogger(__name__)

DEFAULT_TTL = 300.0


class SnapshotCache:
    """TTL cache around a feed loader."""

    def __init__(
        self,
        loader: Callable[[], Feed],
        ttl: float = DEFAULT_TTL,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize the cache.

        Args:
            loader: Returns a fresh feed; called on first use and after expiry
            ttl: Seconds a loaded snapshot stays valid
            clock: Monotonic time source
        """
        self.loader = loader
        self.ttl = ttl
        self.clock = clock
        self._snapshot: Feed | None = None
        self._expires_at = 0.0
        self._lock = threading.Lock()
        self.load_count = 0

    @property
    def is_fresh(self) -> bool:
        return self._snapshot is not None and self.clock() < self._expires_at

    def get(self) -> Feed:
        """Current snapshot, loading it if missing or expired.

        Raises:
            Exception: Whatever the loader raises; a previous snapshot is
                kept but stays expired
        """
        snapshot = self._snapshot
        if snapshot is not None and self.clock() < self._expires_at:
            return snapshot

        with self._lock:
            if self.is_fresh:
                return self._snapshot

            snapshot = self.loader()
            self._snapshot = snapshot
            self._expires_at = self.clock() + self.ttl
            self.load_count += 1
            logger.info(
                "Refreshed event snapshot: %d events (load #%d)",
                len(snapshot.events),
                self.load_count,
            )
            return snapshot

    def invalidate(self) -> None:
        """Expire the current snapshot so the next get() reloads."""
        with self._lock:
            self._expires_at = 0.0
