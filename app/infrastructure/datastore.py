"""In-memory state container and its lifecycle helpers."""

from __future__ import annotations

import copy
import logging
import threading
import time
from collections.abc import Iterator
from contextlib import contextmanager
from functools import lru_cache

from app.config import get_settings
from app.domain.entities import Snapshot

from .storage import JsonSnapshotStore

logger = logging.getLogger(__name__)


class TimeBasedIdGenerator:
    """Produce millisecond timestamps that never repeat within the process.

    Two calls inside the same millisecond receive consecutive values.
    """

    def __init__(self, last_issued: int = 0) -> None:
        self._last = last_issued
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            candidate = time.time_ns() // 1_000_000
            if candidate <= self._last:
                candidate = self._last + 1
            self._last = candidate
            return candidate

    def observe(self, issued: int) -> None:
        """Make sure identifiers handed out later are greater than ``issued``."""

        with self._lock:
            self._last = max(self._last, issued)


class DataStore:
    """Own the authoritative :class:`Snapshot` and its single write path.

    Every use case that reads and then mutates the snapshot does so inside
    :meth:`transaction`. A transaction is all or nothing: calls to
    :meth:`save` made inside it are written once when the outermost
    transaction finishes, and if the body or that write fails the in-memory
    snapshot is restored to its state before the transaction began.
    """

    def __init__(self, storage: JsonSnapshotStore, snapshot: Snapshot | None = None) -> None:
        self.storage = storage
        self.snapshot = snapshot if snapshot is not None else Snapshot()
        self.ids = TimeBasedIdGenerator()
        self._lock = threading.RLock()
        self._depth = 0
        self._dirty = False
        self._observe_existing_ids()

    @classmethod
    def open(cls, path: str) -> "DataStore":
        """Load the snapshot stored at ``path`` and wrap it in a store."""

        storage = JsonSnapshotStore(path)
        return cls(storage, storage.load())

    @contextmanager
    def transaction(self) -> Iterator[Snapshot]:
        """Hold the writer lock for a read-modify-write sequence."""

        with self._lock:
            if self._depth:
                self._depth += 1
                try:
                    yield self.snapshot
                finally:
                    self._depth -= 1
                return

            backup = copy.deepcopy(self.snapshot)
            self._depth = 1
            self._dirty = False
            try:
                yield self.snapshot
                if self._dirty:
                    self.storage.save(self.snapshot)
            except BaseException:
                self.snapshot = backup
                if self._dirty:
                    logger.warning("Discarded unsaved changes after a failed transaction")
                raise
            finally:
                self._depth = 0
                self._dirty = False

    def save(self) -> None:
        """Persist the full snapshot, overwriting the previous document.

        Inside a transaction the write is deferred until the transaction ends.
        """

        with self._lock:
            if self._depth:
                self._dirty = True
                return
            self.storage.save(self.snapshot)

    def reload(self) -> None:
        """Replace the in-memory snapshot with the persisted one."""

        with self._lock:
            self.snapshot = self.storage.load()
            self._observe_existing_ids()

    def _observe_existing_ids(self) -> None:
        for task in self.snapshot.tasks:
            self.ids.observe(task.id)
        for notification in self.snapshot.notifications:
            self.ids.observe(notification.id)


@lru_cache
def get_datastore() -> DataStore:
    """Return the process-wide store configured from the settings."""

    settings = get_settings()
    logger.info("Opening data file %s", settings.data_file)
    return DataStore.open(settings.data_file)


def initialize_datastore() -> DataStore:
    """Load the store at application startup."""

    return get_datastore()


def reset_datastore() -> None:
    """Forget the cached store so the next call reloads it from disk."""

    get_datastore.cache_clear()


def get_store() -> DataStore:
    """FastAPI dependency returning the application store."""

    return get_datastore()


__all__ = [
    "DataStore",
    "TimeBasedIdGenerator",
    "get_datastore",
    "get_store",
    "initialize_datastore",
    "reset_datastore",
]
