from __future__ import annotations

import copy
import logging
import threading
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Protocol

from ..core.exceptions import StorageTimeoutError

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


class DocumentStore(Protocol):
    """Whole-collection document store.

    There is no partial-record update. Writers go through ``transaction`` which
    holds the collection lock across read, mutate and write.
    """

    def load(self, collection: str) -> List[Record]:
        raise NotImplementedError

    def save(self, collection: str, records: List[Record]) -> None:
        raise NotImplementedError

    def transaction(self, collection: str):
        raise NotImplementedError


class LockingStore:
    """Per-collection mutual exclusion shared by the concrete stores."""

    def __init__(self, *, lock_timeout: float):
        self._lock_timeout = float(lock_timeout)
        self._locks: dict[str, threading.RLock] = {}
        self._locks_guard = threading.Lock()

    # Subclasses provide raw I/O.
    def _read(self, collection: str) -> List[Record]:
        raise NotImplementedError

    def _write(self, collection: str, records: List[Record]) -> None:
        raise NotImplementedError

    def _lock_for(self, collection: str) -> threading.RLock:
        with self._locks_guard:
            lock = self._locks.get(collection)
            if lock is None:
                lock = threading.RLock()
                self._locks[collection] = lock
            return lock

    @contextmanager
    def _locked(self, collection: str) -> Iterator[None]:
        lock = self._lock_for(collection)
        if not lock.acquire(timeout=self._lock_timeout):
            logger.error("Timed out waiting for lock on collection %s", collection)
            raise StorageTimeoutError(f"Collection {collection} is busy")
        try:
            yield
        finally:
            lock.release()

    def load(self, collection: str) -> List[Record]:
        with self._locked(collection):
            return self._read(collection)

    def save(self, collection: str, records: List[Record]) -> None:
        with self._locked(collection):
            self._write(collection, list(records))

    @contextmanager
    def transaction(self, collection: str) -> Iterator[List[Record]]:
        """Yield the collection for in-place mutation and write it back on success.

        If the body raises, nothing is written.
        """
        with self._locked(collection):
            records = self._read(collection)
            yield records
            self._write(collection, records)


class InMemoryStore(LockingStore):
    """Store kept in a dict. Used by tests and by ``DATA_DIR=':memory:'``."""

    def __init__(self, *, lock_timeout: float = 10.0, initial: Dict[str, List[Record]] | None = None):
        super().__init__(lock_timeout=lock_timeout)
        self._data: Dict[str, List[Record]] = copy.deepcopy(initial or {})

    def _read(self, collection: str) -> List[Record]:
        return copy.deepcopy(self._data.get(collection, []))

    def _write(self, collection: str, records: List[Record]) -> None:
        self._data[collection] = copy.deepcopy(records)
