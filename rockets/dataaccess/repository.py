"""Snapshot access for catalog records.

The analytics engine only ever asks for a full, point-in-time list of one
record kind. ``Repository`` is that contract; ``InMemoryRepository`` is the
store the ETL classes load into.
"""

import logging
import threading
from typing import Iterable, Protocol, TypeVar

from rockets.models import Launch, LaunchServiceProvider, Rocket

logger = logging.getLogger(__name__)

T = TypeVar("T")

RECORD_KINDS: tuple[type, ...] = (LaunchServiceProvider, Rocket, Launch)


class Repository(Protocol):
    def load_all(self, kind: type[T]) -> list[T]:
        """Return every record of ``kind`` as a materialized snapshot."""
        ...


class InMemoryRepository:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: dict[type, list] = {kind: [] for kind in RECORD_KINDS}
        self._by_id: dict[type, dict[str, object]] = {
            kind: {} for kind in RECORD_KINDS
        }

    def _check_kind(self, kind: type) -> None:
        if kind not in self._records:
            raise KeyError(f"Unknown record kind: {kind.__name__}")

    def load_all(self, kind: type[T]) -> list[T]:
        self._check_kind(kind)
        with self._lock:
            # Copy so callers never observe a later replace_all
            snapshot = list(self._records[kind])
        logger.debug("Loaded %d %s records", len(snapshot), kind.__name__)
        return snapshot

    def get(self, kind: type[T], record_id: str) -> T | None:
        self._check_kind(kind)
        with self._lock:
            return self._by_id[kind].get(record_id)

    def replace_all(self, kind: type[T], records: Iterable[T]) -> None:
        """Swap the stored snapshot of ``kind`` for ``records``."""
        self._check_kind(kind)
        records = list(records)
        by_id = {r.id: r for r in records}
        with self._lock:
            self._records[kind] = records
            self._by_id[kind] = by_id
        logger.info("Stored %d %s records", len(records), kind.__name__)
