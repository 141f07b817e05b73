from __future__ import annotations

from typing import Sequence

from ..core.constants import AUDIT_LOGS
from ..storage.base import DocumentStore
from .model import AuditEntry
from .repository import AuditRepository


class JsonAuditRepository(AuditRepository):
    def __init__(self, store: DocumentStore):
        self._store = store

    def append(self, entry: AuditEntry) -> None:
        with self._store.transaction(AUDIT_LOGS) as rows:
            rows.append(entry.to_dict())

    def recent(self, limit: int) -> Sequence[AuditEntry]:
        rows = self._store.load(AUDIT_LOGS)
        rows.sort(key=lambda r: r.get("timestamp", ""), reverse=True)
        return [AuditEntry.from_dict(r) for r in rows[: int(limit)]]
