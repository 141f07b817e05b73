from __future__ import annotations

from typing import Protocol, Sequence

from .model import AuditEntry


class AuditRepository(Protocol):
    def append(self, entry: AuditEntry) -> None:
        raise NotImplementedError

    def recent(self, limit: int) -> Sequence[AuditEntry]:
        """Newest first."""

        raise NotImplementedError
