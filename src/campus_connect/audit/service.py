from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.datetime_utils import now_iso
from ..common.ids import new_id
from ..core.constants import DEFAULT_AUDIT_LIMIT
from ..core.enums import AuditAction
from .model import AuditEntry
from .repository import AuditRepository

logger = logging.getLogger(__name__)


class AuditLog:
    """Best-effort audit trail.

    ``record`` never raises: the mutation it describes has already happened.
    """

    def __init__(self, entries: AuditRepository, *, read_limit: int = DEFAULT_AUDIT_LIMIT):
        self._entries = entries
        self._read_limit = int(read_limit)

    def record(
        self,
        action: AuditAction | str,
        actor_id: Optional[str],
        details: str,
        *,
        actor_name: Optional[str] = None,
    ) -> Optional[AuditEntry]:
        entry = AuditEntry(
            entry_id=new_id(),
            action=action.value if isinstance(action, AuditAction) else str(action),
            actor_id=actor_id,
            details=details,
            timestamp=now_iso(),
            actor_name=actor_name,
        )
        try:
            self._entries.append(entry)
        except Exception:
            logger.exception("Audit write failed for action %s by %s", entry.action, actor_id)
            return None
        return entry

    def recent(self, limit: Optional[int] = None) -> Sequence[AuditEntry]:
        return self._entries.recent(limit or self._read_limit)
