from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import ROLE_REQUESTS
from ..core.enums import RequestStatus
from ..storage.base import DocumentStore
from .model import RoleRequest
from .repository import RoleRequestRepository


class JsonRoleRequestRepository(RoleRequestRepository):
    def __init__(self, store: DocumentStore):
        self._store = store

    def create(self, request: RoleRequest) -> RoleRequest:
        with self._store.transaction(ROLE_REQUESTS) as rows:
            rows.append(request.to_dict())
        return request

    def get_by_id(self, request_id: str) -> Optional[RoleRequest]:
        for row in self._store.load(ROLE_REQUESTS):
            if row.get("id") == request_id:
                return RoleRequest.from_dict(row)
        return None

    def list_all(self) -> Sequence[RoleRequest]:
        rows = self._store.load(ROLE_REQUESTS)
        rows.sort(key=lambda r: r.get("createdAt", ""), reverse=True)
        return [RoleRequest.from_dict(r) for r in rows]

    def decide(
        self,
        *,
        request_id: str,
        status: RequestStatus,
        reviewed_by: str,
        reviewed_at: str,
    ) -> Optional[RoleRequest]:
        with self._store.transaction(ROLE_REQUESTS) as rows:
            for row in rows:
                if row.get("id") != request_id:
                    continue
                if row.get("status", RequestStatus.PENDING.value) != RequestStatus.PENDING.value:
                    return None
                row["status"] = status.value
                row["reviewedBy"] = reviewed_by
                row["reviewedAt"] = reviewed_at
                return RoleRequest.from_dict(row)
        return None

    def reopen(self, request_id: str) -> None:
        with self._store.transaction(ROLE_REQUESTS) as rows:
            for row in rows:
                if row.get("id") == request_id:
                    row["status"] = RequestStatus.PENDING.value
                    row.pop("reviewedBy", None)
                    row.pop("reviewedAt", None)
                    return
