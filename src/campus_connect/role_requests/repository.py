from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import RequestStatus
from .model import RoleRequest


class RoleRequestRepository(Protocol):
    def create(self, request: RoleRequest) -> RoleRequest:
        raise NotImplementedError

    def get_by_id(self, request_id: str) -> Optional[RoleRequest]:
        raise NotImplementedError

    def list_all(self) -> Sequence[RoleRequest]:
        """Newest first."""

        raise NotImplementedError

    def decide(
        self,
        *,
        request_id: str,
        status: RequestStatus,
        reviewed_by: str,
        reviewed_at: str,
    ) -> Optional[RoleRequest]:
        """Resolve a pending request. Returns None if missing or already resolved."""

        raise NotImplementedError

    def reopen(self, request_id: str) -> None:
        """Put a decided request back to pending (the follow-up write failed)."""

        raise NotImplementedError
