from __future__ import annotations

from typing import Sequence

from ..audit.service import AuditLog
from ..auth.guard import AuthorizationGuard, Capability
from ..common.datetime_utils import now_iso
from ..common.ids import new_id
from ..common.validators import require_non_empty
from ..core.enums import AuditAction, NotificationType, RequestStatus, Role
from ..core.exceptions import NotFoundError, ValidationError
from ..notifications.service import NotificationService
from ..users.repository import UserRepository
from ..users.tokens import TokenClaims
from .model import RoleRequest
from .repository import RoleRequestRepository


class RoleRequestService:
    """Use case: a user asks for a role, an admin reviews it."""

    def __init__(
        self,
        requests: RoleRequestRepository,
        users: UserRepository,
        guard: AuthorizationGuard,
        notifications: NotificationService,
        audit: AuditLog,
    ):
        self._requests = requests
        self._users = users
        self._guard = guard
        self._notifications = notifications
        self._audit = audit

    def create(self, claims: TokenClaims, *, requested_role: str, reason: str) -> RoleRequest:
        self._guard.require(claims, Capability.REQUEST_ROLE)

        user = self._users.get_by_id(claims.user_id)
        if not user:
            raise NotFoundError("User not found")
        try:
            role = Role(requested_role)
        except (TypeError, ValueError):
            raise ValidationError("Unknown role")
        if role == user.role:
            raise ValidationError(f"You already are a {role.value}")

        request = self._requests.create(
            RoleRequest(
                request_id=new_id(),
                user_id=user.user_id,
                user_name=user.name,
                current_role=user.role,
                requested_role=role,
                reason=require_non_empty(reason, "Reason"),
                status=RequestStatus.PENDING,
                created_at=now_iso(),
            )
        )

        for admin in self._users.list_by_role(Role.ADMIN):
            self._notifications.notify(
                admin.user_id,
                NotificationType.ROLE_REQUEST,
                "New Role Request",
                f"{user.name} requested {role.value} role",
                request_id=request.request_id,
            )
        return request

    def list_all(self, claims: TokenClaims) -> Sequence[RoleRequest]:
        self._guard.require(claims, Capability.REVIEW_ROLE_REQUESTS)
        return self._requests.list_all()

    def review(self, claims: TokenClaims, *, request_id: str, status: str) -> RoleRequest:
        """Approve or reject once. Approval changes the requester's role."""
        self._guard.require(claims, Capability.REVIEW_ROLE_REQUESTS)

        try:
            decision = RequestStatus(status)
        except (TypeError, ValueError):
            raise ValidationError("Unknown status")
        if decision == RequestStatus.PENDING:
            raise ValidationError("Status must be approved or rejected")

        existing = self._requests.get_by_id(request_id)
        if not existing:
            raise NotFoundError("Request not found")
        if existing.status != RequestStatus.PENDING:
            raise ValidationError("Request already reviewed")

        request = self._requests.decide(
            request_id=request_id,
            status=decision,
            reviewed_by=claims.user_id,
            reviewed_at=now_iso(),
        )
        if request is None:
            raise ValidationError("Request already reviewed")

        if decision == RequestStatus.APPROVED:
            try:
                user = self._users.update_fields(request.user_id, {"role": request.requested_role}, updated_at=now_iso())
            except Exception:
                # Role not applied: leave the request reviewable again.
                self._requests.reopen(request.request_id)
                raise
            if user:
                self._notifications.notify(
                    request.user_id,
                    NotificationType.ROLE_APPROVED,
                    "Role Request Approved",
                    f"You are now a {request.requested_role.value}",
                    request_id=request.request_id,
                )

        self._audit.record(
            AuditAction.ROLE_REQUEST_REVIEWED,
            claims.user_id,
            f"{decision.value} role request for {request.user_name}",
        )
        return request
