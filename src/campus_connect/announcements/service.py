from __future__ import annotations

from typing import Sequence

from ..audit.service import AuditLog
from ..auth.guard import AuthorizationGuard, Capability
from ..common.datetime_utils import now_iso
from ..common.ids import new_id
from ..common.validators import require_non_empty, truthy_changes
from ..core.enums import AuditAction, NotificationType
from ..core.exceptions import NotFoundError
from ..notifications.service import NotificationService
from ..users.repository import UserRepository
from ..users.tokens import TokenClaims
from .model import Announcement
from .repository import AnnouncementRepository


class AnnouncementService:
    """Announcements are gated on the *stored* role, not the token claim."""

    def __init__(
        self,
        announcements: AnnouncementRepository,
        users: UserRepository,
        guard: AuthorizationGuard,
        notifications: NotificationService,
        audit: AuditLog,
    ):
        self._announcements = announcements
        self._users = users
        self._guard = guard
        self._notifications = notifications
        self._audit = audit

    def list_all(self) -> Sequence[Announcement]:
        return self._announcements.list_all()

    def create(self, claims: TokenClaims, *, title: str, content: str, priority: str = "") -> Announcement:
        self._guard.require_live(claims, Capability.MANAGE_ANNOUNCEMENTS)
        author = self._users.get_by_id(claims.user_id)

        announcement = self._announcements.create(
            Announcement(
                announcement_id=new_id(),
                title=require_non_empty(title, "Title"),
                content=content or "",
                priority=priority or "normal",
                created_by=claims.user_id,
                created_by_name=author.name if author else "",
                created_at=now_iso(),
            )
        )

        for user in self._users.list_all():
            self._notifications.notify(
                user.user_id,
                NotificationType.ANNOUNCEMENT,
                "New Announcement",
                announcement.title,
                announcement_id=announcement.announcement_id,
            )
        return announcement

    def update(self, claims: TokenClaims, announcement_id: str, patch: dict) -> Announcement:
        self._guard.require_live(claims, Capability.MANAGE_ANNOUNCEMENTS)
        changes = truthy_changes(patch, ("title", "content", "priority"))
        announcement = self._announcements.update_fields(announcement_id, changes, updated_at=now_iso())
        if not announcement:
            raise NotFoundError("Announcement not found")
        return announcement

    def delete(self, claims: TokenClaims, announcement_id: str) -> None:
        self._guard.require_live(claims, Capability.MANAGE_ANNOUNCEMENTS)
        announcement = self._announcements.delete_by_id(announcement_id)
        if not announcement:
            raise NotFoundError("Announcement not found")
        self._audit.record(
            AuditAction.ANNOUNCEMENT_DELETED,
            claims.user_id,
            f"Deleted announcement: {announcement.title}",
        )
