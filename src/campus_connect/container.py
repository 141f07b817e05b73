from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .announcements.json_announcement_repository import JsonAnnouncementRepository
from .announcements.service import AnnouncementService
from .attendance.codes import VerificationCodeScheme
from .attendance.factory import CheckInStrategyFactory
from .attendance.service import AttendanceService
from .audit.json_audit_repository import JsonAuditRepository
from .audit.service import AuditLog
from .auth.guard import AuthorizationGuard
from .core.constants import (
    DEFAULT_AUDIT_LIMIT,
    DEFAULT_NOTIFICATION_QUEUE_SIZE,
    DEFAULT_TOKEN_DAYS,
    DEFAULT_VERIFIED_DOMAINS,
)
from .events.json_event_repository import JsonEventRepository
from .events.service import EventService
from .gamification.clubs import JsonClubMembershipSource
from .gamification.service import ScoreService
from .notifications.broker import NotificationBroker
from .notifications.json_notification_repository import JsonNotificationRepository
from .notifications.service import NotificationService
from .practice.json_session_repository import JsonPracticeSessionRepository
from .practice.service import PracticeSessionService
from .role_requests.json_role_request_repository import JsonRoleRequestRepository
from .role_requests.service import RoleRequestService
from .storage.base import DocumentStore
from .users.json_user_repository import JsonUserRepository
from .users.service import AuthService, UserService
from .users.tokens import TokenService


@dataclass(frozen=True)
class Container:
    store: DocumentStore

    users_repo: JsonUserRepository
    events_repo: JsonEventRepository
    sessions_repo: JsonPracticeSessionRepository
    notifications_repo: JsonNotificationRepository
    role_requests_repo: JsonRoleRequestRepository
    announcements_repo: JsonAnnouncementRepository
    audit_repo: JsonAuditRepository

    broker: NotificationBroker
    tokens: TokenService
    guard: AuthorizationGuard
    codes: VerificationCodeScheme

    audit_log: AuditLog
    notification_service: NotificationService
    auth_service: AuthService
    user_service: UserService
    event_service: EventService
    practice_service: PracticeSessionService
    attendance_service: AttendanceService
    role_request_service: RoleRequestService
    announcement_service: AnnouncementService
    score_service: ScoreService


def build_container(
    *,
    store: DocumentStore,
    secret_key: str,
    token_max_age_days: int = DEFAULT_TOKEN_DAYS,
    verified_domains: Iterable[str] = DEFAULT_VERIFIED_DOMAINS,
    notification_queue_size: int = DEFAULT_NOTIFICATION_QUEUE_SIZE,
    audit_limit: int = DEFAULT_AUDIT_LIMIT,
) -> Container:
    users_repo = JsonUserRepository(store)
    events_repo = JsonEventRepository(store)
    sessions_repo = JsonPracticeSessionRepository(store)
    notifications_repo = JsonNotificationRepository(store)
    role_requests_repo = JsonRoleRequestRepository(store)
    announcements_repo = JsonAnnouncementRepository(store)
    audit_repo = JsonAuditRepository(store)

    broker = NotificationBroker(queue_size=notification_queue_size)
    tokens = TokenService(secret_key, max_age_days=token_max_age_days)
    guard = AuthorizationGuard(users_repo)
    codes = VerificationCodeScheme()

    audit_log = AuditLog(audit_repo, read_limit=audit_limit)
    notification_service = NotificationService(notifications_repo, broker)
    auth_service = AuthService(users_repo, tokens, audit_log, verified_domains=verified_domains)
    user_service = UserService(users_repo, guard, audit_log)
    event_service = EventService(events_repo, users_repo, notification_service, audit_log, codes)
    practice_service = PracticeSessionService(sessions_repo, users_repo, notification_service, codes)
    attendance_service = AttendanceService(
        events_repo,
        sessions_repo,
        users_repo,
        notification_service,
        audit_log,
        codes=codes,
        strategy_factory=CheckInStrategyFactory(),
    )
    role_request_service = RoleRequestService(role_requests_repo, users_repo, guard, notification_service, audit_log)
    announcement_service = AnnouncementService(announcements_repo, users_repo, guard, notification_service, audit_log)
    score_service = ScoreService(events_repo, sessions_repo, JsonClubMembershipSource(store))

    return Container(
        store=store,
        users_repo=users_repo,
        events_repo=events_repo,
        sessions_repo=sessions_repo,
        notifications_repo=notifications_repo,
        role_requests_repo=role_requests_repo,
        announcements_repo=announcements_repo,
        audit_repo=audit_repo,
        broker=broker,
        tokens=tokens,
        guard=guard,
        codes=codes,
        audit_log=audit_log,
        notification_service=notification_service,
        auth_service=auth_service,
        user_service=user_service,
        event_service=event_service,
        practice_service=practice_service,
        attendance_service=attendance_service,
        role_request_service=role_request_service,
        announcement_service=announcement_service,
        score_service=score_service,
    )
