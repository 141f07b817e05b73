import pytest

from campus_connect.core.enums import NotificationType, Role
from campus_connect.core.exceptions import NotFoundError
from campus_connect.events.service import EventService
from campus_connect.notifications.service import NotificationService


class FailingFor:
    """Notification repository that refuses writes for one user."""

    def __init__(self, notifications, user_id):
        self._notifications = notifications
        self._user_id = user_id

    def __getattr__(self, name):
        return getattr(self._notifications, name)

    def append(self, notification):
        if notification.user_id == self._user_id:
            raise OSError("disk full")
        self._notifications.append(notification)


def test_durable_copy_is_written_without_a_live_connection(container, make_user):
    user = make_user()

    container.notification_service.publish(user.user_id, NotificationType.ANNOUNCEMENT, "T", "M", announcement_id="a1")

    [stored] = container.notification_service.list_for(user.user_id)
    assert stored.read is False
    assert stored.to_dict()["announcementId"] == "a1"
    assert stored.to_dict()["type"] == "announcement"


def test_live_subscriber_receives_stored_payload(container, make_user):
    user = make_user()
    sub = container.broker.subscribe(user.user_id)

    sent = container.notification_service.publish(user.user_id, NotificationType.NEW_EVENT, "New", "Hackathon", event_id="e1")

    assert sub.get(timeout=0.1) == sent.to_dict()


def test_unknown_cross_reference_is_rejected(container, make_user):
    with pytest.raises(ValueError):
        container.notification_service.publish(make_user().user_id, NotificationType.NEW_EVENT, "t", "m", club_id="c")


def test_mark_read_only_for_owner(container, make_user):
    owner, stranger = make_user(), make_user()
    n = container.notification_service.publish(owner.user_id, NotificationType.ROLE_REQUEST, "t", "m")

    with pytest.raises(NotFoundError):
        container.notification_service.mark_read(n.notification_id, stranger.user_id)
    container.notification_service.mark_read(n.notification_id, owner.user_id)

    assert container.notification_service.list_for(owner.user_id)[0].read is True
    with pytest.raises(NotFoundError):
        container.notification_service.mark_read("missing", owner.user_id)


def test_notify_logs_and_returns_none_when_the_write_fails(container, make_user, caplog):
    user = make_user()
    service = NotificationService(FailingFor(container.notifications_repo, user.user_id), container.broker)
    sub = container.broker.subscribe(user.user_id)

    assert service.notify(user.user_id, NotificationType.NEW_EVENT, "New", "Hackathon", event_id="e1") is None
    assert sub.pending() == 0
    assert "Failed to send new_event notification" in caplog.text


def test_event_fan_out_continues_past_a_failed_recipient(container, make_user):
    organizer = make_user(Role.FACULTY)
    unlucky, other = make_user(), make_user()
    service = NotificationService(FailingFor(container.notifications_repo, unlucky.user_id), container.broker)
    events = EventService(container.events_repo, container.users_repo, service, container.audit_log, container.codes)

    event = events.create(creator_id=organizer.user_id, fields={"title": "Hackathon"})

    assert container.events_repo.get_by_id(event.event_id) is not None
    assert container.notification_service.list_for(unlucky.user_id) == []
    [sent] = container.notification_service.list_for(other.user_id)
    assert sent.xref == {"event_id": event.event_id}
