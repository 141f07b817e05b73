import pytest

from campus_connect.core.enums import Role
from campus_connect.core.exceptions import AuthorizationError, NotFoundError, ValidationError


def test_core_committee_can_post_and_everyone_is_notified(container, make_user, claims_for):
    author = make_user(Role.CORE_COMMITTEE, name="Kiran")
    reader = make_user()

    a = container.announcement_service.create(claims_for(author), title="Fest", content="Friday")

    assert a.priority == "normal" and a.created_by_name == "Kiran"
    assert [n.type for n in container.notification_service.list_for(reader.user_id)] == ["announcement"]
    assert [x.announcement_id for x in container.announcement_service.list_all()] == [a.announcement_id]


def test_stored_role_wins_over_token(container, make_user, claims_for):
    demoted = make_user(Role.STUDENT)
    with pytest.raises(AuthorizationError):
        container.announcement_service.create(claims_for(demoted, Role.ADMIN), title="t", content="c")

    with pytest.raises(AuthorizationError):
        container.announcement_service.create(claims_for(make_user(Role.FACULTY)), title="t", content="c")


def test_update_ignores_empty_fields_and_delete_is_audited(container, make_user, claims_for):
    admin = make_user(Role.ADMIN)
    a = container.announcement_service.create(claims_for(admin), title="Fest", content="Friday", priority="high")

    updated = container.announcement_service.update(claims_for(admin), a.announcement_id, {"title": "", "content": "Saturday"})
    assert (updated.title, updated.content, updated.priority) == ("Fest", "Saturday", "high")

    container.announcement_service.delete(claims_for(admin), a.announcement_id)
    assert container.audit_log.recent()[0].action == "ANNOUNCEMENT_DELETED"
    with pytest.raises(NotFoundError):
        container.announcement_service.delete(claims_for(admin), a.announcement_id)
    with pytest.raises(ValidationError):
        container.announcement_service.create(claims_for(admin), title="", content="c")
