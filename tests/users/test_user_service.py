from __future__ import annotations

import pytest

from campus_connect.core.enums import Role
from campus_connect.core.exceptions import AuthorizationError, NotFoundError, ValidationError


def test_profile_update_ignores_empty_values(container, make_user):
    user = make_user(department="CSE", phone="123")

    updated = container.user_service.update_profile(user.user_id, {"department": "", "phone": "999", "year": None})

    assert updated["department"] == "CSE"
    assert updated["phone"] == "999"
    assert "updatedAt" in updated


def test_profile_update_cannot_change_role_or_email(container, make_user):
    user = make_user()

    updated = container.user_service.update_profile(user.user_id, {"role": "admin", "email": "x@y.edu"})

    assert updated["role"] == "student"
    assert updated["email"] == user.email


def test_current_user_missing(container):
    with pytest.raises(NotFoundError):
        container.user_service.current_user("ghost")


def test_admin_user_management_uses_stored_role(container, make_user, claims_for):
    admin = make_user(Role.ADMIN)
    target = make_user()

    users = container.user_service.list_users(claims_for(admin))
    assert {u["id"] for u in users} == {admin.user_id, target.user_id}

    updated = container.user_service.admin_update_user(claims_for(admin), target.user_id, {"role": "faculty", "name": ""})
    assert updated["role"] == "faculty"
    assert updated["name"] == target.name

    # stale admin claim for a user who is now a student
    demoted = make_user(Role.STUDENT)
    with pytest.raises(AuthorizationError):
        container.user_service.list_users(claims_for(demoted, Role.ADMIN))

    with pytest.raises(ValidationError):
        container.user_service.admin_update_user(claims_for(admin), target.user_id, {"role": "wizard"})


def test_delete_user_is_audited(container, make_user, claims_for):
    admin = make_user(Role.ADMIN)
    target = make_user()

    container.user_service.delete_user(claims_for(admin), target.user_id)

    assert container.users_repo.get_by_id(target.user_id) is None
    assert container.audit_log.recent()[0].action == "USER_DELETED"
    with pytest.raises(NotFoundError):
        container.user_service.delete_user(claims_for(admin), target.user_id)
