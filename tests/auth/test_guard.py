from __future__ import annotations

import pytest

from campus_connect.auth.guard import CAPABILITIES, Capability, role_can
from campus_connect.core.enums import Role
from campus_connect.core.exceptions import AuthorizationError


def test_capability_table():
    assert role_can(Role.STUDENT, Capability.CHECK_IN)
    assert not role_can(Role.STUDENT, Capability.MANAGE_EVENTS)
    assert role_can(Role.FACULTY, Capability.MANAGE_SESSIONS)
    assert not role_can(Role.FACULTY, Capability.APPROVE_ATTENDANCE)
    assert role_can(Role.CORE_COMMITTEE, Capability.MANAGE_ANNOUNCEMENTS)
    assert not role_can(Role.CORE_COMMITTEE, Capability.READ_AUDIT_LOG)
    assert CAPABILITIES[Role.ADMIN] == frozenset(Capability)
    assert not role_can(None, Capability.CHECK_IN)


def test_claim_tier_trusts_token_role(container, make_user, claims_for):
    user = make_user(Role.STUDENT)

    # token still says admin
    container.guard.require(claims_for(user, Role.ADMIN), Capability.APPROVE_ATTENDANCE)
    with pytest.raises(AuthorizationError):
        container.guard.require(claims_for(user), Capability.APPROVE_ATTENDANCE)


def test_live_tier_reads_stored_role(container, make_user, claims_for):
    user = make_user(Role.STUDENT)
    stale = claims_for(user)

    with pytest.raises(AuthorizationError):
        container.guard.require_live(stale, Capability.MANAGE_ANNOUNCEMENTS)

    container.users_repo.update_fields(user.user_id, {"role": Role.CORE_COMMITTEE}, updated_at="now")

    assert container.guard.require_live(stale, Capability.MANAGE_ANNOUNCEMENTS) == Role.CORE_COMMITTEE


def test_live_tier_fails_closed_for_deleted_user(container, make_user, claims_for):
    user = make_user(Role.ADMIN)
    claims = claims_for(user)
    container.users_repo.delete_by_id(user.user_id)

    with pytest.raises(AuthorizationError):
        container.guard.require_live(claims, Capability.MANAGE_USERS)
