from __future__ import annotations

import itertools

import pytest
from werkzeug.security import generate_password_hash

from campus_connect.common.datetime_utils import now_iso
from campus_connect.container import build_container
from campus_connect.core.enums import Role
from campus_connect.storage.base import InMemoryStore
from campus_connect.users.model import User
from campus_connect.users.tokens import TokenClaims

_ids = itertools.count(1)


@pytest.fixture
def store():
    return InMemoryStore(lock_timeout=2.0)


@pytest.fixture
def container(store):
    return build_container(store=store, secret_key="test-secret", notification_queue_size=5)


@pytest.fixture
def make_user(container):
    """Insert a user straight into the repository, bypassing registration rules."""

    def _make(role: Role = Role.STUDENT, *, name=None, password="secret1", **profile) -> User:
        n = next(_ids)
        user = User(
            user_id=f"u{n}",
            email=f"user{n}@college.edu",
            password_hash=generate_password_hash(password, method="pbkdf2:sha256:1000"),
            name=name or f"User {n}",
            role=role,
            verified=True,
            created_at=now_iso(),
            profile=profile,
        )
        return container.users_repo.create_user(user)

    return _make


@pytest.fixture
def claims_for():
    def _claims(user: User, role: Role | None = None) -> TokenClaims:
        return TokenClaims(user_id=user.user_id, email=user.email, role=role or user.role)

    return _claims


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from campus_connect.main import create_app

    return create_app({"TESTING": True})


@pytest.fixture
def client(app):
    return app.test_client()
