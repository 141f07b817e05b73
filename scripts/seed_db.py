"""Create demo accounts (admin, faculty, student) in the document store.

Admin accounts cannot be self-registered through the API, so this is the
way to bootstrap the first one.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from werkzeug.security import generate_password_hash

from config import get_settings_module

from campus_connect.common.datetime_utils import now_iso
from campus_connect.common.ids import new_id
from campus_connect.core.enums import Role
from campus_connect.main import build_store
from campus_connect.users.json_user_repository import JsonUserRepository
from campus_connect.users.model import User

DEMO_USERS = (
    ("Campus Admin", "admin@college.edu", "admin123", Role.ADMIN, {}),
    ("Dr. Rao", "rao@college.edu", "faculty123", Role.FACULTY, {"designation": "Professor"}),
    ("Asha", "asha@college.edu", "student123", Role.STUDENT, {"roll_number": "21CS001", "class_teacher": "Dr. Rao"}),
)


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    users = JsonUserRepository(build_store(str(settings.DATA_DIR), settings.STORE_LOCK_TIMEOUT))

    for name, email, password, role, profile in DEMO_USERS:
        if users.get_by_email(email):
            print(f"skip: {email} already exists")
            continue
        users.create_user(
            User(
                user_id=new_id(),
                email=email,
                password_hash=generate_password_hash(password),
                name=name,
                role=role,
                verified=True,
                created_at=now_iso(),
                profile=profile,
            )
        )
        print(f"OK: created {role.value} {email} / {password}")


if __name__ == "__main__":
    main()
