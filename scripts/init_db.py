from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_settings_module

from campus_connect.core import constants
from campus_connect.storage.connection import StoreConfig
from campus_connect.storage.json_store import JsonFileStore

COLLECTIONS = (
    constants.USERS,
    constants.EVENTS,
    constants.PRACTICE_SESSIONS,
    constants.NOTIFICATIONS,
    constants.ROLE_REQUESTS,
    constants.AUDIT_LOGS,
    constants.ANNOUNCEMENTS,
    constants.CLUBS,
)


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    config = StoreConfig.from_settings(settings.DATA_DIR, settings.STORE_LOCK_TIMEOUT)
    if str(config.data_dir) == ":memory:":
        raise SystemExit("DATA_DIR is ':memory:'; nothing to initialise.")

    store = JsonFileStore(config)
    store.ensure_collections(*COLLECTIONS)
    print(f"OK: collections ready in {config.data_dir.resolve()} ({len(COLLECTIONS)} files)")


if __name__ == "__main__":
    main()
