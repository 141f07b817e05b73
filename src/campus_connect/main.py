from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .announcements.controller import register as register_announcements
from .audit.controller import register as register_audit
from .common.http import register_error_handlers
from .container import build_container
from .core.constants import AUDIT_LOGS, ROLE_REQUESTS
from .events.controller import register as register_events
from .gamification.controller import register as register_gamification
from .notifications.controller import register as register_notifications
from .practice.controller import register as register_practice
from .role_requests.controller import register as register_role_requests
from .storage.base import DocumentStore, InMemoryStore
from .storage.connection import StoreConfig
from .storage.json_store import JsonFileStore
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

_SETTING_NAMES = (
    "SECRET_KEY",
    "DATA_DIR",
    "STORE_LOCK_TIMEOUT",
    "TOKEN_MAX_AGE_DAYS",
    "VERIFIED_EMAIL_DOMAINS",
    "NOTIFICATION_QUEUE_SIZE",
    "NOTIFICATION_HEARTBEAT_SECONDS",
    "AUDIT_LOG_LIMIT",
    "LOG_LEVEL",
    "DEBUG",
    "TESTING",
)


def build_store(data_dir: str, lock_timeout: float) -> DocumentStore:
    if data_dir == ":memory:":
        return InMemoryStore(lock_timeout=lock_timeout)
    store = JsonFileStore(StoreConfig.from_settings(data_dir, lock_timeout))
    store.ensure_collections(AUDIT_LOGS, ROLE_REQUESTS)
    return store


def create_app(settings_overrides: Optional[dict] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    for name in _SETTING_NAMES:
        if hasattr(settings, name):
            app.config[name] = getattr(settings, name)
    app.config.update(settings_overrides or {})
    app.secret_key = app.config["SECRET_KEY"]

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    store = build_store(str(app.config["DATA_DIR"]), float(app.config["STORE_LOCK_TIMEOUT"]))
    container = build_container(
        store=store,
        secret_key=app.config["SECRET_KEY"],
        token_max_age_days=int(app.config["TOKEN_MAX_AGE_DAYS"]),
        verified_domains=app.config["VERIFIED_EMAIL_DOMAINS"],
        notification_queue_size=int(app.config["NOTIFICATION_QUEUE_SIZE"]),
        audit_limit=int(app.config["AUDIT_LOG_LIMIT"]),
    )
    app.extensions["campus_connect"] = container

    register_error_handlers(app)
    register_users(app, container)
    register_events(app, container)
    register_practice(app, container)
    register_notifications(app, container)
    register_role_requests(app, container)
    register_announcements(app, container)
    register_audit(app, container)
    register_gamification(app, container)

    logger.debug("campus-connect settings=%s data_dir=%s", settings_module, app.config["DATA_DIR"])
    return app
