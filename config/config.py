import os


def _domains(value: str) -> tuple:
    return tuple(d.strip() for d in value.split(",") if d.strip())


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "campus-connect-dev-secret"

    # Document store
    DATA_DIR = os.environ.get("DATA_DIR", "./data")
    STORE_LOCK_TIMEOUT = float(os.environ.get("STORE_LOCK_TIMEOUT", "10"))

    # Auth
    TOKEN_MAX_AGE_DAYS = int(os.environ.get("TOKEN_MAX_AGE_DAYS", "7"))
    VERIFIED_EMAIL_DOMAINS = _domains(os.environ.get("VERIFIED_EMAIL_DOMAINS", "edu,ac.in,college.edu"))

    # Notifications / audit
    NOTIFICATION_QUEUE_SIZE = int(os.environ.get("NOTIFICATION_QUEUE_SIZE", "100"))
    NOTIFICATION_HEARTBEAT_SECONDS = float(os.environ.get("NOTIFICATION_HEARTBEAT_SECONDS", "15"))
    AUDIT_LOG_LIMIT = int(os.environ.get("AUDIT_LOG_LIMIT", "100"))

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    DEBUG = bool(int(os.environ.get("DEBUG", "1")))
