from .config import Config

SECRET_KEY = Config.SECRET_KEY

DATA_DIR = Config.DATA_DIR
STORE_LOCK_TIMEOUT = Config.STORE_LOCK_TIMEOUT

TOKEN_MAX_AGE_DAYS = Config.TOKEN_MAX_AGE_DAYS
VERIFIED_EMAIL_DOMAINS = Config.VERIFIED_EMAIL_DOMAINS

NOTIFICATION_QUEUE_SIZE = Config.NOTIFICATION_QUEUE_SIZE
NOTIFICATION_HEARTBEAT_SECONDS = Config.NOTIFICATION_HEARTBEAT_SECONDS
AUDIT_LOG_LIMIT = Config.AUDIT_LOG_LIMIT

LOG_LEVEL = "DEBUG"
DEBUG = True
