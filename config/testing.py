SECRET_KEY = "test-secret"

# Kept in memory; nothing is written to disk.
DATA_DIR = ":memory:"
STORE_LOCK_TIMEOUT = 5.0

TOKEN_MAX_AGE_DAYS = 7
VERIFIED_EMAIL_DOMAINS = ("edu", "ac.in", "college.edu")

NOTIFICATION_QUEUE_SIZE = 10
NOTIFICATION_HEARTBEAT_SECONDS = 1.0
AUDIT_LOG_LIMIT = 100

LOG_LEVEL = "WARNING"
DEBUG = False
TESTING = True
