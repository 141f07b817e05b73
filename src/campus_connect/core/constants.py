"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TOKEN_DAYS = 7
DEFAULT_AUDIT_LIMIT = 100
DEFAULT_LOCK_TIMEOUT_SECONDS = 10.0
DEFAULT_NOTIFICATION_QUEUE_SIZE = 100
DEFAULT_VERIFIED_DOMAINS = ("edu", "ac.in", "college.edu")

CODE_TYPE_ATTENDANCE = "attendance"

XP_PER_EVENT = 10
XP_PER_CLUB = 20
XP_PER_SESSION = 5
XP_PER_LEVEL = 50

# Collection names in the document store.
USERS = "users"
EVENTS = "events"
PRACTICE_SESSIONS = "practice-sessions"
NOTIFICATIONS = "notifications"
ROLE_REQUESTS = "role-requests"
AUDIT_LOGS = "audit-logs"
ANNOUNCEMENTS = "announcements"
CLUBS = "clubs"
