import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "workspace_attendance_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

LATE_CUTOFF = "09:30"
HALF_DAY_HOURS = 4.0
NOTES_MIN_LENGTH = 10
NOTES_MAX_LENGTH = 1000

AUTO_INIT_DB = False
