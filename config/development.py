import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "workspace_attendance"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Attendance rules
LATE_CUTOFF = os.getenv("LATE_CUTOFF", "09:30")
HALF_DAY_HOURS = float(os.getenv("HALF_DAY_HOURS", "4"))
NOTES_MIN_LENGTH = int(os.getenv("NOTES_MIN_LENGTH", "10"))
NOTES_MAX_LENGTH = int(os.getenv("NOTES_MAX_LENGTH", "1000"))

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
