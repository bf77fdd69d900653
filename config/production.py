import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "workspace_attendance"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

LATE_CUTOFF = os.getenv("LATE_CUTOFF", "09:30")
HALF_DAY_HOURS = float(os.getenv("HALF_DAY_HOURS", "4"))
NOTES_MIN_LENGTH = int(os.getenv("NOTES_MIN_LENGTH", "10"))
NOTES_MAX_LENGTH = int(os.getenv("NOTES_MAX_LENGTH", "1000"))

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
