import os

DB_PATH = os.getenv("DB_PATH", "./attendance.db")

PORT = int(os.getenv("PORT", "10000"))

# Class id stored when the client does not send one
DEFAULT_CLASS_ID = os.getenv("DEFAULT_CLASS_ID", "CLASS001")

# If enabled, update/delete of an unknown id answers 404 instead of a silent success
REPORT_MISSING_RECORDS = bool(int(os.getenv("REPORT_MISSING_RECORDS", "0")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
