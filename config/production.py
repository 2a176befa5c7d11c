import os

DB_PATH = os.getenv("DB_PATH", "/data/attendance.db")

PORT = int(os.getenv("PORT", "10000"))

DEFAULT_CLASS_ID = os.getenv("DEFAULT_CLASS_ID", "CLASS001")

REPORT_MISSING_RECORDS = bool(int(os.getenv("REPORT_MISSING_RECORDS", "0")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
