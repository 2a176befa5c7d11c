import os

DB_PATH = os.getenv("DB_PATH", "./attendance.db")

PORT = int(os.getenv("PORT", "10000"))

DEFAULT_CLASS_ID = "CLASS001"

REPORT_MISSING_RECORDS = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

DEBUG = False
TESTING = True

AUTO_INIT_DB = True
