from __future__ import annotations

import sys
from pathlib import Path

import importlib

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.attendance_tracker.attendance_tracker.database.bootstrap import apply_schema, list_tables
from src.attendance_tracker.attendance_tracker.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    conn = DatabaseConnection(DBConfig(path=str(settings.DB_PATH)))
    try:
        apply_schema(conn)
        tables = list_tables(conn)
    finally:
        conn.close()
    print(f"OK: Applied schema.sql -> {settings.DB_PATH} (tables={len(tables)})")


if __name__ == "__main__":
    main()
