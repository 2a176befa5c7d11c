from __future__ import annotations

import sqlite3

from src.attendance_tracker.attendance_tracker.database.bootstrap import apply_schema, list_tables
from src.attendance_tracker.attendance_tracker.database.connection import DBConfig, DatabaseConnection


def test_apply_schema_creates_missing_parent_dir_and_table(tmp_path):
    path = tmp_path / "data" / "nested" / "attendance.db"
    conn = DatabaseConnection(DBConfig(path=str(path)))
    try:
        apply_schema(conn)
        assert path.exists()
        assert list_tables(conn) == ["attendance"]
    finally:
        conn.close()


def test_apply_schema_is_idempotent_and_keeps_rows(db_path):
    conn = DatabaseConnection(DBConfig(path=str(db_path)))
    try:
        apply_schema(conn)
        conn.connect().execute("INSERT INTO attendance (studentId, timestamp) VALUES ('1', 't')")
        apply_schema(conn)

        rows = conn.connect().execute("SELECT studentId, timestamp, classId FROM attendance").fetchall()
        assert [tuple(r) for r in rows] == [("1", "t", "CLASS001")]
    finally:
        conn.close()


def test_connection_is_opened_once_and_reused(db_path):
    conn = DatabaseConnection(DBConfig(path=str(db_path)))
    try:
        assert conn.connect() is conn.connect()
    finally:
        conn.close()


def test_writes_are_visible_to_other_connections_immediately(db_path):
    conn = DatabaseConnection(DBConfig(path=str(db_path)))
    try:
        apply_schema(conn)
        conn.connect().execute("INSERT INTO attendance (studentId, timestamp) VALUES ('1', 't')")

        other = sqlite3.connect(str(db_path))
        try:
            assert other.execute("SELECT COUNT(*) FROM attendance").fetchone()[0] == 1
        finally:
            other.close()
    finally:
        conn.close()
