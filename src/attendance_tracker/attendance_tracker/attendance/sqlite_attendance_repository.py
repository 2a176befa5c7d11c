from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.sqlite_base import db_cursor, fetchall
from .model import AttendanceRecord
from .query import SELECT_COLUMNS, build_search_query
from .repository import AttendanceRepository


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        id=int(r["id"]),
        student_id=r["studentId"],
        timestamp=r["timestamp"],
        class_id=r["classId"],
    )


class SQLiteAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, student_id: str, timestamp: str, class_id: str) -> int:
        with db_cursor(self._conn_factory, action="insert attendance") as cur:
            cur.execute(
                "INSERT INTO attendance (studentId, timestamp, classId) VALUES (?, ?, ?)",
                (student_id, timestamp, class_id),
            )
            return int(cur.lastrowid)

    def list_all(self) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory, action="fetch attendance") as cur:
            cur.execute(SELECT_COLUMNS)
            return [_to_record(r) for r in fetchall(cur)]

    def search(self, *, student_id: Optional[str] = None, date: Optional[str] = None) -> Sequence[AttendanceRecord]:
        sql, params = build_search_query(student_id=student_id, date=date)
        with db_cursor(self._conn_factory, action="search attendance") as cur:
            cur.execute(sql, params)
            return [_to_record(r) for r in fetchall(cur)]

    def update(self, *, record_id: str | int, student_id: str, timestamp: str, class_id: str) -> bool:
        with db_cursor(self._conn_factory, action="update attendance") as cur:
            cur.execute(
                "UPDATE attendance SET studentId = ?, timestamp = ?, classId = ? WHERE id = ? RETURNING id",
                (student_id, timestamp, class_id, record_id),
            )
            return bool(cur.fetchall())

    def delete(self, *, record_id: str | int) -> bool:
        with db_cursor(self._conn_factory, action="delete attendance") as cur:
            cur.execute("DELETE FROM attendance WHERE id = ? RETURNING id", (record_id,))
            return bool(cur.fetchall())
