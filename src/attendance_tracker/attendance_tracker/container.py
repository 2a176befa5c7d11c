from __future__ import annotations

from dataclasses import dataclass

from .attendance.service import AttendanceService
from .attendance.sqlite_attendance_repository import SQLiteAttendanceRepository
from .core.constants import DEFAULT_CLASS_ID
from .database.connection import DBConfig, DatabaseConnection


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    attendance_repo: SQLiteAttendanceRepository

    attendance_service: AttendanceService


def build_container(
    *,
    db_path: str,
    default_class_id: str = DEFAULT_CLASS_ID,
    report_missing: bool = False,
) -> Container:
    conn = DatabaseConnection(DBConfig(path=str(db_path)))
    conn.connect()

    attendance_repo = SQLiteAttendanceRepository(conn)

    attendance_service = AttendanceService(
        attendance_repo,
        default_class_id=default_class_id,
        report_missing=report_missing,
    )

    return Container(
        conn=conn,
        attendance_repo=attendance_repo,
        attendance_service=attendance_service,
    )
