from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

from ..common.validators import require_present, require_scalar
from ..core.constants import DEFAULT_CLASS_ID
from ..core.exceptions import RecordNotFoundError, ValidationError
from .model import AttendanceRecord
from .parser import parse_attendance_data
from .repository import AttendanceRepository

INVALID_FORMAT = "Invalid data format"
MISSING_FIELDS = "Missing studentId or timestamp"


@dataclass(frozen=True)
class RecordedAttendance:
    student_id: str
    timestamp: str


class AttendanceService:
    """Pass-through CRUD over the attendance repository.

    Validation happens here, before any storage call. Storage failures
    (StorageError) are left to propagate to the controller.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        default_class_id: str = DEFAULT_CLASS_ID,
        report_missing: bool = False,
    ):
        self._attendance = attendance
        self._default_class_id = default_class_id
        self._report_missing = bool(report_missing)

    def record(self, data: Any, *, class_id: Optional[str] = None) -> RecordedAttendance:
        if not data or not isinstance(data, str):
            raise ValidationError(INVALID_FORMAT)

        student_id, timestamp = parse_attendance_data(data)
        require_present(student_id, timestamp, message=MISSING_FIELDS)

        self._attendance.create(
            student_id=student_id,
            timestamp=timestamp,
            class_id=class_id or self._default_class_id,
        )
        return RecordedAttendance(student_id=student_id, timestamp=timestamp)

    def list_all(self) -> Sequence[AttendanceRecord]:
        return self._attendance.list_all()

    def search(self, *, student_id: Optional[str] = None, date: Optional[str] = None) -> Sequence[AttendanceRecord]:
        return self._attendance.search(student_id=student_id or None, date=date or None)

    def update(self, record_id: str, payload: Any) -> None:
        """Full overwrite: an omitted classId resets the row to the default class."""
        if not isinstance(payload, Mapping):
            payload = {}
        student_id = payload.get("studentId")
        timestamp = payload.get("timestamp")
        class_id = payload.get("classId")

        require_scalar(student_id, timestamp, class_id, message=INVALID_FORMAT)
        require_present(student_id, timestamp, message=MISSING_FIELDS)

        updated = self._attendance.update(
            record_id=record_id,
            student_id=student_id,
            timestamp=timestamp,
            class_id=class_id or self._default_class_id,
        )
        if not updated and self._report_missing:
            raise RecordNotFoundError(f"Attendance record {record_id} not found")

    def delete(self, record_id: str) -> None:
        deleted = self._attendance.delete(record_id=record_id)
        if not deleted and self._report_missing:
            raise RecordNotFoundError(f"Attendance record {record_id} not found")
