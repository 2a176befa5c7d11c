from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance entry (student + timestamp + class)."""

    id: int
    student_id: str
    timestamp: str
    class_id: str

    def to_json(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "studentId": self.student_id,
            "timestamp": self.timestamp,
            "classId": self.class_id,
        }
