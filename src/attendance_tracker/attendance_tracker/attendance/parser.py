from __future__ import annotations

from typing import Tuple


def parse_attendance_data(data: str) -> Tuple[str, str]:
    """Split a raw "studentId,timestamp" body into its two fields.

    Fields are not trimmed or validated. Without a comma the timestamp is "";
    anything after a second comma is dropped.
    """
    parts = data.split(",")
    student_id = parts[0]
    timestamp = parts[1] if len(parts) > 1 else ""
    return student_id, timestamp
