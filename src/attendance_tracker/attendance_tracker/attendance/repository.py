from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def create(self, *, student_id: str, timestamp: str, class_id: str) -> int:
        raise NotImplementedError

    def list_all(self) -> Sequence[AttendanceRecord]:
        """Every row, in whatever order the store returns them."""

        raise NotImplementedError

    def search(self, *, student_id: Optional[str] = None, date: Optional[str] = None) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def update(self, *, record_id: str | int, student_id: str, timestamp: str, class_id: str) -> bool:
        """Overwrite all mutable fields; returns False when no row matched."""

        raise NotImplementedError

    def delete(self, *, record_id: str | int) -> bool:
        raise NotImplementedError
