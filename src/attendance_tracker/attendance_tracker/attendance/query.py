from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

SELECT_COLUMNS = "SELECT id, studentId, timestamp, classId FROM attendance"


@dataclass
class AttendanceQuery:
    """Builds the search statement from a match-all base plus optional filters.

    Values are only ever bound as parameters.
    """

    clauses: List[str] = field(default_factory=lambda: ["1=1"])
    params: List[object] = field(default_factory=list)

    def student(self, student_id: Optional[str]) -> "AttendanceQuery":
        if student_id:
            self.clauses.append("studentId = ?")
            self.params.append(student_id)
        return self

    def timestamp_prefix(self, prefix: Optional[str]) -> "AttendanceQuery":
        # substr keeps the match exact: LIKE would fold ASCII case and treat % and _ as wildcards.
        if prefix:
            self.clauses.append("substr(timestamp, 1, ?) = ?")
            self.params.extend([len(prefix), prefix])
        return self

    def build(self) -> Tuple[str, Tuple[object, ...]]:
        return f"{SELECT_COLUMNS} WHERE {' AND '.join(self.clauses)}", tuple(self.params)


def build_search_query(*, student_id: Optional[str] = None, date: Optional[str] = None) -> Tuple[str, Tuple[object, ...]]:
    return AttendanceQuery().student(student_id).timestamp_prefix(date).build()
