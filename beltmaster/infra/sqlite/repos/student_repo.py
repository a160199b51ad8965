"""SQLite repository for student promotion fields and the promotion log.

Responsibilities:
  - Persist belt, stripes and promotion date of an updated Student.
  - Record each applied promotion or stripe award for audit.
Must not:
  - Decide eligibility; persistence only.
"""

from __future__ import annotations

import sqlite3
from typing import Optional

from beltmaster.core.domain.enums import ReasonCode
from beltmaster.core.domain.models import Student


class StudentRepo:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def save_student(self, student: Student) -> None:
        cursor = self._conn.execute(
            """
            UPDATE students
            SET belt_id = ?, stripes = ?, last_promotion_date = ?
            WHERE id = ?
            """,
            (student.belt_id, student.stripes, student.last_promotion_date, student.id),
        )
        if cursor.rowcount == 0:
            raise ValueError(f"student not found: {student.id}")


class PromotionLogRepo:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def insert_entry(
        self,
        run_id: str,
        before: Student,
        after: Student,
        kind: str,
        reason_code: Optional[ReasonCode],
        reason: str,
    ) -> None:
        self._conn.execute(
            """
            INSERT INTO promotion_log (
                run_id, student_id, date, kind, from_belt_id, to_belt_id,
                stripes, reason_code, reason
            )
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                run_id,
                after.id,
                after.last_promotion_date,
                kind,
                before.belt_id,
                after.belt_id,
                after.stripes,
                reason_code.value if reason_code is not None else None,
                reason,
            ),
        )
