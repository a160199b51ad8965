"""SQLite reader producing an evaluation Snapshot.

Responsibilities:
  - Load belt ranks, students and attendance records into domain models.
Must not:
  - Evaluate eligibility; mapping only.
"""

from __future__ import annotations

import sqlite3
from typing import Optional

from beltmaster.core.domain.enums import AttendanceStatus, Track
from beltmaster.core.domain.models import AttendanceRecord, BeltRank, Snapshot, Student

_BELT_COLUMNS = "id, name, rank, track, min_time_in_months, min_age, max_age, color"
_STUDENT_COLUMNS = (
    "id, belt_id, stripes, birth_date, first_graduation_date, "
    "last_promotion_date, academy_id, name, status"
)


class SqliteSnapshotReader:
    def __init__(self, conn: sqlite3.Connection, academy_id: Optional[str] = None) -> None:
        self._conn = conn
        self._academy_id = academy_id

    def load_snapshot(self) -> Snapshot:
        students = self.load_students()
        return Snapshot(
            students=students,
            ledger=self.load_ledger(),
            attendance=self.load_attendance({s.id for s in students}),
        )

    def load_ledger(self) -> list[BeltRank]:
        rows = self._conn.execute(
            f"SELECT {_BELT_COLUMNS} FROM belt_ranks ORDER BY rank, id"
        ).fetchall()
        ledger: list[BeltRank] = []
        for row in rows:
            try:
                track = Track(row[3])
            except ValueError as exc:
                raise ValueError(f"belt_ranks.track invalid for id={row[0]}: {row[3]!r}") from exc
            ledger.append(
                BeltRank(
                    id=row[0],
                    name=row[1],
                    rank=int(row[2]),
                    track=track,
                    min_time_in_months=int(row[4] or 0),
                    min_age=row[5],
                    max_age=row[6],
                    color=row[7],
                )
            )
        return ledger

    def load_students(self) -> list[Student]:
        if self._academy_id is None:
            rows = self._conn.execute(
                f"SELECT {_STUDENT_COLUMNS} FROM students ORDER BY id"
            ).fetchall()
        else:
            rows = self._conn.execute(
                f"SELECT {_STUDENT_COLUMNS} FROM students WHERE academy_id = ? ORDER BY id",
                (self._academy_id,),
            ).fetchall()
        return [
            Student(
                id=row[0],
                belt_id=row[1],
                stripes=int(row[2] or 0),
                birth_date=row[3],
                first_graduation_date=row[4],
                last_promotion_date=row[5],
                academy_id=row[6],
                name=row[7] or "",
                status=row[8],
            )
            for row in rows
        ]

    def load_attendance(self, student_ids: Optional[set[str]] = None) -> list[AttendanceRecord]:
        rows = self._conn.execute(
            """
            SELECT student_id, schedule_id, date, status
            FROM attendance_records
            ORDER BY date, student_id, schedule_id
            """
        ).fetchall()
        records: list[AttendanceRecord] = []
        for row in rows:
            if student_ids is not None and row[0] not in student_ids:
                continue
            try:
                status = AttendanceStatus(row[3])
            except ValueError as exc:
                raise ValueError(
                    f"attendance_records.status invalid for student_id={row[0]}: {row[3]!r}"
                ) from exc
            records.append(
                AttendanceRecord(student_id=row[0], schedule_id=row[1], date=row[2], status=status)
            )
        return records
