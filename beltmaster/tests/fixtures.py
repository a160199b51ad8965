"""Belt ledger and builders shared by the tests."""

from __future__ import annotations

from typing import Optional

from beltmaster.core.domain.enums import AttendanceStatus, Track
from beltmaster.core.domain.models import AttendanceRecord, BeltRank, Student

NOW = "2026-06-15"

WHITE = BeltRank(id="white", name="Branca", rank=1, track=Track.ADULT, min_time_in_months=0)
BLUE = BeltRank(id="blue", name="Azul", rank=2, track=Track.ADULT, min_time_in_months=24)
PURPLE = BeltRank(id="purple", name="Roxa", rank=3, track=Track.ADULT, min_time_in_months=18)
BROWN = BeltRank(id="brown", name="Marrom", rank=4, track=Track.ADULT, min_time_in_months=12)
BLACK = BeltRank(id="black", name="Preta", rank=5, track=Track.ADULT, min_time_in_months=36)
CORAL = BeltRank(id="coral", name="Coral", rank=13, track=Track.ADULT, min_time_in_months=84)
RED = BeltRank(id="red", name="Vermelha", rank=14, track=Track.ADULT, min_time_in_months=0)

KIDS_WHITE = BeltRank(
    id="white_kids", name="Branca", rank=1, track=Track.KIDS, min_time_in_months=0, min_age=4, max_age=15
)
GREY = BeltRank(
    id="grey", name="Cinza", rank=3, track=Track.KIDS, min_time_in_months=6, min_age=4, max_age=15
)
YELLOW = BeltRank(
    id="yellow", name="Amarela", rank=6, track=Track.KIDS, min_time_in_months=12, min_age=7, max_age=15
)
ORANGE = BeltRank(
    id="orange", name="Laranja", rank=9, track=Track.KIDS, min_time_in_months=12, min_age=10, max_age=15
)
GREEN = BeltRank(
    id="green", name="Verde", rank=12, track=Track.KIDS, min_time_in_months=12, min_age=13, max_age=15
)

LEDGER = [
    WHITE, BLUE, PURPLE, BROWN, BLACK, CORAL, RED,
    KIDS_WHITE, GREY, YELLOW, ORANGE, GREEN,
]


def mk_student(
    belt_id: str,
    stripes: int = 0,
    birth_date: Optional[str] = "1990-01-01",
    last_promotion_date: Optional[str] = None,
    first_graduation_date: Optional[str] = None,
    student_id: str = "s1",
    name: str = "Aluno",
    status: Optional[str] = "active",
) -> Student:
    return Student(
        id=student_id,
        belt_id=belt_id,
        stripes=stripes,
        birth_date=birth_date,
        first_graduation_date=first_graduation_date,
        last_promotion_date=last_promotion_date,
        academy_id="academy-1",
        name=name,
        status=status,
    )


def mk_attendance(
    student_id: str, present: int, absent: int, start: str = "2026-01-05"
) -> list[AttendanceRecord]:
    records = []
    for i in range(present + absent):
        status = AttendanceStatus.PRESENT if i < present else AttendanceStatus.ABSENT
        records.append(
            AttendanceRecord(
                student_id=student_id,
                schedule_id=f"sch-{i}",
                date=start,
                status=status,
            )
        )
    return records


def seed_db(conn, students: list[Student], attendance: list[AttendanceRecord], ledger=None) -> None:
    conn.executemany(
        """
        INSERT INTO belt_ranks (id, name, rank, track, min_time_in_months, min_age, max_age, color)
        VALUES (?, ?, ?, ?, ?, ?, ?, ?)
        """,
        [
            (b.id, b.name, b.rank, b.track.value, b.min_time_in_months, b.min_age, b.max_age, b.color)
            for b in (ledger if ledger is not None else LEDGER)
        ],
    )
    conn.executemany(
        """
        INSERT INTO students (
            id, name, belt_id, stripes, birth_date, first_graduation_date,
            last_promotion_date, academy_id, status
        )
        VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
        """,
        [
            (
                s.id, s.name, s.belt_id, s.stripes, s.birth_date, s.first_graduation_date,
                s.last_promotion_date, s.academy_id, s.status,
            )
            for s in students
        ],
    )
    conn.executemany(
        "INSERT INTO attendance_records (student_id, schedule_id, date, status) VALUES (?, ?, ?, ?)",
        [(r.student_id, r.schedule_id, r.date, r.status.value) for r in attendance],
    )
