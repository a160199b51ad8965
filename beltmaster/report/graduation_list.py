"""Rows for the graduation list handed to the report renderer."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from typing import Iterable, Optional

from beltmaster.core.domain.errors import DataIntegrityError
from beltmaster.core.domain.models import AttendanceRecord, BeltRank, Student
from beltmaster.core.ledger.attendance import frequency_percent
from beltmaster.core.ledger.belt_ledger import find_rank, next_rank_in_track
from beltmaster.core.policy.rules_config import DEFAULT_RULES, PromotionRules
from beltmaster.core.policy.types import require_stripes


@dataclass(frozen=True)
class GraduationListRow:
    student: Student
    current_belt: BeltRank
    stripes: int
    frequency: float
    next_belt: Optional[BeltRank]
    is_promotion: bool
    low_frequency: bool


def _frequency(student: Student, records: list[AttendanceRecord]) -> float:
    anchor = student.promotion_anchor
    if anchor is None:
        return 0.0
    try:
        return frequency_percent(records, student.id, anchor)
    except DataIntegrityError:
        return 0.0


def _stripes(student: Student) -> int:
    try:
        return require_stripes(student)
    except DataIntegrityError:
        return 0


def _name_key(name: str) -> tuple[str, str]:
    # Accents and case do not affect alphabetical order; "Álvaro" sorts before "Bruno".
    decomposed = unicodedata.normalize("NFKD", name)
    folded = "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()
    return folded, name


def build_graduation_list(
    students: Iterable[Student],
    ledger: Iterable[BeltRank],
    attendance_records: Iterable[AttendanceRecord],
    belt_id: Optional[str] = None,
    descending: bool = False,
    rules: PromotionRules = DEFAULT_RULES,
) -> list[GraduationListRow]:
    ranks = list(ledger)
    records = list(attendance_records)

    rows: list[GraduationListRow] = []
    for student in students:
        if student.status != "active":
            continue
        if belt_id is not None and student.belt_id != belt_id:
            continue
        current = find_rank(ranks, student.belt_id)
        if current is None:
            continue
        target = next_rank_in_track(ranks, current)
        frequency = _frequency(student, records)
        rows.append(
            GraduationListRow(
                student=student,
                current_belt=current,
                stripes=_stripes(student),
                frequency=frequency,
                next_belt=target,
                is_promotion=target is not None and target.id != current.id,
                low_frequency=frequency < rules.low_frequency_percent,
            )
        )

    sign = -1 if descending else 1
    rows.sort(
        key=lambda r: (sign * r.current_belt.rank, sign * r.stripes, _name_key(r.student.name))
    )
    return rows
