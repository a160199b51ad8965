"""Group eligible students by target rank for administrative review.

Responsibilities:
  - Run the evaluator over a snapshot and keep eligible students only.
  - Group entries by the target rank's name, ordered by target rank.
  - Attach training time since the first graduation to each entry.
Must not:
  - Add eligibility rules of its own.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from beltmaster.core.domain.errors import DataIntegrityError
from beltmaster.core.domain.models import AttendanceRecord, BeltRank, Student
from beltmaster.core.engine.evaluator import evaluate_all
from beltmaster.core.ledger.dates import DateLike, training_time
from beltmaster.core.policy.rules_config import DEFAULT_RULES, PromotionRules


@dataclass(frozen=True)
class EligibleEntry:
    student: Student
    current_belt: BeltRank
    next_belt: BeltRank
    reason: str
    # (years, months, total_months) since first graduation.
    training_time: tuple[int, int, int] = (0, 0, 0)


def _training_time(student: Student, now: DateLike) -> tuple[int, int, int]:
    try:
        return training_time(student.first_graduation_date, now)
    except DataIntegrityError:
        return 0, 0, 0


def group_eligible_by_target_rank(
    students: Iterable[Student],
    ledger: Iterable[BeltRank],
    attendance_records: Iterable[AttendanceRecord],
    now: DateLike,
    rules: PromotionRules = DEFAULT_RULES,
) -> dict[str, list[EligibleEntry]]:
    roster = list(students)
    verdicts = evaluate_all(roster, ledger, attendance_records, now, rules=rules)

    grouped: dict[str, list[EligibleEntry]] = {}
    order: dict[str, tuple[int, str]] = {}
    for student in roster:
        verdict = verdicts[student.id]
        if not verdict.eligible or verdict.next_belt is None or verdict.current_belt is None:
            continue
        target = verdict.next_belt
        grouped.setdefault(target.name, []).append(
            EligibleEntry(
                student=student,
                current_belt=verdict.current_belt,
                next_belt=target,
                reason=verdict.reason,
                training_time=_training_time(student, now),
            )
        )
        order.setdefault(target.name, (target.rank, target.name))

    return {name: grouped[name] for name in sorted(grouped, key=lambda n: order[n])}


def count_eligible(
    students: Iterable[Student],
    ledger: Iterable[BeltRank],
    attendance_records: Iterable[AttendanceRecord],
    now: DateLike,
    rules: PromotionRules = DEFAULT_RULES,
) -> int:
    verdicts = evaluate_all(students, ledger, attendance_records, now, rules=rules)
    return sum(1 for v in verdicts.values() if v.eligible)
