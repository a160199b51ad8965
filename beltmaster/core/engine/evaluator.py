"""Belt eligibility evaluation for a single student.

Responsibilities:
  - Resolve the current and next rank from the belt ledger.
  - Apply the ordered rule set and return one EligibilityVerdict.
  - Recover snapshot data problems into ineligible verdicts.

Inputs/Outputs:
  - Inputs: Student, belt ledger, attendance records, evaluation date.
  - Outputs: EligibilityVerdict with a user-facing reason and a ReasonCode.

Invariants:
  - Pure and deterministic for a given snapshot and date; no I/O.
  - Never raises for a single malformed student record.
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional

from ..domain.errors import DataIntegrityError
from ..domain.models import AttendanceRecord, BeltRank, EligibilityVerdict, Student
from ..ledger.belt_ledger import next_rank_in_track, require_rank
from ..ledger.dates import DateLike, parse_date
from ..policy.rules_config import DEFAULT_RULES, PromotionRules
from ..policy.ruleset import RuleSet, apply_ruleset, build_default_ruleset
from ..policy.types import RuleContext

_DEBUG_FN: Callable[[str], None] | None = None
_DEFAULT_RULESET = build_default_ruleset()


def set_evaluator_debug(fn: Callable[[str], None] | None) -> None:
    global _DEBUG_FN
    _DEBUG_FN = fn


def evaluate(
    student: Student,
    ledger: Iterable[BeltRank],
    attendance_records: Iterable[AttendanceRecord],
    now: DateLike,
    rules: PromotionRules = DEFAULT_RULES,
    ruleset: Optional[RuleSet] = None,
) -> EligibilityVerdict:
    ranks = list(ledger)
    ctx: Optional[RuleContext] = None
    try:
        current = require_rank(ranks, student.belt_id)
        ctx = RuleContext(
            student=student,
            current=current,
            next_belt=next_rank_in_track(ranks, current),
            ledger=ranks,
            attendance=list(attendance_records),
            as_of=parse_date(now, "now"),
            rules=rules,
        )
        verdict = apply_ruleset(ctx, ruleset or _DEFAULT_RULESET)
    except DataIntegrityError as exc:
        if ctx is not None:
            verdict = ctx.verdict(False, exc.reason_code, str(exc))
        else:
            verdict = EligibilityVerdict(
                student_id=student.id,
                eligible=False,
                next_belt=None,
                reason=str(exc),
                reason_code=exc.reason_code,
            )

    if _DEBUG_FN is not None:
        next_id = verdict.next_belt.id if verdict.next_belt is not None else None
        _DEBUG_FN(
            "ELIGIBILITY "
            f"student={student.id} belt={student.belt_id} stripes={student.stripes} "
            f"eligible={verdict.eligible} next={next_id} reason={verdict.reason_code.value}"
        )
    return verdict


def evaluate_all(
    students: Iterable[Student],
    ledger: Iterable[BeltRank],
    attendance_records: Iterable[AttendanceRecord],
    now: DateLike,
    rules: PromotionRules = DEFAULT_RULES,
) -> dict[str, EligibilityVerdict]:
    ranks = list(ledger)
    records = list(attendance_records)
    return {
        student.id: evaluate(student, ranks, records, now, rules=rules) for student in students
    }
