"""Automatic stripe award within the current belt.

Responsibilities:
  - Decide whether a student earns one more stripe on the current belt.
  - Produce the updated Student value for an accepted stripe verdict.

Invariants:
  - Black belts use their own interval and stripe ceiling.
  - Frequency threshold is inclusive here, unlike the belt promotion gate.
  - At least one attendance record since the anchor is required.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from ..domain.enums import ReasonCode
from ..domain.errors import DataIntegrityError, InvalidPromotionError
from ..domain.models import AttendanceRecord, BeltRank, Student, StripeVerdict
from ..ledger.attendance import above_percent, present_and_total, round_percent
from ..ledger.belt_ledger import require_rank
from ..ledger.dates import DateLike, format_date, parse_date, shift_months
from ..policy.rules_config import DEFAULT_RULES, PromotionRules
from ..policy.types import require_stripes

_BLACK_BELT_MARKERS = ("preta", "black")


def is_black_belt(belt: BeltRank) -> bool:
    lowered = belt.name.lower()
    return any(marker in lowered for marker in _BLACK_BELT_MARKERS)


def _blocked(student: Student, code: ReasonCode, reason: str, frequency: float = 0.0) -> StripeVerdict:
    return StripeVerdict(
        student_id=student.id,
        eligible=False,
        reason=reason,
        reason_code=code,
        frequency=frequency,
    )


def evaluate_stripe_award(
    student: Student,
    ledger: Iterable[BeltRank],
    attendance_records: Iterable[AttendanceRecord],
    now: DateLike,
    rules: PromotionRules = DEFAULT_RULES,
) -> StripeVerdict:
    try:
        belt = require_rank(ledger, student.belt_id)
        if is_black_belt(belt):
            interval, max_stripes = rules.black_stripe_interval_months, rules.black_stripe_max
        else:
            interval, max_stripes = rules.stripe_interval_months, rules.stripe_max

        stripes = require_stripes(student)
        if stripes >= max_stripes:
            return _blocked(
                student,
                ReasonCode.MAX_STRIPES_REACHED,
                f"Faixa {belt.name} já possui {stripes}/{max_stripes} graus.",
            )

        anchor = student.promotion_anchor
        if anchor is None:
            return _blocked(
                student, ReasonCode.PROMOTION_DATE_MISSING, "Data de promoção não encontrada."
            )
        threshold = shift_months(now, -interval)
        if parse_date(anchor, "promotion_date") > threshold:
            return _blocked(
                student,
                ReasonCode.TIME_INSUFFICIENT,
                f"Requer {interval} meses desde {anchor} (limite {threshold.isoformat()}).",
            )

        present, total = present_and_total(attendance_records, student.id, anchor)
        if total == 0:
            return _blocked(
                student, ReasonCode.NO_ATTENDANCE, f"Sem registros de presença desde {anchor}."
            )
        frequency = present / total * 100
        required = rules.stripe_min_frequency_ratio * 100
        if not above_percent(present, total, required, inclusive=True):
            return _blocked(
                student,
                ReasonCode.FREQUENCY_INSUFFICIENT,
                f"Requer {round_percent(required)}% de frequência "
                f"(atualmente {round_percent(frequency)}%).",
                frequency,
            )
    except DataIntegrityError as exc:
        return _blocked(student, exc.reason_code, str(exc))

    return StripeVerdict(
        student_id=student.id,
        eligible=True,
        reason=f"Recebe o {stripes + 1}º grau (frequência: {round_percent(frequency)}%).",
        reason_code=ReasonCode.STRIPE_REQUIREMENTS_MET,
        frequency=frequency,
    )


def apply_stripe_award(student: Student, verdict: StripeVerdict, now: DateLike) -> Student:
    if verdict.student_id != student.id:
        raise InvalidPromotionError(
            f"stripe verdict for student {verdict.student_id} applied to student {student.id}"
        )
    if not verdict.eligible:
        raise InvalidPromotionError(
            f"student {student.id} cannot receive a stripe: {verdict.reason_code.value}"
        )
    return replace(
        student,
        stripes=student.stripes + 1,
        last_promotion_date=format_date(now),
    )
