"""Apply an accepted eligibility verdict to a student record.

Responsibilities:
  - Produce the promoted Student value for the external store to persist.
Must not:
  - Persist, re-evaluate or ask for confirmation; callers own that.
"""

from __future__ import annotations

from dataclasses import replace

from ..domain.errors import InvalidPromotionError
from ..domain.models import EligibilityVerdict, Student
from ..ledger.dates import DateLike, format_date


def apply_promotion(student: Student, verdict: EligibilityVerdict, now: DateLike) -> Student:
    if verdict.student_id != student.id:
        raise InvalidPromotionError(
            f"verdict for student {verdict.student_id} applied to student {student.id}"
        )
    if not verdict.eligible:
        raise InvalidPromotionError(
            f"student {student.id} is not eligible: {verdict.reason_code.value}"
        )
    if verdict.next_belt is None:
        raise InvalidPromotionError(f"eligible verdict for student {student.id} has no next belt")

    return replace(
        student,
        belt_id=verdict.next_belt.id,
        stripes=0,
        last_promotion_date=format_date(now),
    )
