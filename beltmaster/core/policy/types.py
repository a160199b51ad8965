"""Shared type definitions for eligibility rules.

Responsibilities:
  - Define RuleContext carrying one student's snapshot slice to the rules.
Must not:
  - Implement rule logic; derived values are plain calendar/frequency lookups.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import Optional

from beltmaster.core.domain.enums import ReasonCode
from beltmaster.core.domain.errors import DataIntegrityError
from beltmaster.core.domain.models import AttendanceRecord, BeltRank, EligibilityVerdict, Student
from beltmaster.core.ledger.attendance import present_and_total
from beltmaster.core.ledger.dates import age_of, months_since
from .rules_config import PromotionRules

# Upper bound for a stored stripe count; higher values are bad data.
STRIPES_CEILING = 10


def require_stripes(student: Student) -> int:
    value = student.stripes
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= STRIPES_CEILING:
        raise DataIntegrityError(
            ReasonCode.INVALID_STRIPES, f"Quantidade de graus inválida: {value!r}."
        )
    return value


@dataclass(frozen=True)
class RuleContext:
    student: Student
    current: BeltRank
    next_belt: Optional[BeltRank]
    ledger: list[BeltRank]
    attendance: list[AttendanceRecord]
    as_of: datetime.date
    rules: PromotionRules

    def age(self) -> Optional[int]:
        if not self.student.birth_date:
            return None
        return age_of(self.student.birth_date, self.as_of)

    def require_anchor(self) -> str:
        anchor = self.student.promotion_anchor
        if anchor is None:
            raise DataIntegrityError(
                ReasonCode.PROMOTION_DATE_MISSING, "Data de promoção não encontrada."
            )
        return anchor

    def stripes(self) -> int:
        return require_stripes(self.student)

    def months_in_rank(self) -> int:
        return months_since(self.require_anchor(), self.as_of)

    def attendance_counts(self) -> tuple[int, int]:
        return present_and_total(self.attendance, self.student.id, self.require_anchor())

    def verdict(
        self,
        eligible: bool,
        reason_code: ReasonCode,
        reason: str,
        next_belt: Optional[BeltRank] = None,
    ) -> EligibilityVerdict:
        return EligibilityVerdict(
            student_id=self.student.id,
            eligible=eligible,
            next_belt=next_belt if next_belt is not None else self.next_belt,
            reason=reason,
            reason_code=reason_code,
            current_belt=self.current,
        )
