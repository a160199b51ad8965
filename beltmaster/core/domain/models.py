"""Domain models for belts, students, attendance and eligibility verdicts.

Responsibilities:
  - Define immutable data carriers consumed and produced by the engine.

Inputs/Outputs:
  - Students, belt ranks and attendance records arrive as a read-only snapshot.
  - Verdicts are derived per evaluation and never persisted.

Invariants:
  - Models must be deterministic containers with no business rules.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .enums import AttendanceStatus, ReasonCode, Track


@dataclass(frozen=True)
class BeltRank:
    id: str
    name: str
    rank: int
    track: Track
    min_time_in_months: int = 0
    min_age: Optional[int] = None
    max_age: Optional[int] = None
    color: Optional[str] = None


@dataclass(frozen=True)
class Student:
    id: str
    belt_id: str
    stripes: int = 0
    birth_date: Optional[str] = None
    first_graduation_date: Optional[str] = None
    last_promotion_date: Optional[str] = None
    academy_id: Optional[str] = None
    name: str = ""
    status: Optional[str] = None

    @property
    def promotion_anchor(self) -> Optional[str]:
        # Elapsed time and frequency are measured from this date.
        return self.last_promotion_date or self.first_graduation_date or None


@dataclass(frozen=True)
class AttendanceRecord:
    student_id: str
    schedule_id: str
    date: str
    status: AttendanceStatus


@dataclass(frozen=True)
class EligibilityVerdict:
    student_id: str
    eligible: bool
    next_belt: Optional[BeltRank]
    reason: str
    reason_code: ReasonCode
    current_belt: Optional[BeltRank] = None


@dataclass(frozen=True)
class StripeVerdict:
    student_id: str
    eligible: bool
    reason: str
    reason_code: ReasonCode
    frequency: float = 0.0


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of one academy's data for an evaluation pass."""
    students: list[Student] = field(default_factory=list)
    ledger: list[BeltRank] = field(default_factory=list)
    attendance: list[AttendanceRecord] = field(default_factory=list)

    def find_student(self, student_id: str) -> Optional[Student]:
        for student in self.students:
            if student.id == student_id:
                return student
        return None
