"""Port definitions for app-level dependencies.

Responsibilities:
  - Define interface contracts for snapshot loading and student persistence.
Must not:
  - Implement logic; interfaces only.
"""

from __future__ import annotations

from typing import Optional, Protocol

from beltmaster.core.domain.enums import ReasonCode
from beltmaster.core.domain.models import Snapshot, Student


class SnapshotProvider(Protocol):
    def load_snapshot(self) -> Snapshot:
        ...


class StudentStore(Protocol):
    def save_student(self, student: Student) -> None:
        ...


class PromotionLog(Protocol):
    def insert_entry(
        self,
        run_id: str,
        before: Student,
        after: Student,
        kind: str,
        reason_code: Optional[ReasonCode],
        reason: str,
    ) -> None:
        ...
