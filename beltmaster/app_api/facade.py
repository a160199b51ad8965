from __future__ import annotations

import sqlite3
import uuid
from dataclasses import dataclass

from beltmaster.core.domain.errors import InvalidPromotionError
from beltmaster.core.domain.models import Student, StripeVerdict
from beltmaster.core.engine.evaluator import evaluate
from beltmaster.core.engine.promotion import apply_promotion
from beltmaster.core.engine.stripes import apply_stripe_award, evaluate_stripe_award
from beltmaster.core.ledger.dates import DateLike
from beltmaster.core.policy.rules_config import DEFAULT_RULES, PromotionRules
from beltmaster.report.grouping import EligibleEntry, group_eligible_by_target_rank
from .ports import PromotionLog, SnapshotProvider, StudentStore


@dataclass(frozen=True)
class StripeAwardOutcome:
    student: Student
    verdict: StripeVerdict
    updated: Student | None


class GraduationApplication:
    def __init__(
        self,
        conn: sqlite3.Connection,
        snapshot_provider: SnapshotProvider,
        student_store: StudentStore,
        promotion_log: PromotionLog,
        rules: PromotionRules = DEFAULT_RULES,
    ) -> None:
        self._conn = conn
        self._snapshot_provider = snapshot_provider
        self._student_store = student_store
        self._promotion_log = promotion_log
        self._rules = rules

    def review(self, now: DateLike) -> dict[str, list[EligibleEntry]]:
        snapshot = self._snapshot_provider.load_snapshot()
        return group_eligible_by_target_rank(
            snapshot.students, snapshot.ledger, snapshot.attendance, now, rules=self._rules
        )

    def promote(self, student_id: str, now: DateLike) -> Student:
        run_id = str(uuid.uuid4())

        self._conn.execute("BEGIN")
        try:
            # Re-read inside the transaction so a stale review never promotes.
            snapshot = self._snapshot_provider.load_snapshot()
            student = snapshot.find_student(student_id)
            if student is None:
                raise InvalidPromotionError(f"student not found: {student_id}")

            verdict = evaluate(
                student, snapshot.ledger, snapshot.attendance, now, rules=self._rules
            )
            promoted = apply_promotion(student, verdict, now)
            self._student_store.save_student(promoted)
            self._promotion_log.insert_entry(
                run_id=run_id,
                before=student,
                after=promoted,
                kind="belt",
                reason_code=verdict.reason_code,
                reason=verdict.reason,
            )
            self._conn.commit()
            return promoted
        except Exception:
            self._conn.rollback()
            raise

    def award_stripes(self, now: DateLike, dry_run: bool = False) -> list[StripeAwardOutcome]:
        run_id = str(uuid.uuid4())
        outcomes: list[StripeAwardOutcome] = []

        self._conn.execute("BEGIN")
        try:
            snapshot = self._snapshot_provider.load_snapshot()
            for student in snapshot.students:
                if student.status != "active":
                    continue
                verdict = evaluate_stripe_award(
                    student, snapshot.ledger, snapshot.attendance, now, rules=self._rules
                )
                updated: Student | None = None
                if verdict.eligible:
                    updated = apply_stripe_award(student, verdict, now)
                    if not dry_run:
                        self._student_store.save_student(updated)
                        self._promotion_log.insert_entry(
                            run_id=run_id,
                            before=student,
                            after=updated,
                            kind="stripe",
                            reason_code=verdict.reason_code,
                            reason=verdict.reason,
                        )
                outcomes.append(StripeAwardOutcome(student=student, verdict=verdict, updated=updated))

            if dry_run:
                self._conn.rollback()
            else:
                self._conn.commit()
            return outcomes
        except Exception:
            self._conn.rollback()
            raise
