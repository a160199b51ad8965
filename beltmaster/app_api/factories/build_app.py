"""Construct a fully wired app instance for graduation review and promotion.

Responsibilities:
  - Assemble snapshot reader, student store and promotion log over one connection.
Must not:
  - Implement eligibility logic; composition only.
"""

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Optional

from beltmaster.app_api.facade import GraduationApplication
from beltmaster.core.policy.rules_config import DEFAULT_RULES, load_promotion_rules
from beltmaster.infra.sqlite.repos.student_repo import PromotionLogRepo, StudentRepo
from beltmaster.infra.sqlite.snapshot_reader import SqliteSnapshotReader


def build_graduation_app(
    conn: sqlite3.Connection,
    academy_id: Optional[str] = None,
    rules_path: Optional[str | Path] = None,
) -> GraduationApplication:
    rules = load_promotion_rules(rules_path) if rules_path else DEFAULT_RULES
    return GraduationApplication(
        conn=conn,
        snapshot_provider=SqliteSnapshotReader(conn, academy_id=academy_id),
        student_store=StudentRepo(conn),
        promotion_log=PromotionLogRepo(conn),
        rules=rules,
    )
