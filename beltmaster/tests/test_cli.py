"""Tests for the review, promote and stripe award CLIs."""

from __future__ import annotations

import sys

import pytest

from beltmaster.infra.sqlite.db import get_connection
from beltmaster.tests.fixtures import NOW, mk_attendance, mk_student, seed_db


def _make_db(tmp_path) -> str:
    db_path = tmp_path / "academy.db"
    conn = get_connection(str(db_path))
    seed_db(
        conn,
        [
            mk_student(
                "blue",
                stripes=4,
                last_promotion_date="2024-05-15",
                first_graduation_date="2020-09-10",
                student_id="s1",
                name="Joana",
            ),
            mk_student(
                "blue", stripes=1, last_promotion_date="2025-06-01", student_id="s2", name="Pedro"
            ),
        ],
        mk_attendance("s1", 8, 2) + mk_attendance("s2", 8, 2),
    )
    conn.close()
    return str(db_path)


def test_review_prints_groups(tmp_path, capsys, monkeypatch):
    from beltmaster.cli import run_graduation_review as mod

    db_path = _make_db(tmp_path)
    monkeypatch.setattr(sys, "argv", ["run_graduation_review.py", "--db", db_path, "--date", NOW])
    mod.main()

    out = capsys.readouterr().out
    assert "GRADUATION_REVIEW" in out
    assert f"date={NOW} eligible=1" in out
    assert "== Roxa (1)" in out
    assert "s1 | Joana | Azul -> Roxa |" in out
    assert "treino=5a9m" in out
    assert "[debug]" not in out


def test_review_debug_prints_each_decision(tmp_path, capsys, monkeypatch):
    from beltmaster.cli import run_graduation_review as mod

    db_path = _make_db(tmp_path)
    monkeypatch.setattr(
        sys,
        "argv",
        ["run_graduation_review.py", "--db", db_path, "--date", NOW, "--debug"],
    )
    mod.main()

    out = capsys.readouterr().out
    assert "[debug] ELIGIBILITY student=s1" in out
    assert "[debug] ELIGIBILITY student=s2" in out
    assert "reason=STRIPES_INSUFFICIENT" in out


def test_promote_success(tmp_path, capsys, monkeypatch):
    from beltmaster.cli import run_promote as mod

    db_path = _make_db(tmp_path)
    monkeypatch.setattr(
        sys, "argv", ["run_promote.py", "--db", db_path, "--student", "s1", "--date", NOW]
    )
    mod.main()

    out = capsys.readouterr().out
    assert "PROMOTED student=s1 belt=purple stripes=0 date=2026-06-15" in out


def test_promote_rejection_exits_with_code_2(tmp_path, capsys, monkeypatch):
    from beltmaster.cli import run_promote as mod

    db_path = _make_db(tmp_path)
    monkeypatch.setattr(
        sys, "argv", ["run_promote.py", "--db", db_path, "--student", "s2", "--date", NOW]
    )
    with pytest.raises(SystemExit) as excinfo:
        mod.main()

    assert excinfo.value.code == 2
    captured = capsys.readouterr()
    assert "PROMOTION_REJECTED" in captured.err
    assert "STRIPES_INSUFFICIENT" in captured.err


def test_stripe_award_dry_run_then_apply(tmp_path, capsys, monkeypatch):
    from beltmaster.cli import run_stripe_award as mod

    db_path = _make_db(tmp_path)
    monkeypatch.setattr(
        sys, "argv", ["run_stripe_award.py", "--db", db_path, "--date", NOW, "--dry-run"]
    )
    mod.main()
    out = capsys.readouterr().out
    assert "STRIPE_AWARD (dry-run)" in out
    assert "s2 | Pedro | 1 -> 2 |" in out
    assert "awarded=1 evaluated=2" in out

    monkeypatch.setattr(sys, "argv", ["run_stripe_award.py", "--db", db_path, "--date", NOW])
    mod.main()
    out = capsys.readouterr().out
    assert "awarded=1 evaluated=2" in out

    conn = get_connection(db_path, migrate=False)
    try:
        stripes = conn.execute("SELECT stripes FROM students WHERE id = 's2'").fetchone()[0]
    finally:
        conn.close()
    assert stripes == 2


def test_rules_file_changes_threshold(tmp_path, capsys, monkeypatch):
    from beltmaster.cli import run_graduation_review as mod

    db_path = _make_db(tmp_path)
    rules_path = tmp_path / "rules.json"
    rules_path.write_text('{"min_frequency_percent": 85}', encoding="utf-8")
    monkeypatch.setattr(
        sys,
        "argv",
        ["run_graduation_review.py", "--db", db_path, "--date", NOW, "--rules", str(rules_path)],
    )
    mod.main()

    out = capsys.readouterr().out
    assert f"date={NOW} eligible=0" in out
    assert "s1 | Joana" not in out
