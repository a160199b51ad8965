"""Tests for the automatic stripe award."""

from __future__ import annotations

import pytest

from beltmaster.core.domain.enums import ReasonCode, Track
from beltmaster.core.domain.errors import InvalidPromotionError
from beltmaster.core.domain.models import BeltRank
from beltmaster.core.engine.stripes import apply_stripe_award, evaluate_stripe_award, is_black_belt
from beltmaster.tests.fixtures import BLACK, BLUE, LEDGER, NOW, mk_attendance, mk_student


def test_threshold_frequency_and_anchor_are_inclusive():
    student = mk_student("blue", stripes=1, last_promotion_date="2025-12-15")
    verdict = evaluate_stripe_award(student, LEDGER, mk_attendance("s1", 7, 3), NOW)

    assert verdict.eligible is True
    assert verdict.reason_code == ReasonCode.STRIPE_REQUIREMENTS_MET
    assert verdict.frequency == pytest.approx(70.0)
    assert "2º grau" in verdict.reason


def test_anchor_one_day_too_recent():
    student = mk_student("blue", stripes=1, last_promotion_date="2025-12-16")
    verdict = evaluate_stripe_award(student, LEDGER, mk_attendance("s1", 10, 0), NOW)

    assert verdict.eligible is False
    assert verdict.reason_code == ReasonCode.TIME_INSUFFICIENT
    assert "2025-12-15" in verdict.reason


def test_low_frequency_blocks_stripe():
    student = mk_student("blue", stripes=1, last_promotion_date="2025-06-01")
    verdict = evaluate_stripe_award(student, LEDGER, mk_attendance("s1", 6, 4), NOW)

    assert verdict.eligible is False
    assert verdict.reason_code == ReasonCode.FREQUENCY_INSUFFICIENT
    assert verdict.frequency == pytest.approx(60.0)


def test_no_attendance_blocks_stripe():
    student = mk_student("blue", stripes=1, last_promotion_date="2025-06-01")
    verdict = evaluate_stripe_award(student, LEDGER, mk_attendance("s2", 10, 0), NOW)

    assert verdict.eligible is False
    assert verdict.reason_code == ReasonCode.NO_ATTENDANCE


def test_max_stripes_for_regular_belt():
    student = mk_student("blue", stripes=4, last_promotion_date="2020-01-01")
    verdict = evaluate_stripe_award(student, LEDGER, mk_attendance("s1", 10, 0), NOW)

    assert verdict.eligible is False
    assert verdict.reason_code == ReasonCode.MAX_STRIPES_REACHED


def test_black_belt_interval_and_ceiling():
    records = mk_attendance("s1", 10, 0)

    at_threshold = mk_student("black", stripes=4, last_promotion_date="2023-06-15")
    verdict = evaluate_stripe_award(at_threshold, LEDGER, records, NOW)
    assert verdict.eligible is True
    assert "5º grau" in verdict.reason

    too_recent = mk_student("black", stripes=4, last_promotion_date="2023-06-16")
    verdict = evaluate_stripe_award(too_recent, LEDGER, records, NOW)
    assert verdict.reason_code == ReasonCode.TIME_INSUFFICIENT

    full = mk_student("black", stripes=6, last_promotion_date="2010-01-01")
    verdict = evaluate_stripe_award(full, LEDGER, records, NOW)
    assert verdict.reason_code == ReasonCode.MAX_STRIPES_REACHED


def test_black_belt_detection_is_case_insensitive():
    assert is_black_belt(BLACK)
    assert is_black_belt(BeltRank(id="x", name="Faixa Preta", rank=9, track=Track.ADULT))
    assert is_black_belt(BeltRank(id="y", name="Black Belt", rank=9, track=Track.ADULT))
    assert not is_black_belt(BLUE)


def test_unknown_belt_and_missing_anchor_become_verdicts():
    verdict = evaluate_stripe_award(mk_student("ghost"), LEDGER, [], NOW)
    assert verdict.reason_code == ReasonCode.CURRENT_RANK_NOT_FOUND

    verdict = evaluate_stripe_award(mk_student("blue", stripes=1), LEDGER, [], NOW)
    assert verdict.reason_code == ReasonCode.PROMOTION_DATE_MISSING


def test_apply_stripe_award_increments_and_stamps_date():
    student = mk_student("blue", stripes=1, last_promotion_date="2025-12-15")
    verdict = evaluate_stripe_award(student, LEDGER, mk_attendance("s1", 8, 2), NOW)
    updated = apply_stripe_award(student, verdict, NOW)

    assert updated.stripes == 2
    assert updated.belt_id == "blue"
    assert updated.last_promotion_date == "2026-06-15"


def test_apply_stripe_award_rejects_misuse():
    student = mk_student("blue", stripes=1, last_promotion_date="2026-06-01")
    blocked = evaluate_stripe_award(student, LEDGER, mk_attendance("s1", 8, 2), NOW)
    with pytest.raises(InvalidPromotionError):
        apply_stripe_award(student, blocked, NOW)

    ok_student = mk_student("blue", stripes=1, last_promotion_date="2025-01-01")
    ok = evaluate_stripe_award(ok_student, LEDGER, mk_attendance("s1", 8, 2), NOW)
    with pytest.raises(InvalidPromotionError):
        apply_stripe_award(mk_student("blue", student_id="s2"), ok, NOW)


def test_invalid_stripe_count_becomes_verdict():
    student = mk_student("blue", stripes=None, last_promotion_date="2025-01-01")
    verdict = evaluate_stripe_award(student, LEDGER, mk_attendance("s1", 8, 2), NOW)

    assert verdict.eligible is False
    assert verdict.reason_code == ReasonCode.INVALID_STRIPES
