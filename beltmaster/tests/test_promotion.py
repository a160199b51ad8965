from __future__ import annotations

import datetime

import pytest

from beltmaster.core.domain.enums import ReasonCode
from beltmaster.core.domain.errors import InvalidPromotionError
from beltmaster.core.domain.models import EligibilityVerdict
from beltmaster.core.engine.evaluator import evaluate
from beltmaster.core.engine.promotion import apply_promotion
from beltmaster.tests.fixtures import BLUE, LEDGER, NOW, PURPLE, mk_attendance, mk_student


def _eligible_blue():
    student = mk_student(
        "blue",
        stripes=4,
        last_promotion_date="2024-05-15",
        first_graduation_date="2019-02-01",
        name="Joana",
    )
    verdict = evaluate(student, LEDGER, mk_attendance("s1", 8, 2), NOW)
    assert verdict.eligible is True
    return student, verdict


def test_apply_promotion_moves_to_next_belt_and_resets_stripes():
    student, verdict = _eligible_blue()
    promoted = apply_promotion(student, verdict, NOW)

    assert promoted.belt_id == PURPLE.id
    assert promoted.stripes == 0
    assert promoted.last_promotion_date == "2026-06-15"
    assert promoted.first_graduation_date == "2019-02-01"
    assert promoted.birth_date == student.birth_date
    assert promoted.name == "Joana"
    assert promoted.academy_id == student.academy_id
    # Input is left untouched.
    assert student.belt_id == BLUE.id
    assert student.stripes == 4


@pytest.mark.parametrize(
    "now", [datetime.date(2026, 6, 15), datetime.datetime(2026, 6, 15, 18, 30)]
)
def test_apply_promotion_accepts_date_objects(now):
    student, verdict = _eligible_blue()
    assert apply_promotion(student, verdict, now).last_promotion_date == "2026-06-15"


def test_apply_promotion_rejects_ineligible_verdict():
    student = mk_student("blue", stripes=2, last_promotion_date="2024-05-15")
    verdict = evaluate(student, LEDGER, mk_attendance("s1", 8, 2), NOW)

    with pytest.raises(InvalidPromotionError):
        apply_promotion(student, verdict, NOW)


def test_apply_promotion_rejects_eligible_verdict_without_next_belt():
    student = mk_student("blue")
    verdict = EligibilityVerdict(
        student_id="s1",
        eligible=True,
        next_belt=None,
        reason="",
        reason_code=ReasonCode.ADULT_REQUIREMENTS_MET,
    )
    with pytest.raises(InvalidPromotionError):
        apply_promotion(student, verdict, NOW)


def test_apply_promotion_rejects_verdict_for_other_student():
    _, verdict = _eligible_blue()
    other = mk_student("blue", stripes=4, student_id="s2")

    with pytest.raises(InvalidPromotionError):
        apply_promotion(other, verdict, NOW)
