"""Rules for adult-track belts.

Responsibilities:
  - Gate promotions on attendance frequency, stripes and time in rank.
  - Apply the black and coral belt stripe/time thresholds.
Must not:
  - Consider age; adult promotions ignore the birth date.
Key definitions:
  - rule_adult_track, stripe_and_time_gate.
"""

from __future__ import annotations

from typing import Optional

from beltmaster.core.domain.enums import ReasonCode, Track
from beltmaster.core.domain.models import BeltRank, EligibilityVerdict
from beltmaster.core.ledger.attendance import above_percent, round_percent
from .rules_common import fmt_number
from .rules_config import PromotionRules
from .types import RuleContext


def stripe_and_time_gate(current: BeltRank, rules: PromotionRules) -> tuple[int, int, str]:
    """Return (required_stripes, required_months, label) for the current belt."""
    if current.name == rules.black_belt_name:
        return (
            rules.black_belt_required_stripes,
            rules.black_belt_required_months,
            f" na faixa {current.name.lower()}",
        )
    if current.name == rules.coral_belt_name:
        return (
            rules.coral_belt_required_stripes,
            rules.coral_belt_required_months,
            f" na faixa {current.name.lower()}",
        )
    return rules.default_required_stripes, current.min_time_in_months, ""


def rule_adult_track(ctx: RuleContext) -> Optional[EligibilityVerdict]:
    if ctx.current.track != Track.ADULT or ctx.next_belt is None:
        return None
    rules = ctx.rules

    present, total = ctx.attendance_counts()
    frequency = present / total * 100 if total else 0.0
    shown = round_percent(frequency)
    if not above_percent(present, total, rules.min_frequency_percent):
        return ctx.verdict(
            False,
            ReasonCode.FREQUENCY_INSUFFICIENT,
            f"Requer >{fmt_number(rules.min_frequency_percent)}% de frequência "
            f"(atualmente {shown}%).",
        )

    required_stripes, required_months, label = stripe_and_time_gate(ctx.current, rules)
    stripes = ctx.stripes()
    if stripes < required_stripes:
        return ctx.verdict(
            False,
            ReasonCode.STRIPES_INSUFFICIENT,
            f"Requer {required_stripes} graus{label} (atualmente {stripes}).",
        )

    months = ctx.months_in_rank()
    if months < required_months:
        return ctx.verdict(
            False,
            ReasonCode.TIME_INSUFFICIENT,
            f"Requer {required_months} meses na faixa (atualmente {months} meses).",
        )
    return ctx.verdict(
        True,
        ReasonCode.ADULT_REQUIREMENTS_MET,
        f"Cumpriu {months}/{required_months} meses com {stripes} graus "
        f"e {shown}% de frequência.",
    )
