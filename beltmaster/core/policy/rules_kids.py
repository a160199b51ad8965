"""Rules for kids-track belts.

Responsibilities:
  - Redirect green belts that reached the transition age to the adult track.
  - Gate kids promotions on the next rank's minimum age and time.
Must not:
  - Look at attendance; kids promotions are age and time based only.
Key definitions:
  - rule_kids_to_adult_transition, rule_kids_track.
"""

from __future__ import annotations

from typing import Optional

from beltmaster.core.domain.enums import ReasonCode, Track
from beltmaster.core.domain.models import EligibilityVerdict
from beltmaster.core.ledger.belt_ledger import find_rank_by_name
from .types import RuleContext


def rule_kids_to_adult_transition(ctx: RuleContext) -> Optional[EligibilityVerdict]:
    rules = ctx.rules
    if ctx.current.track != Track.KIDS:
        return None
    if rules.transition_belt_marker not in ctx.current.name:
        return None
    age = ctx.age()
    if age is None or age < rules.transition_age:
        return None
    target = find_rank_by_name(ctx.ledger, rules.transition_target_name, Track.ADULT)
    if target is None:
        return None
    return ctx.verdict(
        True,
        ReasonCode.KIDS_TO_ADULT_TRANSITION,
        f"Atingiu {age} anos na faixa {ctx.current.name} (transição para adulto).",
        next_belt=target,
    )


def rule_kids_track(ctx: RuleContext) -> Optional[EligibilityVerdict]:
    if ctx.current.track != Track.KIDS or ctx.next_belt is None:
        return None
    target = ctx.next_belt

    age = ctx.age()
    if age is None:
        return ctx.verdict(
            False, ReasonCode.BIRTH_DATE_MISSING, "Data de nascimento não encontrada."
        )
    if target.min_age is None:
        return ctx.verdict(
            False,
            ReasonCode.AGE_INSUFFICIENT,
            f"Faixa {target.name} sem idade mínima definida (idade atual {age} anos).",
        )
    if age < target.min_age:
        return ctx.verdict(
            False,
            ReasonCode.AGE_INSUFFICIENT,
            f"Idade insuficiente ({age} anos, mínimo {target.min_age} anos).",
        )

    required = target.min_time_in_months or 0
    months = ctx.months_in_rank()
    if months < required:
        return ctx.verdict(
            False,
            ReasonCode.TIME_INSUFFICIENT,
            f"Requer {required} meses na faixa (atualmente {months} meses).",
        )
    return ctx.verdict(
        True,
        ReasonCode.KIDS_REQUIREMENTS_MET,
        f"Idade: {age} anos | Tempo: {months}/{required} meses",
    )
