from __future__ import annotations

from typing import Callable, Iterable, Optional

from beltmaster.core.domain.enums import ReasonCode
from beltmaster.core.domain.models import EligibilityVerdict
from .types import RuleContext

Rule = Callable[[RuleContext], Optional[EligibilityVerdict]]


def rule_terminal_rank(ctx: RuleContext) -> Optional[EligibilityVerdict]:
    if ctx.next_belt is None:
        return ctx.verdict(False, ReasonCode.MAX_RANK_REACHED, "Graduação máxima atingida.")
    return None


def first_match(rules: Iterable[Rule], ctx: RuleContext) -> Optional[EligibilityVerdict]:
    for rule in rules:
        verdict = rule(ctx)
        if verdict is not None:
            return verdict
    return None


def fmt_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"
