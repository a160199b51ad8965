from __future__ import annotations

from dataclasses import dataclass
from typing import List

from beltmaster.core.domain.enums import ReasonCode
from beltmaster.core.domain.errors import DataIntegrityError
from beltmaster.core.domain.models import EligibilityVerdict
from .rules_adult import rule_adult_track
from .rules_common import Rule, first_match, rule_terminal_rank
from .rules_kids import rule_kids_to_adult_transition, rule_kids_track
from .types import RuleContext


@dataclass(frozen=True)
class RuleSet:
    # Ordered precedence: overrides > blockers > track rules
    overrides: List[Rule]
    blockers: List[Rule]
    track_rules: List[Rule]

    def ordered(self) -> List[Rule]:
        return self.overrides + self.blockers + self.track_rules


def build_default_ruleset() -> RuleSet:
    return RuleSet(
        overrides=[rule_kids_to_adult_transition],
        blockers=[rule_terminal_rank],
        track_rules=[rule_kids_track, rule_adult_track],
    )


def apply_ruleset(ctx: RuleContext, ruleset: RuleSet) -> EligibilityVerdict:
    verdict = first_match(ruleset.ordered(), ctx)
    if verdict is None:
        raise DataIntegrityError(
            ReasonCode.CURRENT_RANK_NOT_FOUND,
            f"Faixa {ctx.current.name} sem regras de graduação para a trilha "
            f"{ctx.current.track.value}.",
        )
    return verdict
