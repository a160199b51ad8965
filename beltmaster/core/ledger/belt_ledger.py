"""Ordering and lookup helpers over the belt ledger.

Responsibilities:
  - Sort ranks by the global rank value and filter by track.
  - Locate the next rank within a track and look ranks up by id or name.

Invariants:
  - next_rank_in_track never crosses tracks; gaps in the global rank
    sequence are expected and must not be compacted.
"""

from __future__ import annotations

from typing import Iterable, Optional

from beltmaster.core.domain.enums import ReasonCode, Track
from beltmaster.core.domain.errors import DataIntegrityError
from beltmaster.core.domain.models import BeltRank


def sorted_by_rank(ledger: Iterable[BeltRank], track: Optional[Track] = None) -> list[BeltRank]:
    ranks = [belt for belt in ledger if track is None or belt.track == track]
    return sorted(ranks, key=lambda belt: belt.rank)


def next_rank_in_track(ledger: Iterable[BeltRank], current: BeltRank) -> Optional[BeltRank]:
    for belt in sorted_by_rank(ledger, current.track):
        if belt.rank > current.rank:
            return belt
    return None


def find_rank(ledger: Iterable[BeltRank], belt_id: str) -> Optional[BeltRank]:
    for belt in ledger:
        if belt.id == belt_id:
            return belt
    return None


def require_rank(ledger: Iterable[BeltRank], belt_id: str) -> BeltRank:
    belt = find_rank(ledger, belt_id)
    if belt is None:
        raise DataIntegrityError(
            ReasonCode.CURRENT_RANK_NOT_FOUND, "Faixa atual não encontrada."
        )
    return belt


def find_rank_by_name(ledger: Iterable[BeltRank], name: str, track: Track) -> Optional[BeltRank]:
    for belt in sorted_by_rank(ledger, track):
        if belt.name == name:
            return belt
    return None
