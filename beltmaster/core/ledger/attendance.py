"""Attendance frequency since the promotion anchor."""

from __future__ import annotations

import math
from typing import Iterable

from beltmaster.core.domain.enums import AttendanceStatus
from beltmaster.core.domain.models import AttendanceRecord
from .dates import DateLike, parse_date


def records_since(
    records: Iterable[AttendanceRecord], student_id: str, anchor: DateLike
) -> list[AttendanceRecord]:
    start = parse_date(anchor, "promotion_date")
    return [
        r
        for r in records
        if r.student_id == student_id and parse_date(r.date, "attendance.date") >= start
    ]


def present_and_total(
    records: Iterable[AttendanceRecord], student_id: str, anchor: DateLike
) -> tuple[int, int]:
    relevant = records_since(records, student_id, anchor)
    present = sum(1 for r in relevant if r.status == AttendanceStatus.PRESENT)
    return present, len(relevant)


def frequency_percent(
    records: Iterable[AttendanceRecord], student_id: str, anchor: DateLike
) -> float:
    present, total = present_and_total(records, student_id, anchor)
    if total == 0:
        return 0.0
    return present / total * 100


def above_percent(present: int, total: int, threshold: float, inclusive: bool = False) -> bool:
    """Compare present/total against a percentage without float division."""
    if total == 0:
        # No records counts as 0%.
        return 0 >= threshold if inclusive else 0 > threshold
    scaled = present * 100
    limit = threshold * total
    return scaled >= limit if inclusive else scaled > limit


def round_percent(value: float) -> int:
    # Half-up, matching how percentages are shown to administrators.
    return int(math.floor(value + 0.5))
