"""Domain enums for belt tracks, attendance and eligibility reasoning.

Responsibilities:
  - Define Track, AttendanceStatus and ReasonCode identifiers.
  - Provide stable reason categories and audit metadata.

Invariants:
  - Enum values must remain stable; they are stored in snapshots and audits.
  - ReasonCode metadata must be complete and deterministic.
"""

from __future__ import annotations

from enum import Enum


class Track(Enum):
    ADULT = "adult"
    KIDS = "kids"


class AttendanceStatus(Enum):
    PRESENT = "present"
    ABSENT = "absent"


class ReasonCategory(Enum):
    DATA = "DATA"
    BLOCKED = "BLOCKED"
    ELIGIBLE = "ELIGIBLE"


# Stable identifiers for eligibility reasoning; value is the persisted code.
class ReasonCode(Enum):
    CURRENT_RANK_NOT_FOUND = "CURRENT_RANK_NOT_FOUND"
    INVALID_DATE = "INVALID_DATE"
    INVALID_STRIPES = "INVALID_STRIPES"
    PROMOTION_DATE_MISSING = "PROMOTION_DATE_MISSING"
    BIRTH_DATE_MISSING = "BIRTH_DATE_MISSING"
    MAX_RANK_REACHED = "MAX_RANK_REACHED"
    AGE_INSUFFICIENT = "AGE_INSUFFICIENT"
    TIME_INSUFFICIENT = "TIME_INSUFFICIENT"
    FREQUENCY_INSUFFICIENT = "FREQUENCY_INSUFFICIENT"
    STRIPES_INSUFFICIENT = "STRIPES_INSUFFICIENT"
    MAX_STRIPES_REACHED = "MAX_STRIPES_REACHED"
    NO_ATTENDANCE = "NO_ATTENDANCE"
    KIDS_TO_ADULT_TRANSITION = "KIDS_TO_ADULT_TRANSITION"
    KIDS_REQUIREMENTS_MET = "KIDS_REQUIREMENTS_MET"
    ADULT_REQUIREMENTS_MET = "ADULT_REQUIREMENTS_MET"
    STRIPE_REQUIREMENTS_MET = "STRIPE_REQUIREMENTS_MET"


# UI/audit metadata keyed by reason code.
REASON_METADATA: dict[ReasonCode, dict[str, object]] = {
    ReasonCode.CURRENT_RANK_NOT_FOUND: {
        "category": ReasonCategory.DATA,
        "message": "Current belt is not present in the belt ledger.",
    },
    ReasonCode.INVALID_DATE: {
        "category": ReasonCategory.DATA,
        "message": "A date field could not be parsed.",
    },
    ReasonCode.INVALID_STRIPES: {
        "category": ReasonCategory.DATA,
        "message": "Stripe count is missing or out of range.",
    },
    ReasonCode.PROMOTION_DATE_MISSING: {
        "category": ReasonCategory.DATA,
        "message": "Neither last promotion date nor first graduation date is set.",
    },
    ReasonCode.BIRTH_DATE_MISSING: {
        "category": ReasonCategory.DATA,
        "message": "Birth date is required for kids track rules.",
    },
    ReasonCode.MAX_RANK_REACHED: {
        "category": ReasonCategory.BLOCKED,
        "message": "Terminal rank of the track has been reached.",
    },
    ReasonCode.AGE_INSUFFICIENT: {
        "category": ReasonCategory.BLOCKED,
        "message": "Student is younger than the next rank's minimum age.",
    },
    ReasonCode.TIME_INSUFFICIENT: {
        "category": ReasonCategory.BLOCKED,
        "message": "Not enough months have elapsed in the current rank.",
    },
    ReasonCode.FREQUENCY_INSUFFICIENT: {
        "category": ReasonCategory.BLOCKED,
        "message": "Attendance frequency since the last promotion is too low.",
    },
    ReasonCode.STRIPES_INSUFFICIENT: {
        "category": ReasonCategory.BLOCKED,
        "message": "Not enough stripes on the current belt.",
    },
    ReasonCode.MAX_STRIPES_REACHED: {
        "category": ReasonCategory.BLOCKED,
        "message": "Belt already carries the maximum number of stripes.",
    },
    ReasonCode.NO_ATTENDANCE: {
        "category": ReasonCategory.BLOCKED,
        "message": "No attendance records since the last promotion.",
    },
    ReasonCode.KIDS_TO_ADULT_TRANSITION: {
        "category": ReasonCategory.ELIGIBLE,
        "message": "Kids green belt reached 16 years and moves to the adult track.",
    },
    ReasonCode.KIDS_REQUIREMENTS_MET: {
        "category": ReasonCategory.ELIGIBLE,
        "message": "Age and time requirements of the next kids rank are met.",
    },
    ReasonCode.ADULT_REQUIREMENTS_MET: {
        "category": ReasonCategory.ELIGIBLE,
        "message": "Frequency, stripe and time requirements are met.",
    },
    ReasonCode.STRIPE_REQUIREMENTS_MET: {
        "category": ReasonCategory.ELIGIBLE,
        "message": "Interval and frequency requirements for a new stripe are met.",
    },
}


def reason_category(reason: ReasonCode) -> ReasonCategory:
    return REASON_METADATA[reason]["category"]  # type: ignore[return-value]


_missing = [rc for rc in ReasonCode if rc not in REASON_METADATA]
if _missing:
    raise RuntimeError(f"Missing REASON_METADATA for: {[m.value for m in _missing]}")

_extra = [k for k in REASON_METADATA.keys() if k not in set(ReasonCode)]
if _extra:
    raise RuntimeError(f"Extra REASON_METADATA keys: {[e.value for e in _extra]}")
