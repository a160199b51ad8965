"""Calendar helpers for age and time-in-rank computations.

Responsibilities:
  - Parse snapshot date values into datetime.date.
  - Compute age, elapsed months and training time as whole numbers.

Invariants:
  - months_since uses year/month difference only; day of month is ignored.
  - Malformed dates raise DataIntegrityError, never a bare ValueError.
"""

from __future__ import annotations

import calendar
import datetime
from typing import Optional, Union

from beltmaster.core.domain.enums import ReasonCode
from beltmaster.core.domain.errors import DataIntegrityError

DateLike = Union[str, datetime.date, datetime.datetime]


def parse_date(value: DateLike, field_name: str = "date") -> datetime.date:
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if isinstance(value, str):
        text = value.strip()
        # Accept timestamps such as "2024-03-01T10:00:00" or "2024-03-01 10:00:00".
        try:
            return datetime.date.fromisoformat(text[:10])
        except ValueError:
            pass
    raise DataIntegrityError(
        ReasonCode.INVALID_DATE, f"Data inválida em {field_name}: {value!r}."
    )


def age_of(birth_date: DateLike, as_of: DateLike) -> int:
    born = parse_date(birth_date, "birth_date")
    today = parse_date(as_of, "as_of")
    age = today.year - born.year
    if (today.month, today.day) < (born.month, born.day):
        age -= 1
    return age


def months_since(start: DateLike, as_of: DateLike) -> int:
    begin = parse_date(start, "promotion_date")
    today = parse_date(as_of, "as_of")
    return (today.year - begin.year) * 12 + (today.month - begin.month)


def training_time(start: Optional[DateLike], as_of: DateLike) -> tuple[int, int, int]:
    """Return (years, months, total_months) trained since start."""
    if not start:
        return 0, 0, 0
    begin = parse_date(start, "first_graduation_date")
    today = parse_date(as_of, "as_of")
    years = today.year - begin.year
    months = today.month - begin.month
    if months < 0:
        years -= 1
        months += 12
    return years, months, years * 12 + months


def shift_months(as_of: DateLike, months: int) -> datetime.date:
    base = parse_date(as_of, "as_of")
    index = base.year * 12 + (base.month - 1) + months
    year, month0 = divmod(index, 12)
    last_day = calendar.monthrange(year, month0 + 1)[1]
    return datetime.date(year, month0 + 1, min(base.day, last_day))


def format_date(value: DateLike) -> str:
    return parse_date(value).isoformat()
