"""Age helpers for patient payloads and certificates."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Union

from django.utils import timezone

DateLike = Union[date, str, None]


def _as_date(value: DateLike) -> Optional[date]:
    if value is None or value == '':
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def calculate_age(dob: DateLike, today: Optional[date] = None) -> Optional[int]:
    """Completed years between ``dob`` and ``today``.

    One year is subtracted when today's (month, day) precedes the birthday.
    Returns ``None`` when no date of birth is recorded.
    """
    born = _as_date(dob)
    if born is None:
        return None
    today = today or timezone.localdate()
    return today.year - born.year - ((today.month, today.day) < (born.month, born.day))


def age_display(dob: DateLike, today: Optional[date] = None) -> str:
    age = calculate_age(dob, today)
    return 'N/A' if age is None else str(age)
