"""Group daily PnL observations into day/week/month/quarter/year buckets."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Dict, Iterable, List, Union


class Frequency(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"

    @classmethod
    def coerce(cls, value: Union["Frequency", str]) -> "Frequency":
        """Return ``value`` as a ``Frequency``; raise ``ValueError`` if unknown."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        raise ValueError(f"Unsupported frequency: {value!r}")


def to_amount(value: object) -> Decimal:
    """Exact ``Decimal`` for a PnL amount; floats go through ``str()`` so 50.12 stays 50.12."""
    if isinstance(value, bool):
        raise ValueError(f"Invalid PnL value: {value!r}")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise ValueError(f"Invalid PnL value: {value!r}") from exc
    if not amount.is_finite():
        raise ValueError(f"Invalid PnL value: {value!r}")
    return amount


@dataclass(frozen=True)
class Observation:
    """One day of realised PnL."""

    date: date
    value: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", to_amount(self.value))


@dataclass
class Bucket:
    """Running PnL total for one calendar period.

    ``start`` is the earliest observation date seen for the bucket and is what
    buckets are ordered by; keys such as ``"2024-10"`` do not sort correctly as
    strings.
    """

    key: str
    sum: Decimal
    start: date


def week_number(day: date) -> int:
    """Sunday-based week of the year; week 1 is the week containing Jan 1.

    ``ceil((days_since_jan1 + jan1_weekday + 1) / 7)`` with Sunday as weekday
    0. Not ISO-8601: the two disagree around year boundaries and on Sundays.
    """
    jan1 = date(day.year, 1, 1)
    jan1_weekday = jan1.isoweekday() % 7
    days_since_jan1 = (day - jan1).days
    return math.ceil((days_since_jan1 + jan1_weekday + 1) / 7)


def quarter_of(day: date) -> int:
    return (day.month - 1) // 3 + 1


def bucket_key(day: date, frequency: Union[Frequency, str]) -> str:
    frequency = Frequency.coerce(frequency)
    if frequency is Frequency.DAY:
        return day.isoformat()
    if frequency is Frequency.WEEK:
        return f"{day.year}-W{week_number(day)}"
    if frequency is Frequency.MONTH:
        return f"{day.year}-{day.month}"
    if frequency is Frequency.QUARTER:
        return f"{day.year}-Q{quarter_of(day)}"
    return str(day.year)


def aggregate(observations: Iterable[Observation], frequency: Union[Frequency, str]) -> List[Bucket]:
    """Sum ``observations`` per period of ``frequency``, oldest period first.

    Observations may arrive in any order and duplicate dates are summed. An
    unknown frequency raises ``ValueError`` before any data is touched.
    """
    frequency = Frequency.coerce(frequency)
    ordered = sorted(observations, key=lambda obs: obs.date)
    buckets: Dict[str, Bucket] = {}
    for obs in ordered:
        key = bucket_key(obs.date, frequency)
        bucket = buckets.get(key)
        if bucket is None:
            bucket = buckets[key] = Bucket(key=key, sum=Decimal("0"), start=obs.date)
        bucket.sum += obs.value
    return sorted(buckets.values(), key=lambda b: b.start)


__all__ = [
    "Bucket",
    "Frequency",
    "Observation",
    "aggregate",
    "bucket_key",
    "quarter_of",
    "to_amount",
    "week_number",
]
