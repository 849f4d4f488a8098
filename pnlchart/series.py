"""Turn aggregated buckets into chart points with running totals."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List, Sequence, Union

import pandas as pd

from .aggregation import Bucket, Frequency, Observation, aggregate
from .labels import format_label

CENT = Decimal("0.01")
ZERO = Decimal("0")

FRAME_COLUMNS = [
    "key",
    "label",
    "period_value",
    "cumulative_value",
    "positive_part",
    "negative_part",
]


@dataclass(frozen=True)
class ChartPoint:
    """One x-axis position of the PnL chart, amounts rounded to cents."""

    key: str
    label: str
    period_value: Decimal
    cumulative_value: Decimal
    positive_part: Decimal
    negative_part: Decimal

    @property
    def formatted_period(self) -> str:
        return format_amount(self.period_value, signed=True)

    @property
    def formatted_cumulative(self) -> str:
        return format_amount(self.cumulative_value)


def round_cents(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def format_amount(value: Decimal, *, signed: bool = False) -> str:
    """``$1,234.50``; with ``signed`` gains get a leading ``+``."""
    value = round_cents(Decimal(value))
    sign = "-" if value < 0 else ("+" if signed and value > 0 else "")
    return f"{sign}${abs(value):,.2f}"


def derive(buckets: Sequence[Bucket], frequency: Union[Frequency, str]) -> List[ChartPoint]:
    """Build chart points from chronologically ordered ``buckets``.

    The running total is accumulated from the unrounded bucket sums; rounding
    is applied only to the values placed on each point.
    """
    frequency = Frequency.coerce(frequency)
    points: List[ChartPoint] = []
    cumulative = ZERO
    for bucket in buckets:
        cumulative += bucket.sum
        points.append(
            ChartPoint(
                key=bucket.key,
                label=format_label(bucket.key, frequency),
                period_value=round_cents(bucket.sum),
                cumulative_value=round_cents(cumulative),
                positive_part=round_cents(max(bucket.sum, ZERO)),
                negative_part=round_cents(min(bucket.sum, ZERO)),
            )
        )
    return points


def build_series(observations: Iterable[Observation], frequency: Union[Frequency, str]) -> List[ChartPoint]:
    return derive(aggregate(observations, frequency), frequency)


def points_to_frame(points: Sequence[ChartPoint]) -> pd.DataFrame:
    if not points:
        return pd.DataFrame(columns=FRAME_COLUMNS)
    rows = [
        (
            p.key,
            p.label,
            float(p.period_value),
            float(p.cumulative_value),
            float(p.positive_part),
            float(p.negative_part),
        )
        for p in points
    ]
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)


__all__ = [
    "ChartPoint",
    "FRAME_COLUMNS",
    "build_series",
    "derive",
    "format_amount",
    "points_to_frame",
    "round_cents",
]
