"""Time-bucketed PnL series for charting."""

from .aggregation import Bucket, Frequency, Observation, aggregate
from .labels import format_label
from .series import ChartPoint, build_series, derive

__all__ = [
    "Bucket",
    "ChartPoint",
    "Frequency",
    "Observation",
    "aggregate",
    "build_series",
    "derive",
    "format_label",
]
