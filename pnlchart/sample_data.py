"""Static sample PnL history used until a live data source is wired in."""

from __future__ import annotations

from typing import Dict, List

from .aggregation import Observation
from .ingest import observations_from_records


def get_pnl_data() -> List[Dict[str, object]]:
    return [
        {"dt": "2024-01-01", "daily_pnl_usd": 50.12},
        {"dt": "2024-01-02", "daily_pnl_usd": -30.45},
        {"dt": "2024-01-03", "daily_pnl_usd": 80.67},
        {"dt": "2024-01-04", "daily_pnl_usd": -15.89},
        {"dt": "2024-01-05", "daily_pnl_usd": 120.34},
        {"dt": "2024-01-06", "daily_pnl_usd": -90.23},
        {"dt": "2024-01-07", "daily_pnl_usd": 200.78},
        {"dt": "2024-01-08", "daily_pnl_usd": -50.12},
        {"dt": "2024-01-09", "daily_pnl_usd": 75.45},
        {"dt": "2024-01-10", "daily_pnl_usd": 160.23},
        {"dt": "2024-01-11", "daily_pnl_usd": -110.34},
        {"dt": "2024-01-12", "daily_pnl_usd": 140.67},
        {"dt": "2024-01-13", "daily_pnl_usd": -35.78},
        {"dt": "2024-01-14", "daily_pnl_usd": 95.89},
        {"dt": "2024-01-15", "daily_pnl_usd": -25.12},
        {"dt": "2024-01-16", "daily_pnl_usd": 210.34},
        {"dt": "2024-01-17", "daily_pnl_usd": -190.45},
        {"dt": "2024-01-18", "daily_pnl_usd": 300.23},
        {"dt": "2024-01-19", "daily_pnl_usd": -220.56},
        {"dt": "2024-01-20", "daily_pnl_usd": 180.67},
        {"dt": "2024-01-21", "daily_pnl_usd": 275.78},
        {"dt": "2024-01-22", "daily_pnl_usd": -140.12},
        {"dt": "2024-01-23", "daily_pnl_usd": 90.45},
        {"dt": "2024-01-24", "daily_pnl_usd": 310.23},
        {"dt": "2024-01-25", "daily_pnl_usd": -290.78},
        {"dt": "2024-01-26", "daily_pnl_usd": 200.89},
        {"dt": "2024-01-27", "daily_pnl_usd": -150.34},
        # February, sparser, to show monthly buckets
        {"dt": "2024-02-01", "daily_pnl_usd": 180.45},
        {"dt": "2024-02-05", "daily_pnl_usd": -120.67},
        {"dt": "2024-02-10", "daily_pnl_usd": 250.34},
        {"dt": "2024-02-15", "daily_pnl_usd": -90.56},
        {"dt": "2024-02-20", "daily_pnl_usd": 310.78},
        {"dt": "2024-02-25", "daily_pnl_usd": -150.23},
        {"dt": "2024-03-01", "daily_pnl_usd": 220.56},
        {"dt": "2024-03-10", "daily_pnl_usd": -180.34},
        {"dt": "2024-03-20", "daily_pnl_usd": 290.67},
        # Q2..Q4
        {"dt": "2024-04-01", "daily_pnl_usd": -120.45},
        {"dt": "2024-04-15", "daily_pnl_usd": 340.23},
        {"dt": "2024-07-01", "daily_pnl_usd": 400.12},
        {"dt": "2024-07-15", "daily_pnl_usd": -250.67},
        {"dt": "2024-10-01", "daily_pnl_usd": 380.45},
        {"dt": "2024-10-15", "daily_pnl_usd": -200.34},
    ]


def sample_observations() -> List[Observation]:
    return observations_from_records(get_pnl_data())


__all__ = ["get_pnl_data", "sample_observations"]
