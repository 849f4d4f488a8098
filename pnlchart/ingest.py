"""Load daily PnL observations from plain records or CSV files."""

from __future__ import annotations

import logging
from datetime import date, datetime
from pathlib import Path
from typing import Iterable, List, Mapping, Optional

import pandas as pd

from .aggregation import Observation
from .labels import Fallback, parse_date

DATE_FIELDS = ("dt", "date")
VALUE_FIELDS = ("daily_pnl_usd", "value")


def _first_present(record: Mapping[str, object], fields: Iterable[str]) -> Optional[object]:
    for field in fields:
        value = record.get(field)
        if value is not None and value != "":
            return value
    return None


def _to_date(value: object) -> date:
    if value is pd.NaT:
        raise ValueError("Missing date")
    # pd.Timestamp is a datetime subclass
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    # Only full YYYY-MM-DD dates are accepted for observations
    if text[:10].count("-") != 2:
        raise ValueError(f"Invalid date: {value!r}")
    parsed = parse_date(text)
    if isinstance(parsed, Fallback):
        raise ValueError(f"Invalid date: {value!r}")
    return parsed.value


def observation_from_record(record: Mapping[str, object]) -> Observation:
    """Build an ``Observation`` from a ``{"dt": ..., "daily_pnl_usd": ...}`` mapping.

    ``date``/``value`` are accepted as alternative field names. Other fields
    are ignored.
    """
    raw_date = _first_present(record, DATE_FIELDS)
    if raw_date is None:
        raise ValueError(f"Record has no date field ({', '.join(DATE_FIELDS)})")
    raw_value = _first_present(record, VALUE_FIELDS)
    if raw_value is None:
        raise ValueError(f"Record has no value field ({', '.join(VALUE_FIELDS)})")
    return Observation(date=_to_date(raw_date), value=raw_value)


def observations_from_records(records: Iterable[Mapping[str, object]]) -> List[Observation]:
    observations: List[Observation] = []
    for idx, record in enumerate(records):
        try:
            observations.append(observation_from_record(record))
        except ValueError as exc:
            logging.warning("Skipping PnL record %d: %s", idx, exc)
    return observations


def _pick_column(columns: Iterable[str], candidates: Iterable[str], kind: str) -> str:
    present = set(columns)
    for name in candidates:
        if name in present:
            return name
    raise ValueError(f"CSV must have a {kind} column ({' or '.join(candidates)})")


def load_observations_csv(path: Path) -> List[Observation]:
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    date_col = _pick_column(df.columns, DATE_FIELDS, "date")
    value_col = _pick_column(df.columns, VALUE_FIELDS, "value")
    df[date_col] = pd.to_datetime(df[date_col], errors="coerce")
    bad_dates = int(df[date_col].isna().sum())
    if bad_dates:
        logging.warning("Dropping %d row(s) with invalid dates from %s", bad_dates, path)
        df = df[df[date_col].notna()]
    records = [{"dt": ts, "daily_pnl_usd": value} for ts, value in zip(df[date_col], df[value_col])]
    return observations_from_records(records)


__all__ = [
    "load_observations_csv",
    "observation_from_record",
    "observations_from_records",
]
