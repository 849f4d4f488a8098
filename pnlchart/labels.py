"""Human readable labels for bucket keys and raw dates."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Union

from .aggregation import Frequency, quarter_of, week_number

MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# YYYY, YYYY-M, YYYY-M-D with an optional trailing HH:MM... time part
_DATE_RE = re.compile(r"^(\d{4})(?:-(\d{1,2})(?:-(\d{1,2}))?)?(?:[T ]\d{1,2}:\d{2}(?::\d{2}(?:\.\d+)?)?(?:Z|[+-]\d{2}:?\d{2})?)?$")


@dataclass(frozen=True)
class ParsedDate:
    value: date


@dataclass(frozen=True)
class Fallback:
    original: str


DateParse = Union[ParsedDate, Fallback]


def parse_date(text: str) -> DateParse:
    """Parse ``text`` as a calendar date.

    Month and day default to 1 so month keys (``"2024-3"``) and year keys
    (``"2024"``) parse as the first day of their period. Anything else,
    including out-of-range components, comes back as ``Fallback``.
    """
    match = _DATE_RE.match(text.strip())
    if not match:
        return Fallback(text)
    year, month, day = match.groups()
    try:
        return ParsedDate(date(int(year), int(month or 1), int(day or 1)))
    except ValueError:
        return Fallback(text)


def _format_date(day: date, frequency: Frequency) -> str:
    if frequency is Frequency.DAY:
        return f"{MONTH_ABBR[day.month - 1]} {day.day}"
    if frequency is Frequency.WEEK:
        return f"Week {week_number(day)}, {day.year}"
    if frequency is Frequency.MONTH:
        return f"{MONTH_ABBR[day.month - 1]} {day.year}"
    if frequency is Frequency.QUARTER:
        return f"Q{quarter_of(day)} {day.year}"
    return str(day.year)


def format_label(key: Union[str, date], frequency: Union[Frequency, str]) -> str:
    """Display label for a bucket key or raw date string.

    Never raises: keys that cannot be read as a date for ``frequency`` are
    returned unchanged.
    """
    if isinstance(key, datetime):
        key = key.date()
    text = key.isoformat() if isinstance(key, date) else str(key)

    try:
        frequency = Frequency.coerce(frequency)
    except ValueError:
        logging.debug("Unknown frequency %r for label %s", frequency, text)
        return text

    # Week/quarter keys come from the aggregator and are not dates.
    if frequency is Frequency.WEEK and "-W" in text:
        year, week = text.split("-W", 1)
        return f"Week {week}, {year}"
    if frequency is Frequency.QUARTER and "-Q" in text:
        year, quarter = text.split("-Q", 1)
        return f"Q{quarter} {year}"

    parsed = ParsedDate(key) if isinstance(key, date) else parse_date(text)
    if isinstance(parsed, Fallback):
        logging.debug("Unable to parse %r as a date; using it as the label", parsed.original)
        return parsed.original
    return _format_date(parsed.value, frequency)


__all__ = [
    "DateParse",
    "Fallback",
    "MONTH_ABBR",
    "ParsedDate",
    "format_label",
    "parse_date",
]
