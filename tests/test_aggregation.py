from datetime import date
from decimal import Decimal

import pytest

from pnlchart.aggregation import Frequency, Observation, aggregate, bucket_key, quarter_of, week_number
from pnlchart.sample_data import sample_observations


def obs(day: str, value: str) -> Observation:
    return Observation(date.fromisoformat(day), Decimal(value))


def test_monthly_buckets_are_summed_in_order():
    observations = [obs("2024-01-01", "50.12"), obs("2024-01-02", "-30.45"), obs("2024-02-01", "180.45")]

    buckets = aggregate(observations, Frequency.MONTH)

    assert [(b.key, b.sum) for b in buckets] == [("2024-1", Decimal("19.67")), ("2024-2", Decimal("180.45"))]


def test_quarter_key():
    buckets = aggregate([obs("2024-07-01", "400.12")], "quarter")

    assert [b.key for b in buckets] == ["2024-Q3"]
    assert buckets[0].sum == Decimal("400.12")


@pytest.mark.parametrize("frequency", list(Frequency))
def test_empty_input_gives_no_buckets(frequency):
    assert aggregate([], frequency) == []


def test_day_frequency_groups_by_exact_date_and_sorts():
    observations = [
        obs("2024-01-03", "5"),
        obs("2024-01-01", "1"),
        obs("2024-01-03", "-2.5"),
        obs("2024-01-02", "0"),
    ]

    buckets = aggregate(observations, Frequency.DAY)

    assert [(b.key, b.sum) for b in buckets] == [
        ("2024-01-01", Decimal("1")),
        ("2024-01-02", Decimal("0")),
        ("2024-01-03", Decimal("2.5")),
    ]


@pytest.mark.parametrize("frequency", list(Frequency))
def test_sum_is_conserved(frequency):
    observations = sample_observations()

    buckets = aggregate(observations, frequency)

    assert sum(b.sum for b in buckets) == sum(o.value for o in observations)
    assert sum(b.sum for b in buckets) == Decimal("2402.90")


def test_unordered_input_is_sorted_chronologically():
    observations = list(reversed(sample_observations()))

    buckets = aggregate(observations, Frequency.MONTH)

    # 2024-10 must come last even though "2024-10" < "2024-2" as strings
    assert [b.key for b in buckets] == ["2024-1", "2024-2", "2024-3", "2024-4", "2024-7", "2024-10"]
    assert [b.start for b in buckets] == sorted(b.start for b in buckets)


def test_sample_quarters_and_year():
    quarters = aggregate(sample_observations(), Frequency.QUARTER)
    years = aggregate(sample_observations(), Frequency.YEAR)

    assert [(b.key, b.sum) for b in quarters] == [
        ("2024-Q1", Decimal("1853.56")),
        ("2024-Q2", Decimal("219.78")),
        ("2024-Q3", Decimal("149.45")),
        ("2024-Q4", Decimal("180.11")),
    ]
    assert [(b.key, b.sum) for b in years] == [("2024", Decimal("2402.90"))]


def test_sample_weeks():
    buckets = aggregate(sample_observations(), Frequency.WEEK)
    by_key = {b.key: b.sum for b in buckets}

    assert [b.key for b in buckets] == [
        "2024-W1",
        "2024-W2",
        "2024-W3",
        "2024-W4",
        "2024-W5",
        "2024-W6",
        "2024-W7",
        "2024-W8",
        "2024-W9",
        "2024-W11",
        "2024-W12",
        "2024-W14",
        "2024-W16",
        "2024-W27",
        "2024-W29",
        "2024-W40",
        "2024-W42",
    ]
    assert by_key["2024-W1"] == Decimal("114.56")
    # Sun 2024-02-25 and Fri 2024-03-01 share a week
    assert by_key["2024-W9"] == Decimal("70.33")


def test_week_number_starts_weeks_on_sunday():
    assert week_number(date(2024, 1, 1)) == 1  # Monday
    assert week_number(date(2024, 1, 6)) == 1  # Saturday
    assert week_number(date(2024, 1, 7)) == 2  # Sunday
    assert week_number(date(2023, 1, 1)) == 1  # Jan 1 on a Sunday
    assert week_number(date(2023, 1, 7)) == 1
    assert week_number(date(2023, 1, 8)) == 2


def test_week_number_is_not_iso():
    day = date(2024, 12, 31)

    assert week_number(day) == 53
    assert day.isocalendar()[1] == 1
    assert bucket_key(day, Frequency.WEEK) == "2024-W53"
    assert bucket_key(date(2025, 1, 1), Frequency.WEEK) == "2025-W1"


def test_same_period_same_key_and_different_period_different_key():
    assert bucket_key(date(2024, 3, 1), "month") == bucket_key(date(2024, 3, 31), "month")
    assert bucket_key(date(2023, 3, 1), "month") != bucket_key(date(2024, 3, 1), "month")
    assert bucket_key(date(2024, 4, 1), "quarter") != bucket_key(date(2024, 3, 31), "quarter")
    assert bucket_key(date(2024, 1, 1), "year") == bucket_key(date(2024, 12, 31), "year") == "2024"


def test_quarter_of():
    assert [quarter_of(date(2024, m, 1)) for m in range(1, 13)] == [1, 1, 1, 2, 2, 2, 3, 3, 3, 4, 4, 4]


def test_frequency_coerce_accepts_strings():
    assert Frequency.coerce("Week") is Frequency.WEEK
    assert Frequency.coerce(" month ") is Frequency.MONTH
    assert Frequency.coerce(Frequency.YEAR) is Frequency.YEAR


@pytest.mark.parametrize("bad", ["fortnight", "", None, 7])
def test_unknown_frequency_fails_fast(bad):
    with pytest.raises(ValueError):
        aggregate([obs("2024-01-01", "1")], bad)


def test_float_values_are_stored_as_exact_decimals():
    observations = [Observation(date(2024, 1, 1), 50.12), Observation(date(2024, 1, 2), -30.45)]

    buckets = aggregate(observations, Frequency.MONTH)

    assert observations[0].value == Decimal("50.12")
    assert [(b.key, b.sum) for b in buckets] == [("2024-1", Decimal("19.67"))]


@pytest.mark.parametrize("bad", [True, float("nan"), float("inf"), "abc", None])
def test_observation_rejects_invalid_values(bad):
    with pytest.raises(ValueError):
        Observation(date(2024, 1, 1), bad)
