"""Builders for month x year and day x year comparison matrices."""

from collections.abc import Iterable, Sequence
from datetime import date

from src.domain.models.common import TrendRow
from src.domain.services.periods import MONTH_NAMES, days_in_month


def build_yearly_trend(
    entries: Iterable[tuple[date, float]],
    *,
    labels: Sequence[str] = MONTH_NAMES,
    gap_after_latest: bool = False,
) -> tuple[list[TrendRow], list[str]]:
    """Build a twelve-row month x year matrix.

    Args:
        entries: ``(date, amount)`` pairs to accumulate.
        labels: Twelve month labels used as row labels.
        gap_after_latest: When True, months after a year's latest observed
            month are None instead of 0, so charts show a gap rather than a
            drop to zero.

    Returns:
        tuple[list[TrendRow], list[str]]: The rows and the years present,
        newest first.
    """
    totals: dict[str, dict[int, float]] = {}
    latest_month: dict[str, int] = {}
    for value, amount in entries:
        year = str(value.year)
        by_month = totals.setdefault(year, {})
        by_month[value.month] = by_month.get(value.month, 0.0) + amount
        if value.month > latest_month.get(year, 0):
            latest_month[year] = value.month

    years = sorted(totals, reverse=True)
    if not years:
        return [], []
    rows: list[TrendRow] = []
    for index, label in enumerate(labels):
        month = index + 1
        values: dict[str, float | None] = {}
        for year in years:
            if gap_after_latest and month > latest_month[year]:
                values[year] = None
            else:
                values[year] = totals[year].get(month, 0.0)
        rows.append(TrendRow(label=label, values=values))
    return rows, years


def build_daily_trend(
    entries: Iterable[tuple[date, float]],
    *,
    years: Sequence[str],
    month: int,
) -> list[TrendRow]:
    """Build a day x year matrix for a single month of the year.

    The number of rows is the largest days-in-month across ``years`` so a
    leap-year February keeps its 29th day.

    Args:
        entries: ``(date, amount)`` pairs, all in ``month``.
        years: Years used as columns, as strings.
        month: Month of the year shared by all entries.

    Returns:
        list[TrendRow]: One row per day of month, missing values as 0.
    """
    totals: dict[str, dict[int, float]] = {}
    for value, amount in entries:
        by_day = totals.setdefault(str(value.year), {})
        by_day[value.day] = by_day.get(value.day, 0.0) + amount

    if not years:
        return []
    day_count = max(days_in_month(int(year), month) for year in years)
    return [
        TrendRow(
            label=str(day),
            values={
                year: totals.get(year, {}).get(day, 0.0) for year in years
            },
        )
        for day in range(1, day_count + 1)
    ]


__all__ = ["build_yearly_trend", "build_daily_trend"]
