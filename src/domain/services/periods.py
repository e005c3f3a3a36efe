"""Calendar helpers for period keys, labels and date arithmetic."""

import calendar
from datetime import date

MONTH_NAMES = (
    "Enero",
    "Febrero",
    "Marzo",
    "Abril",
    "Mayo",
    "Junio",
    "Julio",
    "Agosto",
    "Septiembre",
    "Octubre",
    "Noviembre",
    "Diciembre",
)
SHORT_MONTH_NAMES = tuple(name[:3] for name in MONTH_NAMES)
DAYS_PER_YEAR = 365.25


def month_key(value: date) -> str:
    """Return the ``YYYY-MM`` key of a date."""
    return f"{value.year:04d}-{value.month:02d}"


def day_key(value: date) -> str:
    """Return the ``YYYY-MM-DD`` key of a date."""
    return value.isoformat()


def parse_month_key(key: str) -> tuple[int, int]:
    """Split a ``YYYY-MM`` key into ``(year, month)``."""
    year, month = key.split("-")[:2]
    return int(year), int(month)


def month_label(key: str) -> str:
    """Return a long label such as ``Enero 2024`` for a month key."""
    year, month = parse_month_key(key)
    return f"{MONTH_NAMES[month - 1]} {year}"


def short_month_label(year: int, month: int) -> str:
    """Return a short label such as ``Ene 2024``."""
    return f"{SHORT_MONTH_NAMES[month - 1]} {year}"


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def last_day_of_month(year: int, month: int) -> date:
    """Return the last calendar day of ``year``/``month``."""
    return date(year, month, days_in_month(year, month))


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move ``delta`` months from ``year``/``month``.

    Returns:
        tuple[int, int]: The resulting ``(year, month)``.
    """
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def whole_years_between(start: date, end: date) -> int:
    """Return completed years from ``start`` to ``end``.

    The year difference is decremented when the anniversary has not yet
    occurred in ``end``'s year.
    """
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return years


def years_between(start: date, end: date) -> float:
    """Return elapsed years, anchored on anniversaries.

    Completed years are counted on the calendar, so a hire on 2020-01-01 has
    exactly 5.0 years on 2025-01-01; the remainder since the last
    anniversary is added as a fraction of a 365.25-day year.
    """
    whole = whole_years_between(start, end)
    anniversary_year = start.year + whole
    anniversary = date(
        anniversary_year,
        start.month,
        min(start.day, days_in_month(anniversary_year, start.month)),
    )
    return whole + (end - anniversary).days / DAYS_PER_YEAR


__all__ = [
    "MONTH_NAMES",
    "SHORT_MONTH_NAMES",
    "DAYS_PER_YEAR",
    "month_key",
    "day_key",
    "parse_month_key",
    "month_label",
    "short_month_label",
    "days_in_month",
    "last_day_of_month",
    "shift_month",
    "whole_years_between",
    "years_between",
]
