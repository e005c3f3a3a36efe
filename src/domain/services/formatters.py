"""Formatters turning keyed totals into chart points and rankings."""

from collections.abc import Mapping

from src.domain.models.common import ChartPoint, RankingItem, TopEntry
from src.utils.number_utils import safe_divide


def format_for_pie_chart(totals: Mapping[str, float]) -> list[ChartPoint]:
    """Return percentage-annotated chart points sorted by value.

    Args:
        totals: Mapping of name to total, in insertion order.

    Returns:
        list[ChartPoint]: Points with ``percentage = value / sum`` (0 when the
        sum is 0), sorted descending; ties keep insertion order.
    """
    grand_total = sum(totals.values())
    points = [
        ChartPoint(
            name=name,
            value=value,
            percentage=safe_divide(value, grand_total),
        )
        for name, value in totals.items()
    ]
    return sorted(points, key=lambda point: point.value, reverse=True)


def format_for_chart(totals: Mapping[str, float]) -> list[ChartPoint]:
    """Return chart points sorted descending by value."""
    points = [
        ChartPoint(name=name, value=value) for name, value in totals.items()
    ]
    return sorted(points, key=lambda point: point.value, reverse=True)


def build_ranking(
    totals: Mapping[str, float],
    counts: Mapping[str, int] | None = None,
) -> list[RankingItem]:
    """Return ranking rows sorted descending by total, stable on ties."""
    counts = counts or {}
    items = [
        RankingItem(name=name, total=total, count=counts.get(name, 0))
        for name, total in totals.items()
    ]
    return sorted(items, key=lambda item: item.total, reverse=True)


def top_entry(totals: Mapping[str, float]) -> TopEntry:
    """Return the first entry with the highest total, or ``("-", 0)``."""
    if not totals:
        return TopEntry()
    name = max(totals, key=lambda key: totals[key])
    return TopEntry(name=name, total=totals[name])


__all__ = [
    "format_for_pie_chart",
    "format_for_chart",
    "build_ranking",
    "top_entry",
]
