"""Shared derived shapes produced by the aggregators."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ChartPoint:
    """Named value, optionally annotated with its share of the total.

    Attributes:
        name: Display key (branch, category, provider...).
        value: Aggregated value.
        percentage: Share of the total as a fraction in ``[0, 1]``; None
            for plain (non pie) charts.
    """

    name: str
    value: float
    percentage: float | None = None


@dataclass(frozen=True)
class RankingItem:
    """Ranking row with a total and a transaction count."""

    name: str
    total: float
    count: int = 0


@dataclass(frozen=True)
class TimeSeriesPoint:
    """Value for a period key (``YYYY-MM`` or ``YYYY-MM-DD``).

    Attributes:
        period: Period key.
        value: Main value for the period.
        net_amount: Optional net-of-tax breakdown.
        vat_amount: Optional VAT breakdown.
    """

    period: str
    value: float
    net_amount: float | None = None
    vat_amount: float | None = None


@dataclass(frozen=True)
class TrendRow:
    """Row of a period x year matrix.

    ``values`` maps a year (as string) to its value, or None when the year has
    no data yet for that row.
    """

    label: str
    values: dict[str, float | None] = field(default_factory=dict)


@dataclass(frozen=True)
class TopEntry:
    """Name and total of the top item of a grouping."""

    name: str = "-"
    total: float = 0.0


__all__ = [
    "ChartPoint",
    "RankingItem",
    "TimeSeriesPoint",
    "TrendRow",
    "TopEntry",
]
