"""Domain models for the expenses analysis."""

from dataclasses import dataclass, field

from src.domain.models.common import (
    ChartPoint,
    RankingItem,
    TimeSeriesPoint,
    TopEntry,
    TrendRow,
)
from src.domain.models.records import ExpenseRecord


@dataclass(frozen=True)
class ExpenseKpis:
    """Headline expense indicators.

    Attributes:
        total_expenses: Sum of expense amounts.
        total_expenses_change: Variation of the latest month against the
            previous month with data, in percent.
        average_per_category: Total over distinct categories.
        opex_total: Total minus tax categories.
        tax_total: Total of the tax categories.
        top_month: Month with the highest total.
    """

    total_expenses: float = 0.0
    total_expenses_change: float = 0.0
    average_per_category: float = 0.0
    opex_total: float = 0.0
    tax_total: float = 0.0
    top_month: TopEntry = field(default_factory=TopEntry)


@dataclass(frozen=True)
class AggregatedExpense:
    """Total and transaction count for one drill-down key."""

    name: str
    total: float
    count: int


@dataclass(frozen=True)
class ExpensesAnalysis:
    """Full result of the expenses aggregation."""

    kpis: ExpenseKpis = field(default_factory=ExpenseKpis)
    expenses_over_time: list[TimeSeriesPoint] = field(default_factory=list)
    expenses_by_category: list[ChartPoint] = field(default_factory=list)
    top_subcategories: list[RankingItem] = field(default_factory=list)
    yearly_trend: list[TrendRow] = field(default_factory=list)
    trend_years: list[str] = field(default_factory=list)
    expense_details: list[ExpenseRecord] = field(default_factory=list)
    available_categories: list[str] = field(default_factory=list)
    available_subcategories: list[str] = field(default_factory=list)
    by_category: list[AggregatedExpense] = field(default_factory=list)
    by_subcategory: list[AggregatedExpense] = field(default_factory=list)
    by_detail: list[AggregatedExpense] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "ExpensesAnalysis":
        """Return the zeroed result used when there is no data."""
        return cls()


__all__ = ["ExpenseKpis", "AggregatedExpense", "ExpensesAnalysis"]
