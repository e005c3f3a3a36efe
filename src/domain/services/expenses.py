"""Domain services for the expenses analysis."""

from collections.abc import Callable, Sequence

from src.domain.models.common import TimeSeriesPoint, TopEntry
from src.domain.models.expenses import (
    AggregatedExpense,
    ExpenseKpis,
    ExpensesAnalysis,
)
from src.domain.models.records import ExpenseRecord
from src.domain.services.formatters import (
    build_ranking,
    format_for_pie_chart,
    top_entry,
)
from src.domain.services.periods import month_key, month_label
from src.domain.services.trends import build_yearly_trend
from src.utils.number_utils import safe_divide

TAX_CATEGORIES = frozenset(
    {
        "TRIBUTOS Y TASAS",
        "TRIBUTOS MUNICIPALES",
        "TRIBUTOS NACIONALES",
        "TRIBUTOS PROVINCIALES",
    }
)
MISSING_KEY = "N/A"
TOP_SUBCATEGORIES = 10


def compute_expenses_analysis(
    records: Sequence[ExpenseRecord],
    all_records: Sequence[ExpenseRecord] | None = None,
) -> ExpensesAnalysis:
    """Compute KPIs, breakdowns and drill-down tables for expenses.

    Categories are compared verbatim; they are expected to be upper-cased
    when loaded.

    Args:
        records: Expenses already filtered.
        all_records: Unfiltered expenses used for the yearly trend and the
            available categories. Defaults to ``records``.

    Returns:
        ExpensesAnalysis: The aggregated result, zeroed for empty input.
    """
    if not records:
        return ExpensesAnalysis.empty()
    full = records if all_records is None else all_records

    total = 0.0
    tax_total = 0.0
    by_month: dict[str, float] = {}
    by_category: dict[str, float] = {}
    by_subcategory: dict[str, float] = {}
    for expense in records:
        total += expense.amount
        period = month_key(expense.date)
        by_month[period] = by_month.get(period, 0.0) + expense.amount
        by_category[expense.category] = (
            by_category.get(expense.category, 0.0) + expense.amount
        )
        by_subcategory[expense.subcategory] = (
            by_subcategory.get(expense.subcategory, 0.0) + expense.amount
        )
        if expense.category.upper() in TAX_CATEGORIES:
            tax_total += expense.amount

    best_month = top_entry(by_month)
    kpis = ExpenseKpis(
        total_expenses=total,
        total_expenses_change=_monthly_variation(by_month),
        average_per_category=safe_divide(total, len(by_category)),
        opex_total=total - tax_total,
        tax_total=tax_total,
        top_month=TopEntry(
            name=month_label(best_month.name),
            total=best_month.total,
        ),
    )
    yearly_trend, trend_years = build_yearly_trend(
        (expense.date, expense.amount) for expense in full
    )

    return ExpensesAnalysis(
        kpis=kpis,
        expenses_over_time=[
            TimeSeriesPoint(period=period, value=value)
            for period, value in sorted(by_month.items())
        ],
        expenses_by_category=format_for_pie_chart(by_category),
        top_subcategories=build_ranking(by_subcategory)[:TOP_SUBCATEGORIES],
        yearly_trend=yearly_trend,
        trend_years=trend_years,
        expense_details=sorted(
            records, key=lambda expense: expense.date, reverse=True
        ),
        available_categories=sorted({expense.category for expense in full}),
        available_subcategories=sorted(
            {expense.subcategory for expense in full}
        ),
        by_category=aggregate_expenses_by(
            records, lambda expense: expense.category
        ),
        by_subcategory=aggregate_expenses_by(
            records, lambda expense: expense.subcategory
        ),
        by_detail=aggregate_expenses_by(
            records, lambda expense: expense.detail
        ),
    )


def _monthly_variation(by_month: dict[str, float]) -> float:
    """Return the latest month's change against the previous month."""
    months = sorted(by_month)
    if len(months) < 2:
        return 0.0
    latest = by_month[months[-1]]
    previous = by_month[months[-2]]
    if previous <= 0:
        return 0.0
    return (latest - previous) / previous * 100


def aggregate_expenses_by(
    records: Sequence[ExpenseRecord],
    key: Callable[[ExpenseRecord], str],
) -> list[AggregatedExpense]:
    """Aggregate totals and counts by a record attribute.

    Args:
        records: Expenses to aggregate.
        key: Attribute accessor; blank values group under ``N/A``.

    Returns:
        list[AggregatedExpense]: Rows sorted descending by total.
    """
    totals: dict[str, float] = {}
    counts: dict[str, int] = {}
    for expense in records:
        name = key(expense) or MISSING_KEY
        totals[name] = totals.get(name, 0.0) + expense.amount
        counts[name] = counts.get(name, 0) + 1
    rows = [
        AggregatedExpense(name=name, total=value, count=counts[name])
        for name, value in totals.items()
    ]
    return sorted(rows, key=lambda row: row.total, reverse=True)


def drill_down_subcategories(
    aggregated: Sequence[AggregatedExpense],
    records: Sequence[ExpenseRecord],
    category: str | None,
) -> list[AggregatedExpense]:
    """Keep the subcategory rows that occur under ``category``.

    The aggregated tables carry no parent linkage, so membership is read
    from the raw records.

    Args:
        aggregated: Subcategory table from the analysis.
        records: Raw expenses behind the table.
        category: Selected category; None yields no rows.

    Returns:
        list[AggregatedExpense]: Matching rows in table order.
    """
    if not category:
        return []
    children = {
        expense.subcategory
        for expense in records
        if expense.category == category
    }
    return [row for row in aggregated if row.name in children]


def drill_down_details(
    aggregated: Sequence[AggregatedExpense],
    records: Sequence[ExpenseRecord],
    subcategory: str | None,
) -> list[AggregatedExpense]:
    """Keep the detail rows that occur under ``subcategory``."""
    if not subcategory:
        return []
    children = {
        expense.detail
        for expense in records
        if expense.subcategory == subcategory
    }
    return [row for row in aggregated if row.name in children]


__all__ = [
    "TAX_CATEGORIES",
    "compute_expenses_analysis",
    "aggregate_expenses_by",
    "drill_down_subcategories",
    "drill_down_details",
]
