"""Domain services for the inventory valuation analysis.

Stock rows are monthly snapshots, so category and branch totals use only the
latest filtered month; summing across months would double count.
"""

from collections.abc import Sequence

from src.domain.errors import require_datasets
from src.domain.models.common import ChartPoint, TimeSeriesPoint
from src.domain.models.filters import PeriodFilters, StockFilters
from src.domain.models.records import (
    ExpenseRecord,
    HRRecord,
    PurchaseRecord,
    SaleRecord,
    StockRecord,
)
from src.domain.models.stock import RatePoint, StockAnalysis, StockKpis
from src.domain.services.classification import exclude_debit_notes
from src.domain.services.formatters import build_ranking, format_for_pie_chart
from src.domain.services.normalization import normalize_key
from src.domain.services.periods import month_key
from src.utils.number_utils import safe_divide

TURNOVER_BRANCHES = frozenset(
    {
        "LIBANO",
        "MITRE",
        "CATAMARCA",
        "SALTA",
        "JUJUY",
        "YERBA BUENA",
        "PERICO",
    }
)
MONTHS_PER_YEAR = 12
DAYS_PER_MONTH = 30


def annualized_turnover(
    period_sales: float,
    average_stock: float,
    months: int,
) -> float:
    """Return ``(sales / months x 12) / average_stock``, 0 when undefined."""
    annualized = safe_divide(period_sales, months) * MONTHS_PER_YEAR
    return safe_divide(annualized, average_stock)


def days_of_coverage(
    current_stock: float,
    period_sales: float,
    months: int,
) -> float:
    """Return current stock over average daily sales, 0 when undefined."""
    daily_sales = safe_divide(period_sales, months * DAYS_PER_MONTH)
    return safe_divide(current_stock, daily_sales)


def _add(totals: dict[str, float], key: str, amount: float) -> None:
    totals[key] = totals.get(key, 0.0) + amount


def compute_stock_analysis(
    records: Sequence[StockRecord],
    all_records: Sequence[StockRecord],
    filters: StockFilters,
    *,
    sales: Sequence[SaleRecord] | None,
    purchases: Sequence[PurchaseRecord] | None,
    expenses: Sequence[ExpenseRecord] | None,
    hr: Sequence[HRRecord] | None,
) -> StockAnalysis:
    """Compute inventory KPIs, breakdowns and cross-domain ratios.

    Sales, purchases, expenses and payroll are re-filtered from their full
    sets by the selected years and months only.

    Args:
        records: Snapshots already filtered by ``filters``.
        all_records: Unfiltered snapshots; feed the evolution series when a
            single year and month are selected.
        filters: Active stock filters.
        sales: Unfiltered sales.
        purchases: Unfiltered purchases.
        expenses: Unfiltered expenses.
        hr: Unfiltered payroll transactions.

    Returns:
        StockAnalysis: The aggregated result, zeroed when there is nothing to
        show.

    Raises:
        MissingDatasetError: If a cross-domain dataset is None.
    """
    require_datasets(
        "Stock analysis",
        sales=sales,
        purchases=purchases,
        expenses=expenses,
        hr=hr,
    )
    evolution_source = all_records if filters.is_single_month else records
    if not records and not evolution_source:
        return StockAnalysis.empty()

    period = PeriodFilters(years=filters.years, months=filters.months)
    total_sales = 0.0
    sales_by_branch: dict[str, float] = {}
    for sale in exclude_debit_notes(sales):
        if not period.matches(sale):
            continue
        total_sales += sale.signed_gross
        _add(sales_by_branch, normalize_key(sale.branch), sale.signed_gross)
    total_purchases = sum(
        purchase.gross_amount
        for purchase in purchases
        if period.matches(purchase)
    )
    total_costs = sum(
        expense.amount for expense in expenses if period.matches(expense)
    ) + sum(record.amount for record in hr if period.matches(record))

    latest_rows: list[StockRecord] = []
    if records:
        latest = max(record.date for record in records)
        latest_rows = [
            record
            for record in records
            if (record.year, record.month) == (latest.year, latest.month)
        ]

    by_category: dict[str, float] = {}
    by_category_usd: dict[str, float] = {}
    by_branch: dict[str, float] = {}
    by_branch_usd: dict[str, float] = {}
    for record in latest_rows:
        _add(by_category, record.category, record.valued_local_official)
        _add(by_category_usd, record.category, record.valued_usd_official)
        _add(by_branch, record.branch, record.valued_local_official)
        _add(by_branch_usd, record.branch, record.valued_usd_official)

    by_month: dict[str, float] = {}
    branch_months: dict[str, dict[str, float]] = {}
    for record in records:
        key = month_key(record.date)
        _add(by_month, key, record.valued_local_official)
        _add(
            branch_months.setdefault(normalize_key(record.branch), {}),
            key,
            record.valued_local_official,
        )

    usd_by_month: dict[str, float] = {}
    official_rates: dict[str, list[float]] = {}
    system_rates: dict[str, list[float]] = {}
    for record in evolution_source:
        key = month_key(record.date)
        _add(usd_by_month, key, record.valued_usd_official)
        official_rates.setdefault(key, []).append(record.official_rate)
        system_rates.setdefault(key, []).append(record.system_rate)

    months = len(by_month)
    avg_monthly_stock = safe_divide(sum(by_month.values()), months)
    current_stock = sum(row.valued_local_official for row in latest_rows)
    avg_official = safe_divide(
        sum(row.official_rate for row in latest_rows), len(latest_rows)
    )
    avg_system = safe_divide(
        sum(row.system_rate for row in latest_rows), len(latest_rows)
    )
    rate_spread = 0.0
    if avg_official > 0:
        rate_spread = (avg_system / avg_official - 1) * 100

    kpis = StockKpis(
        total_local_official=current_stock,
        total_usd_official=sum(
            row.valued_usd_official for row in latest_rows
        ),
        total_usd_system=sum(row.valued_usd_system for row in latest_rows),
        total_local_change=_latest_change(by_month),
        avg_monthly_stock=avg_monthly_stock,
        avg_official_rate=avg_official,
        avg_system_rate=avg_system,
        rate_spread_percent=rate_spread,
        stock_turnover=annualized_turnover(
            total_sales, avg_monthly_stock, months
        ),
        days_of_coverage=days_of_coverage(current_stock, total_sales, months),
        stock_to_purchase_ratio=safe_divide(current_stock, total_purchases),
        financial_coverage=safe_divide(current_stock, total_costs),
    )

    turnover_by_branch, total_turnover = _branch_turnover(
        branch_months, sales_by_branch, months
    )
    return StockAnalysis(
        kpis=kpis,
        stock_evolution=_series(usd_by_month),
        stock_over_time=_series(by_month),
        stock_by_category=format_for_pie_chart(by_category),
        stock_by_category_usd=format_for_pie_chart(by_category_usd),
        stock_by_branch=format_for_pie_chart(by_branch),
        stock_by_branch_usd=format_for_pie_chart(by_branch_usd),
        rate_evolution=[
            RatePoint(
                period=key,
                official=safe_divide(sum(values), len(values)),
                system=safe_divide(
                    sum(system_rates[key]), len(system_rates[key])
                ),
            )
            for key, values in sorted(official_rates.items())
        ],
        category_ranking_usd=build_ranking(by_category_usd),
        turnover_by_branch=turnover_by_branch,
        total_turnover=total_turnover,
        available_years=sorted(
            {str(record.year) for record in all_records}, reverse=True
        ),
        available_months=sorted({record.month for record in all_records}),
        available_branches=sorted({record.branch for record in all_records}),
        available_categories=sorted(
            {record.category for record in all_records}
        ),
    )


def _series(totals: dict[str, float]) -> list[TimeSeriesPoint]:
    return [
        TimeSeriesPoint(period=key, value=value)
        for key, value in sorted(totals.items())
    ]


def _latest_change(by_month: dict[str, float]) -> float:
    months = sorted(by_month)
    if len(months) < 2:
        return 0.0
    previous = by_month[months[-2]]
    if previous <= 0:
        return 0.0
    return (by_month[months[-1]] - previous) / previous * 100


def _branch_turnover(
    branch_months: dict[str, dict[str, float]],
    sales_by_branch: dict[str, float],
    months: int,
) -> tuple[list[ChartPoint], float]:
    """Return turnover per allowed branch and across all allowed branches.

    Only operating branches are compared; e-commerce and logistics entities
    are left out of the allow-list.
    """
    points: list[ChartPoint] = []
    total_sales = 0.0
    total_stock = 0.0
    for branch, monthly in branch_months.items():
        if branch not in TURNOVER_BRANCHES:
            continue
        average_stock = safe_divide(sum(monthly.values()), len(monthly))
        branch_sales = sales_by_branch.get(branch, 0.0)
        total_sales += branch_sales
        total_stock += average_stock
        points.append(
            ChartPoint(
                name=branch,
                value=annualized_turnover(branch_sales, average_stock, months),
            )
        )
    points.sort(key=lambda point: point.value, reverse=True)
    return points, annualized_turnover(total_sales, total_stock, months)


__all__ = [
    "TURNOVER_BRANCHES",
    "annualized_turnover",
    "days_of_coverage",
    "compute_stock_analysis",
]
