"""CLI adapter printing the headline KPIs of every analytics domain.

The period is selected through the ``REPORT_YEARS`` and ``REPORT_MONTHS``
environment variables (comma separated integers). Unset means every period.
"""

import os

from src.application.use_cases import (
    GetExpensesAnalysisUseCase,
    GetGoalComplianceUseCase,
    GetHRAnalysisUseCase,
    GetProfitAndLossUseCase,
    GetPurchasesAnalysisUseCase,
    GetSalesAnalysisUseCase,
    GetStockAnalysisUseCase,
)
from src.domain.models import (
    ExpenseFilters,
    HRFilters,
    PeriodFilters,
    PurchaseFilters,
    SalesFilters,
    StockFilters,
)
from src.infrastructure.container import (
    build_database_adapter,
    build_records_repository,
    build_settings,
)
from src.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


def _parse_int_list(name: str, logger) -> tuple[int, ...]:
    """Read a comma separated list of integers from the environment.

    Invalid items are logged and skipped.
    """
    raw_value = os.getenv(name, "")
    values = []
    for item in raw_value.split(","):
        item = item.strip()
        if not item:
            continue
        try:
            values.append(int(item))
        except ValueError:
            logger.warning(f"Ignoring invalid {name} value {item!r}")
    return tuple(values)


def _money(value: float) -> str:
    return f"{value:,.2f}"


def build_report(repository, logger, period: PeriodFilters) -> list[str]:
    """Run every analysis for ``period`` and return the report lines."""
    years, months = period.years, period.months
    sales = GetSalesAnalysisUseCase(repository, logger=logger).execute(
        SalesFilters(years=years, months=months)
    )
    purchases = GetPurchasesAnalysisUseCase(
        repository, logger=logger
    ).execute(PurchaseFilters(years=years, months=months))
    expenses = GetExpensesAnalysisUseCase(repository, logger=logger).execute(
        ExpenseFilters(years=years, months=months)
    )
    hr = GetHRAnalysisUseCase(repository, logger=logger).execute(
        HRFilters(years=years, months=months)
    )
    stock = GetStockAnalysisUseCase(repository, logger=logger).execute(
        StockFilters(years=years, months=months)
    )
    pnl = GetProfitAndLossUseCase(repository, logger=logger).execute(period)
    goals = GetGoalComplianceUseCase(repository, logger=logger).summarize(
        SalesFilters(years=years, months=months)
    )

    lines = [
        f"Sales: {_money(sales.kpis.total_sales)} "
        f"({sales.kpis.invoice_count} invoices, "
        f"{sales.kpis.credit_note_count} credit notes)",
        f"Purchases: {_money(purchases.kpis.total_purchases)} "
        f"(top provider {purchases.kpis.top_provider.name})",
        f"Expenses: {_money(expenses.kpis.total_expenses)}",
        f"Payroll: {_money(hr.kpis.total_salaries)} "
        f"({hr.kpis.employee_count} employees)",
        f"Stock: {_money(stock.kpis.total_local_official)} "
        f"(turnover {stock.kpis.stock_turnover:.2f})",
        f"Net sales: {_money(pnl.kpis.net_sales)}",
        f"EBIT: {_money(pnl.kpis.ebit)}",
        f"Net income: {_money(pnl.kpis.net_income)}",
    ]
    if goals is not None:
        lines.append(
            f"Goals: {_money(goals.total_actual)} of "
            f"{_money(goals.total_goal)} ({goals.compliance:.1f}%)"
        )
    return lines


def main() -> None:
    """Print the analytics report for the configured period."""
    logger = get_app_logger()
    settings = build_settings()
    db_adapter = build_database_adapter(settings)
    repository = build_records_repository(db_adapter, settings)
    period = PeriodFilters(
        years=_parse_int_list("REPORT_YEARS", logger),
        months=_parse_int_list("REPORT_MONTHS", logger),
    )
    get_usage_logger().info(
        f"analytics_report years={period.years} months={period.months}"
    )

    try:
        for line in build_report(repository, logger, period):
            print(line)
    finally:
        db_adapter.dispose()


if __name__ == "__main__":  # pragma: no cover
    main()
