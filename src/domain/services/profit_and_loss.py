"""Domain services for the income statement.

Cost of goods sold is approximated by purchases net of tax. This mirrors how
the figures are reported and is kept as-is.
"""

from collections.abc import Sequence

from src.domain.errors import require_datasets
from src.domain.models.filters import PeriodFilters, apply_filters
from src.domain.models.profit_and_loss import (
    MonthlyResult,
    ProfitAndLoss,
    ProfitAndLossKpis,
    StatementLine,
)
from src.domain.models.records import (
    ExpenseRecord,
    HRRecord,
    PurchaseRecord,
    SaleRecord,
    StockRecord,
)
from src.domain.services.classification import exclude_debit_notes
from src.domain.services.periods import month_key
from src.utils.number_utils import percentage


def compute_profit_and_loss(
    *,
    sales: Sequence[SaleRecord] | None,
    purchases: Sequence[PurchaseRecord] | None,
    expenses: Sequence[ExpenseRecord] | None,
    hr: Sequence[HRRecord] | None,
    stock: Sequence[StockRecord] | None,
    filters: PeriodFilters,
) -> ProfitAndLoss:
    """Build the income statement for the selected period.

    Args:
        sales: Unfiltered sales.
        purchases: Unfiltered purchases.
        expenses: Unfiltered expenses.
        hr: Unfiltered payroll transactions.
        stock: Unfiltered stock snapshots.
        filters: Year/month selection applied to every dataset.

    Returns:
        ProfitAndLoss: KPIs, statement table and monthly chart series,
        zeroed when no record falls in the period.

    Raises:
        MissingDatasetError: If a dataset is None.
    """
    require_datasets(
        "Profit and loss",
        sales=sales,
        purchases=purchases,
        expenses=expenses,
        hr=hr,
        stock=stock,
    )
    period_sales = apply_filters(exclude_debit_notes(sales), filters)
    period_purchases = apply_filters(purchases, filters)
    period_expenses = apply_filters(expenses, filters)
    period_hr = apply_filters(hr, filters)
    if not (period_sales or period_purchases or period_expenses or period_hr):
        return ProfitAndLoss.empty()

    net_sales = 0.0
    financial_income = 0.0
    discounts_granted = 0.0
    for sale in period_sales:
        net_sales += sale.sign * abs(sale.net_amount)
        if sale.financial_adjustment > 0:
            financial_income += sale.financial_adjustment
        else:
            discounts_granted += sale.financial_adjustment

    adjusted = net_sales + financial_income + discounts_granted
    purchases_total = sum(p.net_amount for p in period_purchases)
    cost_of_goods = purchases_total
    gross_margin = adjusted - cost_of_goods
    payroll = sum(record.amount for record in period_hr)
    operating = sum(expense.amount for expense in period_expenses)
    total_expenses = operating + payroll
    ebit = gross_margin - total_expenses
    net_income = ebit

    kpis = ProfitAndLossKpis(
        net_sales=net_sales,
        financial_income=financial_income,
        discounts_granted=discounts_granted,
        adjusted_net_sales=adjusted,
        purchases=purchases_total,
        cost_of_goods=cost_of_goods,
        gross_margin=gross_margin,
        gross_margin_percentage=_share(gross_margin, adjusted),
        operating_expenses=operating,
        payroll=payroll,
        total_expenses=total_expenses,
        ebit=ebit,
        net_income=net_income,
        net_margin_percentage=_share(net_income, adjusted),
    )
    return ProfitAndLoss(
        kpis=kpis,
        table=_statement_table(kpis),
        monthly=_monthly_results(
            period_sales, period_purchases, period_expenses, period_hr
        ),
    )


def _share(amount: float, adjusted_sales: float) -> float:
    return percentage(amount, adjusted_sales) if adjusted_sales > 0 else 0.0


def _statement_table(kpis: ProfitAndLossKpis) -> list[StatementLine]:
    adjusted = kpis.adjusted_net_sales
    net_sales_share = (
        percentage(kpis.net_sales, adjusted) if adjusted > 0 else None
    )
    return [
        StatementLine(
            "Ingresos",
            "Ventas Netas",
            kpis.net_sales,
            net_sales_share,
            is_title=True,
        ),
        StatementLine(
            "Ingresos",
            "(+) Ingresos Financieros (Recargos)",
            kpis.financial_income,
            _share(kpis.financial_income, adjusted),
        ),
        StatementLine(
            "Ingresos",
            "(-) Descuentos Otorgados",
            kpis.discounts_granted,
            _share(kpis.discounts_granted, adjusted),
        ),
        StatementLine(
            "Ingresos",
            "Ventas Netas Ajustadas",
            adjusted,
            100.0,
            is_subtotal=True,
        ),
        StatementLine(
            "Costos",
            "Costo de Mercadería Vendida (CMV)",
            -kpis.cost_of_goods,
            _share(-kpis.cost_of_goods, adjusted),
            is_title=True,
        ),
        StatementLine(
            "Resultados",
            "Margen Bruto",
            kpis.gross_margin,
            kpis.gross_margin_percentage,
            is_subtotal=True,
        ),
        StatementLine(
            "Gastos",
            "Gastos Operativos",
            -kpis.operating_expenses,
            _share(-kpis.operating_expenses, adjusted),
            is_title=True,
        ),
        StatementLine(
            "Gastos",
            "Sueldos y Cargas Sociales",
            -kpis.payroll,
            _share(-kpis.payroll, adjusted),
        ),
        StatementLine(
            "Gastos",
            "Gastos Totales",
            -kpis.total_expenses,
            _share(-kpis.total_expenses, adjusted),
            is_subtotal=True,
        ),
        StatementLine(
            "Resultados",
            "Resultado Operativo (EBIT)",
            kpis.ebit,
            _share(kpis.ebit, adjusted),
            is_subtotal=True,
        ),
        StatementLine(
            "Resultados",
            "Resultado Neto",
            kpis.net_income,
            kpis.net_margin_percentage,
            is_subtotal=True,
            is_title=True,
        ),
    ]


def _monthly_results(
    sales: list[SaleRecord],
    purchases: list[PurchaseRecord],
    expenses: list[ExpenseRecord],
    hr: list[HRRecord],
) -> list[MonthlyResult]:
    """Return monthly figures up to the last month with sales."""
    sales_by_month: dict[str, float] = {}
    for sale in sales:
        key = month_key(sale.date)
        sales_by_month[key] = (
            sales_by_month.get(key, 0.0)
            + sale.sign * abs(sale.net_amount)
            + sale.financial_adjustment
        )
    if not sales_by_month:
        return []

    costs = _by_month(purchases, lambda purchase: purchase.net_amount)
    operating = _by_month(expenses, lambda expense: expense.amount)
    payroll = _by_month(hr, lambda record: record.amount)
    last_sales_month = max(sales_by_month)
    months = sorted(
        set(sales_by_month) | set(costs) | set(operating) | set(payroll)
    )

    results = []
    for key in months:
        if key > last_sales_month:
            break
        net_sales = sales_by_month.get(key, 0.0)
        cost_of_goods = costs.get(key, 0.0)
        gross_margin = net_sales - cost_of_goods
        total_expenses = operating.get(key, 0.0) + payroll.get(key, 0.0)
        results.append(
            MonthlyResult(
                period=key,
                net_sales=net_sales,
                cost_of_goods=cost_of_goods,
                total_expenses=total_expenses,
                ebit=gross_margin - total_expenses,
                gross_margin=gross_margin,
            )
        )
    return results


def _by_month(records, amount) -> dict[str, float]:
    totals: dict[str, float] = {}
    for record in records:
        key = month_key(record.date)
        totals[key] = totals.get(key, 0.0) + amount(record)
    return totals


__all__ = ["compute_profit_and_loss"]
