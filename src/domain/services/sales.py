"""Domain services for the sales analysis."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date

from src.domain.models.filters import SalesFilters
from src.domain.models.records import Modality, SaleRecord, VoucherKind
from src.domain.models.sales import (
    AcquisitionPoint,
    CustomerAcquisition,
    CustomerShare,
    SalesAnalysis,
    SalesKpis,
    SalespersonAverage,
)
from src.domain.models.common import TimeSeriesPoint
from src.domain.services.classification import exclude_debit_notes
from src.domain.services.formatters import (
    build_ranking,
    format_for_chart,
    format_for_pie_chart,
)
from src.domain.services.normalization import normalize_key
from src.domain.services.periods import (
    SHORT_MONTH_NAMES,
    day_key,
    month_key,
    short_month_label,
    shift_month,
)
from src.domain.services.trends import build_daily_trend, build_yearly_trend
from src.utils.number_utils import percentage, safe_divide

UNKNOWN_CLIENT = "CLIENTE DESCONOCIDO"
OTHER_VOUCHER_TYPE = "OTROS"
ACQUISITION_TREND_MONTHS = 6


@dataclass
class _Accumulator:
    total: float = 0.0
    count: int = 0
    branches: list[str] = field(default_factory=list)


@dataclass
class _PeriodTotals:
    total: float = 0.0
    net_amount: float = 0.0
    vat_amount: float = 0.0


def compute_sales_analysis(
    records: Sequence[SaleRecord],
    filters: SalesFilters,
    all_records: Sequence[SaleRecord] | None = None,
) -> SalesAnalysis:
    """Compute KPIs, groupings and trends for filtered sales.

    Args:
        records: Sales already filtered by ``filters``.
        filters: Active sales filters.
        all_records: Unfiltered sales used for the year-over-year trend and
            the customer acquisition split.

    Returns:
        SalesAnalysis: The aggregated result, zeroed when no invoice or
        credit note remains after removing debit notes.
    """
    sales = exclude_debit_notes(records)
    if not sales:
        return SalesAnalysis.empty()

    kpis = _compute_kpis(sales)

    by_branch: dict[str, float] = {}
    branch_counts: dict[str, int] = {}
    by_salesperson: dict[str, _Accumulator] = {}
    by_client: dict[str, _Accumulator] = {}
    by_voucher_type: dict[str, float] = {}
    by_modality: dict[str, float] = {}

    for sale in sales:
        amount = sale.signed_gross
        is_invoice = sale.kind is VoucherKind.INVOICE

        branch = normalize_key(sale.branch)
        if not branch:
            continue
        by_branch[branch] = by_branch.get(branch, 0.0) + amount
        if is_invoice:
            branch_counts[branch] = branch_counts.get(branch, 0) + 1

        salesperson = normalize_key(sale.salesperson)
        if salesperson:
            group = by_salesperson.setdefault(salesperson, _Accumulator())
            group.total += amount
            if branch not in group.branches:
                group.branches.append(branch)
            if is_invoice:
                group.count += 1

        client = by_client.setdefault(
            normalize_key(sale.client, UNKNOWN_CLIENT), _Accumulator()
        )
        client.total += amount
        if is_invoice:
            client.count += 1

        if is_invoice:
            voucher_type = normalize_key(sale.voucher_type, OTHER_VOUCHER_TYPE)
            by_voucher_type[voucher_type] = by_voucher_type.get(
                voucher_type, 0.0
            ) + abs(sale.gross_amount)
            modality = Modality(sale.modality).value
            by_modality[modality] = by_modality.get(modality, 0.0) + abs(
                sale.gross_amount
            )

    trend_source = _year_over_year_source(sales, filters, all_records)
    yearly_trend, trend_years = build_yearly_trend(
        ((sale.date, sale.signed_gross) for sale in trend_source),
        labels=SHORT_MONTH_NAMES,
        gap_after_latest=True,
    )

    daily_points: list[TimeSeriesPoint] = []
    daily_trend = []
    daily_years: list[str] = []
    if len({sale.month for sale in sales}) == 1:
        daily_points = _series(_group_by(sales, day_key))
        if filters.years:
            daily_years = sorted(str(year) for year in filters.years)
        else:
            daily_years = sorted({str(sale.year) for sale in sales})
        daily_trend = build_daily_trend(
            ((sale.date, sale.signed_gross) for sale in sales),
            years=daily_years,
            month=sales[0].month,
        )

    return SalesAnalysis(
        kpis=kpis,
        sales_by_branch=format_for_pie_chart(by_branch),
        sales_by_salesperson=format_for_chart(
            {name: group.total for name, group in by_salesperson.items()}
        ),
        sales_by_voucher_type=format_for_chart(by_voucher_type),
        sales_by_modality=format_for_pie_chart(by_modality),
        sales_over_time=_series(_group_by(sales, month_key)),
        branch_ranking=build_ranking(by_branch, branch_counts),
        salesperson_ranking=_accumulator_ranking(by_salesperson),
        client_ranking=_accumulator_ranking(by_client),
        yearly_trend=yearly_trend,
        trend_years=trend_years,
        average_sale_by_salesperson=_salesperson_averages(by_salesperson),
        customer_acquisition=_customer_acquisition(sales, all_records),
        daily_sales_over_time=daily_points,
        daily_yearly_trend=daily_trend,
        daily_trend_years=daily_years,
    )


def _compute_kpis(sales: Sequence[SaleRecord]) -> SalesKpis:
    invoice_total = 0.0
    invoice_count = 0
    credit_total = 0.0
    credit_count = 0
    declared = 0.0
    undeclared = 0.0
    net_of_tax = 0.0
    vat = 0.0
    discounts = 0.0
    operations = 0.0
    without_discount = 0.0
    adjustments = 0.0
    invoice_types: dict[str, int] = {}
    clients: set[str] = set()

    for sale in sales:
        magnitude = abs(sale.gross_amount)
        operations += sale.voucher_quantity
        if sale.kind is VoucherKind.CREDIT_NOTE:
            credit_count += 1
            credit_total += magnitude
        else:
            invoice_count += 1
            invoice_total += magnitude
            voucher_type = normalize_key(sale.voucher_type, OTHER_VOUCHER_TYPE)
            invoice_types[voucher_type] = (
                invoice_types.get(voucher_type, 0) + 1
            )
            without_discount += sale.total_without_discount
            adjustments += sale.financial_adjustment
            clients.add(normalize_key(sale.client, UNKNOWN_CLIENT))

        if sale.modality == Modality.DECLARED:
            declared += sale.signed_gross
        else:
            undeclared += sale.signed_gross
        net_of_tax += sale.sign * abs(sale.net_amount)
        vat += sale.sign * abs(sale.vat_amount)
        discounts += sale.financial_adjustment

    return SalesKpis(
        total_sales=invoice_total - credit_total,
        average_sale=safe_divide(invoice_total, invoice_count),
        invoice_count=invoice_count,
        invoice_total=invoice_total,
        credit_note_count=credit_count,
        credit_note_total=credit_total,
        declared_sales=declared,
        undeclared_sales=undeclared,
        credit_note_percentage=percentage(credit_total, invoice_total),
        total_net_of_tax=net_of_tax,
        total_vat=vat,
        total_discounts=discounts,
        invoice_types=invoice_types,
        total_operations=operations,
        purchase_frequency=safe_divide(invoice_count, len(clients)),
        financial_impact_percent=percentage(adjustments, without_discount),
        total_without_discount=without_discount,
        total_financial_adjustments=adjustments,
    )


def _group_by(sales: Sequence[SaleRecord], key) -> dict[str, _PeriodTotals]:
    totals: dict[str, _PeriodTotals] = {}
    for sale in sales:
        period = totals.setdefault(key(sale.date), _PeriodTotals())
        period.total += sale.signed_gross
        period.net_amount += sale.sign * abs(sale.net_amount)
        period.vat_amount += sale.sign * abs(sale.vat_amount)
    return totals


def _series(totals: dict[str, _PeriodTotals]) -> list[TimeSeriesPoint]:
    return [
        TimeSeriesPoint(
            period=period,
            value=values.total,
            net_amount=values.net_amount,
            vat_amount=values.vat_amount,
        )
        for period, values in sorted(totals.items())
    ]


def _accumulator_ranking(groups: dict[str, _Accumulator]):
    return build_ranking(
        {name: group.total for name, group in groups.items()},
        {name: group.count for name, group in groups.items()},
    )


def _salesperson_averages(
    groups: dict[str, _Accumulator],
) -> list[SalespersonAverage]:
    averages = [
        SalespersonAverage(
            name=name,
            branches=", ".join(group.branches),
            total_sales=group.total,
            invoice_count=group.count,
            average_sale=safe_divide(group.total, group.count),
        )
        for name, group in groups.items()
        if group.count > 0
    ]
    return sorted(averages, key=lambda item: item.average_sale, reverse=True)


def _year_over_year_source(
    sales: list[SaleRecord],
    filters: SalesFilters,
    all_records: Sequence[SaleRecord] | None,
) -> list[SaleRecord]:
    """Return the records feeding the yearly trend.

    With exactly one selected year and the full set available, the selected
    year and the one before are re-filtered from the full set using every
    other dimension; the date range is compared by month and day only.
    """
    if len(filters.years) != 1 or all_records is None:
        return sales
    selected_year = int(filters.years[0])
    compared_years = {selected_year, selected_year - 1}
    return [
        sale
        for sale in exclude_debit_notes(all_records)
        if sale.year in compared_years
        and filters.matches_dimensions(sale)
        and filters.matches_day_of_year(sale.date)
    ]


def _client_split(
    all_sales: Sequence[SaleRecord],
    first_purchase: dict[str, date],
    year: int,
    month: int,
) -> tuple[int, int]:
    clients: set[str] = set()
    for sale in all_sales:
        if (
            sale.year == year
            and sale.month == month
            and sale.kind is VoucherKind.INVOICE
        ):
            clients.add(normalize_key(sale.client, UNKNOWN_CLIENT))
    new_count = 0
    for client in clients:
        first = first_purchase.get(client)
        if first is not None and (first.year, first.month) == (year, month):
            new_count += 1
    return new_count, len(clients) - new_count


def _share_change(current: float, previous: float) -> float:
    if previous > 0:
        return (current - previous) / previous * 100
    return 100.0 if current > 0 else 0.0


def _customer_acquisition(
    sales: list[SaleRecord],
    all_records: Sequence[SaleRecord] | None,
) -> CustomerAcquisition | None:
    history = exclude_debit_notes(all_records or [])
    if not history:
        return None

    first_purchase: dict[str, date] = {}
    for sale in sorted(history, key=lambda record: record.date):
        first_purchase.setdefault(
            normalize_key(sale.client, UNKNOWN_CLIENT), sale.date
        )

    latest = max(sale.date for sale in sales)
    new_count, recurring_count = _client_split(
        history, first_purchase, latest.year, latest.month
    )
    prev_year, prev_month = shift_month(latest.year, latest.month, -1)
    prev_new, prev_recurring = _client_split(
        history, first_purchase, prev_year, prev_month
    )

    total = new_count + recurring_count
    prev_total = prev_new + prev_recurring
    new_share = percentage(new_count, total)
    recurring_share = percentage(recurring_count, total)

    trend: list[AcquisitionPoint] = []
    for offset in range(ACQUISITION_TREND_MONTHS - 1, -1, -1):
        year, month = shift_month(latest.year, latest.month, -offset)
        month_new, month_recurring = _client_split(
            history, first_purchase, year, month
        )
        trend.append(
            AcquisitionPoint(
                month=SHORT_MONTH_NAMES[month - 1],
                new=month_new,
                recurring=month_recurring,
            )
        )

    return CustomerAcquisition(
        new_customers=CustomerShare(count=new_count, percentage=new_share),
        recurring_customers=CustomerShare(
            count=recurring_count, percentage=recurring_share
        ),
        new_customers_pct_change=_share_change(
            new_share, percentage(prev_new, prev_total)
        ),
        recurring_customers_pct_change=_share_change(
            recurring_share, percentage(prev_recurring, prev_total)
        ),
        last_six_months=trend,
        total_customers=total,
        latest_month=short_month_label(latest.year, latest.month),
    )


__all__ = ["compute_sales_analysis", "UNKNOWN_CLIENT"]
