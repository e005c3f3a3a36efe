"""Domain services for the purchases analysis."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date

from src.domain.models.common import TimeSeriesPoint, TopEntry
from src.domain.models.purchases import (
    ModalitySplitPoint,
    ProviderDetail,
    PurchaseKpis,
    PurchasesAnalysis,
    SalesVsPurchasesPoint,
)
from src.domain.models.records import Modality, PurchaseRecord, SaleRecord
from src.domain.services.classification import exclude_debit_notes
from src.domain.services.formatters import (
    build_ranking,
    format_for_pie_chart,
    top_entry,
)
from src.domain.services.normalization import normalize_key
from src.domain.services.periods import month_key, month_label
from src.utils.number_utils import percentage, safe_divide

UNKNOWN_PROVIDER = "N/A"


@dataclass
class _ProviderTotals:
    total: float = 0.0
    count: int = 0
    net_amount: float = 0.0
    vat_amount: float = 0.0
    other_taxes: float = 0.0


def compute_purchases_analysis(
    records: Sequence[PurchaseRecord],
    sales_records: Sequence[SaleRecord] | None = None,
    today: date | None = None,
) -> PurchasesAnalysis:
    """Compute KPIs, provider breakdowns and monthly series for purchases.

    Args:
        records: Purchases already filtered.
        sales_records: Optional unfiltered sales for the monthly
            sales-vs-purchases comparison.
        today: Reference date deciding whether the trailing comparison month
            is still in progress. Defaults to the current date.

    Returns:
        PurchasesAnalysis: The aggregated result, zeroed for empty input.
    """
    if not records:
        return PurchasesAnalysis.empty()

    total = 0.0
    by_provider: dict[str, _ProviderTotals] = {}
    by_month_modality: dict[str, dict[str, float]] = {}
    vat_by_month: dict[str, float] = {}
    by_modality: dict[str, float] = {}
    by_month: dict[str, float] = {}

    for purchase in records:
        amount = purchase.gross_amount
        total += amount

        provider = by_provider.setdefault(
            normalize_key(purchase.provider, UNKNOWN_PROVIDER),
            _ProviderTotals(),
        )
        provider.total += amount
        provider.count += 1
        provider.net_amount += purchase.net_amount
        provider.vat_amount += purchase.vat_amount
        provider.other_taxes += purchase.other_taxes

        period = month_key(purchase.date)
        modality = Modality(purchase.modality).value
        split = by_month_modality.setdefault(period, {})
        split[modality] = split.get(modality, 0.0) + amount
        vat_by_month[period] = vat_by_month.get(period, 0.0) + (
            purchase.vat_amount
        )
        by_modality[modality] = by_modality.get(modality, 0.0) + amount
        by_month[period] = by_month.get(period, 0.0) + amount

    declared = by_modality.get(Modality.DECLARED.value, 0.0)
    undeclared = by_modality.get(Modality.UNDECLARED.value, 0.0)
    provider_totals = {name: acc.total for name, acc in by_provider.items()}
    best_month = top_entry(by_month)
    kpis = PurchaseKpis(
        total_purchases=total,
        average_purchase_per_provider=safe_divide(total, len(by_provider)),
        top_month=TopEntry(
            name=month_label(best_month.name),
            total=best_month.total,
        ),
        top_provider=top_entry(provider_totals),
        declared_total=declared,
        undeclared_total=undeclared,
        declared_percentage=percentage(declared, total),
        undeclared_percentage=percentage(undeclared, total),
    )

    details = [
        ProviderDetail(
            name=name,
            net_amount=acc.net_amount,
            vat_amount=acc.vat_amount,
            other_taxes=acc.other_taxes,
            total=acc.total,
        )
        for name, acc in by_provider.items()
    ]

    return PurchasesAnalysis(
        kpis=kpis,
        purchases_over_time=[
            ModalitySplitPoint(
                period=period,
                declared=split.get(Modality.DECLARED.value, 0.0),
                undeclared=split.get(Modality.UNDECLARED.value, 0.0),
            )
            for period, split in sorted(by_month_modality.items())
        ],
        provider_ranking=build_ranking(
            provider_totals,
            {name: acc.count for name, acc in by_provider.items()},
        ),
        purchases_by_modality=format_for_pie_chart(by_modality),
        vat_over_time=[
            TimeSeriesPoint(period=period, value=value)
            for period, value in sorted(vat_by_month.items())
        ],
        provider_details=sorted(
            details, key=lambda item: item.total, reverse=True
        ),
        available_years=sorted(
            {str(purchase.year) for purchase in records}, reverse=True
        ),
        available_providers=sorted(
            {purchase.provider for purchase in records}
        ),
        sales_vs_purchases=_sales_vs_purchases(
            by_month, sales_records, today or date.today()
        ),
    )


def _sales_vs_purchases(
    purchases_by_month: dict[str, float],
    sales_records: Sequence[SaleRecord] | None,
    today: date,
) -> list[SalesVsPurchasesPoint]:
    if not sales_records:
        return []
    sales_by_month: dict[str, float] = {}
    for sale in exclude_debit_notes(sales_records):
        period = month_key(sale.date)
        sales_by_month[period] = (
            sales_by_month.get(period, 0.0) + sale.signed_gross
        )

    points = [
        SalesVsPurchasesPoint(
            period=period,
            sales=sales_by_month.get(period, 0.0),
            purchases=purchases_by_month.get(period, 0.0),
        )
        for period in sorted(set(purchases_by_month) | set(sales_by_month))
    ]
    if points:
        last = points[-1]
        in_progress = last.period == month_key(today)
        if in_progress and (last.sales == 0 or last.purchases == 0):
            points.pop()
    return points


__all__ = ["compute_purchases_analysis", "UNKNOWN_PROVIDER"]
