"""Tests for the stock aggregator and its cross-domain ratios."""

from datetime import date

import pytest

from src.domain.errors import MissingDatasetError
from src.domain.models import (
    ExpenseRecord,
    HRRecord,
    PurchaseRecord,
    SaleRecord,
    StockAnalysis,
    StockFilters,
    StockRecord,
    apply_filters,
)
from src.domain.services.stock import (
    annualized_turnover,
    compute_stock_analysis,
    days_of_coverage,
)


def _snapshot(
    day: date,
    branch: str,
    category: str,
    local: float,
    system_rate: float,
) -> StockRecord:
    return StockRecord(
        date=day,
        category=category,
        branch=branch,
        cost=local,
        system_rate=system_rate,
        official_rate=1000.0,
        valued_usd_system=local / system_rate,
        valued_usd_official=local / 1000.0,
        valued_local_official=local,
    )


def _snapshots() -> list[StockRecord]:
    return [
        _snapshot(date(2024, 1, 31), "LIBANO", "CALZADO", 1000.0, 1200.0),
        _snapshot(date(2024, 1, 31), "E-COMMERCE", "ROPA", 500.0, 1200.0),
        _snapshot(date(2024, 2, 29), "LIBANO", "CALZADO", 1200.0, 1300.0),
        _snapshot(date(2024, 2, 29), "E-COMMERCE", "ROPA", 600.0, 1300.0),
    ]


def _datasets() -> dict:
    return {
        "sales": [
            SaleRecord(date(2024, 1, 10), branch="LIBANO", gross_amount=3300),
            SaleRecord(date(2024, 2, 10), branch="LIBANO", gross_amount=3300),
            SaleRecord(date(2023, 2, 10), branch="LIBANO", gross_amount=9999),
        ],
        "purchases": [PurchaseRecord(date(2024, 1, 5), gross_amount=900.0)],
        "expenses": [ExpenseRecord(date(2024, 1, 5), amount=200.0)],
        "hr": [HRRecord(date(2024, 2, 28), tax_id="20-1", amount=400.0)],
    }


def _analyse(filters: StockFilters, **overrides) -> StockAnalysis:
    datasets = {**_datasets(), **overrides}
    snapshots = _snapshots()
    return compute_stock_analysis(
        apply_filters(snapshots, filters), snapshots, filters, **datasets
    )


def test_empty_input_returns_zeroed_result() -> None:
    result = compute_stock_analysis(
        [], [], StockFilters(), sales=[], purchases=[], expenses=[], hr=[]
    )

    assert result == StockAnalysis.empty()


def test_missing_dataset_raises() -> None:
    """Cross-domain ratios cannot be computed without sales."""
    with pytest.raises(MissingDatasetError) as excinfo:
        _analyse(StockFilters(), sales=None)

    assert excinfo.value.dataset == "sales"


def test_latest_month_totals_and_ratios() -> None:
    """Point-in-time totals use the latest month only."""
    kpis = _analyse(StockFilters(years=(2024,))).kpis

    assert kpis.total_local_official == 1800.0
    assert kpis.avg_monthly_stock == 1650.0
    assert kpis.total_local_change == pytest.approx(20.0)
    assert kpis.stock_turnover == pytest.approx(24.0)
    assert kpis.days_of_coverage == pytest.approx(1800 / 110)
    assert kpis.stock_to_purchase_ratio == pytest.approx(2.0)
    assert kpis.financial_coverage == pytest.approx(3.0)
    assert kpis.avg_official_rate == 1000.0
    assert kpis.avg_system_rate == 1300.0
    assert kpis.rate_spread_percent == pytest.approx(30.0)


def test_branch_turnover_uses_allow_list() -> None:
    result = _analyse(StockFilters(years=(2024,)))

    assert [point.name for point in result.turnover_by_branch] == ["LIBANO"]
    assert result.turnover_by_branch[0].value == pytest.approx(36.0)
    assert result.total_turnover == pytest.approx(36.0)
    branches = {point.name: point.value for point in result.stock_by_branch}
    assert branches == {"LIBANO": 1200.0, "E-COMMERCE": 600.0}


def test_single_month_selection_keeps_full_evolution() -> None:
    """A one-month filter still shows the historical USD evolution."""
    result = _analyse(StockFilters(years=(2024,), months=(2,)))

    assert [p.period for p in result.stock_evolution] == [
        "2024-01",
        "2024-02",
    ]
    assert [p.period for p in result.stock_over_time] == ["2024-02"]
    assert len(result.rate_evolution) == 2


def test_ratios_are_zero_when_denominators_are_zero() -> None:
    """No sales, purchases or costs yields zero ratios, never infinities."""
    result = _analyse(
        StockFilters(years=(2024,)), sales=[], purchases=[], expenses=[], hr=[]
    )

    assert result.kpis.stock_turnover == 0.0
    assert result.kpis.days_of_coverage == 0.0
    assert result.kpis.stock_to_purchase_ratio == 0.0
    assert result.kpis.financial_coverage == 0.0
    assert annualized_turnover(100.0, 0.0, 3) == 0.0
    assert days_of_coverage(100.0, 0.0, 3) == 0.0
    assert days_of_coverage(100.0, 50.0, 0) == 0.0
