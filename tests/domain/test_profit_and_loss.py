"""Tests for the income statement aggregator."""

from datetime import date

import pytest

from src.domain.errors import MissingDatasetError
from src.domain.models import (
    ExpenseRecord,
    HRRecord,
    PeriodFilters,
    ProfitAndLoss,
    PurchaseRecord,
    SaleRecord,
)
from src.domain.services.profit_and_loss import compute_profit_and_loss


def _datasets() -> dict:
    return {
        "sales": [
            SaleRecord(
                date(2024, 1, 5),
                net_amount=1000.0,
                gross_amount=1210.0,
                financial_adjustment=50.0,
            ),
            SaleRecord(
                date(2024, 1, 6),
                voucher_quantity=-1,
                net_amount=200.0,
                gross_amount=242.0,
            ),
            SaleRecord(
                date(2024, 1, 7),
                net_amount=500.0,
                gross_amount=605.0,
                financial_adjustment=-30.0,
            ),
            SaleRecord(
                date(2024, 1, 8),
                voucher_type="ND A",
                net_amount=999.0,
                gross_amount=999.0,
            ),
        ],
        "purchases": [
            PurchaseRecord(date(2024, 1, 3), net_amount=600.0),
            PurchaseRecord(date(2024, 2, 3), net_amount=100.0),
        ],
        "expenses": [ExpenseRecord(date(2024, 1, 10), amount=100.0)],
        "hr": [HRRecord(date(2024, 1, 31), tax_id="20-1", amount=200.0)],
        "stock": [],
    }


def test_empty_datasets_return_zeroed_result() -> None:
    result = compute_profit_and_loss(
        sales=[],
        purchases=[],
        expenses=[],
        hr=[],
        stock=[],
        filters=PeriodFilters(),
    )

    assert result == ProfitAndLoss.empty()


def test_period_without_records_is_empty() -> None:
    result = compute_profit_and_loss(
        **_datasets(), filters=PeriodFilters(years=(2020,))
    )

    assert result == ProfitAndLoss.empty()


def test_missing_dataset_raises() -> None:
    datasets = {**_datasets(), "stock": None}

    with pytest.raises(MissingDatasetError):
        compute_profit_and_loss(**datasets, filters=PeriodFilters())


def test_statement_figures() -> None:
    """Credit notes subtract and debit notes are ignored."""
    kpis = compute_profit_and_loss(
        **_datasets(), filters=PeriodFilters(years=(2024,))
    ).kpis

    assert kpis.net_sales == 1300.0
    assert kpis.financial_income == 50.0
    assert kpis.discounts_granted == -30.0
    assert kpis.adjusted_net_sales == 1320.0
    assert kpis.cost_of_goods == 700.0
    assert kpis.gross_margin == 620.0
    assert kpis.operating_expenses == 100.0
    assert kpis.payroll == 200.0
    assert kpis.total_expenses == 300.0
    assert kpis.ebit == 320.0
    assert kpis.net_income == kpis.ebit
    assert kpis.gross_margin_percentage == pytest.approx(620 / 1320 * 100)


def test_statement_table_lines() -> None:
    table = compute_profit_and_loss(
        **_datasets(), filters=PeriodFilters(years=(2024,))
    ).table

    assert len(table) == 11
    assert table[0].concept == "Ventas Netas"
    assert table[3].concept == "Ventas Netas Ajustadas"
    assert table[3].percentage_of_sales == 100.0
    assert table[3].is_subtotal
    assert table[4].amount == -700.0
    assert table[-1].concept == "Resultado Neto"
    assert table[-1].amount == 320.0


def test_monthly_series_stops_at_last_sales_month() -> None:
    """February has purchases but no sales, so it is trimmed."""
    monthly = compute_profit_and_loss(
        **_datasets(), filters=PeriodFilters(years=(2024,))
    ).monthly

    assert [point.period for point in monthly] == ["2024-01"]
    assert monthly[0].net_sales == 1320.0
    assert monthly[0].cost_of_goods == 600.0
    assert monthly[0].ebit == 420.0


def test_shares_are_zero_without_sales() -> None:
    datasets = {**_datasets(), "sales": []}

    result = compute_profit_and_loss(
        **datasets, filters=PeriodFilters(years=(2024,))
    )

    assert result.kpis.gross_margin_percentage == 0.0
    assert result.table[0].percentage_of_sales is None
    assert result.monthly == []
