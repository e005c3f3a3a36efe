"""Tests for the expenses aggregator and drill-down helpers."""

from datetime import date

from src.domain.models import ExpenseRecord, ExpensesAnalysis
from src.domain.services.expenses import (
    compute_expenses_analysis,
    drill_down_details,
    drill_down_subcategories,
)


def _expense(
    day: date,
    amount: float,
    category: str,
    subcategory: str = "",
    detail: str = "",
) -> ExpenseRecord:
    return ExpenseRecord(
        date=day,
        category=category,
        subcategory=subcategory,
        detail=detail,
        amount=amount,
    )


def _may_expenses() -> list[ExpenseRecord]:
    return [
        _expense(date(2024, 5, 3), 100.0, "TRIBUTOS MUNICIPALES", "TASAS"),
        _expense(date(2024, 5, 10), 200.0, "SERVICIOS", "LUZ", "EDET"),
        _expense(date(2024, 5, 20), 300.0, "SERVICIOS", "AGUA", "SAT"),
    ]


def test_empty_input_returns_zeroed_result() -> None:
    assert compute_expenses_analysis([]) == ExpensesAnalysis.empty()


def test_example_scenario_splits_tax_and_operating() -> None:
    """Tax categories are separated from operating expenses."""
    kpis = compute_expenses_analysis(_may_expenses()).kpis

    assert kpis.total_expenses == 600
    assert kpis.tax_total == 100
    assert kpis.opex_total == 500
    assert kpis.average_per_category == 300
    assert kpis.top_month.name == "Mayo 2024"
    assert kpis.total_expenses_change == 0.0


def test_month_over_month_variation_uses_two_latest_months() -> None:
    records = [
        _expense(date(2024, 3, 1), 999.0, "SERVICIOS"),
        _expense(date(2024, 4, 1), 100.0, "SERVICIOS"),
        _expense(date(2024, 5, 1), 150.0, "SERVICIOS"),
    ]

    kpis = compute_expenses_analysis(records).kpis

    assert kpis.total_expenses_change == 50.0


def test_aggregate_tables_carry_totals_and_counts() -> None:
    result = compute_expenses_analysis(_may_expenses())

    rows = [(row.name, row.total, row.count) for row in result.by_category]
    assert rows == [
        ("SERVICIOS", 500.0, 2),
        ("TRIBUTOS MUNICIPALES", 100.0, 1),
    ]
    assert [row.name for row in result.by_detail] == ["SAT", "EDET", "N/A"]
    assert result.expense_details[0].date == date(2024, 5, 20)
    assert result.available_categories == [
        "SERVICIOS",
        "TRIBUTOS MUNICIPALES",
    ]


def test_drill_down_follows_raw_record_parents() -> None:
    """Subcategory and detail rows are filtered by their parent selection."""
    records = _may_expenses()
    result = compute_expenses_analysis(records)

    subcategories = drill_down_subcategories(
        result.by_subcategory, records, "SERVICIOS"
    )
    details = drill_down_details(result.by_detail, records, "LUZ")

    assert [row.name for row in subcategories] == ["AGUA", "LUZ"]
    assert [row.name for row in details] == ["EDET"]
    assert drill_down_subcategories(result.by_subcategory, records, None) == []


def test_yearly_trend_uses_full_set() -> None:
    full = _may_expenses() + [_expense(date(2023, 1, 1), 50.0, "SERVICIOS")]

    result = compute_expenses_analysis(_may_expenses(), full)

    assert result.trend_years == ["2024", "2023"]
    assert result.yearly_trend[0].values == {"2024": 0.0, "2023": 50.0}
