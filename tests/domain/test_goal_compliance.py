"""Tests for sales goal compliance."""

from datetime import date

import pytest

from src.domain.models import (
    ComplianceStatus,
    GoalComplianceReport,
    SaleRecord,
    SalesFilters,
    SalesGoal,
)
from src.domain.services.goals import (
    compliance_status,
    compute_goal_compliance,
    merge_goal_actuals,
    summarize_goals,
)


def _goals() -> list[SalesGoal]:
    return [
        SalesGoal("LIBANO", 2024, 2, 1000.0),
        SalesGoal("LIBANO", 2024, 3, 1000.0),
        SalesGoal("MITRE", 2024, 3, 500.0),
        SalesGoal("MITRE", 2024, 4, 800.0),
    ]


def _sales() -> list[SaleRecord]:
    return [
        SaleRecord(date(2024, 2, 10), branch="LIBANO", gross_amount=900.0),
        SaleRecord(date(2024, 3, 10), branch="libano ", gross_amount=1200.0),
        SaleRecord(
            date(2024, 3, 11),
            branch="LIBANO",
            voucher_quantity=-1,
            gross_amount=100.0,
        ),
        SaleRecord(
            date(2024, 3, 12),
            branch="LIBANO",
            voucher_type="ND A",
            gross_amount=5000.0,
        ),
        SaleRecord(date(2024, 3, 20), branch="MITRE", gross_amount=400.0),
    ]


def _merged() -> list[SalesGoal]:
    return merge_goal_actuals(_goals(), _sales())


def test_merge_uses_signed_sales_without_debit_notes() -> None:
    actuals = {goal.goal_id: goal.actual_amount for goal in _merged()}

    assert actuals == {
        "LIBANO-2024-02": 900.0,
        "LIBANO-2024-03": 1100.0,
        "MITRE-2024-03": 400.0,
        "MITRE-2024-04": 0.0,
    }


def test_compliance_status_thresholds() -> None:
    assert compliance_status(100.0) is ComplianceStatus.GREEN
    assert compliance_status(90.0) is ComplianceStatus.YELLOW
    assert compliance_status(89.99) is ComplianceStatus.RED


def test_default_period_is_latest_with_sales() -> None:
    """April has a goal but no sales yet, so March is analysed."""
    report = compute_goal_compliance(_merged(), SalesFilters())

    assert report.available_periods == ["2024-04", "2024-03", "2024-02"]
    assert report.selected_period == "2024-03"
    assert report.period.compliance == pytest.approx(100.0)
    assert report.previous_compliance == pytest.approx(90.0)
    assert report.trend == pytest.approx(10 / 90 * 100)
    assert report.overall.total_actual == 2400.0
    assert report.overall.difference == -900.0
    assert [(row.branch, row.status) for row in report.gauges] == [
        ("LIBANO", ComplianceStatus.GREEN),
        ("MITRE", ComplianceStatus.RED),
    ]
    assert report.gauges[1].shortfall == 100.0


def test_explicit_period_without_sales() -> None:
    report = compute_goal_compliance(_merged(), SalesFilters(), "2024-04")

    assert report.period.compliance == 0.0
    assert report.trend == pytest.approx(-100.0)
    assert report.details == []
    assert len(report.gauges) == 1


def test_trend_without_previous_goals_is_none() -> None:
    report = compute_goal_compliance(_merged(), SalesFilters(), "2024-02")

    assert report.previous_compliance is None
    assert report.trend is None


def test_trend_from_zero_previous_compliance() -> None:
    goals = [
        SalesGoal("MITRE", 2024, 4, 800.0, actual_amount=0.0),
        SalesGoal("MITRE", 2024, 5, 100.0, actual_amount=50.0),
    ]

    report = compute_goal_compliance(goals, SalesFilters())

    assert report.selected_period == "2024-05"
    assert report.trend == 100.0


def test_filters_without_matches_give_empty_report() -> None:
    report = compute_goal_compliance(
        _merged(), SalesFilters(branches=("SALTA",))
    )

    assert report == GoalComplianceReport.empty()


def test_summary_tests_goal_dates_at_mid_month() -> None:
    """Goals are placed on the 15th to check the date range."""
    merged = _merged()

    by_branch = summarize_goals(merged, SalesFilters(branches=("LIBANO",)))
    in_range = summarize_goals(
        merged,
        SalesFilters(branches=("LIBANO",), start_date=date(2024, 3, 1)),
    )
    late_start = summarize_goals(
        merged, SalesFilters(start_date=date(2024, 4, 16))
    )

    assert by_branch.total_goal == 2000.0
    assert by_branch.compliance == 100.0
    assert in_range.total_actual == 1100.0
    assert late_start is None
