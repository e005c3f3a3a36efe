"""Domain services for sales goal compliance."""

from collections.abc import Iterable, Sequence
from dataclasses import replace
from datetime import date

from src.domain.models.filters import SalesFilters
from src.domain.models.goals import (
    ComplianceStatus,
    GoalComplianceReport,
    GoalPerformance,
    GoalRow,
    SalesGoal,
)
from src.domain.models.records import SaleRecord
from src.domain.services.classification import exclude_debit_notes
from src.domain.services.normalization import normalize_key
from src.domain.services.periods import parse_month_key, shift_month
from src.utils.number_utils import percentage

GOAL_DAY_OF_MONTH = 15


def compliance_status(compliance: float) -> ComplianceStatus:
    """Return green from 100%, yellow from 90% and red below."""
    if compliance >= 100:
        return ComplianceStatus.GREEN
    if compliance >= 90:
        return ComplianceStatus.YELLOW
    return ComplianceStatus.RED


def merge_goal_actuals(
    goals: Iterable[SalesGoal],
    sales: Sequence[SaleRecord],
) -> list[SalesGoal]:
    """Return goals with ``actual_amount`` set from sales.

    Actuals are signed gross sales per branch, year and month; debit notes
    are excluded and branches are compared normalized.
    """
    actuals: dict[tuple[str, int, int], float] = {}
    for sale in exclude_debit_notes(sales):
        key = (normalize_key(sale.branch), sale.year, sale.month)
        actuals[key] = actuals.get(key, 0.0) + sale.signed_gross
    return [
        replace(
            goal,
            actual_amount=actuals.get(
                (normalize_key(goal.branch), goal.year, goal.month), 0.0
            ),
        )
        for goal in goals
    ]


def _performance(goals: Sequence[SalesGoal]) -> GoalPerformance | None:
    if not goals:
        return None
    total_actual = sum(goal.actual_amount for goal in goals)
    total_goal = sum(goal.goal_amount for goal in goals)
    return GoalPerformance(
        total_actual=total_actual,
        total_goal=total_goal,
        compliance=percentage(total_actual, total_goal),
        difference=total_actual - total_goal,
    )


def _matches(goal: SalesGoal, filters: SalesFilters) -> bool:
    return (
        (not filters.branches or goal.branch in filters.branches)
        and (not filters.years or goal.year in filters.years)
        and (not filters.months or goal.month in filters.months)
    )


def summarize_goals(
    goals: Iterable[SalesGoal],
    filters: SalesFilters,
) -> GoalPerformance | None:
    """Return the goal KPI card for the sales filters.

    Goals are placed on the 15th of their month to test the date range.

    Returns:
        GoalPerformance | None: None when no goal matches.
    """
    relevant = [
        goal
        for goal in goals
        if _matches(goal, filters)
        and filters.matches_date(
            date(goal.year, goal.month, GOAL_DAY_OF_MONTH)
        )
    ]
    return _performance(relevant)


def _row(goal: SalesGoal) -> GoalRow:
    compliance = percentage(goal.actual_amount, goal.goal_amount)
    return GoalRow(
        branch=goal.branch,
        year=goal.year,
        month=goal.month,
        actual=goal.actual_amount,
        goal=goal.goal_amount,
        compliance=compliance,
        status=compliance_status(compliance),
    )


def compute_goal_compliance(
    goals: Iterable[SalesGoal],
    filters: SalesFilters,
    period: str | None = None,
) -> GoalComplianceReport:
    """Compute overall and per-period goal compliance.

    The date range of ``filters`` is ignored here; only branches, years and
    months apply.

    Args:
        goals: Goals with merged actuals.
        filters: Active sales filters.
        period: ``YYYY-MM`` period to analyse. Defaults to the latest period
            with actual sales, or the latest period with goals.

    Returns:
        GoalComplianceReport: The compliance overview.
    """
    filtered = [goal for goal in goals if _matches(goal, filters)]
    if not filtered:
        return GoalComplianceReport.empty()

    available = sorted({goal.period for goal in filtered}, reverse=True)
    with_sales = sorted(
        {goal.period for goal in filtered if goal.actual_amount > 0},
        reverse=True,
    )
    if period is None or period not in available:
        period = with_sales[0] if with_sales else available[0]

    period_goals = [goal for goal in filtered if goal.period == period]
    year, month = parse_month_key(period)
    prev_year, prev_month = shift_month(year, month, -1)
    previous = _performance(
        [
            goal
            for goal in filtered
            if (goal.year, goal.month) == (prev_year, prev_month)
        ]
    )
    current = _performance(period_goals)

    trend = None
    if previous is not None:
        if previous.compliance > 0:
            trend = (
                (current.compliance - previous.compliance)
                / previous.compliance
                * 100
            )
        else:
            trend = 100.0 if current.compliance > 0 else 0.0

    rows = sorted(
        (_row(goal) for goal in period_goals),
        key=lambda row: row.compliance,
        reverse=True,
    )
    return GoalComplianceReport(
        overall=_performance(filtered),
        selected_period=period,
        period=current,
        previous_compliance=(
            previous.compliance if previous is not None else None
        ),
        trend=trend,
        gauges=rows,
        details=[row for row in rows if row.actual > 0],
        available_periods=available,
    )


__all__ = [
    "GOAL_DAY_OF_MONTH",
    "compliance_status",
    "merge_goal_actuals",
    "summarize_goals",
    "compute_goal_compliance",
]
