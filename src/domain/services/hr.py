"""Domain services for the payroll and headcount analysis.

Headcount is derived from a roster rather than from the transaction stream:
each tax ID is represented by its most recent transaction, and an employee is
active when hired on or before the period end and not terminated by then.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date

from src.domain.models.common import ChartPoint, TimeSeriesPoint
from src.domain.models.filters import HRFilters
from src.domain.models.hr import (
    BirthdayInfo,
    EmployeeRankingItem,
    HRAnalysis,
    HRKpis,
    SeniorityVsSalary,
    VacationItem,
)
from src.domain.models.records import HRRecord
from src.domain.services.formatters import format_for_pie_chart
from src.domain.services.periods import (
    last_day_of_month,
    month_key,
    whole_years_between,
    years_between,
)
from src.domain.services.trends import build_yearly_trend
from src.utils.number_utils import safe_divide

MANAGEMENT_KEYWORDS = ("GERENCIA", "GERENTE")
EXCLUDED_SALARY_TYPES = frozenset({"AGUINALDO", "COMISIONES/ADICIONALES"})
SENIORITY_BUCKETS = ("0-5 años", "5-10 años", "10-20 años", "+20 años")
MISSING_KEY = "N/A"


@dataclass
class _Cohort:
    total: float = 0.0
    tax_ids: set[str] = field(default_factory=set)


@dataclass(frozen=True)
class _Vacation:
    record: HRRecord
    seniority: float
    days: int


def vacation_days_for(hire_date: date | None, reference: date) -> int:
    """Return the statutory vacation days for a hire date.

    Tiers by seniority at ``reference``: under six months one day per 20
    days worked, then 14 below 5 years, 21 below 10, 28 below 20 and 35
    from 20 years on. Each tier starts inclusive of its lower bound.

    Args:
        hire_date: Employee hire date.
        reference: Date the entitlement is computed at.

    Returns:
        int: Vacation days, 0 when not hired before ``reference``.
    """
    if hire_date is None or hire_date >= reference:
        return 0
    seniority = years_between(hire_date, reference)
    if seniority < 0.5:
        return math.floor((reference - hire_date).days / 20)
    if seniority < 5:
        return 14
    if seniority < 10:
        return 21
    if seniority < 20:
        return 28
    return 35


def period_end_for(
    filters: HRFilters,
    all_records: Sequence[HRRecord],
) -> date:
    """Return the last day of the latest selected year and month.

    The year defaults to the latest year in ``all_records`` and the month to
    December.
    """
    year = (
        max(filters.years)
        if filters.years
        else max(record.year for record in all_records)
    )
    month = max(filters.months) if filters.months else 12
    return last_day_of_month(year, month)


def build_roster(
    all_records: Sequence[HRRecord],
    filters: HRFilters,
    period_end: date,
) -> list[HRRecord]:
    """Return the active employees at ``period_end``.

    The roster ignores the month and pay-component filters so headcount does
    not depend on which component is selected.

    Args:
        all_records: Unfiltered payroll transactions.
        filters: Active filters; only years, areas and activities apply.
        period_end: Reference date for the active check.

    Returns:
        list[HRRecord]: One latest record per active tax ID.
    """
    latest: dict[str, HRRecord] = {}
    for record in all_records:
        if not filters.matches_roster(record):
            continue
        current = latest.get(record.tax_id)
        if current is None or record.date > current.date:
            latest[record.tax_id] = record
    return [
        record for record in latest.values() if _is_active(record, period_end)
    ]


def _is_active(record: HRRecord, period_end: date) -> bool:
    if record.hire_date is None or record.hire_date > period_end:
        return False
    return (
        record.termination_date is None
        or record.termination_date > period_end
    )


def compute_hr_analysis(
    records: Sequence[HRRecord],
    all_records: Sequence[HRRecord],
    filters: HRFilters,
) -> HRAnalysis:
    """Compute headcount, payroll and vacation figures.

    Args:
        records: Transactions already filtered by ``filters``.
        all_records: Unfiltered transactions for the roster, trends and
            available filter values.
        filters: Active payroll filters.

    Returns:
        HRAnalysis: The aggregated result, zeroed when ``all_records`` is
        empty.
    """
    if not all_records:
        return HRAnalysis.empty()

    period_end = period_end_for(filters, all_records)
    roster = build_roster(all_records, filters, period_end)
    employee_count = len(roster)

    total_age = 0
    total_seniority = 0.0
    for employee in roster:
        if employee.birth_date is not None:
            total_age += whole_years_between(employee.birth_date, period_end)
        total_seniority += years_between(employee.hire_date, period_end)

    reference = date(max(record.year for record in all_records), 12, 31)
    vacations = [
        _vacation_for(employee, reference) for employee in roster
    ]

    by_type: dict[str, float] = {}
    by_area: dict[str, float] = {}
    by_activity: dict[str, float] = {}
    by_month: dict[str, float] = {}
    by_employee: dict[str, float] = {}
    management = _Cohort()
    staff = _Cohort()
    for record in records:
        amount = record.amount
        by_type[record.transaction_type] = (
            by_type.get(record.transaction_type, 0.0) + amount
        )
        by_area[record.area] = by_area.get(record.area, 0.0) + amount
        by_activity[record.activity] = (
            by_activity.get(record.activity, 0.0) + amount
        )
        period = month_key(record.date)
        by_month[period] = by_month.get(period, 0.0) + amount
        by_employee[record.tax_id] = (
            by_employee.get(record.tax_id, 0.0) + amount
        )

        cohort = management if _is_management(record.category) else staff
        if record.transaction_type.upper() not in EXCLUDED_SALARY_TYPES:
            cohort.total += amount
        cohort.tax_ids.add(record.tax_id)

    employees_by_activity: dict[str, float] = {}
    for employee in roster:
        activity = employee.activity or MISSING_KEY
        employees_by_activity[activity] = (
            employees_by_activity.get(activity, 0) + 1
        )

    kpis = HRKpis(
        total_salaries=sum(record.amount for record in records),
        employee_count=employee_count,
        avg_salary_employee=safe_divide(staff.total, len(staff.tax_ids)),
        avg_salary_management=safe_divide(
            management.total, len(management.tax_ids)
        ),
        avg_age=safe_divide(total_age, employee_count),
        avg_seniority=safe_divide(total_seniority, employee_count),
        avg_vacation_days=safe_divide(
            sum(item.days for item in vacations), employee_count
        ),
    )
    yearly_trend, trend_years = build_yearly_trend(
        (record.date, record.amount) for record in all_records
    )

    return HRAnalysis(
        kpis=kpis,
        salary_by_type=format_for_pie_chart(by_type),
        cost_by_area=format_for_pie_chart(by_area),
        cost_by_activity=format_for_pie_chart(by_activity),
        employees_by_activity=format_for_pie_chart(employees_by_activity),
        salary_evolution=[
            TimeSeriesPoint(period=period, value=value)
            for period, value in sorted(by_month.items())
        ],
        employee_ranking=_employee_ranking(roster, by_employee, period_end),
        seniority_vs_salary=_seniority_vs_salary(
            records, roster, period_end
        ),
        yearly_trend=yearly_trend,
        trend_years=trend_years,
        available_years=sorted(
            {str(record.year) for record in all_records}, reverse=True
        ),
        available_areas=sorted({record.area for record in all_records}),
        available_activities=sorted(
            {record.activity for record in all_records}
        ),
        available_categories=sorted(
            {record.category for record in all_records}
        ),
        available_types=sorted(
            {record.transaction_type for record in all_records}
        ),
        available_months=sorted({record.month for record in all_records}),
        vacation_table=sorted(
            (
                VacationItem(
                    employee_name=item.record.employee_name,
                    seniority=item.seniority,
                    vacation_days=item.days,
                )
                for item in vacations
            ),
            key=lambda item: item.employee_name,
        ),
        seniority_distribution=_seniority_distribution(vacations),
        avg_vacation_by_area=_average_vacation(
            vacations, lambda record: record.area
        ),
        avg_vacation_by_category=_average_vacation(
            vacations, lambda record: record.category
        ),
        birthdays=_birthdays(roster, filters, period_end.year),
    )


def _is_management(category: str) -> bool:
    upper = category.upper()
    return any(keyword in upper for keyword in MANAGEMENT_KEYWORDS)


def _vacation_for(employee: HRRecord, reference: date) -> _Vacation:
    seniority = 0.0
    if employee.hire_date is not None and employee.hire_date < reference:
        seniority = years_between(employee.hire_date, reference)
    return _Vacation(
        record=employee,
        seniority=seniority,
        days=vacation_days_for(employee.hire_date, reference),
    )


def _seniority_distribution(vacations: list[_Vacation]) -> list[ChartPoint]:
    counts = dict.fromkeys(SENIORITY_BUCKETS, 0)
    for item in vacations:
        if item.seniority < 5:
            bucket = SENIORITY_BUCKETS[0]
        elif item.seniority < 10:
            bucket = SENIORITY_BUCKETS[1]
        elif item.seniority < 20:
            bucket = SENIORITY_BUCKETS[2]
        else:
            bucket = SENIORITY_BUCKETS[3]
        counts[bucket] += 1
    return [
        ChartPoint(name=name, value=value) for name, value in counts.items()
    ]


def _average_vacation(vacations: list[_Vacation], key) -> list[ChartPoint]:
    totals: dict[str, list[float]] = {}
    for item in vacations:
        group = totals.setdefault(key(item.record), [0.0, 0])
        group[0] += item.days
        group[1] += 1
    points = [
        ChartPoint(name=name, value=safe_divide(days, count))
        for name, (days, count) in totals.items()
    ]
    return sorted(points, key=lambda point: point.value, reverse=True)


def _employee_ranking(
    roster: list[HRRecord],
    totals: dict[str, float],
    period_end: date,
) -> list[EmployeeRankingItem]:
    items = []
    for employee in roster:
        until = employee.termination_date or period_end
        seniority = 0.0
        if employee.hire_date is not None and until > employee.hire_date:
            seniority = years_between(employee.hire_date, until)
        items.append(
            EmployeeRankingItem(
                name=employee.employee_name,
                tax_id=employee.tax_id,
                total_amount=totals.get(employee.tax_id, 0.0),
                area=employee.area,
                category=employee.category,
                termination_date=employee.termination_date,
                seniority=seniority,
                vacation_days=employee.vacation_days,
            )
        )
    return sorted(items, key=lambda item: item.total_amount, reverse=True)


def _seniority_vs_salary(
    records: Sequence[HRRecord],
    roster: list[HRRecord],
    period_end: date,
) -> list[SeniorityVsSalary]:
    salaries: dict[str, float] = {}
    for record in records:
        salaries[record.category] = (
            salaries.get(record.category, 0.0) + record.amount
        )
    employees: dict[str, set[str]] = {
        category: set() for category in salaries
    }
    seniority: dict[str, float] = dict.fromkeys(salaries, 0.0)
    for employee in roster:
        members = employees.get(employee.category)
        if members is None or employee.tax_id in members:
            continue
        members.add(employee.tax_id)
        seniority[employee.category] += years_between(
            employee.hire_date, period_end
        )

    items = [
        SeniorityVsSalary(
            category=category,
            avg_seniority=safe_divide(
                seniority[category], len(employees[category])
            ),
            avg_salary=safe_divide(total, len(employees[category])),
            employee_count=len(employees[category]),
        )
        for category, total in salaries.items()
    ]
    return sorted(items, key=lambda item: item.avg_salary, reverse=True)


def _birthdays(
    roster: list[HRRecord],
    filters: HRFilters,
    year: int,
) -> list[BirthdayInfo]:
    if not filters.months or not roster:
        return []
    items = [
        BirthdayInfo(
            name=employee.employee_name,
            birth_date=employee.birth_date,
            age_turning=year - employee.birth_date.year,
            branch=employee.area,
            position=employee.category,
        )
        for employee in roster
        if employee.birth_date is not None
        and employee.birth_date.month in filters.months
    ]
    return sorted(items, key=lambda item: item.birth_date.day)


__all__ = [
    "MANAGEMENT_KEYWORDS",
    "EXCLUDED_SALARY_TYPES",
    "SENIORITY_BUCKETS",
    "vacation_days_for",
    "period_end_for",
    "build_roster",
    "compute_hr_analysis",
]
