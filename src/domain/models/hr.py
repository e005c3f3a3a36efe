"""Domain models for the payroll and headcount analysis."""

from dataclasses import dataclass, field
from datetime import date

from src.domain.models.common import ChartPoint, TimeSeriesPoint, TrendRow


@dataclass(frozen=True)
class HRKpis:
    """Headline payroll and headcount indicators.

    Attributes:
        total_salaries: Sum of filtered transaction amounts.
        employee_count: Active employees at the period end.
        avg_salary_employee: Per-head total of non-management staff,
            bonus-type components excluded from the sum.
        avg_salary_management: Per-head total of management staff.
        avg_age: Average age of the active roster at the period end.
        avg_seniority: Average seniority in years of the active roster.
        avg_vacation_days: Average computed vacation entitlement.
    """

    total_salaries: float = 0.0
    employee_count: int = 0
    avg_salary_employee: float = 0.0
    avg_salary_management: float = 0.0
    avg_age: float = 0.0
    avg_seniority: float = 0.0
    avg_vacation_days: float = 0.0


@dataclass(frozen=True)
class EmployeeRankingItem:
    """Period payroll total of one active employee."""

    name: str
    tax_id: str
    total_amount: float
    area: str
    category: str
    termination_date: date | None
    seniority: float
    vacation_days: float


@dataclass(frozen=True)
class SeniorityVsSalary:
    """Average salary and seniority of a category."""

    category: str
    avg_seniority: float
    avg_salary: float
    employee_count: int


@dataclass(frozen=True)
class VacationItem:
    """Computed vacation entitlement of one employee."""

    employee_name: str
    seniority: float
    vacation_days: int


@dataclass(frozen=True)
class BirthdayInfo:
    """Birthday of an active employee within the selected months."""

    name: str
    birth_date: date
    age_turning: int
    branch: str
    position: str


@dataclass(frozen=True)
class HRAnalysis:
    """Full result of the payroll aggregation."""

    kpis: HRKpis = field(default_factory=HRKpis)
    salary_by_type: list[ChartPoint] = field(default_factory=list)
    cost_by_area: list[ChartPoint] = field(default_factory=list)
    cost_by_activity: list[ChartPoint] = field(default_factory=list)
    employees_by_activity: list[ChartPoint] = field(default_factory=list)
    salary_evolution: list[TimeSeriesPoint] = field(default_factory=list)
    employee_ranking: list[EmployeeRankingItem] = field(default_factory=list)
    seniority_vs_salary: list[SeniorityVsSalary] = field(
        default_factory=list
    )
    yearly_trend: list[TrendRow] = field(default_factory=list)
    trend_years: list[str] = field(default_factory=list)
    available_years: list[str] = field(default_factory=list)
    available_areas: list[str] = field(default_factory=list)
    available_activities: list[str] = field(default_factory=list)
    available_categories: list[str] = field(default_factory=list)
    available_types: list[str] = field(default_factory=list)
    available_months: list[int] = field(default_factory=list)
    vacation_table: list[VacationItem] = field(default_factory=list)
    seniority_distribution: list[ChartPoint] = field(default_factory=list)
    avg_vacation_by_area: list[ChartPoint] = field(default_factory=list)
    avg_vacation_by_category: list[ChartPoint] = field(default_factory=list)
    birthdays: list[BirthdayInfo] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "HRAnalysis":
        """Return the zeroed result used when there is no data."""
        return cls()


__all__ = [
    "HRKpis",
    "EmployeeRankingItem",
    "SeniorityVsSalary",
    "VacationItem",
    "BirthdayInfo",
    "HRAnalysis",
]
