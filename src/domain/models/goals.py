"""Domain models for sales goal compliance."""

from dataclasses import dataclass, field
from enum import Enum


class ComplianceStatus(str, Enum):
    """Traffic-light status of a compliance percentage."""

    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


@dataclass(frozen=True)
class SalesGoal:
    """Monthly sales goal of a branch.

    Attributes:
        branch: Branch code.
        year: Goal year.
        month: Goal month (1-12).
        goal_amount: Target gross sales.
        actual_amount: Achieved signed gross sales, merged from sales data.
    """

    branch: str
    year: int
    month: int
    goal_amount: float
    actual_amount: float = 0.0

    @property
    def goal_id(self) -> str:
        return f"{self.branch}-{self.year}-{self.month:02d}"

    @property
    def period(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


@dataclass(frozen=True)
class GoalPerformance:
    """Aggregated actual against goal."""

    total_actual: float = 0.0
    total_goal: float = 0.0
    compliance: float = 0.0
    difference: float = 0.0


@dataclass(frozen=True)
class GoalRow:
    """Compliance of a single branch goal in the selected period."""

    branch: str
    year: int
    month: int
    actual: float
    goal: float
    compliance: float
    status: ComplianceStatus

    @property
    def shortfall(self) -> float:
        return max(0.0, self.goal - self.actual)


@dataclass(frozen=True)
class GoalComplianceReport:
    """Goal compliance overview.

    Attributes:
        overall: Performance across every filtered goal.
        selected_period: ``YYYY-MM`` period analysed, None without goals.
        period: Performance of the selected period.
        previous_compliance: Compliance of the month before, None when no
            goal exists for it.
        trend: Change of compliance against the previous month, in percent.
        gauges: Per-branch rows of the period sorted by compliance.
        details: Rows of the period with actual sales, sorted by compliance.
        available_periods: Periods with goals, newest first.
    """

    overall: GoalPerformance | None = None
    selected_period: str | None = None
    period: GoalPerformance | None = None
    previous_compliance: float | None = None
    trend: float | None = None
    gauges: list[GoalRow] = field(default_factory=list)
    details: list[GoalRow] = field(default_factory=list)
    available_periods: list[str] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "GoalComplianceReport":
        """Return the report used when no goal matches."""
        return cls()


__all__ = [
    "ComplianceStatus",
    "SalesGoal",
    "GoalPerformance",
    "GoalRow",
    "GoalComplianceReport",
]
