"""Use case to compare stored sales goals against actual sales."""

from src.application.ports.records_repository import RecordsRepositoryPort
from src.domain.models import (
    GoalComplianceReport,
    GoalPerformance,
    RecordKind,
    SalesFilters,
    SalesGoal,
)
from src.domain.services import (
    compute_goal_compliance,
    merge_goal_actuals,
    summarize_goals,
)
from src.infrastructure.logging.logger import get_app_logger


class GetGoalComplianceUseCase:
    """Merge actual sales into goals and compute compliance."""

    def __init__(self, repository: RecordsRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing goals and sales.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        filters: SalesFilters | None = None,
        period: str | None = None,
    ) -> GoalComplianceReport:
        """Return the compliance overview.

        Args:
            filters: Optional sales filters; the date range is ignored.
            period: Optional ``YYYY-MM`` period to analyse.

        Returns:
            GoalComplianceReport: Overall and per-period compliance.
        """
        goals = self._load_goals()
        report = compute_goal_compliance(
            goals, filters or SalesFilters(), period
        )
        if report.selected_period is None:
            self._logger.warning("No sales goals match the selection")
        else:
            self._logger.info(
                f"Goal compliance for {report.selected_period}: "
                f"{report.period.compliance:.1f}%"
            )
        return report

    def summarize(
        self,
        filters: SalesFilters | None = None,
    ) -> GoalPerformance | None:
        """Return the goal KPI card for the sales filters."""
        return summarize_goals(self._load_goals(), filters or SalesFilters())

    def _load_goals(self) -> list[SalesGoal]:
        goals = self._repository.load_goals()
        sales = self._repository.load_records(RecordKind.SALES)
        return merge_goal_actuals(goals, sales)


__all__ = ["GetGoalComplianceUseCase"]
