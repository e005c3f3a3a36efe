"""Use case to compute the expenses dashboard from stored records."""

from src.application.ports.records_repository import RecordsRepositoryPort
from src.domain.models import (
    ExpenseFilters,
    ExpensesAnalysis,
    RecordKind,
    apply_filters,
)
from src.domain.services import compute_expenses_analysis
from src.infrastructure.logging.logger import get_app_logger


class GetExpensesAnalysisUseCase:
    """Compute expense KPIs, breakdowns and drill-down aggregates."""

    def __init__(self, repository: RecordsRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        filters: ExpenseFilters | None = None,
    ) -> ExpensesAnalysis:
        """Return the expenses analysis for ``filters``."""
        filters = filters or ExpenseFilters()
        expenses = self._repository.load_records(RecordKind.EXPENSES)
        filtered = apply_filters(expenses, filters)
        self._logger.info(
            f"Expenses analysis over {len(filtered)} of "
            f"{len(expenses)} records"
        )
        return compute_expenses_analysis(filtered, expenses)


__all__ = ["GetExpensesAnalysisUseCase"]
