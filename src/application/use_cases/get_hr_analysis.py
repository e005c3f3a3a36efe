"""Use case to compute the payroll dashboard from stored records."""

from src.application.ports.records_repository import RecordsRepositoryPort
from src.domain.models import HRAnalysis, HRFilters, RecordKind, apply_filters
from src.domain.services import compute_hr_analysis
from src.infrastructure.logging.logger import get_app_logger


class GetHRAnalysisUseCase:
    """Compute payroll KPIs, roster statistics and vacations."""

    def __init__(self, repository: RecordsRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, filters: HRFilters | None = None) -> HRAnalysis:
        """Return the payroll analysis for ``filters``.

        The roster is rebuilt from the full transaction history, so the
        unfiltered records are always passed along.
        """
        filters = filters or HRFilters()
        transactions = self._repository.load_records(RecordKind.HR)
        filtered = apply_filters(transactions, filters)
        self._logger.info(
            f"HR analysis over {len(filtered)} of "
            f"{len(transactions)} transactions"
        )
        return compute_hr_analysis(filtered, transactions, filters)


__all__ = ["GetHRAnalysisUseCase"]
