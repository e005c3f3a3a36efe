"""Use case to compute the purchases dashboard from stored records."""

from datetime import date

from src.application.ports.records_repository import RecordsRepositoryPort
from src.domain.models import (
    PurchaseFilters,
    PurchasesAnalysis,
    RecordKind,
    apply_filters,
)
from src.domain.services import compute_purchases_analysis
from src.infrastructure.logging.logger import get_app_logger


class GetPurchasesAnalysisUseCase:
    """Compute purchases KPIs and the sales-vs-purchases comparison."""

    def __init__(self, repository: RecordsRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        filters: PurchaseFilters | None = None,
        today: date | None = None,
    ) -> PurchasesAnalysis:
        """Return the purchases analysis for ``filters``.

        Args:
            filters: Optional purchase filters.
            today: Optional reference date for the in-progress month.

        Returns:
            PurchasesAnalysis: Aggregated purchase figures.
        """
        filters = filters or PurchaseFilters()
        purchases = self._repository.load_records(RecordKind.PURCHASES)
        sales = self._repository.load_records(RecordKind.SALES)
        filtered = apply_filters(purchases, filters)
        self._logger.info(
            f"Purchases analysis over {len(filtered)} of "
            f"{len(purchases)} records"
        )
        return compute_purchases_analysis(filtered, sales, today=today)


__all__ = ["GetPurchasesAnalysisUseCase"]
