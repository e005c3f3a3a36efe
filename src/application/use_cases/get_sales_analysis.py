"""Use case to compute the sales dashboard from stored records."""

from src.application.ports.records_repository import RecordsRepositoryPort
from src.domain.models import (
    RecordKind,
    SalesAnalysis,
    SalesFilters,
    apply_filters,
)
from src.domain.services import compute_sales_analysis
from src.infrastructure.logging.logger import get_app_logger


class GetSalesAnalysisUseCase:
    """Compute sales KPIs, charts and trends."""

    def __init__(self, repository: RecordsRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing the stored sales.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, filters: SalesFilters | None = None) -> SalesAnalysis:
        """Return the sales analysis for ``filters``.

        Args:
            filters: Optional sales filters; no restriction when omitted.

        Returns:
            SalesAnalysis: Aggregated sales figures.
        """
        filters = filters or SalesFilters()
        all_sales = self._repository.load_records(RecordKind.SALES)
        filtered = apply_filters(all_sales, filters)
        self._logger.info(
            f"Sales analysis over {len(filtered)} of "
            f"{len(all_sales)} records"
        )
        return compute_sales_analysis(filtered, filters, all_sales)


__all__ = ["GetSalesAnalysisUseCase"]
