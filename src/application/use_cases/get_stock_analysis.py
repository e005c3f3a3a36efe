"""Use case to compute the stock dashboard from stored records."""

from src.application.ports.records_repository import RecordsRepositoryPort
from src.domain.models import StockAnalysis, StockFilters, apply_filters
from src.domain.services import compute_stock_analysis
from src.infrastructure.logging.logger import get_app_logger


class GetStockAnalysisUseCase:
    """Compute stock valuation, turnover and coverage."""

    def __init__(self, repository: RecordsRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing every record set.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, filters: StockFilters | None = None) -> StockAnalysis:
        """Return the stock analysis for ``filters``.

        Turnover and coverage need sales, purchases, expenses and payroll,
        so every record set is loaded.

        Raises:
            MissingDatasetError: If the repository returns a missing set.
        """
        filters = filters or StockFilters()
        records = self._repository.load_all()
        filtered = apply_filters(records.stock, filters)
        self._logger.info(
            f"Stock analysis over {len(filtered)} of "
            f"{len(records.stock)} records"
        )
        return compute_stock_analysis(
            filtered,
            records.stock,
            filters,
            sales=records.sales,
            purchases=records.purchases,
            expenses=records.expenses,
            hr=records.hr,
        )


__all__ = ["GetStockAnalysisUseCase"]
