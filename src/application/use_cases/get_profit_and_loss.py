"""Use case to compute the income statement from stored records."""

from src.application.ports.records_repository import RecordsRepositoryPort
from src.domain.models import PeriodFilters, ProfitAndLoss
from src.domain.services import compute_profit_and_loss
from src.infrastructure.logging.logger import get_app_logger


class GetProfitAndLossUseCase:
    """Compute the profit and loss statement for a period."""

    def __init__(self, repository: RecordsRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, filters: PeriodFilters | None = None) -> ProfitAndLoss:
        """Return the statement for the selected years and months."""
        filters = filters or PeriodFilters()
        records = self._repository.load_all()
        result = compute_profit_and_loss(
            sales=records.sales,
            purchases=records.purchases,
            expenses=records.expenses,
            hr=records.hr,
            stock=records.stock,
            filters=filters,
        )
        self._logger.info(
            f"Profit and loss computed: net_income={result.kpis.net_income}"
        )
        return result


__all__ = ["GetProfitAndLossUseCase"]
