"""Use cases for loading typed records into the record store.

Parsing spreadsheets is outside this project: callers hand over records that
are already typed. The use cases only check that every record belongs to the
requested kind and then overwrite the stored set.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from src.application.ports.records_repository import RecordsRepositoryPort
from src.domain.models import (
    ExpenseRecord,
    HRRecord,
    PurchaseRecord,
    RecordKind,
    SaleRecord,
    SalesGoal,
    StockRecord,
)
from src.infrastructure.logging.logger import get_app_logger

RECORD_TYPES = {
    RecordKind.SALES: SaleRecord,
    RecordKind.PURCHASES: PurchaseRecord,
    RecordKind.EXPENSES: ExpenseRecord,
    RecordKind.HR: HRRecord,
    RecordKind.STOCK: StockRecord,
}


@dataclass(frozen=True)
class ImportRecordsResult:
    """Result of an import run.

    Attributes:
        kind: Record kind that was replaced.
        received_count: Number of records handed to the use case.
        inserted_count: Number of records written to the store.
    """

    kind: RecordKind
    received_count: int
    inserted_count: int


class ImportRecordsUseCase:
    """Replace one record set in the store."""

    def __init__(self, repository: RecordsRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            repository: Port persisting record sets.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def run(
        self,
        kind: RecordKind | str,
        records: Sequence,
    ) -> ImportRecordsResult:
        """Overwrite the stored records of ``kind``.

        Args:
            kind: Record kind, as enum or its string value.
            records: Typed records to store.

        Returns:
            ImportRecordsResult: Summary of how many rows were processed.

        Raises:
            ValueError: If ``kind`` is unknown.
        """
        kind = RecordKind(kind)
        expected = RECORD_TYPES[kind]
        valid = [record for record in records if isinstance(record, expected)]
        skipped = len(records) - len(valid)
        if skipped:
            self._logger.warning(
                f"Skipped {skipped} records not of type {expected.__name__}"
            )

        inserted = self._repository.save_records(kind, valid)
        self._logger.info(f"Imported {inserted} {kind.value} records")
        return ImportRecordsResult(
            kind=kind,
            received_count=len(records),
            inserted_count=inserted,
        )


class ImportGoalsUseCase:
    """Replace the stored sales goals."""

    def __init__(self, repository: RecordsRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def run(self, goals: Sequence[SalesGoal]) -> int:
        """Store ``goals`` and return the number written."""
        inserted = self._repository.save_goals(list(goals))
        self._logger.info(f"Imported {inserted} sales goals")
        return inserted


__all__ = [
    "RECORD_TYPES",
    "ImportRecordsResult",
    "ImportRecordsUseCase",
    "ImportGoalsUseCase",
]
