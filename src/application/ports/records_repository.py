"""Port for persisting and loading typed business records."""

from collections.abc import Sequence
from typing import Protocol

from src.domain.models import RecordKind, RecordSets, SalesGoal


class RecordsRepositoryPort(Protocol):
    """Port exposing the record sets consumed by the aggregators."""

    def save_records(self, kind: RecordKind, records: Sequence) -> int:
        """Replace every stored record of ``kind`` and return the count."""

    def load_records(self, kind: RecordKind) -> list:
        """Return every stored record of ``kind``."""

    def load_all(self) -> RecordSets:
        """Return the five record sets."""

    def save_goals(self, goals: Sequence[SalesGoal]) -> int:
        """Replace every stored sales goal and return the count."""

    def load_goals(self) -> list[SalesGoal]:
        """Return every stored sales goal, without actual amounts."""


__all__ = ["RecordsRepositoryPort"]
