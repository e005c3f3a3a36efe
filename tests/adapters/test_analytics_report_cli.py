"""Tests for the analytics_report_cli adapter."""

from datetime import date
from unittest.mock import MagicMock

from src.adapters import analytics_report_cli
from src.application.ports.records_repository import RecordsRepositoryPort
from src.domain.models import (
    PeriodFilters,
    RecordKind,
    RecordSets,
    SaleRecord,
    SalesGoal,
)


class _InMemoryRecordsRepository(RecordsRepositoryPort):
    """Port implementation keeping records in memory."""

    def __init__(self, records: RecordSets, goals=None) -> None:
        self._records = {kind: list(records.get(kind)) for kind in RecordKind}
        self._goals = list(goals or [])

    def save_records(self, kind, records) -> int:
        self._records[RecordKind(kind)] = list(records)
        return len(records)

    def load_records(self, kind) -> list:
        return list(self._records[RecordKind(kind)])

    def load_all(self) -> RecordSets:
        return RecordSets(
            **{kind.value: self.load_records(kind) for kind in RecordKind}
        )

    def save_goals(self, goals) -> int:
        self._goals = list(goals)
        return len(self._goals)

    def load_goals(self) -> list[SalesGoal]:
        return list(self._goals)


def test_build_report_on_empty_store() -> None:
    """An empty store yields zeroed lines and no goals line."""
    repository = _InMemoryRecordsRepository(RecordSets())

    lines = analytics_report_cli.build_report(
        repository, MagicMock(), PeriodFilters()
    )

    assert lines[0] == "Sales: 0.00 (0 invoices, 0 credit notes)"
    assert lines[3] == "Payroll: 0.00 (0 employees)"
    assert lines[-1] == "Net income: 0.00"
    assert not any(line.startswith("Goals:") for line in lines)


def test_build_report_includes_goal_summary() -> None:
    repository = _InMemoryRecordsRepository(
        RecordSets(
            sales=[
                SaleRecord(
                    date(2024, 5, 2),
                    branch="LIBANO",
                    gross_amount=1250.0,
                    net_amount=1000.0,
                )
            ]
        ),
        goals=[SalesGoal("LIBANO", 2024, 5, 2500.0)],
    )

    lines = analytics_report_cli.build_report(
        repository, MagicMock(), PeriodFilters(years=(2024,))
    )

    assert lines[0] == "Sales: 1,250.00 (1 invoices, 0 credit notes)"
    assert "Net sales: 1,000.00" in lines
    assert lines[-1] == "Goals: 1,250.00 of 2,500.00 (50.0%)"


def test_parse_int_list_skips_invalid_items(monkeypatch) -> None:
    logger = MagicMock()
    monkeypatch.setenv("REPORT_MONTHS", "1, x,3,,")

    values = analytics_report_cli._parse_int_list("REPORT_MONTHS", logger)

    assert values == (1, 3)
    logger.warning.assert_called_once()


def test_main_prints_report_and_disposes(monkeypatch, capsys) -> None:
    """main wires the container, prints every line and disposes."""
    db_adapter = MagicMock()
    usage_logger = MagicMock()
    repository = _InMemoryRecordsRepository(RecordSets())
    monkeypatch.setenv("REPORT_YEARS", "2024")
    monkeypatch.delenv("REPORT_MONTHS", raising=False)
    monkeypatch.setattr(analytics_report_cli, "get_app_logger", MagicMock)
    monkeypatch.setattr(
        analytics_report_cli, "get_usage_logger", lambda: usage_logger
    )
    monkeypatch.setattr(analytics_report_cli, "build_settings", MagicMock)
    monkeypatch.setattr(
        analytics_report_cli,
        "build_database_adapter",
        lambda settings: db_adapter,
    )
    monkeypatch.setattr(
        analytics_report_cli,
        "build_records_repository",
        lambda db_port, settings: repository,
    )

    analytics_report_cli.main()

    output = capsys.readouterr().out.splitlines()
    assert output[0].startswith("Sales:")
    assert output[-1] == "Net income: 0.00"
    usage_logger.info.assert_called_once_with(
        "analytics_report years=(2024,) months=()"
    )
    db_adapter.dispose.assert_called_once_with()
