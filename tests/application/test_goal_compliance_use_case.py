"""Tests for GetGoalComplianceUseCase."""

from datetime import date
from unittest.mock import MagicMock

import pytest

from src.application.use_cases import GetGoalComplianceUseCase
from src.domain.models import (
    RecordKind,
    SaleRecord,
    SalesFilters,
    SalesGoal,
)


def _repository(goals, sales) -> MagicMock:
    repository = MagicMock()
    repository.load_goals.return_value = goals
    repository.load_records.return_value = sales
    return repository


def test_execute_merges_actual_sales_into_goals() -> None:
    """Stored goals carry no actuals; the use case fills them in."""
    repository = _repository(
        [SalesGoal("LIBANO", 2024, 3, 1000.0)],
        [
            SaleRecord(date(2024, 3, 5), branch=" libano ", gross_amount=900),
            SaleRecord(
                date(2024, 3, 9),
                branch="LIBANO",
                voucher_type="ND A",
                gross_amount=500,
            ),
        ],
    )
    logger = MagicMock()

    report = GetGoalComplianceUseCase(repository, logger=logger).execute()

    repository.load_records.assert_called_once_with(RecordKind.SALES)
    assert report.selected_period == "2024-03"
    assert report.period.total_actual == 900
    assert report.period.compliance == pytest.approx(90.0)
    logger.info.assert_called_once()


def test_execute_warns_when_no_goal_matches() -> None:
    repository = _repository([SalesGoal("LIBANO", 2024, 3, 1000.0)], [])
    logger = MagicMock()

    report = GetGoalComplianceUseCase(repository, logger=logger).execute(
        SalesFilters(branches=("MITRE",))
    )

    assert report.selected_period is None
    logger.warning.assert_called_once()


def test_summarize_returns_none_without_goals() -> None:
    use_case = GetGoalComplianceUseCase(
        _repository([], []), logger=MagicMock()
    )

    assert use_case.summarize() is None
