"""Tests for the SQLAlchemy record repository on a temporary SQLite file."""

from datetime import date
from unittest.mock import MagicMock

import pytest

from src.domain.models import (
    ExpenseRecord,
    HRRecord,
    Modality,
    PurchaseRecord,
    RecordKind,
    SaleRecord,
    SalesGoal,
    StockRecord,
    VoucherKind,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.records_repository import (
    GOALS_SPEC,
    TABLE_SPECS,
    SqlAlchemyRecordsRepository,
)
from src.infrastructure.settings import StorageSettings


@pytest.fixture
def adapter(tmp_path):
    settings = StorageSettings(
        db_url=f"sqlite:///{tmp_path / 'records.db'}", chunk_size=2
    )
    db_adapter = SqlAlchemyDatabaseEngineAdapter(settings)
    yield db_adapter
    db_adapter.dispose()


@pytest.fixture
def repository(adapter):
    return SqlAlchemyRecordsRepository(
        adapter, logger=MagicMock(), chunk_size=2
    )


def _sales() -> list[SaleRecord]:
    return [
        SaleRecord(
            date(2024, 3, 10),
            branch="LIBANO",
            client="C1",
            voucher_type="FA A",
            gross_amount=1210.5,
            net_amount=1000.0,
            modality=Modality.DECLARED,
            point_of_sale=3,
        ),
        SaleRecord(
            date(2024, 1, 2),
            branch="MITRE",
            voucher_type="NC B",
            voucher_quantity=-1,
            gross_amount=200.0,
            modality=Modality.UNDECLARED,
        ),
        SaleRecord(date(2024, 2, 1), voucher_type="ND A", gross_amount=50.0),
    ]


def test_save_and_load_preserve_values_and_order(repository) -> None:
    """Records come back equal and in the order they were saved."""
    sales = _sales()

    inserted = repository.save_records(RecordKind.SALES, sales)
    loaded = repository.load_records(RecordKind.SALES)

    assert inserted == 3
    assert loaded == sales
    assert [sale.kind for sale in loaded] == [
        VoucherKind.INVOICE,
        VoucherKind.CREDIT_NOTE,
        VoucherKind.DEBIT_NOTE,
    ]
    assert loaded[1].modality is Modality.UNDECLARED
    assert isinstance(loaded[0].date, date)


def test_save_overwrites_previous_records(repository) -> None:
    repository.save_records(RecordKind.SALES, _sales())

    repository.save_records(RecordKind.SALES, _sales()[:1])

    assert len(repository.load_records("sales")) == 1


def test_optional_dates_round_trip(repository) -> None:
    records = [
        HRRecord(
            date(2024, 3, 31),
            tax_id="20-1",
            amount=1500.0,
            hire_date=date(2019, 3, 1),
            termination_date=None,
            birth_date=date(1985, 6, 15),
        ),
        HRRecord(date(2024, 3, 31), tax_id="20-2", hire_date=None),
    ]

    repository.save_records(RecordKind.HR, records)

    assert repository.load_records(RecordKind.HR) == records


def test_load_all_returns_every_kind(repository) -> None:
    repository.save_records(
        RecordKind.PURCHASES,
        [
            PurchaseRecord(
                date(2024, 1, 5),
                provider="ACME",
                modality=Modality.UNDECLARED,
                gross_amount=100.0,
            )
        ],
    )
    repository.save_records(
        RecordKind.EXPENSES,
        [ExpenseRecord(date(2024, 1, 6), category="SERVICIOS", amount=10.0)],
    )
    repository.save_records(
        RecordKind.STOCK,
        [StockRecord(date(2024, 1, 31), branch="LIBANO", cost=5.0)],
    )

    records = repository.load_all()

    assert records.sales == []
    assert records.hr == []
    assert records.purchases[0].modality is Modality.UNDECLARED
    assert records.expenses[0].amount == 10.0
    assert records.stock[0].cost == 5.0


def test_loading_before_any_save_returns_empty(repository) -> None:
    assert repository.load_records(RecordKind.STOCK) == []
    assert repository.load_goals() == []


def test_goals_round_trip_without_actuals(repository) -> None:
    """Actual amounts are derived from sales and never stored."""
    goals = [
        SalesGoal("LIBANO", 2024, 3, 1000.0, actual_amount=900.0),
        SalesGoal("MITRE", 2024, 3, 500.0),
    ]

    assert repository.save_goals(goals) == 2
    loaded = repository.load_goals()

    assert loaded == [
        SalesGoal("LIBANO", 2024, 3, 1000.0),
        SalesGoal("MITRE", 2024, 3, 500.0),
    ]


def test_save_logs_row_count(adapter) -> None:
    logger = MagicMock()
    repository = SqlAlchemyRecordsRepository(adapter, logger=logger)

    repository.save_records(RecordKind.SALES, _sales())

    logger.info.assert_called_once_with("Stored 3 rows into sales_records")


def test_truncate_uses_delete_on_sqlite() -> None:
    conn = MagicMock()
    conn.engine.dialect.name = "sqlite"

    SqlAlchemyRecordsRepository._truncate_table(conn, "sales_records")

    conn.exec_driver_sql.assert_called_once_with("DELETE FROM sales_records")


def test_truncate_uses_truncate_elsewhere() -> None:
    conn = MagicMock()
    conn.engine.dialect.name = "postgresql"

    SqlAlchemyRecordsRepository._truncate_table(conn, "sales_records")

    conn.exec_driver_sql.assert_called_once_with(
        "TRUNCATE TABLE sales_records"
    )


def test_table_specs_skip_computed_fields() -> None:
    names = [column.name for column in TABLE_SPECS[RecordKind.SALES].columns]

    assert "kind" not in names
    assert names[0] == "date"
    assert "actual_amount" not in [c.name for c in GOALS_SPEC.columns]
