"""SQLAlchemy repository persisting typed business records.

Each record kind lives in its own table whose columns mirror the fields of
the record dataclass plus a ``position`` column that preserves load order.
Saving a kind replaces its whole table.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, fields
from datetime import date, datetime
from typing import Any

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.records_repository import RecordsRepositoryPort
from src.domain.models import (
    ExpenseRecord,
    HRRecord,
    Modality,
    PurchaseRecord,
    RecordKind,
    RecordSets,
    SaleRecord,
    SalesGoal,
    StockRecord,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import DEFAULT_CHUNK_SIZE
from src.utils.number_utils import coerce_float

GOALS_TABLE = "sales_goals"


def _to_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def _to_optional_date(value: Any) -> date | None:
    if value is None or value == "":
        return None
    return _to_date(value)


def _to_text(value: Any) -> str:
    return "" if value is None else str(value)


def _to_int(value: Any) -> int:
    return int(coerce_float(value))


@dataclass(frozen=True)
class ColumnSpec:
    """Mapping between a record field and its table column."""

    name: str
    sql_type: str
    load: Callable[[Any], Any]


_COLUMN_TYPES: dict[Any, tuple[str, Callable[[Any], Any]]] = {
    date: ("TEXT", _to_date),
    date | None: ("TEXT", _to_optional_date),
    str: ("TEXT", _to_text),
    float: ("DOUBLE PRECISION", coerce_float),
    int: ("INTEGER", _to_int),
    Modality: ("TEXT", Modality),
}


def _columns_for(record_type: type) -> tuple[ColumnSpec, ...]:
    """Derive column specs from the init fields of a record dataclass."""
    columns = []
    for item in fields(record_type):
        if not item.init:
            continue
        sql_type, loader = _COLUMN_TYPES[item.type]
        columns.append(ColumnSpec(item.name, sql_type, loader))
    return tuple(columns)


@dataclass(frozen=True)
class RecordTableSpec:
    """Specification of the table backing one record type."""

    name: str
    record_type: type
    columns: tuple[ColumnSpec, ...]

    @property
    def create_sql(self) -> str:
        definitions = ",\n    ".join(
            f"{column.name} {column.sql_type}" for column in self.columns
        )
        return (
            f"CREATE TABLE IF NOT EXISTS {self.name} (\n"
            f"    position INTEGER NOT NULL,\n"
            f"    {definitions}\n"
            f")"
        )

    @property
    def insert_sql(self) -> str:
        names = ["position", *(column.name for column in self.columns)]
        return (
            f"INSERT INTO {self.name} ({', '.join(names)}) "
            f"VALUES ({', '.join(f':{name}' for name in names)})"
        )

    @property
    def select_sql(self) -> str:
        names = ", ".join(column.name for column in self.columns)
        return f"SELECT {names} FROM {self.name} ORDER BY position"

    def to_row(self, position: int, record) -> dict[str, Any]:
        """Serialize ``record`` into insert parameters."""
        row: dict[str, Any] = {"position": position}
        for column in self.columns:
            value = getattr(record, column.name)
            if isinstance(value, Modality):
                value = value.value
            elif isinstance(value, date):
                value = value.isoformat()
            row[column.name] = value
        return row

    def from_row(self, mapping) -> Any:
        """Build a record from a result row mapping."""
        values = {
            column.name: column.load(mapping[column.name])
            for column in self.columns
        }
        return self.record_type(**values)


def _table(name: str, record_type: type) -> RecordTableSpec:
    return RecordTableSpec(name, record_type, _columns_for(record_type))


TABLE_SPECS: dict[RecordKind, RecordTableSpec] = {
    RecordKind.SALES: _table("sales_records", SaleRecord),
    RecordKind.PURCHASES: _table("purchase_records", PurchaseRecord),
    RecordKind.EXPENSES: _table("expense_records", ExpenseRecord),
    RecordKind.HR: _table("hr_records", HRRecord),
    RecordKind.STOCK: _table("stock_records", StockRecord),
}

GOALS_SPEC = RecordTableSpec(
    GOALS_TABLE,
    SalesGoal,
    (
        ColumnSpec("branch", "TEXT", _to_text),
        ColumnSpec("year", "INTEGER", _to_int),
        ColumnSpec("month", "INTEGER", _to_int),
        ColumnSpec("goal_amount", "DOUBLE PRECISION", coerce_float),
    ),
)


class SqlAlchemyRecordsRepository(RecordsRepositoryPort):
    """Record repository backed by SQLAlchemy."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        logger=None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the record store engine.
            logger: Optional logger compatible with logging.Logger-like API.
            chunk_size: Number of rows per bulk insert batch.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()
        self._chunk_size = chunk_size

    def save_records(self, kind: RecordKind, records: Sequence) -> int:
        """Replace every stored record of ``kind``.

        Args:
            kind: Record kind to overwrite.
            records: Records of the matching dataclass.

        Returns:
            int: Number of records inserted.
        """
        return self._replace(TABLE_SPECS[RecordKind(kind)], records)

    def load_records(self, kind: RecordKind) -> list:
        """Return every stored record of ``kind`` in insertion order."""
        return self._load(TABLE_SPECS[RecordKind(kind)])

    def load_all(self) -> RecordSets:
        """Return the five record sets."""
        return RecordSets(
            sales=self.load_records(RecordKind.SALES),
            purchases=self.load_records(RecordKind.PURCHASES),
            expenses=self.load_records(RecordKind.EXPENSES),
            hr=self.load_records(RecordKind.HR),
            stock=self.load_records(RecordKind.STOCK),
        )

    def save_goals(self, goals: Sequence[SalesGoal]) -> int:
        """Replace every stored sales goal."""
        return self._replace(GOALS_SPEC, goals)

    def load_goals(self) -> list[SalesGoal]:
        """Return the stored sales goals with zero actual amounts."""
        return self._load(GOALS_SPEC)

    def _replace(self, table: RecordTableSpec, records: Sequence) -> int:
        payload = [
            table.to_row(position, record)
            for position, record in enumerate(records)
        ]
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(table.create_sql)
            self._truncate_table(conn, table.name)
            insert = text(table.insert_sql)
            for start in range(0, len(payload), self._chunk_size):
                conn.execute(insert, payload[start:start + self._chunk_size])
        self._logger.info(f"Stored {len(payload)} rows into {table.name}")
        return len(payload)

    def _load(self, table: RecordTableSpec) -> list:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(table.create_sql)
            rows = conn.execute(text(table.select_sql)).all()
        return [table.from_row(row._mapping) for row in rows]

    @staticmethod
    def _truncate_table(conn, table_name: str) -> None:
        dialect = conn.engine.dialect.name
        if dialect == "sqlite":
            conn.exec_driver_sql(f"DELETE FROM {table_name}")
            return
        conn.exec_driver_sql(f"TRUNCATE TABLE {table_name}")


__all__ = [
    "ColumnSpec",
    "RecordTableSpec",
    "TABLE_SPECS",
    "GOALS_SPEC",
    "SqlAlchemyRecordsRepository",
]
