"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.records_repository import RecordsRepositoryPort
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.records_repository import SqlAlchemyRecordsRepository
from src.infrastructure.settings import StorageSettings


def build_settings() -> StorageSettings:
    """Return storage settings read from the environment."""
    return StorageSettings.from_env()


def build_database_adapter(
    settings: StorageSettings | None = None,
) -> DatabaseEnginePort:
    """Return a database adapter owning its own engine."""
    return SqlAlchemyDatabaseEngineAdapter(settings or build_settings())


def build_records_repository(
    db_port: DatabaseEnginePort | None = None,
    settings: StorageSettings | None = None,
) -> RecordsRepositoryPort:
    """Return the record repository for imports and analyses."""
    resolved_settings = settings or build_settings()
    resolved_db = db_port or build_database_adapter(resolved_settings)
    return SqlAlchemyRecordsRepository(
        resolved_db,
        logger=get_app_logger(),
        chunk_size=resolved_settings.chunk_size,
    )


__all__ = [
    "build_settings",
    "build_database_adapter",
    "build_records_repository",
]
