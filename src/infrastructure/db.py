"""Database infrastructure for the analytics record store.

This module exposes the concrete adapter that creates and reuses the
SQLAlchemy engine of the record store. It belongs to the infrastructure layer
because it deals with external systems (SQLite or PostgreSQL).
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort
from src.infrastructure.settings import StorageSettings


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by one SQLAlchemy engine.

    The engine is created on first use and owned by the adapter; entry
    points call ``dispose`` when they are done.
    """

    def __init__(self, settings: StorageSettings | None = None) -> None:
        """Initialize the adapter.

        Args:
            settings: Optional storage settings. Read from the environment on
                first use when omitted.
        """
        self._settings = settings
        self._engine: Engine | None = None

    @property
    def settings(self) -> StorageSettings:
        if self._settings is None:
            self._settings = StorageSettings.from_env()
        return self._settings

    def get_engine(self) -> Engine:
        """Get the engine for the record store.

        Returns:
            Engine: Lazily initialized engine.
        """
        if self._engine is None:
            self._engine = _create_engine(self.settings.db_url)
        return self._engine

    def dispose(self) -> None:
        """Dispose the engine if it was created."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None


__all__ = ["SqlAlchemyDatabaseEngineAdapter"]
