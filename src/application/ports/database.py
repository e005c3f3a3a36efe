"""Database port for the record store.

Use cases and repositories reach SQL storage only through this protocol;
the infrastructure layer decides which URL and pool settings back it.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port owning the SQLAlchemy engine of the record store."""

    def get_engine(self) -> Engine:
        """Return the engine, creating it on first use.

        Returns:
            Engine: SQLAlchemy engine bound to the configured store.
        """

    def dispose(self) -> None:
        """Release pooled connections held by the engine."""


__all__ = ["DatabaseEnginePort"]
