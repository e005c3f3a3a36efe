"""Simple CLI to validate the record store connection.

This adapter is meant for local operations: it instantiates the concrete
database adapter from the infrastructure layer and runs a basic health
check against the configured store.
"""

from src.infrastructure.container import build_database_adapter
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run a basic connectivity check against the record store."""
    adapter = build_database_adapter()
    logger = get_app_logger()

    try:
        engine = adapter.get_engine()
        logger.info(f"Record store: {engine.url}")
        with engine.connect() as conn:
            conn.exec_driver_sql("SELECT 1")
        logger.info("Record store connection is working.")
    finally:
        adapter.dispose()


if __name__ == "__main__":  # pragma: no cover
    main()
