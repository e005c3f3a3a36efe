"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root

DEFAULT_CHUNK_SIZE = 1000
DEFAULT_DB_FILENAME = "analytics.db"


@dataclass(frozen=True)
class StorageSettings:
    """Settings for the record store.

    Attributes:
        db_url: SQLAlchemy URL of the record store.
        chunk_size: Number of rows per bulk insert batch.
    """

    db_url: str
    chunk_size: int = DEFAULT_CHUNK_SIZE

    @classmethod
    def from_env(cls) -> "StorageSettings":
        """Build settings from environment variables and ``.env``.

        Returns:
            StorageSettings: Settings sourced from environment variables.

        Raises:
            RuntimeError: If ``ANALYTICS_DB_URL`` is set but blank.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        raw_url = os.getenv("ANALYTICS_DB_URL")
        if raw_url is None:
            db_url = cls._default_db_url()
        elif not raw_url.strip():
            raise RuntimeError("ANALYTICS_DB_URL is set but empty")
        else:
            db_url = raw_url.strip()
        chunk_size = cls._parse_chunk_size(
            os.getenv("ANALYTICS_CHUNK_SIZE"),
            logger=logger,
        )
        return cls(db_url=db_url, chunk_size=chunk_size)

    @staticmethod
    def _default_db_url() -> str:
        """Return the SQLite URL of ``data/analytics.db``.

        The ``data`` directory is created when missing because SQLite does
        not create parent directories.
        """
        data_dir = get_project_root() / "data"
        data_dir.mkdir(parents=True, exist_ok=True)
        return f"sqlite:///{data_dir / DEFAULT_DB_FILENAME}"

    @staticmethod
    def _parse_chunk_size(raw_value: str | None, logger) -> int:
        """Parse the chunk size, falling back to the default.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            int: A positive chunk size.
        """
        if raw_value is None or not raw_value.strip():
            return DEFAULT_CHUNK_SIZE
        try:
            value = int(raw_value)
        except ValueError:
            logger.warning(
                f"Invalid ANALYTICS_CHUNK_SIZE {raw_value!r}; "
                f"using {DEFAULT_CHUNK_SIZE}"
            )
            return DEFAULT_CHUNK_SIZE
        if value <= 0:
            logger.warning(
                f"ANALYTICS_CHUNK_SIZE must be positive; "
                f"using {DEFAULT_CHUNK_SIZE}"
            )
            return DEFAULT_CHUNK_SIZE
        return value


__all__ = ["StorageSettings", "DEFAULT_CHUNK_SIZE"]
