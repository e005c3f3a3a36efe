"""Tests for infrastructure settings."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import DEFAULT_CHUNK_SIZE, StorageSettings


@pytest.fixture(autouse=True)
def _no_dotenv(monkeypatch) -> None:
    monkeypatch.setattr(
        settings_module.dotenv, "load_dotenv", lambda *a, **k: False
    )
    monkeypatch.setattr(settings_module, "get_app_logger", MagicMock)
    monkeypatch.delenv("ANALYTICS_DB_URL", raising=False)
    monkeypatch.delenv("ANALYTICS_CHUNK_SIZE", raising=False)


def test_from_env_defaults_to_sqlite_file(monkeypatch, tmp_path: Path):
    """Without a URL the store is a SQLite file under data/."""
    monkeypatch.setattr(settings_module, "get_project_root", lambda: tmp_path)

    settings = StorageSettings.from_env()

    expected = tmp_path / "data" / "analytics.db"
    assert settings.db_url == f"sqlite:///{expected}"
    assert settings.chunk_size == DEFAULT_CHUNK_SIZE
    assert (tmp_path / "data").is_dir()


def test_from_env_reads_url_and_chunk_size(monkeypatch) -> None:
    monkeypatch.setenv("ANALYTICS_DB_URL", " postgresql://user@host/db ")
    monkeypatch.setenv("ANALYTICS_CHUNK_SIZE", "250")

    settings = StorageSettings.from_env()

    assert settings.db_url == "postgresql://user@host/db"
    assert settings.chunk_size == 250


def test_from_env_rejects_blank_url(monkeypatch) -> None:
    monkeypatch.setenv("ANALYTICS_DB_URL", "   ")

    with pytest.raises(RuntimeError):
        StorageSettings.from_env()


@pytest.mark.parametrize("raw", ["abc", "0", "-5"])
def test_invalid_chunk_size_falls_back_with_warning(raw: str) -> None:
    logger = MagicMock()

    value = StorageSettings._parse_chunk_size(raw, logger)

    assert value == DEFAULT_CHUNK_SIZE
    logger.warning.assert_called_once()


def test_blank_chunk_size_uses_default_silently() -> None:
    logger = MagicMock()

    assert StorageSettings._parse_chunk_size("  ", logger) == 1000
    logger.warning.assert_not_called()
