"""Tests for the check_storage_cli adapter."""

import pytest

from src.adapters import check_storage_cli


class _DummyConnection:
    def __init__(self) -> None:
        self.executed: list[str] = []

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False

    def exec_driver_sql(self, statement: str) -> None:
        self.executed.append(statement)


class _DummyEngine:
    def __init__(self, url: str) -> None:
        self.url = url
        self.connection = _DummyConnection()

    def connect(self):
        return self.connection


class _Adapter:
    def __init__(self, engine) -> None:
        self.engine = engine
        self.disposed = False

    def get_engine(self):
        if isinstance(self.engine, Exception):
            raise self.engine
        return self.engine

    def dispose(self) -> None:
        self.disposed = True


class _Logger:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def info(self, msg: str) -> None:
        self.messages.append(msg)


def _patch(monkeypatch, adapter, logger) -> None:
    monkeypatch.setattr(
        check_storage_cli, "build_database_adapter", lambda: adapter
    )
    monkeypatch.setattr(check_storage_cli, "get_app_logger", lambda: logger)


def test_main_logs_url_and_runs_select(monkeypatch):
    """The CLI should log the store URL and execute SELECT 1."""
    engine = _DummyEngine("sqlite:///data/analytics.db")
    adapter = _Adapter(engine)
    logger = _Logger()
    _patch(monkeypatch, adapter, logger)

    check_storage_cli.main()

    assert "sqlite:///data/analytics.db" in logger.messages[0]
    assert logger.messages[-1] == "Record store connection is working."
    assert engine.connection.executed == ["SELECT 1"]
    assert adapter.disposed is True


def test_main_disposes_adapter_on_failure(monkeypatch):
    adapter = _Adapter(RuntimeError("unreachable"))
    _patch(monkeypatch, adapter, _Logger())

    with pytest.raises(RuntimeError):
        check_storage_cli.main()

    assert adapter.disposed is True
