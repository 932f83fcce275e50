"""Tests for the infrastructure.db module."""

import pytest
from sqlalchemy import text

from src.infrastructure import db as db_module


def test_get_env_var_reads_environment(monkeypatch):
    """_get_env_var should load .env and return the requested value."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("LEDGER_DB_URL", "postgresql://example")

    assert db_module._get_env_var("LEDGER_DB_URL") == "postgresql://example"


def test_get_env_var_raises_when_missing(monkeypatch):
    """Missing env vars should raise a RuntimeError."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.delenv("LEDGER_DB_URL", raising=False)

    with pytest.raises(RuntimeError, match="LEDGER_DB_URL"):
        db_module._get_env_var("LEDGER_DB_URL")


def test_create_engine_pools_server_databases(monkeypatch):
    """Server URLs get a QueuePool with health checks."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["db_url"] = db_url
        captured["kwargs"] = kwargs
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    engine = db_module._create_engine("postgresql://ledger")

    assert engine == "engine"
    assert captured["db_url"] == "postgresql://ledger"
    assert captured["kwargs"]["poolclass"] is db_module.QueuePool
    assert captured["kwargs"]["pool_size"] == 5
    assert captured["kwargs"]["pool_pre_ping"] is True


def test_sqlite_engine_enforces_foreign_keys(tmp_path):
    """SQLite connections enable foreign keys on connect."""
    adapter = db_module.create_sqlite_adapter(tmp_path / "fk.db")
    engine = adapter.get_ledger_engine()
    try:
        with engine.connect() as conn:
            enabled = conn.execute(text("PRAGMA foreign_keys")).scalar()
    finally:
        engine.dispose()

    assert enabled == 1


def test_get_ledger_engine_caches_engine(monkeypatch):
    """get_ledger_engine should memoize the created engine."""
    monkeypatch.setattr(db_module, "_ledger_engine", None)
    created = []

    def fake_create_engine(url):
        created.append(url)
        return f"engine:{url}"

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("LEDGER_DB_URL", "sqlite:///ledger.db")

    engine_one = db_module.get_ledger_engine()
    engine_two = db_module.get_ledger_engine()

    assert engine_one is engine_two
    assert created == ["sqlite:///ledger.db"]


def test_adapter_prefers_injected_engine(monkeypatch):
    """An injected engine wins over the global singleton."""
    monkeypatch.setattr(db_module, "get_ledger_engine", lambda: "global")

    assert db_module.SqlAlchemyDatabaseEngineAdapter().get_ledger_engine() == (
        "global"
    )
    assert db_module.SqlAlchemyDatabaseEngineAdapter(
        engine="injected"
    ).get_ledger_engine() == "injected"
