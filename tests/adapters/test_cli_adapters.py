"""Tests for the command-line adapters."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.adapters import check_db_connection, init_db_cli, verify_balances_cli
from src.domain.models import BalanceAuditReport, BalanceDiscrepancy
from src.infrastructure import settings as settings_module
from src.infrastructure.db import create_sqlite_adapter


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


@pytest.fixture(autouse=True)
def _no_dotenv(monkeypatch):
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.delenv("LEDGER_OWNER_ID", raising=False)


def test_check_db_connection_runs_select_one(monkeypatch):
    """The CLI logs the URL and executes SELECT 1."""
    engine = _DummyEngine("postgresql://ledger")

    class _Adapter:
        def get_ledger_engine(self):
            return engine

    log_messages: list[str] = []

    class _Logger:
        def info(self, msg: str) -> None:
            log_messages.append(msg)

    monkeypatch.setattr(check_db_connection, "build_database_adapter", _Adapter)
    monkeypatch.setattr(check_db_connection, "get_app_logger", _Logger)

    check_db_connection.main()

    assert "postgresql://ledger" in log_messages[0]
    assert log_messages[-1] == "Ledger connection is working."
    assert engine.connection.executed == ["SELECT 1"]


def test_init_db_creates_schema_and_seeds_owner(monkeypatch, tmp_path, capsys):
    """With an owner configured, defaults are seeded exactly once."""
    adapter = create_sqlite_adapter(tmp_path / "init.db")
    monkeypatch.setattr(init_db_cli, "build_database_adapter", lambda: adapter)
    monkeypatch.setattr(init_db_cli, "get_app_logger", MagicMock)
    monkeypatch.setenv("LEDGER_OWNER_ID", "owner-7")

    try:
        init_db_cli.main()
        first = capsys.readouterr().out
        init_db_cli.main()
        second = capsys.readouterr().out
    finally:
        adapter.get_ledger_engine().dispose()

    assert "Ledger schema is up to date." in first
    assert "Seeded 19 account types, 8 debt types" in first
    assert "Seeded 0 account types, 0 debt types" in second


def test_init_db_skips_seeding_without_owner(monkeypatch, tmp_path, capsys):
    adapter = create_sqlite_adapter(tmp_path / "init.db")
    logger = MagicMock()
    monkeypatch.setattr(init_db_cli, "build_database_adapter", lambda: adapter)
    monkeypatch.setattr(init_db_cli, "get_app_logger", lambda: logger)

    try:
        init_db_cli.main()
    finally:
        adapter.get_ledger_engine().dispose()

    assert "Seeded" not in capsys.readouterr().out
    logger.warning.assert_called_once()


def test_verify_balances_requires_owner(monkeypatch):
    logger = MagicMock()
    monkeypatch.setattr(verify_balances_cli, "get_app_logger", lambda: logger)

    assert verify_balances_cli.main() == 1
    logger.error.assert_called_once()


@pytest.mark.parametrize(
    ("discrepancies", "exit_code", "expected_text"),
    [
        ([], 0, "All balances match"),
        (
            [
                BalanceDiscrepancy(
                    account_id="acc-1",
                    name="Checking",
                    stored_value=Decimal("105.00"),
                    expected_value=Decimal("100.00"),
                )
            ],
            1,
            "difference=5.00",
        ),
    ],
)
def test_verify_balances_prints_report(
    monkeypatch,
    capsys,
    discrepancies,
    exit_code,
    expected_text,
):
    """Exit code reflects whether the audit found a mismatch."""
    monkeypatch.setenv("LEDGER_OWNER_ID", "owner-1")
    monkeypatch.setattr(verify_balances_cli, "get_app_logger", MagicMock)
    monkeypatch.setattr(verify_balances_cli, "build_database_adapter", object)
    monkeypatch.setattr(
        verify_balances_cli,
        "build_accounts_repository",
        lambda db: MagicMock(),
    )
    monkeypatch.setattr(
        verify_balances_cli,
        "build_analytics_repository",
        lambda db: MagicMock(),
    )
    fake_use_case = MagicMock()
    fake_use_case.execute.return_value = BalanceAuditReport(
        checked_count=3,
        discrepancies=discrepancies,
    )
    monkeypatch.setattr(
        verify_balances_cli,
        "VerifyBalancesUseCase",
        lambda **kwargs: fake_use_case,
    )

    assert verify_balances_cli.main() == exit_code

    fake_use_case.execute.assert_called_once_with("owner-1")
    out = capsys.readouterr().out
    assert "Checked 3 accounts" in out
    assert expected_text in out
