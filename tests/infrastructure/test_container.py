"""Tests for the composition root."""

from src.application.use_cases.transaction_ledger import TransactionLedgerUseCase
from src.application.use_cases.transfer_funds import TransferFundsUseCase
from src.infrastructure import container
from src.infrastructure.accounts_repository import SqlAlchemyAccountsRepository
from src.infrastructure.analytics_repository import SqlAlchemyAnalyticsRepository
from src.infrastructure.ledger_store import SqlAlchemyLedgerStore
from src.infrastructure.settings import LedgerSettings


class _FakeDbPort:
    def get_ledger_engine(self):
        return "engine"


def test_repositories_use_given_db_port() -> None:
    """Builders wrap the injected port instead of the global engine."""
    db_port = _FakeDbPort()

    accounts = container.build_accounts_repository(db_port)
    analytics = container.build_analytics_repository(db_port)
    store = container.build_ledger_store(db_port)

    assert isinstance(accounts, SqlAlchemyAccountsRepository)
    assert isinstance(analytics, SqlAlchemyAnalyticsRepository)
    assert isinstance(store, SqlAlchemyLedgerStore)
    assert accounts._db_port is db_port
    assert store._db_port is db_port


def test_builders_fall_back_to_default_adapter(monkeypatch) -> None:
    """Without a port the environment-backed adapter is used."""
    default_port = _FakeDbPort()
    monkeypatch.setattr(container, "build_database_adapter", lambda: default_port)

    repo = container.build_debts_repository()

    assert repo._db_port is default_port


def test_ledger_and_transfers_follow_retry_settings(monkeypatch) -> None:
    """Retry settings flow into both write paths."""
    monkeypatch.setattr(container, "get_app_logger", lambda: "app")
    monkeypatch.setattr(container, "get_usage_logger", lambda: "usage")
    settings = LedgerSettings(conflict_retry_attempts=6, conflict_retry_max_wait=2.0)
    db_port = _FakeDbPort()

    ledger = container.build_transaction_ledger(db_port, settings)
    transfers = container.build_transfer_use_case(db_port, settings, ledger)

    assert isinstance(ledger, TransactionLedgerUseCase)
    assert isinstance(transfers, TransferFundsUseCase)
    assert ledger._retry_attempts == 6
    assert transfers._retry_max_wait == 2.0
    assert transfers._ledger is ledger
    assert ledger._usage_logger == "usage"
