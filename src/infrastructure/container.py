"""Composition root for wiring infrastructure adapters."""

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.application.ports.analytics_repository import AnalyticsRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.debts_repository import DebtsRepositoryPort
from src.application.ports.ledger_store import LedgerStorePort
from src.application.ports.taxonomy_repository import TaxonomyRepositoryPort
from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.application.use_cases.transaction_ledger import TransactionLedgerUseCase
from src.application.use_cases.transfer_funds import TransferFundsUseCase
from src.infrastructure.accounts_repository import SqlAlchemyAccountsRepository
from src.infrastructure.analytics_repository import SqlAlchemyAnalyticsRepository
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.debts_repository import SqlAlchemyDebtsRepository
from src.infrastructure.ledger_store import SqlAlchemyLedgerStore
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.settings import LedgerSettings
from src.infrastructure.taxonomy_repository import SqlAlchemyTaxonomyRepository
from src.infrastructure.transactions_repository import (
    SqlAlchemyTransactionsRepository,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_store(
    db_port: DatabaseEnginePort | None = None,
) -> LedgerStorePort:
    """Return the store opening atomic ledger units."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyLedgerStore(resolved_db)


def build_accounts_repository(
    db_port: DatabaseEnginePort | None = None,
) -> AccountsRepositoryPort:
    """Return the accounts repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyAccountsRepository(resolved_db)


def build_debts_repository(
    db_port: DatabaseEnginePort | None = None,
) -> DebtsRepositoryPort:
    """Return the debts repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyDebtsRepository(resolved_db)


def build_taxonomy_repository(
    db_port: DatabaseEnginePort | None = None,
) -> TaxonomyRepositoryPort:
    """Return the repository for account types, debt types and categories."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyTaxonomyRepository(resolved_db)


def build_transactions_repository(
    db_port: DatabaseEnginePort | None = None,
) -> TransactionsRepositoryPort:
    """Return the transaction listing repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyTransactionsRepository(resolved_db)


def build_analytics_repository(
    db_port: DatabaseEnginePort | None = None,
) -> AnalyticsRepositoryPort:
    """Return the analytics repository for dashboard reads."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyAnalyticsRepository(resolved_db)


def build_transaction_ledger(
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> TransactionLedgerUseCase:
    """Return the transaction ledger configured from the environment."""
    resolved_settings = settings or LedgerSettings.from_env()
    return TransactionLedgerUseCase(
        build_ledger_store(db_port),
        logger=get_app_logger(),
        usage_logger=get_usage_logger(),
        retry_attempts=resolved_settings.conflict_retry_attempts,
        retry_max_wait=resolved_settings.conflict_retry_max_wait,
    )


def build_transfer_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
    ledger: TransactionLedgerUseCase | None = None,
) -> TransferFundsUseCase:
    """Return the transfer decomposer sharing the ledger's store."""
    resolved_settings = settings or LedgerSettings.from_env()
    resolved_ledger = ledger or build_transaction_ledger(
        db_port,
        resolved_settings,
    )
    return TransferFundsUseCase(
        build_ledger_store(db_port),
        resolved_ledger,
        logger=get_app_logger(),
        usage_logger=get_usage_logger(),
        retry_attempts=resolved_settings.conflict_retry_attempts,
        retry_max_wait=resolved_settings.conflict_retry_max_wait,
    )


__all__ = [
    "build_database_adapter",
    "build_ledger_store",
    "build_accounts_repository",
    "build_debts_repository",
    "build_taxonomy_repository",
    "build_transactions_repository",
    "build_analytics_repository",
    "build_transaction_ledger",
    "build_transfer_use_case",
]
