"""Shared fixtures for SQLite-backed ledger tests."""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.manage_accounts import ManageAccountsUseCase
from src.application.use_cases.seed_defaults import SeedDefaultsUseCase
from src.application.use_cases.transaction_ledger import TransactionLedgerUseCase
from src.application.use_cases.transfer_funds import TransferFundsUseCase
from src.domain.models import NewAccount, NewTransaction
from src.infrastructure.accounts_repository import SqlAlchemyAccountsRepository
from src.infrastructure.analytics_repository import SqlAlchemyAnalyticsRepository
from src.infrastructure.db import create_sqlite_adapter
from src.infrastructure.debts_repository import SqlAlchemyDebtsRepository
from src.infrastructure.ledger_store import SqlAlchemyLedgerStore
from src.infrastructure.schema import ensure_schema
from src.infrastructure.taxonomy_repository import SqlAlchemyTaxonomyRepository
from src.infrastructure.transactions_repository import (
    SqlAlchemyTransactionsRepository,
)

OWNER_ID = "owner-1"
MARCH_15 = datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def sqlite_db(tmp_path):
    """Adapter bound to a fresh SQLite file with the ledger schema."""
    adapter = create_sqlite_adapter(tmp_path / "ledger.db")
    ensure_schema(adapter)
    yield adapter
    adapter.get_ledger_engine().dispose()


class LedgerHarness:
    """Real repositories and use cases wired to one SQLite database."""

    def __init__(self, db_port) -> None:
        self.db = db_port
        self.logger = MagicMock()
        self.usage_logger = MagicMock()
        self.store = SqlAlchemyLedgerStore(db_port)
        self.accounts = SqlAlchemyAccountsRepository(db_port)
        self.debts = SqlAlchemyDebtsRepository(db_port)
        self.taxonomy = SqlAlchemyTaxonomyRepository(db_port)
        self.transactions = SqlAlchemyTransactionsRepository(db_port)
        self.analytics = SqlAlchemyAnalyticsRepository(db_port)
        self.ledger = TransactionLedgerUseCase(
            self.store,
            logger=self.logger,
            usage_logger=self.usage_logger,
            retry_attempts=10,
            retry_max_wait=0,
        )
        self.transfers = TransferFundsUseCase(
            self.store,
            self.ledger,
            logger=self.logger,
            usage_logger=self.usage_logger,
            retry_attempts=10,
            retry_max_wait=0,
        )
        self.manage_accounts = ManageAccountsUseCase(
            self.accounts,
            self.taxonomy,
            logger=self.logger,
        )
        SeedDefaultsUseCase(self.taxonomy, logger=self.logger).run(OWNER_ID)

    def category(self, kind: str, label: str | None = None) -> str:
        for entry in self.taxonomy.fetch_entries("transaction_category", OWNER_ID):
            if entry.group == kind and (label is None or entry.label == label):
                return entry.id
        raise AssertionError(f"No seeded {kind} category {label}")

    def account(
        self,
        initial: str = "0.00",
        name: str = "Checking",
        category: str = "liquid",
    ):
        account_type = next(
            entry
            for entry in self.taxonomy.fetch_entries("account_type", OWNER_ID)
            if entry.group == category
        )
        return self.manage_accounts.create(
            OWNER_ID,
            NewAccount(
                category=category,
                account_type_id=account_type.id,
                name=name,
                initial_value=Decimal(initial),
            ),
        )

    def value(self, account_id: str) -> Decimal:
        return self.accounts.fetch_account(OWNER_ID, account_id).current_value

    def transaction_count(self) -> int:
        return len(self.transactions.fetch_transactions(OWNER_ID))

    def request(
        self,
        transaction_type: str,
        amount: str,
        account_id: str,
        category_id: str | None = None,
        when: datetime = MARCH_15,
        description: str = "Entry",
    ) -> NewTransaction:
        return NewTransaction(
            type=transaction_type,
            category_id=category_id or self.category(transaction_type),
            description=description,
            amount=Decimal(amount),
            account_id=account_id,
            transaction_date=when,
        )


@pytest.fixture
def ledger_env(sqlite_db):
    """Seeded ledger harness for integration tests."""
    return LedgerHarness(sqlite_db)
