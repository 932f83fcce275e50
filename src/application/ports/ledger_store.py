"""Ports for the atomic read-modify-write unit used by the ledger."""

from contextlib import AbstractContextManager
from datetime import datetime
from decimal import Decimal
from typing import Protocol

from src.domain.models import Account, TaxonomyEntry, Transaction


class LedgerSessionPort(Protocol):
    """Operations available inside one atomic unit.

    Every call runs in the same database transaction. Writes are guarded by
    optimistic version checks and raise ConflictError when a concurrent
    unit changed the row first.
    """

    def fetch_account(self, owner_id: str, account_id: str) -> Account | None:
        """Return the owner's account, or None."""

    def fetch_category(
        self,
        owner_id: str,
        category_id: str,
    ) -> TaxonomyEntry | None:
        """Return the owner's transaction category, or None."""

    def fetch_transaction(
        self,
        owner_id: str,
        transaction_id: str,
    ) -> Transaction | None:
        """Return the owner's transaction, or None."""

    def insert_transaction(self, transaction: Transaction) -> None:
        """Insert a new transaction row."""

    def update_transaction(self, transaction: Transaction) -> Transaction:
        """Persist edited fields if the stored version still matches."""

    def delete_transaction(self, transaction: Transaction) -> None:
        """Delete the row if the stored version still matches."""

    def write_account_value(
        self,
        account: Account,
        new_value: Decimal,
        updated_at: datetime,
    ) -> Account:
        """Compare-and-swap the account value on its version."""


class LedgerStorePort(Protocol):
    """Factory for atomic units against the ledger store."""

    def atomic(self) -> AbstractContextManager[LedgerSessionPort]:
        """Open a unit that commits on success and rolls back on error."""


__all__ = ["LedgerSessionPort", "LedgerStorePort"]
