"""Port for the account store."""

from datetime import datetime
from typing import Protocol

from src.domain.models import Account


class AccountsRepositoryPort(Protocol):
    """Port exposing account reads and non-balance writes."""

    def fetch_account(self, owner_id: str, account_id: str) -> Account | None:
        """Return a single account owned by owner_id, or None."""

    def fetch_accounts(
        self,
        owner_id: str,
        category: str | None = None,
    ) -> list[Account]:
        """Return the owner's accounts, highest current value first."""

    def insert_account(self, account: Account) -> None:
        """Insert a new account row."""

    def update_account_details(
        self,
        owner_id: str,
        account_id: str,
        fields: dict[str, object],
        updated_at: datetime,
    ) -> Account | None:
        """Update descriptive fields, never the current value."""

    def count_transactions(self, owner_id: str, account_id: str) -> int:
        """Return how many transactions reference the account."""

    def delete_account(self, owner_id: str, account_id: str) -> Account | None:
        """Delete the account and return its last state, or None."""


__all__ = ["AccountsRepositoryPort"]
