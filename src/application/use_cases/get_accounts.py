"""Use cases to read accounts for presentation layers."""

from typing import List

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.domain.constants import ASSET_CATEGORIES
from src.domain.errors import NotFoundError
from src.domain.models import Account
from src.domain.services import require_choice


class GetAccountsUseCase:
    """List an owner's accounts, optionally restricted to one category."""

    def __init__(self, accounts_repository: AccountsRepositoryPort) -> None:
        """Initialize the use case with its required dependencies."""
        self._accounts_repository = accounts_repository

    def execute(
        self,
        owner_id: str,
        category: str | None = None,
    ) -> List[Account]:
        """Return accounts ordered by current value, highest first."""
        if category is not None:
            require_choice(category, ASSET_CATEGORIES, "category")
        return self._accounts_repository.fetch_accounts(owner_id, category)


class GetAccountUseCase:
    """Read a single account."""

    def __init__(self, accounts_repository: AccountsRepositoryPort) -> None:
        self._accounts_repository = accounts_repository

    def execute(self, owner_id: str, account_id: str) -> Account:
        """Return the account or raise NotFoundError."""
        account = self._accounts_repository.fetch_account(owner_id, account_id)
        if account is None:
            raise NotFoundError(f"Account not found: {account_id}")
        return account


__all__ = ["GetAccountsUseCase", "GetAccountUseCase"]
