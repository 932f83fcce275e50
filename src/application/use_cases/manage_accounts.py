"""Use case for creating, editing and deleting accounts.

Only descriptive fields are edited here. The current value is owned by
the transaction ledger and changes only through applied transactions.
"""

from dataclasses import replace
from datetime import datetime
from typing import Callable

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.application.ports.taxonomy_repository import TaxonomyRepositoryPort
from src.domain.constants import ASSET_CATEGORIES
from src.domain.errors import NotFoundError, ValidationError
from src.domain.models import Account, AccountDetailsUpdate, NewAccount
from src.domain.services import (
    parse_money,
    parse_optional_money,
    require_choice,
    require_text,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.time_utils import utc_now
from src.utils.utils import generate_id


class ManageAccountsUseCase:
    """Create, edit and delete an owner's accounts."""

    def __init__(
        self,
        accounts_repository: AccountsRepositoryPort,
        taxonomy_repository: TaxonomyRepositoryPort,
        logger=None,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = generate_id,
    ) -> None:
        """Initialize the use case.

        Args:
            accounts_repository: Port persisting accounts.
            taxonomy_repository: Port resolving account types.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Source of the current instant.
            id_factory: Source of new account identifiers.
        """
        self._accounts_repository = accounts_repository
        self._taxonomy_repository = taxonomy_repository
        self._logger = logger or get_app_logger()
        self._clock = clock
        self._id_factory = id_factory

    def create(self, owner_id: str, request: NewAccount) -> Account:
        """Create an account whose opening and current value are equal.

        Args:
            owner_id: Owner of the new account.
            request: Account fields.

        Returns:
            Account: The persisted account.

        Raises:
            ValidationError: If a field is missing or malformed, or the
                account type belongs to another asset category.
            NotFoundError: If the account type is not the owner's.
        """
        category = require_choice(request.category, ASSET_CATEGORIES, "category")
        name = require_text(request.name, "name")
        initial_value = parse_money(request.initial_value, "initial_value")
        purchase_value = parse_optional_money(
            request.purchase_value,
            "purchase_value",
        )
        account_type = self._taxonomy_repository.fetch_entry(
            "account_type",
            owner_id,
            request.account_type_id,
        )
        if account_type is None:
            raise NotFoundError(
                f"Account type not found: {request.account_type_id}"
            )
        if account_type.group != category:
            raise ValidationError(
                f"Account type '{account_type.label}' belongs to "
                f"{account_type.group}, not {category}"
            )

        now = self._clock()
        account = Account(
            id=self._id_factory(),
            owner_id=owner_id,
            category=category,
            account_type_id=account_type.id,
            name=name,
            current_value=initial_value,
            opening_value=initial_value,
            version=1,
            created_at=now,
            updated_at=now,
            purchase_value=purchase_value,
            purchase_date=request.purchase_date,
            description=request.description,
            bank_name=request.bank_name,
            account_number=request.account_number,
            ticker=request.ticker,
            notes=request.notes,
        )
        self._accounts_repository.insert_account(account)
        self._logger.info(
            f"Created {category} account {account.id} with value {initial_value}"
        )
        return account

    def update(
        self,
        owner_id: str,
        account_id: str,
        changes: AccountDetailsUpdate,
    ) -> Account:
        """Edit descriptive fields and return the updated account."""
        if changes.name is not None:
            changes = replace(changes, name=require_text(changes.name, "name"))
        if changes.purchase_value is not None:
            changes = replace(
                changes,
                purchase_value=parse_money(
                    changes.purchase_value,
                    "purchase_value",
                ),
            )
        fields = changes.changed_fields()
        if not fields:
            return self._require_account(owner_id, account_id)
        updated = self._accounts_repository.update_account_details(
            owner_id,
            account_id,
            fields,
            self._clock(),
        )
        if updated is None:
            raise NotFoundError(f"Account not found: {account_id}")
        return updated

    def delete(self, owner_id: str, account_id: str) -> Account:
        """Delete an account that no transaction references.

        Raises:
            NotFoundError: If the account is not the owner's.
            ValidationError: If transactions still reference the account.
        """
        self._require_account(owner_id, account_id)
        usage = self._accounts_repository.count_transactions(owner_id, account_id)
        if usage:
            raise ValidationError(
                f"Account has {usage} transaction(s); delete them first"
            )
        deleted = self._accounts_repository.delete_account(owner_id, account_id)
        if deleted is None:
            raise NotFoundError(f"Account not found: {account_id}")
        self._logger.info(f"Deleted account {account_id}")
        return deleted

    def _require_account(self, owner_id: str, account_id: str) -> Account:
        account = self._accounts_repository.fetch_account(owner_id, account_id)
        if account is None:
            raise NotFoundError(f"Account not found: {account_id}")
        return account


__all__ = ["ManageAccountsUseCase"]
