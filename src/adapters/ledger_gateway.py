"""Boundary adapter translating raw payloads into ledger calls.

Callers (page handlers, scripts) hand over plain mappings in which money
is a decimal string and dates are ISO-8601 instants with an offset. The
gateway parses them into domain requests and dispatches to the ledger,
the transfer decomposer or the account reads.
"""

from collections.abc import Mapping
from typing import Any

from src.application.use_cases.get_accounts import (
    GetAccountsUseCase,
    GetAccountUseCase,
)
from src.application.use_cases.transaction_ledger import TransactionLedgerUseCase
from src.application.use_cases.transfer_funds import TransferFundsUseCase
from src.domain.constants import TRANSFER
from src.domain.errors import ValidationError
from src.domain.models import (
    Account,
    NewTransaction,
    NewTransfer,
    Transaction,
    TransactionChanges,
    TransferResult,
)
from src.domain.services import parse_amount, parse_instant, require_text
from src.infrastructure.container import (
    build_accounts_repository,
    build_database_adapter,
    build_transaction_ledger,
    build_transfer_use_case,
)
from src.infrastructure.settings import LedgerSettings

_TRANSACTION_FIELDS = {
    "type",
    "category_id",
    "description",
    "amount",
    "account_id",
    "transaction_date",
    "notes",
}
_TRANSFER_FIELDS = {
    "type",
    "from_account_id",
    "to_account_id",
    "category_id",
    "description",
    "amount",
    "transaction_date",
    "notes",
}
_EDITABLE_FIELDS = _TRANSACTION_FIELDS


def _reject_unknown(payload: Mapping[str, Any], allowed: set[str]) -> None:
    unknown = sorted(set(payload) - allowed)
    if unknown:
        raise ValidationError(f"Unknown field(s): {', '.join(unknown)}")


def _optional_notes(payload: Mapping[str, Any]) -> str | None:
    notes = payload.get("notes")
    if notes is None:
        return None
    notes = str(notes).strip()
    return notes or None


def _changed_text(payload: Mapping[str, Any], field: str) -> str | None:
    if field not in payload:
        return None
    return require_text(payload[field], field)


def _changed_notes(payload: Mapping[str, Any]) -> str | None:
    """Return the edited notes; an empty string clears them."""
    notes = payload.get("notes")
    if notes is None:
        return None
    return str(notes).strip()


class LedgerGateway:
    """Entry point for create, update and delete requests on transactions."""

    def __init__(
        self,
        ledger: TransactionLedgerUseCase,
        transfer_use_case: TransferFundsUseCase,
        get_account: GetAccountUseCase,
        get_accounts: GetAccountsUseCase,
    ) -> None:
        """Initialize the gateway.

        Args:
            ledger: Ledger handling single transactions.
            transfer_use_case: Decomposer handling transfers.
            get_account: Use case reading one account.
            get_accounts: Use case listing accounts.
        """
        self._ledger = ledger
        self._transfer_use_case = transfer_use_case
        self._get_account = get_account
        self._get_accounts = get_accounts

    def create_transaction(
        self,
        owner_id: str,
        payload: Mapping[str, Any],
    ) -> Transaction | TransferResult:
        """Create a transaction, or a transfer when type is ``transfer``.

        Args:
            owner_id: Authenticated owner.
            payload: Raw request fields.

        Returns:
            Transaction | TransferResult: The stored transaction, or both
            legs of a transfer.
        """
        if payload.get("type") == TRANSFER:
            _reject_unknown(payload, _TRANSFER_FIELDS)
            transfer = NewTransfer(
                from_account_id=require_text(
                    payload.get("from_account_id"),
                    "from_account_id",
                ),
                to_account_id=require_text(
                    payload.get("to_account_id"),
                    "to_account_id",
                ),
                category_id=require_text(payload.get("category_id"), "category_id"),
                description=require_text(payload.get("description"), "description"),
                amount=parse_amount(payload.get("amount")),
                transaction_date=parse_instant(payload.get("transaction_date")),
                notes=_optional_notes(payload),
            )
            return self._transfer_use_case.execute(owner_id, transfer)

        _reject_unknown(payload, _TRANSACTION_FIELDS)
        request = NewTransaction(
            type=require_text(payload.get("type"), "type"),
            category_id=require_text(payload.get("category_id"), "category_id"),
            description=require_text(payload.get("description"), "description"),
            amount=parse_amount(payload.get("amount")),
            account_id=require_text(payload.get("account_id"), "account_id"),
            transaction_date=parse_instant(payload.get("transaction_date")),
            notes=_optional_notes(payload),
        )
        return self._ledger.apply(owner_id, request)

    def update_transaction(
        self,
        owner_id: str,
        transaction_id: str,
        payload: Mapping[str, Any],
    ) -> Transaction:
        """Apply a partial edit; absent keys keep their stored value."""
        _reject_unknown(payload, _EDITABLE_FIELDS)
        changes = TransactionChanges(
            type=_changed_text(payload, "type"),
            category_id=_changed_text(payload, "category_id"),
            description=_changed_text(payload, "description"),
            amount=(
                parse_amount(payload["amount"]) if "amount" in payload else None
            ),
            account_id=_changed_text(payload, "account_id"),
            transaction_date=(
                parse_instant(payload["transaction_date"])
                if "transaction_date" in payload
                else None
            ),
            notes=_changed_notes(payload),
        )
        return self._ledger.amend(owner_id, transaction_id, changes)

    def delete_transaction(self, owner_id: str, transaction_id: str) -> Transaction:
        return self._ledger.revoke(owner_id, transaction_id)

    def read_account(self, owner_id: str, account_id: str) -> Account:
        return self._get_account.execute(owner_id, account_id)

    def list_accounts_by_category(
        self,
        owner_id: str,
        category: str | None = None,
    ) -> list[Account]:
        return self._get_accounts.execute(owner_id, category)


def build_ledger_gateway(db_port=None) -> LedgerGateway:
    """Wire a gateway against the configured ledger database."""
    resolved_db = db_port or build_database_adapter()
    settings = LedgerSettings.from_env()
    ledger = build_transaction_ledger(resolved_db, settings)
    accounts_repository = build_accounts_repository(resolved_db)
    return LedgerGateway(
        ledger=ledger,
        transfer_use_case=build_transfer_use_case(
            resolved_db,
            settings,
            ledger=ledger,
        ),
        get_account=GetAccountUseCase(accounts_repository),
        get_accounts=GetAccountsUseCase(accounts_repository),
    )


__all__ = ["LedgerGateway", "build_ledger_gateway"]
