"""Transaction ledger: apply, amend and revoke with balance consistency.

Every operation runs as one atomic unit opened on the ledger store. The
account's stored value is read and written inside the same unit as the
transaction row mutation, so readers never observe one without the other.
"""

from dataclasses import replace
from datetime import datetime
from typing import Callable

from src.application.ports.ledger_store import LedgerSessionPort, LedgerStorePort
from src.application.use_cases.conflict_retry import (
    DEFAULT_RETRY_ATTEMPTS,
    DEFAULT_RETRY_MAX_WAIT,
    run_with_conflict_retry,
)
from src.domain.constants import TRANSACTION_TYPES
from src.domain.errors import NotFoundError
from src.domain.models import (
    Account,
    NewTransaction,
    TaxonomyEntry,
    Transaction,
    TransactionChanges,
)
from src.domain.services import (
    apply_effect,
    parse_amount,
    parse_instant,
    plan_amendment,
    require_choice,
    require_text,
    revert_effect,
    validate_balance_sign,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.utils.time_utils import utc_now
from src.utils.utils import generate_id


def validate_new_transaction(request: NewTransaction) -> NewTransaction:
    """Return a normalized copy of the request or raise ValidationError."""
    return replace(
        request,
        type=require_choice(request.type, TRANSACTION_TYPES, "type"),
        category_id=require_text(request.category_id, "category_id"),
        description=require_text(request.description, "description"),
        amount=parse_amount(request.amount),
        account_id=require_text(request.account_id, "account_id"),
        transaction_date=parse_instant(request.transaction_date),
    )


def validate_transaction_changes(
    changes: TransactionChanges,
) -> TransactionChanges:
    """Validate only the fields that are being edited."""
    updates: dict[str, object] = {}
    if changes.type is not None:
        updates["type"] = require_choice(changes.type, TRANSACTION_TYPES, "type")
    if changes.category_id is not None:
        updates["category_id"] = require_text(changes.category_id, "category_id")
    if changes.description is not None:
        updates["description"] = require_text(changes.description, "description")
    if changes.amount is not None:
        updates["amount"] = parse_amount(changes.amount)
    if changes.account_id is not None:
        updates["account_id"] = require_text(changes.account_id, "account_id")
    if changes.transaction_date is not None:
        updates["transaction_date"] = parse_instant(changes.transaction_date)
    return replace(changes, **updates)


class TransactionLedgerUseCase:
    """Keep account values consistent with the transactions applied to them."""

    def __init__(
        self,
        ledger_store: LedgerStorePort,
        logger=None,
        usage_logger=None,
        retry_attempts: int = DEFAULT_RETRY_ATTEMPTS,
        retry_max_wait: float = DEFAULT_RETRY_MAX_WAIT,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = generate_id,
    ) -> None:
        """Initialize the ledger.

        Args:
            ledger_store: Port opening atomic units against the store.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger receiving the mutation audit trail.
            retry_attempts: Attempts per unit before a ConflictError surfaces.
            retry_max_wait: Maximum backoff in seconds between attempts.
            clock: Source of the current instant.
            id_factory: Source of new transaction identifiers.
        """
        self._ledger_store = ledger_store
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()
        self._retry_attempts = retry_attempts
        self._retry_max_wait = retry_max_wait
        self._clock = clock
        self._id_factory = id_factory

    def apply(self, owner_id: str, request: NewTransaction) -> Transaction:
        """Insert a transaction and apply its effect to the account.

        Args:
            owner_id: Owner of the account and the new transaction.
            request: Transaction to record.

        Returns:
            Transaction: The persisted transaction.

        Raises:
            ValidationError: If the request is malformed or amount <= 0.
            NotFoundError: If the account or category is not the owner's.
            ConflictError: If every retry lost a concurrent write race.
        """
        validated = validate_new_transaction(request)

        def _unit() -> Transaction:
            with self._ledger_store.atomic() as session:
                return self.apply_within(session, owner_id, validated)

        transaction = self._run("apply", _unit)
        self._usage_logger.info(
            f"apply owner={owner_id} transaction={transaction.id} "
            f"account={transaction.account_id} type={transaction.type} "
            f"amount={transaction.amount}"
        )
        return transaction

    def apply_within(
        self,
        session: LedgerSessionPort,
        owner_id: str,
        request: NewTransaction,
    ) -> Transaction:
        """Apply a validated request inside a unit the caller already opened.

        Used to compose several applications into one atomic unit.
        """
        account = self._require_account(session, owner_id, request.account_id)
        self._require_category(session, owner_id, request.category_id)
        now = self._clock()
        transaction = Transaction(
            id=self._id_factory(),
            owner_id=owner_id,
            type=request.type,
            category_id=request.category_id,
            description=request.description,
            amount=request.amount,
            account_id=request.account_id,
            transaction_date=request.transaction_date,
            version=1,
            created_at=now,
            updated_at=now,
            notes=request.notes,
        )
        session.insert_transaction(transaction)
        new_value = apply_effect(
            account.current_value,
            transaction.type,
            transaction.amount,
        )
        self._write_value(session, account, new_value, now)
        return transaction

    def amend(
        self,
        owner_id: str,
        transaction_id: str,
        changes: TransactionChanges,
    ) -> Transaction:
        """Edit a transaction and move its balance effect accordingly.

        The old effect is reverted on the old account and the new effect
        applied on the new account, both computed from values read inside
        the unit. When the account is unchanged the two steps collapse into
        one net write.

        Args:
            owner_id: Owner of the transaction.
            transaction_id: Transaction to edit.
            changes: Fields to change; unset fields keep their value.

        Returns:
            Transaction: The stored transaction after the edit.

        Raises:
            ValidationError: If a provided field is malformed.
            NotFoundError: If the transaction, the target account or the
                new category is not the owner's.
            ConflictError: If every retry lost a concurrent write race.
        """
        validated = validate_transaction_changes(changes)

        def _unit() -> tuple[Transaction, Transaction]:
            with self._ledger_store.atomic() as session:
                return self._amend_within(
                    session,
                    owner_id,
                    transaction_id,
                    validated,
                )

        old, stored = self._run("amend", _unit)
        self._usage_logger.info(
            f"amend owner={owner_id} transaction={stored.id} "
            f"from account={old.account_id} type={old.type} "
            f"amount={old.amount} to account={stored.account_id} "
            f"type={stored.type} amount={stored.amount}"
        )
        return stored

    def revoke(self, owner_id: str, transaction_id: str) -> Transaction:
        """Reverse a transaction's balance effect and delete it.

        Args:
            owner_id: Owner of the transaction.
            transaction_id: Transaction to delete.

        Returns:
            Transaction: The deleted transaction's last state.

        Raises:
            NotFoundError: If the transaction is not the owner's.
            ConflictError: If every retry lost a concurrent write race.
        """

        def _unit() -> Transaction:
            with self._ledger_store.atomic() as session:
                transaction = self._require_transaction(
                    session,
                    owner_id,
                    transaction_id,
                )
                account = self._require_account(
                    session,
                    owner_id,
                    transaction.account_id,
                )
                now = self._clock()
                session.delete_transaction(transaction)
                new_value = revert_effect(
                    account.current_value,
                    transaction.type,
                    transaction.amount,
                )
                self._write_value(session, account, new_value, now)
                return transaction

        transaction = self._run("revoke", _unit)
        self._usage_logger.info(
            f"revoke owner={owner_id} transaction={transaction.id} "
            f"account={transaction.account_id} type={transaction.type} "
            f"amount={transaction.amount}"
        )
        return transaction

    def _amend_within(
        self,
        session: LedgerSessionPort,
        owner_id: str,
        transaction_id: str,
        changes: TransactionChanges,
    ) -> tuple[Transaction, Transaction]:
        old = self._require_transaction(session, owner_id, transaction_id)
        if changes.category_id is not None:
            self._require_category(session, owner_id, changes.category_id)
        now = self._clock()
        new = changes.merge_into(old, now)

        adjustments = []
        if changes.touches_balance():
            for adjustment in plan_amendment(old, new):
                account = self._require_account(
                    session,
                    owner_id,
                    adjustment.account_id,
                )
                adjustments.append((account, adjustment.delta))

        # The row CAS runs before any balance write so a stale read fails fast.
        stored = session.update_transaction(new)
        for account, delta in adjustments:
            self._write_value(session, account, account.current_value + delta, now)
        return old, stored

    def _write_value(
        self,
        session: LedgerSessionPort,
        account: Account,
        new_value,
        now: datetime,
    ) -> Account:
        updated = session.write_account_value(account, new_value, now)
        validate_balance_sign(updated.name, updated.current_value, self._logger)
        return updated

    def _run(self, action: str, unit):
        return run_with_conflict_retry(
            unit,
            self._logger,
            action,
            attempts=self._retry_attempts,
            max_wait=self._retry_max_wait,
        )

    @staticmethod
    def _require_account(
        session: LedgerSessionPort,
        owner_id: str,
        account_id: str,
    ) -> Account:
        account = session.fetch_account(owner_id, account_id)
        if account is None:
            raise NotFoundError(f"Account not found: {account_id}")
        return account

    @staticmethod
    def _require_category(
        session: LedgerSessionPort,
        owner_id: str,
        category_id: str,
    ) -> TaxonomyEntry:
        category = session.fetch_category(owner_id, category_id)
        if category is None:
            raise NotFoundError(f"Category not found: {category_id}")
        return category

    @staticmethod
    def _require_transaction(
        session: LedgerSessionPort,
        owner_id: str,
        transaction_id: str,
    ) -> Transaction:
        transaction = session.fetch_transaction(owner_id, transaction_id)
        if transaction is None:
            raise NotFoundError(f"Transaction not found: {transaction_id}")
        return transaction


__all__ = [
    "TransactionLedgerUseCase",
    "validate_new_transaction",
    "validate_transaction_changes",
]
