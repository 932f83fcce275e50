"""Domain models for ledger transactions."""

from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class Transaction:
    """Income or expense applied to exactly one account.

    The amount is always positive; direction is carried by ``type``.
    """

    id: str
    owner_id: str
    type: str
    category_id: str
    description: str
    amount: Decimal
    account_id: str
    transaction_date: datetime
    version: int
    created_at: datetime
    updated_at: datetime
    notes: str | None = None


@dataclass(frozen=True)
class NewTransaction:
    """Input for applying a transaction to an account."""

    type: str
    category_id: str
    description: str
    amount: Decimal
    account_id: str
    transaction_date: datetime
    notes: str | None = None


@dataclass(frozen=True)
class TransactionChanges:
    """Partial transaction edit; unset (None) fields keep their old value."""

    type: str | None = None
    category_id: str | None = None
    description: str | None = None
    amount: Decimal | None = None
    account_id: str | None = None
    transaction_date: datetime | None = None
    notes: str | None = None

    def touches_balance(self) -> bool:
        """Return True when amount, type or account is being edited."""
        return (
            self.amount is not None
            or self.type is not None
            or self.account_id is not None
        )

    def merge_into(
        self,
        transaction: Transaction,
        updated_at: datetime,
    ) -> Transaction:
        """Return the transaction with the provided fields applied."""
        provided = {
            name: value
            for name, value in self.__dict__.items()
            if value is not None
        }
        return replace(transaction, updated_at=updated_at, **provided)


@dataclass(frozen=True)
class NewTransfer:
    """Input for moving funds between two accounts of the same owner."""

    from_account_id: str
    to_account_id: str
    category_id: str
    description: str
    amount: Decimal
    transaction_date: datetime
    notes: str | None = None


@dataclass(frozen=True)
class TransferResult:
    """Paired legs of a transfer."""

    outgoing: Transaction
    incoming: Transaction


@dataclass(frozen=True)
class BalanceAdjustment:
    """Net signed change to apply to one account."""

    account_id: str
    delta: Decimal


__all__ = [
    "Transaction",
    "NewTransaction",
    "TransactionChanges",
    "NewTransfer",
    "TransferResult",
    "BalanceAdjustment",
]
