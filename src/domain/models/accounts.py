"""Domain models for asset accounts."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal


@dataclass(frozen=True)
class Account:
    """Asset record whose current value tracks the applied transactions.

    Attributes:
        id: Opaque account identifier.
        owner_id: Identifier of the owning user.
        category: Asset category (liquid, non_liquid or investment).
        account_type_id: Reference to the account-type taxonomy entry.
        name: Display name.
        current_value: Running balance maintained by the ledger.
        opening_value: Value recorded when the account was created.
        version: Optimistic lock token bumped on each balance write.
    """

    id: str
    owner_id: str
    category: str
    account_type_id: str
    name: str
    current_value: Decimal
    opening_value: Decimal
    version: int
    created_at: datetime
    updated_at: datetime
    purchase_value: Decimal | None = None
    purchase_date: date | None = None
    description: str | None = None
    bank_name: str | None = None
    account_number: str | None = None
    ticker: str | None = None
    notes: str | None = None


@dataclass(frozen=True)
class NewAccount:
    """Input for creating an account."""

    category: str
    account_type_id: str
    name: str
    initial_value: Decimal
    purchase_value: Decimal | None = None
    purchase_date: date | None = None
    description: str | None = None
    bank_name: str | None = None
    account_number: str | None = None
    ticker: str | None = None
    notes: str | None = None


@dataclass(frozen=True)
class AccountDetailsUpdate:
    """Descriptive account fields; unset (None) fields are left unchanged."""

    name: str | None = None
    purchase_value: Decimal | None = None
    purchase_date: date | None = None
    description: str | None = None
    bank_name: str | None = None
    account_number: str | None = None
    ticker: str | None = None
    notes: str | None = None

    def changed_fields(self) -> dict[str, object]:
        """Return only the fields that were provided."""
        return {
            name: value
            for name, value in self.__dict__.items()
            if value is not None
        }


@dataclass(frozen=True)
class AssetCategorySummary:
    """Totals for the accounts of one asset category."""

    category: str
    count: int
    total_value: Decimal
    total_purchase_value: Decimal
    growth: Decimal


@dataclass(frozen=True)
class BalanceDiscrepancy:
    """Account whose stored value disagrees with its transactions."""

    account_id: str
    name: str
    stored_value: Decimal
    expected_value: Decimal

    @property
    def difference(self) -> Decimal:
        """Return stored_value minus expected_value."""
        return self.stored_value - self.expected_value


@dataclass(frozen=True)
class BalanceAuditReport:
    """Outcome of recomputing every account balance for an owner."""

    checked_count: int
    discrepancies: list[BalanceDiscrepancy] = field(default_factory=list)

    @property
    def is_consistent(self) -> bool:
        """Return True when no discrepancy was found."""
        return not self.discrepancies


__all__ = [
    "Account",
    "NewAccount",
    "AccountDetailsUpdate",
    "AssetCategorySummary",
    "BalanceDiscrepancy",
    "BalanceAuditReport",
]
