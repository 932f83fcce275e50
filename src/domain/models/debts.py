"""Domain models for debts tracked outside the ledger."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal


@dataclass(frozen=True)
class Debt:
    """Liability edited manually; transactions never adjust it."""

    id: str
    owner_id: str
    debt_type_id: str
    name: str
    balance: Decimal
    created_at: datetime
    updated_at: datetime
    original_amount: Decimal | None = None
    interest_rate: Decimal | None = None
    monthly_payment: Decimal | None = None
    start_date: date | None = None
    due_date: date | None = None
    notes: str | None = None


@dataclass(frozen=True)
class NewDebt:
    """Input for recording a debt."""

    debt_type_id: str
    name: str
    balance: Decimal
    original_amount: Decimal | None = None
    interest_rate: Decimal | None = None
    monthly_payment: Decimal | None = None
    start_date: date | None = None
    due_date: date | None = None
    notes: str | None = None


@dataclass(frozen=True)
class DebtChanges:
    """Partial debt edit; unset (None) fields keep their old value."""

    debt_type_id: str | None = None
    name: str | None = None
    balance: Decimal | None = None
    original_amount: Decimal | None = None
    interest_rate: Decimal | None = None
    monthly_payment: Decimal | None = None
    start_date: date | None = None
    due_date: date | None = None
    notes: str | None = None

    def changed_fields(self) -> dict[str, object]:
        """Return only the fields that were provided."""
        return {
            name: value
            for name, value in self.__dict__.items()
            if value is not None
        }


@dataclass(frozen=True)
class DebtSummary:
    """Aggregate view over an owner's debts.

    Attributes:
        total_debt: Sum of current balances.
        total_monthly_payment: Sum of scheduled monthly payments.
        total_original: Sum of original amounts (balance when unknown).
        paid_off: total_original minus total_debt.
        paid_off_percentage: paid_off as a share of total_original.
    """

    count: int
    total_debt: Decimal
    total_monthly_payment: Decimal
    total_original: Decimal
    paid_off: Decimal
    paid_off_percentage: Decimal


__all__ = ["Debt", "NewDebt", "DebtChanges", "DebtSummary"]
