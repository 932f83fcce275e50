"""Domain models for financial aggregates."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class NetWorthSummary:
    """Summary of net worth figures.

    Attributes:
        asset_total: Sum of account current values.
        liability_total: Sum of debt balances.
        net_worth: Assets minus liabilities.
        assets_by_category: Asset totals keyed by asset category.
    """

    asset_total: Decimal
    liability_total: Decimal
    net_worth: Decimal
    assets_by_category: dict[str, Decimal] = field(default_factory=dict)


@dataclass(frozen=True)
class MonthlySummary:
    """Income and expense totals for one calendar month, transfers excluded."""

    year: int
    month: int
    income: Decimal
    expense: Decimal

    @property
    def net(self) -> Decimal:
        """Return income minus expense."""
        return self.income - self.expense

    @property
    def savings_rate(self) -> Decimal:
        """Return net as a percentage of income (0 without income)."""
        if self.income == 0:
            return Decimal("0")
        return (self.net / self.income) * Decimal("100")


@dataclass(frozen=True)
class CategorySpending:
    """Expense total for a category label."""

    label: str
    amount: Decimal


@dataclass(frozen=True)
class TransactionReportRow:
    """Flattened transaction row used by read-side projections."""

    transaction_type: str
    amount: Decimal
    transaction_date: datetime
    category_label: str | None
    category_kind: str | None


__all__ = [
    "NetWorthSummary",
    "MonthlySummary",
    "CategorySpending",
    "TransactionReportRow",
]
