"""Domain models package."""

from .accounts import (
    Account,
    AccountDetailsUpdate,
    AssetCategorySummary,
    BalanceAuditReport,
    BalanceDiscrepancy,
    NewAccount,
)
from .debts import Debt, DebtChanges, DebtSummary, NewDebt
from .finance import (
    CategorySpending,
    MonthlySummary,
    NetWorthSummary,
    TransactionReportRow,
)
from .taxonomy import TaxonomyEntry
from .transactions import (
    BalanceAdjustment,
    NewTransaction,
    NewTransfer,
    Transaction,
    TransactionChanges,
    TransferResult,
)

__all__ = [
    "Account",
    "AccountDetailsUpdate",
    "AssetCategorySummary",
    "BalanceAuditReport",
    "BalanceDiscrepancy",
    "NewAccount",
    "Debt",
    "DebtChanges",
    "DebtSummary",
    "NewDebt",
    "CategorySpending",
    "MonthlySummary",
    "NetWorthSummary",
    "TransactionReportRow",
    "TaxonomyEntry",
    "BalanceAdjustment",
    "NewTransaction",
    "NewTransfer",
    "Transaction",
    "TransactionChanges",
    "TransferResult",
]
