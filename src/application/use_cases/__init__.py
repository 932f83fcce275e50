"""Application use cases package."""

from .get_accounts import GetAccountsUseCase, GetAccountUseCase
from .get_asset_category_summary import GetAssetCategorySummaryUseCase
from .get_debt_summary import GetDebtSummaryUseCase
from .get_monthly_summary import GetMonthlySummaryUseCase
from .get_net_worth_summary import GetNetWorthSummaryUseCase
from .get_top_categories import GetTopCategoriesUseCase
from .get_transactions import GetTransactionsUseCase
from .manage_accounts import ManageAccountsUseCase
from .manage_debts import ManageDebtsUseCase
from .manage_taxonomies import ManageTaxonomiesUseCase
from .seed_defaults import SeedDefaultsResult, SeedDefaultsUseCase
from .transaction_ledger import TransactionLedgerUseCase
from .transfer_funds import TransferFundsUseCase
from .verify_balances import VerifyBalancesUseCase

__all__ = [
    "GetAccountsUseCase",
    "GetAccountUseCase",
    "GetAssetCategorySummaryUseCase",
    "GetDebtSummaryUseCase",
    "GetMonthlySummaryUseCase",
    "GetNetWorthSummaryUseCase",
    "GetTopCategoriesUseCase",
    "GetTransactionsUseCase",
    "ManageAccountsUseCase",
    "ManageDebtsUseCase",
    "ManageTaxonomiesUseCase",
    "SeedDefaultsResult",
    "SeedDefaultsUseCase",
    "TransactionLedgerUseCase",
    "TransferFundsUseCase",
    "VerifyBalancesUseCase",
]
