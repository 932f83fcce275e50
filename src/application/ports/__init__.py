"""Application ports package."""

from .accounts_repository import AccountsRepositoryPort
from .analytics_repository import AnalyticsRepositoryPort
from .database import DatabaseEnginePort
from .debts_repository import DebtsRepositoryPort
from .ledger_store import LedgerSessionPort, LedgerStorePort
from .taxonomy_repository import TaxonomyRepositoryPort
from .transactions_repository import TransactionsRepositoryPort

__all__ = [
    "AccountsRepositoryPort",
    "AnalyticsRepositoryPort",
    "DatabaseEnginePort",
    "DebtsRepositoryPort",
    "LedgerSessionPort",
    "LedgerStorePort",
    "TaxonomyRepositoryPort",
    "TransactionsRepositoryPort",
]
