"""Domain package for business rules and core models."""

from .constants import (
    ASSET_CATEGORIES,
    CATEGORY_KINDS,
    TAXONOMIES,
    TRANSACTION_TYPES,
)
from .errors import (
    ConflictError,
    LedgerError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from .models import (
    Account,
    MonthlySummary,
    NetWorthSummary,
    Transaction,
    TransferResult,
)
from .policies import ensure_entry_deletable

__all__ = [
    "ASSET_CATEGORIES",
    "CATEGORY_KINDS",
    "TAXONOMIES",
    "TRANSACTION_TYPES",
    "ConflictError",
    "LedgerError",
    "NotFoundError",
    "StoreError",
    "ValidationError",
    "Account",
    "MonthlySummary",
    "NetWorthSummary",
    "Transaction",
    "TransferResult",
    "ensure_entry_deletable",
]
