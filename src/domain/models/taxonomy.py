"""Domain models for account types, debt types and categories."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TaxonomyEntry:
    """Classification row owned by a user.

    Attributes:
        taxonomy: account_type, debt_type or transaction_category.
        group: Asset category for account types, kind (income, expense,
            transfer) for transaction categories, None for debt types.
        is_system: Seeded rows that can never be deleted.
    """

    id: str
    owner_id: str
    taxonomy: str
    label: str
    is_system: bool
    created_at: datetime
    updated_at: datetime
    group: str | None = None
    icon: str | None = None


__all__ = ["TaxonomyEntry"]
