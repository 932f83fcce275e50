"""Port for read-only transaction listings."""

from datetime import datetime
from typing import Protocol

from src.domain.models import Transaction


class TransactionsRepositoryPort(Protocol):
    """Port exposing transaction reads outside the atomic unit."""

    def fetch_transactions(
        self,
        owner_id: str,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[Transaction]:
        """Return the owner's transactions, newest first.

        ``start`` is inclusive and ``end`` is exclusive.
        """


__all__ = ["TransactionsRepositoryPort"]
