"""Use case to list transactions."""

from datetime import datetime

from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.domain.errors import ValidationError
from src.domain.models import Transaction


class GetTransactionsUseCase:
    """List an owner's transactions, newest first."""

    def __init__(
        self,
        transactions_repository: TransactionsRepositoryPort,
    ) -> None:
        """Initialize the use case with its required dependencies."""
        self._transactions_repository = transactions_repository

    def execute(
        self,
        owner_id: str,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[Transaction]:
        """Return transactions dated in [start, end).

        Args:
            owner_id: Owner whose transactions are listed.
            start: Optional inclusive lower bound.
            end: Optional exclusive upper bound.

        Returns:
            list[Transaction]: Matching transactions, newest first.
        """
        if start is not None and end is not None and start > end:
            raise ValidationError("start must not be after end")
        return self._transactions_repository.fetch_transactions(
            owner_id,
            start,
            end,
        )


__all__ = ["GetTransactionsUseCase"]
