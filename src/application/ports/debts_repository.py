"""Port for the debt store."""

from datetime import datetime
from typing import Protocol

from src.domain.models import Debt


class DebtsRepositoryPort(Protocol):
    """Port exposing CRUD access to debts."""

    def fetch_debt(self, owner_id: str, debt_id: str) -> Debt | None:
        """Return a single debt owned by owner_id, or None."""

    def fetch_debts(self, owner_id: str) -> list[Debt]:
        """Return the owner's debts, highest balance first."""

    def insert_debt(self, debt: Debt) -> None:
        """Insert a new debt row."""

    def update_debt(
        self,
        owner_id: str,
        debt_id: str,
        fields: dict[str, object],
        updated_at: datetime,
    ) -> Debt | None:
        """Update the provided fields and return the new state, or None."""

    def delete_debt(self, owner_id: str, debt_id: str) -> Debt | None:
        """Delete the debt and return its last state, or None."""


__all__ = ["DebtsRepositoryPort"]
