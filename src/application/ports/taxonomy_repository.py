"""Port for account types, debt types and transaction categories."""

from datetime import datetime
from typing import Protocol

from src.domain.models import TaxonomyEntry


class TaxonomyRepositoryPort(Protocol):
    """Port exposing CRUD access to taxonomy entries."""

    def fetch_entries(self, taxonomy: str, owner_id: str) -> list[TaxonomyEntry]:
        """Return the owner's entries ordered by group and creation time."""

    def fetch_entry(
        self,
        taxonomy: str,
        owner_id: str,
        entry_id: str,
    ) -> TaxonomyEntry | None:
        """Return one entry, or None."""

    def insert_entries(self, entries: list[TaxonomyEntry]) -> int:
        """Insert entries (all of the same taxonomy) and return the count."""

    def update_entry(
        self,
        taxonomy: str,
        owner_id: str,
        entry_id: str,
        fields: dict[str, object],
        updated_at: datetime,
    ) -> TaxonomyEntry | None:
        """Update label/icon and return the new state, or None."""

    def count_usages(self, taxonomy: str, owner_id: str, entry_id: str) -> int:
        """Return how many records reference the entry."""

    def delete_entry(
        self,
        taxonomy: str,
        owner_id: str,
        entry_id: str,
    ) -> TaxonomyEntry | None:
        """Delete a non-system entry and return its last state, or None."""


__all__ = ["TaxonomyRepositoryPort"]
