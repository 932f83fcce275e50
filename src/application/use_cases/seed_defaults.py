"""Use case seeding the system taxonomies for a new owner.

Each taxonomy is seeded independently and only when the owner has no
entry in it yet, so running the job twice inserts nothing the second
time.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from src.application.ports.taxonomy_repository import TaxonomyRepositoryPort
from src.domain.constants import (
    DEFAULT_ACCOUNT_TYPES,
    DEFAULT_DEBT_TYPES,
    DEFAULT_TRANSACTION_CATEGORIES,
)
from src.domain.models import TaxonomyEntry
from src.infrastructure.logging.logger import get_app_logger
from src.utils.time_utils import utc_now
from src.utils.utils import generate_id


@dataclass(frozen=True)
class SeedDefaultsResult:
    """Result of a seed_defaults run.

    Attributes:
        account_types: Number of account types inserted.
        debt_types: Number of debt types inserted.
        transaction_categories: Number of transaction categories inserted.
    """

    account_types: int
    debt_types: int
    transaction_categories: int


class SeedDefaultsUseCase:
    """Insert the default system entries of every taxonomy for an owner."""

    def __init__(
        self,
        taxonomy_repository: TaxonomyRepositoryPort,
        logger=None,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = generate_id,
    ) -> None:
        """Initialize the use case.

        Args:
            taxonomy_repository: Port persisting taxonomy entries.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Source of the current instant.
            id_factory: Source of new entry identifiers.
        """
        self._taxonomy_repository = taxonomy_repository
        self._logger = logger or get_app_logger()
        self._clock = clock
        self._id_factory = id_factory

    def run(self, owner_id: str) -> SeedDefaultsResult:
        """Execute the seeding job.

        Args:
            owner_id: Owner receiving the defaults.

        Returns:
            SeedDefaultsResult: How many entries were inserted per taxonomy.
        """
        now = self._clock()
        account_types = [
            self._entry("account_type", owner_id, label, now, group, icon)
            for group, entries in DEFAULT_ACCOUNT_TYPES.items()
            for label, icon in entries
        ]
        debt_types = [
            self._entry("debt_type", owner_id, label, now, None, icon)
            for label, icon in DEFAULT_DEBT_TYPES
        ]
        categories = [
            self._entry("transaction_category", owner_id, label, now, kind, None)
            for kind, labels in DEFAULT_TRANSACTION_CATEGORIES.items()
            for label in labels
        ]
        return SeedDefaultsResult(
            account_types=self._seed("account_type", owner_id, account_types),
            debt_types=self._seed("debt_type", owner_id, debt_types),
            transaction_categories=self._seed(
                "transaction_category",
                owner_id,
                categories,
            ),
        )

    def _seed(
        self,
        taxonomy: str,
        owner_id: str,
        entries: list[TaxonomyEntry],
    ) -> int:
        """Insert entries unless the owner already has some.

        Args:
            taxonomy: Taxonomy being seeded.
            owner_id: Owner receiving the entries.
            entries: Default entries to insert.

        Returns:
            int: Number of inserted entries.
        """
        existing = self._taxonomy_repository.fetch_entries(taxonomy, owner_id)
        if existing:
            self._logger.info(
                f"Skipping {taxonomy} seeding: {len(existing)} entries exist"
            )
            return 0
        inserted = self._taxonomy_repository.insert_entries(entries)
        self._logger.info(f"Seeded {inserted} {taxonomy} entries for {owner_id}")
        return inserted

    def _entry(
        self,
        taxonomy: str,
        owner_id: str,
        label: str,
        now: datetime,
        group: str | None,
        icon: str | None,
    ) -> TaxonomyEntry:
        return TaxonomyEntry(
            id=self._id_factory(),
            owner_id=owner_id,
            taxonomy=taxonomy,
            label=label,
            is_system=True,
            created_at=now,
            updated_at=now,
            group=group,
            icon=icon,
        )


__all__ = ["SeedDefaultsUseCase", "SeedDefaultsResult"]
