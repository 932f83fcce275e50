"""Use case for account types, debt types and transaction categories."""

from datetime import datetime
from typing import Callable

from src.application.ports.taxonomy_repository import TaxonomyRepositoryPort
from src.domain.constants import ASSET_CATEGORIES, CATEGORY_KINDS, TAXONOMIES
from src.domain.errors import NotFoundError, ValidationError
from src.domain.models import TaxonomyEntry
from src.domain.policies import ensure_entry_deletable
from src.domain.services import require_choice, require_text
from src.infrastructure.logging.logger import get_app_logger
from src.utils.time_utils import utc_now
from src.utils.utils import generate_id

_GROUP_CHOICES = {
    "account_type": ("category", ASSET_CATEGORIES),
    "transaction_category": ("kind", CATEGORY_KINDS),
}


class ManageTaxonomiesUseCase:
    """List, create, relabel and delete taxonomy entries.

    System entries are seeded for every owner and are read-only. Entries
    still referenced by an account, debt or transaction cannot be deleted.
    """

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

    def list_entries(self, taxonomy: str, owner_id: str) -> list[TaxonomyEntry]:
        require_choice(taxonomy, TAXONOMIES, "taxonomy")
        return self._taxonomy_repository.fetch_entries(taxonomy, owner_id)

    def create(
        self,
        taxonomy: str,
        owner_id: str,
        label: str,
        group: str | None = None,
        icon: str | None = None,
    ) -> TaxonomyEntry:
        """Create a user-defined entry.

        Args:
            taxonomy: account_type, debt_type or transaction_category.
            owner_id: Owner of the entry.
            label: Display label.
            group: Asset category for account types, kind for transaction
                categories; ignored for debt types.
            icon: Optional icon for account and debt types.

        Returns:
            TaxonomyEntry: The persisted entry.
        """
        require_choice(taxonomy, TAXONOMIES, "taxonomy")
        label = require_text(label, "label")
        if taxonomy in _GROUP_CHOICES:
            field, choices = _GROUP_CHOICES[taxonomy]
            group = require_choice(group, choices, field)
        else:
            group = None
        if taxonomy == "transaction_category":
            icon = None
        now = self._clock()
        entry = TaxonomyEntry(
            id=self._id_factory(),
            owner_id=owner_id,
            taxonomy=taxonomy,
            label=label,
            is_system=False,
            created_at=now,
            updated_at=now,
            group=group,
            icon=icon,
        )
        self._taxonomy_repository.insert_entries([entry])
        self._logger.info(f"Created {taxonomy} '{label}' for owner={owner_id}")
        return entry

    def update(
        self,
        taxonomy: str,
        owner_id: str,
        entry_id: str,
        label: str | None = None,
        icon: str | None = None,
    ) -> TaxonomyEntry:
        """Relabel a user-defined entry or change its icon."""
        existing = self._require_entry(taxonomy, owner_id, entry_id)
        if existing.is_system:
            raise ValidationError(
                f"System {taxonomy} '{existing.label}' cannot be edited"
            )
        fields: dict[str, object] = {}
        if label is not None:
            fields["label"] = require_text(label, "label")
        if icon is not None and taxonomy != "transaction_category":
            fields["icon"] = icon
        if not fields:
            return existing
        updated = self._taxonomy_repository.update_entry(
            taxonomy,
            owner_id,
            entry_id,
            fields,
            self._clock(),
        )
        if updated is None:
            raise NotFoundError(f"{taxonomy} not found: {entry_id}")
        return updated

    def delete(self, taxonomy: str, owner_id: str, entry_id: str) -> TaxonomyEntry:
        """Delete an unused user-defined entry.

        Raises:
            NotFoundError: If the entry is not the owner's.
            ValidationError: If the entry is a system entry or in use.
        """
        existing = self._require_entry(taxonomy, owner_id, entry_id)
        usage = self._taxonomy_repository.count_usages(taxonomy, owner_id, entry_id)
        ensure_entry_deletable(existing, usage)
        deleted = self._taxonomy_repository.delete_entry(
            taxonomy,
            owner_id,
            entry_id,
        )
        if deleted is None:
            raise NotFoundError(f"{taxonomy} not found: {entry_id}")
        self._logger.info(f"Deleted {taxonomy} '{deleted.label}'")
        return deleted

    def _require_entry(
        self,
        taxonomy: str,
        owner_id: str,
        entry_id: str,
    ) -> TaxonomyEntry:
        require_choice(taxonomy, TAXONOMIES, "taxonomy")
        entry = self._taxonomy_repository.fetch_entry(taxonomy, owner_id, entry_id)
        if entry is None:
            raise NotFoundError(f"{taxonomy} not found: {entry_id}")
        return entry


__all__ = ["ManageTaxonomiesUseCase"]
