"""Rules guarding taxonomy deletion."""

from src.domain.errors import ValidationError
from src.domain.models import TaxonomyEntry


def ensure_entry_deletable(entry: TaxonomyEntry, usage_count: int) -> None:
    """Raise when a taxonomy entry must be kept.

    Args:
        entry: Entry the caller wants to delete.
        usage_count: Number of accounts, debts or transactions using it.

    Raises:
        ValidationError: If the entry is a system entry or still in use.
    """
    if entry.is_system:
        raise ValidationError(
            f"System {entry.taxonomy} '{entry.label}' cannot be deleted"
        )
    if usage_count > 0:
        raise ValidationError(
            f"{entry.taxonomy} '{entry.label}' is used by "
            f"{usage_count} record(s) and cannot be deleted"
        )


__all__ = ["ensure_entry_deletable"]
