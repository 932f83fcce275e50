"""Domain policies package."""

from .taxonomy import ensure_entry_deletable

__all__ = ["ensure_entry_deletable"]
