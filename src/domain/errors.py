"""Error taxonomy for ledger operations."""


class LedgerError(Exception):
    """Base class for every error raised by the ledger core."""


class ValidationError(LedgerError):
    """Malformed or out-of-range input; never retried."""


class NotFoundError(LedgerError):
    """Referenced row is missing or owned by someone else."""


class ConflictError(LedgerError):
    """A concurrent write won the race; the atomic unit may be retried."""


class StoreError(LedgerError):
    """Persistence failure unrelated to business rules."""


__all__ = [
    "LedgerError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "StoreError",
]
