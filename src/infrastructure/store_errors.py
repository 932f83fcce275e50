"""Translation of driver errors into the ledger error taxonomy."""

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import DBAPIError, SQLAlchemyError

from src.domain.errors import ConflictError, StoreError

# serialization_failure, deadlock_detected
_RETRYABLE_SQLSTATES = {"40001", "40P01"}


def is_contention_error(exc: SQLAlchemyError) -> bool:
    """Return True when the failure is caused by a competing writer.

    Args:
        exc: Error raised by SQLAlchemy.

    Returns:
        bool: True for serialization failures, deadlocks and SQLite lock
        timeouts.
    """
    if not isinstance(exc, DBAPIError):
        return False
    orig = exc.orig
    sqlstate = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if sqlstate in _RETRYABLE_SQLSTATES:
        return True
    return "database is locked" in str(orig).lower()


@contextmanager
def translate_store_errors(action: str) -> Iterator[None]:
    """Re-raise SQLAlchemy failures as ConflictError or StoreError.

    Args:
        action: Short description used in the error message.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        if is_contention_error(exc):
            raise ConflictError(f"Concurrent write while {action}") from exc
        raise StoreError(f"Store failure while {action}: {exc}") from exc


__all__ = ["is_contention_error", "translate_store_errors"]
