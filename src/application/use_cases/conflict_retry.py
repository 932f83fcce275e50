"""Bounded retry of atomic ledger units on write conflicts."""

from typing import Callable, TypeVar

from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from src.domain.errors import ConflictError

T = TypeVar("T")

DEFAULT_RETRY_ATTEMPTS = 3
DEFAULT_RETRY_MAX_WAIT = 0.5


def run_with_conflict_retry(
    operation: Callable[[], T],
    logger,
    action: str,
    attempts: int = DEFAULT_RETRY_ATTEMPTS,
    max_wait: float = DEFAULT_RETRY_MAX_WAIT,
) -> T:
    """Run an atomic unit, retrying it from scratch on ConflictError.

    ``operation`` must open its own atomic unit so that each attempt starts
    from a fresh read. Other errors propagate on the first attempt.

    Args:
        operation: Callable performing one complete atomic unit.
        logger: Logger used to report retries.
        action: Short label used in log messages.
        attempts: Maximum number of attempts, including the first.
        max_wait: Upper bound in seconds of the backoff between attempts.

    Returns:
        T: Whatever the operation returns.

    Raises:
        ConflictError: If every attempt lost a write race.
    """

    def _log_retry(retry_state: RetryCallState) -> None:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        logger.warning(
            f"Conflict during {action} "
            f"(attempt {retry_state.attempt_number}/{attempts}): {error}"
        )

    retrying = Retrying(
        stop=stop_after_attempt(max(1, attempts)),
        wait=wait_exponential(multiplier=0.05, max=max_wait),
        retry=retry_if_exception_type(ConflictError),
        before_sleep=_log_retry,
        reraise=True,
    )
    return retrying(operation)


__all__ = [
    "DEFAULT_RETRY_ATTEMPTS",
    "DEFAULT_RETRY_MAX_WAIT",
    "run_with_conflict_retry",
]
