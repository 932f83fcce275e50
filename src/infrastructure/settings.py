"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from typing import Optional

import dotenv

from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for the ledger runtime.

    Attributes:
        conflict_retry_attempts: Attempts per atomic unit before a
            ConflictError reaches the caller.
        conflict_retry_max_wait: Upper bound (seconds) of the exponential
            backoff between attempts.
        owner_id: Optional default owner for the dashboard and CLIs.
    """

    conflict_retry_attempts: int = 3
    conflict_retry_max_wait: float = 0.5
    owner_id: Optional[str] = None

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        attempts = cls._read_int(
            "LEDGER_CONFLICT_RETRIES",
            cls.conflict_retry_attempts,
            logger=logger,
        )
        max_wait = cls._read_float(
            "LEDGER_CONFLICT_BACKOFF",
            cls.conflict_retry_max_wait,
            logger=logger,
        )
        owner_id = (os.getenv("LEDGER_OWNER_ID") or "").strip() or None
        return cls(
            conflict_retry_attempts=attempts,
            conflict_retry_max_wait=max_wait,
            owner_id=owner_id,
        )

    @staticmethod
    def _read_int(name: str, default: int, logger) -> int:
        raw = os.getenv(name)
        if not raw:
            return default
        try:
            value = int(raw)
        except ValueError:
            logger.warning(f"Invalid integer for {name}: {raw!r}")
            return default
        if value < 1:
            logger.warning(f"{name} must be at least 1, got {value}")
            return default
        return value

    @staticmethod
    def _read_float(name: str, default: float, logger) -> float:
        raw = os.getenv(name)
        if not raw:
            return default
        try:
            value = float(raw)
        except ValueError:
            logger.warning(f"Invalid number for {name}: {raw!r}")
            return default
        if value < 0:
            logger.warning(f"{name} must not be negative, got {value}")
            return default
        return value


__all__ = ["LedgerSettings"]
