"""Port for read-side projections."""

from datetime import datetime
from decimal import Decimal
from typing import Protocol

from src.domain.models import TransactionReportRow


class AnalyticsRepositoryPort(Protocol):
    """Port exposing the rows needed by aggregation use cases."""

    def fetch_report_rows(
        self,
        owner_id: str,
        start: datetime,
        end: datetime,
    ) -> list[TransactionReportRow]:
        """Return transactions in [start, end) with category data, newest first."""

    def fetch_account_effects(
        self,
        owner_id: str,
    ) -> list[tuple[str, str, Decimal]]:
        """Return (account_id, type, amount) for every live transaction."""


__all__ = ["AnalyticsRepositoryPort"]
