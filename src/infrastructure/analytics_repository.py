"""SQLAlchemy-backed repository for aggregation inputs."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import text

from src.application.ports.analytics_repository import AnalyticsRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.domain.models import TransactionReportRow
from src.infrastructure.store_errors import translate_store_errors
from src.utils.decimal_utils import from_cents
from src.utils.time_utils import from_storage_instant, to_storage_instant


REPORT_ROWS_SQL = text(
    """
    SELECT
        t.type AS transaction_type,
        t.amount_cents AS amount_cents,
        t.transaction_date AS transaction_date,
        c.label AS category_label,
        c.kind AS category_kind
    FROM transactions t
    LEFT JOIN transaction_categories c ON c.id = t.category_id
    WHERE t.user_id = :owner_id
      AND t.transaction_date >= :start
      AND t.transaction_date < :end
    ORDER BY t.transaction_date DESC, t.id
    """
)

ACCOUNT_EFFECTS_SQL = text(
    """
    SELECT account_id, type, amount_cents
    FROM transactions
    WHERE user_id = :owner_id
    ORDER BY account_id, transaction_date, id
    """
)


class SqlAlchemyAnalyticsRepository(AnalyticsRepositoryPort):
    """Repository backed by SQLAlchemy for read-side projections."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def fetch_report_rows(
        self,
        owner_id: str,
        start: datetime,
        end: datetime,
    ) -> list[TransactionReportRow]:
        """Return transactions in [start, end) joined with their category.

        Args:
            owner_id: Owner whose transactions are read.
            start: Inclusive lower bound.
            end: Exclusive upper bound.

        Returns:
            list[TransactionReportRow]: Rows newest first.
        """
        params = {
            "owner_id": owner_id,
            "start": to_storage_instant(start),
            "end": to_storage_instant(end),
        }
        engine = self._db_port.get_ledger_engine()
        with translate_store_errors("reading report rows"):
            with engine.connect() as conn:
                rows = conn.execute(REPORT_ROWS_SQL, params).all()
        return [
            TransactionReportRow(
                transaction_type=row.transaction_type,
                amount=from_cents(row.amount_cents),
                transaction_date=from_storage_instant(row.transaction_date),
                category_label=row.category_label,
                category_kind=row.category_kind,
            )
            for row in rows
        ]

    def fetch_account_effects(
        self,
        owner_id: str,
    ) -> list[tuple[str, str, Decimal]]:
        engine = self._db_port.get_ledger_engine()
        with translate_store_errors("reading account effects"):
            with engine.connect() as conn:
                rows = conn.execute(
                    ACCOUNT_EFFECTS_SQL, {"owner_id": owner_id}
                ).all()
        return [
            (row.account_id, row.type, from_cents(row.amount_cents))
            for row in rows
        ]


__all__ = ["SqlAlchemyAnalyticsRepository"]
